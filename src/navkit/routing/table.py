"""Ordered route tables and the builder that declares them.

Declaration order is match priority. The builder flattens groups,
loops and conditional branches while keeping that order::

    builder = RouteBuilder[Deeplinks]()

    @builder.route("page/{id:int}")
    def page(id: int) -> Deeplinks:
        return Page(id=id)

    builder.add(Route("settings", factory=lambda: SETTINGS))
    builder.when(FEATURE_BETA, Route("beta", factory=lambda: BETA))
    table = builder.build()
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, TypeAlias

from navkit._internal.types import Factory
from navkit.routing.route import Route, RouteMatch


class RouteTable[D]:
    """An immutable, ordered sequence of routes.

    No index or trie: a lookup scans routes in order and the first
    structural match wins.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Iterable[Route[D]] = ()) -> None:
        self._routes: tuple[Route[D], ...] = tuple(routes)

    @property
    def routes(self) -> tuple[Route[D], ...]:
        return self._routes

    def __iter__(self) -> Iterator[Route[D]]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({[route.path for route in self._routes]!r})"

    def match(self, tokens: Sequence[str]) -> RouteMatch[D] | None:
        """Return the first route match for *tokens*, or ``None``."""
        for route in self._routes:
            result = route.match(tokens)
            if result is not None:
                return result
        return None


# Anything the builder can flatten into routes; None is skipped
RouteSource: TypeAlias = Route[Any] | RouteTable[Any] | Iterable[Any] | None


class RouteBuilder[D]:
    """Collects routes in declaration order and builds a RouteTable."""

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route[D]] = []

    def add(self, *sources: RouteSource) -> "RouteBuilder[D]":
        """Append routes, flattening tables and nested iterables.

        ``None`` entries are skipped, so an optional route can be passed
        as ``route if enabled else None``.
        """
        for source in sources:
            self._flatten(source)
        return self

    def when(
        self,
        condition: bool,
        *routes: RouteSource,
        otherwise: RouteSource = None,
    ) -> "RouteBuilder[D]":
        """Append *routes* if *condition* holds, else *otherwise*."""
        if condition:
            return self.add(*routes)
        return self.add(otherwise)

    def route(self, path: str) -> Callable[[Factory], Factory]:
        """Register a factory for a path pattern via decorator.

        The decorated function is returned unchanged.
        """

        def decorator(func: Factory) -> Factory:
            self._routes.append(Route.from_path(path, func))
            return func

        return decorator

    def build(self) -> RouteTable[D]:
        return RouteTable(self._routes)

    def _flatten(self, source: RouteSource) -> None:
        if source is None:
            return
        if isinstance(source, Route):
            self._routes.append(source)
            return
        if isinstance(source, str):
            msg = f"Expected a Route, got the string {source!r}; use Route.from_path()."
            raise TypeError(msg)
        for item in source:
            self._flatten(item)


def routes[D](*sources: RouteSource) -> RouteTable[D]:
    """Build a RouteTable from routes, tables and iterables in order."""
    return RouteBuilder[D]().add(*sources).build()
