"""PathSegment, Route and RouteMatch.

A route pairs an ordered tuple of segments with a factory. Matching is
positional: a route with N segments only ever sees URLs with N tokens,
and the factory receives the captured values in declared order.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from navkit._internal.types import Factory
from navkit.errors import ConfigurationError
from navkit.routing.params import ParameterCodec, get_codec

logger = logging.getLogger("navkit.routing")

# Factories take zero to three positional parameters
MAX_PARAMS = 3


@dataclass(frozen=True, slots=True)
class SegmentMatch:
    """Outcome of a successful segment comparison.

    Literal matches carry no name. Parameter matches carry the declared
    name and the parsed value.
    """

    name: str | None = None
    value: Any = None

    @property
    def is_capture(self) -> bool:
        return self.name is not None


LITERAL_MATCH = SegmentMatch()


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One matching unit of a route.

    Literal:  ``settings``      (is_param=False)
    Param:    ``{id:int}``      (is_param=True, param_name="id", codec=int codec)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    codec: ParameterCodec[Any] | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.is_param and (self.codec is None or not self.param_name):
            msg = f"Parameter segment {self.value!r} needs both a name and a codec."
            raise ConfigurationError(msg)

    def match(self, token: str) -> SegmentMatch | None:
        """Compare *token* against this segment.

        Literals compare with exact, case-sensitive equality. Parameters
        delegate to the codec; a malformed token is a plain no-match.
        """
        if not self.is_param:
            return LITERAL_MATCH if token == self.value else None
        parsed = self.codec.parse(token)
        if parsed is None:
            return None
        return SegmentMatch(self.param_name, parsed)


def literal(text: str) -> PathSegment:
    """Create a literal segment."""
    if not text or "/" in text:
        msg = f"Literal segments must be non-empty and contain no '/': {text!r}"
        raise ConfigurationError(msg)
    return PathSegment(value=text)


def param(name: str, codec: str | type | ParameterCodec[Any] = "str") -> PathSegment:
    """Create a parameter segment capturing *name* with the given codec.

    *codec* may be a registered name (``"int"``), a Python type (``int``)
    or a codec instance.
    """
    resolved = get_codec(codec)
    return PathSegment(
        value=f"{{{name}:{resolved.name}}}",
        is_param=True,
        param_name=name,
        codec=resolved,
    )


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    Examples::

        "settings"             -> [literal("settings")]
        "page/{id:int}"        -> [literal("page"), param("id", "int")]
        "user/{name}"          -> [literal("user"), param("name", "str")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route {path!r} uses <param> syntax. "
                f"Use {{param}} or {{param:type}} instead."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if not param_name:
                msg = f"Route {path!r} has a parameter without a name."
                raise ConfigurationError(msg)
            segments.append(param(param_name, param_type))
        else:
            segments.append(PathSegment(value=part))
    return segments


@dataclass(frozen=True, slots=True)
class RouteMatch[D]:
    """Result of a successful route match.

    ``values`` holds the captured parameters in declared order.
    ``params`` is a by-name view; when a route reuses a parameter name
    the later capture wins there, while ``values`` keeps both.
    """

    route: "Route[D]"
    values: tuple[Any, ...]
    params: dict[str, Any]
    deeplink: D


class Route[D]:
    """A route definition producing a deeplink value.

    Usage::

        Route("settings", factory=lambda: Deeplinks.SETTINGS)
        Route("page", param("id", int), factory=lambda id: Page(id=id))
        Route.from_path("page/{id:int}", lambda id: Page(id=id))

    Plain strings passed as segments are literals.
    """

    __slots__ = ("factory", "segments")

    def __init__(self, *segments: PathSegment | str, factory: Factory) -> None:
        self.segments: tuple[PathSegment, ...] = tuple(
            seg if isinstance(seg, PathSegment) else literal(seg) for seg in segments
        )
        self.factory = factory

        arity = sum(1 for seg in self.segments if seg.is_param)
        if arity > MAX_PARAMS:
            msg = (
                f"Route {self.path!r} declares {arity} parameters; "
                f"routes support at most {MAX_PARAMS}."
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_path(cls, path: str, factory: Factory) -> "Route[D]":
        """Build a route from a ``"page/{id:int}"`` style pattern."""
        return cls(*parse_path(path), factory=factory)

    @property
    def path(self) -> str:
        """The route pattern, e.g. ``page/{id:int}``."""
        return "/".join(seg.value for seg in self.segments)

    @property
    def arity(self) -> int:
        """Number of parameter segments."""
        return sum(1 for seg in self.segments if seg.is_param)

    def match(self, tokens: Sequence[str]) -> RouteMatch[D] | None:
        """Match URL tokens against this route.

        Returns ``None`` when the token count differs, a segment does not
        match, or the factory rejects the captured values.
        """
        if len(tokens) != len(self.segments):
            return None

        values: list[Any] = []
        params: dict[str, Any] = {}
        for segment, token in zip(self.segments, tokens, strict=True):
            result = segment.match(token)
            if result is None:
                return None
            if result.is_capture:
                values.append(result.value)
                params[result.name] = result.value

        try:
            deeplink = self.factory(*values)
        except (TypeError, ValueError) as exc:
            logger.debug("Route %r rejected captured values %r: %s", self.path, values, exc)
            return None

        if deeplink is None:
            return None
        return RouteMatch(route=self, values=tuple(values), params=params, deeplink=deeplink)

    def __repr__(self) -> str:
        name = getattr(self.factory, "__name__", type(self.factory).__name__)
        return f"Route({self.path!r}, factory={name})"
