"""Lifecycle glue between presenting UI scopes and router nodes.

A UI scope (a tab container, a sheet, a full-screen cover) owns exactly
one router node for as long as it is on screen. ``NavigationScope``
wires the scope's appear/disappear events to ``set_active`` and
``resign_active``::

    root = NavigationScope.root(AppDestination)
    with root:
        with root.child(Tabs.HOME) as home:
            home.router.push(Detail(id=1))
            home.router.present_sheet(Compose())
            with home.present_sheet_scope() as sheet:
                ...

``NavigationButton`` is the tappable counterpart: it carries an optional
destination and applies it to a router when pressed.
"""

from dataclasses import dataclass
from types import TracebackType
from typing import Any

from navkit._internal.types import URLOpener
from navkit.destination import Alert, Destination, FullScreen, Push, Sheet
from navkit.kinds import NavigationDestination
from navkit.router import Router
from navkit.routing.matcher import DeeplinkParser


class NavigationScope:
    """Owns a router node for the lifetime of one presenting scope."""

    __slots__ = ("router",)

    def __init__(self, parent_router: Router, tab: Any | None = None) -> None:
        self.router: Router = parent_router.child_router(tab)

    @classmethod
    def root(
        cls,
        destinations: type[NavigationDestination] = NavigationDestination,
        *,
        url_opener: URLOpener | None = None,
    ) -> "NavigationScope":
        """A scope owning a level-0 router, for the app's outermost container."""
        scope = cls.__new__(cls)
        scope.router = Router(destinations, url_opener=url_opener)
        return scope

    def child(self, tab: Any | None = None) -> "NavigationScope":
        """A nested scope whose router is a child of this one."""
        return NavigationScope(self.router, tab)

    def appear(self) -> None:
        self.router.set_active()

    def disappear(self) -> None:
        self.router.resign_active()

    def __enter__(self) -> "NavigationScope":
        self.appear()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disappear()

    def open_url(self, url: str, parser: DeeplinkParser[Any]) -> bool:
        """Forward a platform URL-open event to this scope's router.

        Only a root scope dispatches; nested scopes return ``False``.
        """
        return self.router.handle_url(url, parser)

    def present_sheet_scope(self) -> "NavigationScope | None":
        """A scope for the presented sheet, or ``None`` if none is presented."""
        if self.router.presenting_sheet is None:
            return None
        return NavigationScope(self.router)

    def present_full_screen_scope(self) -> "NavigationScope | None":
        """A scope for the presented full-screen cover, or ``None``."""
        if self.router.presenting_full_screen is None:
            return None
        return NavigationScope(self.router)


@dataclass(frozen=True, slots=True)
class NavigationButton:
    """A control that navigates to its destination when pressed.

    A button without a destination is disabled and pressing it does
    nothing.
    """

    destination: Destination | None = None

    @classmethod
    def push(cls, page: Any | None) -> "NavigationButton":
        return cls(None if page is None else Push(page))

    @classmethod
    def alert(cls, alert: Any | None) -> "NavigationButton":
        return cls(None if alert is None else Alert(alert))

    @classmethod
    def sheet(cls, sheet: Any | None) -> "NavigationButton":
        return cls(None if sheet is None else Sheet(sheet))

    @classmethod
    def full_screen(cls, full_screen: Any | None) -> "NavigationButton":
        return cls(None if full_screen is None else FullScreen(full_screen))

    @property
    def disabled(self) -> bool:
        return self.destination is None

    def press(self, router: Router) -> bool:
        """Navigate *router* to the destination. Returns ``False`` when disabled."""
        if self.destination is None:
            return False
        router.navigate(self.destination)
        return True
