"""Hierarchical navigation state.

Each ``Router`` node owns a push stack and three presentation slots
(alert, sheet, full-screen cover). Nodes form a tree: the root (level 0)
owns tab selection, children are created by the scopes that present
them and keep a weak link to their parent.

Usage::

    root = Router(AppDestination)
    home = root.child_router(Tabs.HOME)
    home.push(Detail(id=1))
    home.present_sheet(Compose())
    home.select_tab(Tabs.SETTINGS)   # root.selected_tab == SETTINGS, home reset

Threading:
    Routers are confined to the UI thread. No operation takes a lock.
"""

import logging
import uuid
import weakref
from typing import TYPE_CHECKING, Any

from navkit._internal.types import URLOpener
from navkit.destination import (
    Alert,
    Destination,
    External,
    FullScreen,
    Push,
    Sheet,
    Tab,
)
from navkit.kinds import NavigationDestination

if TYPE_CHECKING:
    from navkit.routing.matcher import DeeplinkParser

logger = logging.getLogger("navkit.router")


class Router:
    """One node of navigation state.

    Cross-node writes are limited to two cases: ``select_tab`` forwarding
    up the parent chain and ``set_active`` resigning the parent. Every
    other mutation stays on the node that received the call.
    """

    __slots__ = (
        "__weakref__",
        "_parent",
        "destinations",
        "id",
        "identifier_tab",
        "is_active",
        "level",
        "presenting_alert",
        "presenting_full_screen",
        "presenting_sheet",
        "selected_tab",
        "stack",
        "url_opener",
    )

    def __init__(
        self,
        destinations: type[NavigationDestination] = NavigationDestination,
        *,
        level: int = 0,
        identifier_tab: Any | None = None,
        url_opener: URLOpener | None = None,
    ) -> None:
        self.destinations = destinations
        self.id: uuid.UUID = uuid.uuid4()
        self.level = level
        self.identifier_tab = identifier_tab
        self.url_opener = url_opener

        # Tab selection is authoritative only at level 0
        self.selected_tab: Any | None = None

        self.presenting_alert: Any | None = None
        self.presenting_sheet: Any | None = None
        self.presenting_full_screen: Any | None = None
        self.stack: list[Any] = []

        self._parent: weakref.ref[Router] | None = None
        self.is_active = False

    @classmethod
    def preview(
        cls, destinations: type[NavigationDestination] = NavigationDestination
    ) -> "Router":
        """A detached root router, for previews and tests."""
        return cls(destinations, level=0)

    # -- Hierarchy --

    @property
    def parent(self) -> "Router | None":
        """The parent node, or ``None`` at the root or once the parent is gone."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self.level == 0

    def child_router(self, tab: Any | None = None) -> "Router":
        """Create a child node one level down.

        The child inherits this node's tab identity unless *tab* is given.
        The caller (the presenting scope) owns the child; the child only
        keeps a weak reference back here.
        """
        child = Router(
            self.destinations,
            level=self.level + 1,
            identifier_tab=tab if tab is not None else self.identifier_tab,
            url_opener=self.url_opener,
        )
        child._parent = weakref.ref(self)
        return child

    def set_active(self) -> None:
        """Mark this node active and resign the parent."""
        parent = self.parent
        if parent is not None:
            parent.resign_active()
        self.is_active = True

    def resign_active(self) -> None:
        self.is_active = False

    # -- Navigation --

    def navigate(self, destination: Destination) -> None:
        """Apply *destination* to this node."""
        match destination:
            case Tab(tab=tab):
                self.select_tab(tab)
            case Push(page=page):
                self.push(page)
            case External(url=url):
                self._open_external(url)
            case Alert(alert=alert):
                self.present_alert(alert)
            case Sheet(sheet=sheet):
                self.present_sheet(sheet)
            case FullScreen(full_screen=full_screen):
                self.present_full_screen(full_screen)

    def select_tab(self, tab: Any) -> None:
        """Select *tab* on the root.

        Non-root nodes forward the request upward and then clear their
        own stack and presentation slots. Intermediate ancestors are
        not reset.
        """
        if self.level == 0:
            self.selected_tab = tab
            return

        parent = self.parent
        if parent is not None:
            parent._forward_tab(tab)
        self.reset_content()

    def _forward_tab(self, tab: Any) -> None:
        if self.level == 0:
            self.selected_tab = tab
            return
        parent = self.parent
        if parent is not None:
            parent._forward_tab(tab)

    def push(self, page: Any) -> None:
        self.stack.append(page)

    def pop(self) -> None:
        """Remove the top page. Popping an empty stack does nothing."""
        if self.stack:
            self.stack.pop()

    def pop_to_root(self) -> None:
        self.stack.clear()

    def present_alert(self, alert: Any) -> None:
        self.presenting_alert = alert

    def present_sheet(self, sheet: Any) -> None:
        self.presenting_sheet = sheet

    def present_full_screen(self, full_screen: Any) -> None:
        self.presenting_full_screen = full_screen

    def dismiss_alert(self) -> None:
        self.presenting_alert = None

    def dismiss_sheet(self) -> None:
        self.presenting_sheet = None

    def dismiss_full_screen(self) -> None:
        self.presenting_full_screen = None

    @property
    def is_presenting(self) -> bool:
        """Whether any presentation slot is occupied."""
        return (
            self.presenting_alert is not None
            or self.presenting_sheet is not None
            or self.presenting_full_screen is not None
        )

    def reset_content(self) -> None:
        """Clear the stack and every presentation slot."""
        self.presenting_alert = None
        self.presenting_sheet = None
        self.presenting_full_screen = None
        self.stack = []

    def _open_external(self, url: str) -> None:
        if self.url_opener is None:
            logger.debug("No URL opener configured; dropping external URL %r", url)
            return
        self.url_opener(url)

    # -- Deeplinks --

    def handle_deeplink(self, deeplink: Any, *, dismiss_first: bool = False) -> bool:
        """Dispatch a matched deeplink on this node.

        Only the root accepts deeplinks. A deeplink whose destination is
        not one of this hierarchy's kinds is dropped. Returns ``True``
        when a navigation was applied.
        """
        if self.level != 0:
            logger.debug("%r ignoring deeplink %r: not a root router", self, deeplink)
            return False

        if dismiss_first:
            self.reset_content()

        destination = getattr(deeplink, "destination", None)
        if not self.destinations.accepts(destination):
            logger.debug(
                "%r ignoring deeplink %r: destination %r is not a %s destination",
                self,
                deeplink,
                destination,
                self.destinations.__name__,
            )
            return False

        self.navigate(destination)
        return True

    def handle_url(self, url: str, parser: "DeeplinkParser[Any]") -> bool:
        """Match *url* and dispatch the result.

        Returns ``True`` iff a route matched and a navigation was applied.
        """
        if self.level != 0:
            logger.debug("%r ignoring URL %r: not a root router", self, url)
            return False
        deeplink = parser.parse(url)
        if deeplink is None:
            return False
        return self.handle_deeplink(
            deeplink, dismiss_first=parser.config.dismiss_before_navigating
        )

    def __repr__(self) -> str:
        short_id = str(self.id).split("-", 1)[0]
        if self.identifier_tab is None:
            tab_name = "No Tab"
        else:
            tab_name = str(getattr(self.identifier_tab, "value", self.identifier_tab))
        return f"Router[{short_id} - {tab_name} - Level: {self.level}]"
