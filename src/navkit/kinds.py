"""Capability kinds an application plugs into the router.

An app describes its navigation by subclassing ``NavigationDestination``
and naming one type per capability::

    class Tabs(StrEnum):
        HOME = "home"
        SETTINGS = "settings"

    class AppDestination(NavigationDestination):
        tabs = Tabs
        pages = AppPage
        sheets = AppSheet
        deeplinks = Deeplinks

Capabilities left unset default to uninhabited placeholders. Those
types have no values; constructing one raises ``UninhabitedError``.
"""

from collections.abc import Hashable
from enum import Enum
from typing import Any, ClassVar, Protocol, runtime_checkable

from navkit.destination import (
    Alert,
    Destination,
    External,
    FullScreen,
    Push,
    Sheet,
    Tab,
)
from navkit.errors import UninhabitedError
from navkit.routing.table import RouteTable

# -- Capability protocols --


@runtime_checkable
class TabRepresentable(Protocol):
    """A tab: a member of a finite ``str``-valued enum."""

    @property
    def value(self) -> str: ...


@runtime_checkable
class PageRepresentable(Hashable, Protocol):
    """A page pushed onto a router's stack."""


@runtime_checkable
class SheetRepresentable(Protocol):
    """A sheet with a stable identity and presentation hints."""

    @property
    def id(self) -> Hashable: ...

    @property
    def detents(self) -> tuple[str, ...]: ...

    @property
    def title_display_mode(self) -> str: ...


@runtime_checkable
class FullScreenRepresentable(Protocol):
    """A full-screen cover with a stable identity."""

    @property
    def id(self) -> Hashable: ...


@runtime_checkable
class AlertRepresentable(Protocol):
    """An alert with a stable identity, a title and an optional message."""

    @property
    def id(self) -> Hashable: ...

    @property
    def title(self) -> str: ...

    @property
    def message(self) -> str | None: ...


@runtime_checkable
class DeeplinkRepresentable(Protocol):
    """A deeplink type: a URL scheme, a route table and a destination."""

    scheme: ClassVar[str]

    @classmethod
    def routes(cls) -> RouteTable[Any]: ...

    @property
    def destination(self) -> Destination: ...


class SheetDefaults:
    """Mixin providing the default sheet presentation hints."""

    __slots__ = ()

    @property
    def detents(self) -> tuple[str, ...]:
        return ("medium", "large")

    @property
    def title_display_mode(self) -> str:
        return "inline"


# -- Uninhabited placeholders --


class Uninhabited:
    """Base for kinds with no values."""

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Uninhabited":
        raise UninhabitedError(cls)


class NoTabs(Uninhabited):
    """Placeholder for apps without tabs."""

    __slots__ = ()


class NoPages(Uninhabited):
    """Placeholder for apps without push navigation."""

    __slots__ = ()


class NoSheets(Uninhabited):
    """Placeholder for apps without sheets."""

    __slots__ = ()


class NoFullScreen(Uninhabited):
    """Placeholder for apps without full-screen covers."""

    __slots__ = ()


class NoAlerts(Uninhabited):
    """Placeholder for apps without alerts."""

    __slots__ = ()


class NoDeeplinks(Uninhabited):
    """Placeholder for apps without deeplinks.

    Its route table is empty, so it never matches a URL.
    """

    __slots__ = ()

    scheme: ClassVar[str] = "app"

    @classmethod
    def routes(cls) -> RouteTable[Any]:
        return RouteTable()

    @property
    def destination(self) -> Destination:
        raise UninhabitedError(type(self))


# -- Navigation declaration --

KindSpec = type | tuple[type, ...]


class NavigationDestination:
    """Declares the concrete kinds one router hierarchy navigates between."""

    tabs: ClassVar[KindSpec] = NoTabs
    pages: ClassVar[KindSpec] = NoPages
    sheets: ClassVar[KindSpec] = NoSheets
    full_screen: ClassVar[KindSpec] = NoFullScreen
    alerts: ClassVar[KindSpec] = NoAlerts
    deeplinks: ClassVar[type] = NoDeeplinks

    @classmethod
    def accepts(cls, destination: object) -> bool:
        """Whether *destination* carries a value of this hierarchy's kinds."""
        match destination:
            case External(url=url):
                return isinstance(url, str)
            case Tab(tab=tab):
                return isinstance(tab, cls.tabs)
            case Push(page=page):
                return isinstance(page, cls.pages)
            case Alert(alert=alert):
                return isinstance(alert, cls.alerts)
            case Sheet(sheet=sheet):
                return isinstance(sheet, cls.sheets)
            case FullScreen(full_screen=full_screen):
                return isinstance(full_screen, cls.full_screen)
            case _:
                return False

    @classmethod
    def tab_names(cls) -> list[str]:
        """String identities of every tab, in declaration order."""
        if isinstance(cls.tabs, type) and issubclass(cls.tabs, Enum):
            return [str(member.value) for member in cls.tabs]
        return []
