"""Shop: a tabbed app with deeplinks.

Demonstrates a NavigationDestination declaration, typed routes,
nested scopes and URL dispatch with dismiss-before-navigating.

Run:
    python app.py app://product/42
"""

import logging
import sys
import webbrowser
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from navkit import (
    DeeplinkConfig,
    DeeplinkParser,
    Destination,
    External,
    NavigationDestination,
    NavigationScope,
    Push,
    RouteBuilder,
    RouteTable,
    Sheet,
    SheetDefaults,
    Tab,
)


class Tabs(StrEnum):
    CATALOG = "catalog"
    CART = "cart"
    ACCOUNT = "account"


@dataclass(frozen=True)
class Product:
    id: int


@dataclass(frozen=True)
class Order:
    number: int
    confirmed: bool


@dataclass(frozen=True)
class Checkout(SheetDefaults):
    @property
    def id(self) -> str:
        return "checkout"


# -- Deeplinks --

builder = RouteBuilder[Destination]()


@builder.route("product/{id:int}")
def product(id: int) -> Destination:
    return Push(Product(id))


@builder.route("orders/{number:int}/{confirmed:bool}")
def order(number: int, confirmed: bool) -> Destination:
    return Push(Order(number, confirmed))


@builder.route("tab/{name}")
def tab(name: str) -> Destination | None:
    try:
        return Tab(Tabs(name))
    except ValueError:
        return None


@builder.route("checkout")
def checkout() -> Destination:
    return Sheet(Checkout())


@builder.route("help")
def help_page() -> Destination:
    return External("https://example.com/help")


@dataclass(frozen=True)
class Link:
    """A matched shop deeplink wrapping its destination."""

    destination: Destination


class Deeplinks:
    scheme: ClassVar[str] = "shop"

    @classmethod
    def routes(cls) -> RouteTable[Destination]:
        return builder.build()


class ShopDestination(NavigationDestination):
    tabs = Tabs
    pages = (Product, Order)
    sheets = Checkout
    deeplinks = Deeplinks


parser = DeeplinkParser.for_deeplinks(
    Deeplinks, DeeplinkConfig(dismiss_before_navigating=True)
)


def open_url(scope: NavigationScope, url: str) -> bool:
    """Dispatch *url* on the root scope; deeplink values carry destinations."""
    destination = parser.parse(url)
    if destination is None:
        return False
    return scope.router.handle_deeplink(
        Link(destination), dismiss_first=parser.config.dismiss_before_navigating
    )


def main(argv: list[str]) -> None:
    logging.basicConfig(level=logging.DEBUG)
    root = NavigationScope.root(ShopDestination, url_opener=webbrowser.open)
    with root:
        for url in argv:
            handled = open_url(root, url)
            print(f"{url}: {'handled' if handled else 'not handled'} -> {root.router.stack!r}")


if __name__ == "__main__":
    main(sys.argv[1:])
