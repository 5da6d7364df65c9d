"""navkit: declarative deeplinks and hierarchical navigation state.

Matches URLs to typed deeplink values and drives a tree of router nodes
(tab selection, push stacks, modal presentation).

Basic usage::

    from navkit import DeeplinkParser, Push, Route, Router, routes

    table = routes(
        Route("settings", factory=lambda: Settings()),
        Route.from_path("page/{id:int}", lambda id: Page(id=id)),
    )
    parser = DeeplinkParser(table, scheme="app")

    root = Router(AppDestination)
    root.handle_url("app://page/42", parser)
"""

import importlib

__version__ = "0.1.0.dev0"
__all__ = [
    "Alert",
    "Codec",
    "ConfigurationError",
    "DeeplinkConfig",
    "DeeplinkParser",
    "DeeplinkRepresentable",
    "Destination",
    "External",
    "FullScreen",
    "NavigationButton",
    "NavigationDestination",
    "NavigationScope",
    "NavkitError",
    "NoAlerts",
    "NoDeeplinks",
    "NoFullScreen",
    "NoPages",
    "NoSheets",
    "NoTabs",
    "ParameterCodec",
    "PathSegment",
    "Push",
    "Route",
    "RouteBuilder",
    "RouteMatch",
    "RouteTable",
    "Router",
    "Sheet",
    "SheetDefaults",
    "Tab",
    "UninhabitedError",
    "literal",
    "param",
    "register_codec",
    "routes",
    "tokenize",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Alert": "navkit.destination",
    "Codec": "navkit.routing.params",
    "ConfigurationError": "navkit.errors",
    "DeeplinkConfig": "navkit.config",
    "DeeplinkParser": "navkit.routing.matcher",
    "DeeplinkRepresentable": "navkit.kinds",
    "Destination": "navkit.destination",
    "External": "navkit.destination",
    "FullScreen": "navkit.destination",
    "NavigationButton": "navkit.scope",
    "NavigationDestination": "navkit.kinds",
    "NavigationScope": "navkit.scope",
    "NavkitError": "navkit.errors",
    "NoAlerts": "navkit.kinds",
    "NoDeeplinks": "navkit.kinds",
    "NoFullScreen": "navkit.kinds",
    "NoPages": "navkit.kinds",
    "NoSheets": "navkit.kinds",
    "NoTabs": "navkit.kinds",
    "ParameterCodec": "navkit.routing.params",
    "PathSegment": "navkit.routing.route",
    "Push": "navkit.destination",
    "Route": "navkit.routing.route",
    "RouteBuilder": "navkit.routing.table",
    "RouteMatch": "navkit.routing.route",
    "RouteTable": "navkit.routing.table",
    "Router": "navkit.router",
    "Sheet": "navkit.destination",
    "SheetDefaults": "navkit.kinds",
    "Tab": "navkit.destination",
    "UninhabitedError": "navkit.errors",
    "literal": "navkit.routing.route",
    "param": "navkit.routing.route",
    "register_codec": "navkit.routing.params",
    "routes": "navkit.routing.table",
    "tokenize": "navkit.routing.matcher",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navkit`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module = importlib.import_module(module_path)
    return getattr(module, name)
