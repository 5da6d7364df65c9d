"""Deeplink import resolution: ``"module:attribute"`` strings to deeplink types.

Shared by ``navkit routes`` and ``navkit resolve``.
"""

import importlib
from typing import Any

from navkit.routing.table import RouteTable


def resolve_deeplinks(import_string: str) -> Any:
    """Resolve an import string to a deeplink type.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"Deeplinks"``.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp.links:Deeplinks"``).

    Returns:
        The resolved class, exposing ``scheme`` and ``routes()``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the object has no ``scheme`` string or its
            ``routes()`` does not return a RouteTable.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "Deeplinks"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    scheme = getattr(obj, "scheme", None)
    routes = getattr(obj, "routes", None)
    if not isinstance(scheme, str) or not callable(routes):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a deeplink type"
        raise TypeError(msg)

    table = routes()
    if not isinstance(table, RouteTable):
        msg = f"{import_string!r}.routes() returned {type(table).__name__}, not a RouteTable"
        raise TypeError(msg)

    return obj
