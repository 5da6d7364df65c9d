"""``navkit routes``: list a deeplink route table in match order."""

import argparse
import sys

from navkit.cli._resolve import resolve_deeplinks


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes of ``args.deeplinks`` with index, pattern and factory."""
    try:
        deeplinks = resolve_deeplinks(args.deeplinks)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = deeplinks.routes()
    if not table:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for index, route in enumerate(table):
        factory_name = getattr(route.factory, "__name__", type(route.factory).__name__)
        rows.append((str(index), route.path or "/", factory_name))

    max_index = max(max(len(r[0]) for r in rows), 1)
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    print(f"scheme: {deeplinks.scheme}")
    fmt = f"{{:>{max_index}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("#", "PATH", "FACTORY"))
    sep_len = max_index + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for index, path, factory_name in rows:
        print(fmt.format(index, path, factory_name))
