"""Navkit CLI: inspect route tables and resolve deeplink URLs.

Entry point registered as ``navkit`` in ``pyproject.toml``::

    [project.scripts]
    navkit = "navkit.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``navkit`` command."""
    parser = argparse.ArgumentParser(
        prog="navkit",
        description="navkit: declarative deeplinks and hierarchical navigation state.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- navkit routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List a deeplink route table")
    routes_parser.add_argument(
        "deeplinks",
        help="Import string (e.g. myapp.links:Deeplinks)",
    )

    # -- navkit resolve ---------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Match a URL against the routes")
    resolve_parser.add_argument(
        "deeplinks",
        help="Import string (e.g. myapp.links:Deeplinks)",
    )
    resolve_parser.add_argument("url", help="URL to match (e.g. app://page/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from navkit.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from navkit.cli._match import run_resolve

        run_resolve(args)
