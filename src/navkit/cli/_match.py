"""``navkit resolve``: match one URL and show the deeplink it produces."""

import argparse
import sys

from navkit.cli._resolve import resolve_deeplinks
from navkit.routing.matcher import DeeplinkParser


def run_resolve(args: argparse.Namespace) -> None:
    """Match ``args.url`` and print the route, parameters and destination.

    Exits with status 1 when no route matches.
    """
    try:
        deeplinks = resolve_deeplinks(args.deeplinks)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    parser = DeeplinkParser.for_deeplinks(deeplinks)
    result = parser.match(args.url)
    if result is None:
        print(f"No route matches {args.url!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"route:       {result.route.path or '/'}")
    for name, value in result.params.items():
        print(f"  {name} = {value!r}")
    print(f"deeplink:    {result.deeplink!r}")
    destination = getattr(result.deeplink, "destination", None)
    if destination is not None:
        print(f"destination: {destination!r}")
