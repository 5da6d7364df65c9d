"""Assertion helpers for tests of navkit applications.

Work directly on ``Router`` and ``DeeplinkParser``; no fakes needed.
"""

from typing import Any

from navkit.router import Router
from navkit.routing.matcher import DeeplinkParser


# ---------------------------------------------------------------------------
# Router state assertions
# ---------------------------------------------------------------------------


def assert_stack(router: Router, *pages: Any) -> None:
    """Assert the router's push stack holds exactly *pages*, bottom first."""
    assert router.stack == list(pages), (
        f"Expected stack {list(pages)!r} on {router!r}, got {router.stack!r}"
    )


def assert_nothing_presented(router: Router) -> None:
    """Assert all three presentation slots are empty."""
    assert not router.is_presenting, (
        f"{router!r} is presenting: alert={router.presenting_alert!r}, "
        f"sheet={router.presenting_sheet!r}, "
        f"full_screen={router.presenting_full_screen!r}"
    )


def assert_clean(router: Router) -> None:
    """Assert the router has an empty stack and presents nothing."""
    assert_stack(router)
    assert_nothing_presented(router)


def assert_selected_tab(router: Router, tab: Any) -> None:
    """Assert the root of *router*'s hierarchy has *tab* selected."""
    root = router
    while root.parent is not None:
        root = root.parent
    assert root.level == 0, f"{router!r} is detached from its root"
    assert root.selected_tab == tab, (
        f"Expected selected tab {tab!r}, got {root.selected_tab!r}"
    )


# ---------------------------------------------------------------------------
# Matching assertions
# ---------------------------------------------------------------------------


def assert_matches(parser: DeeplinkParser[Any], url: str, expected: Any) -> None:
    """Assert *url* parses to *expected*."""
    result = parser.parse(url)
    assert result is not None, f"No route matched {url!r}"
    assert result == expected, f"{url!r} parsed to {result!r}, expected {expected!r}"


def assert_no_match(parser: DeeplinkParser[Any], url: str) -> None:
    """Assert *url* matches no route."""
    result = parser.parse(url)
    assert result is None, f"Expected no match for {url!r}, got {result!r}"
