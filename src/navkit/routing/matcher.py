"""Deeplink matcher: scheme filter, tokenization and table scan.

Usage::

    parser = DeeplinkParser(table, scheme="app")
    parser.parse("app://page/42")    # -> Page(id=42)
    parser.parse("other://page/42")  # -> None, table never scanned
"""

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote, urlsplit

from navkit.config import DeeplinkConfig
from navkit.errors import ConfigurationError
from navkit.routing.route import RouteMatch
from navkit.routing.table import RouteTable

if TYPE_CHECKING:
    from navkit.kinds import DeeplinkRepresentable

logger = logging.getLogger("navkit.routing")


def url_scheme(url: str) -> str:
    """Return the lowercased scheme of *url*, or ``""`` when it has none."""
    return urlsplit(url).scheme.lower()


def tokenize(url: str) -> list[str]:
    """Split a URL into match tokens.

    The host, when present, is token 0; path components follow in order.
    Empty components are dropped and query and fragment are ignored::

        "app://page/42"      -> ["page", "42"]
        "app://a//b/"        -> ["a", "b"]
        "app:/settings?x=1"  -> ["settings"]
    """
    parts = urlsplit(url)
    tokens: list[str] = []
    host = _host(parts.netloc)
    if host:
        tokens.append(unquote(host))
    tokens.extend(unquote(part) for part in parts.path.split("/") if part)
    return tokens


def _host(netloc: str) -> str:
    """Strip user info and port from a network location, keeping case."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host.partition("]")[0] + "]"
    return host.partition(":")[0]


class DeeplinkParser[D]:
    """Matches URLs against an ordered route table.

    A ``None`` result means "not one of our deeplinks", never an error;
    callers decide the fallback (for example opening the URL externally).
    """

    __slots__ = ("config", "scheme", "table")

    def __init__(
        self,
        table: RouteTable[D],
        scheme: str,
        config: DeeplinkConfig | None = None,
    ) -> None:
        if not scheme or ":" in scheme or "/" in scheme:
            msg = f"Invalid deeplink scheme {scheme!r}; expected a bare scheme such as 'app'."
            raise ConfigurationError(msg)
        self.table = table
        self.scheme = scheme.lower()
        self.config: DeeplinkConfig = config or DeeplinkConfig.default()

    @classmethod
    def for_deeplinks(
        cls,
        deeplinks: "type[DeeplinkRepresentable]",
        config: DeeplinkConfig | None = None,
    ) -> "DeeplinkParser[Any]":
        """Build a parser from a deeplink type's ``scheme`` and ``routes()``."""
        return cls(deeplinks.routes(), deeplinks.scheme, config)

    def match(self, url: str) -> RouteMatch[D] | None:
        """Return the full RouteMatch for *url*, or ``None``."""
        try:
            scheme = url_scheme(url)
            tokens = tokenize(url)
        except ValueError as exc:
            logger.debug("Malformed URL %r: %s", url, exc)
            return None
        if scheme != self.scheme:
            logger.debug("Scheme mismatch for %r (expected %r)", url, self.scheme)
            return None
        return self.table.match(tokens)

    def parse(self, url: str) -> D | None:
        """Return the deeplink value for *url*, or ``None`` if no route matched."""
        result = self.match(url)
        if result is None:
            return None
        return result.deeplink
