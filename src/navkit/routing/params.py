"""Path parameter codecs.

A codec turns one raw URL token into a typed value, or ``None`` when
the token is malformed. The registry is open: applications register
codecs for their own identifier types next to the built-ins::

    register_codec(Codec("slug", Slug, Slug.parse))
    Route.from_path("posts/{slug:slug}", factory=...)
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from navkit.errors import ConfigurationError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})


@runtime_checkable
class ParameterCodec[T](Protocol):
    """Parses a raw path token into ``T`` and formats it back."""

    @property
    def name(self) -> str: ...

    def parse(self, raw: str) -> T | None: ...

    def format(self, value: T) -> str: ...


@dataclass(frozen=True, slots=True)
class Codec[T]:
    """A codec built from a parse function and an optional formatter."""

    name: str
    python_type: type[T]
    parser: Callable[[str], T | None]
    formatter: Callable[[T], str] = str

    def parse(self, raw: str) -> T | None:
        return self.parser(raw)

    def format(self, value: T) -> str:
        return self.formatter(value)


def _parse_str(raw: str) -> str:
    return raw


def _parse_int(raw: str) -> int | None:
    if not _INT_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Past sys.get_int_max_str_digits()
        return None


def _parse_float(raw: str) -> float | None:
    if not _FLOAT_RE.fullmatch(raw):
        return None
    return float(raw)


def _parse_bool(raw: str) -> bool | None:
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return None


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_uuid(raw: str) -> UUID | None:
    if not _UUID_RE.fullmatch(raw):
        return None
    return UUID(raw)


# Registered codecs, keyed by pattern name and by produced Python type
CODECS: dict[str, ParameterCodec[Any]] = {}
_CODECS_BY_TYPE: dict[type, ParameterCodec[Any]] = {}


def register_codec(
    codec: ParameterCodec[Any],
    *,
    python_type: type | None = None,
    replace: bool = False,
) -> None:
    """Register *codec* under its name and, optionally, a Python type.

    ``Codec`` instances are also registered under their ``python_type``.
    Raises ``ConfigurationError`` if the name is taken and *replace* is
    false.
    """
    if not isinstance(codec, ParameterCodec):
        msg = f"{codec!r} does not implement parse() and format()"
        raise ConfigurationError(msg)
    if codec.name in CODECS and not replace:
        msg = f"A parameter codec named {codec.name!r} is already registered."
        raise ConfigurationError(msg)

    CODECS[codec.name] = codec
    target = python_type
    if target is None and isinstance(codec, Codec):
        target = codec.python_type
    if target is not None:
        _CODECS_BY_TYPE[target] = codec


def get_codec(key: str | type | ParameterCodec[Any]) -> ParameterCodec[Any]:
    """Resolve a codec from its name, its Python type, or the codec itself.

    Raises ``ConfigurationError`` for unknown names and types.
    """
    if isinstance(key, str):
        try:
            return CODECS[key]
        except KeyError:
            known = ", ".join(sorted(CODECS))
            msg = f"Unknown parameter type {key!r}. Registered types: {known}"
            raise ConfigurationError(msg) from None
    if isinstance(key, type):
        try:
            return _CODECS_BY_TYPE[key]
        except KeyError:
            msg = f"No parameter codec registered for {key.__name__}."
            raise ConfigurationError(msg) from None
    if isinstance(key, ParameterCodec):
        return key
    msg = f"Cannot resolve a parameter codec from {key!r}."
    raise ConfigurationError(msg)


def parse_param(raw: str, key: str | type | ParameterCodec[Any] = "str") -> Any | None:
    """Parse a raw token with the codec for *key*.

    Returns ``None`` if the token is malformed.
    Raises ``ConfigurationError`` if *key* names no registered codec.
    """
    return get_codec(key).parse(raw)


for _codec in (
    Codec("str", str, _parse_str),
    Codec("int", int, _parse_int),
    Codec("float", float, _parse_float, repr),
    Codec("bool", bool, _parse_bool, _format_bool),
    Codec("uuid", UUID, _parse_uuid),
):
    register_codec(_codec)
del _codec
