"""Tests for navkit.routing.params: parameter codecs and the codec registry."""

from uuid import UUID

import pytest

from navkit.errors import ConfigurationError
from navkit.routing.params import (
    CODECS,
    Codec,
    ParameterCodec,
    get_codec,
    parse_param,
    register_codec,
)


@pytest.fixture
def _restore_registry():
    """Undo codec registrations made by a test."""
    from navkit.routing import params

    saved = dict(params.CODECS)
    saved_by_type = dict(params._CODECS_BY_TYPE)
    yield
    params.CODECS.clear()
    params.CODECS.update(saved)
    params._CODECS_BY_TYPE.clear()
    params._CODECS_BY_TYPE.update(saved_by_type)


class TestBuiltins:
    def test_builtin_names_registered(self) -> None:
        assert {"str", "int", "float", "bool", "uuid"} <= set(CODECS)

    def test_lookup_by_type(self) -> None:
        assert get_codec(int).name == "int"
        assert get_codec(bool).name == "bool"
        assert get_codec(UUID).name == "uuid"
        assert get_codec(str).name == "str"

    def test_codec_instance_passes_through(self) -> None:
        codec = CODECS["int"]
        assert get_codec(codec) is codec

    def test_builtins_satisfy_protocol(self) -> None:
        for codec in CODECS.values():
            assert isinstance(codec, ParameterCodec)


class TestStr:
    def test_identity(self) -> None:
        assert parse_param("hello") == "hello"

    def test_anything_goes(self) -> None:
        assert parse_param("  spaced  ", "str") == "  spaced  "


class TestInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("42", 42), ("0", 0), ("-7", -7), ("+5", 5), ("007", 7)],
    )
    def test_valid(self, raw: str, expected: int) -> None:
        value = parse_param(raw, "int")
        assert value == expected
        assert isinstance(value, int)

    @pytest.mark.parametrize("raw", ["abc", "", "4.2", "1e3", " 4", "4 ", "--1", "٣"])
    def test_malformed_is_none(self, raw: str) -> None:
        assert parse_param(raw, "int") is None

    def test_digit_limit_is_none(self) -> None:
        assert parse_param("1" * 5000, "int") is None


class TestFloat:
    def test_valid(self) -> None:
        assert parse_param("3.14", "float") == pytest.approx(3.14)
        assert parse_param("10", "float") == 10.0
        assert parse_param("-.5", "float") == -0.5

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "1.2.3", ""])
    def test_malformed_is_none(self, raw: str) -> None:
        assert parse_param(raw, "float") is None


class TestBool:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "True", "1"])
    def test_true(self, raw: str) -> None:
        assert parse_param(raw, "bool") is True

    @pytest.mark.parametrize("raw", ["false", "FALSE", "False", "0"])
    def test_false(self, raw: str) -> None:
        assert parse_param(raw, "bool") is False

    @pytest.mark.parametrize("raw", ["yes", "no", "2", "", "t"])
    def test_malformed_is_none(self, raw: str) -> None:
        assert parse_param(raw, "bool") is None

    def test_format(self) -> None:
        codec = get_codec(bool)
        assert codec.format(True) == "true"
        assert codec.format(False) == "false"


class TestUUID:
    def test_canonical(self) -> None:
        raw = "12345678-1234-5678-1234-567812345678"
        assert parse_param(raw, "uuid") == UUID(raw)

    def test_uppercase_accepted(self) -> None:
        raw = "E621E1F8-C36C-495A-93FC-0C247A3E6E5F"
        assert parse_param(raw, "uuid") == UUID(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "12345678123456781234567812345678",
            "{12345678-1234-5678-1234-567812345678}",
            "urn:uuid:12345678-1234-5678-1234-567812345678",
            "not-a-uuid",
        ],
    )
    def test_non_canonical_is_none(self, raw: str) -> None:
        assert parse_param(raw, "uuid") is None


class TestRoundTrip:
    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("int", 0),
            ("int", -123456789),
            ("bool", True),
            ("bool", False),
            ("str", "any text"),
            ("uuid", UUID("e621e1f8-c36c-495a-93fc-0c247a3e6e5f")),
        ],
    )
    def test_parse_format(self, key: str, value: object) -> None:
        codec = get_codec(key)
        assert codec.parse(codec.format(value)) == value


class TestRegistry:
    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown parameter type 'slug'"):
            get_codec("slug")

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="bytes"):
            get_codec(bytes)

    @pytest.mark.usefixtures("_restore_registry")
    def test_register_custom_codec(self) -> None:
        class Slug(str):
            pass

        def parse_slug(raw: str) -> Slug | None:
            return Slug(raw) if raw.isidentifier() else None

        register_codec(Codec("slug", Slug, parse_slug))

        assert parse_param("hello_world", "slug") == "hello_world"
        assert parse_param("hello-world", "slug") is None
        assert get_codec(Slug).name == "slug"

    @pytest.mark.usefixtures("_restore_registry")
    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="already registered"):
            register_codec(Codec("int", int, int))

    @pytest.mark.usefixtures("_restore_registry")
    def test_replace_allowed(self) -> None:
        register_codec(Codec("int", int, lambda raw: 1), replace=True)
        assert parse_param("anything", "int") == 1

    @pytest.mark.usefixtures("_restore_registry")
    def test_protocol_implementation_registers(self) -> None:
        class Upper:
            name = "upper"

            def parse(self, raw: str) -> str | None:
                return raw if raw.isupper() else None

            def format(self, value: str) -> str:
                return value

        register_codec(Upper())
        assert parse_param("ABC", "upper") == "ABC"
        assert parse_param("abc", "upper") is None

    def test_non_codec_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="parse"):
            register_codec(object())  # type: ignore[arg-type]
