"""Tests for navkit.routing.matcher: tokenization, scheme filter, table scan."""

import logging
from uuid import UUID

import pytest

from navkit.config import DeeplinkConfig
from navkit.errors import ConfigurationError
from navkit.kinds import NoDeeplinks
from navkit.routing.matcher import DeeplinkParser, tokenize, url_scheme
from navkit.routing.route import Route
from navkit.routing.table import RouteTable, routes
from sample_app import (
    Deeplinks,
    ItemLink,
    LatestLink,
    PageLink,
    SettingsLink,
    UserLink,
)


@pytest.fixture
def parser() -> DeeplinkParser[object]:
    return DeeplinkParser.for_deeplinks(Deeplinks)


class TestTokenize:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("app://settings", ["settings"]),
            ("app://page/42", ["page", "42"]),
            ("app://page//42/", ["page", "42"]),
            ("app:///page/42", ["page", "42"]),
            ("app:/settings", ["settings"]),
            ("app://settings?tab=1#top", ["settings"]),
            ("app://user/jane%20doe", ["user", "jane doe"]),
            ("app://", []),
            ("app://settings:8080", ["settings"]),
            ("app://u@settings", ["settings"]),
            ("app://user:pw@Settings:1/x", ["Settings", "x"]),
        ],
    )
    def test_tokens(self, url: str, expected: list[str]) -> None:
        assert tokenize(url) == expected

    def test_host_case_preserved(self) -> None:
        assert tokenize("app://Settings") == ["Settings"]


class TestScheme:
    def test_lowercased(self) -> None:
        assert url_scheme("APP://settings") == "app"

    def test_missing(self) -> None:
        assert url_scheme("settings") == ""

    @pytest.mark.parametrize("scheme", ["", "app://", "app:"])
    def test_invalid_configuration(self, scheme: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid deeplink scheme"):
            DeeplinkParser(RouteTable(), scheme)


class TestScenarios:
    def test_literal_route(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://settings") == SettingsLink()

    def test_typed_parameter(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://page/42") == PageLink(42)

    def test_malformed_parameter_falls_through(self, parser: DeeplinkParser[object]) -> None:
        # "abc" is not an int; no later route accepts page/<anything but latest>
        assert parser.parse("app://page/abc") is None

    def test_scheme_mismatch(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("other://settings") is None

    def test_scheme_is_case_insensitive(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("APP://settings") == SettingsLink()
        upper = DeeplinkParser(Deeplinks.routes(), "APP")
        assert upper.parse("app://settings") == SettingsLink()

    def test_literal_after_rejected_param_route(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://page/latest") == LatestLink()

    def test_three_parameters(self, parser: DeeplinkParser[object]) -> None:
        ref = "e621e1f8-c36c-495a-93fc-0c247a3e6e5f"
        assert parser.parse(f"app://item/2/{ref}/true") == ItemLink(2, UUID(ref), True)
        assert parser.parse(f"app://item/2/{ref}/maybe") is None

    def test_percent_decoded_parameter(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://user/jane%20doe") == UserLink("jane doe")

    def test_wrong_token_count(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://settings/extra") is None
        assert parser.parse("app://page") is None

    def test_unknown_route(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://nowhere") is None

    def test_deterministic(self, parser: DeeplinkParser[object]) -> None:
        results = {parser.parse("app://page/7") for _ in range(5)}
        assert results == {PageLink(7)}

    def test_oversized_integer_is_no_match(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://page/" + "1" * 5000) is None

    def test_malformed_network_location_is_no_match(
        self, parser: DeeplinkParser[object], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="navkit.routing"):
            assert parser.parse("app://[settings/x") is None
        assert "Malformed URL" in caplog.text

    def test_port_and_user_info_ignored(self, parser: DeeplinkParser[object]) -> None:
        assert parser.parse("app://settings:8080") == SettingsLink()


class TestSchemeShortCircuit:
    def test_table_not_scanned_on_mismatch(self) -> None:
        calls: list[str] = []

        def factory() -> str:
            calls.append("called")
            return "hit"

        parser = DeeplinkParser(routes(Route("settings", factory=factory)), "app")
        assert parser.parse("other://settings") is None
        assert calls == []
        assert parser.parse("app://settings") == "hit"
        assert calls == ["called"]

    def test_mismatch_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        parser = DeeplinkParser(RouteTable(), "app")
        with caplog.at_level(logging.DEBUG, logger="navkit.routing"):
            parser.parse("other://settings")
        assert "Scheme mismatch" in caplog.text


class TestMatch:
    def test_match_exposes_route_and_params(self, parser: DeeplinkParser[object]) -> None:
        result = parser.match("app://page/9")
        assert result is not None
        assert result.route.path == "page/{id:int}"
        assert result.params == {"id": 9}
        assert result.deeplink == PageLink(9)


class TestConfiguration:
    def test_default_config(self, parser: DeeplinkParser[object]) -> None:
        assert parser.config == DeeplinkConfig()
        assert parser.config.dismiss_before_navigating is False

    def test_custom_config(self) -> None:
        config = DeeplinkConfig(dismiss_before_navigating=True)
        parser = DeeplinkParser.for_deeplinks(Deeplinks, config)
        assert parser.config is config

    def test_no_deeplinks_never_matches(self) -> None:
        parser = DeeplinkParser.for_deeplinks(NoDeeplinks)
        assert parser.scheme == "app"
        assert parser.parse("app://settings") is None
