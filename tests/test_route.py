"""Tests for deeplink.routing.route — Route, MatchedRoute, and tag enums."""

import pytest

from deeplink.errors import ConfigurationError
from deeplink.routing.route import DeepLinkSection, MatchedRoute, MatchedRouteKey, Route
from deeplink.sources import DeepLinkSource
from deeplink.testing import NoopAction, RecordingAction, RecordingRouter


class TestRoute:
    def test_creation(self) -> None:
        action = NoopAction()
        route = Route(path="/me", action=action)
        assert route.path == "/me"
        assert route.action is action
        assert route.source == DeepLinkSource.link()
        assert route.section is None
        assert route.should_track is True
        assert route.extracts_fragment is False
        assert route.jetpack_powered is False
        assert route.name is None

    def test_pattern_parsed_on_creation(self) -> None:
        route = Route(path="/me/:account", action=NoopAction())
        assert route.pattern.template == "/me/:account"
        assert route.placeholders == ("account",)

    def test_invalid_template_fails_fast(self) -> None:
        with pytest.raises(ConfigurationError):
            Route(path="/me/:a/:a", action=NoopAction())

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Route(path="", action=NoopAction())

    def test_frozen(self) -> None:
        route = Route(path="/me", action=NoopAction())
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_equal_definitions_compare_equal(self) -> None:
        action = NoopAction()
        assert Route(path="/me", action=action) == Route(path="/me", action=action)
        assert Route(path="/me", action=action) != Route(path="/me/account", action=action)


class TestMatchedRoute:
    def test_read_through_properties(self) -> None:
        route = Route(path="/stats", action=NoopAction(), section=DeepLinkSection.STATS, should_track=False)
        match = MatchedRoute(route=route, values={"url": "/stats"}, source=DeepLinkSource.widget())
        assert match.section is DeepLinkSection.STATS
        assert match.should_track is False
        assert match.url == "/stats"
        assert match.source == DeepLinkSource.widget()

    def test_jetpack_powered_read_through(self) -> None:
        route = Route(path="/stats", action=NoopAction(), jetpack_powered=True)
        match = MatchedRoute(route=route, values={"url": "/stats"}, source=DeepLinkSource.link())
        assert match.jetpack_powered is True

    def test_perform_passes_values_context_and_router(self) -> None:
        action = RecordingAction()
        route = Route(path="/me/:account", action=action)
        match = MatchedRoute(
            route=route,
            values={"account": "bobsmith", "url": "/me/bobsmith"},
            source=DeepLinkSource.link(),
        )

        match.perform(RecordingRouter(), source_context="presenter")

        assert action.calls == [{"account": "bobsmith", "url": "/me/bobsmith"}]
        assert action.contexts == ["presenter"]

    def test_frozen(self) -> None:
        route = Route(path="/", action=NoopAction())
        match = MatchedRoute(route=route, values={}, source=DeepLinkSource.link())
        with pytest.raises(AttributeError):
            match.route = route  # type: ignore[misc]


class TestMatchedRouteKey:
    def test_values(self) -> None:
        assert {key.value for key in MatchedRouteKey} == {"url", "source", "fragment"}


class TestDeepLinkSection:
    def test_lookup_by_value(self) -> None:
        assert DeepLinkSection("my_site") is DeepLinkSection.MY_SITE
        assert DeepLinkSection("stats") is DeepLinkSection.STATS
