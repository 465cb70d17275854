"""Link dispatch — match a URL and perform the first matching action.

``LinkRouter`` is the usual consumer of ``RouteMatcher``: it takes the
first match, reports it to telemetry when the route asks for that, and
runs the route's action. The router passes itself to the action, so an
action can open another URL through the same route table.

Usage::

    router = LinkRouter(matcher, on_track=analytics.link_opened)
    if router.can_handle(url):
        router.handle(url)
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeAlias

from deeplink.routing.matcher import RouteMatcher
from deeplink.routing.route import MatchedRoute
from deeplink.sources import DeepLinkSource

logger = logging.getLogger("deeplink.navigation")

TrackHook: TypeAlias = Callable[[MatchedRoute], None]


class LinkRouter:
    """Dispatches URLs to the action of their first matching route."""

    __slots__ = ("_matcher", "_on_track")

    def __init__(self, matcher: RouteMatcher, *, on_track: TrackHook | None = None) -> None:
        self._matcher = matcher
        self._on_track = on_track

    @property
    def matcher(self) -> RouteMatcher:
        return self._matcher

    def can_handle(self, url: str) -> bool:
        """True if at least one route matches *url*."""
        return bool(self._matcher.routes_matching(url))

    def handle(
        self,
        url: str,
        *,
        should_track: bool = False,
        source: DeepLinkSource | None = None,
        source_context: Any = None,
    ) -> MatchedRoute | None:
        """Perform the first route matching *url*.

        An explicit *source* replaces the source resolved from the URL.
        The match is tracked if the route or the caller asks for it.
        Returns the performed match, or ``None`` if nothing matched.
        """
        match = self._matcher.first_match(url)
        if match is None:
            logger.info("No route matches %r", url)
            return None

        if source is not None:
            match = replace(match, source=source)

        if should_track or match.should_track:
            self._track(match)

        logger.debug("Performing %s for %r (source=%s)", match.route.name or match.route.path, url, match.source)
        match.perform(self, source_context)
        return match

    def _track(self, match: MatchedRoute) -> None:
        if self._on_track is None:
            return
        try:
            self._on_track(match)
        except Exception:
            # Telemetry must not break navigation.
            logger.warning("Link tracking hook failed for %r", match.url, exc_info=True)
