"""Route matcher — evaluates every registered route against a URL.

Routes are passed in once, in registration order, and never change
afterwards. Every matching route is returned, not just the first one,
so the caller decides how many actions to perform.
"""

import logging
from collections.abc import Iterable

from deeplink.config import DeepLinkConfig
from deeplink.errors import ConfigurationError
from deeplink.http.url import ParsedURL, parse_url
from deeplink.routing.fragment import FragmentExtractor
from deeplink.routing.route import MatchedRoute, MatchedRouteKey, Route
from deeplink.sources import DeepLinkSource, resolve_source

logger = logging.getLogger("deeplink.routing")


class RouteMatcher:
    """Matches URLs against an immutable, ordered route list.

    Usage::

        matcher = RouteMatcher([
            Route("/me", action=OpenMe()),
            Route("/me/:account", action=OpenAccount()),
        ])
        matches = matcher.routes_matching("https://wordpress.com/me/bobsmith")
        matches[0].values  # {"account": "bobsmith", "url": "https://..."}

    Matching holds no mutable state, so one matcher can be shared across
    threads.
    """

    __slots__ = ("_config", "_extractor", "_routes")

    def __init__(self, routes: Iterable[Route], *, config: DeepLinkConfig | None = None) -> None:
        self._routes = tuple(routes)
        self._config = config or DeepLinkConfig()
        self._extractor = FragmentExtractor(self._config)
        for route in self._routes:
            self._check_action_config(route)

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in registration order."""
        return self._routes

    @property
    def config(self) -> DeepLinkConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._routes)

    def routes_matching(self, url: str) -> list[MatchedRoute]:
        """Return every route matching *url*, in registration order.

        Each match gets its own value bag. A URL that cannot be parsed,
        or has no path, matches nothing.
        """
        parsed = parse_url(url)
        if parsed is None:
            logger.debug("Unparsable URL %r matches no routes", url)
            return []
        if not parsed.components:
            logger.debug("URL %r has no path components", url)
            return []

        matches: list[MatchedRoute] = []
        for route in self._routes:
            bindings = route.pattern.match(parsed.components)
            if bindings is None:
                continue
            matches.append(self._build_match(route, bindings, parsed))

        logger.debug("URL %r matched %d of %d routes", url, len(matches), len(self._routes))
        return matches

    def first_match(self, url: str) -> MatchedRoute | None:
        """The first route matching *url*, or ``None``."""
        matches = self.routes_matching(url)
        return matches[0] if matches else None

    def _check_action_config(self, route: Route) -> None:
        action_config = getattr(route.action, "config", None)
        if isinstance(action_config, DeepLinkConfig) and action_config != self._config:
            label = route.name or route.path
            msg = (
                f"Route {label!r} was built with {action_config!r}, but the matcher uses "
                f"{self._config!r}. Build the route with the matcher's config."
            )
            raise ConfigurationError(msg)

    def _build_match(self, route: Route, bindings: dict[str, str], parsed: ParsedURL) -> MatchedRoute:
        values = dict(bindings)
        values[MatchedRouteKey.URL.value] = parsed.url

        token = parsed.query.get(self._config.source_param)
        if token is not None:
            values[MatchedRouteKey.SOURCE.value] = token

        if route.extracts_fragment:
            values.update(self._extractor.values(parsed))
            source = self._extractor.source(parsed)
        else:
            source = self._resolve_source(token, route.source, parsed)

        return MatchedRoute(route=route, values=values, source=source)

    def _resolve_source(self, token: str | None, default: DeepLinkSource, parsed: ParsedURL) -> DeepLinkSource:
        campaign = parsed.query.get(self._config.campaign_param)
        return resolve_source(token, default, campaign=campaign)
