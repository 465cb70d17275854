"""App-banner route.

The smart app banner on the website links to ``/get/`` with the page the
visitor was on percent-encoded in the fragment. Matching the banner URL
only identifies the entry point; the action decodes the fragment and
asks the router to open the real destination as a banner-sourced link.
"""

import logging
from collections.abc import Mapping
from typing import Any

from deeplink.config import DeepLinkConfig
from deeplink.routing.actions import LinkHandler
from deeplink.routing.fragment import FragmentExtractor
from deeplink.routing.route import Route
from deeplink.sources import DeepLinkSource

logger = logging.getLogger("deeplink.banner")

APP_BANNER_PATH = "/get/"


class AppBannerAction:
    """Re-dispatches the URL encoded in a banner link's fragment."""

    __slots__ = ("_config", "_extractor")

    def __init__(self, config: DeepLinkConfig | None = None) -> None:
        self._config = config or DeepLinkConfig()
        self._extractor = FragmentExtractor(self._config)

    @property
    def config(self) -> DeepLinkConfig:
        """Configuration the destination is resolved under.

        ``RouteMatcher`` refuses a banner route whose config differs from
        its own, so the match and the re-dispatch agree on campaign and origin.
        """
        return self._config

    def perform(self, values: Mapping[str, str], source: Any, router: LinkHandler) -> None:
        redirect = self._extractor.extract(values)
        if redirect is None:
            logger.info("App banner link %r has no usable destination", values.get("url"))
            return
        router.handle(redirect.destination, should_track=True, source=redirect.source)


def app_banner_route(config: DeepLinkConfig | None = None) -> Route:
    """Build the route for app-banner links.

    Pass the same *config* the ``RouteMatcher`` is built with.
    """
    return Route(
        path=APP_BANNER_PATH,
        action=AppBannerAction(config),
        source=DeepLinkSource.banner(),
        should_track=False,
        extracts_fragment=True,
        name="app_banner",
    )
