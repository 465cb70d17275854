"""Route, MatchedRoute, and their tag enums."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from deeplink.routing.actions import LinkHandler, NavigationAction
from deeplink.routing.pattern import RoutePattern, parse_path
from deeplink.sources import DeepLinkSource


class MatchedRouteKey(Enum):
    """Reserved value-bag keys filled in by the matcher."""

    URL = "url"
    SOURCE = "source"
    FRAGMENT = "fragment"


class DeepLinkSection(Enum):
    """Opaque classification tag a route carries through to the caller."""

    EDITOR = "editor"
    ME = "me"
    MEDIA_PICKER = "media_picker"
    MY_SITE = "my_site"
    NOTIFICATIONS = "notifications"
    READER = "reader"
    SITE_CREATION = "site_creation"
    STATS = "stats"
    SYSTEM = "system"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created once when the route table is built. The template is parsed
    here, so an invalid ``path`` raises ``ConfigurationError`` before the
    route can ever be registered.

    Attributes:
        path: ``/``-delimited template with ``:name`` placeholders.
        action: Handler invoked with the value bag of a match.
        source: Source used when the URL carries no recognized ``source``.
        section: Classification tag, passed through unchanged.
        should_track: Whether a match is reported to telemetry.
        jetpack_powered: Whether the destination is a Jetpack-powered
            feature, passed through for the caller to gate on.
        extracts_fragment: Match target is a URL encoded in the fragment
            (app-banner redirects).
        name: Optional label for logs and the CLI.
    """

    path: str
    action: NavigationAction
    source: DeepLinkSource = field(default_factory=DeepLinkSource.link)
    section: DeepLinkSection | None = None
    should_track: bool = True
    jetpack_powered: bool = False
    extracts_fragment: bool = False
    name: str | None = None
    pattern: RoutePattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", parse_path(self.path))

    @property
    def placeholders(self) -> tuple[str, ...]:
        return self.pattern.placeholders


@dataclass(frozen=True, slots=True)
class MatchedRoute:
    """Result of a successful route match.

    ``values`` holds the placeholder bindings in template order followed
    by the reserved keys (``url`` always, ``source`` and ``fragment`` when
    present). ``source`` is the resolved typed source.
    """

    route: Route
    values: dict[str, str]
    source: DeepLinkSource

    @property
    def section(self) -> DeepLinkSection | None:
        return self.route.section

    @property
    def should_track(self) -> bool:
        return self.route.should_track

    @property
    def jetpack_powered(self) -> bool:
        return self.route.jetpack_powered

    @property
    def url(self) -> str:
        return self.values[MatchedRouteKey.URL.value]

    def perform(self, router: LinkHandler, source_context: Any = None) -> None:
        """Invoke the route's action with this match's values."""
        self.route.action.perform(self.values, source_context, router)
