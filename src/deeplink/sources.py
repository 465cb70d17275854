"""Deep-link sources — where a link came from.

A *source* tags the entry point that produced a match: a plain link, a
home-screen widget, an app banner carrying a marketing campaign, and so
on. Sources are frozen dataclasses, so two ``banner("qr")`` values compare
equal and can be used as dict keys.

The ``source`` query parameter on an incoming URL selects the source;
anything unrecognized falls back to the route's default so an unknown
campaign tag never breaks routing::

    resolve_source("widget", DeepLinkSource.link())    # widget
    resolve_source("qr-2024", DeepLinkSource.link())   # link (fallback)
    resolve_source("banner", DeepLinkSource.link(), campaign="qr")  # banner(qr)
"""

from dataclasses import dataclass
from enum import Enum


class SourceKind(Enum):
    """The closed set of source variants."""

    LINK = "link"
    WIDGET = "widget"
    LOCK_SCREEN_WIDGET = "lockscreen_widget"
    BANNER = "banner"
    EMAIL = "email"
    IN_APP = "in_app"


# Variants that carry a campaign string
_CAMPAIGN_KINDS = frozenset({SourceKind.BANNER, SourceKind.EMAIL})

# Tokens accepted from the ``source`` query parameter. ``in_app`` is only
# ever constructed by the app itself.
_QUERY_TOKENS: dict[str, SourceKind] = {
    kind.value: kind for kind in SourceKind if kind is not SourceKind.IN_APP
}


@dataclass(frozen=True, slots=True)
class DeepLinkSource:
    """A typed source tag.

    Attributes:
        kind: Which variant this is.
        campaign: Campaign name for ``banner`` and ``email`` sources.
    """

    kind: SourceKind
    campaign: str | None = None

    @classmethod
    def link(cls) -> "DeepLinkSource":
        return cls(SourceKind.LINK)

    @classmethod
    def widget(cls) -> "DeepLinkSource":
        return cls(SourceKind.WIDGET)

    @classmethod
    def lock_screen_widget(cls) -> "DeepLinkSource":
        return cls(SourceKind.LOCK_SCREEN_WIDGET)

    @classmethod
    def banner(cls, campaign: str | None = None) -> "DeepLinkSource":
        return cls(SourceKind.BANNER, campaign)

    @classmethod
    def email(cls, campaign: str | None = None) -> "DeepLinkSource":
        return cls(SourceKind.EMAIL, campaign)

    @classmethod
    def in_app(cls) -> "DeepLinkSource":
        return cls(SourceKind.IN_APP)

    @property
    def is_internal(self) -> bool:
        """True for links opened from inside the app."""
        return self.kind is SourceKind.IN_APP

    @property
    def tracks_value(self) -> str:
        """Flat string used when reporting the source to analytics."""
        return self.kind.value

    def __str__(self) -> str:
        if self.kind in _CAMPAIGN_KINDS:
            return f"{self.kind.value}({self.campaign or ''})"
        return self.kind.value


def resolve_source(
    token: str | None,
    default: DeepLinkSource,
    *,
    campaign: str | None = None,
) -> DeepLinkSource:
    """Map a ``source`` query value to a :class:`DeepLinkSource`.

    Returns *default* when *token* is ``None`` or not a recognized source
    name. *campaign* is attached to variants that carry one and ignored
    for the rest.
    """
    if token is None:
        return default
    kind = _QUERY_TOKENS.get(token.strip())
    if kind is None:
        return default
    if kind in _CAMPAIGN_KINDS:
        return DeepLinkSource(kind, campaign)
    return DeepLinkSource(kind)
