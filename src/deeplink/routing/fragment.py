"""Fragment extraction for app-banner redirects.

An app banner links to a generic entry point and carries the real
destination percent-encoded in the fragment::

    https://apps.wordpress.com/get/?campaign=qr-code-media#%2Fmedia%2F1234567

The fragment decodes to ``/media/1234567``. The destination is that path
on the site origin, with the outer URL's query parameters merged in::

    https://wordpress.com/media/1234567?campaign=qr-code-media

The campaign is always read from the outer URL, never from the fragment.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import unquote

from deeplink.config import DeepLinkConfig
from deeplink.http.query import QueryParams
from deeplink.http.url import ParsedURL, is_safe_path, parse_url
from deeplink.sources import DeepLinkSource

logger = logging.getLogger("deeplink.banner")

_FRAGMENT_KEY = "fragment"
_URL_KEY = "url"


@dataclass(frozen=True, slots=True)
class BannerRedirect:
    """Where an app-banner link actually points."""

    destination: str
    campaign: str | None = None

    @property
    def source(self) -> DeepLinkSource:
        return DeepLinkSource.banner(self.campaign)


class FragmentExtractor:
    """Resolves destinations encoded in URL fragments.

    Usage::

        extractor = FragmentExtractor()
        redirect = extractor.extract(match.values)
        if redirect is not None:
            router.handle(redirect.destination, source=redirect.source)
    """

    __slots__ = ("_config",)

    def __init__(self, config: DeepLinkConfig | None = None) -> None:
        self._config = config or DeepLinkConfig()

    def campaign(self, query: QueryParams) -> str | None:
        """The campaign named by the outer URL's query string."""
        return query.get(self._config.campaign_param)

    def source(self, parsed: ParsedURL) -> DeepLinkSource:
        """Typed source for a banner match: ``banner(campaign)``."""
        return DeepLinkSource.banner(self.campaign(parsed.query))

    def values(self, parsed: ParsedURL) -> dict[str, str]:
        """Value-bag entries contributed by the fragment, if any."""
        if parsed.fragment is None:
            return {}
        return {_FRAGMENT_KEY: parsed.fragment}

    def extract(self, values: Mapping[str, str]) -> BannerRedirect | None:
        """Resolve the destination from a matched route's value bag.

        Returns ``None`` if the bag has no fragment or the fragment does
        not decode to a path on the site origin.
        """
        fragment = values.get(_FRAGMENT_KEY)
        if not fragment:
            logger.debug("No fragment to extract from %r", values.get(_URL_KEY))
            return None

        outer = parse_url(values.get(_URL_KEY, ""))
        outer_query = outer.query if outer is not None else QueryParams()
        return self.resolve(fragment, outer_query)

    def resolve(self, fragment: str, outer_query: QueryParams) -> BannerRedirect | None:
        """Build the destination URL for a raw *fragment*.

        Query parameters from the fragment come first; outer parameters
        replace fragment parameters with the same name. Every kept
        parameter is copied as written, never re-encoded.
        """
        decoded = unquote(fragment)
        path, _, inner_query = decoded.partition("?")
        if not path.startswith("/"):
            path = "/" + path
        if not is_safe_path(path):
            logger.warning("Ignoring banner fragment %r: not a same-origin path", fragment)
            return None

        outer_pieces = outer_query.raw_pieces()
        outer_keys = {key for key, _ in outer_pieces}
        pieces = [piece for key, piece in QueryParams(inner_query).raw_pieces() if key not in outer_keys]
        pieces.extend(piece for _, piece in outer_pieces)

        destination = self._config.site_origin.rstrip("/") + path
        if pieces:
            destination = f"{destination}?{'&'.join(pieces)}"

        redirect = BannerRedirect(destination=destination, campaign=self.campaign(outer_query))
        logger.debug("Resolved banner fragment %r to %s", fragment, redirect.destination)
        return redirect
