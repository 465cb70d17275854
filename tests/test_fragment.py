"""Tests for deeplink.routing.fragment — banner fragment extraction."""

import pytest

from deeplink.config import DeepLinkConfig
from deeplink.http.query import QueryParams
from deeplink.http.url import parse_url
from deeplink.routing.fragment import BannerRedirect, FragmentExtractor
from deeplink.sources import DeepLinkSource

BANNER_URL = "https://apps.wordpress.com/get/?campaign=qr-code-media#%2Fmedia%2F1234567"


class TestExtract:
    def test_banner_destination(self) -> None:
        redirect = FragmentExtractor().extract({"url": BANNER_URL, "fragment": "%2Fmedia%2F1234567"})

        assert redirect == BannerRedirect(
            destination="https://wordpress.com/media/1234567?campaign=qr-code-media",
            campaign="qr-code-media",
        )
        assert redirect.source == DeepLinkSource.banner("qr-code-media")

    def test_no_fragment(self) -> None:
        assert FragmentExtractor().extract({"url": "https://apps.wordpress.com/get/"}) is None

    def test_empty_fragment(self) -> None:
        assert FragmentExtractor().extract({"url": "https://apps.wordpress.com/get/#", "fragment": ""}) is None

    def test_missing_url_value(self) -> None:
        redirect = FragmentExtractor().extract({"fragment": "%2Fread"})
        assert redirect == BannerRedirect(destination="https://wordpress.com/read", campaign=None)


class TestResolve:
    def test_inner_query_kept(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fread%3Ftab%3Dlikes", QueryParams("campaign=qr"))
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/read?tab=likes&campaign=qr"

    def test_outer_query_overrides_inner(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fread%3Fcampaign%3Dinner", QueryParams("campaign=outer"))
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/read?campaign=outer"
        assert redirect.campaign == "outer"

    def test_no_query(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fmedia%2F1", QueryParams())
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/media/1"
        assert redirect.campaign is None

    def test_missing_leading_slash_added(self) -> None:
        redirect = FragmentExtractor().resolve("media%2F1", QueryParams())
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/media/1"

    def test_unencoded_fragment(self) -> None:
        redirect = FragmentExtractor().resolve("/media/1", QueryParams())
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/media/1"

    @pytest.mark.parametrize("fragment", ["%2F%2Fevil.com%2Fx", "https%3A%2F%2Fevil.com%2Fx"])
    def test_off_site_destinations_rejected(self, fragment: str) -> None:
        assert FragmentExtractor().resolve(fragment, QueryParams()) is None

    def test_custom_origin(self) -> None:
        extractor = FragmentExtractor(DeepLinkConfig(site_origin="https://example.com/"))
        redirect = extractor.resolve("%2Fmedia%2F1", QueryParams())
        assert redirect is not None
        assert redirect.destination == "https://example.com/media/1"

    def test_custom_campaign_param(self) -> None:
        extractor = FragmentExtractor(DeepLinkConfig(campaign_param="utm_campaign"))
        redirect = extractor.resolve("%2Fread", QueryParams("utm_campaign=spring"))
        assert redirect is not None
        assert redirect.campaign == "spring"

    def test_bare_inner_key_kept_as_written(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fread%3Fpreview", QueryParams("source=a+b"))
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/read?preview&source=a+b"

    def test_inner_values_not_reencoded(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fread%3Fnext%3D%2Fx", QueryParams())
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/read?next=/x"

    def test_outer_values_copied_verbatim(self) -> None:
        redirect = FragmentExtractor().resolve("%2Fread", QueryParams("campaign=spring%20sale"))
        assert redirect is not None
        assert redirect.destination == "https://wordpress.com/read?campaign=spring%20sale"
        assert redirect.campaign == "spring sale"


class TestMatchHelpers:
    def test_values_from_fragment(self) -> None:
        parsed = parse_url(BANNER_URL)
        assert parsed is not None
        assert FragmentExtractor().values(parsed) == {"fragment": "%2Fmedia%2F1234567"}

    def test_values_without_fragment(self) -> None:
        parsed = parse_url("https://apps.wordpress.com/get/")
        assert parsed is not None
        assert FragmentExtractor().values(parsed) == {}

    def test_source_uses_outer_campaign(self) -> None:
        parsed = parse_url("https://apps.wordpress.com/get/?campaign=outer#%2Fread%3Fcampaign%3Dinner")
        assert parsed is not None
        assert FragmentExtractor().source(parsed) == DeepLinkSource.banner("outer")
