"""Matcher configuration.

DeepLinkConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeepLinkConfig:
    """Deep-link matching configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DeepLinkConfig(site_origin="https://example.com")
    """

    # Origin prepended to paths decoded from banner fragments
    site_origin: str = "https://wordpress.com"

    # Query parameters
    source_param: str = "source"
    campaign_param: str = "campaign"
