"""deeplink exception hierarchy.

Route definitions, the matcher, and the CLI raise and catch the same
types. Matching itself never raises: no match, malformed URLs, and
unknown source tokens are ordinary return values.
"""


class DeepLinkError(Exception):
    """Base for all deeplink-specific errors."""


class ConfigurationError(DeepLinkError):
    """Raised when a route definition is invalid.

    Raised while the ``Route`` is constructed, so a broken template
    surfaces at registration time instead of on the first request.
    """
