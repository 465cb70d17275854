"""URL splitting for route matching.

Splits an incoming URL into the pieces the matcher looks at: the path
components, the query parameters, and the raw fragment. Scheme and host
are ignored for matching.

Usage::

    from deeplink.http.url import parse_url

    parsed = parse_url("https://wordpress.com/me/bobsmith?source=widget")
    parsed.components        # ["me", "bobsmith"]
    parsed.query["source"]   # "widget"
"""

from dataclasses import dataclass, field
from urllib.parse import unquote, urlsplit

from deeplink.http.query import QueryParams


def split_path(path: str) -> list[str]:
    """Split a ``/``-delimited path into its components.

    The empty component produced by a leading slash is dropped; a trailing
    slash is kept as an explicit empty final component::

        "/me/bobsmith"  -> ["me", "bobsmith"]
        "/me/share/"    -> ["me", "share", ""]
        "/"             -> [""]
        ""              -> []
    """
    if not path:
        return []
    parts = path.split("/")
    if parts[0] == "":
        parts = parts[1:]
    return parts


def path_components(path: str) -> list[str]:
    """Split a URL path like :func:`split_path`, then percent-decode each part.

    Decoding happens after splitting, so an encoded ``%2F`` stays inside
    its component.
    """
    return [unquote(part) for part in split_path(path)]


@dataclass(frozen=True, slots=True)
class ParsedURL:
    """The parts of an incoming URL the matcher cares about."""

    url: str
    components: tuple[str, ...] = ()
    query: QueryParams = field(default_factory=QueryParams)
    fragment: str | None = None


def parse_url(url: str) -> ParsedURL | None:
    """Parse *url*, returning ``None`` when it cannot be split.

    ``fragment`` is the raw, still percent-encoded text after ``#``, or
    ``None`` when the URL has no ``#`` at all.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    fragment = parts.fragment if "#" in url else None
    return ParsedURL(
        url=url,
        components=tuple(path_components(parts.path)),
        query=QueryParams(parts.query),
        fragment=fragment,
    )


def is_safe_path(path: str) -> bool:
    """Check whether *path* is a relative path on the same origin.

    - Must be a non-empty string
    - Must start with ``/``
    - Must **not** start with ``//`` (protocol-relative URL)
    - Must **not** contain ``://`` (absolute URL with scheme)

    Examples::

        >>> is_safe_path("/media/1234567")
        True
        >>> is_safe_path("//evil.com")
        False
        >>> is_safe_path("https://evil.com")
        False
    """
    if not path or not isinstance(path, str):
        return False
    if not path.startswith("/"):
        return False
    if path.startswith("//"):
        return False
    return "://" not in path
