"""Route templates — parsing and component-wise matching.

A template is a ``/``-delimited path whose segments are either literal
tokens or ``:name`` placeholders::

    "/me"                      -> [me]
    "/me/:account"             -> [me, :account]
    "/me/:account/share/"      -> [me, :account, share, ""]

Matching is exact-arity: the URL must have as many path components as
the template has segments. There are no wildcards that absorb a
variable number of components.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from deeplink.errors import ConfigurationError
from deeplink.http.url import split_path

PLACEHOLDER_PREFIX = ":"

# Value-bag keys the matcher fills in itself
RESERVED_KEYS = frozenset({"url", "source", "fragment"})


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route template.

    Literal:      ``share``     (is_param=False)
    Placeholder:  ``:account``  (is_param=True, param_name="account")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None

    def matches(self, component: str) -> bool:
        """Placeholders accept any component; literals must be equal."""
        return self.is_param or self.value == component


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A parsed route template."""

    template: str
    segments: tuple[PathSegment, ...]

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Placeholder names in template order."""
        return tuple(seg.param_name for seg in self.segments if seg.param_name is not None)

    def match(self, components: Sequence[str]) -> dict[str, str] | None:
        """Match URL path components against this template.

        Returns the placeholder bindings (possibly empty) on success, or
        ``None`` if the component count differs or a literal segment
        does not equal its component.
        """
        if len(components) != len(self.segments):
            return None

        bindings: dict[str, str] = {}
        for seg, component in zip(self.segments, components, strict=True):
            if not seg.matches(component):
                return None
            if seg.param_name is not None:
                bindings[seg.param_name] = component
        return bindings


def parse_path(template: str) -> RoutePattern:
    """Parse a route template into a :class:`RoutePattern`.

    Raises ``ConfigurationError`` if the template is empty, declares the
    same placeholder twice, names a placeholder after a reserved
    value-bag key, or contains a bare ``:``.
    """
    if not template:
        msg = "Route path must not be empty."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(template):
        if not part.startswith(PLACEHOLDER_PREFIX):
            segments.append(PathSegment(value=part))
            continue

        name = part[len(PLACEHOLDER_PREFIX) :]
        if not name:
            msg = f"Route {template!r} has a placeholder with no name."
            raise ConfigurationError(msg)
        if name in RESERVED_KEYS:
            msg = (
                f"Route {template!r} uses reserved placeholder ':{name}'. "
                f"Reserved keys: {', '.join(sorted(RESERVED_KEYS))}."
            )
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route {template!r} declares placeholder ':{name}' more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))

    return RoutePattern(template=template, segments=tuple(segments))
