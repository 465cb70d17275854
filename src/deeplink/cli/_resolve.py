"""Route table resolution — resolves ``"module:attribute"`` strings to matchers.

Shared utility used by ``deeplink routes`` and ``deeplink match`` to locate
a route table from a user-supplied import string.
"""

import importlib
from collections.abc import Iterable

from deeplink.routing.matcher import RouteMatcher
from deeplink.routing.route import Route


def _coerce(obj: object, import_string: str) -> RouteMatcher | None:
    if isinstance(obj, RouteMatcher):
        return obj
    if isinstance(obj, Route):
        return RouteMatcher([obj])
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes)):
        routes = list(obj)
        if all(isinstance(route, Route) for route in routes):
            return RouteMatcher(routes)
        msg = f"{import_string!r} contains items that are not deeplink Routes"
        raise TypeError(msg)
    return None


def resolve_matcher(import_string: str) -> RouteMatcher:
    """Resolve an import string to a :class:`RouteMatcher`.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"routes"`` (e.g. ``"myapp.links"`` resolves to
    ``myapp.links.routes``).

    The attribute may be a ``RouteMatcher``, a single ``Route``, an
    iterable of ``Route``, or a zero-argument factory returning one of
    those.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a route table.
        ConfigurationError: If a route list disagrees with the default
            matcher config (e.g. a banner route built with a custom config).
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    matcher = _coerce(obj, import_string)
    if matcher is not None:
        return matcher

    if callable(obj):
        try:
            produced = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc
        matcher = _coerce(produced, import_string)
        if matcher is not None:
            return matcher
        obj = produced

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route table"
    raise TypeError(msg)
