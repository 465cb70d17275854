"""deeplink — match incoming deep links against a route table.

Given a universal link, custom-scheme URL, or app-banner redirect, find
every registered route whose template matches, extract the placeholder
values, and hand the result to a navigation action.

Basic usage::

    from deeplink import Route, RouteMatcher

    matcher = RouteMatcher([
        Route("/me/:account", action=OpenAccount()),
        Route("/stats/:site", action=OpenStats()),
    ])

    for match in matcher.routes_matching("https://wordpress.com/me/bobsmith"):
        print(match.values)  # {"account": "bobsmith", "url": "https://..."}

Dispatching the first match::

    from deeplink import LinkRouter

    router = LinkRouter(matcher)
    router.handle("https://wordpress.com/stats/example.com?source=widget")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DeepLinkConfig",
    "DeepLinkError",
    "DeepLinkSection",
    "DeepLinkSource",
    "LinkHandler",
    "LinkRouter",
    "MatchedRoute",
    "MatchedRouteKey",
    "NavigationAction",
    "Route",
    "RouteMatcher",
    "SourceKind",
    "app_banner_route",
    "resolve_source",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import deeplink`` fast while providing a clean top-level API.
    """
    if name == "RouteMatcher":
        from deeplink.routing.matcher import RouteMatcher

        return RouteMatcher

    if name in ("Route", "MatchedRoute", "MatchedRouteKey", "DeepLinkSection"):
        from deeplink.routing import route as _route

        return getattr(_route, name)

    if name in ("LinkHandler", "NavigationAction"):
        from deeplink.routing import actions as _actions

        return getattr(_actions, name)

    if name in ("DeepLinkSource", "SourceKind", "resolve_source"):
        from deeplink import sources as _sources

        return getattr(_sources, name)

    if name == "LinkRouter":
        from deeplink.navigation import LinkRouter

        return LinkRouter

    if name == "app_banner_route":
        from deeplink.banner import app_banner_route

        return app_banner_route

    if name == "DeepLinkConfig":
        from deeplink.config import DeepLinkConfig

        return DeepLinkConfig

    if name in ("DeepLinkError", "ConfigurationError"):
        from deeplink import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
