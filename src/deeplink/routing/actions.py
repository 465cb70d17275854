"""Navigation protocols.

A navigation action is any object matching::

    class OpenStats:
        def perform(self, values, source, router) -> None: ...

No base class required. The matcher checks the shape, not the lineage.

``values`` is the matched route's value bag, ``source`` is whatever
presenting context the caller passes through (opaque to this package),
and ``router`` is a :class:`LinkHandler` an action can use to re-dispatch
another URL, as the app-banner action does with the URL it decodes.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from deeplink.sources import DeepLinkSource


@runtime_checkable
class LinkHandler(Protocol):
    """Anything that can be asked to open a URL."""

    def handle(
        self,
        url: str,
        *,
        should_track: bool = False,
        source: DeepLinkSource | None = None,
    ) -> Any: ...


@runtime_checkable
class NavigationAction(Protocol):
    """Protocol for the handler bound to a route."""

    def perform(self, values: Mapping[str, str], source: Any, router: LinkHandler) -> None: ...
