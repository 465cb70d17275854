"""Test utilities for deeplink route tables.

Stand-ins for the collaborators a route table talks to::

    from deeplink.testing import NoopAction, RecordingRouter

    route = Route("/me/:account", action=NoopAction())
    router = RecordingRouter()
    matcher.first_match(url).perform(router)
    assert router.handled == [...]
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from deeplink.sources import DeepLinkSource


@dataclass(frozen=True, slots=True)
class HandledLink:
    """One ``handle()`` call seen by a :class:`RecordingRouter`."""

    url: str
    should_track: bool = False
    source: DeepLinkSource | None = None


@dataclass(slots=True)
class RecordingRouter:
    """A ``LinkHandler`` that records URLs instead of opening them."""

    handled: list[HandledLink] = field(default_factory=list)

    def handle(
        self,
        url: str,
        *,
        should_track: bool = False,
        source: DeepLinkSource | None = None,
    ) -> None:
        self.handled.append(HandledLink(url=url, should_track=should_track, source=source))

    @property
    def last(self) -> HandledLink | None:
        return self.handled[-1] if self.handled else None


class NoopAction:
    """A navigation action that does nothing."""

    def perform(self, values: Mapping[str, str], source: Any, router: Any) -> None:
        pass


@dataclass(slots=True)
class RecordingAction:
    """A navigation action that records the value bags it receives."""

    calls: list[dict[str, str]] = field(default_factory=list)
    contexts: list[Any] = field(default_factory=list)

    def perform(self, values: Mapping[str, str], source: Any, router: Any) -> None:
        self.calls.append(dict(values))
        self.contexts.append(source)
