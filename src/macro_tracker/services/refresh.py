"""Cross-component refresh notifications.

Mutating services emit an event after they write; read services subscribe
to drop whatever they cached for the affected user.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import StrEnum


class RefreshEvent(StrEnum):
    """Named refresh events."""

    TODAY = "today"
    MEALS = "meals"
    WEIGHT = "weight"
    GOALS = "goals"
    PROFILE = "profile"


RefreshCallback = Callable[..., Awaitable[None] | None]


@dataclass
class RefreshBus:
    """Maps refresh events to sets of subscriber callbacks."""

    _subscribers: dict[RefreshEvent, set[RefreshCallback]] = field(
        default_factory=dict
    )

    def subscribe(self, event: RefreshEvent, callback: RefreshCallback) -> None:
        """Register a callback for an event."""
        self._subscribers.setdefault(event, set()).add(callback)

    def unsubscribe(self, event: RefreshEvent, callback: RefreshCallback) -> None:
        """Remove a callback; the event entry goes away with its last subscriber."""
        subscribers = self._subscribers.get(event)
        if subscribers is None:
            return
        subscribers.discard(callback)
        if not subscribers:
            del self._subscribers[event]

    def subscriber_count(self, event: RefreshEvent) -> int:
        """Return the number of callbacks registered for an event."""
        return len(self._subscribers.get(event, ()))

    async def emit(self, event: RefreshEvent, *args: object) -> None:
        """Invoke every current subscriber once and wait for all of them."""
        subscribers = tuple(self._subscribers.get(event, ()))
        if not subscribers:
            return
        await asyncio.gather(*(_invoke(callback, args) for callback in subscribers))


async def _invoke(callback: RefreshCallback, args: tuple[object, ...]) -> None:
    result = callback(*args)
    if inspect.isawaitable(result):
        await result
