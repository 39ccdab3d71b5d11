"""A small publish/subscribe bus relaying server messages to views."""

from __future__ import annotations

import itertools
from collections.abc import Callable

Handler = Callable[[str], None]


class EventBus:
    """Delivers every published string to all connected handlers."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Handler] = {}
        self._ids = itertools.count(1)

    def connect(self, handler: Handler) -> int:
        """Subscribe *handler* and return its id."""
        handler_id = next(self._ids)
        self._subscribers[handler_id] = handler
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Unsubscribe a handler; unknown ids are ignored."""
        self._subscribers.pop(handler_id, None)

    def publish(self, message: str) -> None:
        """Send *message* to every subscriber."""
        for handler in list(self._subscribers.values()):
            handler(message)