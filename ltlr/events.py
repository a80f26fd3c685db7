"""A simple publish/subscribe event handler."""

from __future__ import annotations

from typing import Any, Callable

from .deque import Deque

Listener = Callable[[Any], None]


class EventHandler:
    """Calls every subscribed listener, in subscription order, when raised."""

    def __init__(self) -> None:
        self._listeners: Deque[Listener] = Deque()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.push_front(listener)

    def raise_event(self, arguments: Any) -> None:
        for listener in self._listeners:
            listener(arguments)