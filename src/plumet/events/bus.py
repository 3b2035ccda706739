"""Synchronous event bus connecting the builder and watcher to presenters."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe dispatch of build events.

    A listener is registered either for one or more event classes or for every
    event. ``emit`` calls catch-all listeners first, then typed ones, each group
    in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, callback: Listener, *event_types: type) -> Callable[[], None]:
        """Register *callback* for *event_types*; returns a function that removes it."""
        for event_type in event_types:
            self._listeners.setdefault(event_type, []).append(callback)

        def unsubscribe() -> None:
            for event_type in event_types:
                listeners = self._listeners.get(event_type, [])
                if callback in listeners:
                    listeners.remove(callback)

        return unsubscribe

    def on_all(self, callback: Listener) -> Callable[[], None]:
        """Register *callback* for every event; returns a function that removes it."""
        self._global_listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._global_listeners:
                self._global_listeners.remove(callback)

        return unsubscribe

    def emit(self, event: Any) -> int:
        """Dispatch *event*; returns how many listeners received it."""
        listeners = [*self._global_listeners, *self._listeners.get(type(event), [])]
        for cb in listeners:
            cb(event)
        return len(listeners)
