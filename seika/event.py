"""A small observer pattern: events that notify registered observers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

MAX_OBSERVERS = 8


@dataclass
class SubjectNotifyPayload:
    """Data handed to observers when an event fires."""

    data: Any = None


class Observer:
    """Wraps a callback that receives notification payloads."""

    def __init__(self, on_notify: Callable[[Any], None]) -> None:
        if not callable(on_notify):
            raise TypeError("on_notify must be callable")
        self.on_notify = on_notify

    def notify(self, payload: Any) -> None:
        self.on_notify(payload)


class Event:
    """A subscribable event holding fewer than ``MAX_OBSERVERS`` observers."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def register_observer(self, observer: Observer) -> bool:
        """Subscribe ``observer``; raise OverflowError at the observer limit."""
        if observer is None:
            raise TypeError("observer must not be None")
        if len(self._observers) + 1 >= MAX_OBSERVERS:
            raise OverflowError(
                "Reached max observer count, consider increasing 'MAX_OBSERVERS'!"
            )
        self._observers.append(observer)
        return True

    def unregister_observer(self, observer: Observer) -> bool:
        """Unsubscribe ``observer``; return whether it was registered."""
        try:
            self._observers.remove(observer)
        except ValueError:
            return False
        return True

    def notify_observers(self, payload: Any = None) -> None:
        """Call every registered observer with ``payload`` in registration order."""
        for observer in list(self._observers):
            observer.notify(payload)

    def __len__(self) -> int:
        return len(self._observers)