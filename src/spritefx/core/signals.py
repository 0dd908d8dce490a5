"""
Minimal publish/subscribe.

A Slot keeps an ordered list of listeners and calls them synchronously
when a value is emitted.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Slot(Generic[T]):
    """
    Synchronous event slot.

    Usage:
        changed = Slot()

        @changed.subscribe
        def on_changed(value):
            ...

        changed.emit(42)

    Listeners run in registration order. An exception raised by a
    listener propagates out of emit() and later listeners are not called.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[T | None], None]] = []

    def subscribe(self, fn: Callable[[T | None], None]) -> Callable[[T | None], None]:
        """
        Register a listener.

        Returns:
            The listener itself, so subscribe() works as a decorator
        """
        self._listeners.append(fn)
        return fn

    def unsubscribe(self, fn: Callable[[T | None], None]) -> bool:
        """
        Remove the first registration of a listener.

        Returns:
            True if removed, False if it was not subscribed
        """
        try:
            self._listeners.remove(fn)
        except ValueError:
            return False
        return True

    def emit(self, value: T | None = None) -> None:
        """Call every listener with value."""
        # Listeners subscribed during this emit wait for the next one
        for listener in list(self._listeners):
            listener(value)

    def clear(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
