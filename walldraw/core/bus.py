"""Synchronous publish/subscribe for session signals."""

from __future__ import annotations
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class SignalBus:
    """
    Delivers signals to listeners registered for the signal's class.

    Listeners run in registration order, on the emitting thread. A
    listener that raises is logged and the remaining listeners still run.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._once: dict[type, list[Listener]] = {}

    def on(self, kind: type, callback: Listener) -> Callable[[], None]:
        """Subscribe to a signal class. Returns an unsubscribe function."""
        self._listeners.setdefault(kind, []).append(callback)
        return lambda: self.off(kind, callback)

    def once(self, kind: type, callback: Listener) -> Callable[[], None]:
        """Subscribe for the next signal of this class only."""
        self._once.setdefault(kind, []).append(callback)
        return lambda: self._remove(self._once, kind, callback)

    def off(self, kind: type, callback: Listener) -> None:
        self._remove(self._listeners, kind, callback)

    def emit(self, signal: Any) -> None:
        kind = type(signal)
        for callback in list(self._listeners.get(kind, [])):
            self._call(callback, signal)

        pending = self._once.pop(kind, [])
        for callback in pending:
            self._call(callback, signal)

    def clear(self, kind: type | None = None) -> None:
        """Drop listeners for one signal class, or all of them."""
        if kind is None:
            self._listeners.clear()
            self._once.clear()
        else:
            self._listeners.pop(kind, None)
            self._once.pop(kind, None)

    def listener_count(self, kind: type) -> int:
        return len(self._listeners.get(kind, [])) + len(self._once.get(kind, []))

    def _call(self, callback: Listener, signal: Any) -> None:
        try:
            callback(signal)
        except Exception:
            logger.exception("Listener for %s failed", type(signal).__name__)

    @staticmethod
    def _remove(table: dict[type, list[Listener]], kind: type, callback: Listener) -> None:
        callbacks = table.get(kind)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)
