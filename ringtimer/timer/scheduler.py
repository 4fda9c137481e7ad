"""Recurring tick scheduling for the timer engine.

The engine never owns a ``QTimer`` directly.  It asks a scheduler for a
recurring callback and keeps the returned handle; cancelling the handle
guarantees the callback never runs again, even if Qt has already queued
a timeout event for it.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


class TickHandle(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    def schedule(
        self, interval_ms: int, callback: Callable[[], None],
    ) -> TickHandle: ...


class QtTickHandle:
    """A running ``QTimer`` plus an active flag checked on every fire."""

    def __init__(
        self,
        interval_ms: int,
        callback: Callable[[], None],
        parent: QObject | None = None,
    ) -> None:
        self._callback = callback
        self._active = True
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._timer.start()

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        # Flag first: a timeout already in the event queue must see it.
        self._active = False
        self._timer.stop()
        self._timer.timeout.disconnect(self._fire)
        self._timer.deleteLater()

    def _fire(self) -> None:
        if self._active:
            self._callback()


class QtTickScheduler:
    """Production scheduler backed by the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(
        self, interval_ms: int, callback: Callable[[], None],
    ) -> QtTickHandle:
        return QtTickHandle(interval_ms, callback, self._parent)
