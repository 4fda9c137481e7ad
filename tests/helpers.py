"""Shared test helpers for RingTimer."""

from typing import Callable


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualHandle:
    def __init__(self, interval_ms: int, callback: Callable[[], None], now: int):
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due = now + interval_ms
        self.active = True

    def cancel(self):
        self.active = False


class ManualScheduler:
    """Tick scheduler driven by ``advance(ms)`` instead of a clock."""

    def __init__(self):
        self.now = 0
        self.handles: list[ManualHandle] = []

    def schedule(self, interval_ms, callback):
        handle = ManualHandle(interval_ms, callback, self.now)
        self.handles.append(handle)
        return handle

    @property
    def active_handles(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.active]

    def advance(self, ms: int) -> None:
        """Move simulated time forward, firing every due callback in order."""
        target = self.now + ms
        while True:
            due = [h for h in self.active_handles if h.next_due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.next_due)
            self.now = handle.next_due
            handle.next_due += handle.interval_ms
            handle.callback()
        self.now = target

    def advance_seconds(self, seconds: int) -> None:
        self.advance(seconds * 1000)
