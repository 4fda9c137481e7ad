"""Countdown state machine for RingTimer.

Phases
------
READY        Full duration on the clock, waiting for the user.
RUNNING      Counting down, one tick per second.
PAUSED       Frozen mid-countdown; ``start`` resumes.
COMPLETED    Reached zero.  Only ``reset`` or a new preset leaves it.

Transitions
-----------
READY → RUNNING                 (start)
RUNNING → PAUSED                (pause)
PAUSED → RUNNING                (start)
RUNNING → COMPLETED             (tick reaches 0)
Any → READY                     (reset / set_preset)

RUNNING is the only phase with a scheduled tick.  Every transition other
than a tick cancels the handle before touching state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .scheduler import QtTickScheduler, TickHandle, TickScheduler


logger = logging.getLogger(__name__)


# ── enums / value types ───────────────────────────────────────────────────


class Phase(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class InvalidConfig(ValueError):
    """Raised for a duration that is not a positive integer of seconds."""


def _validate_seconds(seconds: object) -> int:
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidConfig(f"duration must be an integer, got {seconds!r}")
    if seconds <= 0:
        raise InvalidConfig(f"duration must be positive, got {seconds}")
    return seconds


@dataclass(frozen=True)
class TimerConfig:
    total_seconds: int

    def __post_init__(self) -> None:
        _validate_seconds(self.total_seconds)


@dataclass(frozen=True)
class TimerState:
    """Snapshot handed to observers on every transition."""

    remaining_seconds: int
    phase: Phase


@dataclass(frozen=True)
class Preset:
    label: str
    seconds: int


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_SECONDS = 5 * 60
TICK_INTERVAL_MS = 1000

DEFAULT_PRESETS: tuple[Preset, ...] = (
    Preset("1 min", 60),
    Preset("5 min", 5 * 60),
    Preset("10 min", 10 * 60),
    Preset("15 min", 15 * 60),
    Preset("25 min", 25 * 60),
)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Single countdown timer.

    Signals
    -------
    state_changed(state: TimerState)
        Emitted on every transition: preset change, tick, pause, resume,
        reset and completion.
    completed()
        Emitted exactly once when a countdown reaches zero, after the
        matching ``state_changed``.
    """

    state_changed = pyqtSignal(object)
    completed = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        total_seconds: int = DEFAULT_SECONDS,
        scheduler: TickScheduler | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = TimerConfig(total_seconds)
        self._remaining: int = total_seconds
        self._phase: Phase = Phase.READY
        self._scheduler: TickScheduler = scheduler or QtTickScheduler(self)
        self._tick_handle: TickHandle | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def state(self) -> TimerState:
        return TimerState(self._remaining, self._phase)

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def total_seconds(self) -> int:
        return self._config.total_seconds

    @property
    def is_running(self) -> bool:
        return self._phase == Phase.RUNNING

    @property
    def progress_percent(self) -> float:
        """100 → 0 as the countdown drains."""
        from .render import progress_percent
        return progress_percent(self._remaining, self._config.total_seconds)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def set_preset(self, seconds: int) -> None:
        """Replace the duration and return to READY.

        Raises ``InvalidConfig`` without touching state if *seconds* is
        not a positive integer.
        """
        config = TimerConfig(seconds)
        self._cancel_tick()
        self._config = config
        self._remaining = config.total_seconds
        logger.debug("Preset set to %ds", config.total_seconds)
        self._set_phase(Phase.READY)

    def start(self) -> None:
        """Start from READY or resume from PAUSED."""
        if self._remaining <= 0:
            return
        if self._phase not in (Phase.READY, Phase.PAUSED):
            return
        self._cancel_tick()
        self._tick_handle = self._scheduler.schedule(
            TICK_INTERVAL_MS, self._on_tick,
        )
        self._set_phase(Phase.RUNNING)

    def pause(self) -> None:
        if self._phase != Phase.RUNNING:
            return
        self._cancel_tick()
        self._set_phase(Phase.PAUSED)

    def reset(self) -> None:
        """Cancel the countdown and refill the clock."""
        self._cancel_tick()
        self._remaining = self._config.total_seconds
        self._set_phase(Phase.READY)

    def toggle(self) -> None:
        if self._phase == Phase.RUNNING:
            self.pause()
        else:
            self.start()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._phase != Phase.RUNNING:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._remaining > 0:
            self.state_changed.emit(self.state)
            return

        self._cancel_tick()
        logger.info("Countdown of %ds completed", self._config.total_seconds)
        self._set_phase(Phase.COMPLETED)
        self.completed.emit()

    def _cancel_tick(self) -> None:
        handle, self._tick_handle = self._tick_handle, None
        if handle is not None:
            handle.cancel()

    def _set_phase(self, phase: Phase) -> None:
        if phase != self._phase:
            logger.debug("%s → %s", self._phase.name, phase.name)
        self._phase = phase
        self.state_changed.emit(self.state)
