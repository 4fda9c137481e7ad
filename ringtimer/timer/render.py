"""Presentation projection of the timer state.

Everything here is a pure function of a ``TimerState`` and the total
duration, so the widgets stay thin and the mapping is testable without a
running ``QApplication``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .engine import Phase, TimerState


STATUS_LABELS: dict[Phase, str] = {
    Phase.READY:     "Ready",
    Phase.RUNNING:   "Focus",
    Phase.PAUSED:    "Paused",
    Phase.COMPLETED: "Completed",
}


@dataclass(frozen=True)
class RenderedState:
    time_text: str
    percent: float
    status: str
    control: str


def format_time(remaining_seconds: int) -> str:
    """``65`` → ``"01:05"``."""
    minutes, seconds = divmod(max(0, remaining_seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def progress_percent(remaining_seconds: int, total_seconds: int) -> float:
    """Fraction of the duration still on the clock, as 0..100."""
    if total_seconds <= 0:
        return 0.0
    pct = remaining_seconds / total_seconds * 100
    return max(0.0, min(100.0, pct))


def status_label(phase: Phase) -> str:
    return STATUS_LABELS[phase]


def control_label(phase: Phase) -> str:
    """Text for the start/pause button."""
    return "Pause" if phase == Phase.RUNNING else "Start"


def stroke_offset(percent: float, circumference: float) -> float:
    """Dash offset hiding the drained part of a stroked circle.

    This is the SVG ``stroke-dashoffset`` form of the same progress that
    :func:`arc_span` expresses as a Qt span angle. The QPainter ring uses
    ``arc_span``; ``stroke_offset`` serves renderers that stroke a full
    circle with a dash pattern.
    """
    percent = max(0.0, min(100.0, percent))
    return circumference * (1 - percent / 100)


def arc_span(percent: float) -> int:
    """Qt span angle (1/16 deg) for the filled arc, clockwise from 12."""
    percent = max(0.0, min(100.0, percent))
    return -int(percent / 100 * 360 * 16)


def render(state: TimerState, total_seconds: int) -> RenderedState:
    return RenderedState(
        time_text=format_time(state.remaining_seconds),
        percent=progress_percent(state.remaining_seconds, total_seconds),
        status=status_label(state.phase),
        control=control_label(state.phase),
    )
