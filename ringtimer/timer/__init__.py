"""Timer package."""

from .engine import (
    TimerEngine,
    TimerConfig,
    TimerState,
    Phase,
    Preset,
    InvalidConfig,
    DEFAULT_SECONDS,
    DEFAULT_PRESETS,
)
from .render import (
    format_time,
    progress_percent,
    status_label,
    control_label,
    render,
)
from .scheduler import QtTickScheduler

__all__ = [
    "TimerEngine",
    "TimerConfig",
    "TimerState",
    "Phase",
    "Preset",
    "InvalidConfig",
    "DEFAULT_SECONDS",
    "DEFAULT_PRESETS",
    "format_time",
    "progress_percent",
    "status_label",
    "control_label",
    "render",
    "QtTickScheduler",
]
