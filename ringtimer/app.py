"""Main application window.

Wires the timer engine to the widget tree and to the sound manager:

- ``state_changed`` → window title, status bar.
- ``completed``     → completion chime (failures are logged, never raised).
- back to READY     → stop any chime still ringing.

Space toggles start/pause, Escape resets.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QStatusBar, QVBoxLayout, QWidget

from .audio.sounds import SoundManager
from .settings import Settings, load_settings, save_settings
from .timer.engine import InvalidConfig, Phase, TimerEngine, TimerState
from .timer.render import format_time
from .timer.scheduler import TickScheduler
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)

APP_NAME = "RingTimer"

STATUS_MESSAGES: dict[Phase, str] = {
    Phase.READY:     "Pick a duration and press Start.",
    Phase.RUNNING:   "Focusing…",
    Phase.PAUSED:    "Paused. Press Space to resume.",
    Phase.COMPLETED: "Time's up!",
}


class TimerApp(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        sound_manager: SoundManager | None = None,
        scheduler: TickScheduler | None = None,
        persist_settings: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        self._persist_settings = persist_settings
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── engine ────────────────────────────────────────────────────
        try:
            self._engine = TimerEngine(
                self,
                total_seconds=self._settings.default_seconds,
                scheduler=scheduler,
            )
        except InvalidConfig as e:
            logger.warning("Falling back to default duration: %s", e)
            self._engine = TimerEngine(self, scheduler=scheduler)

        # ── sound manager ─────────────────────────────────────────────
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        # ── widgets ───────────────────────────────────────────────────
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        self._timer_widget = TimerWidget(self._engine, central)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(central)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        self.setStyleSheet(build_stylesheet())
        self._apply_always_on_top(self._settings.always_on_top)
        self._setup_actions()

        # ── signal wiring ─────────────────────────────────────────────
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.completed.connect(self._on_completed)
        self._timer_widget.preset_selected.connect(self._on_preset_selected)
        self._timer_widget.toggle_clicked.connect(self._play_click)

        self._on_state_changed(self._engine.state)

    # ══════════════════════════════════════════════════════════════════
    #  PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: TimerState) -> None:
        self._status_bar.showMessage(STATUS_MESSAGES[state.phase])

        if state.phase in (Phase.RUNNING, Phase.PAUSED):
            self.setWindowTitle(
                f"{format_time(state.remaining_seconds)} — {APP_NAME}"
            )
        else:
            self.setWindowTitle(APP_NAME)

        if state.phase == Phase.READY:
            self._sound_manager.stop()

    def _on_completed(self) -> None:
        if not self._sound_manager.play("timer_complete"):
            logger.info("Completion chime not played")

    def _on_preset_selected(self, seconds: int) -> None:
        self._settings.default_seconds = seconds
        self._save_settings()

    # ══════════════════════════════════════════════════════════════════
    #  ACTIONS / KEYBOARD
    # ══════════════════════════════════════════════════════════════════

    def _setup_actions(self) -> None:
        on_top = QAction("Always on Top", self)
        on_top.setCheckable(True)
        on_top.setChecked(self._settings.always_on_top)
        on_top.setShortcut(QKeySequence("Ctrl+Shift+T"))
        on_top.triggered.connect(self._toggle_always_on_top)
        self.addAction(on_top)

    def _play_click(self) -> None:
        self._sound_manager.play("click")

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        self._timer_widget.toggle()

    def _on_escape(self) -> None:
        self._engine.reset()

    def _toggle_always_on_top(self) -> None:
        self._settings.always_on_top = not self._settings.always_on_top
        self._apply_always_on_top(self._settings.always_on_top)
        self._save_settings()

    def _apply_always_on_top(self, on_top: bool) -> None:
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on_top)
        if self.isVisible():
            self.show()  # re-show after flag change

    def _save_settings(self) -> None:
        if not self._persist_settings:
            return
        try:
            save_settings(self._settings)
        except OSError as e:
            logger.warning("Could not save settings: %s", e)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._engine.reset()
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        self._save_settings()
        event.accept()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
