"""Main timer card.

Layout (top → bottom):
    - Preset chips (one per duration, exactly one checked)
    - ProgressRing (large, centred)
    - Reset + Start/Pause buttons

The widget owns every element/style concern.  It only reads engine state
through the ``state_changed`` signal and the pure projection in
``timer.render``.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFrame,
    QSizePolicy, QButtonGroup, QStyle,
)

from ..timer.engine import TimerEngine, TimerState, Phase, Preset, DEFAULT_PRESETS
from ..timer.render import render
from .progress_ring import ProgressRing


class TimerWidget(QWidget):
    """The timer card shown in the main window."""

    preset_selected = pyqtSignal(int)  # seconds
    toggle_clicked = pyqtSignal()      # user asked to start or pause

    def __init__(
        self,
        engine: TimerEngine,
        parent: QWidget | None = None,
        *,
        presets: tuple[Preset, ...] = DEFAULT_PRESETS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._presets = presets
        self._chips: dict[int, QPushButton] = {}
        self._build_ui()
        self._connect_signals()
        self._mark_active_chip(engine.total_seconds)
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── preset chips ─────────────────────────────────────────────
        chip_row = QHBoxLayout()
        chip_row.setSpacing(8)
        chip_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._chip_group = QButtonGroup(self)
        self._chip_group.setExclusive(True)
        for preset in self._presets:
            chip = QPushButton(preset.label, card)
            chip.setObjectName("presetChip")
            chip.setCheckable(True)
            chip.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            chip.setToolTip(f"{preset.seconds // 60} minutes")
            self._chip_group.addButton(chip, preset.seconds)
            self._chips[preset.seconds] = chip
            chip_row.addWidget(chip)
        layout.addLayout(chip_row)

        layout.addSpacing(12)

        # ── progress ring ────────────────────────────────────────────
        ring_container = QHBoxLayout()
        ring_container.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(320, 320)
        ring_container.addWidget(self._ring)
        layout.addLayout(ring_container)

        layout.addSpacing(16)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("dangerButton")
        self._reset_btn.setToolTip("Reset (Esc)")

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")
        self._start_pause_btn.setToolTip("Start / Pause (Space)")

        # Space and Escape belong to the window, not to a focused button
        for btn in (self._reset_btn, self._start_pause_btn):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._chip_group.idClicked.connect(self._on_chip_clicked)

        self._engine.state_changed.connect(self._on_state_changed)

    # ── public ────────────────────────────────────────────────────────────

    def toggle(self) -> None:
        """Start or pause, as the Start/Pause button does."""
        if self._engine.phase != Phase.COMPLETED:
            self.toggle_clicked.emit()
        self._engine.toggle()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_chip_clicked(self, seconds: int) -> None:
        self._engine.set_preset(seconds)
        self._mark_active_chip(seconds)
        self.preset_selected.emit(seconds)

    def _on_state_changed(self, state: TimerState) -> None:
        view = render(state, self._engine.total_seconds)

        self._ring.set_time_text(view.time_text)
        self._ring.set_percent(view.percent)
        self._ring.set_status_text(view.status)
        if state.phase != self._ring.phase:
            self._ring.apply_phase(state.phase)

        running = state.phase == Phase.RUNNING
        self._start_pause_btn.setText(view.control)
        icon = (
            QStyle.StandardPixmap.SP_MediaPause if running
            else QStyle.StandardPixmap.SP_MediaPlay
        )
        self._start_pause_btn.setIcon(self.style().standardIcon(icon))
        self._start_pause_btn.setEnabled(state.remaining_seconds > 0)

        # Dynamic property drives the QSS for the running look
        if self._start_pause_btn.property("running") != running:
            self._start_pause_btn.setProperty("running", running)
            self._start_pause_btn.style().unpolish(self._start_pause_btn)
            self._start_pause_btn.style().polish(self._start_pause_btn)

    def _mark_active_chip(self, seconds: int) -> None:
        chip = self._chips.get(seconds)
        if chip is not None:
            chip.setChecked(True)
            return
        # Duration not among the presets: no chip is active
        self._chip_group.setExclusive(False)
        for c in self._chips.values():
            c.setChecked(False)
        self._chip_group.setExclusive(True)
