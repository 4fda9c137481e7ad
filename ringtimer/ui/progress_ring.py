"""Circular progress ring widget rendered with QPainter.

- The arc depletes clockwise from 12 o'clock as the countdown drains.
- Colour-coded by phase (running=coral, paused=gray, completed=green).
- Shows MM:SS in bold text at the centre plus a status label.
- Gentle pulse while ready, glow while running.
- Sparkle burst when a countdown completes.
"""

from __future__ import annotations

import math
import random

from PyQt6.QtCore import Qt, QRectF, QPointF, QTimer, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from ..timer.engine import Phase
from ..timer.render import arc_span
from .styles import PHASE_COLORS, PALETTE


# ── helpers ──────────────────────────────────────────────────────────────────

def _lerp_color(c1: QColor, c2: QColor, t: float) -> QColor:
    """Linearly interpolate between two QColors."""
    t = max(0.0, min(1.0, t))
    return QColor(
        int(c1.red()   + (c2.red()   - c1.red())   * t),
        int(c1.green() + (c2.green() - c1.green()) * t),
        int(c1.blue()  + (c2.blue()  - c1.blue())  * t),
        int(c1.alpha() + (c2.alpha() - c1.alpha()) * t),
    )


# ── sparkle particle ────────────────────────────────────────────────────────

class _Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "color", "size")

    def __init__(self, cx: float, cy: float, color: QColor) -> None:
        angle = random.uniform(0, 2 * math.pi)
        speed = random.uniform(2.0, 6.0)
        self.x = cx
        self.y = cy
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed
        self.life = 1.0
        self.color = QColor(color)
        self.size = random.uniform(3, 7)

    def tick(self, dt: float) -> bool:
        """Advance and return True if still alive."""
        self.x += self.vx * dt * 60
        self.y += self.vy * dt * 60
        self.vy += 0.12 * dt * 60  # gravity
        self.life -= dt * 1.8
        return self.life > 0


# ── main widget ──────────────────────────────────────────────────────────────


class ProgressRing(QWidget):
    """Custom-painted circular countdown ring."""

    RING_DIAMETER = 280
    RING_THICKNESS = 14
    GLOW_EXTRA = 6  # extra pen width for the glow effect

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 40, self.RING_DIAMETER + 40)

        # ── state ──────────────────────────────────────────────────────
        self._percent: float = 100.0          # 0..100 remaining
        self._display_percent: float = 100.0  # animated value
        self._time_text: str = "05:00"
        self._status_text: str = "Ready"
        self._phase: Phase = Phase.READY

        self._primary_color = QColor(PHASE_COLORS[Phase.READY][0])
        self._secondary_color = QColor(PHASE_COLORS[Phase.READY][1])
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(self._primary_color)
        self._target_secondary = QColor(self._secondary_color)

        self._text_color = QColor(PALETTE["text"])

        # ── arc transition animation ───────────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(400)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

        # ── color transition animation ─────────────────────────────────
        self._color_anim = QVariantAnimation(self)
        self._color_anim.setDuration(500)
        self._color_anim.setStartValue(0.0)
        self._color_anim.setEndValue(1.0)
        self._color_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._color_anim.valueChanged.connect(self._on_color_anim)

        # ── ready pulse / running glow ─────────────────────────────────
        self._pulse_phase: float = 0.0
        self._pulse_timer = QTimer(self)
        self._pulse_timer.setInterval(33)  # ~30 fps
        self._pulse_timer.timeout.connect(self._on_pulse_tick)

        self._glow_phase: float = 0.0
        self._glow_timer = QTimer(self)
        self._glow_timer.setInterval(33)
        self._glow_timer.timeout.connect(self._on_glow_tick)

        # ── celebration particles ──────────────────────────────────────
        self._particles: list[_Particle] = []
        self._particle_timer = QTimer(self)
        self._particle_timer.setInterval(16)  # ~60 fps
        self._particle_timer.timeout.connect(self._on_particle_tick)

        self._pulse_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def status_text(self) -> str:
        return self._status_text

    @property
    def phase(self) -> Phase:
        return self._phase

    def set_percent(self, pct: float) -> None:
        """Update the arc fill (0..100). Smoothly animates."""
        self._percent = pct
        self._arc_anim.stop()
        self._arc_anim.setStartValue(self._display_percent)
        self._arc_anim.setEndValue(pct)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_status_text(self, text: str) -> None:
        self._status_text = text
        self.update()

    def apply_phase(self, phase: Phase) -> None:
        """Update colors and animations for a new phase."""
        old_phase = self._phase
        self._phase = phase

        primary_hex, secondary_hex = PHASE_COLORS[phase]
        self._old_primary = QColor(self._primary_color)
        self._old_secondary = QColor(self._secondary_color)
        self._target_primary = QColor(primary_hex)
        self._target_secondary = QColor(secondary_hex)
        self._color_anim.stop()
        self._color_anim.start()

        if phase == Phase.RUNNING:
            self._pulse_timer.stop()
            self._pulse_phase = 0.0
            if not self._glow_timer.isActive():
                self._glow_timer.start()
        elif phase == Phase.READY:
            self._glow_timer.stop()
            self._glow_phase = 0.0
            if not self._pulse_timer.isActive():
                self._pulse_timer.start()
        else:
            self._glow_timer.stop()
            self._pulse_timer.stop()
            self._glow_phase = 0.0

        if phase == Phase.COMPLETED and old_phase != Phase.COMPLETED:
            self._spawn_celebration()

    # ══════════════════════════════════════════════════════════════════
    #  ANIMATION SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_percent = float(value)  # type: ignore[arg-type]
        self.update()

    def _on_color_anim(self, value: object) -> None:
        t = float(value)  # type: ignore[arg-type]
        self._primary_color = _lerp_color(self._old_primary, self._target_primary, t)
        self._secondary_color = _lerp_color(self._old_secondary, self._target_secondary, t)
        self.update()

    def _on_pulse_tick(self) -> None:
        self._pulse_phase = (self._pulse_phase + 0.04) % (2 * math.pi)
        self.update()

    def _on_glow_tick(self) -> None:
        self._glow_phase = (self._glow_phase + 0.06) % (2 * math.pi)
        self.update()

    def _on_particle_tick(self) -> None:
        dt = 0.016
        self._particles = [p for p in self._particles if p.tick(dt)]
        if not self._particles:
            self._particle_timer.stop()
        self.update()

    def _spawn_celebration(self) -> None:
        """Create a burst of sparkle particles from the ring."""
        cx = self.width() / 2
        cy = self.height() / 2
        radius = self.RING_DIAMETER / 2

        colors = [
            QColor("#FFD700"),  # gold
            QColor("#FF6B6B"),  # coral
            QColor("#A6E3A1"),  # green
            QColor("#89B4FA"),  # blue
            QColor("#CBA6F7"),  # purple
        ]

        for _ in range(40):
            angle = random.uniform(0, 2 * math.pi)
            px = cx + math.cos(angle) * radius
            py = cy + math.sin(angle) * radius
            self._particles.append(_Particle(px, py, random.choice(colors)))

        if not self._particle_timer.isActive():
            self._particle_timer.start()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 40)
        radius = diameter / 2
        thickness = self.RING_THICKNESS

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._primary_color)
        track_color.setAlpha(35)
        track_pen = QPen(track_color, thickness, Qt.PenStyle.SolidLine)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── ready pulse ──────────────────────────────────────────────
        if self._phase == Phase.READY and self._pulse_phase > 0:
            pulse_alpha = int(25 + 20 * math.sin(self._pulse_phase))
            pulse_extra = 2 + 3 * math.sin(self._pulse_phase)
            glow_color = QColor(self._primary_color)
            glow_color.setAlpha(pulse_alpha)
            glow_pen = QPen(glow_color, thickness + pulse_extra, Qt.PenStyle.SolidLine)
            glow_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(glow_pen)
            painter.drawEllipse(ring_rect)

        # ── remaining arc ────────────────────────────────────────────
        span_angle = arc_span(self._display_percent)
        if span_angle != 0:
            gradient = QConicalGradient(cx, cy, 90)
            gradient.setColorAt(0.0, self._primary_color)
            gradient.setColorAt(0.5, self._secondary_color)
            gradient.setColorAt(1.0, self._primary_color)

            arc_pen = QPen(gradient, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)

            start_angle = 90 * 16
            painter.drawArc(ring_rect, start_angle, span_angle)

            if self._glow_timer.isActive():
                glow_alpha = int(20 + 15 * math.sin(self._glow_phase))
                glow_color = QColor(self._primary_color)
                glow_color.setAlpha(glow_alpha)
                glow_pen = QPen(
                    glow_color, thickness + self.GLOW_EXTRA, Qt.PenStyle.SolidLine,
                )
                glow_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
                painter.setPen(glow_pen)
                painter.drawArc(ring_rect, start_angle, span_angle)

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(52)
        time_font.setWeight(QFont.Weight.Bold)
        time_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 2)
        painter.setFont(time_font)
        painter.setPen(self._text_color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 12)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: status ──────────────────────────────────────
        label_font = QFont()
        label_font.setPixelSize(13)
        label_font.setWeight(QFont.Weight.DemiBold)
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
        painter.setFont(label_font)

        label_color = QColor(self._primary_color)
        label_color.setAlpha(200)
        painter.setPen(label_color)

        label_rect = QRectF(ring_rect)
        label_rect.moveTop(label_rect.top() + 34)
        painter.drawText(
            label_rect, Qt.AlignmentFlag.AlignCenter, self._status_text.upper(),
        )

        # ── celebration particles ────────────────────────────────────
        for p in self._particles:
            c = QColor(p.color)
            c.setAlpha(int(255 * max(0, p.life)))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(c)
            size = p.size * p.life
            painter.drawEllipse(QPointF(p.x, p.y), size, size)

        painter.end()
