"""QSS stylesheet and phase colors for RingTimer."""

from __future__ import annotations

from ..timer.engine import Phase

# ── phase colors (ring gradient pairs) ──────────────────────────────────
#    Each phase maps to (primary, secondary) for the conical gradient.

PHASE_COLORS: dict[Phase, tuple[str, str]] = {
    Phase.READY:     ("#4A4A5E", "#3A3A4E"),   # neutral dim
    Phase.RUNNING:   ("#FF6B6B", "#FFA07A"),   # warm coral
    Phase.PAUSED:    ("#6C7086", "#585B70"),   # desaturated gray
    Phase.COMPLETED: ("#A6E3A1", "#4ECDC4"),   # green → teal
}

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    /* running: the start/pause button drops its accent fill */
    QPushButton#primaryButton[running="true"] {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['accent']};
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
        border-color: {p['danger']};
    }}

    /* ── preset chips ────────────────────────────── */
    QPushButton#presetChip {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 1px solid {p['border']};
        font-size: 12px;
        padding: 6px 12px;
        border-radius: 14px;
    }}

    QPushButton#presetChip:checked {{
        color: {p['bg']};
        background-color: {p['accent']};
        border-color: {p['accent']};
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    /* ── status bar ──────────────────────────────── */
    QStatusBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
        font-size: 12px;
        border-top: 1px solid {p['border']};
    }}
    """
