"""QSS stylesheet and palette for Tickwatch."""

from __future__ import annotations

DEFAULT_PALETTE: dict[str, str] = {
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

# Time labels use a fixed-width face so digits do not jitter while ticking.
TIME_FONT = '"SF Mono", Menlo, "DejaVu Sans Mono", monospace'


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
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
        padding: 8px 16px;
        font-size: 13px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p.get('surface', p['bg_secondary'])};
        border-color: {p['accent']};
    }}

    QPushButton:pressed {{
        background-color: {p['accent']};
        color: {p['bg']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
        border-color: {p['bg_secondary']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#primaryButton:disabled {{
        background-color: {p['border']};
        color: {p['text_muted']};
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
        border-color: {p['danger']};
    }}

    /* ── spin box ────────────────────────────────── */
    QSpinBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 8px;
        padding: 6px 10px;
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    /* ── labels ──────────────────────────────────── */
    QLabel#cardTitle {{
        font-size: 12px;
        color: {p['text_muted']};
        font-weight: 700;
        background-color: transparent;
    }}

    QLabel#timeLabel {{
        font-family: {TIME_FONT};
        font-size: 44px;
        font-weight: 700;
        color: {p['accent']};
        background-color: transparent;
    }}

    QLabel#listLabel {{
        font-family: {TIME_FONT};
        font-size: 13px;
        color: {p['text']};
        background-color: transparent;
    }}
    """
