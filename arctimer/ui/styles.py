"""QSS stylesheet for the ArcTimer window."""

from __future__ import annotations

# ── default palette ──────────────────────────────────────────────────────
#    Light background: the face is drawn with black ink.

DEFAULT_PALETTE: dict[str, str] = {
    "bg":         "#FFFFFF",
    "text":       "#1A1A1A",
    "text_muted": "#7A7A7A",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = dict(DEFAULT_PALETTE)
    if palette:
        p.update(palette)
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: Arial, "Helvetica Neue";
        font-size: 13px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    QLabel#hintLabel {{
        color: {p['text_muted']};
        font-size: 11px;
    }}
    """
