"""Textual theme for the lanesync board."""

from __future__ import annotations

from textual.theme import Theme

LANESYNC_THEME = Theme(
    name="lanesync",
    primary="#4f8cc9",
    secondary="#e0a458",
    accent="#5cc8c2",
    foreground="#d3d8e0",
    background="#11151b",
    surface="#181d25",
    panel="#202733",
    warning="#e0a458",
    error="#e0625a",
    success="#5fb37a",
    dark=True,
    variables={
        "border": "#2c3544",
        "border-blurred": "#2c354480",
        "text-muted": "#67707d",
        "text-disabled": "#67707d80",
        "scrollbar": "#2c3544",
        "scrollbar-hover": "#4f8cc9",
        "scrollbar-active": "#e0a458",
        "footer-key-foreground": "#67707d",
        "footer-key-background": "transparent",
    },
)
