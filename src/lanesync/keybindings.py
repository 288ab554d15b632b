"""Keybindings for the lanesync TUI, using Textual's Binding class directly."""

from __future__ import annotations

from textual.binding import Binding, BindingType

# =============================================================================
# App Bindings
# =============================================================================

APP_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit"),
    Binding("ctrl+p", "command_palette", "Palette", show=False),
]

# =============================================================================
# Board Bindings
# =============================================================================

BOARD_BINDINGS: list[BindingType] = [
    Binding("q", "quit", "Quit", priority=True),
    Binding("r", "refresh", "Refresh"),
    Binding("left_square_bracket", "move_prev_lane", "Move left", key_display="["),
    Binding("right_square_bracket", "move_next_lane", "Move right", key_display="]"),
    Binding("x", "delete_card", "Delete"),
    Binding("X", "clear_lane", "Clear lane", key_display="Shift+X", show=False),
    Binding("s", "cycle_sort", "Sort"),
    Binding("escape", "cancel_drag", "Cancel drag", show=False),
    # Navigation
    Binding("up", "focus_up", "Up", show=False),
    Binding("down", "focus_down", "Down", show=False),
    Binding("k", "focus_up", "Up", show=False),
    Binding("j", "focus_down", "Down", show=False),
]
