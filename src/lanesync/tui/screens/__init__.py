from lanesync.tui.screens.board import BoardScreen

__all__ = ["BoardScreen"]
