from lanesync.tui.widgets.card import CardWidget
from lanesync.tui.widgets.column import LaneColumn

__all__ = ["CardWidget", "LaneColumn"]
