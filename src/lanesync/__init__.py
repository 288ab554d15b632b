"""lanesync: Kanban board with optimistic drag-and-drop status sync."""

__version__ = "0.1.0"
