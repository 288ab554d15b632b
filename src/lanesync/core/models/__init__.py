"""Domain models for the Kanban board."""

from lanesync.core.models.entities import Card, Category, card_from_api, card_to_api
from lanesync.core.models.enums import (
    ApiStatus,
    CardPriority,
    Lane,
    NotificationKind,
    SortOrder,
    to_api_status,
    to_ui_status,
)

__all__ = [
    "ApiStatus",
    "Card",
    "CardPriority",
    "Category",
    "Lane",
    "NotificationKind",
    "SortOrder",
    "card_from_api",
    "card_to_api",
    "to_api_status",
    "to_ui_status",
]
