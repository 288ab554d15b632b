from __future__ import annotations

from lanesync.core.models.enums import CardPriority, Lane, NotificationKind
from lanesync.limits import DEBUG_BUILD, HTTP_TIMEOUT, MAX_NOTIFICATIONS, SHUTDOWN_TIMEOUT

CARD_TITLE_MAX_LENGTH = 28
CARD_DESC_MAX_LENGTH = 28
CARD_TAGS_MAX_LENGTH = 24

NOTIFICATION_TITLE_MAX_LENGTH = 40

DEFAULT_API_URL = "http://localhost:5000"
PROJECTS_PATH = "/api/projects"

LANE_ORDER = [
    Lane.TODO,
    Lane.IN_PROGRESS,
    Lane.COMPLETED,
]

LANE_LABELS = {
    Lane.TODO: "TO DO",
    Lane.IN_PROGRESS: "IN PROGRESS",
    Lane.COMPLETED: "COMPLETED",
}

PRIORITY_ICONS = {
    CardPriority.LOW: "▽",
    CardPriority.MEDIUM: "◇",
    CardPriority.HIGH: "△",
}

NOTIFICATION_SEVERITY = {
    NotificationKind.SUCCESS: "information",
    NotificationKind.ERROR: "error",
}

__all__ = [
    "CARD_DESC_MAX_LENGTH",
    "CARD_TAGS_MAX_LENGTH",
    "CARD_TITLE_MAX_LENGTH",
    "DEBUG_BUILD",
    "DEFAULT_API_URL",
    "HTTP_TIMEOUT",
    "LANE_LABELS",
    "LANE_ORDER",
    "MAX_NOTIFICATIONS",
    "NOTIFICATION_SEVERITY",
    "NOTIFICATION_TITLE_MAX_LENGTH",
    "PRIORITY_ICONS",
    "PROJECTS_PATH",
    "SHUTDOWN_TIMEOUT",
]
