"""Core domain enums and the lane <-> backend status mapping."""

from __future__ import annotations

from enum import StrEnum


class Lane(StrEnum):
    """Board lane (column) a card is rendered in."""

    TODO = "todo"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: object) -> Lane:
        """Coerce a lane id or backend status string to a Lane.

        Raises:
            ValueError: if ``value`` names no known lane.
        """
        if isinstance(value, Lane):
            return value
        if isinstance(value, ApiStatus):
            return to_ui_status(value)
        if isinstance(value, str):
            normalized = value.strip()
            for lane in cls:
                if normalized == lane.value:
                    return lane
            for status in ApiStatus:
                if normalized == status.value:
                    return to_ui_status(status)
        raise ValueError(f"Unknown lane: {value!r}")

    @classmethod
    def next_lane(cls, current: Lane) -> Lane | None:
        """Return the lane to the right of ``current``."""
        from lanesync.constants import LANE_ORDER

        idx = LANE_ORDER.index(current)
        if idx < len(LANE_ORDER) - 1:
            return LANE_ORDER[idx + 1]
        return None

    @classmethod
    def prev_lane(cls, current: Lane) -> Lane | None:
        """Return the lane to the left of ``current``."""
        from lanesync.constants import LANE_ORDER

        idx = LANE_ORDER.index(current)
        if idx > 0:
            return LANE_ORDER[idx - 1]
        return None


class ApiStatus(StrEnum):
    """Status vocabulary stored by the projects backend."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


_LANE_TO_API: dict[Lane, ApiStatus] = {
    Lane.TODO: ApiStatus.TODO,
    Lane.IN_PROGRESS: ApiStatus.IN_PROGRESS,
    Lane.COMPLETED: ApiStatus.COMPLETED,
}
_API_TO_LANE: dict[ApiStatus, Lane] = {status: lane for lane, status in _LANE_TO_API.items()}


def to_api_status(lane: Lane | str) -> ApiStatus:
    """Translate a board lane to the backend status string."""
    if not isinstance(lane, Lane):
        try:
            lane = Lane(lane)
        except ValueError:
            raise ValueError(f"Unknown lane: {lane!r}") from None
    return _LANE_TO_API[lane]


def to_ui_status(status: ApiStatus | str) -> Lane:
    """Translate a backend status string to a board lane."""
    if not isinstance(status, ApiStatus):
        try:
            status = ApiStatus(status)
        except ValueError:
            raise ValueError(f"Unknown status: {status!r}") from None
    return _API_TO_LANE[status]


class CardPriority(StrEnum):
    """Card priority levels as stored by the backend."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        """Short display label."""
        return {self.LOW: "LOW", self.MEDIUM: "MED", self.HIGH: "HIGH"}[self]

    @property
    def css_class(self) -> str:
        """CSS class name for styling."""
        return f"priority-{self.value}"


class NotificationKind(StrEnum):
    """Transient user-facing notification types."""

    SUCCESS = "success"
    ERROR = "error"


class SortOrder(StrEnum):
    """Board sort orders offered by the filter bar."""

    NEWEST = "newest"
    OLDEST = "oldest"
    NAME_ASC = "nameAsc"
    NAME_DESC = "nameDesc"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
