"""Core domain entities.

Cards carry the backend project payload through unchanged; only ``id`` and
``lane`` matter to the board and drag logic.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lanesync.core.models.enums import CardPriority, Lane, to_api_status, to_ui_status

DEFAULT_CATEGORY = "Development"

CATEGORY_COLORS: dict[str, str] = {
    "Development": "brand",
    "Design": "orange",
    "Marketing": "success",
    "E-commerce": "purple",
}


def category_color(name: str) -> str:
    """Return the badge colour for a category name."""
    return CATEGORY_COLORS.get(name, "default")


class DomainModel(BaseModel):
    """Base model with common config."""

    model_config = ConfigDict(from_attributes=True)


class Category(DomainModel):
    name: str = DEFAULT_CATEGORY
    color: str = "brand"


class Card(DomainModel):
    """One draggable unit of work (a project) on the board."""

    id: str
    lane: Lane = Lane.TODO
    title: str = ""
    description: str = ""
    priority: CardPriority = CardPriority.MEDIUM
    category: Category = Field(default_factory=Category)
    tags: str | None = None
    price: float = 0.0
    estimated_hours: float | None = None
    comments: int = 0
    assignee: str | None = None
    client_id: int | None = None
    due_date: str | None = None
    start_date: str | None = None
    created_at: str | None = None

    @property
    def short_id(self) -> str:
        """Return shortened ID for display."""
        return self.id[:8]

    @property
    def tag_list(self) -> list[str]:
        """Split the comma separated tag string."""
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


def _parse_price(value: object) -> float:
    if value is None:
        return 0.0
    try:
        return float(str(value))
    except ValueError:
        return 0.0


def _parse_priority(value: object) -> CardPriority:
    if isinstance(value, str):
        try:
            return CardPriority(value.strip().lower())
        except ValueError:
            pass
    return CardPriority.MEDIUM


def card_from_api(payload: dict[str, Any]) -> Card:
    """Convert a backend project record into a Card.

    Raises:
        ValueError: if the record has no id or carries an unknown status.
    """
    raw_id = payload.get("id")
    if raw_id is None or str(raw_id) == "":
        raise ValueError("Project record has no id")

    category_name = payload.get("category") or DEFAULT_CATEGORY
    return Card(
        id=str(raw_id),
        lane=to_ui_status(payload.get("status") or "todo"),
        title=payload.get("name") or payload.get("service_name") or "",
        description=payload.get("description") or "",
        priority=_parse_priority(payload.get("priority")),
        category=Category(name=category_name, color=category_color(category_name)),
        tags=payload.get("tags"),
        price=_parse_price(payload.get("price")),
        estimated_hours=payload.get("estimated_hours"),
        comments=payload.get("comments") or 0,
        assignee=payload.get("assigned_to"),
        client_id=payload.get("client_id"),
        due_date=payload.get("end_date"),
        start_date=payload.get("start_date"),
        created_at=payload.get("created_at"),
    )


def card_to_api(card: Card) -> dict[str, Any]:
    """Convert a Card back to the backend's field names."""
    return {
        "id": card.id,
        "service_name": card.title,
        "description": card.description,
        "status": to_api_status(card.lane).value,
        "priority": card.priority.value,
        "assigned_to": card.assignee,
        "estimated_hours": card.estimated_hours,
        "category": card.category.name,
        "tags": card.tags,
        "price": card.price,
        "client_id": card.client_id,
        "start_date": card.start_date,
        "end_date": card.due_date,
    }
