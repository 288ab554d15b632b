"""CardWidget for displaying a project card on the board."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label

from lanesync.constants import (
    CARD_DESC_MAX_LENGTH,
    CARD_TAGS_MAX_LENGTH,
    CARD_TITLE_MAX_LENGTH,
    PRIORITY_ICONS,
)

if TYPE_CHECKING:
    from textual import events
    from textual.app import ComposeResult

    from lanesync.core.models.entities import Card

# Cells the pointer must travel before a press becomes a drag
DRAG_THRESHOLD = 1


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_price(price: float) -> str:
    return f"{price:,.2f} PLN".replace(",", " ")


def card_widget_id(card_id: str) -> str:
    """DOM id for a card; backend ids may hold characters Textual ids reject."""
    digest = hashlib.sha1(card_id.encode("utf-8")).hexdigest()[:12]
    return f"card-{digest}"


class CardWidget(Widget):
    """A focusable, draggable card."""

    DEFAULT_CSS = """
    CardWidget {
        height: auto;
        border: round $border;
        padding: 0 1;
        margin-bottom: 1;
    }
    CardWidget:focus {
        border: round $primary;
    }
    CardWidget.dragging {
        opacity: 0.4;
        border: round $secondary;
    }
    CardWidget.priority-high {
        border-left: thick $error;
    }
    CardWidget .card-meta {
        color: $text-muted;
    }
    CardWidget .card-price {
        color: $accent;
    }
    """

    can_focus = True

    card: reactive[Card | None] = reactive(None, recompose=True)

    @dataclass
    class Selected(Message):
        card_id: str

    @dataclass
    class DragStarted(Message):
        card_id: str
        screen_x: int
        screen_y: int

    @dataclass
    class DragMoved(Message):
        card_id: str
        screen_x: int
        screen_y: int

    @dataclass
    class DragReleased(Message):
        card_id: str
        screen_x: int
        screen_y: int

    def __init__(self, card: Card, **kwargs) -> None:
        super().__init__(id=card_widget_id(card.id), **kwargs)
        self.add_class(card.priority.css_class)
        self._card_id = card.id
        self._pressed_at: tuple[int, int] | None = None
        self._dragging = False
        self.set_reactive(CardWidget.card, card)

    @property
    def card_id(self) -> str:
        return self._card_id

    def watch_card(self, old: Card | None, new: Card | None) -> None:
        if old is not None:
            self.remove_class(old.priority.css_class)
        if new is not None:
            self.add_class(new.priority.css_class)

    def compose(self) -> ComposeResult:
        if self.card is None:
            return
        card = self.card
        icon = PRIORITY_ICONS[card.priority]
        yield Label(
            f"{icon} {truncate_text(card.title or 'Untitled', CARD_TITLE_MAX_LENGTH)}",
            classes="card-title",
        )
        if card.description:
            yield Label(truncate_text(card.description, CARD_DESC_MAX_LENGTH), classes="card-desc")
        meta = f"#{card.short_id} {card.category.name}"
        if card.due_date:
            meta = f"{meta} · {card.due_date[:10]}"
        yield Label(meta, classes="card-meta")
        if card.price:
            yield Label(format_price(card.price), classes="card-price")
        if card.tag_list:
            tags = " ".join(f"#{tag}" for tag in card.tag_list)
            yield Label(truncate_text(tags, CARD_TAGS_MAX_LENGTH), classes="card-tags")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        self._pressed_at = (event.screen_x, event.screen_y)
        self._dragging = False
        self.capture_mouse()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._pressed_at is None or self.card is None:
            return
        if not self._dragging:
            start_x, start_y = self._pressed_at
            moved = max(abs(event.screen_x - start_x), abs(event.screen_y - start_y))
            if moved < DRAG_THRESHOLD:
                return
            self._dragging = True
            self.add_class("dragging")
            self.post_message(self.DragStarted(self.card.id, start_x, start_y))
        self.post_message(self.DragMoved(self.card.id, event.screen_x, event.screen_y))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        was_dragging = self._dragging
        pressed = self._pressed_at is not None
        self.end_drag()
        if self.card is None:
            return
        if was_dragging:
            self.post_message(self.DragReleased(self.card.id, event.screen_x, event.screen_y))
        elif pressed:
            self.focus()
            self.post_message(self.Selected(self.card.id))

    def end_drag(self) -> None:
        """Reset local drag state and release the pointer."""
        self._pressed_at = None
        self._dragging = False
        self.remove_class("dragging")
        self.release_mouse()
