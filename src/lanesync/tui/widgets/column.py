"""LaneColumn widget for displaying one board lane."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import ScrollableContainer, Vertical
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Label

from lanesync.constants import LANE_LABELS
from lanesync.tui.widgets.card import CardWidget

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from lanesync.core.models.entities import Card
    from lanesync.core.models.enums import Lane

EMPTY_MESSAGE = "Drag a project here"


class LaneColumn(Widget):
    DEFAULT_CSS = """
    LaneColumn {
        width: 1fr;
        height: 1fr;
        border-right: vkey $border;
        padding: 0 1;
    }
    LaneColumn.drag-over {
        background: $panel;
    }
    LaneColumn .column-header {
        height: 1;
        text-style: bold;
        margin-bottom: 1;
    }
    LaneColumn .column-content {
        height: 1fr;
    }
    LaneColumn .column-empty {
        height: 5;
        border: dashed $border;
        content-align: center middle;
        color: $text-muted;
        width: 100%;
    }
    """

    ALLOW_SELECT = False
    can_focus = False

    def __init__(self, lane: Lane, cards: list[Card] | None = None, **kwargs) -> None:
        super().__init__(id=f"column-{lane.value.lower()}", **kwargs)
        self.lane = lane
        self._cards: list[Card] = list(cards or [])

    def _header_text(self) -> str:
        return f"{LANE_LABELS[self.lane]} ({len(self._cards)})"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(
                self._header_text(),
                id=f"header-{self.lane.value.lower()}",
                classes="column-header",
            )
            with ScrollableContainer(
                classes="column-content", id=f"content-{self.lane.value.lower()}"
            ):
                for card in self._cards:
                    yield CardWidget(card)
                yield Label(
                    EMPTY_MESSAGE,
                    id=f"empty-{self.lane.value.lower()}",
                    classes="column-empty",
                )

    def on_mount(self) -> None:
        self._sync_empty_state()

    @property
    def card_ids(self) -> list[str]:
        return [card.card_id for card in self.get_cards()]

    def get_cards(self) -> list[CardWidget]:
        return list(self.query(CardWidget))

    def find_card(self, card_id: str) -> CardWidget | None:
        for widget in self.get_cards():
            if widget.card_id == card_id:
                return widget
        return None

    def update_cards(self, cards: list[Card]) -> None:
        """Sync card widgets to ``cards`` without recreating survivors.

        Existing widgets are moved rather than remounted so a card that holds
        the mouse capture during a drag keeps it.
        """
        self._cards = list(cards)
        try:
            header = self.query_one(f"#header-{self.lane.value.lower()}", Label)
            header.update(self._header_text())
            content = self.query_one(f"#content-{self.lane.value.lower()}", ScrollableContainer)
        except NoMatches:
            return

        wanted_ids = {card.id for card in cards}
        current = {w.card_id: w for w in self.get_cards() if w.card is not None}

        for card_id, widget in current.items():
            if card_id not in wanted_ids:
                widget.remove()

        previous: CardWidget | None = None
        for card in cards:
            widget = current.get(card.id)
            if widget is None:
                widget = CardWidget(card)
                if previous is None:
                    content.mount(widget, before=0)
                else:
                    content.mount(widget, after=previous)
            else:
                widget.card = card
                if previous is None:
                    if content.children and content.children[0] is not widget:
                        content.move_child(widget, before=0)
                elif widget is not previous and _next_sibling(content, previous) is not widget:
                    content.move_child(widget, after=previous)
            previous = widget

        self._sync_empty_state()

    def _sync_empty_state(self) -> None:
        try:
            empty = self.query_one(f"#empty-{self.lane.value.lower()}", Label)
        except NoMatches:
            return
        empty.display = not self._cards


def _next_sibling(container: Widget, widget: Widget) -> Widget | None:
    children = list(container.children)
    for index, child in enumerate(children):
        if child is widget:
            return children[index + 1] if index + 1 < len(children) else None
    return None
