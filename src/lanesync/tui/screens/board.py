"""Board screen: three lane columns driven by mouse drag and keyboard moves."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Horizontal
from textual.errors import NoWidget
from textual.screen import Screen
from textual.widgets import Footer

from lanesync.constants import LANE_LABELS, LANE_ORDER, NOTIFICATION_TITLE_MAX_LENGTH
from lanesync.core.drag import DragState, HoverRect
from lanesync.core.filters import BoardFilters
from lanesync.core.models.enums import Lane, SortOrder
from lanesync.debug_log import log
from lanesync.keybindings import BOARD_BINDINGS
from lanesync.tui.widgets.card import CardWidget
from lanesync.tui.widgets.column import LaneColumn

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.widget import Widget

    from lanesync.services.board import BoardService

SORT_CYCLE: tuple[SortOrder, ...] = tuple(SortOrder)


class BoardScreen(Screen):
    """Kanban board with three lanes."""

    BINDINGS = BOARD_BINDINGS

    DEFAULT_CSS = """
    BoardScreen .board {
        height: 1fr;
    }
    """

    def __init__(self, service: BoardService, **kwargs) -> None:
        super().__init__(**kwargs)
        self.service = service
        self._drag_widget: CardWidget | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(classes="board"):
            for lane in LANE_ORDER:
                yield LaneColumn(lane)
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load(), exclusive=True, group="board-load")

    async def _load(self) -> None:
        await self.service.load()
        self.render_board()
        self._focus_first_card()

    def render_board(self) -> None:
        lanes = self.service.visible_lanes()
        for column in self.query(LaneColumn):
            column.update_cards(lanes[column.lane])
        self.sub_title = f"sort: {self.service.filters.sort_by.value}"

    # Hit testing

    def _widget_at(self, screen_x: int, screen_y: int) -> Widget | None:
        try:
            widget, _ = self.get_widget_at(screen_x, screen_y)
        except NoWidget:
            return None
        return widget

    def _column_at(self, screen_x: int, screen_y: int) -> LaneColumn | None:
        widget = self._widget_at(screen_x, screen_y)
        if widget is None:
            return None
        for node in widget.ancestors_with_self:
            if isinstance(node, LaneColumn):
                return node
        return None

    def _card_at(self, screen_x: int, screen_y: int) -> CardWidget | None:
        widget = self._widget_at(screen_x, screen_y)
        if widget is None:
            return None
        for node in widget.ancestors_with_self:
            if isinstance(node, CardWidget):
                return node
            if isinstance(node, LaneColumn):
                return None
        return None

    def _highlight_column(self, target: LaneColumn | None) -> None:
        for column in self.query(LaneColumn):
            column.set_class(column is target, "drag-over")

    # Drag messages

    def on_card_widget_drag_started(self, message: CardWidget.DragStarted) -> None:
        session = self.service.drag.begin(message.card_id)
        if session is None:
            return
        self._drag_widget = self._find_card_widget(message.card_id)

    def on_card_widget_drag_moved(self, message: CardWidget.DragMoved) -> None:
        drag = self.service.drag
        if drag.state is not DragState.DRAGGING:
            return
        self._highlight_column(self._column_at(message.screen_x, message.screen_y))

        target = self._card_at(message.screen_x, message.screen_y)
        if target is None or target.card is None or target.card_id == message.card_id:
            return
        hover_index = self.service.board.index_of(target.card_id)
        if hover_index is None:
            return
        region = target.region
        rect = HoverRect(top=region.y, bottom=region.y + region.height)
        if drag.hover(hover_index, rect, message.screen_y):
            self.render_board()

    def on_card_widget_drag_released(self, message: CardWidget.DragReleased) -> None:
        self._drag_widget = None
        column = self._column_at(message.screen_x, message.screen_y)
        self._highlight_column(None)
        change = self.service.drag.drop(column.lane if column is not None else None)
        if change is not None:
            log.debug("Drop committed", card_id=change.card_id, lane=change.to_lane.value)
        self.render_board()

    def on_card_widget_selected(self, message: CardWidget.Selected) -> None:
        card = self.service.board.get(message.card_id)
        if card is not None:
            self.app.notify(card.title[:NOTIFICATION_TITLE_MAX_LENGTH] or card.short_id)

    # Focus helpers

    def _focused_card(self) -> CardWidget | None:
        focused = self.focused
        return focused if isinstance(focused, CardWidget) else None

    def _focus_first_card(self) -> None:
        for column in self.query(LaneColumn):
            cards = column.get_cards()
            if cards:
                cards[0].focus()
                return

    def _find_card_widget(self, card_id: str) -> CardWidget | None:
        for column in self.query(LaneColumn):
            widget = column.find_card(card_id)
            if widget is not None:
                return widget
        return None

    def _focus_card(self, card_id: str) -> None:
        widget = self._find_card_widget(card_id)
        if widget is not None:
            widget.focus()

    def _move_focus(self, step: int) -> None:
        card = self._focused_card()
        if card is None:
            self._focus_first_card()
            return
        column = next(node for node in card.ancestors if isinstance(node, LaneColumn))
        cards = column.get_cards()
        index = cards.index(card) + step
        if 0 <= index < len(cards):
            cards[index].focus()

    # Actions

    def action_focus_up(self) -> None:
        self._move_focus(-1)

    def action_focus_down(self) -> None:
        self._move_focus(1)

    def action_refresh(self) -> None:
        self.run_worker(self._refresh(), exclusive=True, group="board-load")

    async def _refresh(self) -> None:
        self._end_local_drag()
        await self.service.refresh()
        self.render_board()

    def _move_focused(self, forward: bool) -> None:
        card = self._focused_card()
        if card is None or card.card is None:
            return
        current = card.card.lane
        target = Lane.next_lane(current) if forward else Lane.prev_lane(current)
        if target is None:
            return
        card_id = card.card_id
        change = self.service.move_to_lane(card_id, target)
        if change is None:
            return
        self.render_board()
        self.call_after_refresh(self._focus_card, card_id)
        log.debug("Card moved from keyboard", card_id=card_id, lane=LANE_LABELS[target])

    def action_move_next_lane(self) -> None:
        self._move_focused(forward=True)

    def action_move_prev_lane(self) -> None:
        self._move_focused(forward=False)

    def action_delete_card(self) -> None:
        card = self._focused_card()
        if card is None or card.card is None:
            return
        self.run_worker(self._delete(card.card_id))

    async def _delete(self, card_id: str) -> None:
        if await self.service.delete_card(card_id):
            self.render_board()
            self._focus_first_card()

    def action_clear_lane(self) -> None:
        card = self._focused_card()
        if card is None or card.card is None:
            return
        self.run_worker(self._clear_lane(card.card.lane), exclusive=True, group="clear-lane")

    async def _clear_lane(self, lane: Lane) -> None:
        if await self.service.clear_lane(lane):
            self.render_board()
            self._focus_first_card()

    def action_cycle_sort(self) -> None:
        filters = self.service.filters
        index = SORT_CYCLE.index(filters.sort_by)
        next_sort = SORT_CYCLE[(index + 1) % len(SORT_CYCLE)]
        self.service.set_filters(
            BoardFilters(priority=filters.priority, category=filters.category, sort_by=next_sort)
        )
        self.render_board()

    def action_cancel_drag(self) -> None:
        self.service.drag.cancel()
        self._end_local_drag()
        self.render_board()

    def _end_local_drag(self) -> None:
        if self._drag_widget is not None:
            self._drag_widget.end_drag()
            self._drag_widget = None
        self._highlight_column(None)

    def action_quit(self) -> None:
        self.app.exit()
