"""Drag controller: turns pointer hover/drop events into board mutations.

A drag gesture is an explicit ``DragSession`` owned by the controller
instance. Hover events reorder the board live for visual feedback; only a
drop onto a different lane produces a ``LaneChange`` for remote sync.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import uuid4

from lanesync.debug_log import log

if TYPE_CHECKING:
    from collections.abc import Callable

    from lanesync.core.board import BoardState
    from lanesync.core.models.enums import Lane


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True, slots=True)
class HoverRect:
    """Rendered bounding box of the hovered card (screen Y grows downward)."""

    top: float
    bottom: float

    @property
    def middle_offset(self) -> float:
        """Distance from ``top`` to the vertical midpoint."""
        return (self.bottom - self.top) / 2


@dataclass(slots=True)
class DragSession:
    card_id: str
    origin_lane: Lane
    drag_index: int
    last_pointer_y: float | None = None
    reorders: int = 0


@dataclass(frozen=True)
class LaneChange:
    """A committed lane move, emitted once per successful drop."""

    card_id: str
    from_lane: Lane
    to_lane: Lane
    event_id: str = field(default_factory=lambda: uuid4().hex)
    occurred_at: datetime = field(default_factory=datetime.now)


class DragController:
    """Per-board drag state machine (IDLE <-> DRAGGING).

    Nothing here raises into the caller: unknown cards, stray events and
    ambiguous hover targets are no-ops.
    """

    def __init__(
        self,
        board: BoardState,
        on_lane_change: Callable[[LaneChange], object] | None = None,
    ) -> None:
        self._board = board
        self._on_lane_change = on_lane_change
        self._session: DragSession | None = None

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self._session is not None else DragState.IDLE

    @property
    def session(self) -> DragSession | None:
        return self._session

    def begin(self, card_id: str) -> DragSession | None:
        """Start dragging ``card_id``; returns None if not possible."""
        if self._session is not None:
            log.debug("Drag already in progress", card_id=self._session.card_id)
            return None
        index = self._board.index_of(card_id)
        card = self._board.get(card_id)
        if index is None or card is None:
            return None
        self._session = DragSession(card_id=card_id, origin_lane=card.lane, drag_index=index)
        log.debug("Drag started", card_id=card_id, lane=card.lane.value, index=index)
        return self._session

    def hover(self, hover_index: int, rect: HoverRect, pointer_y: float) -> bool:
        """Handle the pointer hovering the card at flat ``hover_index``.

        Returns True when the board was reordered.
        """
        session = self._session
        if session is None:
            return False
        session.last_pointer_y = pointer_y

        drag_index = session.drag_index
        if drag_index == hover_index:
            return False

        cards = self._board.cards
        if not (0 <= drag_index < len(cards) and 0 <= hover_index < len(cards)):
            return False
        dragged = cards[drag_index]
        if dragged.id != session.card_id:
            # Board changed underneath the gesture; resync the tracked index.
            index = self._board.index_of(session.card_id)
            if index is None:
                return False
            session.drag_index = drag_index = index
            dragged = cards[index]
            if drag_index == hover_index:
                return False
        if cards[hover_index].lane != dragged.lane:
            return False

        offset = pointer_y - rect.top
        middle = rect.middle_offset
        # Only commit once the pointer has crossed half of the hovered card.
        if drag_index < hover_index and offset < middle:
            return False
        if drag_index > hover_index and offset > middle:
            return False

        if not self._board.move_card(drag_index, hover_index, dragged.lane):
            return False
        session.drag_index = hover_index
        session.reorders += 1
        return True

    def drop(self, target_lane: Lane | None) -> LaneChange | None:
        """Finish the gesture over ``target_lane`` (None = outside any column)."""
        session = self._session
        self._session = None
        if session is None:
            return None
        if target_lane is None:
            log.debug(
                "Drag dropped outside columns",
                card_id=session.card_id,
                pointer_y=session.last_pointer_y,
                reorders=session.reorders,
            )
            return None

        card = self._board.get(session.card_id)
        if card is None or card.lane == target_lane:
            return None

        previous = self._board.set_card_lane(session.card_id, target_lane)
        if previous is None:
            return None
        change = LaneChange(card_id=session.card_id, from_lane=previous, to_lane=target_lane)
        log.info(
            "Card lane changed",
            card_id=change.card_id,
            from_lane=change.from_lane.value,
            to_lane=change.to_lane.value,
        )
        if self._on_lane_change is not None:
            try:
                self._on_lane_change(change)
            except Exception as exc:
                log.error("Lane change handler failed", card_id=change.card_id, error=str(exc))
        return change

    def cancel(self) -> None:
        """Abort the gesture; hover reorders already applied are kept."""
        if self._session is not None:
            log.debug("Drag cancelled", card_id=self._session.card_id)
        self._session = None
