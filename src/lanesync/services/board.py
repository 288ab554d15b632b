"""Board service: the page-level composition of board, drag and sync."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lanesync.adapters.http.projects import ProjectsApi, ProjectsApiError
from lanesync.core.board import BoardState
from lanesync.core.drag import DragController, LaneChange
from lanesync.core.filters import BoardFilters, filter_cards, sort_cards
from lanesync.core.models.entities import card_from_api
from lanesync.core.notifications import NotificationCenter
from lanesync.debug_log import log
from lanesync.services.sync import RemoteSyncAdapter

if TYPE_CHECKING:
    import httpx

    from lanesync.config import LaneSyncConfig
    from lanesync.core.models.entities import Card
    from lanesync.core.models.enums import Lane

LOAD_FAILED_MESSAGE = "Failed to load projects. Please try again later."
DELETE_FAILED_MESSAGE = "An error occurred while deleting the project"


class BoardService:
    """Owns the board and wires drag lane changes to the sync adapter."""

    def __init__(
        self,
        api: ProjectsApi,
        *,
        notifications: NotificationCenter | None = None,
        filters: BoardFilters | None = None,
    ) -> None:
        self.api = api
        self.notifications = notifications or NotificationCenter()
        self.board = BoardState()
        self.sync = RemoteSyncAdapter(api, self.notifications)
        self.drag = DragController(self.board, self.sync.handle_lane_change)
        self.filters = filters or BoardFilters()
        self.loaded = False
        self.last_error: str | None = None

    @classmethod
    def from_config(
        cls,
        config: LaneSyncConfig,
        *,
        client: httpx.AsyncClient | None = None,
        notifications: NotificationCenter | None = None,
    ) -> BoardService:
        api = ProjectsApi.from_config(config, client=client)
        return cls(
            api,
            notifications=notifications or NotificationCenter(config.ui.max_notifications),
            filters=BoardFilters(sort_by=config.ui.default_sort),
        )

    async def load(self) -> bool:
        """Fetch projects and replace the board; keeps the old board on failure."""
        try:
            records = await self.api.list_projects()
        except ProjectsApiError as exc:
            log.error("Loading projects failed", error=str(exc))
            self.last_error = LOAD_FAILED_MESSAGE
            self.notifications.error(LOAD_FAILED_MESSAGE)
            return False

        cards: list[Card] = []
        for record in records:
            try:
                cards.append(card_from_api(record))
            except ValueError as exc:
                log.warning("Skipping project record", error=str(exc))
        self.board.replace_all(sort_cards(cards, self.filters.sort_by))
        self.loaded = True
        self.last_error = None
        log.info("Board loaded", cards=len(self.board))
        return True

    async def refresh(self) -> bool:
        """Manual refetch; discards unsynced local order and lanes."""
        self.drag.cancel()
        loaded = await self.load()
        if loaded:
            self.notifications.success("Project list has been refreshed")
        return loaded

    def set_filters(self, filters: BoardFilters) -> None:
        if filters.sort_by != self.filters.sort_by:
            self.board.replace_all(sort_cards(self.board.cards, filters.sort_by))
        self.filters = filters

    def visible_lanes(self) -> dict[Lane, list[Card]]:
        return {
            lane: filter_cards(cards, self.filters) for lane, cards in self.board.lanes().items()
        }

    def move_to_lane(self, card_id: str, lane: Lane, target_index: int = -1) -> LaneChange | None:
        """Place a card in ``lane`` at a lane position and sync if the lane changed.

        Must be called with a running event loop.
        """
        previous = self.board.place_in_lane(card_id, lane, target_index)
        if previous is None or previous == lane:
            return None
        change = LaneChange(card_id=card_id, from_lane=previous, to_lane=lane)
        self.sync.handle_lane_change(change)
        return change

    def drop_in_column(self, card_id: str, lane: Lane) -> LaneChange | None:
        """Drop onto a column background (e.g. an empty column); position is kept."""
        previous = self.board.set_card_lane(card_id, lane)
        if previous is None or previous == lane:
            return None
        change = LaneChange(card_id=card_id, from_lane=previous, to_lane=lane)
        self.sync.handle_lane_change(change)
        return change

    async def delete_card(self, card_id: str) -> bool:
        if card_id not in self.board:
            return False
        try:
            await self.api.delete_project(card_id)
        except ProjectsApiError as exc:
            log.error("Deleting project failed", card_id=card_id, error=str(exc))
            self.notifications.error(DELETE_FAILED_MESSAGE)
            return False
        self.board.remove_card(card_id)
        self.notifications.success("Project was successfully deleted")
        return True

    async def clear_lane(self, lane: Lane) -> int:
        """Delete every card in ``lane``; returns how many were deleted."""
        card_ids = [card.id for card in self.board.lane_view(lane)]
        deleted = 0
        for card_id in card_ids:
            if await self.delete_card(card_id):
                deleted += 1
        log.info("Lane cleared", lane=lane.value, deleted=deleted, requested=len(card_ids))
        return deleted

    async def aclose(self) -> None:
        await self.sync.drain()
        await self.api.aclose()
