"""Remote sync adapter: persists lane changes to the projects backend."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from lanesync.adapters.http.projects import ProjectsApiError
from lanesync.constants import LANE_LABELS
from lanesync.core.models.enums import to_api_status
from lanesync.debug_log import log

if TYPE_CHECKING:
    from lanesync.adapters.http.projects import ProjectsApi
    from lanesync.core.drag import LaneChange
    from lanesync.core.models.enums import Lane
    from lanesync.core.notifications import NotificationCenter

SYNC_FAILED_MESSAGE = "An error occurred while updating project status"


class RemoteSyncAdapter:
    """Fire-and-forget status sync with no retry and no rollback.

    Failures become an error notification; the local board keeps its
    optimistic state until the next full refetch. Requests for the same card
    are not sequenced against each other.
    """

    def __init__(self, api: ProjectsApi, notifications: NotificationCenter) -> None:
        self._api = api
        self._notifications = notifications
        self._in_flight: set[asyncio.Task[bool]] = set()

    @property
    def pending(self) -> int:
        return len(self._in_flight)

    async def sync_status(self, card_id: str, lane: Lane) -> bool:
        """Send one PATCH for ``card_id``; True on a 2xx response."""
        status = to_api_status(lane)
        try:
            await self._api.update_status(card_id, status)
        except ProjectsApiError as exc:
            log.error("Status sync failed", card_id=card_id, status=status.value, error=str(exc))
            self._notifications.error(SYNC_FAILED_MESSAGE)
            return False
        log.info("Status synced", card_id=card_id, status=status.value)
        self._notifications.success(f'Project status changed to "{LANE_LABELS[lane]}"')
        return True

    def dispatch(self, card_id: str, lane: Lane) -> asyncio.Task[bool]:
        """Schedule ``sync_status`` on the running loop without awaiting it."""
        task = asyncio.get_running_loop().create_task(
            self.sync_status(card_id, lane), name=f"sync-status-{card_id}"
        )
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    def handle_lane_change(self, change: LaneChange) -> None:
        """``DragController`` callback."""
        self.dispatch(change.card_id, change.to_lane)

    async def drain(self) -> None:
        """Wait for every in-flight sync to settle."""
        while True:
            pending = [task for task in self._in_flight if not task.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)
