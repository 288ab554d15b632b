"""Main lanesync TUI application."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from textual.app import App

from lanesync.config import LaneSyncConfig
from lanesync.constants import DEBUG_BUILD, NOTIFICATION_SEVERITY, SHUTDOWN_TIMEOUT
from lanesync.debug_log import export_logs_to_file, log, setup_debug_logging
from lanesync.keybindings import APP_BINDINGS
from lanesync.paths import get_debug_log_path
from lanesync.services.board import BoardService
from lanesync.theme import LANESYNC_THEME
from lanesync.tui.screens.board import BoardScreen

if TYPE_CHECKING:
    from lanesync.core.notifications import Notification


class LaneSyncApp(App):
    """Project board with optimistic drag-and-drop status changes."""

    TITLE = "lanesync"

    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        config: LaneSyncConfig | None = None,
        service: BoardService | None = None,
    ) -> None:
        super().__init__()
        self.register_theme(LANESYNC_THEME)
        self.theme = "lanesync"

        self.config = config or LaneSyncConfig.load()
        self.service = service or BoardService.from_config(self.config)

    async def on_mount(self) -> None:
        """Wire notifications to toasts and show the board."""
        setup_debug_logging(logging.DEBUG if DEBUG_BUILD else logging.INFO)
        self.service.notifications.add_listener(self._show_notification)
        self.log("Board service ready", projects_url=self.config.projects_url)
        await self.push_screen(BoardScreen(self.service))

    def _show_notification(self, notification: Notification) -> None:
        self.notify(notification.message, severity=NOTIFICATION_SEVERITY[notification.kind])

    async def on_unmount(self) -> None:
        """Clean up on unmount."""
        await self.cleanup()

    async def cleanup(self) -> None:
        """Let in-flight status syncs settle, then close the HTTP client."""
        self.service.notifications.remove_listener(self._show_notification)
        try:
            await asyncio.wait_for(self.service.aclose(), timeout=SHUTDOWN_TIMEOUT)
        except TimeoutError:
            log.warning(
                "Timed out waiting for pending status syncs",
                pending=self.service.sync.pending,
            )
        if DEBUG_BUILD:
            written = export_logs_to_file(str(get_debug_log_path()))
            self.log("Debug log exported", entries=written)
