"""Textual smoke tests for the board screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from lanesync.adapters.http.projects import ProjectsApi
from lanesync.config import LaneSyncConfig
from lanesync.core.drag import DragState
from lanesync.core.models.enums import Lane, NotificationKind
from lanesync.services.board import BoardService
from lanesync.tui.app import LaneSyncApp
from lanesync.tui.screens.board import BoardScreen
from lanesync.tui.widgets.card import CardWidget
from lanesync.tui.widgets.column import LaneColumn

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from textual.pilot import Pilot

    from tests.helpers.backend import FakeBackend

pytestmark = pytest.mark.integration


@pytest.fixture
async def app(backend: FakeBackend) -> AsyncGenerator[LaneSyncApp]:
    client = httpx.AsyncClient(transport=backend.transport(), base_url="http://backend.test")
    service = BoardService(ProjectsApi(client=client))
    yield LaneSyncApp(config=LaneSyncConfig(), service=service)
    await client.aclose()


def get_board_screen(app: LaneSyncApp) -> BoardScreen:
    screen = app.screen
    assert isinstance(screen, BoardScreen)
    return screen


async def settle(pilot: Pilot) -> None:
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()


def column(app: LaneSyncApp, lane: Lane) -> LaneColumn:
    return get_board_screen(app).query_one(f"#column-{lane.value.lower()}", LaneColumn)


def card_widget(app: LaneSyncApp, lane: Lane, card_id: str) -> CardWidget:
    widget = column(app, lane).find_card(card_id)
    assert widget is not None, f"{card_id} not rendered in {lane.value}"
    return widget


class TestBoardScreen:
    async def test_cards_render_in_lanes(self, app: LaneSyncApp) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)

            assert column(app, Lane.TODO).card_ids == ["A", "B"]
            assert column(app, Lane.IN_PROGRESS).card_ids == ["C"]
            assert column(app, Lane.COMPLETED).card_ids == []

    async def test_keyboard_move_syncs_status(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            card_widget(app, Lane.TODO, "A").focus()
            await pilot.pause()

            await pilot.press("right_square_bracket")
            await app.service.sync.drain()
            await pilot.pause()

            assert column(app, Lane.IN_PROGRESS).card_ids == ["C", "A"]
            assert column(app, Lane.TODO).card_ids == ["B"]
            assert backend.status_of("A") == "in-progress"

    async def test_drag_release_over_column_changes_lane(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            screen = get_board_screen(app)
            target = column(app, Lane.COMPLETED).region

            screen.on_card_widget_drag_started(CardWidget.DragStarted("B", 1, 1))
            assert app.service.drag.state is DragState.DRAGGING
            screen.on_card_widget_drag_released(
                CardWidget.DragReleased("B", target.x + 2, target.y + target.height // 2)
            )
            await app.service.sync.drain()
            await pilot.pause()

            assert app.service.drag.state is DragState.IDLE
            assert column(app, Lane.COMPLETED).card_ids == ["B"]
            assert backend.patches == [("/api/projects/B/status", {"status": "completed"})]

    async def test_escape_cancels_drag(self, app: LaneSyncApp, backend: FakeBackend) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            screen = get_board_screen(app)

            screen.on_card_widget_drag_started(CardWidget.DragStarted("A", 1, 1))
            await pilot.press("escape")

            assert app.service.drag.state is DragState.IDLE
            assert backend.patches == []

    async def test_failed_sync_keeps_card_and_notifies(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        backend.patch_status = 500
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            card_widget(app, Lane.IN_PROGRESS, "C").focus()

            await pilot.press("right_square_bracket")
            await app.service.sync.drain()
            await pilot.pause()

            assert column(app, Lane.COMPLETED).card_ids == ["C"]
            assert app.service.notifications.count(NotificationKind.ERROR) == 1
            assert backend.status_of("C") == "in-progress"


class TestOpaqueCardIds:
    async def test_ids_with_punctuation_render_and_move(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        backend.projects = [
            {"id": "a b", "name": "Spaced", "status": "todo", "start_date": "2024-03-01"},
            {"id": "proj.42", "name": "Dotted", "status": "todo", "start_date": "2024-02-01"},
        ]
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)

            assert column(app, Lane.TODO).card_ids == ["a b", "proj.42"]

            card_widget(app, Lane.TODO, "proj.42").focus()
            await pilot.press("right_square_bracket")
            await app.service.sync.drain()
            await pilot.pause()

            assert column(app, Lane.IN_PROGRESS).card_ids == ["proj.42"]
            assert backend.status_of("proj.42") == "in-progress"


class TestMouseDrag:
    async def test_reorder_waits_for_midpoint_then_drops_in_place(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            first = card_widget(app, Lane.TODO, "A")
            second = card_widget(app, Lane.TODO, "B")

            await pilot.mouse_down(first, offset=(2, 1))
            await pilot.hover(second, offset=(2, 0))
            await pilot.pause()

            assert app.service.drag.state is DragState.DRAGGING
            assert first.has_class("dragging")
            assert column(app, Lane.TODO).card_ids == ["A", "B"]

            await pilot.hover(second, offset=(2, second.region.height - 1))
            await pilot.pause()

            assert [card.id for card in app.service.board.cards] == ["B", "A", "C"]
            assert column(app, Lane.TODO).card_ids == ["B", "A"]

            await pilot.mouse_up(first, offset=(2, 1))
            await pilot.pause()

            assert app.service.drag.state is DragState.IDLE
            assert not first.has_class("dragging")
            assert column(app, Lane.TODO).card_ids == ["B", "A"]
            assert backend.patches == []


class TestCardRefresh:
    async def test_priority_class_follows_refreshed_card(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            widget = card_widget(app, Lane.TODO, "A")
            assert widget.has_class("priority-medium")

            backend.projects[0]["priority"] = "high"
            await pilot.press("r")
            await settle(pilot)

            assert card_widget(app, Lane.TODO, "A") is widget
            assert widget.has_class("priority-high")
            assert not widget.has_class("priority-medium")


class TestClearLane:
    async def test_shift_x_clears_focused_lane(
        self, app: LaneSyncApp, backend: FakeBackend
    ) -> None:
        async with app.run_test(size=(140, 40)) as pilot:
            await settle(pilot)
            card_widget(app, Lane.TODO, "B").focus()
            await pilot.pause()

            await pilot.press("X")
            await settle(pilot)

            assert column(app, Lane.TODO).card_ids == []
            assert column(app, Lane.IN_PROGRESS).card_ids == ["C"]
            assert [project["id"] for project in backend.projects] == ["C"]
            assert app.service.notifications.count(NotificationKind.SUCCESS) == 2
