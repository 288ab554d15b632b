"""Pytest fixtures for lanesync tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="lanesync-tests-"))
os.environ["LANESYNC_DATA_DIR"] = str(_TEST_BASE_DIR / "data")
os.environ["LANESYNC_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ.pop("LANESYNC_API_URL", None)

from lanesync.adapters.http.projects import ProjectsApi  # noqa: E402
from lanesync.core.models.entities import Card  # noqa: E402
from lanesync.core.models.enums import Lane  # noqa: E402
from lanesync.core.notifications import NotificationCenter  # noqa: E402
from lanesync.services.board import BoardService  # noqa: E402
from tests.helpers.backend import FakeBackend  # noqa: E402

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def card_factory() -> Callable[..., Card]:
    """Factory for Cards with sequential ids."""
    counter = 0

    def _factory(lane: Lane = Lane.TODO, **kwargs) -> Card:
        nonlocal counter
        counter += 1
        kwargs.setdefault("id", f"p{counter}")
        kwargs.setdefault("title", f"Project {counter}")
        return Card(lane=lane, **kwargs)

    return _factory


@pytest.fixture
def backend() -> FakeBackend:
    """In-memory projects backend served through ``httpx.MockTransport``."""
    return FakeBackend(
        [
            {"id": "A", "name": "Alpha", "status": "todo", "start_date": "2024-03-01"},
            {"id": "B", "name": "Beta", "status": "todo", "start_date": "2024-02-01"},
            {"id": "C", "name": "Gamma", "status": "in-progress", "start_date": "2024-01-01"},
        ]
    )


@pytest.fixture
async def api(backend: FakeBackend) -> AsyncGenerator[ProjectsApi]:
    client = httpx.AsyncClient(transport=backend.transport(), base_url="http://backend.test")
    yield ProjectsApi(client=client)
    await client.aclose()


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
async def service(
    api: ProjectsApi, notifications: NotificationCenter
) -> AsyncGenerator[BoardService]:
    """BoardService over the fake backend, loaded in newest-first order."""
    board_service = BoardService(api, notifications=notifications)
    assert await board_service.load()
    yield board_service
    await board_service.aclose()
