"""Configuration loader for lanesync."""

from __future__ import annotations

import asyncio
import os
import tomllib
from typing import TYPE_CHECKING

import tomlkit
from pydantic import BaseModel, Field, field_validator

from lanesync.atomic import atomic_write
from lanesync.constants import DEFAULT_API_URL, HTTP_TIMEOUT, MAX_NOTIFICATIONS, PROJECTS_PATH
from lanesync.core.models.enums import SortOrder
from lanesync.paths import ensure_directories, get_config_path

if TYPE_CHECKING:
    from pathlib import Path


API_URL_ENV = "LANESYNC_API_URL"


class ApiConfig(BaseModel):
    """Projects backend connection settings."""

    base_url: str = Field(default=DEFAULT_API_URL, description="Backend root URL")
    projects_path: str = Field(default=PROJECTS_PATH, description="Projects resource path")
    timeout_seconds: float = Field(default=HTTP_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("projects_path")
    @classmethod
    def normalize_projects_path(cls, value: str) -> str:
        return "/" + value.strip("/")


class UIConfig(BaseModel):
    """UI-related user preferences."""

    default_sort: SortOrder = Field(default=SortOrder.NEWEST)
    max_notifications: int = Field(default=MAX_NOTIFICATIONS)

    @field_validator("default_sort", mode="before")
    @classmethod
    def coerce_default_sort(cls, value: object) -> object:
        """Gracefully coerce unknown sort orders to the default."""
        if isinstance(value, str) and value in {s.value for s in SortOrder}:
            return value
        return SortOrder.NEWEST

    @field_validator("max_notifications", mode="before")
    @classmethod
    def coerce_max_notifications(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return MAX_NOTIFICATIONS


class LaneSyncConfig(BaseModel):
    """Root configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> LaneSyncConfig:
        """Load configuration from TOML file or use defaults.

        ``LANESYNC_API_URL`` overrides ``api.base_url`` when set.
        """
        ensure_directories()
        if config_path is None:
            config_path = get_config_path()

        data: dict = {}
        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)

        env_url = os.environ.get(API_URL_ENV)
        if env_url:
            data.setdefault("api", {})
            data["api"]["base_url"] = env_url

        return cls.model_validate(data)

    @property
    def projects_url(self) -> str:
        return f"{self.api.base_url}{self.api.projects_path}"

    def render(self) -> str:
        """Serialize current config to TOML text."""
        doc = tomlkit.document()

        api_table = tomlkit.table()
        for key, value in self.api.model_dump().items():
            if value is not None:
                api_table[key] = value
        doc["api"] = api_table

        ui_table = tomlkit.table()
        for key, value in self.ui.model_dump(mode="json").items():
            if value is not None:
                ui_table[key] = value
        doc["ui"] = ui_table

        return tomlkit.dumps(doc)

    async def save(self, path: Path) -> None:
        """Write config to ``path`` atomically (created if missing)."""
        await asyncio.to_thread(atomic_write, path, self.render())
