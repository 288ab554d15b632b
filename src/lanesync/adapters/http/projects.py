"""HTTP client for the backend projects resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

import httpx

from lanesync.constants import DEFAULT_API_URL, HTTP_TIMEOUT, PROJECTS_PATH

if TYPE_CHECKING:
    from types import TracebackType

    from lanesync.config import LaneSyncConfig
    from lanesync.core.models.enums import ApiStatus

logger = logging.getLogger(__name__)


class ProjectsApiError(Exception):
    """Raised when a projects request fails (transport error or non-2xx)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProjectsApi:
    """Thin async wrapper around ``/api/projects``.

    Owns its ``httpx.AsyncClient`` unless one is passed in.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        projects_path: str = PROJECTS_PATH,
        timeout: float = HTTP_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._projects_path = "/" + projects_path.strip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @classmethod
    def from_config(
        cls, config: LaneSyncConfig, *, client: httpx.AsyncClient | None = None
    ) -> ProjectsApi:
        return cls(
            config.api.base_url,
            projects_path=config.api.projects_path,
            timeout=config.api.timeout_seconds,
            client=client,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        # InvalidURL and StreamError sit outside the HTTPError hierarchy.
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ProjectsApiError(f"{method} {path} failed: {exc}") from exc

        if not response.is_success:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise ProjectsApiError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ProjectsApiError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from exc

    async def list_projects(self) -> list[dict[str, Any]]:
        response = await self._request("GET", self._projects_path)
        payload = self._json(response)
        if isinstance(payload, list):
            return payload
        if not isinstance(payload, dict):
            raise ProjectsApiError("Unexpected projects payload", status_code=response.status_code)
        return list(payload.get("projects") or [])

    async def update_status(self, project_id: str, status: ApiStatus) -> dict[str, Any]:
        response = await self._request(
            "PATCH",
            f"{self._projects_path}/{project_id}/status",
            json={"status": status.value},
        )
        return self._json(response)

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"{self._projects_path}/{project_id}")
