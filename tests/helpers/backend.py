"""Fake projects backend for ``httpx.MockTransport``."""

from __future__ import annotations

import json
from typing import Any

import httpx

PROJECTS_PREFIX = "/api/projects"


class FakeBackend:
    """Serves ``/api/projects`` from memory and records every request.

    Set ``*_status`` to a non-2xx code to make that endpoint fail, or
    ``offline`` to raise a transport error for every request.
    """

    def __init__(self, projects: list[dict[str, Any]] | None = None) -> None:
        self.projects: list[dict[str, Any]] = [dict(p) for p in projects or []]
        self.requests: list[httpx.Request] = []
        self.list_status = 200
        self.patch_status = 200
        self.delete_status = 200
        self.offline = False

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def patches(self) -> list[tuple[str, dict[str, Any]]]:
        """(path, json body) of every PATCH received."""
        return [
            (request.url.path, json.loads(request.content))
            for request in self.requests
            if request.method == "PATCH"
        ]

    def status_of(self, project_id: str) -> str | None:
        for project in self.projects:
            if str(project["id"]) == project_id:
                return project.get("status")
        return None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.offline:
            raise httpx.ConnectError("backend offline", request=request)

        path = request.url.path
        if request.method == "GET" and path == PROJECTS_PREFIX:
            if self.list_status != 200:
                return httpx.Response(self.list_status, json={"error": "list failed"})
            return httpx.Response(200, json=self.projects)

        parts = path.removeprefix(PROJECTS_PREFIX).strip("/").split("/")
        project = next((p for p in self.projects if str(p["id"]) == parts[0]), None)

        if request.method == "PATCH" and len(parts) == 2 and parts[1] == "status":
            if self.patch_status != 200:
                return httpx.Response(self.patch_status, json={"error": "update failed"})
            if project is None:
                return httpx.Response(404, json={"error": "not found"})
            project["status"] = json.loads(request.content)["status"]
            return httpx.Response(200, json=project)

        if request.method == "DELETE" and len(parts) == 1:
            if self.delete_status != 200:
                return httpx.Response(self.delete_status, json={"error": "delete failed"})
            if project is None:
                return httpx.Response(404, json={"error": "not found"})
            self.projects.remove(project)
            return httpx.Response(204)

        return httpx.Response(404, json={"error": "no route"})
