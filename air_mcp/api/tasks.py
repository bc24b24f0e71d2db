"""Task endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, Page, Task, TaskAssignment


class TasksAPI(ResourceAPI):
    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/tasks",
            Page[Task],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def assignments(self, task_id: str) -> APIResponse[Any]:
        return await self._envelope(
            "GET", f"/tasks/{task_id}/assignments", Page[TaskAssignment]
        )
