"""Baseline acquisition endpoint."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI
from air_mcp.api.models import APIResponse, TaskSummary


class BaselineAPI(ResourceAPI):
    async def acquire(self, case_id: str, asset_filter: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST",
            "/baseline/acquire",
            list[TaskSummary],
            json={"caseId": case_id, "filter": asset_filter},
        )
