"""Assets and asset task assignment endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import (
    APIResponse,
    Asset,
    AssetDetail,
    AssetTask,
    Page,
    TaskSummary,
)

# Task kinds accepted by POST /assets/tasks/{kind}
TASK_KINDS = ("reboot", "shutdown", "isolation", "retrieve-logs", "version-update")


class AssetsAPI(ResourceAPI):
    """Endpoints under ``/api/public/assets``."""

    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/assets",
            Page[Asset],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def get(self, asset_id: str) -> APIResponse[Any]:
        return await self._envelope("GET", f"/assets/{asset_id}", AssetDetail)

    async def tasks(self, asset_id: str) -> APIResponse[Any]:
        return await self._envelope("GET", f"/assets/{asset_id}/tasks", Page[AssetTask])

    async def uninstall_without_purge(self, asset_filter: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST",
            "/assets/uninstall-without-purge",
            json={"filter": asset_filter},
        )

    async def assign_task(
        self,
        kind: str,
        asset_filter: dict[str, Any],
        **extra: Any,
    ) -> APIResponse[Any]:
        """Create an asset task of ``kind`` for the endpoints matching the filter.

        Extra keyword arguments are sent alongside the filter in the body
        (the isolation task takes ``enabled``).
        """
        if kind not in TASK_KINDS:
            raise ValueError(f"Unknown asset task kind: {kind}")
        body = {**extra, "filter": asset_filter}
        return await self._envelope(
            "POST", f"/assets/tasks/{kind}", list[TaskSummary], json=body
        )
