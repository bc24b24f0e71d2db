"""Audit log endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import PUBLIC_API, ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, AuditLog, Page


class AuditAPI(ResourceAPI):
    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/audit-logs",
            Page[AuditLog],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def export(self, organization_ids: str | list[str] | None = None) -> int:
        """Start a server-side export and return the HTTP status code.

        The export endpoint returns no envelope; any 2xx status is success.
        """
        response = await self._client.request(
            "GET",
            f"{PUBLIC_API}/audit-logs/export",
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )
        return response.status_code
