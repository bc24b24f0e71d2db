"""Policy endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, Page, Policy


class PoliciesAPI(ResourceAPI):
    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/policies",
            Page[Policy],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )
