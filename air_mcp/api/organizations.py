"""Organization endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI
from air_mcp.api.models import APIResponse, Organization, Page, User


class OrganizationsAPI(ResourceAPI):
    async def list(self) -> APIResponse[Any]:
        return await self._envelope("GET", "/organizations", Page[Organization])

    async def users(self, organization_id: str | int) -> APIResponse[Any]:
        return await self._envelope(
            "GET", f"/organizations/{organization_id}/users", Page[User]
        )
