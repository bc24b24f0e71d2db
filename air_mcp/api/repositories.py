"""Evidence repository endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, Page, Repository


class RepositoriesAPI(ResourceAPI):
    """Endpoints under ``/api/public/evidences/repositories``."""

    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/evidences/repositories",
            Page[Repository],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def create_smb(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST", "/evidences/repositories/smb", Repository, json=body
        )

    async def update_smb(self, repository_id: str, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "PUT", f"/evidences/repositories/smb/{repository_id}", Repository, json=body
        )

    async def create_sftp(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST", "/evidences/repositories/sftp", Repository, json=body
        )
