"""Acquisition profile and evidence acquisition endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import (
    AcquisitionProfile,
    AcquisitionProfileDetail,
    APIResponse,
    Page,
    TaskSummary,
)


class AcquisitionsAPI(ResourceAPI):
    """Endpoints under ``/api/public/acquisitions``."""

    async def list_profiles(
        self,
        organization_ids: str | list[str] | None = None,
        all_organizations: bool = True,
    ) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/acquisitions/profiles",
            Page[AcquisitionProfile],
            params={
                "filter[organizationIds]": org_ids_param(organization_ids),
                "filter[allOrganizations]": "true" if all_organizations else "false",
            },
        )

    async def get_profile(self, profile_id: str) -> APIResponse[Any]:
        return await self._envelope(
            "GET", f"/acquisitions/profiles/{profile_id}", AcquisitionProfileDetail
        )

    async def create_profile(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope("POST", "/acquisitions/profiles", json=body)

    async def acquire(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST", "/acquisitions/acquire", list[TaskSummary], json=body
        )

    async def acquire_image(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope(
            "POST", "/acquisitions/acquire/image", list[TaskSummary], json=body
        )
