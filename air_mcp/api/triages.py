"""Triage rule and tag endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, Page, TriageRule, TriageTag


class TriagesAPI(ResourceAPI):
    async def rules(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/triages/rules",
            Page[TriageRule],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def tags(
        self,
        organization_ids: str | list[str] | None = None,
        with_count: bool = True,
    ) -> APIResponse[Any]:
        # The tags endpoint takes the singular filter key.
        return await self._envelope(
            "GET",
            "/triages/tags",
            Page[TriageTag],
            params={
                "filter[organizationId]": org_ids_param(organization_ids),
                "filter[withCount]": "true" if with_count else "false",
            },
        )
