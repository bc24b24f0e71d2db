"""Case, case note and case export endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import PUBLIC_API, AIRAPIError, ResourceAPI, org_ids_param
from air_mcp.api.models import APIResponse, Case, CaseNote, Page


class CasesAPI(ResourceAPI):
    async def list(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._envelope(
            "GET",
            "/cases",
            Page[Case],
            params={"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def create(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope("POST", "/cases", Case, json=body)

    # Notes

    async def add_note(self, case_id: str, note: str) -> APIResponse[Any]:
        return await self._envelope(
            "POST", f"/cases/{case_id}/notes", CaseNote, json={"value": note}
        )

    async def update_note(self, case_id: str, note_id: str, note: str) -> APIResponse[Any]:
        return await self._envelope(
            "PATCH",
            f"/cases/{case_id}/notes/{note_id}",
            CaseNote,
            json={"value": note},
        )

    async def delete_note(self, case_id: str, note_id: str) -> APIResponse[Any]:
        return await self._envelope("DELETE", f"/cases/{case_id}/notes/{note_id}")

    # Exports

    async def export(self, organization_ids: str | list[str] | None = None) -> APIResponse[Any]:
        return await self._export(
            "/cases/export",
            {"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def export_notes(self, case_id: str) -> APIResponse[Any]:
        return await self._export(f"/cases/{case_id}/notes/export")

    async def export_endpoints(
        self,
        case_id: str,
        organization_ids: str | list[str] | None = None,
    ) -> APIResponse[Any]:
        return await self._export(
            f"/cases/{case_id}/endpoints/export",
            {"filter[organizationIds]": org_ids_param(organization_ids)},
        )

    async def _export(self, path: str, params: dict[str, Any] | None = None) -> APIResponse[Any]:
        """Exports answer with a file, not an envelope; HTTP 200 means success."""
        try:
            response = await self._client.request("GET", f"{PUBLIC_API}{path}", params=params)
        except AIRAPIError as e:
            if e.status_code is None:
                raise
            return APIResponse(success=False, statusCode=e.status_code, errors=[e.message])
        return APIResponse(
            success=response.status_code == 200,
            statusCode=response.status_code,
        )
