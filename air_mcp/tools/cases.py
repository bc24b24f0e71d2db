"""Case tools: listing and creation, notes, and exports."""

from __future__ import annotations

from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import APIResponse, CaseNote
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_date, format_datetime


def _format_note(note: CaseNote) -> str:
    return (
        f"Note ID: {note.id}\n"
        f"Content: {note.value}\n"
        f"Written at: {format_datetime(note.written_at)}\n"
        f"Written by: {note.written_by}"
    )


def _export_result(tool_name: str, label: str, response: APIResponse[Any]) -> ToolResult:
    if not response.success:
        reason = response.error_text or f"unexpected status code {response.status_code}"
        return envelope_failure(tool_name, f"Error exporting {label}: {reason}")
    return ToolResult.ok(
        f"{label[:1].upper()}{label[1:]} export initiated successfully. "
        f"Status code: {response.status_code}"
    )


def register_case_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the case, case note and case export tools."""

    async def list_cases(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.cases.list(organization_ids)
        except Exception as e:
            return tool_failure("list_cases", "fetch cases", e)

        if not response.success or response.result is None:
            return envelope_failure("list_cases", f"Error fetching cases: {response.error_text}")

        page = response.result
        if not page.entities:
            return ToolResult.ok("No cases found matching the criteria.")

        lines = "\n".join(
            f"{case.id}: {case.name} (Status: {case.status}, "
            f"Started: {format_date(case.started_on)})"
            for case in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} cases:\n{lines}")

    registry.register(
        Tool(
            name="list_cases",
            description="List all cases in the system",
            handler=list_cases,
        )
    )

    async def create_case(
        organization_id: int,
        name: str,
        owner_user_id: str,
        visibility: str = "public-to-organization",
        assigned_user_ids: list[str] | None = None,
    ) -> ToolResult:
        body = {
            "organizationId": organization_id,
            "name": name,
            "ownerUserId": owner_user_id,
            "visibility": visibility,
            "assignedUserIds": assigned_user_ids or [],
        }
        try:
            response = await client.cases.create(body)
        except Exception as e:
            return tool_failure("create_case", "create case", e)

        if not response.success or response.result is None:
            return envelope_failure("create_case", f"Error creating case: {response.error_text}")

        case = response.result
        return ToolResult.ok(
            f"Successfully created case {case.id}: {case.name} "
            f"(Status: {case.status}, Owner: {case.owner_user_id}, "
            f"Visibility: {case.visibility})"
        )

    registry.register(
        Tool(
            name="create_case",
            description="Create a new case in an organization",
            handler=create_case,
        )
    )

    # Notes

    async def add_note_to_case(case_id: str, note: str) -> ToolResult:
        try:
            response = await client.cases.add_note(case_id, note)
        except Exception as e:
            return tool_failure("add_note_to_case", "add note to case", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "add_note_to_case", f"Error adding note to case: {response.error_text}"
            )

        return ToolResult.ok(
            f"Successfully added note to case {case_id}:\n{_format_note(response.result)}"
        )

    registry.register(
        Tool(
            name="add_note_to_case",
            description="Add a note to a specific case",
            handler=add_note_to_case,
        )
    )

    async def update_note_in_case(case_id: str, note_id: str, note: str) -> ToolResult:
        try:
            response = await client.cases.update_note(case_id, note_id, note)
        except Exception as e:
            return tool_failure("update_note_in_case", "update note in case", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "update_note_in_case", f"Error updating note in case: {response.error_text}"
            )

        return ToolResult.ok(
            f"Successfully updated note in case {case_id}:\n{_format_note(response.result)}"
        )

    registry.register(
        Tool(
            name="update_note_in_case",
            description="Update the content of an existing note in a case",
            handler=update_note_in_case,
        )
    )

    async def delete_note_from_case(case_id: str, note_id: str) -> ToolResult:
        try:
            response = await client.cases.delete_note(case_id, note_id)
        except Exception as e:
            return tool_failure("delete_note_from_case", "delete note from case", e)

        if not response.success:
            return envelope_failure(
                "delete_note_from_case", f"Error deleting note from case: {response.error_text}"
            )

        return ToolResult.ok(f"Successfully deleted note with ID {note_id} from case {case_id}")

    registry.register(
        Tool(
            name="delete_note_from_case",
            description="Delete a note from a case",
            handler=delete_note_from_case,
        )
    )

    # Exports

    async def export_cases(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.cases.export(organization_ids)
        except Exception as e:
            return tool_failure("export_cases", "export cases", e)
        return _export_result("export_cases", "cases", response)

    registry.register(
        Tool(
            name="export_cases",
            description="Export cases, optionally filtered by organization",
            handler=export_cases,
        )
    )

    async def export_case_notes(case_id: str) -> ToolResult:
        try:
            response = await client.cases.export_notes(case_id)
        except Exception as e:
            return tool_failure("export_case_notes", "export case notes", e)
        return _export_result("export_case_notes", "case notes", response)

    registry.register(
        Tool(
            name="export_case_notes",
            description="Export the notes of a specific case",
            handler=export_case_notes,
        )
    )

    async def export_case_endpoints(
        case_id: str,
        organization_ids: str | list[str] | None = None,
    ) -> ToolResult:
        try:
            response = await client.cases.export_endpoints(case_id, organization_ids)
        except Exception as e:
            return tool_failure("export_case_endpoints", "export case endpoints", e)
        return _export_result("export_case_endpoints", "case endpoints", response)

    registry.register(
        Tool(
            name="export_case_endpoints",
            description="Export the endpoints of a specific case",
            handler=export_case_endpoints,
        )
    )
