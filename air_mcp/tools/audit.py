"""Audit log tools."""

from __future__ import annotations

from air_mcp.api.base import org_ids_param
from air_mcp.api.client import AIRClient
from air_mcp.api.models import AuditLog
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_datetime


def _format_audit_log(entry: AuditLog) -> str:
    return (
        f"{entry.id}: [{format_datetime(entry.created_at)}] {entry.type} "
        f"by {entry.performed_by or 'unknown'} - {entry.description}"
    )


def register_audit_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the audit log tools."""

    async def list_audit_logs(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.audit.list(organization_ids)
        except Exception as e:
            return tool_failure("list_audit_logs", "fetch audit logs", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_audit_logs", f"Error fetching audit logs: {response.error_text}"
            )

        page = response.result
        lines = "\n".join(_format_audit_log(entry) for entry in page.entities)
        return ToolResult.ok(f"Found {page.total_entity_count} audit logs:\n{lines}")

    registry.register(
        Tool(
            name="list_audit_logs",
            description="List audit log entries, optionally filtered by organization",
            handler=list_audit_logs,
        )
    )

    async def export_audit_logs(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            await client.audit.export(organization_ids)
        except Exception as e:
            return tool_failure("export_audit_logs", "initiate audit log export", e)

        shown = org_ids_param(organization_ids).replace(",", ", ")
        return ToolResult.ok(
            f"Successfully initiated audit log export for organization IDs: {shown}. "
            "The export process runs in the background on the AIR server."
        )

    registry.register(
        Tool(
            name="export_audit_logs",
            description=(
                "Export audit logs from the AIR system. The export runs in the background "
                "on the AIR server."
            ),
            handler=export_audit_logs,
        )
    )
