"""Triage rule and tag tools."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.api.models import TriageTag
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure


def _format_tag(tag: TriageTag) -> str:
    if tag.count is not None:
        return f"{tag.id}: {tag.name} (Used in {tag.count} rules)"
    return f"{tag.id}: {tag.name}"


def register_triage_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the triage tools."""

    async def list_triage_rules(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.triages.rules(organization_ids)
        except Exception as e:
            return tool_failure("list_triage_rules", "fetch triage rules", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_triage_rules", f"Error fetching triage rules: {response.error_text}"
            )

        page = response.result
        lines = "\n".join(
            f"{rule.id}: {rule.description} (Engine: {rule.engine}, Search In: {rule.search_in})"
            for rule in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} triage rules:\n{lines}")

    registry.register(
        Tool(
            name="list_triage_rules",
            description="List all triage rules (YARA, Sigma, osquery) in the system",
            handler=list_triage_rules,
        )
    )

    async def list_triage_tags(
        organization_ids: str | list[str] | None = None,
        with_count: bool = True,
    ) -> ToolResult:
        try:
            response = await client.triages.tags(organization_ids, with_count)
        except Exception as e:
            return tool_failure("list_triage_tags", "fetch triage tags", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_triage_tags", f"Error fetching triage tags: {response.error_text}"
            )

        page = response.result
        lines = "\n".join(_format_tag(tag) for tag in page.entities)
        return ToolResult.ok(f"Found {page.total_entity_count} triage tags:\n{lines}")

    registry.register(
        Tool(
            name="list_triage_tags",
            description="List triage tags, optionally with the number of rules using each",
            handler=list_triage_tags,
        )
    )
