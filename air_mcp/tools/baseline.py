"""Baseline acquisition tool."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.schemas import BaselineAssetFilter


def register_baseline_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the baseline tools."""

    async def acquire_baseline(case_id: str, asset_filter: BaselineAssetFilter) -> ToolResult:
        try:
            response = await client.baseline.acquire(case_id, asset_filter.to_request())
        except Exception as e:
            return tool_failure("acquire_baseline", "acquire baseline", e)

        if not response.success:
            return envelope_failure(
                "acquire_baseline", f"Error acquiring baseline: {response.error_text}"
            )

        tasks = response.result or []
        if not tasks:
            return ToolResult.ok(
                "No baseline acquisition tasks created. Check the filter criteria and "
                "ensure target endpoints exist."
            )

        details = "\n\n".join(
            f"Task ID: {task.id}\nName: {task.name}\nOrganization ID: {task.organization_id}"
            for task in tasks
        )
        return ToolResult.ok(
            f"Successfully created {len(tasks)} baseline acquisition task(s):\n\n{details}"
        )

    registry.register(
        Tool(
            name="acquire_baseline",
            description=(
                "Acquire a baseline from specific endpoints for comparison in a case. "
                "filter.includedEndpointIds is required; filter.organizationIds defaults to [0]."
            ),
            handler=acquire_baseline,
        )
    )
