"""Asset task assignment tools: reboot, shutdown, isolation, log retrieval, update."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_task_summaries

NO_MANAGED_ENDPOINTS_ERROR = "No managed endpoint(s) found by provided filter criteria"
NO_MANAGED_ENDPOINTS_HINT = (
    "No managed endpoints found. Make sure the endpoint IDs and organization IDs are "
    "correct. The endpoint must exist in the specified organization. Try using the "
    "list_assets tool first to verify the endpoints, and ensure you provide the correct "
    "organizationIds parameter."
)


def _asset_filter(
    endpoint_ids: list[str],
    organization_ids: list[int],
    managed_status: list[str],
) -> dict[str, Any]:
    return {
        "includedEndpointIds": endpoint_ids,
        "organizationIds": organization_ids,
        "managedStatus": managed_status,
    }


def _make_handler(
    client: AIRClient,
    tool_name: str,
    kind: str,
    label: str,
) -> Callable[..., Awaitable[ToolResult]]:
    """Build the handler for one asset task kind.

    ``label`` is the human name used in result text ("reboot", "log retrieval").
    """

    async def handler(
        endpoint_ids: list[str],
        organization_ids: list[int],
        managed_status: list[str],
    ) -> ToolResult:
        asset_filter = _asset_filter(endpoint_ids, organization_ids, managed_status)
        try:
            response = await client.assets.assign_task(kind, asset_filter)
        except Exception as e:
            return tool_failure(tool_name, f"assign {label} task", e)

        if not response.success:
            error_text = response.error_text
            if NO_MANAGED_ENDPOINTS_ERROR in error_text and kind == "retrieve-logs":
                error_text = NO_MANAGED_ENDPOINTS_HINT
            return envelope_failure(tool_name, f"Error assigning {label} task: {error_text}")

        tasks = response.result or []
        return ToolResult.ok(
            f"Successfully assigned {len(tasks)} {label} task(s):\n{format_task_summaries(tasks)}"
        )

    return handler


def register_assign_task_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the asset task assignment tools."""
    for tool_name, kind, label, description in (
        ("assign_reboot_task", "reboot", "reboot", "Assign a reboot task to specific endpoints"),
        (
            "assign_shutdown_task",
            "shutdown",
            "shutdown",
            "Assign a shutdown task to specific endpoints",
        ),
        (
            "assign_log_retrieval_task",
            "retrieve-logs",
            "log retrieval",
            "Assign a log retrieval task to specific endpoints. organizationIds is required.",
        ),
        (
            "assign_version_update_task",
            "version-update",
            "version update",
            "Assign an agent version update task to specific endpoints",
        ),
    ):
        registry.register(
            Tool(
                name=tool_name,
                description=description,
                handler=_make_handler(client, tool_name, kind, label),
            )
        )

    async def assign_isolation_task(
        endpoint_ids: list[str],
        organization_ids: list[int],
        managed_status: list[str],
        enabled: bool = True,
    ) -> ToolResult:
        asset_filter = _asset_filter(endpoint_ids, organization_ids, managed_status)
        try:
            response = await client.assets.assign_task("isolation", asset_filter, enabled=enabled)
        except Exception as e:
            return tool_failure("assign_isolation_task", "assign isolation task", e)

        if not response.success:
            return envelope_failure(
                "assign_isolation_task",
                f"Error assigning isolation task: {response.error_text}",
            )

        tasks = response.result or []
        action = "isolation" if enabled else "unisolation"
        return ToolResult.ok(
            f"Successfully assigned {len(tasks)} {action} task(s):\n{format_task_summaries(tasks)}"
        )

    registry.register(
        Tool(
            name="assign_isolation_task",
            description=(
                "Assign an isolation task to specific endpoints. Set enabled to false to "
                "unisolate them."
            ),
            handler=assign_isolation_task,
        )
    )
