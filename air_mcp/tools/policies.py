"""Policy and settings tools."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import yes_no


def register_policy_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the policy and settings tools."""

    async def list_policies(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.policies.list(organization_ids)
        except Exception as e:
            return tool_failure("list_policies", "fetch policies", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_policies", f"Error fetching policies: {response.error_text}"
            )

        page = response.result
        lines = "\n".join(
            f"{policy.id}: {policy.name} (Default: {yes_no(policy.default)}, "
            f"Created by: {policy.created_by})"
            for policy in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} policies:\n{lines}")

    registry.register(
        Tool(
            name="list_policies",
            description="List all policies in the system",
            handler=list_policies,
        )
    )

    async def update_banner_message(enabled: bool) -> ToolResult:
        try:
            response = await client.settings.update_banner(enabled)
        except Exception as e:
            return tool_failure("update_banner_message", "update banner message", e)

        if not response.success:
            return envelope_failure(
                "update_banner_message",
                f"Failed to update banner message (Status code: {response.status_code})\n"
                f"Errors: {response.error_text}",
            )

        return ToolResult.ok(
            f"Banner message updated successfully (Status code: {response.status_code})"
        )

    registry.register(
        Tool(
            name="update_banner_message",
            description="Enable or disable the console banner message",
            handler=update_banner_message,
        )
    )
