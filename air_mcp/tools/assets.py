"""Asset inventory tools."""

from __future__ import annotations

import structlog

from air_mcp.api.client import AIRClient
from air_mcp.api.models import AssetDetail
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_datetime, join_or_none, yes_no
from air_mcp.tools.schemas import UninstallAssetFilter

logger = structlog.get_logger()


def _format_asset_detail(asset: AssetDetail) -> str:
    return "\n".join(
        [
            f"Asset: {asset.name} ({asset.id})",
            f"OS: {asset.os}",
            f"Platform: {asset.platform}",
            f"IP Address: {asset.ip_address}",
            f"Group: {asset.group_full_path} ({asset.group_id})",
            f"Type: {'Server' if asset.is_server else 'Workstation'}",
            f"Management: {'Managed' if asset.is_managed else 'Unmanaged'}",
            f"Last Seen: {format_datetime(asset.last_seen)}",
            f"Version: {asset.version} ({asset.version_no})",
            f"Registered: {format_datetime(asset.registered_at)}",
            f"Created: {format_datetime(asset.created_at)}",
            f"Updated: {format_datetime(asset.updated_at)}",
            f"Organization ID: {asset.organization_id}",
            f"Online Status: {asset.online_status}",
            f"Isolation Status: {asset.isolation_status}",
            f"Tags: {join_or_none(asset.tags)}",
            f"Issues: {join_or_none(asset.issues)}",
            f"Waiting For Version Update Fix: {yes_no(asset.waiting_for_version_update_fix)}",
            f"Policies: {len(asset.policies) if asset.policies else 'None'}",
        ]
    )


def register_asset_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the asset inventory tools."""

    async def list_assets(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.assets.list(organization_ids)
        except Exception as e:
            return tool_failure("list_assets", "fetch assets", e)

        if not response.success or response.result is None:
            return envelope_failure("list_assets", f"Error fetching assets: {response.error_text}")

        page = response.result
        lines = "\n".join(
            f"{asset.id}: {asset.name} ({asset.platform} - {asset.os})" for asset in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} assets:\n{lines}")

    registry.register(
        Tool(
            name="list_assets",
            description="List all assets (endpoints) in the AIR system",
            handler=list_assets,
        )
    )

    async def get_asset_by_id(id: str) -> ToolResult:
        try:
            response = await client.assets.get(id)
        except Exception as e:
            return tool_failure("get_asset_by_id", "fetch asset", e)

        if not response.success or response.result is None:
            return envelope_failure("get_asset_by_id", f"Error fetching asset: {response.error_text}")

        return ToolResult.ok(f"Asset details:\n{_format_asset_detail(response.result)}")

    registry.register(
        Tool(
            name="get_asset_by_id",
            description=(
                "Get detailed information about a specific asset: OS, IP address, group, "
                "management and isolation status, agent version, tags and issues"
            ),
            handler=get_asset_by_id,
        )
    )

    async def get_asset_tasks_by_id(id: str) -> ToolResult:
        try:
            response = await client.assets.tasks(id)
        except Exception as e:
            return tool_failure("get_asset_tasks_by_id", "fetch asset tasks", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "get_asset_tasks_by_id", f"Error fetching asset tasks: {response.error_text}"
            )

        page = response.result
        if not page.entities:
            return ToolResult.ok(f"No tasks found for asset with ID {id}")

        lines = "\n".join(
            f"{task.id}: {task.name} (Type: {task.type}, Status: {task.status}, "
            f"Progress: {task.progress:g}%)"
            for task in page.entities
        )
        return ToolResult.ok(
            f"Found {page.total_entity_count} tasks for asset with ID {id}:\n{lines}"
        )

    registry.register(
        Tool(
            name="get_asset_tasks_by_id",
            description="List the tasks that have run or are running on a specific asset",
            handler=get_asset_tasks_by_id,
        )
    )

    async def uninstall_assets(asset_filter: UninstallAssetFilter) -> ToolResult:
        if not asset_filter.included_endpoint_ids:
            return ToolResult.fail(
                "Error: You must provide at least one endpoint ID in "
                "`filter.includedEndpointIds` to uninstall."
            )

        try:
            response = await client.assets.uninstall_without_purge(asset_filter.to_request())
        except Exception as e:
            return tool_failure("uninstall_assets", "uninstall assets", e)

        if not response.success:
            return envelope_failure(
                "uninstall_assets",
                f"Error uninstalling assets: {response.error_text} "
                f"(Status Code: {response.status_code})",
            )

        logger.info("assets_uninstall_requested", endpoint_ids=asset_filter.included_endpoint_ids)
        targeted = ", ".join(asset_filter.included_endpoint_ids)
        return ToolResult.ok(
            "Successfully initiated uninstall task for assets matching the filter "
            f"(targeted IDs: {targeted})."
        )

    registry.register(
        Tool(
            name="uninstall_assets",
            description=(
                "Uninstall the AIR agent from assets matching a filter, without purging "
                "their data. At least one ID in filter.includedEndpointIds is required."
            ),
            handler=uninstall_assets,
        )
    )
