"""Auto asset tag tools.

Auto asset tags apply a tag to every asset whose platform-specific condition
tree matches. Condition groups nest; they are rendered with indentation.
"""

from __future__ import annotations

from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import APIResponse, AutoAssetTag, Page
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_condition_group, format_datetime
from air_mcp.tools.schemas import ConditionGroup

SEPARATOR = "-" * 40


def _format_tag_summary(tag: AutoAssetTag, verb: str) -> str:
    return "\n".join(
        [
            f"Successfully {verb} auto asset tag:",
            f"Tag: {tag.tag}",
            f"ID: {tag.id}",
            f"Created At: {format_datetime(tag.created_at)}",
            f"Updated At: {format_datetime(tag.updated_at)}",
            f"Condition ID Counter: {tag.condition_id_counter}",
        ]
    )


def _format_tag_conditions(tag: AutoAssetTag) -> str:
    output = f"Tag: {tag.tag}\n"
    output += f"ID: {tag.id}\n"
    output += f"Created At: {format_datetime(tag.created_at)}\n"
    output += f"Updated At: {format_datetime(tag.updated_at)}\n"
    output += "Linux Conditions:\n" + format_condition_group(tag.linux_conditions)
    output += "Windows Conditions:\n" + format_condition_group(tag.windows_conditions)
    output += "macOS Conditions:\n" + format_condition_group(tag.macos_conditions)
    return output


def _format_tag_list(page: Page[AutoAssetTag]) -> str:
    if not page.entities:
        return "No auto asset tags found."

    output = (
        f"Found {page.total_entity_count} auto asset tag(s) "
        f"(Page {page.current_page}/{page.total_page_count}):\n\n"
    )
    for tag in page.entities:
        output += f"{SEPARATOR}\n{_format_tag_conditions(tag)}{SEPARATOR}\n\n"
    return output.rstrip("\n")


def _rejected(tool_name: str, verb: str, response: APIResponse[Any]) -> ToolResult:
    return envelope_failure(
        tool_name,
        f"Error {verb} auto asset tag: {response.error_text} "
        f"(Status Code: {response.status_code})",
    )


def _conditions_body(
    linux_conditions: ConditionGroup | None,
    windows_conditions: ConditionGroup | None,
    macos_conditions: ConditionGroup | None,
) -> dict[str, Any]:
    """Condition groups keyed as AIR expects; omitted groups are left out."""
    body = {}
    for key, group in (
        ("linuxConditions", linux_conditions),
        ("windowsConditions", windows_conditions),
        ("macosConditions", macos_conditions),
    ):
        if group is not None:
            body[key] = group.to_request()
    return body


def register_auto_asset_tag_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the auto asset tag tools."""

    async def create_auto_asset_tag(
        tag: str,
        linux_conditions: ConditionGroup,
        windows_conditions: ConditionGroup,
        macos_conditions: ConditionGroup,
    ) -> ToolResult:
        body = {"tag": tag}
        body.update(_conditions_body(linux_conditions, windows_conditions, macos_conditions))
        try:
            response = await client.auto_asset_tags.create(body)
        except Exception as e:
            return tool_failure("create_auto_asset_tag", "create auto asset tag", e)

        if not response.success or response.result is None:
            return _rejected("create_auto_asset_tag", "creating", response)
        return ToolResult.ok(_format_tag_summary(response.result, "created"))

    registry.register(
        Tool(
            name="create_auto_asset_tag",
            description=(
                "Create an auto asset tag rule. Each platform takes a condition group: "
                "an and/or operator over conditions ({field, operator, value}) or nested groups."
            ),
            handler=create_auto_asset_tag,
        )
    )

    async def update_auto_asset_tag(
        id: str,
        tag: str,
        linux_conditions: ConditionGroup | None = None,
        windows_conditions: ConditionGroup | None = None,
        macos_conditions: ConditionGroup | None = None,
    ) -> ToolResult:
        body = {"tag": tag}
        body.update(_conditions_body(linux_conditions, windows_conditions, macos_conditions))
        try:
            response = await client.auto_asset_tags.update(id, body)
        except Exception as e:
            return tool_failure("update_auto_asset_tag", "update auto asset tag", e)

        if not response.success or response.result is None:
            return _rejected("update_auto_asset_tag", "updating", response)
        return ToolResult.ok(_format_tag_summary(response.result, "updated"))

    registry.register(
        Tool(
            name="update_auto_asset_tag",
            description=(
                "Update an existing auto asset tag. Condition groups that are omitted are "
                "left unchanged."
            ),
            handler=update_auto_asset_tag,
        )
    )

    async def get_auto_asset_tag_by_id(id: str) -> ToolResult:
        try:
            response = await client.auto_asset_tags.get(id)
        except Exception as e:
            return tool_failure("get_auto_asset_tag_by_id", "get auto asset tag", e)

        if not response.success or response.result is None:
            return _rejected("get_auto_asset_tag_by_id", "getting", response)
        return ToolResult.ok(
            f"Auto asset tag details:\n{_format_tag_conditions(response.result).rstrip()}"
        )

    registry.register(
        Tool(
            name="get_auto_asset_tag_by_id",
            description="Get an auto asset tag and its condition trees by ID",
            handler=get_auto_asset_tag_by_id,
        )
    )

    async def list_auto_asset_tags() -> ToolResult:
        try:
            response = await client.auto_asset_tags.list()
        except Exception as e:
            return tool_failure("list_auto_asset_tags", "list auto asset tags", e)

        if not response.success:
            return _rejected("list_auto_asset_tags", "listing", response)
        return ToolResult.ok(_format_tag_list(response.result or Page[AutoAssetTag]()))

    registry.register(
        Tool(
            name="list_auto_asset_tags",
            description="List all auto asset tags with their Linux, Windows and macOS conditions",
            handler=list_auto_asset_tags,
        )
    )
