"""Organization and user tools."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import yes_no


def register_organization_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the organization and user management tools."""

    async def list_organizations() -> ToolResult:
        try:
            response = await client.organizations.list()
        except Exception as e:
            return tool_failure("list_organizations", "fetch organizations", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_organizations", f"Error fetching organizations: {response.error_text}"
            )

        page = response.result
        lines = "\n".join(
            f"{org.id}: {org.name} (Total Endpoints: {org.total_endpoints}, "
            f"Default: {yes_no(org.is_default)})"
            for org in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} organizations:\n{lines}")

    registry.register(
        Tool(
            name="list_organizations",
            description="List all organizations in the system",
            handler=list_organizations,
        )
    )

    async def get_organization_users(id: str | int) -> ToolResult:
        try:
            response = await client.organizations.users(id)
        except Exception as e:
            return tool_failure("get_organization_users", "fetch organization users", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "get_organization_users",
                f"Error fetching organization users: {response.error_text}",
            )

        page = response.result
        lines = "\n".join(
            f"{user.id}: {user.username} (Email: {user.email}, "
            f"Roles: {', '.join(role.name for role in user.roles)})"
            for user in page.entities
        )
        return ToolResult.ok(
            f"Found {page.total_entity_count} users for organization {id}:\n{lines}"
        )

    registry.register(
        Tool(
            name="get_organization_users",
            description="List the users of a specific organization",
            handler=get_organization_users,
        )
    )

    async def list_users(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.users.list(organization_ids)
        except Exception as e:
            return tool_failure("list_users", "fetch users", e)

        if not response.success or response.result is None:
            return envelope_failure("list_users", f"Error fetching users: {response.error_text}")

        page = response.result
        lines = "\n".join(f"{user.id}: {user.username} ({user.email})" for user in page.entities)
        return ToolResult.ok(f"Found {page.total_entity_count} users:\n{lines}")

    registry.register(
        Tool(
            name="list_users",
            description="List all users in the system",
            handler=list_users,
        )
    )
