"""Evidence repository tools."""

from __future__ import annotations

from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import Repository
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure


def _smb_body(
    name: str,
    path: str,
    username: str,
    password: str,
    organization_ids: list[int],
) -> dict[str, Any]:
    return {
        "name": name,
        "path": path,
        "username": username,
        "password": password,
        "organizationIds": organization_ids,
    }


def _describe(repo: Repository | None, fallback_name: str) -> str:
    if repo is None:
        return fallback_name
    return f"{repo.name or fallback_name} (ID: {repo.id})"


def register_repository_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the evidence repository tools."""

    async def list_repositories(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.repositories.list(organization_ids)
        except Exception as e:
            return tool_failure("list_repositories", "fetch repositories", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_repositories", f"Error fetching repositories: {response.error_text}"
            )

        page = response.result
        if not page.entities:
            return ToolResult.ok("No repositories found.")

        lines = "\n".join(
            f"{repo.id}: {repo.name} (Type: {repo.type}, Path: {repo.path})"
            for repo in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} repositories:\n{lines}")

    registry.register(
        Tool(
            name="list_repositories",
            description="List all evidence repositories",
            handler=list_repositories,
        )
    )

    async def create_smb_repository(
        name: str,
        path: str,
        username: str,
        password: str,
        organization_ids: list[int],
    ) -> ToolResult:
        body = _smb_body(name, path, username, password, organization_ids)
        try:
            response = await client.repositories.create_smb(body)
        except Exception as e:
            return tool_failure("create_smb_repository", "create SMB repository", e)

        if not response.success:
            return envelope_failure(
                "create_smb_repository", f"Error creating SMB repository: {response.error_text}"
            )

        return ToolResult.ok(
            f"Successfully created SMB repository {_describe(response.result, name)}"
        )

    registry.register(
        Tool(
            name="create_smb_repository",
            description="Create an SMB evidence repository",
            handler=create_smb_repository,
        )
    )

    async def update_smb_repository(
        id: str,
        name: str,
        path: str,
        username: str,
        password: str,
        organization_ids: list[int],
    ) -> ToolResult:
        body = _smb_body(name, path, username, password, organization_ids)
        try:
            response = await client.repositories.update_smb(id, body)
        except Exception as e:
            return tool_failure("update_smb_repository", "update SMB repository", e)

        if not response.success:
            return envelope_failure(
                "update_smb_repository", f"Error updating SMB repository: {response.error_text}"
            )

        return ToolResult.ok(
            f"Successfully updated SMB repository {_describe(response.result, name)}"
        )

    registry.register(
        Tool(
            name="update_smb_repository",
            description="Update an existing SMB evidence repository",
            handler=update_smb_repository,
        )
    )

    async def create_sftp_repository(
        name: str,
        host: str,
        path: str,
        username: str,
        password: str,
        organization_ids: list[int],
        port: int = 22,
    ) -> ToolResult:
        body = {
            "name": name,
            "host": host,
            "port": port,
            "path": path,
            "username": username,
            "password": password,
            "organizationIds": organization_ids,
        }
        try:
            response = await client.repositories.create_sftp(body)
        except Exception as e:
            return tool_failure("create_sftp_repository", "create SFTP repository", e)

        if not response.success:
            return envelope_failure(
                "create_sftp_repository",
                f"Error creating SFTP repository: {response.error_text}",
            )

        return ToolResult.ok(
            f"Successfully created SFTP repository {_describe(response.result, name)}"
        )

    registry.register(
        Tool(
            name="create_sftp_repository",
            description="Create an SFTP evidence repository",
            handler=create_sftp_repository,
        )
    )
