"""Task tools."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_task_type


def register_task_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the task tools."""

    async def list_tasks(organization_ids: str | list[str] | None = None) -> ToolResult:
        try:
            response = await client.tasks.list(organization_ids)
        except Exception as e:
            return tool_failure("list_tasks", "fetch tasks", e)

        if not response.success or response.result is None:
            return envelope_failure("list_tasks", f"Error fetching tasks: {response.error_text}")

        page = response.result
        if not page.entities:
            return ToolResult.ok("No tasks found for the specified criteria.")

        lines = "\n".join(
            f"{task.id}: {task.name} (Type: {format_task_type(task.type)}, "
            f"Status: {task.status})"
            for task in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} tasks:\n{lines}")

    registry.register(
        Tool(
            name="list_tasks",
            description="List all tasks in the system",
            handler=list_tasks,
        )
    )

    async def get_task_assignments_by_id(task_id: str) -> ToolResult:
        try:
            response = await client.tasks.assignments(task_id)
        except Exception as e:
            return tool_failure("get_task_assignments_by_id", "fetch task assignments", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "get_task_assignments_by_id",
                f"Error fetching task assignments: {response.error_text}",
            )

        page = response.result
        if not page.entities:
            return ToolResult.ok(f"No assignments found for task ID: {task_id}")

        lines = "\n".join(
            f"{a.id}: {a.endpoint_name} ({a.status} - {a.progress:g}%)" for a in page.entities
        )
        return ToolResult.ok(
            f"Found {page.total_entity_count} assignments for task ID {task_id}:\n{lines}"
        )

    registry.register(
        Tool(
            name="get_task_assignments_by_id",
            description="List the per-endpoint assignments of a task",
            handler=get_task_assignments_by_id,
        )
    )
