"""Webhook tools. Each call carries the webhook's own token."""

from __future__ import annotations

from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import WebhookAssignment, WebhookTaskResponse
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, tool_failure
from air_mcp.tools.formatting import format_datetime


def _format_task_response(response: WebhookTaskResponse) -> str:
    return (
        f"Task ID: {response.task_id}\n"
        f"Task Details View URL: {response.task_details_view_url}\n"
        f"Task Details Data URL: {response.task_details_data_url}\n"
        f"Status Code: {response.status_code}"
    )


def _format_assignment(assignment: WebhookAssignment) -> str:
    return "\n".join(
        [
            f"Assignment ID: {assignment.assignment_id}",
            f"Task ID: {assignment.task_id}",
            f"Task Name: {assignment.task_name}",
            f"Endpoint ID: {assignment.endpoint_id}",
            f"Endpoint Name: {assignment.endpoint_name}",
            f"Organization ID: {assignment.organization_id}",
            f"Status: {assignment.assignment_status}",
            f"Progress: {assignment.progress:g}%",
            f"Started At: {format_datetime(assignment.started_at)}",
            f"Has Drone Data: {assignment.has_drone_data}",
            f"Has Case PPC: {assignment.has_case_ppc}",
            f"Report Status: {assignment.report_status}",
            f"Report ID: {assignment.report_id}",
            f"Report URL: {assignment.report_url}",
        ]
    )


def register_webhook_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the webhook tools."""

    async def call_webhook(slug: str, data: str, token: str) -> ToolResult:
        try:
            response = await client.webhooks.call(slug, data, token)
        except Exception as e:
            return tool_failure("call_webhook", "call webhook", e)
        return ToolResult.ok(_format_task_response(response))

    registry.register(
        Tool(
            name="call_webhook",
            description=(
                "Trigger a webhook with a data parameter (e.g. an IP address or hostname) "
                "to start the tasks it is configured for"
            ),
            handler=call_webhook,
        )
    )

    async def post_webhook(slug: str, data: Any, token: str) -> ToolResult:
        try:
            status_code = await client.webhooks.post(slug, data, token)
        except Exception as e:
            return tool_failure("post_webhook", "post to webhook", e)
        return ToolResult.ok(f"Webhook POST request completed with status code: {status_code}")

    registry.register(
        Tool(
            name="post_webhook",
            description="Send data to a webhook in the request body",
            handler=post_webhook,
        )
    )

    async def get_webhook_task_assignments(slug: str, task_id: str, token: str) -> ToolResult:
        try:
            assignments = await client.webhooks.task_assignments(slug, task_id, token)
        except Exception as e:
            return tool_failure("get_webhook_task_assignments", "get task assignments", e)

        if not assignments:
            return ToolResult.ok("No assignments found for this task.")
        return ToolResult.ok("\n---\n".join(_format_assignment(a) for a in assignments))

    registry.register(
        Tool(
            name="get_webhook_task_assignments",
            description="Get the assignments of a task started through a webhook",
            handler=get_webhook_task_assignments,
        )
    )
