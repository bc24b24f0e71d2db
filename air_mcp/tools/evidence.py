"""Case evidence tools: PPC files, task reports and report file info."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import APIResponse, FileDownload
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_bytes


def format_evidence_payload(result: Any) -> str:
    """Pretty-print JSON results; summarize binary downloads."""
    if isinstance(result, FileDownload):
        lines = [f"Content type: {result.content_type}", f"Size: {format_bytes(result.size_bytes)}"]
        if result.filename:
            lines.append(f"File name: {result.filename}")
        return "\n".join(lines)
    return json.dumps(result, indent=2, default=str)


def _make_handler(
    tool_name: str,
    fetch: Callable[[str, str], Awaitable[APIResponse[Any]]],
    action: str,
    success: str,
    error: str,
) -> Callable[..., Awaitable[ToolResult]]:
    async def handler(endpoint_id: str, task_id: str) -> ToolResult:
        try:
            response = await fetch(endpoint_id, task_id)
        except Exception as e:
            return tool_failure(tool_name, action, e)

        if not response.success:
            return envelope_failure(
                tool_name, f"Error {error}: {response.error_text or 'Unknown error'}"
            )

        return ToolResult.ok(
            f"Successfully {success} for endpoint {endpoint_id} and task {task_id}.\n\n"
            f"Response data: {format_evidence_payload(response.result)}"
        )

    return handler


def register_evidence_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the case evidence tools."""
    registry.register(
        Tool(
            name="download_case_ppc",
            description="Download the case PPC file for a specific endpoint and task",
            handler=_make_handler(
                "download_case_ppc",
                client.evidence.case_ppc,
                action="download PPC file",
                success="downloaded PPC file",
                error="downloading PPC file",
            ),
        )
    )
    registry.register(
        Tool(
            name="download_task_report",
            description="Download the task report for a specific endpoint and task",
            handler=_make_handler(
                "download_task_report",
                client.evidence.task_report,
                action="download task report",
                success="downloaded task report",
                error="downloading task report",
            ),
        )
    )
    registry.register(
        Tool(
            name="get_report_file_info",
            description="Get information about the report file for a specific endpoint and task",
            handler=_make_handler(
                "get_report_file_info",
                client.evidence.report_file_info,
                action="get report file information",
                success="retrieved report file information",
                error="getting report file information",
            ),
        )
    )
