"""Tool definitions and registry for the AIR MCP server."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import mcp.types as types
import structlog

from air_mcp.tools.schemas import tool_input_schema, validate_tool_arguments

logger = structlog.get_logger()


# =============================================================================
# ToolResult Dataclass
# =============================================================================


@dataclass
class ToolResult:
    """Result of a tool execution.

    Both outcomes carry text for the caller: AIR failures are reported, not
    raised, so ``error`` is what the assistant reads when ``success`` is False.
    """

    success: bool
    text: str = ""
    error: str | None = None
    execution_time_ms: int = 0

    @classmethod
    def ok(cls, text: str, execution_time_ms: int = 0) -> ToolResult:
        """Create a successful result."""
        return cls(success=True, text=text, execution_time_ms=execution_time_ms)

    @classmethod
    def fail(cls, error: str, execution_time_ms: int = 0) -> ToolResult:
        """Create a failed result."""
        return cls(success=False, error=error, execution_time_ms=execution_time_ms)

    @property
    def message(self) -> str:
        return self.text if self.success else (self.error or "")

    def to_content(self) -> list[types.TextContent]:
        """Render as MCP content blocks."""
        return [types.TextContent(type="text", text=self.message)]


def tool_failure(tool_name: str, action: str, error: Exception) -> ToolResult:
    """Log a failed AIR call and turn it into ``Failed to <action>: ...`` text."""
    message = str(error) or type(error).__name__
    logger.error(f"{tool_name}_failed", error=message)
    return ToolResult.fail(f"Failed to {action}: {message}")


def envelope_failure(tool_name: str, text: str) -> ToolResult:
    """Log an AIR envelope with ``success: false`` and return its text."""
    logger.warning(f"{tool_name}_rejected", message=text)
    return ToolResult.fail(text)


# =============================================================================
# Tool and ToolRegistry
# =============================================================================


@dataclass
class Tool:
    """A tool exposed to the MCP client."""

    name: str
    description: str
    handler: Callable[..., Awaitable[ToolResult]]
    parameters: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.parameters is None:
            self.parameters = tool_input_schema(self.name)

    def to_definition(self) -> types.Tool:
        """Convert to an MCP tool definition."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.parameters or {"type": "object", "properties": {}},
        )


class ToolRegistry:
    """Registry of tools served over MCP."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool."""
        logger.debug("tool_registered", name=tool.name)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Get a tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self._tools.keys())

    def get_tool_definitions(self) -> list[types.Tool]:
        """Get MCP definitions for all registered tools."""
        return [tool.to_definition() for tool in self._tools.values()]

    async def execute(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Execute a tool by name with the given arguments.

        Arguments are validated against the tool's Pydantic schema before the
        handler runs.

        Raises:
            ValueError: If tool not found.
            ToolArgumentValidationError: If arguments fail validation.
        """
        tool = self._tools.get(name)
        if not tool:
            raise ValueError(f"Unknown tool: {name}")

        validated_arguments = validate_tool_arguments(name, arguments or {})

        logger.debug("tool_execute", name=name)
        start_time = time.perf_counter()
        result = await tool.handler(**validated_arguments)
        result.execution_time_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(
            "tool_executed",
            name=name,
            success=result.success,
            execution_time_ms=result.execution_time_ms,
        )
        return result
