"""MCP server exposing the AIR tools over stdio."""

from __future__ import annotations

import asyncio
from typing import Any

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from air_mcp import __version__
from air_mcp.api.client import AIRClient
from air_mcp.config import AIRConfig, MissingAPITokenError
from air_mcp.log_config import configure_logging
from air_mcp.tools import ToolArgumentValidationError, ToolRegistry, create_air_tools

logger = structlog.get_logger()

SERVER_NAME = "air-mcp"


def format_validation_errors(error: ToolArgumentValidationError) -> str:
    """``Invalid arguments: <path>: <message>, ...``"""
    details = ", ".join(
        f"{'.'.join(str(part) for part in item.get('loc', ()))}: {item.get('msg', '')}"
        for item in error.errors
    )
    return f"Invalid arguments: {details or error.message}"


async def dispatch(
    registry: ToolRegistry,
    config: AIRConfig,
    name: str,
    arguments: dict[str, Any] | None,
) -> list[types.TextContent]:
    """Run one tool call.

    Raises:
        ValueError: Unknown tool or invalid arguments.
        MissingAPITokenError: No AIR API token configured.
    """
    if registry.get(name) is None:
        raise ValueError(f"Unknown tool: {name}")
    config.require_token()

    try:
        result = await registry.execute(name, arguments)
    except ToolArgumentValidationError as e:
        raise ValueError(format_validation_errors(e)) from e
    return result.to_content()


def create_server(config: AIRConfig, client: AIRClient | None = None) -> Server:
    """Build the MCP server with every AIR tool registered."""
    client = client or AIRClient(config)
    registry = create_air_tools(client)
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.get_tool_definitions()

    # Arguments are validated by the tool schemas so their messages reach the caller.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        try:
            return await dispatch(registry, config, name, arguments)
        except (ValueError, MissingAPITokenError) as e:
            logger.warning("tool_call_rejected", name=name, error=str(e))
            raise

    logger.info("server_created", tools=len(registry.list_tools()), host=config.host)
    return server


async def run(config: AIRConfig) -> None:
    """Serve MCP over stdio until the client disconnects."""
    client = AIRClient(config)
    server = create_server(config, client)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()


def main() -> None:
    """Console entry point."""
    config = AIRConfig.from_env()
    configure_logging(config.log_level, config.log_format)
    if not config.has_token:
        logger.warning("air_api_token_missing", host=config.host)
    logger.info("server_starting", host=config.host, version=__version__)
    asyncio.run(run(config))
