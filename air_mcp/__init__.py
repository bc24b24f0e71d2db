"""
air_mcp - MCP server for the Binalyze AIR DFIR platform

Exposes the AIR public REST API as Model Context Protocol tools so an
assistant can inventory endpoints, run acquisitions and triage, manage cases
and repositories, and trigger webhooks.

Submodules:
    - air_mcp.api: Async HTTP client and per-resource endpoint groups
    - air_mcp.tools: Tool registry, argument schemas and tool handlers
    - air_mcp.server: MCP stdio server and console entry point

Example:
    Calling a tool without the MCP transport::

        from air_mcp.api import AIRClient
        from air_mcp.config import AIRConfig
        from air_mcp.tools import create_air_tools

        config = AIRConfig.from_env()
        async with AIRClient(config) as client:
            registry = create_air_tools(client)
            result = await registry.execute("list_assets", {"organizationIds": "0"})
            print(result.message)
"""

__version__ = "2.5.0"
