"""Parameter catalog tools: drone analyzers, acquisition artifacts and evidences."""

from __future__ import annotations

from air_mcp.api.client import AIRClient
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, tool_failure
from air_mcp.tools.formatting import format_catalog, format_platforms, yes_no


def register_params_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the parameter catalog tools."""

    async def list_drone_analyzers() -> ToolResult:
        try:
            analyzers = await client.params.drone_analyzers()
        except Exception as e:
            return tool_failure("list_drone_analyzers", "fetch drone analyzers", e)

        if not analyzers:
            return ToolResult.ok("No drone analyzers found.")

        lines = "\n".join(
            f"{a.id}: {a.name} (Supported Platforms: {format_platforms(a.supported_platforms)}, "
            f"Default Enabled: {yes_no(a.default_enabled)})"
            for a in analyzers
        )
        return ToolResult.ok(f"Found {len(analyzers)} drone analyzers:\n{lines}")

    registry.register(
        Tool(
            name="list_drone_analyzers",
            description="List the drone analyzers available for acquisition tasks",
            handler=list_drone_analyzers,
        )
    )

    async def list_acquisition_artifacts() -> ToolResult:
        try:
            catalog = await client.params.acquisition_artifacts()
        except Exception as e:
            return tool_failure("list_acquisition_artifacts", "fetch acquisition artifacts", e)

        text = format_catalog(catalog, "Acquisition Artifacts", "Artifacts")
        return ToolResult.ok(text or "No acquisition artifacts found.")

    registry.register(
        Tool(
            name="list_acquisition_artifacts",
            description="List the artifacts that can be collected, grouped per platform",
            handler=list_acquisition_artifacts,
        )
    )

    async def list_acquisition_evidences() -> ToolResult:
        try:
            catalog = await client.params.acquisition_evidences()
        except Exception as e:
            return tool_failure("list_acquisition_evidences", "fetch acquisition evidences", e)

        text = format_catalog(catalog, "Acquisition Evidences", "Evidences")
        return ToolResult.ok(text or "No acquisition evidences found.")

    registry.register(
        Tool(
            name="list_acquisition_evidences",
            description="List the evidence types that can be collected, grouped per platform",
            handler=list_acquisition_evidences,
        )
    )
