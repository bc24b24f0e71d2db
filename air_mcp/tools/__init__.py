"""AIR tools exposed over MCP."""

from air_mcp.api.client import AIRClient
from air_mcp.tools.acquisitions import register_acquisition_tools
from air_mcp.tools.assets import register_asset_tools
from air_mcp.tools.assign_task import register_assign_task_tools
from air_mcp.tools.audit import register_audit_tools
from air_mcp.tools.auto_asset_tags import register_auto_asset_tag_tools
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult
from air_mcp.tools.baseline import register_baseline_tools
from air_mcp.tools.cases import register_case_tools
from air_mcp.tools.evidence import register_evidence_tools
from air_mcp.tools.organizations import register_organization_tools
from air_mcp.tools.params import register_params_tools
from air_mcp.tools.policies import register_policy_tools
from air_mcp.tools.repositories import register_repository_tools
from air_mcp.tools.schemas import ToolArgumentValidationError
from air_mcp.tools.tasks import register_task_tools
from air_mcp.tools.triages import register_triage_tools
from air_mcp.tools.webhooks import register_webhook_tools

__all__ = [
    "Tool",
    "ToolArgumentValidationError",
    "ToolRegistry",
    "ToolResult",
    "create_air_tools",
]


def create_air_tools(client: AIRClient) -> ToolRegistry:
    """Create a registry holding every AIR tool bound to ``client``."""
    registry = ToolRegistry()
    register_asset_tools(registry, client)
    register_assign_task_tools(registry, client)
    register_acquisition_tools(registry, client)
    register_audit_tools(registry, client)
    register_auto_asset_tag_tools(registry, client)
    register_baseline_tools(registry, client)
    register_case_tools(registry, client)
    register_evidence_tools(registry, client)
    register_repository_tools(registry, client)
    register_organization_tools(registry, client)
    register_params_tools(registry, client)
    register_policy_tools(registry, client)
    register_task_tools(registry, client)
    register_triage_tools(registry, client)
    register_webhook_tools(registry, client)
    return registry
