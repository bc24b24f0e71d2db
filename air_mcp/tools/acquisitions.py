"""Acquisition profile and evidence acquisition tools."""

from __future__ import annotations

from typing import Any

from air_mcp.api.client import AIRClient
from air_mcp.api.models import AcquisitionProfileDetail
from air_mcp.tools.base import Tool, ToolRegistry, ToolResult, envelope_failure, tool_failure
from air_mcp.tools.formatting import format_datetime, format_task_summaries, join_or_none, yes_no
from air_mcp.tools.schemas import ImageEndpoint

DEFAULT_ANALYZERS = ["bha", "wsa"]
DEFAULT_CPU_LIMIT = 80

WINDOWS_PATH = "Binalyze\\AIR\\"
WINDOWS_TMP = "Binalyze\\AIR\\tmp"
UNIX_PATH = "opt/binalyze/air"
UNIX_TMP = "opt/binalyze/air/tmp"


def _local_save_locations() -> dict[str, dict[str, Any]]:
    """Evidence is written to the endpoint's own disk."""
    return {
        "windows": {
            "location": "local",
            "useMostFreeVolume": True,
            "repositoryId": None,
            "path": WINDOWS_PATH,
            "volume": "C:",
            "tmp": WINDOWS_TMP,
            "directCollection": False,
        },
        "linux": {
            "location": "local",
            "useMostFreeVolume": True,
            "repositoryId": None,
            "path": UNIX_PATH,
            "tmp": UNIX_TMP,
            "directCollection": False,
        },
        "macos": {
            "location": "local",
            "useMostFreeVolume": False,
            "repositoryId": None,
            "path": UNIX_PATH,
            "volume": "/",
            "tmp": UNIX_TMP,
            "directCollection": False,
        },
        "aix": {
            "location": "local",
            "useMostFreeVolume": True,
            "repositoryId": None,
            "path": UNIX_PATH,
            "volume": "/",
            "tmp": UNIX_TMP,
            "directCollection": False,
        },
    }


def _repository_save_locations(repository_id: str) -> dict[str, dict[str, Any]]:
    """Disk images go straight to an evidence repository."""
    locations = {}
    for platform, path, tmp in (
        ("windows", WINDOWS_PATH, WINDOWS_TMP),
        ("linux", UNIX_PATH, UNIX_TMP),
        ("macos", UNIX_PATH, UNIX_TMP),
        ("aix", UNIX_PATH, UNIX_TMP),
    ):
        locations[platform] = {
            "location": "repository",
            "useMostFreeVolume": False,
            "repositoryId": repository_id,
            "path": path,
            "tmp": tmp,
            "directCollection": False,
        }
    return locations


def _compression(enabled: bool, encrypt: bool, password: str | None) -> dict[str, Any]:
    return {
        "enabled": enabled,
        "encryption": {"enabled": encrypt, "password": password or ""},
    }


def _full_filter(endpoint_ids: list[str], organization_ids: list[int] | None) -> dict[str, Any]:
    """Asset filter with every key AIR's acquire endpoints expect."""
    return {
        "searchTerm": "",
        "name": "",
        "ipAddress": "",
        "groupId": "",
        "groupFullPath": "",
        "managedStatus": ["managed"],
        "isolationStatus": [],
        "platform": [],
        "issue": "",
        "onlineStatus": [],
        "tags": [],
        "version": "",
        "policy": "",
        "includedEndpointIds": endpoint_ids,
        "excludedEndpointIds": [],
        "organizationIds": organization_ids or [0],
    }


def build_acquisition_request(
    case_id: str,
    acquisition_profile_id: str,
    endpoint_ids: list[str],
    organization_ids: list[int] | None = None,
    analyzers: list[str] | None = None,
    keywords: list[str] | None = None,
    cpu_limit: int | None = None,
    enable_compression: bool = True,
    enable_encryption: bool = False,
    encryption_password: str | None = None,
) -> dict[str, Any]:
    """Body for POST /acquisitions/acquire."""
    return {
        "caseId": case_id,
        "droneConfig": {
            "autoPilot": False,
            "enabled": False,
            "analyzers": analyzers or list(DEFAULT_ANALYZERS),
            "keywords": keywords or [],
        },
        "taskConfig": {
            "choice": "use-custom-options",
            "saveTo": _local_save_locations(),
            "cpu": {"limit": cpu_limit or DEFAULT_CPU_LIMIT},
            "compression": _compression(
                enable_compression, enable_encryption, encryption_password
            ),
        },
        "acquisitionProfileId": acquisition_profile_id,
        "filter": _full_filter(endpoint_ids, organization_ids),
    }


def build_image_acquisition_request(
    repository_id: str,
    endpoints: list[ImageEndpoint],
    case_id: str | None = None,
    organization_ids: list[int] | None = None,
    bandwidth_limit: int = 100000,
    enable_compression: bool = True,
    enable_encryption: bool = False,
    encryption_password: str | None = None,
    chunk_size: int = 1048576,
    chunk_count: int = 0,
    start_offset: int = 0,
) -> dict[str, Any]:
    """Body for POST /acquisitions/acquire/image."""
    return {
        "caseId": case_id,
        "taskConfig": {
            "choice": "use-custom-options",
            "saveTo": _repository_save_locations(repository_id),
            "bandwidth": {"limit": bandwidth_limit},
            "compression": _compression(
                enable_compression, enable_encryption, encryption_password
            ),
        },
        "diskImageOptions": {
            "startOffset": start_offset,
            "chunkSize": chunk_size,
            "chunkCount": chunk_count,
            "endpoints": [e.to_request() for e in endpoints],
        },
        "filter": _full_filter([e.endpoint_id for e in endpoints], organization_ids),
    }


def _format_profile_detail(profile: AcquisitionProfileDetail) -> str:
    lines = [
        f"Profile Details: {profile.name} ({profile.id})",
        f"Created by: {profile.created_by}",
        f"Created at: {format_datetime(profile.created_at)}",
        f"Updated at: {format_datetime(profile.updated_at)}",
        f"Deletable: {yes_no(profile.deletable)}",
        f"Organization IDs: {join_or_none(profile.organization_ids)}",
    ]
    for label, platform in (
        ("Windows", profile.windows),
        ("Linux", profile.linux),
        ("macOS", profile.macos),
        ("AIX", profile.aix),
    ):
        if platform is None:
            continue
        lines.append(f"{label} Evidence Items: {len(platform.evidence_list)}")
        if platform.artifact_list is not None:
            lines.append(f"{label} Artifact Items: {len(platform.artifact_list)}")
    return "\n".join(lines)


def register_acquisition_tools(registry: ToolRegistry, client: AIRClient) -> None:
    """Register the acquisition tools."""

    async def list_acquisition_profiles(
        organization_ids: str | list[str] | None = None,
        all_organizations: bool = True,
    ) -> ToolResult:
        try:
            response = await client.acquisitions.list_profiles(organization_ids, all_organizations)
        except Exception as e:
            return tool_failure("list_acquisition_profiles", "fetch acquisition profiles", e)

        if not response.success or response.result is None:
            return envelope_failure(
                "list_acquisition_profiles",
                f"Error fetching acquisition profiles: {response.error_text}",
            )

        page = response.result
        lines = "\n".join(
            f"{profile.id}: {profile.name} (Created by: {profile.created_by})"
            for profile in page.entities
        )
        return ToolResult.ok(f"Found {page.total_entity_count} acquisition profiles:\n{lines}")

    registry.register(
        Tool(
            name="list_acquisition_profiles",
            description="List all acquisition profiles in the system",
            handler=list_acquisition_profiles,
        )
    )

    async def get_acquisition_profile_by_id(profile_id: str) -> ToolResult:
        try:
            response = await client.acquisitions.get_profile(profile_id)
        except Exception as e:
            return tool_failure(
                "get_acquisition_profile_by_id", "fetch acquisition profile details", e
            )

        if not response.success or response.result is None:
            return envelope_failure(
                "get_acquisition_profile_by_id",
                f"Error fetching acquisition profile details: {response.error_text}",
            )

        return ToolResult.ok(_format_profile_detail(response.result))

    registry.register(
        Tool(
            name="get_acquisition_profile_by_id",
            description="Get details of a specific acquisition profile by its ID",
            handler=get_acquisition_profile_by_id,
        )
    )

    async def create_acquisition_profile(
        name: str,
        windows: dict[str, Any],
        linux: dict[str, Any],
        macos: dict[str, Any],
        aix: dict[str, Any],
        e_discovery: dict[str, Any],
        organization_ids: list[str] | None = None,
    ) -> ToolResult:
        body = {
            "name": name,
            "organizationIds": organization_ids or [],
            "windows": windows,
            "linux": linux,
            "macos": macos,
            "aix": aix,
            "eDiscovery": e_discovery,
        }
        try:
            response = await client.acquisitions.create_profile(body)
        except Exception as e:
            return tool_failure("create_acquisition_profile", "create acquisition profile", e)

        if not response.success:
            return envelope_failure(
                "create_acquisition_profile",
                f"Error creating acquisition profile: {response.error_text}",
            )

        return ToolResult.ok(f'Successfully created acquisition profile "{name}".')

    registry.register(
        Tool(
            name="create_acquisition_profile",
            description=(
                "Create a new acquisition profile with per-platform evidence and artifact "
                "lists and an eDiscovery configuration"
            ),
            handler=create_acquisition_profile,
        )
    )

    async def assign_acquisition_task(**arguments: Any) -> ToolResult:
        body = build_acquisition_request(**arguments)
        try:
            response = await client.acquisitions.acquire(body)
        except Exception as e:
            return tool_failure("assign_acquisition_task", "assign acquisition task", e)

        if not response.success:
            return envelope_failure(
                "assign_acquisition_task",
                f"Error assigning acquisition task: {response.error_text}",
            )

        tasks = response.result or []
        return ToolResult.ok(
            f"Successfully assigned {len(tasks)} acquisition task(s):\n"
            f"{format_task_summaries(tasks)}"
        )

    registry.register(
        Tool(
            name="assign_acquisition_task",
            description=(
                "Assign an evidence acquisition task to specific endpoints using an "
                "acquisition profile, saving evidence locally on each endpoint"
            ),
            handler=assign_acquisition_task,
        )
    )

    async def assign_image_acquisition_task(**arguments: Any) -> ToolResult:
        body = build_image_acquisition_request(**arguments)
        try:
            response = await client.acquisitions.acquire_image(body)
        except Exception as e:
            return tool_failure(
                "assign_image_acquisition_task", "assign image acquisition task", e
            )

        if not response.success:
            return envelope_failure(
                "assign_image_acquisition_task",
                f"Error assigning image acquisition task: {response.error_text}",
            )

        tasks = response.result or []
        return ToolResult.ok(
            f"Successfully assigned {len(tasks)} image acquisition task(s):\n"
            f"{format_task_summaries(tasks)}"
        )

    registry.register(
        Tool(
            name="assign_image_acquisition_task",
            description=(
                "Assign a disk image acquisition task to specific endpoints and volumes, "
                "saving the image to an evidence repository"
            ),
            handler=assign_image_acquisition_task,
        )
    )
