"""Pydantic argument schemas for AIR tools.

Every tool's arguments are validated against one of these models before its
handler runs. Field aliases carry the camelCase names the MCP client sends;
handlers receive the snake_case field names.
"""

from __future__ import annotations

from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = structlog.get_logger()

MAX_NOTE_LENGTH = 100000  # Case notes are free text
DEFAULT_MANAGED_STATUS = ["managed"]

ORG_IDS_DESCRIPTION = (
    'Organization IDs to filter by. Defaults to "0" or specific IDs like "123" '
    'or ["123", "456"]'
)
TASK_ORG_IDS_DESCRIPTION = (
    'Organization ID(s) to filter endpoints by. Examples: 0, "123", [0], ["123", "456"]'
)


class ToolArgumentValidationError(Exception):
    """Exception raised when tool arguments fail validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class StrictBaseModel(BaseModel):
    """Base model with strict validation settings for all tool arguments.

    Configuration:
    - extra='forbid': Reject unknown/extra arguments
    - strict=True: Strict type coercion (no implicit conversions)
    - validate_default=True: Validate default values
    """

    model_config = ConfigDict(
        extra="forbid",
        strict=True,
        validate_default=True,
    )


class NestedArgs(BaseModel):
    """Base for objects nested inside tool arguments (filters, conditions)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, validate_default=True)

    def to_request(self) -> dict[str, Any]:
        """Dump with AIR's camelCase keys, leaving out unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def normalize_org_id_list(value: Any) -> list[int]:
    """Turn a number, numeric string, or list of either into a list of ints."""
    values = value if isinstance(value, list) else [value]
    org_ids: list[int] = []
    for item in values:
        if isinstance(item, str):
            item = item.strip()
            if not item.lstrip("-").isdigit():
                raise ValueError(f"organization ID must be numeric, got {item!r}")
            item = int(item)
        org_ids.append(item)
    return org_ids


# =============================================================================
# Shared argument shapes
# =============================================================================


class EmptyArgs(StrictBaseModel):
    """Arguments for tools that take none."""


class OrganizationFilterArgs(StrictBaseModel):
    """Arguments for list/export tools filtered by organization."""

    organization_ids: str | list[str] | None = Field(
        default=None,
        alias="organizationIds",
        description=ORG_IDS_DESCRIPTION,
    )


class AssetFilter(NestedArgs):
    """AIR asset filter selecting the endpoints an operation targets.

    Shared keys only; the tag key differs per operation (see subclasses).
    """

    search_term: str | None = Field(default=None, alias="searchTerm")
    name: str | None = None
    ip_address: str | None = Field(default=None, alias="ipAddress")
    group_id: str | None = Field(default=None, alias="groupId")
    group_full_path: str | None = Field(default=None, alias="groupFullPath")
    managed_status: list[str] | None = Field(default=None, alias="managedStatus")
    isolation_status: list[str] | None = Field(default=None, alias="isolationStatus")
    platform: list[str] | None = None
    issue: str | None = None
    online_status: list[str] | None = Field(default=None, alias="onlineStatus")
    version: str | None = None
    policy: str | None = None
    included_endpoint_ids: list[str] | None = Field(
        default=None,
        alias="includedEndpointIds",
        description="Endpoint IDs to target",
    )
    excluded_endpoint_ids: list[str] | None = Field(default=None, alias="excludedEndpointIds")
    organization_ids: list[int | str] | None = Field(
        default=None,
        alias="organizationIds",
        description="Organization IDs. Defaults to [0]",
    )

    @field_validator("organization_ids")
    @classmethod
    def validate_organization_ids(cls, v: list[int | str] | None) -> list[int]:
        """Default to [0] and coerce numeric strings."""
        if not v:
            return [0]
        return normalize_org_id_list(v)


class UninstallAssetFilter(AssetFilter):
    tag_id: str | None = Field(default=None, alias="tagId", description="Filter by tag ID")


class BaselineAssetFilter(AssetFilter):
    tags: list[str] | None = Field(default=None, description="Filter by tags")
    included_endpoint_ids: list[str] = Field(
        ...,
        alias="includedEndpointIds",
        description="Array of endpoint IDs to include for baseline acquisition",
    )


# =============================================================================
# Assets
# =============================================================================


class GetAssetByIdArgs(StrictBaseModel):
    """Arguments for get_asset_by_id tool."""

    id: str = Field(..., min_length=1, description="The ID of the asset to retrieve")


class GetAssetTasksByIdArgs(StrictBaseModel):
    """Arguments for get_asset_tasks_by_id tool."""

    id: str = Field(
        ..., min_length=1, description="The ID of the asset to retrieve tasks for"
    )


class UninstallAssetsArgs(StrictBaseModel):
    """Arguments for uninstall_assets tool."""

    asset_filter: UninstallAssetFilter = Field(
        ...,
        alias="filter",
        description=(
            "Filter criteria to select assets for uninstallation without purge. "
            "`includedEndpointIds` is the primary way to target specific assets."
        ),
    )


class AssignAssetTaskArgs(StrictBaseModel):
    """Arguments shared by the reboot, shutdown and version update tools."""

    endpoint_ids: str | list[str] = Field(
        ...,
        alias="endpointIds",
        description="Endpoint ID(s). Can be a single ID or an array of IDs.",
    )
    organization_ids: int | str | list[int | str] = Field(
        default=0,
        alias="organizationIds",
        description=f"{TASK_ORG_IDS_DESCRIPTION}. Defaults to 0.",
    )
    managed_status: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MANAGED_STATUS),
        alias="managedStatus",
        description='Filter endpoints by managed status. Default is ["managed"].',
    )

    @field_validator("endpoint_ids")
    @classmethod
    def validate_endpoint_ids(cls, v: str | list[str]) -> list[str]:
        endpoint_ids = [v] if isinstance(v, str) else v
        if not endpoint_ids or not all(e.strip() for e in endpoint_ids):
            raise ValueError("at least one non-empty endpoint ID is required")
        return endpoint_ids

    @field_validator("organization_ids")
    @classmethod
    def validate_organization_ids(cls, v: int | str | list[int | str]) -> list[int]:
        return normalize_org_id_list(v)


class AssignIsolationTaskArgs(AssignAssetTaskArgs):
    """Arguments for assign_isolation_task tool."""

    enabled: bool = Field(
        default=True,
        description=(
            "Whether to enable (isolate) or disable (unisolate) isolation. Defaults to true."
        ),
    )


class AssignLogRetrievalTaskArgs(AssignAssetTaskArgs):
    """Arguments for assign_log_retrieval_task tool."""

    organization_ids: int | str | list[int | str] = Field(
        ...,
        alias="organizationIds",
        description=(
            f"{TASK_ORG_IDS_DESCRIPTION}. This is REQUIRED to identify the correct endpoints."
        ),
    )


# =============================================================================
# Acquisitions
# =============================================================================


class ListAcquisitionProfilesArgs(OrganizationFilterArgs):
    all_organizations: bool = Field(
        default=True,
        alias="allOrganizations",
        description="Whether to include profiles from all organizations. Defaults to true.",
    )


class GetAcquisitionProfileByIdArgs(StrictBaseModel):
    profile_id: str = Field(
        ...,
        min_length=1,
        alias="profileId",
        description='The ID of the acquisition profile to retrieve (e.g., "full")',
    )


class CreateAcquisitionProfileArgs(StrictBaseModel):
    """Arguments for create_acquisition_profile tool.

    Platform sections are passed through as AIR expects them
    (``evidenceList``, ``artifactList``, ``customContentProfiles``,
    ``networkCapture``).
    """

    name: str = Field(..., min_length=1, description="Name for the new acquisition profile")
    organization_ids: list[str] = Field(
        default_factory=list,
        alias="organizationIds",
        description="Organization IDs to associate the profile with. Defaults to empty array.",
    )
    windows: dict[str, Any] = Field(
        ...,
        description=(
            "Windows configuration with `evidenceList`, `artifactList`, "
            "`customContentProfiles` and `networkCapture`. Example: "
            '{"evidenceList": ["evt"], "artifactList": [], "customContentProfiles": [], '
            '"networkCapture": {"enabled": false, "duration": 600, "pcap": {"enabled": false}, '
            '"networkFlow": {"enabled": false}}}'
        ),
    )
    linux: dict[str, Any] = Field(..., description="Linux configuration, same keys as windows")
    macos: dict[str, Any] = Field(..., description="macOS configuration, same keys as windows")
    aix: dict[str, Any] = Field(
        ...,
        description="AIX configuration with `evidenceList`, `artifactList` and `customContentProfiles`",
    )
    e_discovery: dict[str, Any] = Field(
        ...,
        alias="eDiscovery",
        description=(
            "eDiscovery configuration with `patterns` (objects with `pattern` and "
            '`category`). Example: {"patterns": []}'
        ),
    )


class AssignAcquisitionTaskArgs(StrictBaseModel):
    """Arguments for assign_acquisition_task tool."""

    case_id: str = Field(
        ..., min_length=1, alias="caseId", description="The case ID to associate the acquisition with"
    )
    acquisition_profile_id: str = Field(
        ...,
        min_length=1,
        alias="acquisitionProfileId",
        description="The acquisition profile ID to use for the task",
    )
    endpoint_ids: list[str] = Field(
        ...,
        min_length=1,
        alias="endpointIds",
        description="Array of endpoint IDs to collect evidence from",
    )
    organization_ids: list[int] | None = Field(
        default=None,
        alias="organizationIds",
        description="Array of organization IDs to filter by. Defaults to [0]",
    )
    analyzers: list[str] | None = Field(
        default=None, description='Array of analyzer IDs to use (e.g. ["bha", "wsa"])'
    )
    keywords: list[str] | None = Field(default=None, description="Array of keywords to search for")
    cpu_limit: int | None = Field(
        default=None,
        ge=1,
        le=100,
        alias="cpuLimit",
        description="CPU usage limit percentage (1-100). Defaults to 80",
    )
    enable_compression: bool = Field(
        default=True,
        alias="enableCompression",
        description="Whether to enable compression. Defaults to true",
    )
    enable_encryption: bool = Field(
        default=False,
        alias="enableEncryption",
        description="Whether to enable encryption. Defaults to false",
    )
    encryption_password: str | None = Field(
        default=None,
        alias="encryptionPassword",
        description="Password for encryption if enabled",
    )


class ImageEndpoint(NestedArgs):
    endpoint_id: str = Field(..., min_length=1, alias="endpointId")
    volumes: list[str] = Field(..., min_length=1)


class AssignImageAcquisitionTaskArgs(StrictBaseModel):
    """Arguments for assign_image_acquisition_task tool."""

    case_id: str | None = Field(
        default=None,
        alias="caseId",
        description="The case ID to associate the acquisition with (optional)",
    )
    repository_id: str = Field(
        ...,
        min_length=1,
        alias="repositoryId",
        description="The repository ID where the image will be saved",
    )
    endpoints: list[ImageEndpoint] = Field(
        ...,
        min_length=1,
        description=(
            "Endpoints and volumes to image, e.g. "
            '[{"endpointId": "uuid", "volumes": ["/dev/sda1"]}]. At least one endpoint '
            "and one volume per endpoint required."
        ),
    )
    organization_ids: list[int] | None = Field(
        default=None,
        alias="organizationIds",
        description="Array of organization IDs. Defaults to [0]",
    )
    bandwidth_limit: int = Field(
        default=100000,
        gt=0,
        alias="bandwidthLimit",
        description="Bandwidth limit in KB/s. Defaults to 100000",
    )
    enable_compression: bool = Field(default=True, alias="enableCompression")
    enable_encryption: bool = Field(default=False, alias="enableEncryption")
    encryption_password: str | None = Field(default=None, alias="encryptionPassword")
    chunk_size: int = Field(
        default=1048576,
        gt=0,
        alias="chunkSize",
        description="Chunk size in bytes. Defaults to 1048576",
    )
    chunk_count: int = Field(
        default=0,
        ge=0,
        alias="chunkCount",
        description="Number of chunks to acquire. Defaults to 0 (acquire until end).",
    )
    start_offset: int = Field(
        default=0,
        ge=0,
        alias="startOffset",
        description="Offset in bytes to start acquisition from. Defaults to 0.",
    )


# =============================================================================
# Auto asset tags
# =============================================================================


class Condition(NestedArgs):
    field: str = Field(..., description='The field to check (e.g., "process", "registryKey")')
    operator: str = Field(..., description='The comparison operator (e.g., "running", "exists")')
    value: str = Field(..., description="The value to compare against")


class ConditionGroup(NestedArgs):
    """An and/or group of conditions; groups nest arbitrarily deep."""

    operator: Literal["and", "or"] = Field(
        ..., description="Logical operator for combining conditions in this group"
    )
    conditions: list[Condition | ConditionGroup] = Field(
        ...,
        min_length=1,
        description="Array of conditions or nested condition groups",
    )


class CreateAutoAssetTagArgs(StrictBaseModel):
    tag: str = Field(..., min_length=1, description="The tag name to be applied automatically")
    linux_conditions: ConditionGroup = Field(
        ..., alias="linuxConditions", description="Conditions for Linux assets"
    )
    windows_conditions: ConditionGroup = Field(
        ..., alias="windowsConditions", description="Conditions for Windows assets"
    )
    macos_conditions: ConditionGroup = Field(
        ..., alias="macosConditions", description="Conditions for macOS assets"
    )


class UpdateAutoAssetTagArgs(StrictBaseModel):
    id: str = Field(..., min_length=1, description="The ID of the auto asset tag to update")
    tag: str = Field(..., min_length=1, description="The tag name to be applied automatically")
    linux_conditions: ConditionGroup | None = Field(
        default=None, alias="linuxConditions", description="Conditions for Linux assets"
    )
    windows_conditions: ConditionGroup | None = Field(
        default=None, alias="windowsConditions", description="Conditions for Windows assets"
    )
    macos_conditions: ConditionGroup | None = Field(
        default=None, alias="macosConditions", description="Conditions for macOS assets"
    )


class GetAutoAssetTagByIdArgs(StrictBaseModel):
    id: str = Field(..., min_length=1, description="The ID of the auto asset tag to retrieve")


# =============================================================================
# Baseline
# =============================================================================


class AcquireBaselineArgs(StrictBaseModel):
    case_id: str = Field(
        ...,
        min_length=1,
        alias="caseId",
        description="The case ID to associate the baseline acquisition with",
    )
    asset_filter: BaselineAssetFilter = Field(
        ...,
        alias="filter",
        description="Filter object to specify which assets to acquire baseline from",
    )


# =============================================================================
# Cases
# =============================================================================


class CreateCaseArgs(StrictBaseModel):
    organization_id: int = Field(
        ..., ge=0, alias="organizationId", description="Organization ID for the new case"
    )
    name: str = Field(..., min_length=1, description="Name of the case")
    owner_user_id: str = Field(
        ..., min_length=1, alias="ownerUserId", description="User ID of the case owner"
    )
    visibility: str = Field(
        default="public-to-organization",
        description='Case visibility. Defaults to "public-to-organization".',
    )
    assigned_user_ids: list[str] = Field(
        default_factory=list,
        alias="assignedUserIds",
        description="User IDs assigned to the case",
    )


class AddNoteToCaseArgs(StrictBaseModel):
    case_id: str = Field(
        ...,
        min_length=1,
        alias="caseId",
        description='The ID of the case to add a note to (e.g., "C-2022-0002")',
    )
    note: str = Field(
        ...,
        min_length=1,
        max_length=MAX_NOTE_LENGTH,
        description="The content of the note to add to the case",
    )


class UpdateNoteInCaseArgs(StrictBaseModel):
    case_id: str = Field(
        ..., min_length=1, alias="caseId", description="The ID of the case containing the note"
    )
    note_id: str = Field(
        ..., min_length=1, alias="noteId", description="The ID of the note to update"
    )
    note: str = Field(
        ..., min_length=1, max_length=MAX_NOTE_LENGTH, description="The new content for the note"
    )


class DeleteNoteFromCaseArgs(StrictBaseModel):
    case_id: str = Field(
        ..., min_length=1, alias="caseId", description="The ID of the case containing the note"
    )
    note_id: str = Field(
        ..., min_length=1, alias="noteId", description="The ID of the note to delete"
    )


class ExportCaseNotesArgs(StrictBaseModel):
    case_id: str = Field(
        ..., min_length=1, alias="caseId", description="ID of the case to export notes for"
    )


class ExportCaseEndpointsArgs(OrganizationFilterArgs):
    case_id: str = Field(
        ..., min_length=1, alias="caseId", description="ID of the case to export endpoints for"
    )


# =============================================================================
# Evidence
# =============================================================================


class EvidenceArgs(StrictBaseModel):
    """Arguments for the case evidence tools."""

    endpoint_id: str = Field(
        ..., min_length=1, alias="endpointId", description="The ID of the endpoint"
    )
    task_id: str = Field(..., min_length=1, alias="taskId", description="The ID of the task")


# =============================================================================
# Repositories
# =============================================================================


class SmbRepositoryArgs(StrictBaseModel):
    name: str = Field(..., min_length=1, description="Repository name")
    path: str = Field(..., min_length=1, description="UNC path of the share")
    username: str = Field(..., description="SMB username")
    password: str = Field(..., description="SMB password")
    organization_ids: list[int | str] | None = Field(
        default=None,
        alias="organizationIds",
        description="Organization IDs that can use the repository",
    )

    @field_validator("organization_ids")
    @classmethod
    def validate_organization_ids(cls, v: list[int | str] | None) -> list[int]:
        return normalize_org_id_list(v) if v else []


class UpdateSmbRepositoryArgs(SmbRepositoryArgs):
    id: str = Field(..., min_length=1, description="The ID of the repository to update")


class CreateSftpRepositoryArgs(SmbRepositoryArgs):
    host: str = Field(..., min_length=1, description="SFTP server host")
    port: int = Field(default=22, ge=1, le=65535, description="SFTP server port. Defaults to 22")
    path: str = Field(..., min_length=1, description="Directory on the SFTP server")
    username: str = Field(..., description="SFTP username")
    password: str = Field(..., description="SFTP password")


# =============================================================================
# Organizations, settings, tasks, triage
# =============================================================================


class GetOrganizationUsersArgs(StrictBaseModel):
    id: str | int = Field(..., description="The ID of the organization to retrieve users for")


class UpdateBannerMessageArgs(StrictBaseModel):
    enabled: bool = Field(..., description="Whether the banner message is enabled or disabled")


class GetTaskAssignmentsByIdArgs(StrictBaseModel):
    task_id: str = Field(
        ...,
        min_length=1,
        alias="taskId",
        description="The ID of the task to retrieve assignments for",
    )


class ListTriageTagsArgs(OrganizationFilterArgs):
    with_count: bool = Field(
        default=True,
        alias="withCount",
        description="Whether to include count of rules for each tag. Defaults to true.",
    )


# =============================================================================
# Webhooks
# =============================================================================


class CallWebhookArgs(StrictBaseModel):
    slug: str = Field(
        ..., min_length=1, description='The webhook slug (e.g., "air-generic-url-webhook")'
    )
    data: str = Field(
        ...,
        min_length=1,
        description='The data parameter for the webhook (e.g., IP address like "192.168.1.100")',
    )
    token: str = Field(..., min_length=1, description="The webhook token for authentication")


class PostWebhookArgs(StrictBaseModel):
    slug: str = Field(
        ..., min_length=1, description='The webhook slug (e.g., "air-generic-url-webhook")'
    )
    data: Any = Field(..., description="The data to be sent in the request body")
    token: str = Field(..., min_length=1, description="The webhook token for authentication")


class GetWebhookTaskAssignmentsArgs(StrictBaseModel):
    slug: str = Field(
        ..., min_length=1, description='The webhook slug (e.g., "air-generic-url-webhook")'
    )
    task_id: str = Field(
        ...,
        min_length=1,
        alias="taskId",
        description="The ID of the task to retrieve assignments for",
    )
    token: str = Field(..., min_length=1, description="The webhook token for authentication")


# Mapping of tool names to their argument schemas
TOOL_ARGUMENT_SCHEMAS: dict[str, type[StrictBaseModel]] = {
    # assets
    "list_assets": OrganizationFilterArgs,
    "get_asset_by_id": GetAssetByIdArgs,
    "get_asset_tasks_by_id": GetAssetTasksByIdArgs,
    "uninstall_assets": UninstallAssetsArgs,
    "assign_reboot_task": AssignAssetTaskArgs,
    "assign_shutdown_task": AssignAssetTaskArgs,
    "assign_isolation_task": AssignIsolationTaskArgs,
    "assign_log_retrieval_task": AssignLogRetrievalTaskArgs,
    "assign_version_update_task": AssignAssetTaskArgs,
    # acquisitions
    "list_acquisition_profiles": ListAcquisitionProfilesArgs,
    "get_acquisition_profile_by_id": GetAcquisitionProfileByIdArgs,
    "create_acquisition_profile": CreateAcquisitionProfileArgs,
    "assign_acquisition_task": AssignAcquisitionTaskArgs,
    "assign_image_acquisition_task": AssignImageAcquisitionTaskArgs,
    # audit
    "list_audit_logs": OrganizationFilterArgs,
    "export_audit_logs": OrganizationFilterArgs,
    # auto asset tags
    "create_auto_asset_tag": CreateAutoAssetTagArgs,
    "update_auto_asset_tag": UpdateAutoAssetTagArgs,
    "get_auto_asset_tag_by_id": GetAutoAssetTagByIdArgs,
    "list_auto_asset_tags": EmptyArgs,
    # baseline
    "acquire_baseline": AcquireBaselineArgs,
    # cases
    "list_cases": OrganizationFilterArgs,
    "create_case": CreateCaseArgs,
    "add_note_to_case": AddNoteToCaseArgs,
    "update_note_in_case": UpdateNoteInCaseArgs,
    "delete_note_from_case": DeleteNoteFromCaseArgs,
    "export_cases": OrganizationFilterArgs,
    "export_case_notes": ExportCaseNotesArgs,
    "export_case_endpoints": ExportCaseEndpointsArgs,
    # evidence
    "download_case_ppc": EvidenceArgs,
    "download_task_report": EvidenceArgs,
    "get_report_file_info": EvidenceArgs,
    # repositories
    "list_repositories": OrganizationFilterArgs,
    "create_smb_repository": SmbRepositoryArgs,
    "update_smb_repository": UpdateSmbRepositoryArgs,
    "create_sftp_repository": CreateSftpRepositoryArgs,
    # organizations
    "list_organizations": EmptyArgs,
    "get_organization_users": GetOrganizationUsersArgs,
    # params
    "list_drone_analyzers": EmptyArgs,
    "list_acquisition_artifacts": EmptyArgs,
    "list_acquisition_evidences": EmptyArgs,
    # policies, settings, tasks, triage, users
    "list_policies": OrganizationFilterArgs,
    "update_banner_message": UpdateBannerMessageArgs,
    "list_tasks": OrganizationFilterArgs,
    "get_task_assignments_by_id": GetTaskAssignmentsByIdArgs,
    "list_triage_rules": OrganizationFilterArgs,
    "list_triage_tags": ListTriageTagsArgs,
    "list_users": OrganizationFilterArgs,
    # webhooks
    "call_webhook": CallWebhookArgs,
    "post_webhook": PostWebhookArgs,
    "get_webhook_task_assignments": GetWebhookTaskAssignmentsArgs,
}


def tool_input_schema(tool_name: str) -> dict[str, Any]:
    """JSON schema advertised to MCP clients for a tool's arguments."""
    schema_class = TOOL_ARGUMENT_SCHEMAS.get(tool_name)
    if schema_class is None:
        return {"type": "object", "properties": {}}
    return schema_class.model_json_schema(by_alias=True)


def validate_tool_arguments(
    tool_name: str,
    arguments: dict[str, Any],
) -> dict[str, Any]:
    """Validate tool arguments against Pydantic schema.

    Args:
        tool_name: Name of the tool being called.
        arguments: Raw arguments from the MCP client.

    Returns:
        Validated arguments keyed by field name. Nested objects stay models.

    Raises:
        ToolArgumentValidationError: If validation fails.
    """
    schema_class = TOOL_ARGUMENT_SCHEMAS.get(tool_name)

    if schema_class is None:
        logger.warning(
            "tool_argument_validation_no_schema",
            tool_name=tool_name,
            message="No Pydantic schema defined for tool, skipping validation",
        )
        return arguments

    try:
        validated = schema_class.model_validate(arguments)
        logger.debug(
            "tool_argument_validation_success",
            tool_name=tool_name,
        )
        return dict(validated)
    except ValidationError as e:
        error_details = e.errors(include_url=False, include_input=False)
        error_messages = []
        for error in error_details:
            loc = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            error_messages.append(f"{loc}: {msg}")

        full_message = f"Tool '{tool_name}' argument validation failed: {'; '.join(error_messages)}"
        logger.error(
            "tool_argument_validation_failed",
            tool_name=tool_name,
            message=full_message,
        )
        raise ToolArgumentValidationError(
            message=full_message,
            errors=[dict(e) for e in error_details],
        )
