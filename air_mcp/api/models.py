"""Pydantic models mirroring AIR API responses.

These records are owned by the AIR console; the models exist only to give the
formatters a typed shape. Every field has a default and unknown fields are
kept, so a partial response never fails validation.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")


class AIRModel(BaseModel):
    """Base for all AIR records."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls as absent so field defaults apply."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Entity(AIRModel):
    """A record carrying the AIR ``_id`` key."""

    id: str | int = Field(default="", alias="_id")


# =============================================================================
# Envelope
# =============================================================================


class APIResponse(AIRModel, Generic[T]):
    """The ``{success, result, statusCode, errors}`` envelope."""

    success: bool = False
    result: T | None = None
    status_code: int = Field(default=0, alias="statusCode")
    errors: list[Any] = Field(default_factory=list)

    @property
    def error_text(self) -> str:
        """Errors joined for display."""
        return ", ".join(str(e) for e in self.errors)


class ListFilter(AIRModel):
    name: str = ""
    type: str = ""
    options: list[Any] = Field(default_factory=list)
    filter_url: str | None = Field(default=None, alias="filterUrl")


class Page(AIRModel, Generic[T]):
    """Paginated list result."""

    entities: list[T] = Field(default_factory=list)
    filters: list[ListFilter] = Field(default_factory=list)
    sortables: list[str] = Field(default_factory=list)
    total_entity_count: int = Field(default=0, alias="totalEntityCount")
    current_page: int = Field(default=1, alias="currentPage")
    page_size: int = Field(default=0, alias="pageSize")
    previous_page: int | None = Field(default=None, alias="previousPage")
    total_page_count: int = Field(default=1, alias="totalPageCount")
    next_page: int | None = Field(default=None, alias="nextPage")


# =============================================================================
# Assets
# =============================================================================


class CPUResource(AIRModel):
    model: str = ""
    usage: float = 0


class RAMResource(AIRModel):
    free_space: int = Field(default=0, alias="freeSpace")
    total_size: int = Field(default=0, alias="totalSize")


class DiskResource(AIRModel):
    path: str = ""
    type: str = ""
    free_space: int = Field(default=0, alias="freeSpace")
    total_size: int = Field(default=0, alias="totalSize")


class SystemResources(AIRModel):
    cpu: CPUResource = Field(default_factory=CPUResource)
    ram: RAMResource = Field(default_factory=RAMResource)
    disks: list[DiskResource] = Field(default_factory=list)


class Asset(Entity):
    name: str = ""
    os: str = ""
    platform: str = ""
    system_resources: SystemResources = Field(
        default_factory=SystemResources, alias="systemResources"
    )
    online_status: str = Field(default="", alias="onlineStatus")
    issues: list[str] = Field(default_factory=list)


class AssetDetail(Entity):
    name: str = ""
    os: str = ""
    platform: str = ""
    ip_address: str = Field(default="", alias="ipAddress")
    group_id: str = Field(default="", alias="groupId")
    group_full_path: str = Field(default="", alias="groupFullPath")
    is_server: bool = Field(default=False, alias="isServer")
    is_managed: bool = Field(default=False, alias="isManaged")
    last_seen: str | None = Field(default=None, alias="lastSeen")
    version: str = ""
    version_no: int | None = Field(default=None, alias="versionNo")
    registered_at: str | None = Field(default=None, alias="registeredAt")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    organization_id: int = Field(default=0, alias="organizationId")
    online_status: str = Field(default="", alias="onlineStatus")
    issues: list[str] = Field(default_factory=list)
    isolation_status: str = Field(default="", alias="isolationStatus")
    tags: list[Any] = Field(default_factory=list)
    label: str | None = None
    waiting_for_version_update_fix: bool = Field(
        default=False, alias="waitingForVersionUpdateFix"
    )
    policies: list[Any] = Field(default_factory=list)


class AssetTask(Entity):
    task_id: str = Field(default="", alias="taskId")
    name: str = ""
    type: str = ""
    endpoint_id: str = Field(default="", alias="endpointId")
    endpoint_name: str = Field(default="", alias="endpointName")
    organization_id: int = Field(default=0, alias="organizationId")
    status: str = ""
    recurrence: str | None = None
    progress: float = 0
    duration: float | None = None
    case_ids: list[str] | None = Field(default=None, alias="caseIds")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class TaskSummary(Entity):
    """Task record returned by the task-assignment endpoints."""

    name: str = ""
    organization_id: int = Field(default=0, alias="organizationId")


# =============================================================================
# Acquisitions
# =============================================================================


class AcquisitionProfile(Entity):
    name: str = ""
    organization_ids: list[Any] = Field(default_factory=list, alias="organizationIds")
    created_at: str | None = Field(default=None, alias="createdAt")
    created_by: str = Field(default="", alias="createdBy")
    deletable: bool = False


class PlatformEvidence(AIRModel):
    evidence_list: list[Any] = Field(default_factory=list, alias="evidenceList")
    artifact_list: list[Any] | None = Field(default=None, alias="artifactList")


class AcquisitionProfileDetail(AcquisitionProfile):
    updated_at: str | None = Field(default=None, alias="updatedAt")
    windows: PlatformEvidence | None = None
    linux: PlatformEvidence | None = None
    macos: PlatformEvidence | None = None
    aix: PlatformEvidence | None = None


# =============================================================================
# Audit
# =============================================================================


class AuditLog(Entity):
    type: str = ""
    performed_by: str = Field(default="", alias="performedBy")
    description: str = ""
    organization_id: int | None = Field(default=None, alias="organizationId")
    created_at: str | None = Field(default=None, alias="createdAt")


# =============================================================================
# Auto asset tags
# =============================================================================


class AutoAssetTag(Entity):
    tag: str = ""
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    condition_id_counter: int | None = Field(default=None, alias="conditionIdCounter")
    linux_conditions: dict[str, Any] = Field(default_factory=dict, alias="linuxConditions")
    windows_conditions: dict[str, Any] = Field(
        default_factory=dict, alias="windowsConditions"
    )
    macos_conditions: dict[str, Any] = Field(default_factory=dict, alias="macosConditions")


# =============================================================================
# Cases
# =============================================================================


class Case(Entity):
    name: str = ""
    status: str = ""
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    started_on: str | None = Field(default=None, alias="startedOn")
    closed_on: str | None = Field(default=None, alias="closedOn")
    owner_user_id: str = Field(default="", alias="ownerUserId")
    organization_id: int = Field(default=0, alias="organizationId")
    visibility: str = ""
    assigned_user_ids: list[str] = Field(default_factory=list, alias="assignedUserIds")
    source: str = ""
    total_days: int = Field(default=0, alias="totalDays")
    total_endpoints: int = Field(default=0, alias="totalEndpoints")


class CaseNote(Entity):
    value: str = ""
    written_at: str | None = Field(default=None, alias="writtenAt")
    written_by: str = Field(default="", alias="writtenBy")


# =============================================================================
# Organizations and users
# =============================================================================


class Organization(Entity):
    name: str = ""
    total_endpoints: int = Field(default=0, alias="totalEndpoints")
    owner: str | None = None
    is_default: bool = Field(default=False, alias="isDefault")
    shareable_deployment_enabled: bool = Field(
        default=False, alias="shareableDeploymentEnabled"
    )
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class UserRole(AIRModel):
    name: str = ""
    tag: str = ""


class UserProfile(AIRModel):
    name: str = ""
    surname: str = ""
    department: str | None = None


class User(Entity):
    username: str = ""
    email: str = ""
    organization_ids: Any = Field(default=None, alias="organizationIds")
    profile: UserProfile = Field(default_factory=UserProfile)
    tfa_enabled: bool = Field(default=False, alias="tfaEnabled")
    roles: list[UserRole] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


# =============================================================================
# Params
# =============================================================================


class DroneAnalyzer(AIRModel):
    id: str = Field(default="", alias="Id")
    name: str = Field(default="", alias="Name")
    default_enabled: bool = Field(default=False, alias="DefaultEnabled")
    platforms: list[str] = Field(default_factory=list, alias="Platforms")
    oses: list[str] = Field(default_factory=list, alias="OSes")

    @property
    def supported_platforms(self) -> list[str]:
        """Platforms, falling back to the older ``OSes`` key."""
        return self.platforms or self.oses


class ArtifactItem(AIRModel):
    name: str = ""
    desc: str = ""
    type: str = ""


class ArtifactGroup(AIRModel):
    group: str = ""
    items: list[ArtifactItem] = Field(default_factory=list)


class PlatformCatalog(AIRModel):
    """Artifacts or evidences grouped per platform."""

    windows: list[ArtifactGroup] = Field(default_factory=list)
    linux: list[ArtifactGroup] = Field(default_factory=list)
    macos: list[ArtifactGroup] = Field(default_factory=list)
    aix: list[ArtifactGroup] = Field(default_factory=list)


# =============================================================================
# Policies, repositories, tasks, triage
# =============================================================================


class PolicyCPU(AIRModel):
    limit: int | float = 0


class Policy(Entity):
    name: str = ""
    organization_ids: list[Any] = Field(default_factory=list, alias="organizationIds")
    default: bool = False
    order: int = 0
    cpu: PolicyCPU = Field(default_factory=PolicyCPU)
    created_by: str = Field(default="", alias="createdBy")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class Repository(Entity):
    name: str = ""
    path: str = ""
    username: str = ""
    type: str = ""
    host: str | None = None
    port: int | None = None
    organization_ids: list[Any] = Field(default_factory=list, alias="organizationIds")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class Task(Entity):
    name: str = ""
    type: str = ""
    source: str = ""
    status: str = ""
    organization_id: int = Field(default=0, alias="organizationId")
    created_by: str = Field(default="", alias="createdBy")
    total_assigned_endpoints: int = Field(default=0, alias="totalAssignedEndpoints")
    total_completed_endpoints: int = Field(default=0, alias="totalCompletedEndpoints")
    total_failed_endpoints: int = Field(default=0, alias="totalFailedEndpoints")
    total_cancelled_endpoints: int = Field(default=0, alias="totalCancelledEndpoints")
    is_scheduled: bool = Field(default=False, alias="isScheduled")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class TaskAssignment(Entity):
    task_id: str = Field(default="", alias="taskId")
    name: str = ""
    type: str = ""
    endpoint_id: str = Field(default="", alias="endpointId")
    endpoint_name: str = Field(default="", alias="endpointName")
    organization_id: int = Field(default=0, alias="organizationId")
    status: str = ""
    progress: float = 0
    case_ids: list[str] = Field(default_factory=list, alias="caseIds")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class TriageRule(Entity):
    description: str = ""
    search_in: str = Field(default="", alias="searchIn")
    engine: str = ""
    organization_ids: list[Any] = Field(default_factory=list, alias="organizationIds")
    created_at: str | None = Field(default=None, alias="createdAt")
    created_by: str = Field(default="", alias="createdBy")
    deletable: bool = False


class TriageTag(Entity):
    name: str = ""
    count: int | None = None


# =============================================================================
# Webhooks
# =============================================================================


class WebhookTaskResponse(AIRModel):
    task_id: str = Field(default="", alias="taskId")
    task_details_view_url: str = Field(default="", alias="taskDetailsViewUrl")
    task_details_data_url: str = Field(default="", alias="taskDetailsDataUrl")
    status_code: int = Field(default=0, alias="statusCode")


class WebhookAssignment(AIRModel):
    assignment_id: str = Field(default="", alias="assignmentId")
    task_id: str = Field(default="", alias="taskId")
    task_name: str = Field(default="", alias="taskName")
    endpoint_id: str = Field(default="", alias="endpointId")
    endpoint_name: str = Field(default="", alias="endpointName")
    organization_id: int = Field(default=0, alias="organizationId")
    assignment_status: str = Field(default="", alias="assignmentStatus")
    progress: float = 0
    started_at: str | None = Field(default=None, alias="startedAt")
    has_drone_data: bool = Field(default=False, alias="hasDroneData")
    has_case_ppc: bool = Field(default=False, alias="hasCasePpc")
    report_status: str | None = Field(default=None, alias="reportStatus")
    report_id: str | None = Field(default=None, alias="reportId")
    report_url: str | None = Field(default=None, alias="reportUrl")


# =============================================================================
# Binary downloads
# =============================================================================


class FileDownload(AIRModel):
    """Summary of a non-JSON response body."""

    content_type: str = ""
    size_bytes: int = 0
    filename: str | None = None
