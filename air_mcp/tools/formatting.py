"""Text helpers shared by the AIR tool handlers."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from air_mcp.api.models import ArtifactGroup, PlatformCatalog, TaskSummary

PLATFORM_NAMES = {
    "windows": "Windows",
    "linux": "Linux",
    "darwin": "macOS",
    "gws-parselet": "Google Workspace",
    "o365-parselet": "Microsoft 365",
}

_BYTE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]


def _parse_timestamp(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def format_datetime(value: str | None) -> str:
    """Render an AIR timestamp as ``YYYY-MM-DD HH:MM:SS``.

    Values that do not parse are returned unchanged.
    """
    if not value:
        return "N/A"
    parsed = _parse_timestamp(value)
    return parsed.strftime("%Y-%m-%d %H:%M:%S") if parsed else value


def format_date(value: str | None) -> str:
    """Render an AIR timestamp as ``YYYY-MM-DD``."""
    if not value:
        return "N/A"
    parsed = _parse_timestamp(value)
    return parsed.strftime("%Y-%m-%d") if parsed else value


def format_bytes(size: int | float) -> str:
    """Human-readable size, e.g. ``1.5 GB``."""
    if size <= 0:
        return "0 Bytes"
    i = min(int(math.floor(math.log(size, 1024))), len(_BYTE_UNITS) - 1)
    scaled = f"{size / 1024**i:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_BYTE_UNITS[i]}"


def yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def join_or_none(values: list[Any] | None) -> str:
    return ", ".join(str(v) for v in values) if values else "None"


def format_task_type(task_type: str) -> str:
    """``acquisition-profile`` -> ``Acquisition Profile``."""
    return " ".join(word[:1].upper() + word[1:] for word in task_type.split("-"))


def format_platforms(platforms: list[str]) -> str:
    return ", ".join(PLATFORM_NAMES.get(p, p) for p in platforms)


def format_task_summaries(tasks: list[TaskSummary]) -> str:
    """One ``<id>: <name> (Organization: <org>)`` line per created task."""
    return "\n".join(
        f"{task.id}: {task.name} (Organization: {task.organization_id})" for task in tasks
    )


def format_condition_group(group: dict[str, Any] | None, indent: str = "  ") -> str:
    """Render an auto asset tag condition tree, nesting groups by indentation."""
    if not group:
        return f"{indent}No conditions defined\n"

    output = f"{indent}Operator: {group.get('operator', '')}\n"
    output += f"{indent}Conditions:\n"
    for index, cond in enumerate(group.get("conditions") or [], start=1):
        output += f"{indent}  Condition {index}:\n"
        if "conditions" in cond:
            output += format_condition_group(cond, indent + "    ")
            continue
        output += f"{indent}    Field: {cond.get('field', '')}\n"
        output += f"{indent}    Operator: {cond.get('operator', '')}\n"
        output += f"{indent}    Value: {cond.get('value', '')}\n"
        if cond.get("conditionId") is not None:
            output += f"{indent}    Condition ID: {cond['conditionId']}\n"
    return output


def format_catalog(catalog: PlatformCatalog, title: str, noun: str) -> str | None:
    """Render artifacts or evidences as markdown sections per platform.

    Returns None when no platform has any groups.
    """
    sections = []
    for label, groups in (
        ("Windows", catalog.windows),
        ("Linux", catalog.linux),
        ("macOS", catalog.macos),
        ("AIX", catalog.aix),
    ):
        if groups:
            body = "\n\n".join(_format_artifact_group(g) for g in groups)
            sections.append(f"## {label} {noun}\n{body}")

    if not sections:
        return None
    return f"# {title}\n\n" + "\n\n".join(sections)


def _format_artifact_group(group: ArtifactGroup) -> str:
    items = "\n".join(f"  • {item.name} ({item.type}): {item.desc}" for item in group.items)
    return f"### {group.group}\n{items}"
