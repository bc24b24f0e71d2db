"""Tests for the shared text formatters."""

from __future__ import annotations

from air_mcp.api.models import PlatformCatalog, TaskSummary
from air_mcp.tools.formatting import (
    format_bytes,
    format_catalog,
    format_condition_group,
    format_date,
    format_datetime,
    format_platforms,
    format_task_summaries,
    format_task_type,
    join_or_none,
)


class TestDates:
    def test_iso_timestamp(self):
        assert format_datetime("2024-03-01T10:20:30.000Z") == "2024-03-01 10:20:30"

    def test_date_only(self):
        assert format_date("2024-03-01T10:20:30Z") == "2024-03-01"

    def test_unparseable_returned_as_is(self):
        assert format_datetime("yesterday") == "yesterday"

    def test_missing_value(self):
        assert format_datetime(None) == "N/A"
        assert format_date("") == "N/A"


class TestFormatBytes:
    def test_zero(self):
        assert format_bytes(0) == "0 Bytes"

    def test_kilobytes(self):
        assert format_bytes(1536) == "1.5 KB"

    def test_whole_gigabytes(self):
        assert format_bytes(2 * 1024**3) == "2 GB"


class TestSmallHelpers:
    def test_task_type(self):
        assert format_task_type("acquisition-profile") == "Acquisition Profile"
        assert format_task_type("triage") == "Triage"

    def test_platform_names(self):
        assert (
            format_platforms(["windows", "darwin", "o365-parselet", "freebsd"])
            == "Windows, macOS, Microsoft 365, freebsd"
        )

    def test_join_or_none(self):
        assert join_or_none([]) == "None"
        assert join_or_none(["a", 1]) == "a, 1"

    def test_task_summaries(self):
        tasks = [TaskSummary.model_validate({"_id": "t1", "name": "Reboot", "organizationId": 0})]
        assert format_task_summaries(tasks) == "t1: Reboot (Organization: 0)"


class TestFormatConditionGroup:
    """Tests for recursive condition rendering."""

    def test_empty_group(self):
        assert format_condition_group({}) == "  No conditions defined\n"

    def test_nested_group_is_indented(self):
        group = {
            "operator": "and",
            "conditions": [
                {"field": "process", "operator": "running", "value": "sshd", "conditionId": 1},
                {
                    "operator": "or",
                    "conditions": [{"field": "file", "operator": "exists", "value": "/etc/x"}],
                },
            ],
        }

        text = format_condition_group(group)

        assert text == (
            "  Operator: and\n"
            "  Conditions:\n"
            "    Condition 1:\n"
            "      Field: process\n"
            "      Operator: running\n"
            "      Value: sshd\n"
            "      Condition ID: 1\n"
            "    Condition 2:\n"
            "      Operator: or\n"
            "      Conditions:\n"
            "        Condition 1:\n"
            "          Field: file\n"
            "          Operator: exists\n"
            "          Value: /etc/x\n"
        )


class TestFormatCatalog:
    def test_empty_catalog(self):
        assert format_catalog(PlatformCatalog(), "Acquisition Artifacts", "Artifacts") is None

    def test_sections_per_platform(self):
        catalog = PlatformCatalog.model_validate(
            {
                "windows": [
                    {
                        "group": "Browsers",
                        "items": [{"name": "chrome", "desc": "Chrome history", "type": "file"}],
                    }
                ],
                "linux": [],
            }
        )

        text = format_catalog(catalog, "Acquisition Artifacts", "Artifacts")

        assert text == (
            "# Acquisition Artifacts\n\n"
            "## Windows Artifacts\n"
            "### Browsers\n"
            "  • chrome (file): Chrome history"
        )
