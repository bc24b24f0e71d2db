"""Tests for the case, baseline and audit tools."""

from __future__ import annotations

import pytest
from conftest import envelope, page

from air_mcp.tools import ToolArgumentValidationError

NOTE = {
    "_id": "n1",
    "value": "Lateral movement confirmed",
    "writtenAt": "2024-06-01T12:00:00Z",
    "writtenBy": "analyst",
}


class TestCases:
    """Tests for list_cases and create_case."""

    @pytest.mark.asyncio
    async def test_list_cases(self, air, registry):
        case = {"_id": "C-2024-0001", "name": "Ransomware", "status": "open",
                "startedOn": "2024-06-01T09:30:00Z"}
        air.add("GET", "/api/public/cases", envelope(page([case])))

        result = await registry.execute("list_cases", {"organizationIds": "2"})

        assert result.text == (
            "Found 1 cases:\nC-2024-0001: Ransomware (Status: open, Started: 2024-06-01)"
        )
        assert air.last.params == {"filter[organizationIds]": "2"}

    @pytest.mark.asyncio
    async def test_no_cases(self, air, registry):
        air.add("GET", "/api/public/cases", envelope(page([])))

        result = await registry.execute("list_cases", {})

        assert result.text == "No cases found matching the criteria."

    @pytest.mark.asyncio
    async def test_create_case_defaults(self, air, registry):
        created = {"_id": "C-2024-0002", "name": "Phish", "status": "open",
                   "ownerUserId": "u1", "visibility": "public-to-organization"}
        air.add("POST", "/api/public/cases", envelope(created))

        result = await registry.execute(
            "create_case", {"organizationId": 0, "name": "Phish", "ownerUserId": "u1"}
        )

        assert result.success
        assert result.text.startswith("Successfully created case C-2024-0002: Phish")
        assert air.last.body == {
            "organizationId": 0,
            "name": "Phish",
            "ownerUserId": "u1",
            "visibility": "public-to-organization",
            "assignedUserIds": [],
        }


class TestCaseNotes:
    """Tests for adding, updating and deleting case notes."""

    @pytest.mark.asyncio
    async def test_add_note(self, air, registry):
        air.add("POST", "/api/public/cases/C-1/notes", envelope(NOTE))

        result = await registry.execute(
            "add_note_to_case", {"caseId": "C-1", "note": "Lateral movement confirmed"}
        )

        assert result.text == (
            "Successfully added note to case C-1:\n"
            "Note ID: n1\n"
            "Content: Lateral movement confirmed\n"
            "Written at: 2024-06-01 12:00:00\n"
            "Written by: analyst"
        )
        assert air.last.body == {"value": "Lateral movement confirmed"}

    @pytest.mark.asyncio
    async def test_update_note_uses_patch(self, air, registry):
        air.add("PATCH", "/api/public/cases/C-1/notes/n1", envelope(NOTE))

        result = await registry.execute(
            "update_note_in_case", {"caseId": "C-1", "noteId": "n1", "note": "edited"}
        )

        assert result.text.startswith("Successfully updated note in case C-1:")
        assert air.last.method == "PATCH"
        assert air.last.body == {"value": "edited"}

    @pytest.mark.asyncio
    async def test_delete_note(self, air, registry):
        air.add("DELETE", "/api/public/cases/C-1/notes/n1", envelope(None))

        result = await registry.execute("delete_note_from_case", {"caseId": "C-1", "noteId": "n1"})

        assert result.text == "Successfully deleted note with ID n1 from case C-1"

    @pytest.mark.asyncio
    async def test_add_note_rejected(self, air, registry):
        air.add(
            "POST",
            "/api/public/cases/C-1/notes",
            envelope(success=False, errors=["case is closed"]),
        )

        result = await registry.execute("add_note_to_case", {"caseId": "C-1", "note": "x"})

        assert result.message == "Error adding note to case: case is closed"

    @pytest.mark.asyncio
    async def test_empty_note_rejected_before_request(self, air, registry):
        with pytest.raises(ToolArgumentValidationError):
            await registry.execute("add_note_to_case", {"caseId": "C-1", "note": ""})
        assert air.requests == []


class TestCaseExports:
    """Tests for the case export tools."""

    @pytest.mark.asyncio
    async def test_export_cases(self, air, registry):
        air.add("GET", "/api/public/cases/export", content=b"id,name\n", status=200)

        result = await registry.execute("export_cases", {"organizationIds": ["1"]})

        assert result.text == "Cases export initiated successfully. Status code: 200"
        assert air.last.params == {"filter[organizationIds]": "1"}

    @pytest.mark.asyncio
    async def test_export_case_notes(self, air, registry):
        air.add("GET", "/api/public/cases/C-1/notes/export", content=b"", status=200)

        result = await registry.execute("export_case_notes", {"caseId": "C-1"})

        assert result.text == "Case notes export initiated successfully. Status code: 200"

    @pytest.mark.asyncio
    async def test_export_case_endpoints(self, air, registry):
        air.add("GET", "/api/public/cases/C-1/endpoints/export", content=b"", status=200)

        result = await registry.execute("export_case_endpoints", {"caseId": "C-1"})

        assert result.text == "Case endpoints export initiated successfully. Status code: 200"
        assert air.last.params == {"filter[organizationIds]": "0"}

    @pytest.mark.asyncio
    async def test_accepted_is_not_success(self, air, registry):
        air.add("GET", "/api/public/cases/export", content=b"", status=202)

        result = await registry.execute("export_cases", {})

        assert not result.success
        assert result.message == "Error exporting cases: unexpected status code 202"

    @pytest.mark.asyncio
    async def test_http_error_reported_as_export_error(self, air, registry):
        air.add("GET", "/api/public/cases/C-9/notes/export", {"success": False}, status=404)

        result = await registry.execute("export_case_notes", {"caseId": "C-9"})

        assert result.message == (
            "Error exporting case notes: Request failed with status code 404"
        )


class TestBaseline:
    """Tests for acquire_baseline."""

    @pytest.mark.asyncio
    async def test_acquire_baseline(self, air, registry):
        tasks = [
            {"_id": "b1", "name": "Baseline 1", "organizationId": 0},
            {"_id": "b2", "name": "Baseline 2", "organizationId": 0},
        ]
        air.add("POST", "/api/public/baseline/acquire", envelope(tasks))

        result = await registry.execute(
            "acquire_baseline",
            {"caseId": "C-1", "filter": {"includedEndpointIds": ["e1", "e2"]}},
        )

        assert result.text == (
            "Successfully created 2 baseline acquisition task(s):\n\n"
            "Task ID: b1\nName: Baseline 1\nOrganization ID: 0\n\n"
            "Task ID: b2\nName: Baseline 2\nOrganization ID: 0"
        )
        assert air.last.body == {
            "caseId": "C-1",
            "filter": {"includedEndpointIds": ["e1", "e2"], "organizationIds": [0]},
        }

    @pytest.mark.asyncio
    async def test_no_tasks_created(self, air, registry):
        air.add("POST", "/api/public/baseline/acquire", envelope([]))

        result = await registry.execute(
            "acquire_baseline", {"caseId": "C-1", "filter": {"includedEndpointIds": ["e1"]}}
        )

        assert result.success
        assert result.text.startswith("No baseline acquisition tasks created.")

    @pytest.mark.asyncio
    async def test_baseline_rejected(self, air, registry):
        air.add(
            "POST",
            "/api/public/baseline/acquire",
            envelope(success=False, errors=["case not found"]),
        )

        result = await registry.execute(
            "acquire_baseline", {"caseId": "C-0", "filter": {"includedEndpointIds": ["e1"]}}
        )

        assert result.message == "Error acquiring baseline: case not found"


class TestAuditLogs:
    """Tests for the audit log tools."""

    @pytest.mark.asyncio
    async def test_list_audit_logs(self, air, registry):
        entry = {
            "_id": "l1",
            "type": "user-login",
            "performedBy": "admin",
            "description": "User logged in",
            "createdAt": "2024-06-02T07:08:09Z",
        }
        air.add("GET", "/api/public/audit-logs", envelope(page([entry])))

        result = await registry.execute("list_audit_logs", {})

        assert result.text == (
            "Found 1 audit logs:\n"
            "l1: [2024-06-02 07:08:09] user-login by admin - User logged in"
        )

    @pytest.mark.asyncio
    async def test_export_audit_logs(self, air, registry):
        air.add("GET", "/api/public/audit-logs/export", content=b"", status=204)

        result = await registry.execute("export_audit_logs", {"organizationIds": ["1", "2"]})

        assert result.text == (
            "Successfully initiated audit log export for organization IDs: 1, 2. "
            "The export process runs in the background on the AIR server."
        )
        assert air.last.params == {"filter[organizationIds]": "1,2"}

    @pytest.mark.asyncio
    async def test_export_audit_logs_empty_ids_reports_default(self, air, registry):
        air.add("GET", "/api/public/audit-logs/export", content=b"", status=204)

        result = await registry.execute("export_audit_logs", {"organizationIds": []})

        assert air.last.params == {"filter[organizationIds]": "0"}
        assert result.text.startswith(
            "Successfully initiated audit log export for organization IDs: 0. "
        )

    @pytest.mark.asyncio
    async def test_export_audit_logs_failure(self, air, registry):
        air.add("GET", "/api/public/audit-logs/export", None, status=500)

        result = await registry.execute("export_audit_logs", {})

        assert result.message == (
            "Failed to initiate audit log export: Request failed with status code 500"
        )
