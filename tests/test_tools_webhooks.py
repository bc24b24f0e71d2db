"""Tests for the webhook tools."""

from __future__ import annotations

import pytest

ASSIGNMENT = {
    "assignmentId": "as1",
    "taskId": "t1",
    "taskName": "Webhook Triage",
    "endpointId": "e1",
    "endpointName": "web-01",
    "organizationId": 0,
    "assignmentStatus": "completed",
    "progress": 100,
    "startedAt": "2024-07-01T10:00:00Z",
    "hasDroneData": True,
    "hasCasePpc": False,
    "reportStatus": "ready",
    "reportId": "r1",
    "reportUrl": "https://air/r1",
}


class TestCallWebhook:
    @pytest.mark.asyncio
    async def test_call_uses_token_not_bearer(self, air, registry):
        air.add(
            "GET",
            "/api/webhook/air-generic-url-webhook/192.168.1.100",
            {
                "taskId": "t1",
                "taskDetailsViewUrl": "https://air/view/t1",
                "taskDetailsDataUrl": "https://air/data/t1",
                "statusCode": 200,
            },
        )

        result = await registry.execute(
            "call_webhook",
            {"slug": "air-generic-url-webhook", "data": "192.168.1.100", "token": "hook-tok"},
        )

        assert result.text == (
            "Task ID: t1\n"
            "Task Details View URL: https://air/view/t1\n"
            "Task Details Data URL: https://air/data/t1\n"
            "Status Code: 200"
        )
        assert air.last.params == {"token": "hook-tok"}
        assert "authorization" not in air.last.headers

    @pytest.mark.asyncio
    async def test_call_failure_hides_token(self, air, registry):
        result = await registry.execute(
            "call_webhook", {"slug": "nope", "data": "x", "token": "hook-tok"}
        )

        assert result.message == "Failed to call webhook: Request failed with status code 404"
        assert "hook-tok" not in result.message


class TestPostWebhook:
    @pytest.mark.asyncio
    async def test_post_sends_data_as_body(self, air, registry):
        air.add("POST", "/api/webhook/my-hook", {"ok": True}, status=201)

        result = await registry.execute(
            "post_webhook",
            {"slug": "my-hook", "data": {"hosts": ["a", "b"]}, "token": "tok"},
        )

        assert result.text == "Webhook POST request completed with status code: 201"
        assert air.last.body == {"hosts": ["a", "b"]}
        assert air.last.params == {"token": "tok"}

    @pytest.mark.asyncio
    async def test_post_failure(self, air, registry):
        air.add("POST", "/api/webhook/my-hook", None, status=403)

        result = await registry.execute(
            "post_webhook", {"slug": "my-hook", "data": "x", "token": "bad"}
        )

        assert result.message == "Failed to post to webhook: Request failed with status code 403"


class TestWebhookAssignments:
    @pytest.mark.asyncio
    async def test_assignments(self, air, registry):
        second = {**ASSIGNMENT, "assignmentId": "as2", "endpointName": "web-02"}
        air.add("GET", "/api/webhook/my-hook/assignments", [ASSIGNMENT, second])

        result = await registry.execute(
            "get_webhook_task_assignments", {"slug": "my-hook", "taskId": "t1", "token": "tok"}
        )

        blocks = result.text.split("\n---\n")
        assert len(blocks) == 2
        assert blocks[0].startswith("Assignment ID: as1\nTask ID: t1\nTask Name: Webhook Triage")
        assert "Progress: 100%" in blocks[0]
        assert "Started At: 2024-07-01 10:00:00" in blocks[0]
        assert "Endpoint Name: web-02" in blocks[1]
        assert air.last.params == {"token": "tok", "taskId": "t1"}

    @pytest.mark.asyncio
    async def test_no_assignments(self, air, registry):
        air.add("GET", "/api/webhook/my-hook/assignments", [])

        result = await registry.execute(
            "get_webhook_task_assignments", {"slug": "my-hook", "taskId": "t1", "token": "tok"}
        )

        assert result.text == "No assignments found for this task."

    @pytest.mark.asyncio
    async def test_unexpected_shape(self, air, registry):
        air.add("GET", "/api/webhook/my-hook/assignments", {"error": "nope"})

        result = await registry.execute(
            "get_webhook_task_assignments", {"slug": "my-hook", "taskId": "t1", "token": "tok"}
        )

        assert result.message == (
            "Failed to get task assignments: Unexpected response: expected a list of assignments"
        )
