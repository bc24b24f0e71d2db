"""Webhook endpoints.

Webhooks live outside the public API prefix and authenticate with a
per-webhook ``token`` query parameter instead of the bearer token.
"""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import AIRAPIError, ResourceAPI
from air_mcp.api.models import WebhookAssignment, WebhookTaskResponse

WEBHOOK_API = "/api/webhook"


class WebhooksAPI(ResourceAPI):
    async def call(self, slug: str, data: str, token: str) -> WebhookTaskResponse:
        body = await self._client.request_json(
            "GET",
            f"{WEBHOOK_API}/{slug}/{data}",
            params={"token": token},
            auth=False,
        )
        return WebhookTaskResponse.model_validate(body)

    async def post(self, slug: str, data: Any, token: str) -> int:
        """POST ``data`` to the webhook and return the HTTP status code."""
        response = await self._client.request(
            "POST",
            f"{WEBHOOK_API}/{slug}",
            params={"token": token},
            json=data,
            auth=False,
        )
        return response.status_code

    async def task_assignments(
        self, slug: str, task_id: str, token: str
    ) -> list[WebhookAssignment]:
        body = await self._client.request_json(
            "GET",
            f"{WEBHOOK_API}/{slug}/assignments",
            params={"token": token, "taskId": task_id},
            auth=False,
        )
        if not isinstance(body, list):
            raise AIRAPIError("Unexpected response: expected a list of assignments")
        return [WebhookAssignment.model_validate(item) for item in body]
