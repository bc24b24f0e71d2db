"""Shared pieces for the AIR resource APIs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from air_mcp.api.models import APIResponse

if TYPE_CHECKING:
    from air_mcp.api.client import AIRClient

PUBLIC_API = "/api/public"


class AIRAPIError(Exception):
    """Raised when a request to the AIR API fails.

    Covers non-2xx responses, transport failures and bodies that are not
    valid JSON. ``body`` holds the decoded response body when there was one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def envelope(self) -> APIResponse[Any] | None:
        """The error body parsed as an AIR envelope, when it is one."""
        if isinstance(self.body, dict) and "success" in self.body:
            return APIResponse[Any].model_validate(self.body)
        return None


def parse_envelope(data: Any, result_type: Any = Any) -> APIResponse[Any]:
    """Validate a decoded body as ``APIResponse[result_type]``."""
    if not isinstance(data, dict):
        raise AIRAPIError(
            f"Unexpected response: expected an object, got {type(data).__name__}"
        )
    return APIResponse[result_type].model_validate(data)


def org_ids_param(organization_ids: str | list[str] | None) -> str:
    """Collapse organization IDs to the ``filter[organizationIds]`` value.

    A missing or empty value becomes ``"0"``; a list is joined with commas.
    """
    if organization_ids is None:
        return "0"
    if isinstance(organization_ids, list):
        return ",".join(str(o) for o in organization_ids if str(o)) or "0"
    return organization_ids or "0"


class ResourceAPI:
    """Base for resource groups; holds the shared client."""

    def __init__(self, client: AIRClient):
        self._client = client

    async def _envelope(
        self,
        method: str,
        path: str,
        result_type: Any = Any,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> APIResponse[Any]:
        data = await self._client.request_json(
            method, f"{PUBLIC_API}{path}", params=params, json=json
        )
        return parse_envelope(data, result_type)

    async def _envelope_or_error_body(
        self,
        method: str,
        path: str,
        result_type: Any = Any,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> APIResponse[Any]:
        """Like ``_envelope`` but returns the envelope carried by an HTTP error."""
        try:
            return await self._envelope(
                method, path, result_type, params=params, json=json
            )
        except AIRAPIError as e:
            envelope = e.envelope
            if envelope is None:
                raise
            if not envelope.status_code and e.status_code:
                envelope.status_code = e.status_code
            return envelope
