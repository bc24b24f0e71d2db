"""Auto asset tag endpoints.

AIR answers validation failures on these endpoints with a 4xx carrying a
regular envelope, so errors are returned as envelopes instead of raised.
"""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI
from air_mcp.api.models import APIResponse, AutoAssetTag, Page


class AutoAssetTagsAPI(ResourceAPI):
    async def create(self, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope_or_error_body(
            "POST", "/auto-asset-tag", AutoAssetTag, json=body
        )

    async def update(self, tag_id: str, body: dict[str, Any]) -> APIResponse[Any]:
        return await self._envelope_or_error_body(
            "PUT", f"/auto-asset-tag/{tag_id}", AutoAssetTag, json=body
        )

    async def get(self, tag_id: str) -> APIResponse[Any]:
        return await self._envelope_or_error_body(
            "GET", f"/auto-asset-tag/{tag_id}", AutoAssetTag
        )

    async def list(self) -> APIResponse[Any]:
        return await self._envelope_or_error_body(
            "GET", "/auto-asset-tag", Page[AutoAssetTag]
        )
