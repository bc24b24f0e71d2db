"""Console settings endpoints."""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import ResourceAPI
from air_mcp.api.models import APIResponse


class SettingsAPI(ResourceAPI):
    async def update_banner(self, enabled: bool) -> APIResponse[Any]:
        return await self._envelope("PUT", "/settings/banner", json={"enabled": enabled})
