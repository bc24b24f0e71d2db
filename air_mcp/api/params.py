"""Parameter catalog endpoints.

Unlike the rest of the public API these return bare JSON, not an envelope.
"""

from __future__ import annotations

from typing import Any

from air_mcp.api.base import PUBLIC_API, AIRAPIError, ResourceAPI
from air_mcp.api.models import DroneAnalyzer, PlatformCatalog


class ParamsAPI(ResourceAPI):
    async def drone_analyzers(self) -> list[DroneAnalyzer]:
        data = await self._client.request_json("GET", f"{PUBLIC_API}/params/drone/analyzers")
        if not isinstance(data, list):
            raise AIRAPIError("Received invalid data format for drone analyzers.")
        return [DroneAnalyzer.model_validate(item) for item in data]

    async def acquisition_artifacts(self) -> PlatformCatalog:
        return await self._catalog("artifacts")

    async def acquisition_evidences(self) -> PlatformCatalog:
        return await self._catalog("evidences")

    async def _catalog(self, kind: str) -> PlatformCatalog:
        data: Any = await self._client.request_json(
            "GET", f"{PUBLIC_API}/params/acquisition/{kind}"
        )
        if not isinstance(data, dict):
            raise AIRAPIError(f"Received invalid data format for acquisition {kind}.")
        return PlatformCatalog.model_validate(data)
