"""Case evidence download endpoints."""

from __future__ import annotations

import re
from typing import Any

import httpx

from air_mcp.api.base import PUBLIC_API, ResourceAPI, parse_envelope
from air_mcp.api.models import APIResponse, FileDownload

_FILENAME_RE = re.compile(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', re.IGNORECASE)


class EvidenceAPI(ResourceAPI):
    """Endpoints under ``/api/public/evidence/case``.

    The download endpoints may stream a file instead of JSON; such bodies are
    returned as a ``FileDownload`` summary in the envelope's result.
    """

    async def case_ppc(self, endpoint_id: str, task_id: str) -> APIResponse[Any]:
        return await self._fetch(f"/evidence/case/ppc/{endpoint_id}/{task_id}")

    async def task_report(self, endpoint_id: str, task_id: str) -> APIResponse[Any]:
        return await self._fetch(f"/evidence/case/report/{endpoint_id}/{task_id}")

    async def report_file_info(self, endpoint_id: str, task_id: str) -> APIResponse[Any]:
        return await self._fetch(f"/evidence/case/report-file-info/{endpoint_id}/{task_id}")

    async def _fetch(self, path: str) -> APIResponse[Any]:
        response = await self._client.request("GET", f"{PUBLIC_API}{path}")
        content_type = response.headers.get("content-type", "")

        if "json" in content_type:
            data = response.json()
            if isinstance(data, dict) and "success" in data:
                return parse_envelope(data)
            return APIResponse(success=True, result=data, statusCode=response.status_code)

        return APIResponse(
            success=True,
            result=_summarize_download(response),
            statusCode=response.status_code,
        )


def _summarize_download(response: httpx.Response) -> FileDownload:
    disposition = response.headers.get("content-disposition", "")
    match = _FILENAME_RE.search(disposition)
    return FileDownload(
        content_type=response.headers.get("content-type", "application/octet-stream"),
        size_bytes=len(response.content),
        filename=match.group(1) if match else None,
    )
