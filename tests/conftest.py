"""Pytest configuration for air_mcp tests.

HTTP is served by ``httpx.MockTransport`` backed by ``FakeAIR``, which records
every request and answers from canned routes.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
import pytest_asyncio

from air_mcp.api.client import AIRClient
from air_mcp.config import AIRConfig
from air_mcp.tools import ToolRegistry, create_air_tools

TEST_TOKEN = "test-api-token"


def pytest_configure(config):
    """Configure custom markers for pytest."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (deselect with '-m \"not integration\"')",
    )


def envelope(result: Any = None, success: bool = True, errors: list[str] | None = None,
             status_code: int = 200) -> dict[str, Any]:
    """Build an AIR response envelope."""
    return {
        "success": success,
        "result": result,
        "statusCode": status_code,
        "errors": errors or [],
    }


def page(entities: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    """Build a paginated AIR result."""
    result = {
        "entities": entities,
        "filters": [],
        "sortables": [],
        "totalEntityCount": len(entities),
        "currentPage": 1,
        "pageSize": 10,
        "previousPage": 0,
        "totalPageCount": 1,
        "nextPage": 2,
    }
    result.update(extra)
    return result


@dataclass
class RecordedRequest:
    method: str
    path: str
    params: dict[str, str]
    headers: httpx.Headers
    body: Any


@dataclass
class FakeAIR:
    """Canned AIR console for MockTransport."""

    routes: dict[tuple[str, str], httpx.Response] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def add(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status: int = 200,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if content is not None:
            response = httpx.Response(status, content=content, headers=headers)
        else:
            response = httpx.Response(status, json=json_body, headers=headers)
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                params=dict(request.url.params),
                headers=request.headers,
                body=body,
            )
        )
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"success": False, "errors": ["Not found"]})
        return response

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def air() -> FakeAIR:
    return FakeAIR()


@pytest.fixture
def config() -> AIRConfig:
    return AIRConfig(host="air.example.com", api_token=TEST_TOKEN)


@pytest_asyncio.fixture
async def client(air: FakeAIR, config: AIRConfig):
    air_client = AIRClient(config, transport=httpx.MockTransport(air.handler))
    yield air_client
    await air_client.aclose()


@pytest.fixture
def registry(client: AIRClient) -> ToolRegistry:
    return create_air_tools(client)
