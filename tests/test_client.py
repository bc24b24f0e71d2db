"""Tests for the AIR HTTP client and envelope parsing."""

from __future__ import annotations

import httpx
import pytest
from conftest import TEST_TOKEN, envelope, page

from air_mcp.api import AIRAPIError, AIRClient
from air_mcp.api.base import org_ids_param, parse_envelope
from air_mcp.api.models import Asset, Page
from air_mcp.config import AIRConfig


class TestOrgIdsParam:
    """Tests for the filter[organizationIds] value."""

    def test_none_becomes_zero(self):
        assert org_ids_param(None) == "0"

    def test_empty_string_becomes_zero(self):
        assert org_ids_param("") == "0"

    def test_empty_list_becomes_zero(self):
        assert org_ids_param([]) == "0"

    def test_list_joined_with_commas(self):
        assert org_ids_param(["123", "456"]) == "123,456"

    def test_string_passed_through(self):
        assert org_ids_param("7") == "7"


class TestParseEnvelope:
    def test_paged_result_is_typed(self):
        response = parse_envelope(
            envelope(page([{"_id": "a1", "name": "host-1", "platform": "linux"}])),
            Page[Asset],
        )
        assert response.success
        assert response.result.entities[0].id == "a1"
        assert response.result.entities[0].name == "host-1"

    def test_null_fields_fall_back_to_defaults(self):
        response = parse_envelope(envelope(page([{"_id": "a1", "name": None, "issues": None}])),
                                  Page[Asset])
        asset = response.result.entities[0]
        assert asset.name == ""
        assert asset.issues == []

    def test_unknown_fields_are_kept(self):
        response = parse_envelope(envelope({"_id": "x", "extraField": 1}))
        assert response.result == {"_id": "x", "extraField": 1}

    def test_error_text_joins_errors(self):
        response = parse_envelope(envelope(success=False, errors=["first", "second"]))
        assert response.error_text == "first, second"

    def test_non_object_rejected(self):
        with pytest.raises(AIRAPIError, match="expected an object"):
            parse_envelope(["not", "an", "envelope"])


class TestAIRClientRequest:
    """Tests for AIRClient.request and request_json."""

    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_base_url(self, air, client):
        air.add("GET", "/api/public/ping", envelope("pong"))

        data = await client.request_json("GET", "/api/public/ping", params={"a": "1"})

        assert data["result"] == "pong"
        assert air.last.headers["authorization"] == f"Bearer {TEST_TOKEN}"
        assert air.last.headers["content-type"] == "application/json"
        assert air.last.params == {"a": "1"}

    @pytest.mark.asyncio
    async def test_auth_false_omits_authorization(self, air, client):
        air.add("GET", "/api/webhook/hook/x", {"taskId": "t"})

        await client.request("GET", "/api/webhook/hook/x", auth=False)

        assert "authorization" not in air.last.headers

    @pytest.mark.asyncio
    async def test_http_error_message_has_status_code(self, air, client):
        air.add("GET", "/api/public/assets", {"success": False, "errors": ["denied"]}, status=403)

        with pytest.raises(AIRAPIError) as exc_info:
            await client.request("GET", "/api/public/assets")

        error = exc_info.value
        assert error.message == "Request failed with status code 403"
        assert error.status_code == 403
        assert error.envelope is not None
        assert error.envelope.errors == ["denied"]

    @pytest.mark.asyncio
    async def test_non_envelope_error_body(self, air, client):
        air.add("GET", "/api/public/x", content=b"gateway down", status=502)

        with pytest.raises(AIRAPIError) as exc_info:
            await client.request("GET", "/api/public/x")

        assert exc_info.value.body == "gateway down"
        assert exc_info.value.envelope is None

    @pytest.mark.asyncio
    async def test_invalid_json(self, air, client):
        air.add("GET", "/api/public/x", content=b"<html>", headers={"content-type": "text/html"})

        with pytest.raises(AIRAPIError, match="Invalid JSON in response from /api/public/x"):
            await client.request_json("GET", "/api/public/x")

    @pytest.mark.asyncio
    async def test_transport_error_is_scrubbed(self):
        """Test tokens never leak through transport error messages."""

        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(f"cannot reach {request.url}")

        config = AIRConfig(host="air.example.com", api_token="s3cret")
        async with AIRClient(config, transport=httpx.MockTransport(fail)) as client:
            with pytest.raises(AIRAPIError) as exc_info:
                await client.request("GET", "/api/webhook/hook", params={"token": "hooktoken"})

        assert "hooktoken" not in exc_info.value.message
        assert "token=***" in exc_info.value.message
        assert exc_info.value.status_code is None


class TestScrub:
    def test_removes_api_token(self):
        client = AIRClient(AIRConfig(api_token="abc123"))
        assert client.scrub("Bearer abc123 failed") == "Bearer *** failed"

    def test_removes_query_tokens(self):
        client = AIRClient(AIRConfig())
        assert client.scrub("GET /hook?token=xyz&taskId=1") == "GET /hook?token=***&taskId=1"
