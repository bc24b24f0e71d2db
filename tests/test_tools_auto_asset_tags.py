"""Tests for the auto asset tag tools."""

from __future__ import annotations

import pytest
from conftest import envelope, page

from air_mcp.tools import ToolArgumentValidationError

LINUX = {
    "operator": "and",
    "conditions": [{"field": "process", "operator": "running", "value": "nginx"}],
}
WINDOWS = {
    "operator": "or",
    "conditions": [
        {"field": "registryKey", "operator": "exists", "value": "HKLM\\Software\\X"},
        {
            "operator": "and",
            "conditions": [{"field": "file", "operator": "exists", "value": "C:\\x.exe"}],
        },
    ],
}
MACOS = {
    "operator": "and",
    "conditions": [{"field": "file", "operator": "exists", "value": "/Applications/X.app"}],
}

TAG = {
    "_id": "tag-1",
    "tag": "web-server",
    "createdAt": "2024-02-03T04:05:06Z",
    "updatedAt": "2024-02-04T04:05:06Z",
    "conditionIdCounter": 4,
    "linuxConditions": LINUX,
    "windowsConditions": {},
    "macosConditions": MACOS,
}


class TestCreateAutoAssetTag:
    @pytest.mark.asyncio
    async def test_create(self, air, registry):
        air.add("POST", "/api/public/auto-asset-tag", envelope(TAG))

        result = await registry.execute(
            "create_auto_asset_tag",
            {
                "tag": "web-server",
                "linuxConditions": LINUX,
                "windowsConditions": WINDOWS,
                "macosConditions": MACOS,
            },
        )

        assert result.text == (
            "Successfully created auto asset tag:\n"
            "Tag: web-server\n"
            "ID: tag-1\n"
            "Created At: 2024-02-03 04:05:06\n"
            "Updated At: 2024-02-04 04:05:06\n"
            "Condition ID Counter: 4"
        )
        assert air.last.body == {
            "tag": "web-server",
            "linuxConditions": LINUX,
            "windowsConditions": WINDOWS,
            "macosConditions": MACOS,
        }

    @pytest.mark.asyncio
    async def test_validation_error_envelope_from_http_error(self, air, registry):
        """Test a 400 carrying an AIR envelope is reported with its errors."""
        air.add(
            "POST",
            "/api/public/auto-asset-tag",
            {"success": False, "result": None, "statusCode": 400, "errors": ["tag exists"]},
            status=400,
        )

        result = await registry.execute(
            "create_auto_asset_tag",
            {
                "tag": "web-server",
                "linuxConditions": LINUX,
                "windowsConditions": WINDOWS,
                "macosConditions": MACOS,
            },
        )

        assert result.message == "Error creating auto asset tag: tag exists (Status Code: 400)"

    @pytest.mark.asyncio
    async def test_http_error_without_envelope(self, air, registry):
        air.add("POST", "/api/public/auto-asset-tag", content=b"oops", status=502)

        result = await registry.execute(
            "create_auto_asset_tag",
            {
                "tag": "web-server",
                "linuxConditions": LINUX,
                "windowsConditions": WINDOWS,
                "macosConditions": MACOS,
            },
        )

        assert result.message == (
            "Failed to create auto asset tag: Request failed with status code 502"
        )


class TestUpdateAutoAssetTag:
    @pytest.mark.asyncio
    async def test_omitted_groups_not_sent(self, air, registry):
        air.add("PUT", "/api/public/auto-asset-tag/tag-1", envelope(TAG))

        result = await registry.execute(
            "update_auto_asset_tag",
            {"id": "tag-1", "tag": "web-server", "linuxConditions": LINUX},
        )

        assert result.text.startswith("Successfully updated auto asset tag:")
        assert air.last.body == {"tag": "web-server", "linuxConditions": LINUX}

    @pytest.mark.asyncio
    async def test_update_rejected(self, air, registry):
        air.add(
            "PUT",
            "/api/public/auto-asset-tag/missing",
            {"success": False, "statusCode": 404, "errors": ["not found"]},
            status=404,
        )

        result = await registry.execute("update_auto_asset_tag", {"id": "missing", "tag": "x"})

        assert result.message == "Error updating auto asset tag: not found (Status Code: 404)"


class TestReadAutoAssetTags:
    @pytest.mark.asyncio
    async def test_get_by_id(self, air, registry):
        air.add("GET", "/api/public/auto-asset-tag/tag-1", envelope(TAG))

        result = await registry.execute("get_auto_asset_tag_by_id", {"id": "tag-1"})

        assert result.text.startswith("Auto asset tag details:\nTag: web-server\nID: tag-1\n")
        assert "Windows Conditions:\n  No conditions defined" in result.text
        assert "      Value: nginx" in result.text

    @pytest.mark.asyncio
    async def test_list(self, air, registry):
        air.add(
            "GET",
            "/api/public/auto-asset-tag",
            envelope(page([TAG], currentPage=1, totalPageCount=3, totalEntityCount=21)),
        )

        result = await registry.execute("list_auto_asset_tags", {})

        assert result.text.startswith("Found 21 auto asset tag(s) (Page 1/3):\n\n" + "-" * 40)
        assert "Linux Conditions:\n  Operator: and\n" in result.text
        assert "macOS Conditions:\n  Operator: and\n" in result.text
        assert result.text.endswith("-" * 40)

    @pytest.mark.asyncio
    async def test_list_empty(self, air, registry):
        air.add("GET", "/api/public/auto-asset-tag", envelope(page([])))

        result = await registry.execute("list_auto_asset_tags", {})

        assert result.text == "No auto asset tags found."

    @pytest.mark.asyncio
    async def test_list_takes_no_arguments(self, registry):
        with pytest.raises(ToolArgumentValidationError):
            await registry.execute("list_auto_asset_tags", {"page": 2})
