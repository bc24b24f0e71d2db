"""Tests for the MCP server wiring."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import mcp.types as types
import pytest
from conftest import envelope, page

from air_mcp.config import MISSING_TOKEN_MESSAGE, AIRConfig, MissingAPITokenError
from air_mcp.server import create_server, dispatch, format_validation_errors, main
from air_mcp.tools import ToolArgumentValidationError
from air_mcp.tools.schemas import TOOL_ARGUMENT_SCHEMAS


class TestRegistryContents:
    def test_every_schema_has_a_tool(self, registry):
        assert sorted(registry.list_tools()) == sorted(TOOL_ARGUMENT_SCHEMAS)

    def test_definitions_use_camel_case_arguments(self, registry):
        definitions = {d.name: d for d in registry.get_tool_definitions()}

        schema = definitions["get_task_assignments_by_id"].inputSchema
        assert "taskId" in schema["properties"]
        assert schema["required"] == ["taskId"]

    def test_descriptions_present(self, registry):
        for definition in registry.get_tool_definitions():
            assert definition.description, definition.name


class TestFormatValidationErrors:
    def test_joins_locations_and_messages(self):
        error = ToolArgumentValidationError(
            "Invalid arguments for tool 'x'",
            errors=[
                {"loc": ("caseId",), "msg": "Field required"},
                {"loc": ("filter", "organizationIds", 0), "msg": "bad id"},
            ],
        )

        assert format_validation_errors(error) == (
            "Invalid arguments: caseId: Field required, filter.organizationIds.0: bad id"
        )

    def test_falls_back_to_message(self):
        error = ToolArgumentValidationError("Arguments must be an object")

        assert format_validation_errors(error) == "Invalid arguments: Arguments must be an object"


class TestDispatch:
    @pytest.mark.asyncio
    async def test_success_returns_text_content(self, air, config, registry):
        air.add("GET", "/api/public/tasks", envelope(page([])))

        content = await dispatch(registry, config, "list_tasks", None)

        assert content == [
            types.TextContent(type="text", text="No tasks found for the specified criteria.")
        ]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, config, registry):
        with pytest.raises(ValueError, match="Unknown tool: nope"):
            await dispatch(registry, config, "nope", {})

    @pytest.mark.asyncio
    async def test_missing_token_blocks_every_tool(self, air, registry):
        config = AIRConfig(host="air.example.com", api_token="")

        with pytest.raises(MissingAPITokenError) as exc_info:
            await dispatch(registry, config, "call_webhook",
                           {"slug": "s", "data": "d", "token": "hook"})

        assert str(exc_info.value) == MISSING_TOKEN_MESSAGE
        assert air.requests == []

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, config, registry):
        with pytest.raises(ValueError, match="^Invalid arguments: taskId"):
            await dispatch(registry, config, "get_task_assignments_by_id", {})

    @pytest.mark.asyncio
    async def test_failure_result_is_returned_as_text(self, air, config, registry):
        air.add("GET", "/api/public/tasks", envelope(success=False, errors=["denied"]))

        content = await dispatch(registry, config, "list_tasks", {})

        assert content[0].text == "Error fetching tasks: denied"


class TestCreateServer:
    @pytest.mark.asyncio
    async def test_lists_all_tools(self, config, client):
        server = create_server(config, client)

        handler = server.request_handlers[types.ListToolsRequest]
        response = await handler(types.ListToolsRequest(method="tools/list"))

        names = {tool.name for tool in response.root.tools}
        assert names == set(TOOL_ARGUMENT_SCHEMAS)

    @pytest.mark.asyncio
    async def test_call_tool_round_trip(self, air, config, client):
        air.add("GET", "/api/public/tasks", envelope(page([])))
        server = create_server(config, client)

        handler = server.request_handlers[types.CallToolRequest]
        response = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(name="list_tasks", arguments={}),
            )
        )

        assert not response.root.isError
        assert response.root.content[0].text == "No tasks found for the specified criteria."

    @pytest.mark.asyncio
    async def test_call_tool_error_is_reported(self, config, client):
        server = create_server(config, client)

        handler = server.request_handlers[types.CallToolRequest]
        response = await handler(
            types.CallToolRequest(
                method="tools/call",
                params=types.CallToolRequestParams(name="missing_tool", arguments={}),
            )
        )

        assert response.root.isError
        assert "Unknown tool: missing_tool" in response.root.content[0].text


class TestMain:
    def test_main_configures_logging_and_runs(self, monkeypatch):
        monkeypatch.setenv("AIR_HOST", "air.example.com")
        monkeypatch.setenv("AIR_API_TOKEN", "tok")
        monkeypatch.setenv("AIR_LOG_FORMAT", "json")
        monkeypatch.setenv("AIR_LOG_LEVEL", "debug")
        run = MagicMock(name="run")

        with (
            patch("air_mcp.server.configure_logging") as configure_logging,
            patch("air_mcp.server.run", run),
            patch("air_mcp.server.asyncio.run") as asyncio_run,
        ):
            main()

        configure_logging.assert_called_once_with("DEBUG", "json")
        config = run.call_args.args[0]
        assert config.base_url == "https://air.example.com"
        asyncio_run.assert_called_once_with(run.return_value)
