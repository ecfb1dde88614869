"""Tests for the MCP server wiring."""

import json

import pytest
from mcp import types
from starlette.applications import Starlette
from starlette.testclient import TestClient

from zensho_mcp.server import (
    SERVER_NAME,
    build_parser,
    create_http_app,
    create_server,
    create_server_from_settings,
)
from zensho_mcp.core import ZenshoSettings
from zensho_mcp.tools import create_default_registry


@pytest.fixture
def server(make_dispatcher):
    registry = create_default_registry()
    return create_server(make_dispatcher(registry), registry)


async def call(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments)
    )
    response = await handler(request)
    return response.root


@pytest.mark.asyncio
async def test_list_tools(server) -> None:
    handler = server.request_handlers[types.ListToolsRequest]

    response = await handler(types.ListToolsRequest(method="tools/list"))

    names = [tool.name for tool in response.root.tools]
    assert len(names) == 19
    assert names[0] == "browse"
    assert "registerLessonLearned" in names


@pytest.mark.asyncio
async def test_call_tool_success(server, mock_upstream) -> None:
    result = await call(server, "search", {"query": "1.1.1", "appNo": "zet"})

    assert isinstance(result, types.CallToolResult)
    assert result.isError is False
    assert json.loads(result.content[0].text) == {"text": "1.1.1", "appNo": "ZET"}


@pytest.mark.asyncio
async def test_call_tool_validation_error(server, mock_upstream) -> None:
    result = await call(server, "replyInTeams", {"text": "Hi"})

    assert result.isError is True
    assert result.content[0].text.startswith("Error: ")
    assert mock_upstream.calls == []


@pytest.mark.asyncio
async def test_call_unknown_tool(server, mock_upstream) -> None:
    result = await call(server, "nope", None)

    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool: nope"


def test_server_name(server) -> None:
    assert server.name == SERVER_NAME


def test_create_server_from_settings() -> None:
    server = create_server_from_settings(ZenshoSettings(env_file=None))

    assert types.CallToolRequest in server.request_handlers


def test_http_app_routes(server) -> None:
    app = create_http_app(server)

    assert isinstance(app, Starlette)
    paths = {route.path for route in app.routes}
    assert {"/sse", "/sse/message", "/mcp"} <= paths


def test_streamable_http_served_at_exact_path(server) -> None:
    """Test that an initialize request to /mcp is answered without a redirect."""
    initialize = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "initialize",
        "params": {
            "protocolVersion": types.LATEST_PROTOCOL_VERSION,
            "capabilities": {},
            "clientInfo": {"name": "test-client", "version": "1.0"}
        }
    }

    with TestClient(create_http_app(server)) as client:
        response = client.post(
            "/mcp",
            json=initialize,
            headers={"Accept": "application/json, text/event-stream"},
            follow_redirects=False
        )

    assert response.status_code == 200
    assert SERVER_NAME in response.text


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])

    assert args.transport == "stdio"
    assert args.host is None
    assert args.port is None
    assert args.env_file == ".env"


def test_parser_http_options() -> None:
    args = build_parser().parse_args(["--transport", "http", "--port", "9000", "--log-level", "debug"])

    assert args.transport == "http"
    assert args.port == 9000
    assert args.log_level == "debug"
