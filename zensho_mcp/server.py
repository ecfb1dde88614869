"""MCP server exposing the Zensho tool catalog.

The server lists every tool of the catalog and forwards each call to the
dispatcher. Two transports are available:

    - stdio: for MCP clients that spawn the server as a subprocess
    - http: a Starlette app serving SSE at ``/sse`` (messages posted to
      ``/sse/message/``) and streamable HTTP at ``/mcp``

Run ``zensho-mcp --help`` for the command line options.
"""

import argparse
import asyncio
import contextlib
import logging
from typing import AsyncIterator, List, Optional, Sequence

import uvicorn
from mcp import types
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from zensho_mcp import __version__
from zensho_mcp.core import DispatcherConfig, ToolDispatcher, ToolRegistry, ZenshoSettings
from zensho_mcp.formats import to_call_tool_result, to_mcp_format
from zensho_mcp.logging_config import setup_logging
from zensho_mcp.tools import create_default_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "Zensho"


def create_server(dispatcher: ToolDispatcher, registry: ToolRegistry) -> Server:
    """Create the MCP server for a registry and its dispatcher.

    Args:
        dispatcher: Dispatcher handling tool calls
        registry: Registry whose tools are listed

    Returns:
        A low-level MCP server with tools/list and tools/call handlers
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [to_mcp_format(tool) for tool in registry.list_tools()]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.invoke(request.params.name, request.params.arguments or {})
        return types.ServerResult(to_call_tool_result(result))

    # Registered directly so the dispatcher's envelope, including isError,
    # reaches the client unchanged.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


def create_server_from_settings(settings: Optional[ZenshoSettings] = None) -> Server:
    """Build registry, dispatcher and server from settings."""
    config = DispatcherConfig.from_settings(settings)
    registry = create_default_registry()
    dispatcher = ToolDispatcher(registry, config)
    logger.info("Serving %d tools against %s", len(registry), config.base_url)
    return create_server(dispatcher, registry)


async def run_stdio(server: Server) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


class StreamableHTTPApp:
    """ASGI app forwarding requests to a streamable HTTP session manager.

    Routed as an ASGI app rather than mounted so that exactly ``/mcp`` is
    served without a redirect to ``/mcp/``.
    """

    def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
        self._session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._session_manager.handle_request(scope, receive, send)


def create_http_app(server: Server) -> Starlette:
    """Create the ASGI app serving both the SSE and streamable HTTP paths."""
    sse = SseServerTransport("/sse/message/")
    session_manager = StreamableHTTPSessionManager(
        app=server,
        json_response=False,
        stateless=True
    )

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        async with session_manager.run():
            yield

    return Starlette(
        routes=[
            Route("/sse", endpoint=handle_sse, methods=["GET"]),
            Mount("/sse/message/", app=sse.handle_post_message),
            Route("/mcp", endpoint=StreamableHTTPApp(session_manager)),
        ],
        lifespan=lifespan
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zensho MCP server")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio",
                        help="stdio for local MCP clients, http for SSE and streamable HTTP")
    parser.add_argument("--host", default=None, help="Bind address for the http transport")
    parser.add_argument("--port", type=int, default=None, help="Port for the http transport")
    parser.add_argument("--log-level", default=None, help="Log level (default: ZENSHO_LOG_LEVEL or INFO)")
    parser.add_argument("--log-dir", default=None, help="Directory for rotating log files")
    parser.add_argument("--env-file", default=".env", help="Environment file to read settings from")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Command line entry point."""
    args = build_parser().parse_args(argv)

    settings = ZenshoSettings(env_file=args.env_file)
    setup_logging(args.log_level or settings.zensho_log_level, args.log_dir or settings.zensho_log_dir)

    server = create_server_from_settings(settings)

    if args.transport == "http":
        host = args.host or settings.mcp_host
        port = args.port or settings.mcp_port
        logger.info("Starting HTTP transport on %s:%d", host, port)
        uvicorn.run(create_http_app(server), host=host, port=port, log_level="info")
    else:
        logger.info("Starting stdio transport")
        try:
            asyncio.run(run_stdio(server))
        except KeyboardInterrupt:
            logger.info("Server stopped by user")


if __name__ == "__main__":
    main()
