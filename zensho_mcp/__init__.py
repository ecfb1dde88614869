"""Zensho MCP Bridge: MCP tools backed by the Zensho automation API.

This package exposes a fixed catalog of tools (browse tickets, create and
reply to Backlog/Jira issues, read Teams mentions and threads, take
screenshots, ...) over the Model Context Protocol. Every tool call is
validated against the tool definition and forwarded as a single JSON POST
to the upstream API; the response is wrapped in a uniform result envelope.

Key Components:
    - Core Types: Tool, ToolParameter, ToolResult for defining tools
    - ToolRegistry: Central registry of the tool catalog
    - ToolDispatcher: Validates, forwards and wraps tool calls

Example:
    ```python
    from zensho_mcp import DispatcherConfig, ToolDispatcher
    from zensho_mcp.tools import create_default_registry

    dispatcher = ToolDispatcher(create_default_registry(), DispatcherConfig())
    result = await dispatcher.invoke("search", {"query": "1.1.1", "appNo": "zet"})
    print(result.text)
    ```
"""

__version__ = "0.1.0"

from zensho_mcp.types import (
    Tool,
    ToolParameter,
    ToolResult,
    ToolInvocation,
    UpstreamRequest,
)
from zensho_mcp.core import DispatcherConfig, ToolDispatcher, ToolRegistry, ZenshoSettings

__all__ = [
    "Tool",
    "ToolParameter",
    "ToolResult",
    "ToolInvocation",
    "UpstreamRequest",
    "ToolRegistry",
    "ToolDispatcher",
    "DispatcherConfig",
    "ZenshoSettings",
]
