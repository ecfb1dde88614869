from zensho_mcp.types.models import (
    ArgumentCheck,
    TextContent,
    Tool,
    ToolInvocation,
    ToolParameter,
    ToolResult,
    UpstreamRequest,
)

__all__ = [
    "ArgumentCheck",
    "TextContent",
    "Tool",
    "ToolInvocation",
    "ToolParameter",
    "ToolResult",
    "UpstreamRequest",
]
