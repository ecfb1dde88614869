"""Construction of tool result envelopes.

Every result returned to an MCP client goes through :func:`success_result`
or :func:`error_result`.
"""

import json
from typing import Any, Optional

from zensho_mcp.core.errors import UpstreamHttpError, ZenshoError
from zensho_mcp.types import TextContent, ToolResult


def format_json(data: Any) -> str:
    """Pretty-print a JSON value with a two-space indent."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def success_result(data: Any, custom_message: Optional[str] = None) -> ToolResult:
    """Wrap upstream data in a successful envelope.

    Args:
        data: Parsed JSON returned by the upstream API
        custom_message: Text used instead of the JSON dump when non-empty

    Returns:
        ToolResult with a single text item
    """
    text = custom_message or format_json(data)
    return ToolResult(content=[TextContent(text=text)], is_error=False)


def error_result(error: BaseException, *, include_body: bool = False) -> ToolResult:
    """Convert an exception into an error envelope.

    The text always starts with ``"Error: "``. For HTTP errors the upstream
    body is appended only when ``include_body`` is set.

    Args:
        error: The exception raised while handling the invocation
        include_body: Whether to append the upstream error body

    Returns:
        ToolResult flagged as an error
    """
    if isinstance(error, ZenshoError):
        message = error.message
    else:
        message = str(error) or type(error).__name__

    text = f"Error: {message}"
    if include_body and isinstance(error, UpstreamHttpError) and error.body not in (None, ""):
        body = error.body if isinstance(error.body, str) else format_json(error.body)
        text = f"{text}\n{body}"

    return ToolResult(content=[TextContent(text=text)], is_error=True)
