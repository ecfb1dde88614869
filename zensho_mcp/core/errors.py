"""Error classes for the Zensho MCP bridge."""

from typing import Any, Optional


class ZenshoError(Exception):
    """Base exception for all bridge errors."""

    def __init__(self, message: str, *, tool_name: Optional[str] = None):
        self.message = message
        self.tool_name = tool_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.tool_name:
            return f"[{self.tool_name}] {self.message}"
        return self.message


class ValidationError(ZenshoError):
    """Raised when invocation arguments do not match the tool definition."""
    pass


class UnknownToolError(ZenshoError):
    """Raised when no tool with the requested name is registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", tool_name=name)


class TransportError(ZenshoError):
    """Raised when the upstream request could not be completed."""
    pass


class UpstreamHttpError(ZenshoError):
    """Raised when the upstream API answers with a non-2xx status."""

    def __init__(
        self,
        status: int,
        reason: str,
        *,
        body: Any = None,
        tool_name: Optional[str] = None
    ):
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"HTTP {status} - {reason}", tool_name=tool_name)


class UpstreamParseError(ZenshoError):
    """Raised when a 2xx upstream response is not valid JSON."""
    pass
