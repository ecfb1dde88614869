"""Core module for the Zensho MCP bridge."""

from .dispatcher import ToolDispatcher
from .errors import (
    TransportError,
    UnknownToolError,
    UpstreamHttpError,
    UpstreamParseError,
    ValidationError,
    ZenshoError,
)
from .registry import ToolRegistry
from .settings import DispatcherConfig, ZenshoSettings
from .upstream import UpstreamClient

__all__ = [
    "ToolDispatcher",
    "ToolRegistry",
    "UpstreamClient",
    "DispatcherConfig",
    "ZenshoSettings",
    "ZenshoError",
    "ValidationError",
    "UnknownToolError",
    "TransportError",
    "UpstreamHttpError",
    "UpstreamParseError",
]
