"""Tool Registry for the Zensho MCP bridge.

This module provides a registry for managing tool definitions.
"""

from typing import Any, Dict, Iterable, List, Union

from zensho_mcp.core.errors import UnknownToolError
from zensho_mcp.types import Tool


class ToolRegistry:
    """Registry for managing tool definitions.

    The registry maintains the collection of tools exposed over MCP. It
    ensures that tool names are unique and keeps registration order, which is
    the order tools are listed to clients.
    """

    def __init__(self) -> None:
        """Initialize an empty tool registry."""
        self._tools: Dict[str, Tool] = {}

    @classmethod
    def from_tools(cls, tools: Iterable[Union[Tool, Dict[str, Any]]]) -> "ToolRegistry":
        """Build a registry from a sequence of tool definitions."""
        registry = cls()
        for tool in tools:
            registry.register_tool(tool)
        return registry

    def register_tool(self, tool: Union[Tool, Dict[str, Any]]) -> None:
        """Register a new tool in the registry.

        Args:
            tool: The tool definition to register (either a Tool object or dict)

        Raises:
            ValueError: If a tool with the same name already exists
        """
        if isinstance(tool, dict):
            tool = Tool(**tool)

        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> Tool:
        """Get a tool definition by name.

        Args:
            name: The name of the tool to retrieve

        Returns:
            The tool definition

        Raises:
            UnknownToolError: If no tool with the given name exists
        """
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def list_tools(self) -> List[Tool]:
        """Get a list of all registered tools in registration order."""
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
