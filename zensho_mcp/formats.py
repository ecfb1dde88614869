"""Conversion of tool definitions to MCP wire types."""

from typing import Any, Dict

from mcp import types

from zensho_mcp.types import Tool, ToolParameter, ToolResult


def _property_schema(param: ToolParameter) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": param.type,
        "description": param.description
    }
    if param.type == "array":
        schema["items"] = {"type": param.items}
    # Normalized codes accept any casing, so their allowed values stay in the
    # description instead of a JSON-schema enum.
    if param.enum and param.normalize == "none":
        schema["enum"] = param.enum
    return schema


def to_input_schema(tool: Tool) -> Dict[str, Any]:
    """Build the JSON schema advertised for a tool's arguments.

    Args:
        tool: The tool definition to convert

    Returns:
        JSON object schema with one property per parameter
    """
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": {},
        "required": []
    }

    for name, param in tool.parameters.items():
        schema["properties"][name] = _property_schema(param)
        if param.required:
            schema["required"].append(name)

    return schema


def to_mcp_format(tool: Tool) -> types.Tool:
    """Convert a tool definition to the MCP ``Tool`` listing type."""
    return types.Tool(
        name=tool.name,
        description=tool.description,
        inputSchema=to_input_schema(tool)
    )


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a result envelope to the MCP ``CallToolResult`` type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in result.content],
        isError=result.is_error
    )
