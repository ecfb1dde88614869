"""Call Dispatcher for the Zensho MCP bridge.

This module turns an MCP tool invocation into a single upstream POST and
maps the outcome to a result envelope.
"""

import logging
from typing import Any, Dict, Optional

from zensho_mcp.core.errors import ValidationError, ZenshoError
from zensho_mcp.core.registry import ToolRegistry
from zensho_mcp.core.results import error_result, success_result
from zensho_mcp.core.settings import DispatcherConfig
from zensho_mcp.core.upstream import UpstreamClient
from zensho_mcp.types import (
    Tool,
    ToolInvocation,
    ToolParameter,
    ToolResult,
    UpstreamRequest,
)

logger = logging.getLogger(__name__)

_TYPE_NAMES = {
    "string": "a string",
    "number": "a number",
    "boolean": "a boolean",
    "array": "an array",
}


def _matches_type(value: Any, param_type: str, items: Optional[str] = None) -> bool:
    if param_type == "string":
        return isinstance(value, str)
    if param_type == "number":
        # bool is a subclass of int
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if param_type == "boolean":
        return isinstance(value, bool)
    if param_type == "array":
        return isinstance(value, list) and all(_matches_type(v, items) for v in value)
    return False


class ToolDispatcher:
    """Dispatches tool invocations to the upstream API.

    The dispatcher is stateless per call: it reads the immutable registry and
    configuration, and every invocation results in at most one upstream POST.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        config: DispatcherConfig,
        client: Optional[UpstreamClient] = None
    ) -> None:
        """Initialize a dispatcher.

        Args:
            registry: The tool registry containing tool definitions
            config: Upstream and validation configuration
            client: Optional upstream client, built from ``config`` when omitted
        """
        self._registry = registry
        self._config = config
        self._client = client or UpstreamClient(config)

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Invoke a tool by name. Never raises.

        Args:
            name: The name of the tool
            arguments: Raw arguments from the MCP client

        Returns:
            The result envelope
        """
        return await self.dispatch(ToolInvocation(tool_name=name, arguments=arguments or {}))

    async def dispatch(self, invocation: ToolInvocation) -> ToolResult:
        """Validate, forward and wrap a single invocation."""
        name = invocation.tool_name
        try:
            tool = self._registry.get_tool(name)
            arguments = self.validate_arguments(tool, invocation.arguments)
            request = self.build_request(tool, arguments)
        except ZenshoError as e:
            logger.warning("Rejected call to '%s': %s", name, e.message)
            return error_result(e)

        logger.info("Calling %s for tool '%s'", request.endpoint, name)
        try:
            data = await self._client.post(request, tool_name=name)
        except ZenshoError as e:
            logger.warning("Tool '%s' failed: %s", name, e.message)
            return error_result(e, include_body=self._config.include_error_body)
        except Exception as e:
            logger.exception("Unexpected error while calling tool '%s'", name)
            return error_result(e)

        custom_message = None
        if tool.custom_message_param is not None:
            custom_message = arguments.get(tool.custom_message_param)
        return success_result(data, custom_message)

    def validate_arguments(self, tool: Tool, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and normalize arguments against a tool definition.

        Args:
            tool: The tool definition
            arguments: Raw arguments

        Returns:
            The declared arguments that were present, normalized

        Raises:
            ValidationError: If a required parameter is missing, a value has
                the wrong type or enum value, an undeclared argument is given
                in strict mode, or a cross-field check fails
        """
        if self._config.strict_arguments:
            unexpected = [key for key in arguments if key not in tool.parameters]
            if unexpected:
                names = ", ".join(f"'{key}'" for key in unexpected)
                raise ValidationError(
                    f"Unexpected parameter(s) {names} for tool '{tool.name}'",
                    tool_name=tool.name
                )

        validated: Dict[str, Any] = {}
        for name, param in tool.parameters.items():
            if name not in arguments:
                if param.required:
                    raise ValidationError(
                        f"Missing required parameter '{name}' for tool '{tool.name}'",
                        tool_name=tool.name
                    )
                continue
            validated[name] = self._validate_value(tool, name, param, arguments[name])

        for check in tool.checks:
            check(validated)

        return validated

    def _validate_value(self, tool: Tool, name: str, param: ToolParameter, value: Any) -> Any:
        # An explicit null for an optional parameter is forwarded as-is.
        if value is None and not param.required:
            return None

        if not _matches_type(value, param.type, param.items):
            expected = _TYPE_NAMES[param.type]
            if param.type == "array":
                expected = f"an array of {param.items} values"
            raise ValidationError(
                f"Parameter '{name}' of tool '{tool.name}' must be {expected}",
                tool_name=tool.name
            )

        if param.normalize == "uppercase":
            value = value.upper()

        if param.enum is not None and value not in param.enum:
            raise ValidationError(
                f"Invalid value '{value}' for parameter '{name}' of tool '{tool.name}'. "
                f"Allowed values: {', '.join(param.enum)}",
                tool_name=tool.name
            )
        return value

    def build_request(self, tool: Tool, arguments: Dict[str, Any]) -> UpstreamRequest:
        """Build the upstream request body from validated arguments.

        Required parameters are always present in ``arguments`` at this point;
        optional ones are forwarded only when they were supplied.
        """
        body: Dict[str, Any] = {}
        for name, param in tool.parameters.items():
            if not param.forward or name not in arguments:
                continue
            value = arguments[name]
            if param.omit_empty and value == []:
                continue
            body[param.forward_as or name] = value
        return UpstreamRequest(endpoint=tool.endpoint, body=body)

