"""Type definitions for the Zensho MCP bridge.

This module contains the core type definitions used throughout the bridge,
including Tool, ToolParameter, ToolResult and the per-call request types.
"""

from typing import (
    Any,
    Callable,
    Dict,
    List,
    Literal,
    Optional,
    Tuple,
)

from pydantic import BaseModel, ConfigDict, Field, model_validator


ParameterType = Literal["string", "number", "boolean", "array"]

# Cross-field validators receive the validated arguments and raise
# ValidationError when the combination is not acceptable.
ArgumentCheck = Callable[[Dict[str, Any]], None]


class ToolParameter(BaseModel):
    """Definition of a tool parameter.

    Attributes:
        type: The data type of the parameter (string, number, boolean, array)
        description: A human-readable description of the parameter
        required: Whether the parameter is required (default: False)
        items: Element type for array parameters
        enum: Optional list of allowed values, checked after normalization
        normalize: Normalization applied before the value is forwarded
        forward_as: Upstream field name when it differs from the parameter name
        forward: Whether the value is sent upstream at all
        omit_empty: Treat an empty list as absent
    """

    model_config = ConfigDict(frozen=True)

    type: ParameterType
    description: str
    required: bool = False
    items: Optional[ParameterType] = None
    enum: Optional[List[str]] = None
    normalize: Literal["none", "uppercase"] = "none"
    forward_as: Optional[str] = None
    forward: bool = True
    omit_empty: bool = False

    @model_validator(mode="after")
    def _check_array_items(self) -> "ToolParameter":
        if self.type == "array" and self.items is None:
            raise ValueError("Array parameters must declare their item type")
        if self.normalize == "uppercase" and self.type != "string":
            raise ValueError("Only string parameters can be uppercased")
        return self


class Tool(BaseModel):
    """Definition of a tool backed by one upstream endpoint.

    Attributes:
        name: The name of the tool
        description: A human-readable description, including the upstream
            response format
        endpoint: Upstream path the tool posts to
        parameters: Ordered mapping of parameter names to ToolParameter objects
        checks: Cross-field validators run after per-parameter validation
        custom_message_param: Parameter whose value replaces the success text
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    endpoint: str
    parameters: Dict[str, ToolParameter] = Field(default_factory=dict)
    checks: Tuple[ArgumentCheck, ...] = ()
    custom_message_param: Optional[str] = None

    @model_validator(mode="after")
    def _check_definition(self) -> "Tool":
        if not self.endpoint.startswith("/"):
            raise ValueError(f"Endpoint for tool '{self.name}' must start with '/'")
        if self.custom_message_param is not None:
            param = self.parameters.get(self.custom_message_param)
            if param is None or param.forward:
                raise ValueError(
                    f"Custom message parameter '{self.custom_message_param}' of tool "
                    f"'{self.name}' must be declared and not forwarded"
                )
        return self


class ToolInvocation(BaseModel):
    """A single incoming tool call."""

    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class UpstreamRequest(BaseModel):
    """The request body sent to the upstream API for one invocation.

    Only required parameters and optional parameters that were present in the
    invocation appear in ``body``.
    """

    endpoint: str
    body: Dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """A text content item of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform result envelope returned for every tool invocation."""

    model_config = ConfigDict(populate_by_name=True)

    content: List[TextContent]
    is_error: bool = Field(False, alias="isError")

    @property
    def text(self) -> str:
        """The text of the single content item."""
        return self.content[0].text
