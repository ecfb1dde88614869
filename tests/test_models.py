"""Tests for the type definitions."""

import pydantic
import pytest

from zensho_mcp.types import Tool, ToolParameter, ToolResult, UpstreamRequest


def test_tool_parameter_defaults() -> None:
    param = ToolParameter(type="string", description="A parameter")

    assert param.required is False
    assert param.normalize == "none"
    assert param.forward is True
    assert param.forward_as is None
    assert param.omit_empty is False


def test_array_parameter_requires_items() -> None:
    with pytest.raises(pydantic.ValidationError):
        ToolParameter(type="array", description="No item type")


def test_uppercase_only_for_strings() -> None:
    with pytest.raises(pydantic.ValidationError):
        ToolParameter(type="number", description="Not a string", normalize="uppercase")


def test_unknown_parameter_type_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        ToolParameter(type="object", description="Unsupported")


def test_tool_is_immutable() -> None:
    tool = Tool(name="t", description="d", endpoint="/api/t")

    with pytest.raises(pydantic.ValidationError):
        tool.endpoint = "/api/other"


def test_endpoint_must_be_a_path() -> None:
    with pytest.raises(pydantic.ValidationError):
        Tool(name="t", description="d", endpoint="api/t")


def test_custom_message_param_must_be_local() -> None:
    with pytest.raises(pydantic.ValidationError):
        Tool(
            name="t",
            description="d",
            endpoint="/api/t",
            parameters={"msg": ToolParameter(type="string", description="Forwarded")},
            custom_message_param="msg"
        )
    with pytest.raises(pydantic.ValidationError):
        Tool(name="t", description="d", endpoint="/api/t", custom_message_param="missing")


def test_tool_result_alias() -> None:
    result = ToolResult.model_validate({"content": [{"type": "text", "text": "hi"}], "isError": True})

    assert result.is_error is True
    assert result.text == "hi"


def test_upstream_request_body_defaults_empty() -> None:
    assert UpstreamRequest(endpoint="/manage/getScreenShot").body == {}
