"""Tests for result envelope construction."""

from zensho_mcp.core import (
    TransportError,
    UnknownToolError,
    UpstreamHttpError,
    ValidationError,
)
from zensho_mcp.core.results import error_result, format_json, success_result


def test_success_result_dumps_json() -> None:
    result = success_result({"a": 1, "b": ["x"]})

    assert result.is_error is False
    assert result.text == '{\n  "a": 1,\n  "b": [\n    "x"\n  ]\n}'


def test_success_result_custom_message() -> None:
    assert success_result({"a": 1}, "Done").text == "Done"
    assert success_result({"a": 1}, "").text == format_json({"a": 1})


def test_error_result_uses_message_without_tool_prefix() -> None:
    result = error_result(ValidationError("Missing required parameter 'url'", tool_name="browse"))

    assert result.is_error is True
    assert result.text == "Error: Missing required parameter 'url'"


def test_error_result_for_each_error_kind() -> None:
    assert error_result(UnknownToolError("nope")).text == "Error: Unknown tool: nope"
    assert error_result(TransportError("Connection refused")).text == "Error: Connection refused"
    assert error_result(UpstreamHttpError(503, "Service Unavailable")).text == \
        "Error: HTTP 503 - Service Unavailable"
    assert error_result(KeyError()).text == "Error: KeyError"


def test_error_result_body_only_when_requested() -> None:
    error = UpstreamHttpError(400, "Bad Request", body={"error": "bad"})

    assert error_result(error).text == "Error: HTTP 400 - Bad Request"
    assert error_result(error, include_body=True).text == \
        'Error: HTTP 400 - Bad Request\n{\n  "error": "bad"\n}'


def test_envelope_serializes_with_is_error_alias() -> None:
    dumped = error_result(TransportError("down")).model_dump(by_alias=True)

    assert dumped == {"content": [{"type": "text", "text": "Error: down"}], "isError": True}
