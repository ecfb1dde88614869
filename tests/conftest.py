"""Common test fixtures for the entire test suite."""

import json
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import patch

import pytest

from zensho_mcp.core import DispatcherConfig, ToolDispatcher, ToolRegistry
from zensho_mcp.tools import create_default_registry
from zensho_mcp.types import Tool, ToolParameter

BASE_URL = "https://upstream.test"


class FakeResponse:
    """Stand-in for ``aiohttp.ClientResponse`` used as an async context manager."""

    def __init__(
        self,
        status: int = 200,
        data: Any = None,
        reason: str = "OK",
        text: Optional[str] = None
    ) -> None:
        self.status = status
        self.reason = reason
        self._data = data
        self._text = text

    async def text(self) -> str:
        if self._text is not None:
            return self._text
        return json.dumps(self._data)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None


class FakeUpstream:
    """Records every POST and answers with a configurable response.

    By default the upstream echoes the received body back as a 200 JSON
    response.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.session_kwargs: List[Dict[str, Any]] = []
        self._responder: Callable[[str, Any], FakeResponse] = lambda url, body: FakeResponse(data=body)
        self._error: Optional[BaseException] = None

    def respond_with(self, **kwargs: Any) -> None:
        self._responder = lambda url, body: FakeResponse(**kwargs)

    def fail_with(self, error: BaseException) -> None:
        self._error = error

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]

    def post(self, url: str, json: Any = None, headers: Optional[Dict[str, str]] = None) -> FakeResponse:
        self.calls.append({"url": url, "json": json, "headers": headers})
        if self._error is not None:
            raise self._error
        return self._responder(url, json)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Fixture to ensure no environment variables affect tests."""
    env_vars = [
        "ZENSHO_API_BASE_URL", "ZENSHO_REQUEST_TIMEOUT", "ZENSHO_EXTRA_HEADERS",
        "ZENSHO_STRICT_ARGUMENTS", "ZENSHO_INCLUDE_ERROR_BODY",
        "ZENSHO_LOG_LEVEL", "ZENSHO_LOG_DIR", "MCP_HOST", "MCP_PORT"
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_upstream():
    """Patch ``aiohttp.ClientSession`` with a session backed by FakeUpstream."""
    upstream = FakeUpstream()

    class MockClientSession:
        def __init__(self, *args, **kwargs):
            upstream.session_kwargs.append(kwargs)

        async def __aenter__(self):
            return upstream

        async def __aexit__(self, exc_type, exc_val, exc_tb):
            return None

    with patch("aiohttp.ClientSession", MockClientSession):
        yield upstream


@pytest.fixture
def base_config():
    """Factory for dispatcher configurations pointing at the fake upstream.

    Example:
        def test_something(base_config):
            config = base_config(strict_arguments=True)
    """
    def _make_config(**overrides: Any) -> DispatcherConfig:
        values: Dict[str, Any] = {"base_url": BASE_URL}
        values.update(overrides)
        return DispatcherConfig(**values)
    return _make_config


@pytest.fixture
def make_dispatcher(base_config):
    """Factory for dispatchers over the default catalog or a custom registry."""
    def _make_dispatcher(registry: Optional[ToolRegistry] = None, **config: Any) -> ToolDispatcher:
        if registry is None:
            registry = create_default_registry()
        return ToolDispatcher(registry, base_config(**config))
    return _make_dispatcher


@pytest.fixture
def dispatcher(make_dispatcher) -> ToolDispatcher:
    """Dispatcher over the full catalog with default configuration."""
    return make_dispatcher()


@pytest.fixture
def sample_tool() -> Tool:
    """A small tool exercising every parameter feature."""
    return Tool(
        name="sample",
        description="A sample tool",
        endpoint="/api/sample",
        parameters={
            "name": ToolParameter(type="string", description="A required string", required=True),
            "count": ToolParameter(type="number", description="An optional number"),
            "flag": ToolParameter(type="boolean", description="An optional boolean"),
            "code": ToolParameter(
                type="string",
                description="An uppercased code",
                normalize="uppercase",
                enum=["AB", "CD"]
            ),
            "tags": ToolParameter(type="array", items="string", description="Optional tags", omit_empty=True),
            "ids": ToolParameter(type="array", items="string", description="Optional ids"),
            "query": ToolParameter(type="string", description="Renamed upstream", forward_as="text"),
            "note": ToolParameter(type="string", description="Kept local", forward=False)
        },
        custom_message_param="note"
    )
