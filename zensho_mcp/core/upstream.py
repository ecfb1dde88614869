"""HTTP client for the upstream Zensho API.

Each call opens its own ``aiohttp.ClientSession``, posts one JSON body and
returns the parsed JSON response. Failures are raised as the bridge's error
types so the dispatcher can turn them into result envelopes.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from zensho_mcp.core.errors import TransportError, UpstreamHttpError, UpstreamParseError
from zensho_mcp.core.settings import DispatcherConfig
from zensho_mcp.types import UpstreamRequest
from zensho_mcp.utils.log_utils import redact_sensitive_data

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Posts upstream requests and classifies their outcome."""

    def __init__(self, config: DispatcherConfig) -> None:
        self._config = config

    def _headers(self) -> Dict[str, str]:
        headers = dict(self._config.headers)
        headers["Content-Type"] = "application/json"
        return headers

    def _session_kwargs(self) -> Dict[str, Any]:
        if self._config.request_timeout is None:
            return {}
        return {"timeout": aiohttp.ClientTimeout(total=self._config.request_timeout)}

    async def post(self, request: UpstreamRequest, tool_name: Optional[str] = None) -> Any:
        """Send the request and return the parsed JSON body.

        Args:
            request: Endpoint and body to post
            tool_name: Name of the invoking tool, attached to raised errors

        Returns:
            The decoded JSON response of a 2xx answer

        Raises:
            TransportError: If the request could not be completed
            UpstreamHttpError: If the status is outside 200-299
            UpstreamParseError: If a 2xx body is not valid JSON, including an
                empty body
        """
        url = self._config.url_for(request.endpoint)
        logger.debug("POST %s headers=%s body=%s", url,
                     redact_sensitive_data(self._headers()), request.body)

        try:
            async with aiohttp.ClientSession(**self._session_kwargs()) as session:
                async with session.post(url, json=request.body, headers=self._headers()) as response:
                    if not 200 <= response.status < 300:
                        body = await self._read_error_body(response)
                        raise UpstreamHttpError(
                            response.status,
                            response.reason or "",
                            body=body,
                            tool_name=tool_name
                        )
                    try:
                        data = json.loads(await response.text())
                    except ValueError as e:
                        raise UpstreamParseError(
                            f"Invalid JSON in upstream response: {e}", tool_name=tool_name
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(str(e) or type(e).__name__, tool_name=tool_name) from e

        logger.debug("Response from %s: %s", url, data)
        return data

    async def _read_error_body(self, response: aiohttp.ClientResponse) -> Any:
        """Read the body of an error response when it will be reported."""
        if not self._config.include_error_body:
            return None
        try:
            text = await response.text()
        except (aiohttp.ClientError, UnicodeDecodeError):
            logger.debug("Could not read error body from upstream", exc_info=True)
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text
