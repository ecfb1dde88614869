"""Bridge configuration module.

This module provides configuration management for the upstream API and
the MCP server, with support for reading from environment variables and
an optional ``.env`` file.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "https://scarflike-prepositionally-azariah.ngrok-free.dev"


class ZenshoSettings(BaseSettings):
    """Global settings for the bridge.

    Values are read from the environment (case-insensitive), falling back to
    the given env file and then to the defaults below.
    """

    # Upstream API settings
    zensho_api_base_url: str = Field(DEFAULT_API_BASE_URL, description="Base URL of the upstream API")
    zensho_request_timeout: Optional[float] = Field(
        None, description="Total request timeout in seconds; transport default when unset"
    )
    zensho_extra_headers: Dict[str, str] = Field(
        default_factory=dict, description="Static headers sent with every upstream request"
    )

    # Dispatch behavior
    zensho_strict_arguments: bool = Field(
        False, description="Reject invocations carrying undeclared arguments"
    )
    zensho_include_error_body: bool = Field(
        False, description="Append the upstream error body to HTTP error results"
    )

    # Logging
    zensho_log_level: str = Field("INFO", description="Log level name")
    zensho_log_dir: Optional[str] = Field(None, description="Directory for rotating log files")

    # MCP HTTP transport
    mcp_host: str = Field("127.0.0.1", description="Bind address for the HTTP transport")
    mcp_port: int = Field(8787, description="Port for the HTTP transport")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore"
    )

    def __init__(self, env_file: Optional[str] = ".env", **kwargs):
        super().__init__(_env_file=env_file, **kwargs)


@dataclass(frozen=True)
class DispatcherConfig:
    """Configuration handed to the dispatcher and upstream client.

    Attributes:
        base_url: Base URL every endpoint path is appended to
        request_timeout: Optional total timeout in seconds
        strict_arguments: Reject undeclared arguments instead of dropping them
        include_error_body: Append the upstream error body to HTTP errors
        headers: Extra static headers for upstream requests
    """

    base_url: str = DEFAULT_API_BASE_URL
    request_timeout: Optional[float] = None
    strict_arguments: bool = False
    include_error_body: bool = False
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Optional[ZenshoSettings] = None) -> "DispatcherConfig":
        """Create a dispatcher config from settings.

        Args:
            settings: Optional settings instance, will load from env if not provided

        Returns:
            A DispatcherConfig instance
        """
        if settings is None:
            settings = ZenshoSettings()

        return cls(
            base_url=settings.zensho_api_base_url.rstrip("/"),
            request_timeout=settings.zensho_request_timeout,
            strict_arguments=settings.zensho_strict_arguments,
            include_error_body=settings.zensho_include_error_body,
            headers=dict(settings.zensho_extra_headers)
        )

    def url_for(self, endpoint: str) -> str:
        """Build the absolute upstream URL for an endpoint path."""
        return f"{self.base_url.rstrip('/')}{endpoint}"
