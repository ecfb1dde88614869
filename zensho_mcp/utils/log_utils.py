"""Utility functions for logging."""

from typing import Any, Dict, Mapping

SENSITIVE_MARKERS = (
    "authorization", "api-key", "api_key", "apikey", "token",
    "secret", "password", "cookie", "credential"
)


def mask_value(value: str) -> str:
    """Mask a secret, keeping a short prefix and suffix for long values."""
    if len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "****"


def redact_sensitive_data(headers: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of request headers that is safe to log.

    Header names are matched case-insensitively against known credential
    markers; matching string values are masked and anything else is replaced.

    Args:
        headers: Headers about to be sent upstream

    Returns:
        Dictionary with sensitive values redacted
    """
    redacted: Dict[str, Any] = {}
    for name, value in headers.items():
        if any(marker in name.lower() for marker in SENSITIVE_MARKERS):
            redacted[name] = mask_value(value) if isinstance(value, str) else "[REDACTED]"
        else:
            redacted[name] = value
    return redacted
