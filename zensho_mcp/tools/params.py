"""Parameter definitions shared by several tools."""

from typing import Final, List

from zensho_mcp.types import ToolParameter

# Product areas known to the upstream API.
APP_CODES: Final[List[str]] = ["N", "KN", "SK", "ZET", "DMINI"]


def app_code(description: str, required: bool = True) -> ToolParameter:
    """An app/type code, accepted in any case and forwarded uppercase."""
    return ToolParameter(
        type="string",
        description=f"{description}. Allowed values: {', '.join(APP_CODES)} (case-insensitive)",
        required=required,
        normalize="uppercase",
        enum=APP_CODES
    )


def assets_image_ids() -> ToolParameter:
    """Optional screenshot ids attached to a ticket; left out when empty."""
    return ToolParameter(
        type="array",
        items="string",
        description="IDs of screenshot images (from getScreenShot) to attach",
        required=False,
        omit_empty=True
    )


def custom_message() -> ToolParameter:
    """Optional text returned instead of the upstream JSON on success."""
    return ToolParameter(
        type="string",
        description="Optional message to return on success instead of the raw response",
        required=False,
        forward=False
    )
