"""Tools driving the automation host itself."""

from zensho_mcp.types import Tool, ToolParameter


def create_get_screenshot_tool() -> Tool:
    return Tool(
        name="getScreenShot",
        endpoint="/manage/getScreenShot",
        description="""Take a screenshot of the current web page opened by Selenium and return the image URL.

Response format (200):
{
  "message": "Screenshot taken",
  "imageUrl": "https://res.cloudinary.com/.../screenshot.png",
  "imageId": "ID usable in assetsImageIds"
}

Error responses:
- 400: Bad request
- 500: Server error"""
    )


def create_fix_code_tool() -> Tool:
    return Tool(
        name="fixCode",
        endpoint="/manage/fixCode",
        description="""Ask the automation host to fix the code of one of its API handlers after a failure.

Response format (200):
{
  "message": "Fix applied",
  "changedFiles": ["List of modified files"]
}

Error responses:
- 400: Invalid request
- 500: Server error""",
        parameters={
            "apiName": ToolParameter(type="string", description="Name of the failing API (e.g., replyIssue)"),
            "extraInfo": ToolParameter(type="string", description="Error output or hints about the failure")
        }
    )
