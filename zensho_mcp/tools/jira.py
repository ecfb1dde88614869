"""Jira tools."""

from zensho_mcp.tools.params import app_code, assets_image_ids
from zensho_mcp.types import Tool, ToolParameter


def create_create_jira_ticket_tool() -> Tool:
    return Tool(
        name="createJiraTicket",
        endpoint="/api/jira/createIssue",
        description="""Create a new Jira ticket with a title, description, and type (N, KN, SK, ZET, DMINI). Case-insensitive.

Response format (200):
{
  "message": "Success message",
  "issueUrl": "https://pm.gem-corp.tech/browse/ZEN2025-XXXX"
}

Error responses:
- 400: Invalid request
- 500: Server error""",
        parameters={
            "title": ToolParameter(type="string", description="The title of the Jira issue", required=True),
            "description": ToolParameter(
                type="string", description="The detailed description of the Jira issue", required=True
            ),
            "type": app_code("The app type for the Jira issue")
        }
    )


def create_reply_jira_ticket_tool() -> Tool:
    return Tool(
        name="replyJiraTicket",
        endpoint="/api/jira/replyIssue",
        description="""Reply to an existing Jira ticket with a comment. Requires the ticket URL/key and reply content.

Response format (200):
{
  "message": "Comment posted successfully",
  "commentUrl": "URL of the comment after posting"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "url": ToolParameter(
                type="string",
                description="The Jira ticket URL or key to reply to (e.g., https://pm.gem-corp.tech/browse/ZEN2025-1197 or ZEN2025-1197)",
                required=True
            ),
            "content": ToolParameter(type="string", description="The content of the comment to post", required=True),
            "assetsImageIds": assets_image_ids()
        }
    )


def create_list_jira_handling_tickets_tool() -> Tool:
    return Tool(
        name="listJiraHandlingTickets",
        endpoint="/api/jira/listHandlingTickets",
        description="""List the Jira tickets currently being handled for an app, starting from a Jira filter or board URL.

Response format (200):
{
  "tickets": [
    {
      "key": "ZEN2025-2651",
      "title": "Ticket title",
      "status": "In Progress"
    }
  ],
  "num": 3
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "url": ToolParameter(
                type="string", description="The Jira filter or board URL listing the tickets", required=True
            ),
            "appNo": app_code("The app to list Jira handling tickets for")
        }
    )
