"""Backlog tools: handling tickets, issues and notifications."""

from zensho_mcp.tools.params import app_code, assets_image_ids, custom_message
from zensho_mcp.types import Tool, ToolParameter


def create_list_backlog_handling_tickets_tool() -> Tool:
    return Tool(
        name="listBacklogHandlingTickets",
        endpoint="/api/backlog/listHandlingTickets",
        description="""List all backlog handling tickets for a specific app (N, KN, SK, ZET, DMINI). Case-insensitive.

Response format (200):
{
  "tickets": [
    {
      "key": "DEV_N_APP-2993",
      "title": "Ticket title"
    }
  ],
  "num": 10
}

Error responses:
- 400: Bad request (missing or invalid appNo)
- 500: Server error""",
        parameters={
            "appNo": app_code("The app to list backlog handling tickets for")
        }
    )


def create_reply_backlog_ticket_tool() -> Tool:
    return Tool(
        name="replyBacklogTicket",
        endpoint="/api/backlog/replyIssue",
        description="""Reply to an existing backlog ticket with a comment. Requires the ticket URL/key, content and whether to assign the ticket.

Response format (200):
{
  "message": "Comment posted successfully",
  "commentUrl": "URL of the comment after posting",
  "imageUrl": "URL of the Screenshot image of the screen after commenting"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "url": ToolParameter(
                type="string",
                description="The backlog ticket URL or key to reply to (e.g., DEV_005_SPO-7012)",
                required=True
            ),
            "content": ToolParameter(type="string", description="The content of the comment to post", required=True),
            "shouldAssign": ToolParameter(
                type="boolean",
                description="Whether to assign the ticket back to the reporter after commenting",
                required=True
            ),
            "assetsImageIds": assets_image_ids()
        }
    )


def create_create_backlog_ticket_tool() -> Tool:
    return Tool(
        name="createBacklogTicket",
        endpoint="/api/backlog/createIssue",
        description="""Create a new backlog ticket with a title, description, and app (N, KN, SK, ZET, DMINI). Case-insensitive.

Response format (200):
{
  "issueKey": "DEV_N_APP-2967",
  "message": "Additional status message (optional)"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "title": ToolParameter(type="string", description="The title of the backlog issue", required=True),
            "description": ToolParameter(
                type="string", description="The detailed description of the backlog issue", required=True
            ),
            "appNo": app_code("The app for the backlog issue"),
            "assetsImageIds": assets_image_ids()
        }
    )


def create_read_first_unread_notification_tool() -> Tool:
    return Tool(
        name="readFirstUnreadNotification",
        endpoint="/api/backlog/readFirstUnreadNotification",
        description="""Open the oldest unread Backlog notification, mark it as read and return its content.

Response format (200):
{
  "ticketKey": "DEV_N_APP-2993",
  "url": "https://zhdoa.backlog.jp/view/DEV_N_APP-2993",
  "content": "Notification content",
  "sender": "Name of the user who triggered the notification"
}

Error responses:
- 404: No unread notification
- 500: Server error"""
    )


def create_read_all_notifications_tool() -> Tool:
    return Tool(
        name="readAllNotifications",
        endpoint="/api/backlog/readAllNotifications",
        description="""Mark every Backlog notification as read.

Response format (200):
{
  "message": "All notifications marked as read",
  "num": 12
}

Error responses:
- 500: Server error""",
        parameters={
            "customMessage": custom_message()
        },
        custom_message_param="customMessage"
    )
