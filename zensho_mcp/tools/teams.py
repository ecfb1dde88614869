"""Microsoft Teams tools: mentions, replies and channel threads."""

from typing import Any, Dict

from zensho_mcp.core.errors import ValidationError
from zensho_mcp.tools.params import app_code
from zensho_mcp.types import Tool, ToolParameter


def _provided(arguments: Dict[str, Any], name: str) -> bool:
    return arguments.get(name) not in (None, "")


def _require_url_or_mention_no(arguments: Dict[str, Any]) -> None:
    """replyInTeams needs a target: a message URL or a mention number."""
    if not (_provided(arguments, "url") or _provided(arguments, "mentionNo")):
        raise ValidationError(
            "Either 'url' or 'mentionNo' must be provided for tool 'replyInTeams'",
            tool_name="replyInTeams"
        )


def _require_mention_no_or_id(arguments: Dict[str, Any]) -> None:
    """readMessageFromMention needs the mention by number or by id."""
    if not (_provided(arguments, "mentionNo") or _provided(arguments, "mentionId")):
        raise ValidationError(
            "Either 'mentionNo' or 'mentionId' must be provided for tool 'readMessageFromMention'",
            tool_name="readMessageFromMention"
        )


def create_reply_in_teams_tool() -> Tool:
    return Tool(
        name="replyInTeams",
        endpoint="/api/teams/replyInTeams",
        description="""Reply in Microsoft Teams, either to the message at a URL or to a mention listed by readMentions. At least one of url or mentionNo is required.

Response format (200):
{
  "message": "Reply posted successfully",
  "messageUrl": "URL of the posted reply"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "text": ToolParameter(type="string", description="The reply text to post", required=True),
            "url": ToolParameter(type="string", description="URL of the Teams message to reply to"),
            "mentionNo": ToolParameter(
                type="number", description="Number of the mention (as listed by readMentions) to reply to"
            )
        },
        checks=(_require_url_or_mention_no,)
    )


def create_read_mentions_tool() -> Tool:
    return Tool(
        name="readMentions",
        endpoint="/api/teams/readMentions",
        description="""List the recent Teams messages that mention the bot account.

Response format (200):
{
  "mentions": [
    {
      "mentionNo": 1,
      "mentionId": "Identifier of the mention",
      "sender": "Sender name",
      "preview": "First line of the message"
    }
  ],
  "num": 1
}

Error responses:
- 500: Server error"""
    )


def create_read_message_from_mention_tool() -> Tool:
    return Tool(
        name="readMessageFromMention",
        endpoint="/api/teams/readMessageFromMention",
        description="""Read the full Teams message of a mention, identified by its number or its id. At least one of mentionNo or mentionId is required.

Response format (200):
{
  "content": "Full message content",
  "parentContent": "Thread starter content",
  "url": "URL of the message"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 404: Mention not found
- 500: Server error""",
        parameters={
            "mentionNo": ToolParameter(type="number", description="Number of the mention as listed by readMentions"),
            "mentionId": ToolParameter(type="string", description="Identifier of the mention")
        },
        checks=(_require_mention_no_or_id,)
    )


def create_read_threads_tool() -> Tool:
    return Tool(
        name="readThreads",
        endpoint="/api/teams/readThreads",
        description="""Read the latest threads of a Teams channel.

Response format (200):
{
  "threads": [
    {
      "title": "Thread title",
      "content": "Thread starter content",
      "url": "URL of the thread"
    }
  ]
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "channelName": ToolParameter(type="string", description="Name of the Teams channel", required=True)
        }
    )


def create_create_thread_tool() -> Tool:
    return Tool(
        name="createThread",
        endpoint="/api/teams/createThread",
        description="""Start a new thread in a Teams channel.

Response format (200):
{
  "message": "Thread created successfully",
  "threadUrl": "URL of the new thread"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "title": ToolParameter(type="string", description="Title of the thread", required=True),
            "content": ToolParameter(type="string", description="Content of the thread starter message", required=True),
            "channelName": ToolParameter(type="string", description="Name of the Teams channel", required=True)
        }
    )


def create_find_thread_tool() -> Tool:
    return Tool(
        name="findThread",
        endpoint="/api/teams/findThread",
        description="""Find the Teams thread discussing a ticket.

Response format (200):
{
  "title": "Thread title",
  "url": "URL of the thread",
  "channelName": "Channel the thread belongs to"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 404: No thread found for the ticket
- 500: Server error""",
        parameters={
            "ticketKey": ToolParameter(
                type="string", description="Ticket key to look for (e.g., DEV_N_APP-2993)", required=True
            ),
            "appNo": app_code("Optional app to narrow the search to", required=False)
        }
    )
