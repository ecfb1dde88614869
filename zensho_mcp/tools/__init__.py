"""Catalog of the tools exposed by the bridge.

Public Interface:
    - create_tools(): All tool definitions, in listing order
    - create_default_registry(): A ToolRegistry holding the whole catalog
"""

from typing import List

from zensho_mcp.core.registry import ToolRegistry
from zensho_mcp.tools.backlog import (
    create_create_backlog_ticket_tool,
    create_list_backlog_handling_tickets_tool,
    create_read_all_notifications_tool,
    create_read_first_unread_notification_tool,
    create_reply_backlog_ticket_tool,
)
from zensho_mcp.tools.common import (
    create_browse_tool,
    create_register_lesson_learned_tool,
    create_search_tool,
)
from zensho_mcp.tools.jira import (
    create_create_jira_ticket_tool,
    create_list_jira_handling_tickets_tool,
    create_reply_jira_ticket_tool,
)
from zensho_mcp.tools.manage import create_fix_code_tool, create_get_screenshot_tool
from zensho_mcp.tools.params import APP_CODES
from zensho_mcp.tools.teams import (
    create_create_thread_tool,
    create_find_thread_tool,
    create_read_mentions_tool,
    create_read_message_from_mention_tool,
    create_read_threads_tool,
    create_reply_in_teams_tool,
)
from zensho_mcp.types import Tool


def create_tools() -> List[Tool]:
    """Create every tool definition, in the order they are listed to clients."""
    return [
        create_browse_tool(),
        create_list_backlog_handling_tickets_tool(),
        create_reply_backlog_ticket_tool(),
        create_create_backlog_ticket_tool(),
        create_create_jira_ticket_tool(),
        create_reply_jira_ticket_tool(),
        create_search_tool(),
        create_read_first_unread_notification_tool(),
        create_read_all_notifications_tool(),
        create_reply_in_teams_tool(),
        create_read_mentions_tool(),
        create_read_message_from_mention_tool(),
        create_read_threads_tool(),
        create_create_thread_tool(),
        create_find_thread_tool(),
        create_list_jira_handling_tickets_tool(),
        create_get_screenshot_tool(),
        create_fix_code_tool(),
        create_register_lesson_learned_tool(),
    ]


def create_default_registry() -> ToolRegistry:
    """Build the registry holding the full tool catalog."""
    return ToolRegistry.from_tools(create_tools())


__all__ = ["APP_CODES", "create_default_registry", "create_tools"]
