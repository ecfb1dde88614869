"""General purpose tools: browsing, search and lessons learned."""

from zensho_mcp.tools.params import app_code, custom_message
from zensho_mcp.types import Tool, ToolParameter


def create_browse_tool() -> Tool:
    return Tool(
        name="browse",
        endpoint="/api/common/browse",
        description="""Browse and fetch content from a URL using the Zensho API. Supports Jira issues, Backlog URLs/keys, and Teams messages.

Response format (200):
{
  "content": "Main extracted content",
  "reference_links": "Extracted reference links within content",
  "comments": "Comments from related users",
  "parentContent": "Parent content (for Teams thread starter)"
}

Error responses:
- 400: Invalid request (missing/wrong parameters)
- 500: Server error""",
        parameters={
            "url": ToolParameter(
                type="string",
                description="The URL or key to browse. Supports: Jira issue URL/key (e.g., ZEN2025-2651), Backlog URL/key, Teams message URL",
                required=True
            ),
            "oneCommentOnly": ToolParameter(
                type="boolean",
                description="If response data is too large (ResponseTooLargeError), set to true to fetch less data. Default: false"
            )
        }
    )


def create_search_tool() -> Tool:
    return Tool(
        name="search",
        endpoint="/api/data/search",
        description="""Search for documents and issues of one app using a text query.

Response format (200):
[
  {
    "id": "DEV_ZET_APP-266",
    "title": "Document or issue title",
    "url": "https://zhdoa.backlog.jp/view/DEV_ZET_APP-266"
  }
]

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "query": ToolParameter(
                type="string",
                description="The search query to find documents/issues (e.g., version number, keywords)",
                required=True,
                forward_as="text"
            ),
            "appNo": app_code("The app to search in")
        }
    )


def create_register_lesson_learned_tool() -> Tool:
    return Tool(
        name="registerLessonLearned",
        endpoint="/api/common/lessionLearn",
        description="""Record a lesson learned from a handled ticket so that future answers avoid the same mistake.

Response format (200):
{
  "message": "Lesson learned registered",
  "id": "Identifier of the stored lesson"
}

Error responses:
- 400: Invalid request (missing or wrong parameters)
- 500: Server error""",
        parameters={
            "context": ToolParameter(type="string", description="The situation in which the lesson applies", required=True),
            "bad": ToolParameter(type="string", description="What was done wrong", required=True),
            "why": ToolParameter(type="string", description="Why it was wrong", required=True),
            "good": ToolParameter(type="string", description="What should have been done instead", required=True),
            "lessionLearn": ToolParameter(type="string", description="The lesson, stated as a rule to follow", required=True),
            "scope": ToolParameter(type="string", description="Optional scope of the lesson (e.g., an app code or team)"),
            "customMessage": custom_message()
        },
        custom_message_param="customMessage"
    )
