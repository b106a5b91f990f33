"""Define Search Tools — tool schema for workspace-wide message search.

Invariants:
    - sort / sort_dir enums mirror SearchSort / SortDirection in core.domain_types
    - count is capped by the handler even if the agent ignores "maximum"

Design Decisions:
    - search.messages needs a user token (xoxp-): bot tokens get ok:false "not_allowed_token_type",
      which is passed through to the agent unchanged
"""

from slackgate.core.domain_types import (
    SEARCH_COUNT_LIMIT, SearchSort, SortDirection, ToolName,
)

TOOLS_SEARCH = [
    {
        "name": ToolName.SEARCH_MESSAGES.value,
        "description": "Search for messages across the workspace",
        "input_schema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": (
                        "Search query string (supports operators like "
                        "from:@user, in:#channel)"
                    ),
                },
                "count": {
                    "type": "number",
                    "description": (
                        f"Number of results to return "
                        f"(default {SEARCH_COUNT_LIMIT[0]}, max {SEARCH_COUNT_LIMIT[1]})"
                    ),
                    "default": SEARCH_COUNT_LIMIT[0],
                    "maximum": SEARCH_COUNT_LIMIT[1],
                },
                "cursor": {
                    "type": "string",
                    "description": "Pagination cursor for next page of results",
                },
                "highlight": {
                    "type": "boolean",
                    "description": "Enable search term highlighting",
                    "default": False,
                },
                "sort": {
                    "type": "string",
                    "enum": [s.value for s in SearchSort],
                    "description": "Sort results by relevance score or timestamp",
                },
                "sort_dir": {
                    "type": "string",
                    "enum": [d.value for d in SortDirection],
                    "description": "Sort direction",
                },
            },
            "required": ["query"],
        },
    },
]
