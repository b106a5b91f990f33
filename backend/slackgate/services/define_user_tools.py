"""Define User Tools — tool schemas for the workspace directory and user profiles."""

from slackgate.core.domain_types import USER_LIST_LIMIT, ToolName

TOOLS_USERS = [
    {
        "name": ToolName.GET_USERS.value,
        "description": (
            "Get a list of all users in the workspace with their basic "
            "profile information"
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "cursor": {
                    "type": "string",
                    "description": "Pagination cursor for next page of results",
                },
                "limit": {
                    "type": "number",
                    "description": (
                        f"Maximum number of users to return "
                        f"(default {USER_LIST_LIMIT[0]}, max {USER_LIST_LIMIT[1]})"
                    ),
                    "default": USER_LIST_LIMIT[0],
                },
            },
        },
    },
    {
        "name": ToolName.GET_USER_PROFILE.value,
        "description": "Get detailed profile information for a specific user",
        "input_schema": {
            "type": "object",
            "properties": {
                "user_id": {
                    "type": "string",
                    "description": "The ID of the user",
                },
            },
            "required": ["user_id"],
        },
    },
]
