"""Define Channel Tools — tool schemas for channels, messages, threads, and reactions.

Invariants:
    - All schemas follow the {name, description, input_schema} tool format
    - Required fields enforced by schema, not handler code (tool_dispatch reads "required")
    - Thread timestamps are Slack's raw "1234567890.123456" form, never ISO

Design Decisions:
    - Tool schemas in dedicated files: explicit, no auto-discovery (ADR: ExMA anti-pattern)
    - Defaults and caps stated in descriptions: the agent reads these, not the handler code
"""

from slackgate.core.domain_types import (
    CHANNEL_LIST_LIMIT, HISTORY_DEFAULT_LIMIT, ToolName,
)

_THREAD_TS_DESCRIPTION = (
    "The timestamp of the parent message in the format '1234567890.123456'. "
    "Timestamps in the format without the period can be converted by adding "
    "the period such that 6 numbers come after it."
)

TOOLS_CHANNELS = [
    {
        "name": ToolName.LIST_CHANNELS.value,
        "description": "List public channels in the workspace with pagination",
        "input_schema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": (
                        f"Maximum number of channels to return "
                        f"(default {CHANNEL_LIST_LIMIT[0]}, max {CHANNEL_LIST_LIMIT[1]})"
                    ),
                    "default": CHANNEL_LIST_LIMIT[0],
                },
                "cursor": {
                    "type": "string",
                    "description": "Pagination cursor for next page of results",
                },
            },
        },
    },
    {
        "name": ToolName.POST_MESSAGE.value,
        "description": "Post a new message to a Slack channel",
        "input_schema": {
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "The ID of the channel to post to",
                },
                "text": {
                    "type": "string",
                    "description": "The message text to post",
                },
            },
            "required": ["channel_id", "text"],
        },
    },
    {
        "name": ToolName.REPLY_TO_THREAD.value,
        "description": "Reply to a specific message thread in Slack",
        "input_schema": {
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "The ID of the channel containing the thread",
                },
                "thread_ts": {
                    "type": "string",
                    "description": _THREAD_TS_DESCRIPTION,
                },
                "text": {
                    "type": "string",
                    "description": "The reply text",
                },
            },
            "required": ["channel_id", "thread_ts", "text"],
        },
    },
    {
        "name": ToolName.ADD_REACTION.value,
        "description": "Add a reaction emoji to a message",
        "input_schema": {
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "The ID of the channel containing the message",
                },
                "timestamp": {
                    "type": "string",
                    "description": "The timestamp of the message to react to",
                },
                "reaction": {
                    "type": "string",
                    "description": "The name of the emoji reaction (without ::)",
                },
            },
            "required": ["channel_id", "timestamp", "reaction"],
        },
    },
    {
        "name": ToolName.GET_CHANNEL_HISTORY.value,
        "description": "Get recent messages from a channel",
        "input_schema": {
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "The ID of the channel",
                },
                "limit": {
                    "type": "number",
                    "description": (
                        f"Number of messages to retrieve (default {HISTORY_DEFAULT_LIMIT})"
                    ),
                    "default": HISTORY_DEFAULT_LIMIT,
                },
            },
            "required": ["channel_id"],
        },
    },
    {
        "name": ToolName.GET_THREAD_REPLIES.value,
        "description": "Get a message and all replies in the message thread",
        "input_schema": {
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "The ID of the channel containing the thread",
                },
                "thread_ts": {
                    "type": "string",
                    "description": _THREAD_TS_DESCRIPTION,
                },
            },
            "required": ["channel_id", "thread_ts"],
        },
    },
]
