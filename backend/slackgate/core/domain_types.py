"""Domain Types — rich types and naming conventions shared across the codebase.

Invariants:
    - UserId wraps str: identifiers are opaque, only matched by pattern, never parsed
    - Every tool name is a ToolName member: no raw string matching in dispatch
    - Field-name conventions (timestamps, user ids) are defined once, here

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: tool results are JSON)
"""

import re
from enum import Enum
from typing import Any, NewType, TypeAlias


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)

# Slack user ids: "U" followed by upper-case alphanumerics
USER_ID_PATTERN = re.compile(r"U[A-Z0-9]+")


def is_user_id(value: Any) -> bool:
    return isinstance(value, str) and USER_ID_PATTERN.fullmatch(value) is not None


# ─── JSON Values ─────────────────────────────────────────────────

JsonValue: TypeAlias = (
    dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None
)
JsonObject: TypeAlias = dict[str, JsonValue]


# ─── Field Conventions ───────────────────────────────────────────

TIMESTAMP_KEYS = frozenset({"ts", "thread_ts", "timestamp"})
TIMESTAMP_SUFFIX = "_ts"

# Seconds since epoch, optionally fractional. ASCII digits only.
EPOCH_SECONDS_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")

USER_FIELD = "user"
USER_DISPLAY_NAME_FIELD = "user_display_name"
USER_USERNAME_FIELD = "user_username"


# ─── Enums ───────────────────────────────────────────────────────

class ToolName(str, Enum):
    """Every tool exposed to the agent, in catalog order."""
    LIST_CHANNELS = "slack_list_channels"
    POST_MESSAGE = "slack_post_message"
    REPLY_TO_THREAD = "slack_reply_to_thread"
    ADD_REACTION = "slack_add_reaction"
    GET_CHANNEL_HISTORY = "slack_get_channel_history"
    GET_THREAD_REPLIES = "slack_get_thread_replies"
    GET_USERS = "slack_get_users"
    GET_USER_PROFILE = "slack_get_user_profile"
    SEARCH_MESSAGES = "slack_search_messages"


class SearchSort(str, Enum):
    SCORE = "score"
    TIMESTAMP = "timestamp"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# ─── Argument Limits (default, cap) ──────────────────────────────

CHANNEL_LIST_LIMIT = (100, 200)
USER_LIST_LIMIT = (100, 200)
SEARCH_COUNT_LIMIT = (20, 100)
HISTORY_DEFAULT_LIMIT = 10
