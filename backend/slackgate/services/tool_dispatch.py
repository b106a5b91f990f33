"""Tool Dispatch — explicit routing from tool_name to handler, then normalize + enrich.

Invariants:
    - Every tool->handler mapping is visible: no getattr magic, no auto-discovery
    - Required arguments checked against the tool schema BEFORE any handler or network call
    - Every successful payload flows through normalize_timestamps, then enrich_users
    - execute() never raises: every failure becomes a {"error": message} text payload
    - Result is always exactly one text content item holding serialized JSON

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: ExMA no convention-over-config)
    - Split handlers by Slack surface: max ~6 methods per class (ADR: ExMA no god objects)
    - One catch-all at this boundary: transports never see an exception from a tool call
    - ensure_ascii=False: agents read names and message text in their original script
"""

import json
import logging
from typing import Any

from slackgate.core.domain_types import JsonValue, ToolName
from slackgate.core.errors import (
    ErrorContext, InvalidArgumentsError, SlackGateError, UnknownToolError,
)
from slackgate.core.normalize_timestamps import normalize_timestamps
from slackgate.core.tool_arguments import missing_required
from slackgate.infrastructure.slack_client import SlackClient
from slackgate.services.enrich_users import enrich_users
from slackgate.services.handle_channels import ChannelHandlers
from slackgate.services.handle_search import SearchHandlers
from slackgate.services.handle_users import UserHandlers
from slackgate.services.resolve_identity import IdentityResolver
from slackgate.services.tools_registry import ALL_TOOLS, required_arguments

logger = logging.getLogger(__name__)


def text_result(payload: Any) -> dict:
    """Wrap a JSON-serializable payload as a single text content item."""
    return {
        "content": [
            {"type": "text", "text": json.dumps(payload, ensure_ascii=False)},
        ],
    }


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, slack: SlackClient, resolver: IdentityResolver):
        self._resolver = resolver
        channels = ChannelHandlers(slack)
        users = UserHandlers(slack)
        search = SearchHandlers(slack)

        # ADR: every mapping explicit: adding a tool requires editing this dict
        self._handlers = {
            # Channels & messages (6 tools)
            ToolName.LIST_CHANNELS: channels.list_channels,
            ToolName.POST_MESSAGE: channels.post_message,
            ToolName.REPLY_TO_THREAD: channels.reply_to_thread,
            ToolName.ADD_REACTION: channels.add_reaction,
            ToolName.GET_CHANNEL_HISTORY: channels.get_channel_history,
            ToolName.GET_THREAD_REPLIES: channels.get_thread_replies,

            # Users (2 tools)
            ToolName.GET_USERS: users.get_users,
            ToolName.GET_USER_PROFILE: users.get_user_profile,

            # Search (1 tool)
            ToolName.SEARCH_MESSAGES: search.search_messages,
        }

    def list_tools(self) -> list[dict]:
        """Tool descriptors in catalog order."""
        return list(ALL_TOOLS)

    async def execute(self, tool_name: str, input_data: dict | None) -> dict:
        """Run a tool and wrap its result. Never raises."""
        logger.info(f"Tool call: {tool_name}", extra={"tool_name": tool_name})
        try:
            payload = await self._run(tool_name, input_data)
        except SlackGateError as e:
            logger.warning(
                f"Tool '{tool_name}' failed: {e.message}",
                extra={"tool_name": tool_name, "error_code": e.code},
            )
            return text_result(e.to_payload())
        except Exception as e:
            logger.error(
                f"Tool '{tool_name}' raised: {e}",
                extra={"tool_name": tool_name},
                exc_info=True,
            )
            return text_result({"error": str(e) or type(e).__name__})
        return text_result(payload)

    async def _run(self, tool_name: str, input_data: dict | None) -> JsonValue:
        context = ErrorContext(tool_name=tool_name)
        if input_data is None:
            raise InvalidArgumentsError("No arguments provided", context=context)
        try:
            name = ToolName(tool_name)
        except ValueError:
            raise UnknownToolError(tool_name, context=context)
        required = required_arguments(name.value)
        missing = missing_required(input_data, required)
        if missing:
            raise InvalidArgumentsError.for_missing(required, missing, context=context)

        raw = await self._handlers[name](input_data)
        return await enrich_users(normalize_timestamps(raw), self._resolver)
