"""Channel Handlers — channels, messages, threads, and reactions (6 methods).

Invariants:
    - Required arguments already validated by ToolDispatch before any handler runs
    - Handlers return the raw Slack payload: normalization and enrichment happen in dispatch
    - Channel listing capped at 200 per page; history has no cap of its own

Design Decisions:
    - Handlers own defaults/caps, SlackClient owns the wire format (ADR: ExMA single responsibility)
"""

from slackgate.core.domain_types import CHANNEL_LIST_LIMIT, HISTORY_DEFAULT_LIMIT
from slackgate.core.tool_arguments import bounded_int, optional_str
from slackgate.infrastructure.slack_client import SlackClient


class ChannelHandlers:
    """Channel and message tools."""

    def __init__(self, slack: SlackClient):
        self.slack = slack

    async def list_channels(self, input_data: dict) -> dict:
        default, maximum = CHANNEL_LIST_LIMIT
        return await self.slack.get_channels(
            limit=bounded_int(input_data, "limit", default, maximum),
            cursor=optional_str(input_data, "cursor"),
        )

    async def post_message(self, input_data: dict) -> dict:
        return await self.slack.post_message(
            input_data["channel_id"], input_data["text"],
        )

    async def reply_to_thread(self, input_data: dict) -> dict:
        return await self.slack.post_reply(
            input_data["channel_id"], input_data["thread_ts"], input_data["text"],
        )

    async def add_reaction(self, input_data: dict) -> dict:
        return await self.slack.add_reaction(
            input_data["channel_id"], input_data["timestamp"], input_data["reaction"],
        )

    async def get_channel_history(self, input_data: dict) -> dict:
        return await self.slack.get_channel_history(
            input_data["channel_id"],
            limit=bounded_int(input_data, "limit", HISTORY_DEFAULT_LIMIT),
        )

    async def get_thread_replies(self, input_data: dict) -> dict:
        return await self.slack.get_thread_replies(
            input_data["channel_id"], input_data["thread_ts"],
        )
