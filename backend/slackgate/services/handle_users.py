"""User Handlers — workspace directory listing and single-profile lookup (2 methods)."""

from slackgate.core.domain_types import USER_LIST_LIMIT
from slackgate.core.tool_arguments import bounded_int, optional_str
from slackgate.infrastructure.slack_client import SlackClient


class UserHandlers:
    """User directory tools."""

    def __init__(self, slack: SlackClient):
        self.slack = slack

    async def get_users(self, input_data: dict) -> dict:
        default, maximum = USER_LIST_LIMIT
        return await self.slack.get_users(
            limit=bounded_int(input_data, "limit", default, maximum),
            cursor=optional_str(input_data, "cursor"),
        )

    async def get_user_profile(self, input_data: dict) -> dict:
        return await self.slack.get_user_profile(input_data["user_id"])
