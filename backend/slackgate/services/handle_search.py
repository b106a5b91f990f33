"""Search Handlers — workspace-wide message search (1 method).

Invariants:
    - count defaults to 20, capped at 100
    - highlight forwarded only when truthy; sort / sort_dir forwarded only when given
"""

from slackgate.core.domain_types import SEARCH_COUNT_LIMIT
from slackgate.core.tool_arguments import bounded_int, optional_str
from slackgate.infrastructure.slack_client import SlackClient


class SearchHandlers:
    """Message search tool."""

    def __init__(self, slack: SlackClient):
        self.slack = slack

    async def search_messages(self, input_data: dict) -> dict:
        default, maximum = SEARCH_COUNT_LIMIT
        return await self.slack.search_messages(
            input_data["query"],
            count=bounded_int(input_data, "count", default, maximum),
            cursor=optional_str(input_data, "cursor"),
            highlight=bool(input_data.get("highlight")),
            sort=optional_str(input_data, "sort"),
            sort_dir=optional_str(input_data, "sort_dir"),
        )
