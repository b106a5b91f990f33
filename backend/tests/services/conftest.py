"""Service test fixtures — in-memory Slack gateway, resolver, and dispatch.

Invariants:
    - No test touches the network: FakeSlack answers every SlackClient method
    - Every test gets a fresh ResolutionCache
    - user_info lookups yield to the event loop once, so concurrent lookups overlap

Design Decisions:
    - FakeSlack duck-types SlackClient instead of mocking httpx: dispatch and enrichment
      tests assert on tool semantics, wire format is covered in tests/infrastructure
    - Responses deep-copied on every call: tests can assert the canned payload stays intact
    - A str response is a raw JSON body, decoded per call like SlackClient does
"""

import asyncio
import copy
import json

import pytest

from slackgate.services.resolve_identity import IdentityResolver, ResolutionCache
from slackgate.services.tool_dispatch import ToolDispatch


class FakeSlack:
    """Records calls and replays canned payloads per SlackClient method."""

    def __init__(self):
        self.calls: list[dict] = []
        self.responses: dict[str, object] = {}
        self.users: dict[str, object] = {}
        self.user_info_calls: list[str] = []

    async def _answer(self, method: str, **kwargs) -> dict:
        self.calls.append({"method": method, **kwargs})
        response = self.responses.get(method, {"ok": True})
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return json.loads(response)
        return copy.deepcopy(response)

    async def get_channels(self, limit, cursor=None):
        return await self._answer("get_channels", limit=limit, cursor=cursor)

    async def post_message(self, channel_id, text):
        return await self._answer("post_message", channel_id=channel_id, text=text)

    async def post_reply(self, channel_id, thread_ts, text):
        return await self._answer(
            "post_reply", channel_id=channel_id, thread_ts=thread_ts, text=text,
        )

    async def add_reaction(self, channel_id, timestamp, reaction):
        return await self._answer(
            "add_reaction", channel_id=channel_id, timestamp=timestamp, reaction=reaction,
        )

    async def get_channel_history(self, channel_id, limit):
        return await self._answer("get_channel_history", channel_id=channel_id, limit=limit)

    async def get_thread_replies(self, channel_id, thread_ts):
        return await self._answer(
            "get_thread_replies", channel_id=channel_id, thread_ts=thread_ts,
        )

    async def get_users(self, limit, cursor=None):
        return await self._answer("get_users", limit=limit, cursor=cursor)

    async def get_user_profile(self, user_id):
        return await self._answer("get_user_profile", user_id=user_id)

    async def search_messages(
        self, query, count, cursor=None, highlight=False, sort=None, sort_dir=None,
    ):
        return await self._answer(
            "search_messages", query=query, count=count, cursor=cursor,
            highlight=highlight, sort=sort, sort_dir=sort_dir,
        )

    async def get_user_info(self, user_id):
        self.user_info_calls.append(user_id)
        await asyncio.sleep(0)
        info = self.users.get(user_id)
        if isinstance(info, Exception):
            raise info
        if info is None:
            return {"ok": False, "error": "user_not_found"}
        return copy.deepcopy(info)

    def add_user(self, user_id: str, name: str, display_name: str = "", real_name: str = ""):
        self.users[user_id] = {
            "ok": True,
            "user": {
                "id": user_id,
                "name": name,
                "real_name": real_name,
                "profile": {"display_name": display_name},
            },
        }


@pytest.fixture
def fake_slack():
    return FakeSlack()


@pytest.fixture
def identity_cache():
    return ResolutionCache()


@pytest.fixture
def resolver(fake_slack, identity_cache):
    return IdentityResolver(fake_slack.get_user_info, identity_cache)


@pytest.fixture
def dispatch(fake_slack, resolver):
    return ToolDispatch(fake_slack, resolver)
