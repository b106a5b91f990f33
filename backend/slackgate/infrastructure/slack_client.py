"""Slack Web API Client — async httpx wrapper returning raw JSON payloads.

Invariants:
    - One shared httpx.AsyncClient per process: bearer auth and timeout set once
    - Responses returned unchanged, including {"ok": false, "error": ...} bodies
    - Transport errors, timeouts, undecodable and non-object bodies raise UpstreamFailureError
    - Reads use GET with query params; writes use POST with a JSON body
    - Workspace-scoped listings (channels, users, search) always carry team_id

Design Decisions:
    - No retry/backoff: callers decide (router reports, identity resolver degrades)
    - ok:false is an application-level answer, not a transport failure: the agent
      sees Slack's own error string
    - Argument defaults and caps live in the tool handlers; this client sends what it is given
"""

import logging
from typing import Any

import httpx

from slackgate.core.errors import UpstreamFailureError

logger = logging.getLogger(__name__)


class SlackClient:
    """Thin async client for the Slack Web API methods the tools need."""

    def __init__(
        self,
        token: str,
        team_id: str,
        base_url: str = "https://slack.com/api/",
        timeout_seconds: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.team_id = team_id
        self.is_user_token = token.startswith("xoxp-")
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json; charset=utf-8",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    # ─── Channels & Messages ────────────────────────────────────

    async def get_channels(self, limit: int, cursor: str | None = None) -> dict:
        params: dict[str, Any] = {
            "types": "public_channel",
            "exclude_archived": "true",
            "limit": limit,
            "team_id": self.team_id,
        }
        if cursor:
            params["cursor"] = cursor
        return await self._get("conversations.list", params)

    async def post_message(self, channel_id: str, text: str) -> dict:
        return await self._post("chat.postMessage", {
            "channel": channel_id,
            "text": text,
            "as_user": self.is_user_token,
        })

    async def post_reply(self, channel_id: str, thread_ts: str, text: str) -> dict:
        return await self._post("chat.postMessage", {
            "channel": channel_id,
            "thread_ts": thread_ts,
            "text": text,
            "as_user": self.is_user_token,
        })

    async def add_reaction(self, channel_id: str, timestamp: str, reaction: str) -> dict:
        return await self._post("reactions.add", {
            "channel": channel_id,
            "timestamp": timestamp,
            "name": reaction,
        })

    async def get_channel_history(self, channel_id: str, limit: int) -> dict:
        return await self._get("conversations.history", {
            "channel": channel_id,
            "limit": limit,
        })

    async def get_thread_replies(self, channel_id: str, thread_ts: str) -> dict:
        return await self._get("conversations.replies", {
            "channel": channel_id,
            "ts": thread_ts,
        })

    # ─── Users ──────────────────────────────────────────────────

    async def get_users(self, limit: int, cursor: str | None = None) -> dict:
        params: dict[str, Any] = {"limit": limit, "team_id": self.team_id}
        if cursor:
            params["cursor"] = cursor
        return await self._get("users.list", params)

    async def get_user_profile(self, user_id: str) -> dict:
        return await self._get("users.profile.get", {
            "user": user_id,
            "include_labels": "true",
        })

    async def get_user_info(self, user_id: str) -> dict:
        return await self._get("users.info", {"user": user_id})

    # ─── Search ─────────────────────────────────────────────────

    async def search_messages(
        self,
        query: str,
        count: int,
        cursor: str | None = None,
        highlight: bool = False,
        sort: str | None = None,
        sort_dir: str | None = None,
    ) -> dict:
        params: dict[str, Any] = {
            "query": query,
            "count": count,
            "team_id": self.team_id,
        }
        if cursor:
            params["cursor"] = cursor
        if highlight:
            params["highlight"] = "true"
        if sort:
            params["sort"] = sort
        if sort_dir:
            params["sort_dir"] = sort_dir
        return await self._get("search.messages", params)

    # ─── Transport ──────────────────────────────────────────────

    async def _get(self, method: str, params: dict[str, Any]) -> dict:
        try:
            response = await self._http.get(method, params=params)
        except httpx.HTTPError as e:
            raise self._transport_failure(method, e) from e
        return self._decode(method, response)

    async def _post(self, method: str, body: dict[str, Any]) -> dict:
        try:
            response = await self._http.post(method, json=body)
        except httpx.HTTPError as e:
            raise self._transport_failure(method, e) from e
        return self._decode(method, response)

    def _transport_failure(self, method: str, e: httpx.HTTPError) -> UpstreamFailureError:
        logger.warning(
            f"Slack request failed: {type(e).__name__}: {e}",
            extra={"slack_method": method},
        )
        return UpstreamFailureError(str(e) or type(e).__name__, method)

    def _decode(self, method: str, response: httpx.Response) -> dict:
        """Decode a JSON object body; anything else is an upstream failure."""
        try:
            data = response.json()
        except ValueError:
            raise UpstreamFailureError(
                f"HTTP {response.status_code} with non-JSON body", method,
            )
        if not isinstance(data, dict):
            raise UpstreamFailureError("response body is not a JSON object", method)
        return data
