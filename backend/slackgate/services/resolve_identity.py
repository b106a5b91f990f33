"""Identity Resolution — single-flight, cache-first lookup of Slack user names.

Invariants:
    - At most one users.info call in flight per user id: concurrent callers await the same task
    - The task is stored in the cache BEFORE the first await, so no caller can race past it
    - Resolved identities are kept for the process lifetime (no TTL, no eviction)
    - Unresolved lookups are dropped from the cache once finished, so the next call retries
    - resolve() never raises: failures degrade to {display_name: id, username: id} and are logged
    - Cancelling one waiter never cancels the shared lookup (asyncio.shield)

Design Decisions:
    - ResolutionCache is an explicit object owned by the ServiceContext, not module state:
      tests and future multi-context setups get isolated caches
    - Cache holds asyncio.Task[LookupResult], not records: an in-flight lookup and a finished
      one are looked up the same way
    - No timeout of our own: the httpx client timeout bounds every lookup
    - Unbounded growth accepted: one entry per distinct user seen, workspace-sized
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from slackgate.core.domain_types import UserId
from slackgate.core.identity import (
    IdentityRecord, IdentityResolved, IdentityUnresolved, LookupResult,
    parse_user_info,
)

logger = logging.getLogger(__name__)

UserInfoFetcher = Callable[[str], Awaitable[dict]]


class ResolutionCache:
    """Process-wide map of user id -> in-flight or finished lookup."""

    def __init__(self):
        self._entries: dict[UserId, asyncio.Task[LookupResult]] = {}

    def get(self, user_id: UserId) -> asyncio.Task[LookupResult] | None:
        return self._entries.get(user_id)

    def put(self, user_id: UserId, lookup: asyncio.Task[LookupResult]) -> None:
        self._entries[user_id] = lookup

    def discard(self, user_id: UserId, lookup: asyncio.Task[LookupResult]) -> None:
        """Drop user_id only if it still maps to this exact lookup."""
        if self._entries.get(user_id) is lookup:
            del self._entries[user_id]

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class IdentityResolver:
    """Resolves user ids to IdentityRecords through a shared ResolutionCache."""

    def __init__(self, fetch_user_info: UserInfoFetcher, cache: ResolutionCache):
        self._fetch_user_info = fetch_user_info
        self._cache = cache

    async def resolve(self, user_id: UserId) -> IdentityRecord:
        """Name and handle for user_id; the raw id for both when unresolvable."""
        match await self.lookup(user_id):
            case IdentityResolved(record=record):
                return record
            case IdentityUnresolved():
                return IdentityRecord.unresolved(user_id)

    async def lookup(self, user_id: UserId) -> LookupResult:
        pending = self._cache.get(user_id)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(user_id))
            self._cache.put(user_id, pending)
            pending.add_done_callback(
                lambda task: self._forget_if_unresolved(user_id, task),
            )
        return await asyncio.shield(pending)

    async def _fetch(self, user_id: UserId) -> LookupResult:
        try:
            payload = await self._fetch_user_info(user_id)
        except Exception as e:
            result: LookupResult = IdentityUnresolved(user_id, f"{type(e).__name__}: {e}")
        else:
            result = parse_user_info(user_id, payload)
        if isinstance(result, IdentityUnresolved):
            logger.warning(
                f"Failed to resolve user {user_id}: {result.reason}",
                extra={"user_id": user_id, "reason": result.reason},
            )
        return result

    def _forget_if_unresolved(
        self, user_id: UserId, task: asyncio.Task[LookupResult],
    ) -> None:
        if (
            task.cancelled()
            or task.exception() is not None
            or isinstance(task.result(), IdentityUnresolved)
        ):
            self._cache.discard(user_id, task)
