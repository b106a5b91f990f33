"""Identity — resolved user names and the result union returned by identity lookups.

Invariants:
    - IdentityRecord fields are never empty: the raw user id is the last fallback
    - display_name prefers profile.display_name > real_name > profile.real_name > name > id
    - username prefers name > id
    - parse_user_info() never raises: any unusable payload becomes IdentityUnresolved

Design Decisions:
    - Result union (IdentityResolved | IdentityUnresolved) over exceptions at the resolver
      boundary: a failed lookup is an expected outcome, not control flow
    - Pure parsing kept in core/ so the users.info shape is tested without IO
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

from slackgate.core.domain_types import UserId


@dataclass(frozen=True)
class IdentityRecord:
    """Human-readable name and handle for a Slack user id."""
    display_name: str
    username: str

    @classmethod
    def unresolved(cls, user_id: UserId) -> "IdentityRecord":
        return cls(display_name=user_id, username=user_id)


@dataclass(frozen=True)
class IdentityResolved:
    record: IdentityRecord


@dataclass(frozen=True)
class IdentityUnresolved:
    user_id: UserId
    reason: str


LookupResult: TypeAlias = IdentityResolved | IdentityUnresolved


def _first_text(*candidates: Any) -> str | None:
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    return None


def parse_user_info(user_id: UserId, payload: Any) -> LookupResult:
    """Build a LookupResult from a users.info response body."""
    if not isinstance(payload, dict):
        return IdentityUnresolved(user_id, "invalid_response")
    if not payload.get("ok"):
        return IdentityUnresolved(user_id, str(payload.get("error") or "not_ok"))
    user = payload.get("user")
    if not isinstance(user, dict):
        return IdentityUnresolved(user_id, "user_missing")

    raw_profile = user.get("profile")
    profile = raw_profile if isinstance(raw_profile, dict) else {}
    name = _first_text(user.get("name"))
    display_name = _first_text(
        profile.get("display_name"),
        user.get("real_name"),
        profile.get("real_name"),
        name,
    )
    return IdentityResolved(IdentityRecord(
        display_name=display_name or user_id,
        username=name or user_id,
    ))
