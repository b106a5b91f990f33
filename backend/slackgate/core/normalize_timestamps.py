"""Timestamp Normalization — rewrites Slack epoch-second strings into ISO-8601 instants.

Invariants:
    - Only fields named ts / thread_ts / timestamp or ending in _ts are candidates
    - Only string values matching ^[0-9]+(\\.[0-9]+)?$ are converted
    - Output format: UTC, millisecond precision, "Z" suffix ("2023-11-14T22:13:20.123Z")
    - Idempotent: converted values no longer match the numeric predicate
    - Never raises: malformed or out-of-range values are left untouched

Design Decisions:
    - Integer arithmetic on the digit string, never float or Decimal: "1700000000.123456"
      must not drift to .122999, and long fractions must not round up into the next second
    - Sub-millisecond digits truncated, matching the instant formatting agents already see
      from other Slack tooling
    - Permissive by policy: one bad field never fails the whole response
"""

from datetime import datetime, timedelta, timezone

from slackgate.core.domain_types import (
    EPOCH_SECONDS_PATTERN, TIMESTAMP_KEYS, TIMESTAMP_SUFFIX,
    JsonObject, JsonValue,
)
from slackgate.core.json_tree import map_tree

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_timestamp_key(key: str) -> bool:
    return key in TIMESTAMP_KEYS or key.endswith(TIMESTAMP_SUFFIX)


def epoch_seconds_to_iso(value: str) -> str | None:
    """Convert "1700000000.123456" to ISO-8601, or None if not an epoch-seconds string."""
    if EPOCH_SECONDS_PATTERN.fullmatch(value) is None:
        return None
    seconds, _, fraction = value.partition(".")
    try:
        millis = int(seconds) * 1000 + int(fraction[:3].ljust(3, "0"))
        instant = _EPOCH + timedelta(milliseconds=millis)
    except (ValueError, OverflowError):
        return None
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _convert_fields(obj: JsonObject) -> JsonObject:
    for key, value in obj.items():
        if is_timestamp_key(key) and isinstance(value, str):
            iso = epoch_seconds_to_iso(value)
            if iso is not None:
                obj[key] = iso
    return obj


def normalize_timestamps(payload: JsonValue) -> JsonValue:
    """Return payload with every Slack timestamp field rewritten to ISO-8601."""
    return map_tree(payload, _convert_fields)
