"""User Enrichment — adds resolved names next to every Slack user id in a payload.

Invariants:
    - An object is enriched iff its "user" field is a user id and it has no "user_display_name"
    - Enrichment only adds user_display_name + user_username; existing keys keep their values
    - Every nested object is checked independently (messages inside threads inside search results)
    - Array order is preserved; lookups for sibling elements run concurrently
    - Input payload is never mutated

Design Decisions:
    - Built on core.json_tree.amap_tree: same traversal as timestamp normalization,
      different visitor
    - Resolver failures are already degraded to the raw id: nothing to catch here
"""

from slackgate.core.domain_types import (
    USER_DISPLAY_NAME_FIELD, USER_FIELD, USER_USERNAME_FIELD,
    JsonObject, JsonValue, UserId, is_user_id,
)
from slackgate.core.json_tree import amap_tree
from slackgate.services.resolve_identity import IdentityResolver


def needs_enrichment(obj: JsonObject) -> bool:
    return is_user_id(obj.get(USER_FIELD)) and USER_DISPLAY_NAME_FIELD not in obj


async def enrich_users(payload: JsonValue, resolver: IdentityResolver) -> JsonValue:
    """Return payload with display name and username beside each user id."""

    async def visit(obj: JsonObject) -> JsonObject:
        if needs_enrichment(obj):
            identity = await resolver.resolve(UserId(obj[USER_FIELD]))
            obj[USER_DISPLAY_NAME_FIELD] = identity.display_name
            obj.setdefault(USER_USERNAME_FIELD, identity.username)
        return obj

    return await amap_tree(payload, visit)
