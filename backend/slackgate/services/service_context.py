"""Service Context — the process-lifetime objects behind every tool call.

Invariants:
    - Exactly one SlackClient, ResolutionCache, IdentityResolver, ToolDispatch per context
    - The resolver looks users up through the same SlackClient the tools use
    - build() refuses to start without credentials (ConfigurationError)
    - aclose() releases the HTTP connection pool; the cache dies with the context

Design Decisions:
    - Explicit context object over module-level singletons: the cache is passed by
      reference, tests build isolated contexts (ADR: no global import side effects)
    - Created in the FastAPI lifespan and stored on app.state
"""

from dataclasses import dataclass

from slackgate.config import Settings
from slackgate.core.errors import ConfigurationError
from slackgate.infrastructure.slack_client import SlackClient
from slackgate.services.resolve_identity import IdentityResolver, ResolutionCache
from slackgate.services.tool_dispatch import ToolDispatch


@dataclass
class ServiceContext:
    slack: SlackClient
    identity_cache: ResolutionCache
    resolver: IdentityResolver
    dispatch: ToolDispatch

    @classmethod
    def build(cls, settings: Settings) -> "ServiceContext":
        missing = settings.missing_credentials()
        if missing:
            raise ConfigurationError(missing)
        slack = SlackClient(
            token=settings.slack_token,
            team_id=settings.slack_team_id,
            base_url=settings.slack_api_base_url,
            timeout_seconds=settings.slack_timeout_seconds,
        )
        cache = ResolutionCache()
        resolver = IdentityResolver(slack.get_user_info, cache)
        return cls(
            slack=slack,
            identity_cache=cache,
            resolver=resolver,
            dispatch=ToolDispatch(slack, resolver),
        )

    async def aclose(self) -> None:
        await self.slack.aclose()
