"""Tool Routes — list the tool catalog and call a tool by name.

Invariants:
    - GET /api/v1/tools returns the catalog in registry order
    - POST /api/v1/tools/call answers 200 for every well-formed call: tool failures
      live inside the text payload as {"error": ...}, never as an HTTP error
    - Malformed request bodies fail validation (400) before reaching dispatch

Design Decisions:
    - Dispatch injected via get_dispatch dependency: tests override it with a fake gateway
"""

from fastapi import APIRouter, Depends, Request

from slackgate.core.errors import ConfigurationError
from slackgate.schemas.tools import (
    ToolCallRequest, ToolCallResponse, ToolListResponse,
)
from slackgate.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


def get_dispatch(request: Request) -> ToolDispatch:
    """ToolDispatch from the service context created at startup."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise ConfigurationError(["SLACK_TOKEN", "SLACK_TEAM_ID"])
    return context.dispatch


@router.get("", response_model=ToolListResponse)
async def list_tools(dispatch: ToolDispatch = Depends(get_dispatch)):
    return {"tools": dispatch.list_tools()}


@router.post("/call", response_model=ToolCallResponse)
async def call_tool(
    body: ToolCallRequest, dispatch: ToolDispatch = Depends(get_dispatch),
):
    return await dispatch.execute(body.name, body.arguments)
