"""Error Handlers — map every failure outside a tool call onto the SlackGateError envelope.

Invariants:
    - Every non-2xx body is SlackGateError.to_response(): one shape for agents to parse
    - Malformed request bodies → 400 INVALID_ARGUMENTS naming the offending field
    - Anything else → 500 INTERNAL_ERROR, details only in the log
    - Tool-call failures never reach these handlers: ToolDispatch converts them first

Design Decisions:
    - Request validation reuses InvalidArgumentsError: a bad body and a bad tool argument
      are the same caller mistake
    - Sole domain source is get_dispatch (no service context), logged once here
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from slackgate.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidArgumentsError, SlackGateError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SlackGateError, _handle_slackgate_error)
    app.add_exception_handler(RequestValidationError, _handle_invalid_request)
    app.add_exception_handler(Exception, _handle_unexpected)


def _respond(exc: SlackGateError, **extra) -> JSONResponse:
    body = exc.to_response()
    body["error"].update(extra)
    return JSONResponse(status_code=exc.http_status, content=body)


async def _handle_slackgate_error(request: Request, exc: SlackGateError) -> JSONResponse:
    logger.error(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _respond(exc)


async def _handle_invalid_request(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    problems = [
        {
            "field": ".".join(str(loc) for loc in e["loc"] if loc != "body"),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    first = problems[0] if problems else {"field": "body", "message": "invalid"}
    error = InvalidArgumentsError(
        f"Invalid tool call: {first['field'] or 'body'}: {first['message']}",
    )
    logger.warning(error.message, extra={"error_code": error.code, "path": request.url.path})
    return _respond(error, details=problems)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"path": request.url.path},
        exc_info=True,
    )
    return _respond(SlackGateError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    ))
