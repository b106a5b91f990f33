"""SlackGate API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery: ExMA anti-pattern)
    - Global error handlers map SlackGateError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - ServiceContext built on startup, closed on shutdown, via lifespan
    - Missing SLACK_TOKEN / SLACK_TEAM_ID is the only fatal condition: run() exits 1

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - run() checks credentials before uvicorn starts: the diagnostic lands on stderr
      instead of a stack trace from inside the ASGI server
    - Single-process uvicorn: the identity cache is per process, not shared across workers
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from slackgate.api.error_handlers import register_error_handlers
from slackgate.api.routes import health, tools
from slackgate.config import get_settings
from slackgate.core.errors import ConfigurationError
from slackgate.infrastructure.observability import setup_logging
from slackgate.services.service_context import ServiceContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.context = ServiceContext.build(settings)
    logger.info("SlackGate API started")
    yield
    logger.info("SlackGate API shutting down")
    await app.state.context.aclose()
    app.state.context = None


app = FastAPI(title="SlackGate API", version="1.0.0", lifespan=lifespan)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(tools.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: validate credentials, then serve with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    missing = settings.missing_credentials()
    if missing:
        error = ConfigurationError(missing)
        logger.critical(error.message, extra={"error_code": error.code})
        sys.exit(1)

    logger.info("Starting SlackGate server...")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
