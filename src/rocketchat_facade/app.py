"""FastAPI application with lifespan, error handlers and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rocketchat_facade.api.router import router as rocketchat_router
from rocketchat_facade.config import get_settings
from rocketchat_facade.errors import RocketChatError
from rocketchat_facade.logging_config import configure_logging
from rocketchat_facade.rocketchat.client import close_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging on startup, close the HTTP client on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield
    await close_client()


app = FastAPI(
    title="Rocket.Chat Facade",
    lifespan=lifespan,
)
app.include_router(rocketchat_router)


@app.exception_handler(RocketChatError)
async def rocketchat_error_handler(request: Request, exc: RocketChatError) -> JSONResponse:
    """Render any client error as a structured non-2xx body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "error",
            "error": type(exc).__name__,
            "message": exc.detail,
        },
    )


@app.exception_handler(ValidationError)
async def malformed_payload_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """An upstream payload failed translation (e.g. an unparsable timestamp)."""
    logger.error("Malformed Rocket.Chat payload on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=502,
        content={
            "status": "error",
            "error": "MalformedPayload",
            "message": f"Malformed response from Rocket.Chat: {exc.error_count()} invalid field(s)",
        },
    )


@app.get("/health")
async def health():
    """Health check endpoint for container probes and local development."""
    return {
        "status": "ok",
        "service": "rocketchat-facade",
        "version": "0.1.0",
    }
