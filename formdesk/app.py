from __future__ import annotations

import logging
import math
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from formdesk.application import SubmissionService, configure_submission_service
from formdesk.core.config import Settings, load_settings
from formdesk.infrastructure import (
    FixedWindowRateLimiter,
    JsonFileStore,
    StaticTokenAuthenticator,
    StorageCorruptError,
    configure_authenticator,
)
from formdesk.routes import admin, bot, form, health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Formdesk Submissions API", version="0.1.0")
    app.state.started_at = time.monotonic()
    app.state.settings = settings

    if not settings.api_key:
        logger.warning("API_KEY is not set; all protected routes will answer 401")
    configure_authenticator(StaticTokenAuthenticator(settings.api_key))
    configure_submission_service(SubmissionService(JsonFileStore(settings.db_file)))

    limiter = FixedWindowRateLimiter(settings.rate_limit_per_minute, window_seconds=60.0)
    app.state.rate_limiter = limiter

    @app.middleware("http")
    async def rate_limit(request: Request, call_next):
        client = request.client.host if request.client else "unknown"
        retry_after = limiter.hit(client)
        if retry_after is not None:
            logger.warning("rate limit exceeded for %s", client)
            return JSONResponse(
                {"detail": "Too many requests"},
                status_code=429,
                headers={"Retry-After": str(max(1, math.ceil(retry_after)))},
            )
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorageCorruptError)
    async def storage_corrupt(request: Request, exc: StorageCorruptError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse({"detail": "storage is corrupt"}, status_code=500)

    app.include_router(health.router)
    app.include_router(form.router)
    app.include_router(admin.router)
    app.include_router(bot.router)

    return app


app = create_app()
