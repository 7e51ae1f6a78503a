"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI

from src.api.routes import router as pages_router
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Sign-up API v1 - Register accounts with the auth provider",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the shared auth provider HTTP client on startup
    - Closes it on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    if not settings.auth_configured:
        logger.warning(
            "SUPABASE_URL / SUPABASE_ANON_KEY not set - sign-up will report a configuration error"
        )

    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await app.state.http_client.aclose()
    logger.info("Auth provider HTTP client closed")


app = FastAPI(
    title="practice-english-web",
    description="英語学習チャット - Sign-up and home pages backed by Supabase Auth",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(pages_router)
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict[str, str | bool]:
    """
    Health check endpoint.

    Reports whether the auth provider configuration is present; the
    provider itself is not contacted.
    """
    return {"status": "healthy", "auth_configured": settings.auth_configured}
