"""FastAPI application factory.

Configuration
-------------
``create_app`` takes the :class:`~backend.config.Settings` to run with and
stores it on ``app.state.settings``; request handlers read it from there.
When no settings are passed the environment-derived default is used.

Routers
-------
    /api/extract-emails  — captcha check, crawl, email extraction
    /health              — liveness probe
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.errors import register_error_handlers
from backend.config import Settings, settings as default_settings

from backend.api.routers import extract as extract_router
from backend.api.routers import health as health_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    settings = settings or default_settings

    app = FastAPI(
        title="Email Extractor API",
        description=(
            "Crawls a website through Firecrawl and returns the email "
            "addresses found in its content. Requests are gated by a "
            "Cloudflare Turnstile captcha."
        ),
        version="0.1.0",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(extract_router.router, prefix="/api", tags=["extract"])
    app.include_router(health_router.router, prefix="/health", tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn backend.api.app:app --reload
app = create_app()
