"""Centralised settings for the Email Extractor backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The API never reads ``os.environ`` directly: a :class:`Settings` instance is
handed to :func:`backend.api.app.create_app` at startup and every request
handler reads it back from ``request.app.state.settings``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------
    app_env: str = field(
        default_factory=lambda: os.environ.get("APP_ENV", "production")
    )

    @property
    def captcha_bypass(self) -> bool:
        """``True`` in local development, where captcha checks are skipped."""
        return self.app_env.strip().lower() == "development"

    # ------------------------------------------------------------------
    # Cloudflare Turnstile
    # ------------------------------------------------------------------
    turnstile_secret_key: str = field(
        default_factory=lambda: os.environ.get("TURNSTILE_SECRET_KEY", "")
    )
    turnstile_verify_url: str = field(
        default_factory=lambda: os.environ.get(
            "TURNSTILE_VERIFY_URL",
            "https://challenges.cloudflare.com/turnstile/v0/siteverify",
        )
    )
    turnstile_timeout: float = field(
        default_factory=lambda: float(os.environ.get("TURNSTILE_TIMEOUT", "10.0"))
    )

    # ------------------------------------------------------------------
    # Firecrawl
    # ------------------------------------------------------------------
    firecrawl_api_key: str = field(
        default_factory=lambda: os.environ.get("FIRECRAWL_API_KEY", "")
    )
    firecrawl_base_url: str = field(
        default_factory=lambda: os.environ.get(
            "FIRECRAWL_BASE_URL", "https://api.firecrawl.dev"
        )
    )
    # Client-side ceiling; must exceed the per-page timeouts sent to Firecrawl.
    firecrawl_http_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FIRECRAWL_HTTP_TIMEOUT", "120.0"))
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.environ.get("CORS_ORIGINS", "*"))
    )


# Default instance for the CLI and the uvicorn entry point:
#   from backend.config import settings
settings = Settings()
