"""Email extraction endpoint.

Routes
------
POST /api/extract-emails   Body: {"url": ..., "crawlMode": "fast"|"deep",
                                  "turnstileToken": ...}

Checks run in a fixed order and the first failure ends the request, so a
request rejected for its input never reaches Cloudflare or Firecrawl.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Request
from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from backend.api.errors import ApiError
from backend.captcha import client_ip, verify_token
from backend.config import Settings
from backend.crawler import CrawlMode, FirecrawlClient, extract_emails_from_site

router = APIRouter()

_URL_ADAPTER = TypeAdapter(AnyUrl)


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ExtractRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    crawl_mode: Optional[str] = Field(None, alias="crawlMode")
    turnstile_token: Optional[str] = Field(None, alias="turnstileToken")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_valid_url(url: str) -> bool:
    try:
        _URL_ADAPTER.validate_python(url)
    except ValidationError:
        return False
    return True


def _parse_mode(value: Optional[str]) -> Optional[CrawlMode]:
    if value is None:
        return CrawlMode.FAST
    try:
        return CrawlMode(value)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.post("/extract-emails")
def extract_emails_endpoint(body: ExtractRequest, request: Request) -> dict[str, Any]:
    """Verify the captcha, crawl the URL and return the emails found there."""
    settings: Settings = request.app.state.settings

    if not body.url:
        raise ApiError(400, "Please provide a valid website URL")

    if not body.turnstile_token and not settings.captcha_bypass:
        raise ApiError(400, "Please complete the captcha verification")

    if not settings.turnstile_secret_key and not settings.captcha_bypass:
        raise ApiError(500, "Server configuration error: Missing Turnstile secret key")

    ip = client_ip(request.headers)
    if not verify_token(body.turnstile_token, ip, settings):
        raise ApiError(400, "Captcha verification failed, please try again")

    if not _is_valid_url(body.url):
        raise ApiError(400, "Please provide a valid URL format")

    mode = _parse_mode(body.crawl_mode)
    if mode is None:
        raise ApiError(400, "Please choose a valid crawl mode (fast or deep)")

    if not settings.firecrawl_api_key:
        raise ApiError(500, "Server configuration error: Missing API key")

    client = FirecrawlClient.from_settings(settings)
    try:
        result = extract_emails_from_site(body.url, mode, client)
    except Exception as exc:
        print(f"[extract-emails] error extracting emails from {body.url}: {exc}")
        raise ApiError(500, "Internal server error", details=str(exc)) from exc

    print(
        f"[extract-emails] {result.crawl_mode.value} {result.url}: "
        f"{result.count} email(s) across {result.pages_crawled} page(s)"
    )
    return result.to_dict()
