"""Thin client for the Firecrawl content API.

Two request shapes are supported, selected by :class:`CrawlMode`:

``fast``
    ``POST /v1/scrape`` — one page, markdown and HTML, 30 s page timeout.
``deep``
    ``POST /v1/crawl`` — up to 10 pages, link depth 2, markdown only,
    60 s per-page timeout.

Both return a list of :class:`CrawledPage`.  A response whose ``success``
flag is not true raises :class:`CrawlerError` with the remote message.
Nothing is retried.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import httpx

from backend.config import Settings
from backend.crawler.models import CrawledPage, CrawlMode

SCRAPE_TIMEOUT_MS = 30_000
CRAWL_PAGE_TIMEOUT_MS = 60_000
CRAWL_MAX_DEPTH = 2
CRAWL_PAGE_LIMIT = 10


class CrawlerError(Exception):
    """Raised when Firecrawl cannot be reached or reports a failure."""


# ---------------------------------------------------------------------------
# Request builders / response parsers, one pair per mode
# ---------------------------------------------------------------------------

def build_scrape_payload(url: str) -> Dict[str, Any]:
    return {
        "url": url,
        "formats": ["markdown", "html"],
        "timeout": SCRAPE_TIMEOUT_MS,
    }


def build_crawl_payload(url: str) -> Dict[str, Any]:
    return {
        "url": url,
        "maxDepth": CRAWL_MAX_DEPTH,
        "limit": CRAWL_PAGE_LIMIT,
        "scrapeOptions": {
            "formats": ["markdown"],
            "timeout": CRAWL_PAGE_TIMEOUT_MS,
        },
    }


def _parse_scrape(body: Dict[str, Any]) -> List[CrawledPage]:
    # A successful scrape always counts as one page, even if it came back empty.
    data = body.get("data")
    return [CrawledPage.from_payload(data if isinstance(data, dict) else {})]


def _parse_crawl(body: Dict[str, Any]) -> List[CrawledPage]:
    data = body.get("data")
    if not isinstance(data, list):
        return []
    return [CrawledPage.from_payload(item) for item in data if isinstance(item, dict)]


@dataclass(frozen=True)
class _Endpoint:
    path: str
    build: Callable[[str], Dict[str, Any]]
    parse: Callable[[Dict[str, Any]], List[CrawledPage]]
    failure_message: str


_ENDPOINTS: Dict[CrawlMode, _Endpoint] = {
    CrawlMode.FAST: _Endpoint(
        path="/v1/scrape",
        build=build_scrape_payload,
        parse=_parse_scrape,
        failure_message="Unable to scrape webpage content",
    ),
    CrawlMode.DEEP: _Endpoint(
        path="/v1/crawl",
        build=build_crawl_payload,
        parse=_parse_crawl,
        failure_message="Unable to perform deep crawling",
    ),
}


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------

class FirecrawlClient:
    """Issue scrape / crawl requests against a Firecrawl deployment."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.firecrawl.dev",
        http_timeout: float = 120.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.http_timeout = http_timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirecrawlClient":
        return cls(
            api_key=settings.firecrawl_api_key,
            base_url=settings.firecrawl_base_url,
            http_timeout=settings.firecrawl_http_timeout,
        )

    def fetch(self, url: str, mode: CrawlMode) -> List[CrawledPage]:
        """Fetch *url* using the request shape registered for *mode*."""
        endpoint = _ENDPOINTS[CrawlMode(mode)]
        body = self._post(endpoint.path, endpoint.build(url))

        if body.get("success") is not True:
            message = body.get("error") or endpoint.failure_message
            print(f"[Firecrawl] {endpoint.path} failed for {url}: {message}")
            raise CrawlerError(str(message))

        return endpoint.parse(body)

    def scrape(self, url: str) -> List[CrawledPage]:
        return self.fetch(url, CrawlMode.FAST)

    def crawl(self, url: str) -> List[CrawledPage]:
        return self.fetch(url, CrawlMode.DEEP)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        # Firecrawl reports failures as JSON with a 4xx/5xx status, so the
        # body is parsed regardless of status code.
        try:
            with httpx.Client(timeout=self.http_timeout) as client:
                resp = client.post(
                    f"{self.base_url}{path}",
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except httpx.HTTPError as exc:
            raise CrawlerError(f"Firecrawl request failed: {exc}") from exc

        try:
            body = resp.json()
        except ValueError as exc:
            raise CrawlerError(
                f"Firecrawl returned a non-JSON response (HTTP {resp.status_code})"
            ) from exc

        if not isinstance(body, dict):
            raise CrawlerError(
                f"Firecrawl returned an unexpected response (HTTP {resp.status_code})"
            )
        return body
