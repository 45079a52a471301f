"""Crawler package — Firecrawl client and the crawl-then-extract pipeline."""

from backend.crawler.client import CrawlerError, FirecrawlClient
from backend.crawler.models import CrawledPage, CrawlMode, ExtractionResult
from backend.crawler.pipeline import extract_emails_from_site

__all__ = [
    "FirecrawlClient",
    "CrawlerError",
    "CrawlMode",
    "CrawledPage",
    "ExtractionResult",
    "extract_emails_from_site",
]
