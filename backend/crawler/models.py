"""Data models for the crawl-and-extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

UNKNOWN_TITLE = "Unknown Title"


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class CrawlMode(str, Enum):
    """How much of the target site the crawler is asked to fetch."""

    FAST = "fast"   # the single page at the URL
    DEEP = "deep"   # the URL plus linked pages, depth- and count-bounded


@dataclass
class CrawledPage:
    """Content returned by the crawler for one page."""

    markdown: str = ""
    html: str = ""
    title: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CrawledPage":
        """Build a page from a Firecrawl document object, tolerating missing keys."""
        metadata = payload.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}
        return cls(
            markdown=_text(payload.get("markdown")),
            html=_text(payload.get("html")),
            title=_text(metadata.get("title")) or None,
        )


@dataclass
class ExtractionResult:
    """Summary of one extraction run, returned to the caller as JSON."""

    url: str
    title: str
    crawl_mode: CrawlMode
    emails: List[str] = field(default_factory=list)
    pages_crawled: int = 1
    success: bool = True

    @property
    def count(self) -> int:
        return len(self.emails)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, with the camelCase keys the web client expects."""
        return {
            "success": self.success,
            "url": self.url,
            "title": self.title,
            "emails": list(self.emails),
            "count": self.count,
            "pagesCrawled": self.pages_crawled,
            "crawlMode": self.crawl_mode.value,
        }
