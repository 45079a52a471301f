"""Crawl a URL and extract the email addresses from what comes back."""

from __future__ import annotations

from backend.crawler.client import FirecrawlClient
from backend.crawler.models import UNKNOWN_TITLE, CrawlMode, ExtractionResult
from backend.extraction import extract_emails, join_content


def extract_emails_from_site(
    url: str,
    mode: CrawlMode,
    client: FirecrawlClient,
) -> ExtractionResult:
    """Run one crawl of *url* in *mode* and return the extraction summary.

    Exactly one request is made to Firecrawl.  The title comes from the first
    page's metadata, falling back to ``"Unknown Title"``.

    Raises:
        CrawlerError: If Firecrawl is unreachable or reports a failure.
    """
    mode = CrawlMode(mode)
    pages = client.fetch(url, mode)

    content = join_content(
        join_content([page.markdown, page.html]) for page in pages
    )
    emails = extract_emails(content)

    title = UNKNOWN_TITLE
    if pages and pages[0].title:
        title = pages[0].title

    return ExtractionResult(
        url=url,
        title=title,
        crawl_mode=mode,
        emails=emails,
        pages_crawled=len(pages),
    )
