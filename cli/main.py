"""Email Extractor CLI — entry-point for local runs and the API server.

Usage:
    python cli/main.py --help

Commands:
    extract   crawl a URL through Firecrawl and print the emails found
    scan      extract emails from a local file (or stdin)
    serve     run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json

import typer

from backend.config import settings
from backend.crawler import CrawlerError, CrawlMode, FirecrawlClient, extract_emails_from_site
from backend.extraction import extract_emails

app = typer.Typer(
    name="email-extractor",
    help="Find email addresses on websites via Firecrawl.",
    no_args_is_help=True,
)


@app.command("extract")
def extract(
    url: str = typer.Argument(..., help="Website URL to crawl."),
    mode: CrawlMode = typer.Option(
        CrawlMode.FAST, "--mode", help="fast = single page, deep = up to 10 linked pages."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
) -> None:
    """Crawl URL and print the email addresses found on it."""
    if not settings.firecrawl_api_key:
        typer.echo("[extract] FIRECRAWL_API_KEY is not set.", err=True)
        raise typer.Exit(code=1)

    client = FirecrawlClient.from_settings(settings)
    if not as_json:
        typer.echo(f"[extract] Crawling {url!r} ({mode.value}) …")
    try:
        result = extract_emails_from_site(url, mode, client)
    except CrawlerError as exc:
        typer.echo(f"[extract] Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    typer.echo(f"[extract] Title  : {result.title}")
    typer.echo(f"[extract] Pages  : {result.pages_crawled}")
    typer.echo(f"[extract] Emails : {result.count}")
    if result.emails:
        typer.echo("")
        for email in result.emails:
            typer.echo(email)


@app.command("scan")
def scan(
    path: str = typer.Argument(..., help="Text/HTML file to scan, or '-' for stdin."),
) -> None:
    """Extract email addresses from a local file, one per line."""
    if path == "-":
        content = sys.stdin.read()
    else:
        source = Path(path)
        if not source.is_file():
            typer.echo(f"[scan] No such file: {path}", err=True)
            raise typer.Exit(code=1)
        content = source.read_text(encoding="utf-8", errors="replace")

    for email in extract_emails(content):
        typer.echo(email)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    typer.echo(f"[serve] Listening on http://{host}:{port}")
    uvicorn.run("backend.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
