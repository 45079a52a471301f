"""Email extraction package — regex match, dedupe, blocklist, sort."""

from backend.extraction.emails import extract_emails, join_content

__all__ = ["extract_emails", "join_content"]
