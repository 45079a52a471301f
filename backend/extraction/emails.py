"""Pull email addresses out of fetched page content."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# ---------------------------------------------------------------------------
# Blocklist — matches that look like emails but are asset names, automated
# senders, or documentation placeholders.
# ---------------------------------------------------------------------------
_BLOCKED_PATTERNS = [
    re.compile(r"\.(png|jpg|jpeg|gif|svg|css|js|pdf)$", re.IGNORECASE),
    re.compile(r"^(no-reply|noreply|donotreply)@", re.IGNORECASE),
    re.compile(r"example\.(com|org)", re.IGNORECASE),
]


def _is_blocked(email: str) -> bool:
    for pattern in _BLOCKED_PATTERNS:
        if pattern.search(email):
            return True
    return False


def join_content(parts: Iterable[Optional[str]]) -> str:
    """Concatenate fetched fields with a single space, treating ``None`` as empty."""
    return " ".join(part or "" for part in parts)


def extract_emails(content: str) -> List[str]:
    """Return the unique, filtered email addresses found in *content*, sorted.

    Deduplication is by exact string, so ``a@b.com`` and ``A@B.COM`` are
    both kept.  Content without any match yields ``[]``.
    """
    seen: set[str] = set()
    for match in _EMAIL_RE.finditer(content):
        seen.add(match.group(0))
    return sorted(email for email in seen if not _is_blocked(email))
