"""Cloudflare Turnstile token verification.

The browser widget hands the client an opaque token; the server forwards it,
together with the caller's IP and the site secret, to Cloudflare's
``siteverify`` endpoint.  Any transport failure or a verdict other than a
literal ``true`` counts as a failed verification.  In development mode the
check is skipped entirely and no network call is made.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from backend.config import Settings

_DEFAULT_IP = "127.0.0.1"


def client_ip(headers: Mapping[str, str], fallback: str = _DEFAULT_IP) -> str:
    """Resolve the caller's IP from proxy headers.

    ``X-Forwarded-For`` may hold a chain of hops; the first one is the client.
    """
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return fallback


def verify_token(token: Optional[str], ip: str, settings: Settings) -> bool:
    """Return ``True`` when Cloudflare accepts *token* for *ip*."""
    if settings.captcha_bypass:
        print("[Turnstile] Development mode: skipping verification")
        return True

    if not settings.turnstile_secret_key:
        print("[Turnstile] Missing Turnstile secret key")
        return False

    try:
        with httpx.Client(timeout=settings.turnstile_timeout) as client:
            resp = client.post(
                settings.turnstile_verify_url,
                data={
                    "secret": settings.turnstile_secret_key,
                    "response": token or "",
                    "remoteip": ip,
                },
            )
            result = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        print(f"[Turnstile] verification request failed: {exc}")
        return False

    return isinstance(result, dict) and result.get("success") is True
