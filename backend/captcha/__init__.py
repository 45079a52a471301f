"""Captcha package — server-side Cloudflare Turnstile verification."""

from backend.captcha.turnstile import client_ip, verify_token

__all__ = ["verify_token", "client_ip"]
