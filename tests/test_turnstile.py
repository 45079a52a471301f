"""Tests for Cloudflare Turnstile verification.

``respx`` patches ``httpx`` at the transport layer so no request ever leaves
the process.
"""

from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest
import respx

from backend.captcha import client_ip, verify_token
from backend.config import Settings

_VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


@pytest.fixture()
def prod_settings() -> Settings:
    return Settings(app_env="production", turnstile_secret_key="ts-secret")


class TestVerifyToken:
    def test_success_verdict(self, prod_settings: Settings) -> None:
        with respx.mock:
            route = respx.post(_VERIFY_URL).mock(
                return_value=httpx.Response(200, json={"success": True})
            )
            assert verify_token("tok", "203.0.113.7", prod_settings) is True

        sent = parse_qs(route.calls.last.request.content.decode())
        assert sent == {
            "secret": ["ts-secret"],
            "response": ["tok"],
            "remoteip": ["203.0.113.7"],
        }

    def test_false_verdict(self, prod_settings: Settings) -> None:
        with respx.mock:
            respx.post(_VERIFY_URL).mock(
                return_value=httpx.Response(
                    200, json={"success": False, "error-codes": ["invalid-input-response"]}
                )
            )
            assert verify_token("bad", "127.0.0.1", prod_settings) is False

    def test_truthy_non_boolean_is_rejected(self, prod_settings: Settings) -> None:
        with respx.mock:
            respx.post(_VERIFY_URL).mock(
                return_value=httpx.Response(200, json={"success": "true"})
            )
            assert verify_token("tok", "127.0.0.1", prod_settings) is False

    def test_network_failure_is_rejected(self, prod_settings: Settings) -> None:
        with respx.mock:
            respx.post(_VERIFY_URL).mock(side_effect=httpx.ConnectError("down"))
            assert verify_token("tok", "127.0.0.1", prod_settings) is False

    def test_non_json_body_is_rejected(self, prod_settings: Settings) -> None:
        with respx.mock:
            respx.post(_VERIFY_URL).mock(
                return_value=httpx.Response(502, text="<html>Bad gateway</html>")
            )
            assert verify_token("tok", "127.0.0.1", prod_settings) is False

    def test_missing_secret_fails_without_network(self) -> None:
        settings = Settings(app_env="production", turnstile_secret_key="")
        with respx.mock(assert_all_called=False) as router:
            route = router.post(_VERIFY_URL)
            assert verify_token("tok", "127.0.0.1", settings) is False
        assert not route.called

    def test_development_bypass_skips_network(self) -> None:
        settings = Settings(app_env="development", turnstile_secret_key="")
        with respx.mock(assert_all_called=False) as router:
            route = router.post(_VERIFY_URL)
            assert verify_token(None, "127.0.0.1", settings) is True
        assert not route.called


class TestClientIp:
    def test_first_forwarded_hop(self) -> None:
        headers = {"x-forwarded-for": "198.51.100.4, 10.0.0.1"}
        assert client_ip(headers) == "198.51.100.4"

    def test_real_ip_header(self) -> None:
        assert client_ip({"x-real-ip": "198.51.100.9"}) == "198.51.100.9"

    def test_forwarded_wins_over_real_ip(self) -> None:
        headers = {"x-forwarded-for": "198.51.100.4", "x-real-ip": "198.51.100.9"}
        assert client_ip(headers) == "198.51.100.4"

    def test_default_loopback(self) -> None:
        assert client_ip({}) == "127.0.0.1"
