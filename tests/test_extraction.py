"""Tests for the email extraction filter.

Pure string-in / list-out; no mocking needed.
"""

from __future__ import annotations

from backend.extraction import extract_emails, join_content


class TestExtractEmails:
    def test_no_matches_returns_empty(self) -> None:
        assert extract_emails("") == []
        assert extract_emails("Call us on 555-0100, no email here. @ handle") == []

    def test_single_email(self) -> None:
        assert extract_emails("Write to sales@acme.io today") == ["sales@acme.io"]

    def test_duplicates_collapse(self) -> None:
        content = "info@acme.io and again info@acme.io, info@acme.io"
        assert extract_emails(content) == ["info@acme.io"]

    def test_case_variants_are_distinct(self) -> None:
        content = "Contact: a@b.com, A@B.COM, noreply@x.com, img@site.png"
        assert extract_emails(content) == ["A@B.COM", "a@b.com"]

    def test_output_is_sorted(self) -> None:
        content = "zoe@z.org bob@b.net alice@a.com mike@m.co"
        result = extract_emails(content)
        assert result == sorted(result)
        assert result == ["alice@a.com", "bob@b.net", "mike@m.co", "zoe@z.org"]

    def test_asset_suffixes_excluded(self) -> None:
        content = " ".join(
            f"logo@2x.{ext}" for ext in ("png", "JPG", "jpeg", "gif", "svg", "css", "js", "pdf")
        )
        assert extract_emails(content) == []

    def test_asset_suffix_only_at_end(self) -> None:
        assert extract_emails("ops@png.support.com") == ["ops@png.support.com"]

    def test_no_reply_prefixes_excluded(self) -> None:
        content = "noreply@acme.io no-reply@acme.io DoNotReply@acme.io team@acme.io"
        assert extract_emails(content) == ["team@acme.io"]

    def test_example_domains_excluded(self) -> None:
        content = "you@example.com someone@mail.example.org real@acme.io"
        assert extract_emails(content) == ["real@acme.io"]

    def test_email_inside_html(self) -> None:
        html = '<a href="mailto:hello@studio.design">hello@studio.design</a>'
        assert extract_emails(html) == ["hello@studio.design"]

    def test_trailing_punctuation_not_captured(self) -> None:
        assert extract_emails("Reach us at press@acme.io.") == ["press@acme.io"]


class TestJoinContent:
    def test_joins_with_single_space(self) -> None:
        assert join_content(["a", "b"]) == "a b"

    def test_none_treated_as_empty(self) -> None:
        assert join_content([None, "html"]) == " html"
