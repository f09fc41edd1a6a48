"""Tests for redaction, masking and message-list sanitizing."""

import pytest

from content_gate import (
    Category, Redactor, RedactorConfig, mask_personal_info, redact, sanitize_message,
)


# ── redact() ─────────────────────────────────────────────────────────

def test_redact_email():
    assert redact("reach me at john.doe@example.com") == "reach me at [redacted]"


def test_redact_phone():
    assert redact("call me at (555) 123-4567") == "call me at [redacted]"


def test_redact_every_occurrence():
    out = redact("a@b.com, c@d.com")
    assert "a@b.com" not in out
    assert "c@d.com" not in out
    assert out.count("[redacted]") == 2


def test_redact_website():
    assert redact("visit www.site.com today") == "visit [redacted] today"


def test_redact_ignores_phrase_list():
    text = "please contact me later"
    assert redact(text) == text


def test_redact_clean_text_unchanged():
    text = "I love this dress, is it available in size M?"
    assert redact(text) == text


def test_categories_applied_in_order_on_overlap():
    # Email runs before websites, so the URL prefix is redacted separately
    text = "http://www.x.com/john.doe@example.com"
    assert redact(text) == "[redacted]/[redacted]"


# ── Idempotence ──────────────────────────────────────────────────────

@pytest.mark.parametrize("text", [
    "reach me at john.doe@example.com",
    "http://www.x.com/john.doe@example.com",
    "see http://shop.example.com/?ref=jo ＠ mail . com",
    "jo ＠ gmail . com or 555 123 4567 or (555) 123-4567",
    "whatsapp me, gmail dot com, @handle, #tag",
    "12345678901234567890",
])
def test_redact_is_idempotent(text):
    once = redact(text)
    assert redact(once) == once


# ── sanitize_message() / mask ────────────────────────────────────────

def test_sanitize_reports_categories_in_order():
    result = sanitize_message("mail jo@x.com or 555-123-4567")
    assert result.text == "mail [redacted] or [redacted]"
    assert result.categories == [Category.EMAIL, Category.PHONE]
    assert result.has_personal_info


def test_sanitize_clean():
    result = sanitize_message("lovely dress")
    assert result.text == "lovely dress"
    assert result.categories == []
    assert not result.has_personal_info


def test_mask_preserves_length():
    assert mask_personal_info("call 555-123-4567 now") == "call ************ now"


def test_placeholder_is_literal():
    r = Redactor(RedactorConfig(placeholder="<\\g<0>>"))
    assert r.redact("jo@x.com") == "<\\g<0>>"


def test_skip_categories():
    r = Redactor(RedactorConfig(skip_categories={Category.COMMON_PLATFORMS}))
    assert r.redact("pay on venmo") == "pay on venmo"
    assert redact("pay on venmo") == "pay on [redacted]"


def test_redact_rejects_non_string():
    with pytest.raises(TypeError):
        redact(None)


# ── Message lists ────────────────────────────────────────────────────

def test_redact_messages_does_not_mutate():
    r = Redactor()
    messages = [
        {"role": "user", "content": "I'm alice@x.com"},
        {"role": "system", "content": None},
    ]
    out = r.redact_messages(messages)
    assert out[0] == {"role": "user", "content": "I'm [redacted]"}
    assert out[1] is messages[1]
    assert messages[0]["content"] == "I'm alice@x.com"


def test_redact_messages_custom_key():
    out = Redactor().redact_messages([{"text": "dm @shop"}], content_key="text")
    assert out == [{"text": "dm[redacted]"}]
