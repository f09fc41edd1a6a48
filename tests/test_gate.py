"""Tests for the moderation gate: spam first, then content."""

import pytest

from content_gate import ModerationAction, ModerationGate, Redactor, RedactorConfig, moderate
from content_gate.formatter import EMAIL_WARNING, SPAM_WARNING


# ── moderate() ───────────────────────────────────────────────────────

def test_repeat_is_blocked_as_spam():
    decision = moderate("hi", [{"content": "hi"}])
    assert decision.action == ModerationAction.BLOCK_SPAM
    assert decision.message == SPAM_WARNING
    assert decision.spam.checks.is_repeated
    assert decision.content is None


def test_email_is_blocked_as_content():
    decision = moderate("Let's meet, email me at a@b.com", [])
    assert decision.action == ModerationAction.BLOCK_CONTENT
    assert decision.message == EMAIL_WARNING
    assert decision.redacted == "Let's meet, email me at [redacted]"
    assert decision.content is None


def test_clean_message_is_allowed_unchanged():
    text = "I love this dress, is it available in size M?"
    decision = moderate(text, [])
    assert decision.action == ModerationAction.ALLOW
    assert decision.allowed
    assert decision.content == text
    assert decision.message is None


def test_spam_check_runs_before_content_check():
    text = "mail a@b.com"
    decision = moderate(text, [{"content": text}])
    assert decision.action == ModerationAction.BLOCK_SPAM
    assert decision.validation is None


def test_history_defaults_to_empty():
    assert moderate("hello there").allowed


def test_custom_redactor_is_used_for_preview():
    decision = moderate("a@b.com", redactor=Redactor(RedactorConfig(mask=True)))
    assert decision.redacted == "*******"


def test_decision_to_dict():
    assert moderate("hello").to_dict() == {"action": "allow", "content": "hello"}
    assert moderate("hi", [{"content": "hi"}]).to_dict() == {
        "action": "block-spam",
        "message": SPAM_WARNING,
    }


def test_moderate_rejects_non_string():
    with pytest.raises(TypeError):
        moderate(None, [])


# ── ModerationGate ───────────────────────────────────────────────────

def test_guard_send_calls_back_only_when_allowed():
    sent = []
    gate = ModerationGate()
    assert gate.guard_send("is it still free?", [], sent.append).allowed
    assert not gate.guard_send("text me at 555-123-4567", [], sent.append).allowed
    assert not gate.guard_send("is it still free?", [{"content": "is it still free?"}], sent.append).allowed
    assert sent == ["is it still free?"]


def test_guard_submit_skips_spam_check():
    submitted = []
    gate = ModerationGate()
    decision = gate.guard_submit("GREAT DRESS!!!", submitted.append)
    assert decision.allowed
    assert submitted == ["GREAT DRESS!!!"]


def test_guard_submit_blocks_contact_info():
    submitted = []
    decision = ModerationGate().guard_submit("Loved it, dm me", submitted.append)
    assert decision.action == ModerationAction.BLOCK_CONTENT
    assert "language suggesting" in decision.message
    assert submitted == []


def test_history_window_limits_repeat_check():
    history = [{"content": "hi"}, {"content": "yo"}]
    assert ModerationGate(history_window=1).check("hi", history).allowed
    assert not ModerationGate(history_window=2).check("hi", history).allowed
    assert not ModerationGate().check("hi", history).allowed


def test_history_window_accepts_generators():
    history = ({"content": c} for c in ["hi", "yo"])
    assert ModerationGate(history_window=1).check("hi", history).allowed


def test_history_window_zero_ignores_history():
    assert ModerationGate(history_window=0).check("hi", [{"content": "hi"}]).allowed


def test_negative_history_window():
    with pytest.raises(ValueError):
        ModerationGate(history_window=-1)
