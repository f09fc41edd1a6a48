"""Tests for the personal-information detector."""

import pytest

from content_gate import Category, DetectionResult, detect, scan_patterns
from content_gate.patterns import PATTERNS, SUSPICIOUS_PHRASES, categories_in


# ── Category coverage ────────────────────────────────────────────────

@pytest.mark.parametrize("text, category", [
    ("reach me at john.doe@example.com", Category.EMAIL),
    ("call me at (555) 123-4567", Category.PHONE),
    ("ring 555-123-4567 tonight", Category.PHONE),
    ("follow @myhandle for updates", Category.SOCIAL_MEDIA),
    ("#vintage finds", Category.SOCIAL_MEDIA),
    ("check out www.example.com", Category.WEBSITES),
    ("add me on whatsapp", Category.COMMON_PLATFORMS),
    ("pay me on CashApp", Category.COMMON_PLATFORMS),
    ("john @ example . com", Category.OBFUSCATED_EMAIL),
    ("john ＠ example . com", Category.OBFUSCATED_EMAIL),
    ("555 123 4567", Category.OBFUSCATED_PHONE),
    ("follow\u00a0@myhandle", Category.SOCIAL_MEDIA),
    ("john\u3000＠\u3000example\u3000.\u3000com", Category.OBFUSCATED_EMAIL),
    ("my email is john dot doe at gmail dot com", Category.SPELLED_OUT_DOMAINS),
    ("gmail\u2003dot\u2003com", Category.SPELLED_OUT_DOMAINS),
    ("it is on GMAIL PERIOD NET", Category.SPELLED_OUT_DOMAINS),
])
def test_category(text, category):
    result = detect(text)
    assert result.has_personal_info
    assert result.category == category
    assert result.matched_pattern == dict(PATTERNS)[category].pattern
    assert result.matched_phrase is None


def test_suspicious_phrase_fallback():
    result = detect("write to me at gmail please")
    assert result.category == Category.SUSPICIOUS_PHRASE
    assert result.matched_phrase == "at gmail"
    assert result.matched_pattern is None


def test_phrase_match_is_case_insensitive():
    assert detect("DM ME when you can").matched_phrase == "dm me"


def test_first_phrase_in_list_order_wins():
    # "my email" precedes "at gmail" in the list
    assert detect("my email is at gmail").matched_phrase == "my email"


def test_clean_text():
    result = detect("this is a normal friendly message about a dress")
    assert result == DetectionResult.clean()
    assert not result.has_personal_info


def test_empty_string_is_clean():
    assert not detect("").has_personal_info


def test_non_ascii_text_does_not_raise():
    assert not detect("très jolie robe 👗").has_personal_info


# ── Priority order ───────────────────────────────────────────────────

def test_priority_order_is_explicit():
    assert [c for c, _ in PATTERNS] == [
        Category.EMAIL,
        Category.PHONE,
        Category.SOCIAL_MEDIA,
        Category.WEBSITES,
        Category.COMMON_PLATFORMS,
        Category.OBFUSCATED_EMAIL,
        Category.OBFUSCATED_PHONE,
        Category.SPELLED_OUT_DOMAINS,
    ]


def test_higher_priority_category_wins():
    assert detect("call 555-123-4567 or mail a@b.com").category == Category.EMAIL


def test_literal_domain_is_a_website_before_spelled_out():
    assert detect("jo at gmail.com").category == Category.WEBSITES


# ── Purity ───────────────────────────────────────────────────────────

def test_repeated_calls_return_identical_results():
    text = "reach me at john.doe@example.com"
    assert detect(text) == detect(text)
    assert detect(text) == detect(text)


def test_scan_patterns_is_stable_across_calls():
    text = "a@b.com and c@d.com"
    assert scan_patterns(text) == scan_patterns(text)


def test_scan_patterns_reports_every_email():
    emails = [m for m in scan_patterns("a@b.com and c@d.com") if m.category == Category.EMAIL]
    assert [m.text for m in emails] == ["a@b.com", "c@d.com"]
    assert (emails[0].start, emails[0].end) == (0, 7)


def test_categories_in_keeps_priority_order():
    found = categories_in("mail a@b.com")
    assert found[0] == Category.EMAIL
    assert Category.WEBSITES in found


def test_phrase_list_is_lowercase():
    assert all(p == p.lower() for p in SUSPICIOUS_PHRASES)


# ── Malformed input ──────────────────────────────────────────────────

@pytest.mark.parametrize("value", [None, 42, b"a@b.com", ["a@b.com"]])
def test_non_string_raises_type_error(value):
    with pytest.raises(TypeError):
        detect(value)


def test_to_dict_uses_wire_names():
    assert detect("add me on telegram").to_dict() == {
        "hasPersonalInfo": True,
        "type": "commonPlatforms",
        "matchedPattern": dict(PATTERNS)[Category.COMMON_PLATFORMS].pattern,
    }
    assert detect("hello").to_dict() == {"hasPersonalInfo": False}
