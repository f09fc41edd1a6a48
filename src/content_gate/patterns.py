"""Personal-information detector: ordered regex categories + phrase list.

Categories are checked in the order of PATTERNS and the first hit wins.
If no regex fires, the suspicious-phrase list is scanned (list order).
Patterns are compiled with re.ASCII so \\w, \\d and \\b keep their ASCII
meaning; whitespace is spelled out as _WS so every Unicode space still
counts (no-break, ideographic, ...).
"""

from __future__ import annotations
import re

from .errors import require_text
from .log import get_logger
from .types import Category, CategoryMatch, DetectionResult

log = get_logger(__name__)

# Unicode whitespace; under re.ASCII \s alone is just " \t\n\r\f\v"
_WS = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

# Each entry: (category, compiled_regex).  Order is the priority order.
PATTERNS: tuple[tuple[Category, re.Pattern], ...] = (
    (Category.EMAIL, re.compile(
        r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"
    , re.ASCII)),

    # North-American shape; a space is only allowed right after ")"
    (Category.PHONE, re.compile(
        r"(?:\+?\d{1,3}[\-.]?)?"
        r"\(?\d{3}\)?(?:[\-.]|(?<=\)) )?"
        r"\d{3}[\-.]?\d{4}"
    , re.ASCII)),

    (Category.SOCIAL_MEDIA, re.compile(
        r"(?:^|" + _WS + r")[@#][\w.]+"
    , re.ASCII)),

    (Category.WEBSITES, re.compile(
        r"(?:https?://)?(?:www\.)?[\w\-]+\.[\w.\-]+"
    , re.ASCII)),

    (Category.COMMON_PLATFORMS, re.compile(
        r"(?:whatsapp|telegram|signal|facebook|instagram|snap|twitter|tiktok|venmo|paypal|cashapp)"
    , re.ASCII | re.IGNORECASE)),

    # Evasion attempts
    (Category.OBFUSCATED_EMAIL, re.compile(
        r"[a-zA-Z0-9._%+\-]+" + _WS + r"*[@＠]" + _WS + r"*[a-zA-Z0-9.\-]+"
        + _WS + r"*\." + _WS + r"*[a-zA-Z]{2,}"
    , re.ASCII)),

    (Category.OBFUSCATED_PHONE, re.compile(
        r"(?:\+?\d{1,3}[\-. ]?)?\(?\d{3}\)?[\-. ]?\d{3}[\-. ]?\d{4}"
    , re.ASCII)),

    (Category.SPELLED_OUT_DOMAINS, re.compile(
        r"\b(?:gmail|yahoo|hotmail|outlook)" + _WS + r"*(?:dot|period|\.|punkt)"
        + _WS + r"*(?:com|org|net|edu)\b"
    , re.ASCII | re.IGNORECASE)),
)

# Phrases that suggest an attempt to move the conversation off-platform.
SUSPICIOUS_PHRASES: tuple[str, ...] = (
    "contact me",
    "reach me",
    "my number",
    "my email",
    "my contact",
    "direct message",
    "dm me",
    "pm me",
    "text me",
    "call me",
    "let's talk",
    "get in touch",
    "reach out",
    "message me",
    "connect with me",
    "find me",
    "my profile",
    "my handle",
    "my account",
    "dot com",
    "at gmail",
    "at yahoo",
    "at hotmail",
)


def detect(text: str) -> DetectionResult:
    """Return the first personal-information hit in text, or a clean result."""
    require_text(text)

    for category, pattern in PATTERNS:
        if pattern.search(text):
            log.debug("detected {} in {} chars", category.value, len(text))
            return DetectionResult.for_pattern(category, pattern.pattern)

    lowered = text.lower()
    for phrase in SUSPICIOUS_PHRASES:
        if phrase in lowered:
            log.debug("suspicious phrase {!r} in {} chars", phrase, len(text))
            return DetectionResult.for_phrase(phrase)

    return DetectionResult.clean()


def scan_patterns(text: str) -> list[CategoryMatch]:
    """Every match of every regex category against the untouched text.

    Unlike redaction this does not feed one category's output into the
    next, so spans may overlap across categories.
    """
    require_text(text)
    matches: list[CategoryMatch] = []
    for category, pattern in PATTERNS:
        for m in pattern.finditer(text):
            matches.append(CategoryMatch(
                category=category,
                start=m.start(),
                end=m.end(),
                text=m.group(),
            ))
    return matches


def categories_in(text: str) -> list[Category]:
    """Regex categories that fire on text, in priority order."""
    require_text(text)
    return [category for category, pattern in PATTERNS if pattern.search(text)]
