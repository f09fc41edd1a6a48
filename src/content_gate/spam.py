"""Spam / suspicious-behavior heuristic.

All five checks run on every call so callers get the full breakdown.
"""

from __future__ import annotations
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .errors import require_text
from .types import SpamCheckResult, SpamChecks

_UPPER = re.compile(r"[A-Z]")
_PUNCTUATION = "!?.,"
_NON_ASCII = re.compile(r"[^\x00-\x7F]")


@dataclass(frozen=True)
class SpamThresholds:
    caps_ratio: float = 0.5       # uppercase letters / total length, strictly above
    char_repeat: int = 5          # same character this many times in a row
    punctuation_run: int = 3      # consecutive characters from "!?.,"

    def __post_init__(self) -> None:
        if not 0 <= self.caps_ratio <= 1:
            raise ValueError("caps_ratio must be within [0, 1]")
        if self.char_repeat < 2:
            raise ValueError("char_repeat must be at least 2")
        if self.punctuation_run < 1:
            raise ValueError("punctuation_run must be at least 1")

    @property
    def char_repeat_re(self) -> re.Pattern:
        return re.compile(r"(.)\1{%d,}" % (self.char_repeat - 1))

    @property
    def punctuation_re(self) -> re.Pattern:
        return re.compile(r"[%s]{%d,}" % (re.escape(_PUNCTUATION), self.punctuation_run))


DEFAULT_THRESHOLDS = SpamThresholds()


def _content_of(message) -> str | None:
    if isinstance(message, Mapping):
        return message.get("content")
    return getattr(message, "content", None)


def is_repeated(content: str, prior_messages: Iterable) -> bool:
    return any(_content_of(m) == content for m in prior_messages)


def check_spam(
    content: str,
    prior_messages: Iterable = (),
    thresholds: SpamThresholds = DEFAULT_THRESHOLDS,
) -> SpamCheckResult:
    require_text(content, "content")

    uppercase = len(_UPPER.findall(content))
    checks = SpamChecks(
        is_repeated=is_repeated(content, prior_messages),
        has_excessive_caps=bool(content) and uppercase > len(content) * thresholds.caps_ratio,
        has_char_repetition=thresholds.char_repeat_re.search(content) is not None,
        has_excessive_punctuation=thresholds.punctuation_re.search(content) is not None,
        has_suspicious_chars=_NON_ASCII.search(content) is not None,
    )
    return SpamCheckResult(is_spam=checks.any(), checks=checks)
