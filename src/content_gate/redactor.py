"""Redactor: replace personal information with a placeholder.

Usage:
    from content_gate import redact, Redactor, RedactorConfig

    redact("mail me at jo@x.com")            # "mail me at [redacted]"

    masker = Redactor(RedactorConfig(mask=True))
    masker.redact("call 555-123-4567")       # "call ************"

Categories are substituted one after another in priority order, each
pass running on the output of the previous one.  Overlapping matches are
therefore resolved by whichever category gets there first; do not merge
the passes into one alternation, it changes the output.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .errors import require_text
from .log import get_logger
from .patterns import PATTERNS
from .types import Category, RedactedMessage

log = get_logger(__name__)

PLACEHOLDER = "[redacted]"


@dataclass
class RedactorConfig:
    """Configuration for the Redactor."""
    placeholder: str = PLACEHOLDER
    # Replace each match with "*" * len(match) instead of the placeholder
    mask: bool = False
    mask_char: str = "*"
    # Categories to leave untouched
    skip_categories: set[Category] = field(default_factory=set)


class Redactor:
    """Category-ordered substitution over the detector's regex set."""

    def __init__(self, config: RedactorConfig | None = None) -> None:
        self.config = config or RedactorConfig()

    def _replacement(self, match) -> str:
        if self.config.mask:
            return self.config.mask_char * len(match.group())
        return self.config.placeholder

    def sanitize(self, text: str) -> RedactedMessage:
        """Redact text and report which categories fired, in order."""
        require_text(text)
        fired: list[Category] = []
        result = text
        for category, pattern in PATTERNS:
            if category in self.config.skip_categories:
                continue
            result, count = pattern.subn(self._replacement, result)
            if count:
                fired.append(category)

        if fired:
            log.debug(
                "redacted {} in {} chars",
                ",".join(c.value for c in fired), len(text),
            )
        return RedactedMessage(text=result, categories=fired)

    def redact(self, text: str) -> str:
        return self.sanitize(text).text

    def redact_messages(
        self,
        messages: list[dict],
        *,
        content_key: str = "content",
    ) -> list[dict]:
        """Redact personal info from a list of chat-format messages.

        Returns new message dicts with content redacted.  Does NOT
        mutate the originals.
        """
        out: list[dict] = []
        for msg in messages:
            content = msg.get(content_key)
            if isinstance(content, str) and content:
                out.append({**msg, content_key: self.redact(content)})
            else:
                out.append(msg)
        return out


_default = Redactor()
_masker = Redactor(RedactorConfig(mask=True))


def redact(text: str) -> str:
    """Replace every regex-category match with "[redacted]"."""
    return _default.redact(text)


def sanitize_message(text: str) -> RedactedMessage:
    """Redacted copy of text plus the categories that were found."""
    return _default.sanitize(text)


def mask_personal_info(text: str) -> str:
    """Replace every regex-category match with asterisks of equal length."""
    return _masker.redact(text)
