"""Core types."""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from enum import Enum


class Category(str, Enum):
    """Personal-information categories, in detection priority order."""
    EMAIL = "email"
    PHONE = "phone"
    SOCIAL_MEDIA = "socialMedia"
    WEBSITES = "websites"
    COMMON_PLATFORMS = "commonPlatforms"
    OBFUSCATED_EMAIL = "obfuscatedEmail"
    OBFUSCATED_PHONE = "obfuscatedPhone"
    SPELLED_OUT_DOMAINS = "spelledOutDomains"
    SUSPICIOUS_PHRASE = "suspicious_phrase"


class ModerationAction(str, Enum):
    ALLOW = "allow"
    BLOCK_SPAM = "block-spam"
    BLOCK_CONTENT = "block-content"


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of a single detector pass.

    Exactly one shape is produced per call:
      - clean:   category is None
      - pattern: category is a regex category, matched_pattern is set
      - phrase:  category is SUSPICIOUS_PHRASE, matched_phrase is set
    """
    category: Category | None = None
    matched_pattern: str | None = None
    matched_phrase: str | None = None

    @classmethod
    def clean(cls) -> DetectionResult:
        return cls()

    @classmethod
    def for_pattern(cls, category: Category, pattern: str) -> DetectionResult:
        return cls(category=category, matched_pattern=pattern)

    @classmethod
    def for_phrase(cls, phrase: str) -> DetectionResult:
        return cls(category=Category.SUSPICIOUS_PHRASE, matched_phrase=phrase)

    @property
    def has_personal_info(self) -> bool:
        return self.category is not None

    def to_dict(self) -> dict:
        out: dict = {"hasPersonalInfo": self.has_personal_info}
        if self.category is not None:
            out["type"] = self.category.value
        if self.matched_pattern is not None:
            out["matchedPattern"] = self.matched_pattern
        if self.matched_phrase is not None:
            out["matchedPhrase"] = self.matched_phrase
        return out


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Pass/fail verdict derived from a DetectionResult."""
    is_valid: bool
    error: str | None = None
    details: DetectionResult | None = None
    content: str | None = None      # only set when valid

    def to_dict(self) -> dict:
        out: dict = {"isValid": self.is_valid}
        if self.error is not None:
            out["error"] = self.error
        if self.details is not None:
            out["details"] = self.details.to_dict()
        if self.content is not None:
            out["content"] = self.content
        return out


@dataclass(frozen=True, slots=True)
class SpamChecks:
    is_repeated: bool
    has_excessive_caps: bool
    has_char_repetition: bool
    has_excessive_punctuation: bool
    has_suspicious_chars: bool

    def any(self) -> bool:
        return any(asdict(self).values())

    def fired(self) -> list[str]:
        """Names of the checks that came back true."""
        return [name for name, hit in asdict(self).items() if hit]

    def to_dict(self) -> dict:
        return {
            "isRepeated": self.is_repeated,
            "hasExcessiveCaps": self.has_excessive_caps,
            "hasCharRepetition": self.has_char_repetition,
            "hasExcessivePunctuation": self.has_excessive_punctuation,
            "hasSuspiciousChars": self.has_suspicious_chars,
        }


@dataclass(frozen=True, slots=True)
class SpamCheckResult:
    is_spam: bool
    checks: SpamChecks

    def to_dict(self) -> dict:
        return {"isSpam": self.is_spam, "checks": self.checks.to_dict()}


@dataclass(frozen=True, slots=True)
class ModerationDecision:
    """What the gate decided for one candidate message."""
    action: ModerationAction
    message: str | None = None      # user-facing warning when blocked
    content: str | None = None      # original text, only on allow
    redacted: str | None = None     # safe-to-display copy, only on block-content
    spam: SpamCheckResult | None = None
    validation: ValidationResult | None = None

    @property
    def allowed(self) -> bool:
        return self.action is ModerationAction.ALLOW

    def to_dict(self) -> dict:
        out: dict = {"action": self.action.value}
        if self.message is not None:
            out["message"] = self.message
        if self.content is not None:
            out["content"] = self.content
        if self.redacted is not None:
            out["redacted"] = self.redacted
        return out


@dataclass(frozen=True, slots=True)
class CategoryMatch:
    """A single regex hit, used for reporting and masking."""
    category: Category
    start: int
    end: int
    text: str


@dataclass(slots=True)
class RedactedMessage:
    """Result of sanitizing a message."""
    text: str                                           # redacted text
    categories: list[Category] = field(default_factory=list)

    @property
    def has_personal_info(self) -> bool:
        return bool(self.categories)
