"""User-facing warning text for detections and spam verdicts."""

from __future__ import annotations

from .patterns import categories_in
from .types import Category, DetectionResult

EMAIL_WARNING = (
    "Email addresses are not allowed for your security. "
    "Please use the in-app messaging system."
)
PHONE_WARNING = (
    "Phone numbers are not allowed for your security. "
    "Please use the in-app messaging system."
)
SOCIAL_MEDIA_WARNING = (
    "Social media handles are not allowed. "
    "Please keep all communication within the app."
)
WEBSITE_WARNING = "External website links are not allowed for security reasons."
PHRASE_WARNING = (
    "Your message contains language suggesting an attempt to share contact "
    "information. Please keep all communication within the app."
)
GENERIC_WARNING = (
    "Your message contains content that is not allowed. "
    "Please keep all communication within the app."
)
SPAM_WARNING = "Your message appears to be spam or contains suspicious patterns."

# Categories without an entry fall back to GENERIC_WARNING.
_WARNINGS: dict[Category, str] = {
    Category.EMAIL: EMAIL_WARNING,
    Category.PHONE: PHONE_WARNING,
    Category.SOCIAL_MEDIA: SOCIAL_MEDIA_WARNING,
    Category.WEBSITES: WEBSITE_WARNING,
    Category.SUSPICIOUS_PHRASE: PHRASE_WARNING,
}


def warning_for(result: DetectionResult) -> str | None:
    """Warning to show for a detection, or None when nothing was found."""
    if not result.has_personal_info:
        return None
    return _WARNINGS.get(result.category, GENERIC_WARNING)


def summarize_warning(text: str) -> str | None:
    """One warning naming every regex category present in text."""
    found = categories_in(text)
    if not found:
        return None
    names = ", ".join(c.value for c in found)
    return f"Message contains personal information ({names}). Please remove to continue."
