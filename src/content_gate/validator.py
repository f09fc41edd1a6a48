"""Content validator: turns a detection into a gate verdict.

Two conventions:
  validate()            -> structured ValidationResult, never raises on str
  sanitize_user_input() -> returns text unchanged or raises PersonalInfoError
"""

from __future__ import annotations

from .errors import PersonalInfoError, require_text
from .log import get_logger
from .patterns import detect
from .types import ValidationResult

log = get_logger(__name__)

MESSAGE_ERROR = "Messages cannot contain personal contact information."


def validate(content: str) -> ValidationResult:
    result = detect(require_text(content, "content"))
    if result.has_personal_info:
        return ValidationResult(is_valid=False, error=MESSAGE_ERROR, details=result)
    return ValidationResult(is_valid=True, content=content)


def sanitize_user_input(text: str) -> str:
    """Fail-fast variant for profile and form fields."""
    result = detect(require_text(text))
    if result.has_personal_info:
        log.info("rejected field input: {}", result.category.value)
        raise PersonalInfoError(result)
    return text


def is_username_safe(username: str) -> bool:
    return not detect(require_text(username, "username")).has_personal_info
