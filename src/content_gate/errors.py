"""Exceptions raised by content-gate."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import DetectionResult


PERSONAL_INFO_FIELD_ERROR = "Personal information is not allowed in this field."


class ContentGateError(Exception):
    """Base class for content-gate errors."""


class PersonalInfoError(ContentGateError, ValueError):
    """Raised by the fail-fast entry points when personal info is found."""

    def __init__(self, result: DetectionResult, message: str = PERSONAL_INFO_FIELD_ERROR) -> None:
        super().__init__(message)
        self.result = result


class ConfigError(ContentGateError, ValueError):
    """Raised for an invalid configuration dict or file."""


def require_text(value: object, name: str = "text") -> str:
    """Reject non-string input instead of treating it as clean."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, not {type(value).__name__}")
    return value
