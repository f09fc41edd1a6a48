"""content-gate: contact-info and spam moderation for marketplace messaging."""

from loguru import logger

from .patterns import detect, scan_patterns, PATTERNS, SUSPICIOUS_PHRASES
from .redactor import Redactor, RedactorConfig, redact, sanitize_message, mask_personal_info
from .validator import validate, sanitize_user_input, is_username_safe
from .formatter import warning_for, summarize_warning
from .spam import check_spam, SpamThresholds
from .gate import moderate, ModerationGate
from .config import create_gate, load_config, load_from_yaml
from .errors import ContentGateError, PersonalInfoError, ConfigError
from .types import (
    Category, DetectionResult, ValidationResult, SpamChecks, SpamCheckResult,
    ModerationAction, ModerationDecision, RedactedMessage, CategoryMatch,
)

__all__ = [
    "detect", "scan_patterns", "PATTERNS", "SUSPICIOUS_PHRASES",
    "Redactor", "RedactorConfig", "redact", "sanitize_message", "mask_personal_info",
    "validate", "sanitize_user_input", "is_username_safe",
    "warning_for", "summarize_warning",
    "check_spam", "SpamThresholds",
    "moderate", "ModerationGate",
    "create_gate", "load_config", "load_from_yaml",
    "ContentGateError", "PersonalInfoError", "ConfigError",
    "Category", "DetectionResult", "ValidationResult", "SpamChecks", "SpamCheckResult",
    "ModerationAction", "ModerationDecision", "RedactedMessage", "CategoryMatch",
]
__version__ = "0.1.0"

# Silent until an application opts in via log.setup_logging()
logger.disable(__name__)
