"""Moderation gate: spam heuristic, then content validator.

Usage in a messaging flow:

    gate = ModerationGate()
    decision = gate.guard_send(text, history, send=deliver)
    if not decision.allowed:
        show_warning(decision.message)

Usage in a review flow (no spam check):

    decision = gate.guard_submit(text, submit=save_review)

The gate is stateless; callers pass the relevant prior messages on
every call.  Blocked content is never handed to the callback.
"""

from __future__ import annotations
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from .errors import require_text
from .formatter import SPAM_WARNING, warning_for
from .log import get_logger
from .redactor import Redactor
from .spam import DEFAULT_THRESHOLDS, SpamThresholds, check_spam
from .types import ModerationAction, ModerationDecision
from .validator import validate

log = get_logger(__name__)


def moderate(
    content: str,
    prior_messages: Iterable = (),
    *,
    thresholds: SpamThresholds = DEFAULT_THRESHOLDS,
    redactor: Redactor | None = None,
) -> ModerationDecision:
    """Run the full gate on one candidate message."""
    require_text(content, "content")

    spam = check_spam(content, prior_messages, thresholds)
    if spam.is_spam:
        log.info("blocked as spam: {}", ",".join(spam.checks.fired()))
        return ModerationDecision(
            action=ModerationAction.BLOCK_SPAM,
            message=SPAM_WARNING,
            spam=spam,
        )

    validation = validate(content)
    if not validation.is_valid:
        log.info("blocked content: {}", validation.details.category.value)
        return ModerationDecision(
            action=ModerationAction.BLOCK_CONTENT,
            message=warning_for(validation.details),
            redacted=(redactor or Redactor()).redact(content),
            spam=spam,
            validation=validation,
        )

    return ModerationDecision(
        action=ModerationAction.ALLOW,
        content=content,
        spam=spam,
        validation=validation,
    )


@dataclass
class ModerationGate:
    """Config-bound gate with callback dispatch for send/submit flows."""

    thresholds: SpamThresholds = DEFAULT_THRESHOLDS
    redactor: Redactor = field(default_factory=Redactor)
    # Only the most recent N prior messages are compared (None = all)
    history_window: int | None = None

    def __post_init__(self) -> None:
        if self.history_window is not None and self.history_window < 0:
            raise ValueError("history_window must be >= 0")

    def _recent(self, prior_messages: Iterable) -> Iterable:
        if self.history_window is None:
            return prior_messages
        if self.history_window == 0:
            return ()
        if not isinstance(prior_messages, Sequence):
            prior_messages = list(prior_messages)
        return prior_messages[-self.history_window:]

    def check(self, content: str, prior_messages: Iterable = ()) -> ModerationDecision:
        return moderate(
            content,
            self._recent(prior_messages),
            thresholds=self.thresholds,
            redactor=self.redactor,
        )

    def review(self, content: str) -> ModerationDecision:
        """Validator-only path for reviews and feedback."""
        validation = validate(content)
        if validation.is_valid:
            return ModerationDecision(
                action=ModerationAction.ALLOW, content=content, validation=validation,
            )
        log.info("blocked review content: {}", validation.details.category.value)
        return ModerationDecision(
            action=ModerationAction.BLOCK_CONTENT,
            message=warning_for(validation.details),
            redacted=self.redactor.redact(content),
            validation=validation,
        )

    def guard_send(
        self,
        content: str,
        prior_messages: Iterable,
        send: Callable[[str], object] | None = None,
    ) -> ModerationDecision:
        """Moderate, then call send(content) only if allowed."""
        decision = self.check(content, prior_messages)
        if decision.allowed and send is not None:
            send(content)
        return decision

    def guard_submit(
        self,
        content: str,
        submit: Callable[[str], object] | None = None,
    ) -> ModerationDecision:
        """Validate, then call submit(content) only if allowed."""
        decision = self.review(content)
        if decision.allowed and submit is not None:
            submit(content)
        return decision
