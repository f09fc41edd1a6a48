"""YAML/dict config loader for content-gate.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    content_gate:
      enabled: true
      placeholder: "[redacted]"
      history_window: 20        # null = compare against every prior message
      skip_categories:          # redaction only; detection is unaffected
        - commonPlatforms
      spam:
        caps_ratio: 0.5
        char_repeat: 5
        punctuation_run: 3
      log_level: INFO
"""

from __future__ import annotations
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError, require_text
from .gate import ModerationGate
from .redactor import PLACEHOLDER, Redactor, RedactorConfig
from .spam import SpamThresholds
from .types import Category, ModerationAction, ModerationDecision

CONFIG_ENV = "CONTENT_GATE_CONFIG"


class _NoopGate:
    """Pass-through gate when moderation is disabled."""

    def check(self, content: str, prior_messages: Iterable = ()) -> ModerationDecision:
        return ModerationDecision(action=ModerationAction.ALLOW, content=require_text(content, "content"))

    def review(self, content: str) -> ModerationDecision:
        return self.check(content)

    def guard_send(self, content: str, prior_messages: Iterable, send=None) -> ModerationDecision:
        decision = self.check(content)
        if send is not None:
            send(content)
        return decision

    def guard_submit(self, content: str, submit=None) -> ModerationDecision:
        decision = self.check(content)
        if submit is not None:
            submit(content)
        return decision


def _categories(names) -> set[Category]:
    if names is None:
        return set()
    if not isinstance(names, (list, tuple, set)):
        raise ConfigError("skip_categories must be a list of category names")
    try:
        return {Category(n) for n in names}
    except ValueError as e:
        raise ConfigError(f"unknown category in skip_categories: {e}") from None


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    # Support nested under "content_gate" key or flat
    if "content_gate" in data:
        data = data["content_gate"] or {}

    spam = data.get("spam") or {}
    window = data.get("history_window")
    if window is not None and (isinstance(window, bool) or not isinstance(window, int) or window < 0):
        raise ConfigError("history_window must be a non-negative integer or null")

    try:
        thresholds = SpamThresholds(
            caps_ratio=float(spam.get("caps_ratio", 0.5)),
            char_repeat=int(spam.get("char_repeat", 5)),
            punctuation_run=int(spam.get("punctuation_run", 3)),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"invalid spam thresholds: {e}") from None

    enabled = data.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ConfigError("enabled must be true or false")

    return {
        "enabled": enabled,
        "placeholder": str(data.get("placeholder", PLACEHOLDER)),
        "history_window": window,
        "skip_categories": _categories(data.get("skip_categories")),
        "thresholds": thresholds,
        "log_level": str(data.get("log_level", "INFO")).upper(),
        "log_file": data.get("log_file"),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    try:
        with open(path) as f:
            return load_config(yaml.safe_load(f))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e


def load_default() -> dict[str, Any]:
    """Config from $CONTENT_GATE_CONFIG, or built-in defaults."""
    path = os.environ.get(CONFIG_ENV)
    if path:
        return load_from_yaml(path)
    return load_config({})


def create_gate(config: dict[str, Any] | None = None) -> ModerationGate | _NoopGate:
    """Create a fully configured gate from a config dict."""
    cfg = config if config is not None and "thresholds" in config else load_config(config)

    if not cfg["enabled"]:
        return _NoopGate()

    redactor = Redactor(RedactorConfig(
        placeholder=cfg["placeholder"],
        skip_categories=cfg["skip_categories"],
    ))
    return ModerationGate(
        thresholds=cfg["thresholds"],
        redactor=redactor,
        history_window=cfg["history_window"],
    )
