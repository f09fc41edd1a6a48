"""CLI interface for content-gate.

Usage:
    # Full gate (stdin: JSON {"content": "...", "history": [{"content": "..."}]})
    echo '{"content": "hi", "history": [{"content": "hi"}]}' | \
        python -m content_gate.cli moderate

    # Detector / validator / redactor on plain text from stdin
    echo 'mail me at jo@x.com' | python -m content_gate.cli detect
    echo 'mail me at jo@x.com' | python -m content_gate.cli validate
    echo 'mail me at jo@x.com' | python -m content_gate.cli redact --mask

All output is JSON on stdout.  `moderate` and `validate` exit 1 when
the content is blocked; a bad config or malformed JSON input exits 2.
"""

from __future__ import annotations
import argparse
import json
import sys

from .config import create_gate, load_default, load_from_yaml
from .formatter import summarize_warning, warning_for
from .log import get_logger, setup_logging
from .patterns import detect, scan_patterns
from .redactor import Redactor, RedactorConfig
from .spam import check_spam
from .validator import validate

log = get_logger(__name__)

EXIT_BLOCKED = 1
EXIT_BAD_INPUT = 2


def _emit(data) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def _read_text() -> str:
    # Drop only the trailing newline added by echo / heredocs
    text = sys.stdin.read()
    return text[:-1] if text.endswith("\n") else text


def _read_json() -> dict:
    try:
        data = json.loads(sys.stdin.read())
    except json.JSONDecodeError as e:
        log.error("invalid JSON on stdin: {}", e)
        sys.exit(EXIT_BAD_INPUT)
    if not isinstance(data, dict) or not isinstance(data.get("content"), str):
        log.error("expected an object with a string 'content' field")
        sys.exit(EXIT_BAD_INPUT)
    return data


def cmd_detect(args: argparse.Namespace) -> int:
    """Report the first detection, plus every raw match with --all."""
    text = _read_text()
    out = detect(text).to_dict()
    if args.all:
        out["matches"] = [
            {"type": m.category.value, "start": m.start, "end": m.end, "text": m.text}
            for m in scan_patterns(text)
        ]
    _emit(out)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate text; include the user-facing warning when invalid."""
    result = validate(_read_text())
    out = result.to_dict()
    if not result.is_valid:
        out["warning"] = warning_for(result.details)
    _emit(out)
    return 0 if result.is_valid else EXIT_BLOCKED


def cmd_redact(args: argparse.Namespace) -> int:
    """Redact text on stdin."""
    redactor = Redactor(RedactorConfig(mask=args.mask))
    result = redactor.sanitize(_read_text())
    _emit({
        "text": result.text,
        "hasPersonalInfo": result.has_personal_info,
        "types": [c.value for c in result.categories],
    })
    return 0


def cmd_warn(args: argparse.Namespace) -> int:
    """Multi-category warning for text on stdin."""
    _emit({"warning": summarize_warning(_read_text())})
    return 0


def cmd_spam(args: argparse.Namespace) -> int:
    data = _read_json()
    _emit(check_spam(data["content"], data.get("history") or []).to_dict())
    return 0


def cmd_moderate(args: argparse.Namespace) -> int:
    data = _read_json()
    gate = create_gate(args.config)
    decision = gate.check(data["content"], data.get("history") or [])
    _emit(decision.to_dict())
    return 0 if decision.allowed else EXIT_BLOCKED


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="content_gate",
        description="Contact-info and spam moderation for marketplace messages",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--log-level", default=None, help="Override configured log level")

    sub = parser.add_subparsers(dest="command", required=True)
    p_detect = sub.add_parser("detect", help="Detect personal info (text stdin)")
    p_detect.add_argument("--all", action="store_true", help="Also list every raw match")
    sub.add_parser("validate", help="Validate message content (text stdin)")
    p_redact = sub.add_parser("redact", help="Redact personal info (text stdin)")
    p_redact.add_argument("--mask", action="store_true", help="Mask with asterisks instead of [redacted]")
    sub.add_parser("warn", help="Summarize every category found (text stdin)")
    sub.add_parser("spam", help="Spam heuristic (JSON stdin)")
    sub.add_parser("moderate", help="Full moderation gate (JSON stdin)")

    args = parser.parse_args(argv)
    try:
        args.config = load_from_yaml(args.config) if args.config else load_default()
        setup_logging(args.log_level or args.config["log_level"], args.config["log_file"])
    except (OSError, ValueError) as e:
        # ConfigError is a ValueError; logging is not up yet
        parser.exit(EXIT_BAD_INPUT, f"content_gate: {e}\n")

    cmds = {
        "detect": cmd_detect,
        "validate": cmd_validate,
        "redact": cmd_redact,
        "warn": cmd_warn,
        "spam": cmd_spam,
        "moderate": cmd_moderate,
    }
    return cmds[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
