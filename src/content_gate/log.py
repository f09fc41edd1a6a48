"""Logging setup (loguru).

Library modules only bind a named logger and the package is disabled on
import; the CLI / sidecar turn it on and install sinks via
setup_logging().  Never log message text, only categories and lengths.
"""

from __future__ import annotations
import os
import sys

from loguru import logger

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str):
    """Return the shared logger with the module name attached."""
    return logger.bind(name=name)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Install a stderr sink (and optionally a rotating file sink)."""
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"unknown log level: {level}")

    logger.remove()
    logger.configure(extra={"name": "content_gate"})
    logger.enable("content_gate")
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}",
            level=level,
            rotation="10 MB",
            compression="zip",
        )

    logger.bind(name=__name__).debug("logging initialized at {}", level)
