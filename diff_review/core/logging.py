"""Logging setup."""

import logging
import sys

from diff_review.core.config import settings


def setup_logging() -> None:
    """Configure application logging.

    Sets up a single stdout handler with the level from settings and
    reduces noise from the HTTP libraries the vendor SDKs use.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
