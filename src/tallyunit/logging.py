"""Structured logging setup for tallyunit using loguru.

Supports three verbosity modes:
- quiet: WARNING+ only
- normal: INFO+ with simplified format
- verbose: DEBUG+ with full format (timestamps, module names)

Logs always go to stderr; the test report owns stdout.
"""

from __future__ import annotations

import os
import sys
from typing import Literal

from loguru import logger

from tallyunit.constants import VERBOSITY_ENV

__all__ = ["VERBOSE_FORMAT", "logger", "setup_logging"]

# Library stays silent until an application calls setup_logging()
logger.disable("tallyunit")

# Full format with timestamps and module info (verbose mode)
VERBOSE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

# Simplified format without timestamps and module info (normal mode)
SIMPLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"

VerbosityType = Literal["quiet", "normal", "verbose"]


def _get_verbosity_from_env() -> VerbosityType:
    """Get verbosity from the TALLYUNIT_VERBOSITY environment variable."""
    env_value = os.environ.get(VERBOSITY_ENV, "normal").lower()
    if env_value in ("quiet", "normal", "verbose"):
        return env_value  # type: ignore[return-value]
    return "normal"


def setup_logging(
    log_file: str | None = None,
    verbosity: VerbosityType | None = None,
    colorize: bool = True,
) -> None:
    """Configure logging for the application.

    Args:
        log_file: Optional file path to also write DEBUG+ logs to, rotated at
            10 MB.
        verbosity: Override verbosity level ("quiet", "normal", "verbose").
                   If None, reads from TALLYUNIT_VERBOSITY env var.
        colorize: Colourise console output.
    """
    logger.remove()
    logger.enable("tallyunit")

    effective_verbosity = verbosity or _get_verbosity_from_env()

    if effective_verbosity == "quiet":
        effective_level = "WARNING"
        log_format = SIMPLE_FORMAT
    elif effective_verbosity == "verbose":
        effective_level = "DEBUG"
        log_format = VERBOSE_FORMAT
    else:  # normal
        effective_level = "INFO"
        log_format = SIMPLE_FORMAT

    logger.add(
        sys.stderr,
        format=log_format,
        level=effective_level,
        colorize=colorize,
    )

    if log_file:
        # Always use verbose format for log files
        logger.add(
            log_file,
            format=VERBOSE_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
        )

