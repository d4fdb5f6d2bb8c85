"""Shared helpers for consistent error and warning output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from inline_resources.core.output import colorize


def log_best_effort_failure(
    logger: logging.Logger, action: str, exc: Exception
) -> None:
    """Record non-fatal failures in a consistent debug format."""
    logger.debug("Best-effort step failed while trying to %s: %s", action, exc)


def print_error(message: str) -> None:
    """Print a user-facing error message to stderr in a consistent format."""
    print(colorize(f"  Error: {message}", "red"), file=sys.stderr)


def warn_best_effort(message: str) -> None:
    """Emit a consistent user-facing warning for non-fatal failures."""
    print(colorize(f"  WARNING: {message}", "yellow"), file=sys.stderr)


def print_file_error(path: str | Path, exc: Exception) -> None:
    """Print a standardized per-file processing failure."""
    print_error(f"An error occurred while inlining {path}: {exc}")


__all__ = [
    "log_best_effort_failure",
    "print_error",
    "print_file_error",
    "warn_best_effort",
]
