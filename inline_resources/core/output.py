"""Terminal output helpers shared across the CLI and runner."""

from __future__ import annotations

import os
import sys

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}

NO_COLOR = os.environ.get("NO_COLOR") is not None


def colorize(text: str, color: str) -> str:
    if NO_COLOR or not sys.stdout.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def log(msg: str) -> None:
    """Print a dim status message to stderr."""
    print(colorize(msg, "dim"), file=sys.stderr)


__all__ = [
    "COLORS",
    "NO_COLOR",
    "colorize",
    "log",
]
