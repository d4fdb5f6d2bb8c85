"""Compiled-output discovery."""

from __future__ import annotations

from pathlib import Path

COMPILED_EXTENSION = ".js"


def find_compiled_files(out_dir: str | Path, extension: str = COMPILED_EXTENSION) -> list[Path]:
    """Return every ``*<extension>`` file under ``out_dir`` (recursive, sorted)."""
    root = Path(out_dir)
    if not root.is_dir():
        return []
    return sorted(p for p in root.rglob(f"*{extension}") if p.is_file())


__all__ = ["COMPILED_EXTENSION", "find_compiled_files"]
