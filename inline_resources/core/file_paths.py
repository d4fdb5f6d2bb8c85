"""File read/write helpers for compiled output and inlined resources."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from inline_resources.errors import ResourceReadError


def read_source_text(path: str | Path) -> str:
    """Read a compiled output file as UTF-8, keeping its line endings."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def read_resource_text(url: str, path: str | Path) -> str:
    """Read a template/stylesheet referenced by ``url`` and resolved to ``path``."""
    try:
        return read_source_text(path)
    except (OSError, ValueError) as exc:
        # ValueError covers undecodable bytes and paths with an embedded NUL.
        raise ResourceReadError(url, path, exc) from exc


def safe_write_text(filepath: str | Path, content: str) -> None:
    """Atomically write text to a file using temp+rename."""
    p = Path(filepath)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=p.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp, str(p))
    except OSError:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


__all__ = ["read_resource_text", "read_source_text", "safe_write_text"]
