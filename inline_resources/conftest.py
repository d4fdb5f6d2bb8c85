"""Shared pytest fixtures for the inline_resources test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture()
def write_file(tmp_path: Path):
    """Write text under tmp_path (creating parents) and return the path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_json(write_file):
    """Write a JSON document under tmp_path and return the path."""

    def _write(relative: str, data: object) -> Path:
        return write_file(relative, json.dumps(data))

    return _write
