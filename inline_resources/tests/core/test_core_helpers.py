"""Direct tests for file, output and fallback helpers."""

from __future__ import annotations

import logging

import pytest

import inline_resources.core.fallbacks as fallbacks_mod
import inline_resources.core.output as output_mod
from inline_resources.core.file_paths import (
    read_resource_text,
    read_source_text,
    safe_write_text,
)
from inline_resources.errors import ResourceReadError


def test_read_source_text_keeps_crlf(tmp_path):
    path = tmp_path / "a.js"
    path.write_bytes(b"a\r\nb\r\n")

    assert read_source_text(path) == "a\r\nb\r\n"


def test_safe_write_text_round_trips_and_leaves_no_temp(tmp_path):
    path = tmp_path / "out" / "a.js"

    safe_write_text(path, "x\r\ny")

    assert path.read_bytes() == b"x\r\ny"
    assert [p.name for p in path.parent.iterdir()] == ["a.js"]


def test_read_resource_text_wraps_missing_file(tmp_path):
    with pytest.raises(ResourceReadError) as excinfo:
        read_resource_text("./x.html", tmp_path / "x.html")

    assert excinfo.value.url == "./x.html"
    assert excinfo.value.path == tmp_path / "x.html"
    assert isinstance(excinfo.value, OSError)
    assert "./x.html" in str(excinfo.value)


def test_read_resource_text_wraps_decode_error(tmp_path):
    path = tmp_path / "bad.css"
    path.write_bytes(b"\xff\xfe\x00")

    with pytest.raises(ResourceReadError):
        read_resource_text("bad.css", path)


def test_colorize_plain_when_not_tty(monkeypatch):
    monkeypatch.setattr(output_mod, "NO_COLOR", True)

    assert output_mod.colorize("hi", "red") == "hi"


def test_print_error_writes_to_stderr(capsys, monkeypatch):
    monkeypatch.setattr(output_mod, "NO_COLOR", True)

    fallbacks_mod.print_file_error("dist/a.js", OSError("denied"))

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: An error occurred while inlining dist/a.js: denied" in captured.err


def test_log_best_effort_failure_uses_debug(caplog):
    logger = logging.getLogger("inline_resources.tests.core_helpers")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        fallbacks_mod.log_best_effort_failure(logger, "write a.js", OSError("disk full"))

    assert "write a.js" in caplog.text
    assert "disk full" in caplog.text


def test_read_resource_text_wraps_embedded_nul(tmp_path):
    with pytest.raises(ResourceReadError) as excinfo:
        read_resource_text("\0x.css", tmp_path / "\0x.css")

    assert excinfo.value.url == "\0x.css"
