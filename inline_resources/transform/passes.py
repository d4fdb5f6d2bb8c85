"""Individual rewrite passes applied to compiled component source."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path

from inline_resources.core.file_paths import read_resource_text
from inline_resources.transform.literals import parse_string_array
from inline_resources.transform.patterns import (
    LINE_BREAK_RUN_RE,
    MODULE_ID_RE,
    STYLE_URLS_RE,
    TEMPLATE_URL_RE,
)

logger = logging.getLogger(__name__)

UrlResolver = Callable[[str], str | Path]


def shorten_resource(text: str) -> str:
    """Collapse line breaks (and following indentation) to one space, escape ``"``."""
    return LINE_BREAK_RUN_RE.sub(" ", text).replace('"', '\\"')


def _load_shortened(url: str, url_resolver: UrlResolver) -> str:
    path = url_resolver(url)
    logger.debug("Inlining %s from %s", url, path)
    return shorten_resource(read_resource_text(url, path))


def inline_template(content: str, url_resolver: UrlResolver) -> str:
    """Replace each ``templateUrl: '...'`` with ``template: "..."``."""

    def _replace(match: re.Match) -> str:
        return f'template: "{_load_shortened(match.group(1), url_resolver)}"'

    return TEMPLATE_URL_RE.sub(_replace, content)


def inline_style(content: str, url_resolver: UrlResolver) -> str:
    """Replace each ``styleUrls: [...]`` with ``styles: [...]``."""

    def _replace(match: re.Match) -> str:
        urls = parse_string_array(match.group(1))
        styles = [f'"{_load_shortened(url, url_resolver)}"' for url in urls]
        return "styles: [" + ",\n".join(styles) + "]"

    return STYLE_URLS_RE.sub(_replace, content)


def remove_module_id(content: str) -> str:
    """Remove every ``moduleId: module.id`` marker."""
    return MODULE_ID_RE.sub("", content)


__all__ = [
    "UrlResolver",
    "inline_style",
    "inline_template",
    "remove_module_id",
    "shorten_resource",
]
