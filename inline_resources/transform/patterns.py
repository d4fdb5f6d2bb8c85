"""Regexes for the component-metadata declarations that get rewritten.

Recognition is textual. The supported shapes are exactly:

- ``templateUrl: '<path>.html'``: single quotes only; the path may not
  contain a quote. Double-quoted or backtick references are left alone.
- ``styleUrls: [ ... ]``: everything up to the first ``]`` is handed to
  ``parse_string_array``, so a URL containing ``]`` is not supported.
- ``moduleId: module.id``: with an optional trailing comma; surrounding
  whitespace is consumed along with it.
"""

from __future__ import annotations

import re

TEMPLATE_URL_RE = re.compile(r"templateUrl:\s*'([^']+?\.html)'")
STYLE_URLS_RE = re.compile(r"styleUrls:\s*(\[[\s\S]*?\])")
MODULE_ID_RE = re.compile(r"\s*moduleId:\s*module\.id\s*,?\s*")

# Line breaks plus the indentation that follows them.
LINE_BREAK_RUN_RE = re.compile(r"([\n\r]\s*)+")


__all__ = [
    "LINE_BREAK_RUN_RE",
    "MODULE_ID_RE",
    "STYLE_URLS_RE",
    "TEMPLATE_URL_RE",
]
