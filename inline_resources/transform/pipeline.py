"""Resource-inlining pipeline over a single compiled file's text."""

from __future__ import annotations

from functools import reduce

from inline_resources.transform.passes import (
    UrlResolver,
    inline_style,
    inline_template,
    remove_module_id,
)


def _strip_module_id(content: str, url_resolver: UrlResolver) -> str:
    return remove_module_id(content)


# Template and style inlining run before the marker removal.
PASSES = (inline_template, inline_style, _strip_module_id)


def inline_resources_from_string(content: str, url_resolver: UrlResolver) -> str:
    """Run every pass over ``content`` in order and return the rewritten text."""
    return reduce(lambda text, fn: fn(text, url_resolver), PASSES, content)


__all__ = ["PASSES", "inline_resources_from_string"]
