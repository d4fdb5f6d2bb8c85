"""Text rewrite passes for compiled component output."""

from inline_resources.transform.passes import (
    inline_style,
    inline_template,
    remove_module_id,
    shorten_resource,
)
from inline_resources.transform.pipeline import inline_resources_from_string

__all__ = [
    "inline_resources_from_string",
    "inline_style",
    "inline_template",
    "remove_module_id",
    "shorten_resource",
]
