"""Inline external templates and stylesheets into compiled component output."""

from inline_resources.transform.pipeline import inline_resources_from_string

__version__ = "0.3.0"

__all__ = ["__version__", "inline_resources_from_string"]
