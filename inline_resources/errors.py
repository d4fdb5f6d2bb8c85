"""Error taxonomy for configuration resolution and resource inlining."""

from __future__ import annotations

from pathlib import Path


class InlineResourcesError(Exception):
    """Base class for every error raised by inline_resources."""


class ConfigurationError(InlineResourcesError, ValueError):
    """Raised when a build configuration (or an ancestor) cannot be used."""

    def __init__(self, message: str, *, path: str | Path | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigNotFoundError(ConfigurationError):
    """Raised when a configuration document is missing or is not valid JSON."""


class ResourceReadError(InlineResourcesError, OSError):
    """Raised when a referenced template or stylesheet cannot be read."""

    def __init__(self, url: str, path: str | Path, reason: object):
        super().__init__(f"Could not read resource '{url}' at {path}: {reason}")
        self.url = url
        self.path = Path(path)


class StyleUrlsParseError(InlineResourcesError, ValueError):
    """Raised when ``styleUrls`` is not an array of string literals."""

    def __init__(self, message: str, *, text: str, offset: int):
        super().__init__(f"{message} at offset {offset} in {text!r}")
        self.text = text
        self.offset = offset


__all__ = [
    "ConfigNotFoundError",
    "ConfigurationError",
    "InlineResourcesError",
    "ResourceReadError",
    "StyleUrlsParseError",
]
