"""Build-configuration (tsconfig-style) resolution.

Only ``rootDir`` and ``outDir`` matter to inlining, so ``extends`` chains are
merged shallowly: a child's ``compilerOptions`` keys replace the parent's and
everything else is inherited as-is.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from inline_resources.errors import ConfigNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)

PATH_OPTIONS = ("outDir", "rootDir")


@dataclass(frozen=True)
class BuildConfig:
    """Resolved build configuration; directories are absolute when set."""

    path: Path
    root_dir: Path | None = None
    out_dir: Path | None = None
    compiler_options: Mapping[str, Any] = field(default_factory=dict)
    extends: Path | None = None

    def require_dirs(self) -> tuple[Path, Path]:
        """Return ``(root_dir, out_dir)`` or raise if either is missing."""
        missing = [
            name
            for name, value in (("rootDir", self.root_dir), ("outDir", self.out_dir))
            if value is None
        ]
        if missing:
            raise ConfigurationError(
                f"{self.path} does not set compilerOptions.{' or '.join(missing)}",
                path=self.path,
            )
        return self.root_dir, self.out_dir


def _load_document(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigNotFoundError(
            f"Could not read build configuration {path}: {exc}", path=path
        ) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigNotFoundError(
            f"Build configuration {path} is not valid JSON: {exc}", path=path
        ) from exc
    if not isinstance(data, dict):
        raise ConfigNotFoundError(
            f"Build configuration {path} must be a JSON object", path=path
        )
    return data


def _own_compiler_options(data: dict, path: Path) -> dict[str, Any]:
    options = data.get("compilerOptions")
    if options is None:
        return {}
    if not isinstance(options, dict):
        raise ConfigurationError(
            f"compilerOptions in {path} must be an object", path=path
        )
    return dict(options)


def _resolve_path_options(options: dict[str, Any], config_dir: Path, path: Path) -> None:
    for prop in PATH_OPTIONS:
        value = options.get(prop)
        if not value:
            continue
        if not isinstance(value, str):
            raise ConfigurationError(
                f"compilerOptions.{prop} in {path} must be a string", path=path
            )
        options[prop] = str((config_dir / value).resolve())


def _extended_path(config_dir: Path, extends: str) -> Path:
    """Resolve an ``extends`` reference; ``./base`` falls back to ``./base.json``."""
    candidate = (config_dir / extends).resolve()
    if candidate.exists() or candidate.suffix == ".json":
        return candidate
    with_json = candidate.with_name(candidate.name + ".json")
    return with_json if with_json.is_file() else candidate


def _resolve(path: Path, chain: tuple[Path, ...]) -> BuildConfig:
    if path in chain:
        cycle = " -> ".join(str(p) for p in (*chain, path))
        raise ConfigurationError(f"Circular extends chain: {cycle}", path=path)

    logger.debug("Reading build configuration %s", path)
    data = _load_document(path)
    config_dir = path.parent
    options = _own_compiler_options(data, path)
    # Own paths are made absolute against this document before merging, so
    # inherited values keep the parent's directory as their base.
    _resolve_path_options(options, config_dir, path)

    parent_path = None
    extends = data.get("extends")
    if extends:
        if not isinstance(extends, str):
            raise ConfigurationError(f"extends in {path} must be a string", path=path)
        parent_path = _extended_path(config_dir, extends)
        parent = _resolve(parent_path, (*chain, path))
        options = {**parent.compiler_options, **options}

    root_dir = options.get("rootDir")
    out_dir = options.get("outDir")
    return BuildConfig(
        path=path,
        root_dir=Path(root_dir) if root_dir else None,
        out_dir=Path(out_dir) if out_dir else None,
        compiler_options=MappingProxyType(options),
        extends=parent_path,
    )


def resolve_config(path: str | Path) -> BuildConfig:
    """Read the configuration at ``path`` and follow its ``extends`` chain.

    Raises ``ConfigNotFoundError`` when the document (or any ancestor) is
    missing or not JSON, and ``ConfigurationError`` for malformed options.
    Nothing is cached; every call re-reads from disk.
    """
    return _resolve(Path(path).resolve(), ())


__all__ = ["BuildConfig", "PATH_OPTIONS", "resolve_config"]
