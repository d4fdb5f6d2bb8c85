"""Rewrite every compiled file under a build's ``outDir`` in place."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from inline_resources.config import resolve_config
from inline_resources.core.fallbacks import (
    log_best_effort_failure,
    print_file_error,
    warn_best_effort,
)
from inline_resources.core.file_paths import read_source_text, safe_write_text
from inline_resources.errors import ResourceReadError, StyleUrlsParseError
from inline_resources.file_discovery import find_compiled_files
from inline_resources.transform.passes import UrlResolver
from inline_resources.transform.pipeline import inline_resources_from_string

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8

# Failures that stay scoped to the file being processed.
FILE_ERRORS = (OSError, UnicodeDecodeError, ResourceReadError, StyleUrlsParseError)


@dataclass
class FileResult:
    file: Path
    changed: bool = False
    error: str | None = None


@dataclass
class RunReport:
    """Outcome of one inlining run, one entry per compiled file."""

    config_path: Path
    results: list[FileResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def changed(self) -> int:
        return sum(1 for r in self.results if r.changed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.error is not None)


def make_url_resolver(file_path: str | Path, *, root_dir: Path, out_dir: Path) -> UrlResolver:
    """Map URLs relative to a compiled file onto the matching source directory."""
    relative_dir = os.path.relpath(Path(file_path).parent, out_dir)

    def _resolve(url: str) -> Path:
        # A leading "/" stays relative to the source directory.
        return Path(os.path.normpath(os.path.join(root_dir, relative_dir, url.lstrip("/"))))

    return _resolve


def process_file(
    file_path: Path, *, root_dir: Path, out_dir: Path, dry_run: bool = False
) -> FileResult:
    """Read, transform and (unless ``dry_run``) write back a single file."""
    original = read_source_text(file_path)
    resolver = make_url_resolver(file_path, root_dir=root_dir, out_dir=out_dir)
    content = inline_resources_from_string(original, resolver)
    if content == original:
        return FileResult(file=file_path)
    if not dry_run:
        safe_write_text(file_path, content)
    return FileResult(file=file_path, changed=True)


def inline_resources(
    config_path: str | Path,
    *,
    max_workers: int | None = None,
    dry_run: bool = False,
) -> RunReport:
    """Inline templates and styles for every ``*.js`` file in the build output.

    Configuration errors propagate before any file is touched. Per-file
    failures are printed and recorded on the report; the remaining files are
    still processed.
    """
    config = resolve_config(config_path)
    root_dir, out_dir = config.require_dirs()
    files = find_compiled_files(out_dir)
    report = RunReport(config_path=config.path)
    if not files:
        warn_best_effort(f"No compiled files found under {out_dir}")
        return report

    requested = (
        max_workers
        if isinstance(max_workers, int) and max_workers > 0
        else DEFAULT_MAX_WORKERS
    )
    workers = max(1, min(len(files), requested))
    results: list[FileResult] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(
                process_file,
                file_path,
                root_dir=root_dir,
                out_dir=out_dir,
                dry_run=dry_run,
            ): file_path
            for file_path in files
        }
        for future in as_completed(futures):
            file_path = futures[future]
            try:
                results.append(future.result())
            except FILE_ERRORS as exc:
                print_file_error(file_path, exc)
                log_best_effort_failure(logger, f"inline resources into {file_path}", exc)
                results.append(FileResult(file=file_path, error=str(exc)))

    report.results = sorted(results, key=lambda r: str(r.file))
    return report


__all__ = [
    "DEFAULT_MAX_WORKERS",
    "FileResult",
    "RunReport",
    "inline_resources",
    "make_url_resolver",
    "process_file",
]
