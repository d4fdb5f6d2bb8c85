"""CLI entry point: parse args, configure logging, run the inliner."""

from __future__ import annotations

import argparse
import logging
import sys

from inline_resources import __version__
from inline_resources.core.fallbacks import print_error
from inline_resources.core.output import colorize, log
from inline_resources.errors import ConfigurationError
from inline_resources.runner import DEFAULT_MAX_WORKERS, RunReport, inline_resources

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inline-resources",
        description=(
            "Inline templateUrl/styleUrls resources into compiled output and "
            "strip moduleId markers."
        ),
    )
    parser.add_argument("config", help="Path to the tsconfig used for compilation")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report which files would change without writing them",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_MAX_WORKERS,
        help=f"Files processed concurrently (default: {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_summary(report: RunReport, *, dry_run: bool) -> None:
    verb = "Would inline" if dry_run else "Inlined"
    summary = f"{verb} {report.changed} of {report.processed} file(s)"
    if report.failed:
        print(colorize(f"{summary}, {report.failed} failed", "yellow"), file=sys.stderr)
        return
    print(colorize(summary, "green"), file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    log(f"Inlining resources in: {args.config}")
    try:
        report = inline_resources(args.config, max_workers=args.workers, dry_run=args.dry_run)
    except ConfigurationError as exc:
        print_error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)

    _print_summary(report, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
