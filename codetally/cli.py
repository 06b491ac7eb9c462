"""Command-line front door for codetally.

Parses CLI options, merges them over persisted config defaults, and runs one
scan session across the requested roots. Results are written to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .classify import LanguageBuckets
from .errors import ConfigurationError
from .output import render
from .scan import VIEW_MODES, ScanOptions, ScanSession, normalized_scan_roots

EXIT_TRAVERSAL_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(debug: bool, verbose: bool) -> None:
    """Route package diagnostics to stdout as bare message lines."""
    logger = logging.getLogger("codetally")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    if debug:
        logger.setLevel(logging.DEBUG)
    elif verbose:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codetally",
        description="Classify source files under one or more directories by language.",
    )
    parser.add_argument("roots", nargs="*", help="Root directories to scan. Defaults to current directory.")
    parser.add_argument(
        "--match",
        default=None,
        help="Space-separated regular expressions; only matching files are scanned.",
    )
    parser.add_argument(
        "--ignore",
        default=None,
        help="Space-separated regular expressions; matching files are skipped.",
    )
    parser.add_argument("--view-mode", choices=VIEW_MODES, default=None, help="Summarize by file or by subdirectory.")
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="Subdirectory depth captured in dirs view mode (default: 1).",
    )
    parser.add_argument("--output", choices=config.OUTPUT_FORMATS, default=None, help="Output format.")
    parser.add_argument("--debug", action="store_true", help="Print every filtering decision.")
    parser.add_argument("--show-matched", action="store_true", help="Print files selected by --match.")
    parser.add_argument("--show-ignored", action="store_true", help="Print files skipped by --ignore.")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with remaining roots after a directory read error.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --match/--ignore as defaults for future runs.",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> ScanOptions:
    """Merge parsed CLI arguments over persisted config defaults."""
    return ScanOptions(
        match=args.match if args.match is not None else config.load_match_patterns(),
        ignore=args.ignore if args.ignore is not None else config.load_ignore_patterns(),
        view_mode=args.view_mode or config.load_view_mode(),
        capture_depth=args.depth if args.depth is not None else config.load_capture_depth(),
        debug=args.debug,
        show_matched=args.show_matched,
        show_ignored=args.show_ignored,
    )


def main(argv: list[str] | None = None, default_root: Path | None = None) -> None:
    """Parse CLI arguments, scan the roots, and print the rendered result.

    ``default_root`` is primarily for tests; when omitted the current working
    directory is scanned if no roots are given. Configuration errors exit with
    status 2 and directory read errors with status 1.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.debug, args.show_matched or args.show_ignored)

    options = options_from_args(args)
    buckets = LanguageBuckets()
    try:
        session = ScanSession(options, classifier=buckets)
    except ConfigurationError as exc:
        sys.stderr.write(f"codetally: {exc}\n")
        raise SystemExit(EXIT_CONFIGURATION_ERROR) from exc

    if args.save_defaults:
        config.save_patterns(options.match, options.ignore)

    roots = normalized_scan_roots(args.roots, default_root or Path.cwd())
    report = session.scan(roots, stop_on_error=not args.keep_going)
    for error in report.errors:
        sys.stderr.write(f"codetally: {error}\n")
    if report.errors and not args.keep_going:
        raise SystemExit(EXIT_TRAVERSAL_ERROR)

    output_format = args.output or config.load_output_format()
    sys.stdout.write(render(output_format, report, buckets, options.view_mode))
    if report.errors:
        raise SystemExit(EXIT_TRAVERSAL_ERROR)


if __name__ == "__main__":
    main()
