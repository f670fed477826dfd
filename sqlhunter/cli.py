from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .console import RichLogger, default_console
from .input_sources import DEFAULT_EXTENSION, WalkError, iter_source_files
from .results import MarkdownReport, ScanSummary
from .scanner import Scanner

DEFAULT_INPUT = "."
DEFAULT_OUTPUT = "output.md"

EXIT_OK = 0
EXIT_WALK_ABORTED = 1
EXIT_FATAL = 2


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sqlhunter",
        description="Find string literals that look like raw SQL and write a Markdown report.",
    )
    ap.add_argument(
        "-input",
        "--input",
        dest="input",
        default=DEFAULT_INPUT,
        help="Directory containing source files (default: current directory).",
    )
    ap.add_argument(
        "-output",
        "--output",
        dest="output",
        default=DEFAULT_OUTPUT,
        help="Name and path of the Markdown report (default: output.md).",
    )
    ap.add_argument(
        "-ext",
        "--extension",
        dest="extension",
        default=DEFAULT_EXTENSION,
        help="Suffix of the source files to scan (default: .py).",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose debug logs")
    return ap


def _normalize_extension(raw: str) -> str:
    value = raw.strip()
    if value and not value.startswith("."):
        value = "." + value
    return value


def run_scan(args) -> int:
    console = default_console()
    logger = RichLogger(console=console, verbose=args.verbose)

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Path '{args.input}' does not exist")
        return EXIT_FATAL

    extension = _normalize_extension(args.extension)
    if not extension:
        logger.error("Source extension cannot be empty")
        return EXIT_FATAL

    output_path = Path(args.output)
    try:
        report = MarkdownReport(output_path)
    except OSError as exc:
        logger.error(f"Unable to create file {args.output}: {exc}")
        return EXIT_FATAL

    logger.info(f"Scanning {input_path} for *{extension} files")
    summary = ScanSummary()
    status = EXIT_OK
    with report:
        scanner = Scanner(report=report, logger=logger)
        try:
            for path in iter_source_files(input_path, extension):
                summary.record(scanner.scan_file(path))
        except WalkError as exc:
            logger.error(f"Directory walk aborted: {exc}")
            status = EXIT_WALK_ABORTED

    console.print(summary.to_table())
    logger.done(f"Report written to: {output_path}")
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run_scan(args)
