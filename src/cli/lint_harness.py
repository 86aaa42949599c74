# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line entry point for linting content files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from authorlint.loader import Loader, LoadContentOptions
from authorlint.output import AnalysisOutput
from authorlint.outputs import OUTPUT_FORMATS, build_output
from authorlint.pipeline import AnalysisPipeline, LintRunner, LintSummary

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure application logging with Rich handler.

    Log records go to stderr so the diagnostic stream on stdout stays
    machine-readable.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="authorlint")
    subparsers = parser.add_subparsers(dest="command", required=True)
    lint_parser = subparsers.add_parser("lint", help="Run project analyses on content files.")
    lint_parser.add_argument("paths", nargs="+", help="Content files to analyze.")
    lint_parser.add_argument(
        "--project-path",
        required=False,
        help="Project file to use instead of searching for project.aipj.",
    )
    lint_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="gcc",
        help="Diagnostic output format.",
    )
    lint_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    if args.command == "lint":
        return _run_lint(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_lint(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run lint command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 when every analysis completed, 1 when a load failed or
        an analysis aborted.
    """
    if args.verbose:
        logging.getLogger("authorlint").setLevel(logging.DEBUG)

    project_path = Path(args.project_path) if args.project_path else None
    if project_path is not None and not project_path.is_file():
        logger.warning(f"Project file does not exist (project_path={project_path})")

    def output_factory() -> AnalysisOutput:
        return build_output(args.format, stdout=stdout, stderr=stderr)

    runner = LintRunner(
        loader=Loader(),
        pipeline=AnalysisPipeline(),
        output_factory=output_factory,
        options=LoadContentOptions(project_path=project_path),
    )
    summary = runner.run(args.paths)
    _write_load_failures(summary=summary, stderr=stderr)
    return 0 if summary.ok else 1


def _write_load_failures(summary: LintSummary, stderr: TextIO) -> None:
    """Write fatal load failures to stderr.

    Args:
        summary: Batch summary.
        stderr: Standard error stream.
    """
    for outcome in summary.load_failures:
        stderr.write(f"load_error: {outcome.content_path}: {outcome.error}\n")


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
