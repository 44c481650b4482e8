# =============================================================================
# curatorator/cli/report.py - CLI Report Command
# =============================================================================
#
# Runs the full report pipeline for one artist and writes the HTML document
# to stdout:
#
#   python -m curatorator.cli.report                    # Andy Warhol, stdout
#   python -m curatorator.cli.report > warhol.html
#   python -m curatorator.cli.report --artist-id <id> -o report.html
#
# With no arguments the configured default artist is used
# (config/config.yaml, report.artist_id).
#
# Logs go to stderr so stdout carries only the document.  Any error is
# fatal: nothing is written to stdout and the exit status is 1.
# =============================================================================

"""Standalone CLI for rendering a similar-artists report.

Usage::

    python -m curatorator.cli.report
    python -m curatorator.cli.report --artist-id 4d8b92b34eb68a1b2c0003f4
    python -m curatorator.cli.report --output report.html --quiet
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from curatorator.config.loader import load_config
from curatorator.config.settings import Settings
from curatorator.utils.errors import CuratoratorError
from curatorator.utils.logging import configure_logging, get_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curatorator",
        description="Render an HTML report of artists similar to one Artsy artist.",
    )
    parser.add_argument(
        "--artist-id",
        default=None,
        help="Artsy artist id (default: report.artist_id from config/config.yaml).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the document to this file instead of stdout.",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to the YAML config file.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


async def _run(artist_id: str | None, output_file: str | None, config: dict) -> int:
    """Render the report and emit it. Returns the process exit status."""
    # Deferred so --help stays fast and logging is configured first.
    from curatorator.main import run_report

    logger = get_logger(__name__)
    try:
        document = await run_report(artist_id=artist_id, config=config)
    except CuratoratorError as exc:
        logger.error("report_failed", error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if output_file:
        Path(output_file).write_text(document, encoding="utf-8")
        print(f"Report written to: {output_file}", file=sys.stderr)
    else:
        sys.stdout.write(document)
        sys.stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)

    settings = Settings()
    log_level = "WARNING" if args.quiet else settings.log_level
    configure_logging(log_level=log_level, json_output=settings.app_env == "production")

    try:
        config = load_config(args.config, settings=settings)
    except CuratoratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return asyncio.run(_run(args.artist_id, args.output, config))


if __name__ == "__main__":
    sys.exit(main())
