"""Redeye CLI: convert Apache-style access logs on stdin to Logstash JSON on stdout.

    redeye --common-format   < access.log > events.json
    redeye --combined-format < access.log > events.json
"""
from __future__ import annotations

import contextlib
import io
import logging
import sys
from typing import Iterator, TextIO

import click
from pydantic import ValidationError
from rich.console import Console

from .config import Settings
from .errors import ConfigurationError, TransportError
from .log import configure_logging
from .parsers.formats import LogFormat, get_parser
from .pipeline import run_pipeline

err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

FORMAT_HELP = (
    "Parse log entries assuming the {} log format. Entries that don't match "
    "this format will be discarded and a warning will be printed to stderr."
)


@contextlib.contextmanager
def _stdio() -> Iterator[tuple[TextIO, TextIO]]:
    """UTF-8 text views of stdin and stdout. Input lines end at "\\n" only."""
    reader = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="strict", newline="\n")
    writer = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="\n", write_through=True)
    try:
        yield reader, writer
    finally:
        # Detach so the process-wide streams stay open
        reader.detach()
        with contextlib.suppress(OSError):
            # A broken stdout has already been reported by the pipeline
            writer.detach()


def _select_format(common: bool, combined: bool, settings: Settings) -> LogFormat:
    if common and combined:
        raise click.UsageError("--common-format and --combined-format are mutually exclusive.")
    if common:
        return LogFormat.COMMON
    if combined:
        return LogFormat.COMBINED
    if settings.format:
        return LogFormat(settings.format)
    raise ConfigurationError("Log input format must be specified")


@click.command()
@click.version_option(version="0.4.0", prog_name="redeye")
@click.option("--common-format", "common", is_flag=True, help=FORMAT_HELP.format("Common"))
@click.option("--combined-format", "combined", is_flag=True, help=FORMAT_HELP.format("Combined"))
@click.option(
    "--log-level", default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Diagnostic level on stderr (default: REDEYE_LOG_LEVEL or WARNING).",
)
@click.option("--stats", is_flag=True, help="Print a summary of converted and skipped lines to stderr.")
def main(common: bool, combined: bool, log_level: str | None, stats: bool) -> None:
    """Redeye converts NCSA or Apache HTTPd style access logs to JSON understood
    by Logstash.

    Access log entries are read line by line from stdin, converted to
    Logstash JSON, and emitted on stdout. Currently Common and Combined
    access log formats are supported. For more information about these
    formats, see https://httpd.apache.org/docs/current/logs.html#accesslog
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging()
        err_console.print(f"[red]redeye: ERROR:[/red] Invalid configuration: {exc.error_count()} error(s)")
        logger.debug("%s", exc)
        sys.exit(EXIT_FAILURE)

    configure_logging(log_level or settings.log_level)

    try:
        fmt = _select_format(common, combined, settings)
    except ConfigurationError as exc:
        err_console.print(f"[red]redeye: ERROR:[/red] {exc}")
        sys.exit(EXIT_FAILURE)

    parser = get_parser(fmt)
    logger.debug("Using %s log format", parser.name)

    with _stdio() as (reader, writer):
        try:
            result = run_pipeline(reader, parser, writer)
        except TransportError as exc:
            logger.error("%s", exc)
            sys.exit(EXIT_FAILURE)

    if stats:
        err_console.print(
            f"[dim]Read {result.lines_read} lines, wrote {result.events_written} events, "
            f"skipped {result.lines_skipped}[/dim]"
        )


if __name__ == "__main__":
    main()
