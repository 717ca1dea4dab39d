"""Streaming read -> parse -> serialize -> write loop.

Lines are handled strictly one at a time, in input order. A line that
fails to parse or serialize is logged and skipped; a failure of the input
or output stream itself raises TransportError and ends the run.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

from .errors import (
    LogParseError,
    SerializationError,
    TimestampParseError,
    TransportError,
)
from .parsers.base import LogEvent, LogLineParser

logger = logging.getLogger(__name__)


@dataclass
class PipelineStats:
    """Counters for one pipeline run."""

    lines_read: int = 0
    events_written: int = 0
    lines_skipped: int = 0


def serialize_event(event: LogEvent) -> str:
    """Render event as one compact JSON object (no trailing newline)."""
    try:
        return json.dumps(event.to_dict(), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield input lines without their line terminator.

    Undecodable input is treated like any other read failure.
    """
    it = iter(lines)
    while True:
        try:
            raw = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise TransportError(str(exc)) from exc
        yield raw.rstrip("\r\n")


def _write(out: TextIO, text: str) -> None:
    try:
        out.write(text)
    except OSError as exc:
        raise TransportError(str(exc)) from exc


def run_pipeline(
    lines: Iterable[str],
    parser: LogLineParser,
    out: TextIO,
) -> PipelineStats:
    """Convert every line from lines with parser and write JSON to out.

    Args:
        lines:  Input lines, e.g. a text file object or a list of strings.
        parser: The format parser selected for this run.
        out:    Text stream receiving one JSON object per accepted line.

    Returns:
        Counters for lines read, written and skipped.

    Raises:
        TransportError: reading lines or writing to out failed.
    """
    stats = PipelineStats()

    for line in _read_lines(lines):
        stats.lines_read += 1
        try:
            payload = serialize_event(parser.parse(line))
        except (LogParseError, TimestampParseError, SerializationError) as exc:
            logger.warning("%s", exc)
            stats.lines_skipped += 1
            continue

        _write(out, payload + "\n")
        stats.events_written += 1

    try:
        out.flush()
    except OSError as exc:
        raise TransportError(str(exc)) from exc

    logger.debug(
        "Pipeline finished: %d read, %d written, %d skipped",
        stats.lines_read, stats.events_written, stats.lines_skipped,
    )
    return stats
