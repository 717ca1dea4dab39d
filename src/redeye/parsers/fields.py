"""Typed extraction of single regex captures.

Every extractor takes the match groups, the group name and the original
line, and either returns a FieldValue or raises. The original line is
carried into the error so the warning can show what was discarded.
"""
from __future__ import annotations

from datetime import datetime
from typing import Callable, Mapping, Optional

from ..errors import LogParseError, TimestampParseError
from .base import FieldValue, Integer, Text, Timestamp

# 10/Oct/1999:21:15:05 +0500
COMMON_LOG_TIMESTAMP = "%d/%b/%Y:%H:%M:%S %z"

_U64_MAX = 2**64 - 1

Captures = Mapping[str, Optional[str]]
Extractor = Callable[[Captures, str, str], FieldValue]


def _capture(captures: Captures, group: str, line: str) -> str:
    raw = captures.get(group)
    if raw is None:
        raise LogParseError(line)
    return raw


def extract_text(captures: Captures, group: str, line: str) -> Text:
    return Text(_capture(captures, group, line))


def extract_int(captures: Captures, group: str, line: str) -> Integer:
    """Parse an unsigned 64-bit decimal count (status code, byte count)."""
    raw = _capture(captures, group, line)
    # int() would also accept signs, underscores and non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise LogParseError(line)
    value = int(raw)
    if value > _U64_MAX:
        raise LogParseError(line)
    return Integer(value)


def extract_timestamp(
    captures: Captures,
    group: str,
    line: str,
    fmt: str = COMMON_LOG_TIMESTAMP,
) -> Timestamp:
    """Parse a bracketed access-log timestamp into an aware datetime.

    Failures raise TimestampParseError rather than LogParseError so that
    operators can tell a wrong date layout apart from a wrong line shape.
    """
    raw = _capture(captures, group, line)
    try:
        parsed = datetime.strptime(raw, fmt)
    except ValueError as exc:
        raise TimestampParseError(str(exc), line) from exc
    return Timestamp(parsed)
