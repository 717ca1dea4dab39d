"""Supported log formats and the parser for each.

The format is chosen once per run; there is no per-line detection.
"""
from __future__ import annotations

from enum import Enum

from .apache import CombinedLogParser, CommonLogParser
from .base import LogLineParser


class LogFormat(str, Enum):
    COMMON = "common"
    COMBINED = "combined"


_PARSERS: dict[LogFormat, type[LogLineParser]] = {
    LogFormat.COMMON: CommonLogParser,
    LogFormat.COMBINED: CombinedLogParser,
}


def get_parser(fmt: LogFormat | str) -> LogLineParser:
    """Return a new parser for fmt ('common' or 'combined').

    Raises ValueError for an unknown format name.
    """
    return _PARSERS[LogFormat(fmt)]()
