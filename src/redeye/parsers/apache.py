"""Apache Common and Combined log format parsers.

Common:  %h %l %u %t "%r" %>s %b
Combined: Common + "%{Referer}i" "%{User-agent}i"

See https://httpd.apache.org/docs/current/logs.html#accesslog
"""
from __future__ import annotations

import re

from ..errors import LogParseError
from .base import FieldValue, LogEvent
from .fields import Captures, Extractor, extract_int, extract_text, extract_timestamp

_COMMON_BODY = (
    r'(?P<host>\S+)\s+'                # client IP or hostname
    r'(?P<rfc931>\S+)\s+'              # ident
    r'(?P<user>\S+)\s+'                # user
    r'\[(?P<time>[^\]]+)\]\s+'         # [timestamp]
    r'"(?P<request>'                   # open " and request line
    r'(?P<method>\S+)\s'               # method
    r'(?P<path>\S+)\s'                 # path
    r'(?P<protocol>\S+)'               # protocol
    r')"\s+'                           # close "
    r'(?P<status>\S+)\s+'              # status code
    r'(?P<bytes>\S+)'                  # bytes sent
)

_COMMON_RE = re.compile(r"^" + _COMMON_BODY + r"$")

# Apache escapes embedded quotes in header values as \"
_COMBINED_RE = re.compile(
    r"^" + _COMMON_BODY
    + r'\s+"(?P<referrer>(?:[^"\\]|\\.)*)"'   # "referer"
    + r'\s+"(?P<agent>(?:[^"\\]|\\.)*)"'      # "user-agent"
    + r"$"
)

# (group, output field, extractor) in output order
FieldSpec = tuple[str, str, Extractor]

_COMMON_FIELDS: tuple[FieldSpec, ...] = (
    ("host", "remote_host", extract_text),
    # Historical key name kept for compatibility with existing consumers
    ("rfc931", "some_nonsense", extract_text),
    ("user", "username", extract_text),
    ("time", "@timestamp", extract_timestamp),
    ("request", "request_url", extract_text),
    ("method", "method", extract_text),
    ("path", "request_uri", extract_text),
    ("protocol", "protocol", extract_text),
    ("status", "status_code", extract_int),
    ("bytes", "bytes", extract_int),
)

_COMBINED_FIELDS: tuple[FieldSpec, ...] = _COMMON_FIELDS + (
    ("referrer", "referrer", extract_text),
    ("agent", "user_agent", extract_text),
)


class FormatMatcher:
    """Anchored full-line match of one access-log grammar.

    The pattern must define a named group for every FieldSpec.
    """

    def __init__(self, pattern: re.Pattern[str], fields: tuple[FieldSpec, ...]) -> None:
        self._pattern = pattern
        self._fields = fields

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        return self._fields

    def match(self, line: str) -> Captures:
        """Return the named captures for line, or raise LogParseError."""
        m = self._pattern.match(line.strip())
        if m is None:
            raise LogParseError(line)
        return m.groupdict()


class _ApacheLogParser:
    """Shared parse loop: match once, extract every field, then build the event."""

    _name = ""

    def __init__(self, matcher: FormatMatcher) -> None:
        self._matcher = matcher

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(output for _, output, _ in self._matcher.fields)

    def parse(self, line: str) -> LogEvent:
        captures = self._matcher.match(line)
        values: dict[str, FieldValue] = {}
        for group, output, extract in self._matcher.fields:
            values[output] = extract(captures, group, line)
        return LogEvent(values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CommonLogParser(_ApacheLogParser):
    """Parse the NCSA Common log format."""

    _name = "common"

    def __init__(self) -> None:
        super().__init__(FormatMatcher(_COMMON_RE, _COMMON_FIELDS))


class CombinedLogParser(_ApacheLogParser):
    """Parse the Combined log format (Common plus referrer and user-agent)."""

    _name = "combined"

    def __init__(self) -> None:
        super().__init__(FormatMatcher(_COMBINED_RE, _COMBINED_FIELDS))
