"""Exception hierarchy for redeye.

Per-line errors (parse, timestamp, serialization) are caught by the
pipeline and reported as warnings. Configuration and transport errors end
the run.
"""
from __future__ import annotations


class RedeyeError(Exception):
    """Base class for every error raised by redeye."""


class ConfigurationError(RedeyeError):
    """No usable log format was selected before the run started."""


class LogParseError(RedeyeError):
    """A line does not match the active format or a field has the wrong type."""

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line

    def __str__(self) -> str:
        return f"Invalid log line: {self.line}"


class TimestampParseError(RedeyeError):
    """The bracketed timestamp of a line could not be parsed."""

    def __init__(self, detail: str, line: str) -> None:
        super().__init__(detail, line)
        self.detail = detail
        self.line = line

    def __str__(self) -> str:
        return f"Invalid timestamp: {self.detail}"


class SerializationError(RedeyeError):
    """A parsed event could not be rendered as JSON."""

    def __str__(self) -> str:
        return f"Serialization error: {self.args[0] if self.args else ''}"


class TransportError(RedeyeError):
    """Reading input or writing output failed; the stream is unusable."""

    def __str__(self) -> str:
        return f"I/O error: {self.args[0] if self.args else ''}"
