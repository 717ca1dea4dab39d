"""Parsed field values, log events, and the parser Protocol."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator, Mapping, Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class Timestamp:
    value: datetime

    def to_json(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class Text:
    value: str

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class Integer:
    value: int

    def to_json(self) -> int:
        return self.value


FieldValue = Union[Timestamp, Text, Integer]


class LogEvent(Mapping[str, FieldValue]):
    """Immutable mapping of output field name to typed value for one line.

    Events are only built once every field of the format has been
    extracted, so a LogEvent is never partially populated.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, FieldValue]) -> None:
        self._values: dict[str, FieldValue] = dict(values)

    def __getitem__(self, key: str) -> FieldValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"LogEvent({self._values!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return plain JSON-ready values keyed by field name."""
        return {name: value.to_json() for name, value in self._values.items()}


@runtime_checkable
class LogLineParser(Protocol):
    """Protocol for access-log parsers: one line in, one event out."""

    @property
    def name(self) -> str:
        """Format name, e.g. 'common' or 'combined'."""
        ...

    @property
    def fields(self) -> tuple[str, ...]:
        """Output field names produced for every accepted line."""
        ...

    def parse(self, line: str) -> LogEvent:
        """Parse one line. Raises LogParseError or TimestampParseError."""
        ...
