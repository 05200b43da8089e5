"""Calendar dates used as database keys, and the database's error types."""

from __future__ import annotations

import re
from dataclasses import dataclass

MIN_MONTH = 1
MAX_MONTH = 12
MIN_DAY = 1
MAX_DAY = 31

_DATE_PATTERN = re.compile(r"([+-]?[0-9]+)-([+-]?[0-9]+)-([+-]?[0-9]+)")


class DatabaseError(Exception):
    """Base class for errors raised by the event database."""


class DateError(DatabaseError):
    """A date is malformed or out of range."""


class OperationError(DatabaseError):
    """A database operation cannot be carried out."""


class CommandHandlerError(DatabaseError):
    """A command could not be handled."""


def _pad(value: int, width: int) -> str:
    return str(value).rjust(width, "0")


@dataclass(frozen=True, order=True)
class Date:
    """A year, month and day; ordered chronologically."""

    year: int = 0
    month: int = 0
    day: int = 0

    def __str__(self) -> str:
        return f"{_pad(self.year, 4)}-{_pad(self.month, 2)}-{_pad(self.day, 2)}"


def parse_date(text: str) -> Date:
    """Parse a single ``Y-M-D`` token; an empty token gives the zero date."""
    token = text.strip()
    if not token:
        return Date()

    match = _DATE_PATTERN.fullmatch(token)
    if match is None:
        raise DateError(f"Wrong date format: {token}")

    year, month, day = (int(group) for group in match.groups())
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise DateError(f"Month value is invalid: {month}")
    if not MIN_DAY <= day <= MAX_DAY:
        raise DateError(f"Day value is invalid: {day}")
    return Date(year, month, day)