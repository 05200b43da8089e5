"""A person whose first and last names change over the years."""

from __future__ import annotations

import bisect

UNKNOWN = "Incognito"


class _History:
    """Values keyed by year; looks up the value in force at a given year."""

    def __init__(self) -> None:
        self._values: dict[int, str] = {}
        self._years: list[int] = []

    def set(self, year: int, value: str) -> None:
        if year not in self._values:
            bisect.insort(self._years, year)
        self._values[year] = value

    def at(self, year: int) -> str:
        index = bisect.bisect_right(self._years, year)
        if index == 0:
            return ""
        return self._values[self._years[index - 1]]


class Person:
    """Records name changes and reports the full name as of any year."""

    def __init__(self) -> None:
        self._first_names = _History()
        self._last_names = _History()

    def change_first_name(self, year: int, first_name: str) -> None:
        """Record that the first name became ``first_name`` in ``year``."""
        self._first_names.set(year, first_name)

    def change_last_name(self, year: int, last_name: str) -> None:
        """Record that the last name became ``last_name`` in ``year``."""
        self._last_names.set(year, last_name)

    def full_name(self, year: int) -> str:
        """The name as of the end of ``year``."""
        first = self._first_names.at(year)
        last = self._last_names.at(year)

        if first and last:
            return f"{first} {last}"
        if first:
            return f"{first} with unknown last name"
        if last:
            return f"{last} with unknown first name"
        return UNKNOWN