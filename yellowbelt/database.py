"""An in-memory store of events keyed by date."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterator

from yellowbelt.date import Date
from yellowbelt.events import EventList

Predicate = Callable[[Date, str], bool]


class Database:
    """Events grouped by date, each date's events in insertion order."""

    def __init__(self) -> None:
        self._events: dict[Date, EventList] = {}
        self._dates: list[Date] = []

    def add(self, date: Date, event: str) -> None:
        """Record an event on a date; a repeat on the same date is ignored."""
        entries = self._events.get(date)
        if entries is None:
            entries = self._events[date] = EventList()
            bisect.insort(self._dates, date)
        entries.add(event)

    def _entries(self) -> Iterator[tuple[Date, str]]:
        for date in self._dates:
            for event in self._events[date]:
                yield date, event

    def last(self, date: Date) -> str:
        """Return the latest event on the nearest date not after ``date``."""
        index = bisect.bisect_right(self._dates, date)
        if index == 0:
            raise LookupError(f"no entries on or before {date}")
        nearest = self._dates[index - 1]
        return f"{nearest} {next(reversed(self._events[nearest]))}"

    def render(self) -> str:
        """Every entry as a ``date event`` line, in date order."""
        return "".join(f"{date} {event}\n" for date, event in self._entries())

    def find_if(self, predicate: Predicate) -> list[str]:
        """Entries for which ``predicate(date, event)`` holds."""
        return [f"{date} {event}" for date, event in self._entries() if predicate(date, event)]

    def remove_if(self, predicate: Predicate) -> int:
        """Delete entries matching the predicate and return how many went."""
        removed = 0
        for date in self._dates:
            entries = self._events[date]
            doomed = [event for event in entries if predicate(date, event)]
            for event in doomed:
                entries.remove(event)
            removed += len(doomed)

        for date in [date for date in self._dates if not self._events[date]]:
            del self._events[date]
        self._dates = [date for date in self._dates if date in self._events]
        return removed