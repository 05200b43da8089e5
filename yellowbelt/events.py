"""Event text and the ordered, duplicate-free list of events on one date."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class EventList:
    """Events in the order they were added, each kept once."""

    def __init__(self, events: Iterable[str] = ()) -> None:
        self._events: dict[str, None] = {}
        for event in events:
            self.add(event)

    def add(self, event: str) -> None:
        """Append the event unless it is already present."""
        self._events.setdefault(event, None)

    def remove(self, event: str) -> None:
        """Remove the event if it is present."""
        self._events.pop(event, None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._events)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __repr__(self) -> str:
        return f"EventList({list(self._events)!r})"


def parse_event(text: str) -> str:
    """Skip leading whitespace and return the rest of the first line."""
    return text.lstrip().partition("\n")[0]