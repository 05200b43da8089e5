"""Bus routes: queries about which buses stop where."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice


class QueryType(Enum):
    NEW_BUS = "NEW_BUS"
    BUSES_FOR_STOP = "BUSES_FOR_STOP"
    STOPS_FOR_BUS = "STOPS_FOR_BUS"
    ALL_BUSES = "ALL_BUSES"


@dataclass
class Query:
    type: QueryType
    bus: str = ""
    stop: str = ""
    stops: list[str] = field(default_factory=list)


def _next_word(words: Iterator[str]) -> str:
    word = next(words, None)
    if word is None:
        raise ValueError("Unexpected end of input")
    return word


def _parse_queries(words: Iterator[str]) -> Iterator[Query]:
    for word in words:
        try:
            kind = QueryType(word)
        except ValueError:
            raise ValueError(f"Unknown query type: {word}") from None

        if kind is QueryType.ALL_BUSES:
            yield Query(kind)
        elif kind is QueryType.STOPS_FOR_BUS:
            yield Query(kind, bus=_next_word(words))
        elif kind is QueryType.BUSES_FOR_STOP:
            yield Query(kind, stop=_next_word(words))
        else:
            bus = _next_word(words)
            count = int(_next_word(words))
            stops = [_next_word(words) for _ in range(count)]
            yield Query(kind, bus=bus, stops=stops)


def read_queries(text: str) -> list[Query]:
    """Parse every whitespace-separated query in ``text``."""
    return list(_parse_queries(iter(text.split())))


class BusManager:
    """Keeps bus routes and answers queries about them."""

    def __init__(self) -> None:
        self._buses_to_stops: dict[str, list[str]] = {}
        self._stops_to_buses: dict[str, list[str]] = {}

    def add_bus(self, bus: str, stops: list[str]) -> None:
        """Register a bus with its route."""
        self._buses_to_stops[bus] = list(stops)
        for stop in stops:
            self._stops_to_buses.setdefault(stop, []).append(bus)

    def buses_for_stop(self, stop: str) -> str:
        """Buses through ``stop`` in the order they were added."""
        buses = self._stops_to_buses.get(stop)
        if buses is None:
            return "No stop"
        return "".join(f"{bus} " for bus in buses)

    def stops_for_bus(self, bus: str) -> str:
        """Each stop of ``bus`` with the other buses that serve it."""
        stops = self._buses_to_stops.get(bus)
        if stops is None:
            return "No bus"

        lines = []
        for stop in stops:
            buses = self._stops_to_buses[stop]
            if len(buses) == 1:
                tail = "no interchange"
            else:
                tail = "".join(f"{other} " for other in buses if other != bus)
            lines.append(f"Stop {stop}: {tail}")
        return "\n".join(lines)

    def all_buses(self) -> str:
        """Every bus, in name order, with its stops."""
        if not self._buses_to_stops:
            return "No buses"
        return "\n".join(
            f"Bus {bus}: " + "".join(f"{stop} " for stop in self._buses_to_stops[bus])
            for bus in sorted(self._buses_to_stops)
        )

    def answer(self, query: Query) -> str | None:
        """Apply one query; return its response, or None for an update."""
        if query.type is QueryType.NEW_BUS:
            self.add_bus(query.bus, query.stops)
            return None
        if query.type is QueryType.BUSES_FOR_STOP:
            return self.buses_for_stop(query.stop)
        if query.type is QueryType.STOPS_FOR_BUS:
            return self.stops_for_bus(query.bus)
        return self.all_buses()


def run(text: str) -> str:
    """Read a query count and that many queries; return all responses."""
    words = iter(text.split())
    first = next(words, None)
    if first is None:
        return ""
    count = int(first)

    manager = BusManager()
    output = []
    for query in islice(_parse_queries(words), count):
        response = manager.answer(query)
        if response is not None:
            output.append(response + "\n")
    return "".join(output)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yellowbelt-buses",
        description="Answer bus route queries read from standard input.",
    )
    parser.parse_args(argv)
    try:
        sys.stdout.write(run(sys.stdin.read()))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())