"""Line-oriented command interface to the event database."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from yellowbelt.condition_parser import parse_condition
from yellowbelt.database import Database
from yellowbelt.date import DatabaseError, parse_date
from yellowbelt.events import parse_event


def _split_word(text: str) -> tuple[str, str]:
    parts = text.split(maxsplit=1)
    if not parts:
        return "", ""
    return parts[0], parts[1] if len(parts) > 1 else ""


def execute(database: Database, line: str) -> list[str]:
    """Run one command line against the database and return its output lines."""
    command, rest = _split_word(line)

    if command == "Add":
        date_text, event_text = _split_word(rest)
        database.add(parse_date(date_text), parse_event(event_text))
        return []
    if command == "Print":
        return database.render().split("\n")[:-1]
    if command == "Del":
        condition = parse_condition(rest)
        count = database.remove_if(condition.evaluate)
        return [f"Removed {count} entries"]
    if command == "Find":
        condition = parse_condition(rest)
        entries = database.find_if(condition.evaluate)
        return [*entries, f"Found {len(entries)} entries"]
    if command == "Last":
        date_text, _ = _split_word(rest)
        date = parse_date(date_text)
        try:
            return [database.last(date)]
        except LookupError:
            return ["No entries"]
    if not command:
        return []
    raise ValueError(f"Unknown command: {command}")


def run(lines: Iterable[str]) -> Iterator[str]:
    """Run commands against a fresh database, yielding output lines."""
    database = Database()
    for line in lines:
        yield from execute(database, line.rstrip("\n"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yellowbelt",
        description="Read Add, Del, Find, Last and Print commands from standard input.",
    )
    parser.parse_args(argv)
    try:
        for output in run(sys.stdin):
            print(output)
    except (DatabaseError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())