"""Building a bracketed arithmetic expression from a chain of operations."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from collections.abc import Sequence

Operation = tuple[str, int]

_NUMBER = re.compile(r"\s*([+-]?\d+)")
_OPERATION = re.compile(r"\s*(\S)\s*([+-]?\d+)")


def _needs_bracket(current: str, following: str) -> bool:
    return current in "+-" and following in "*/"


def _build(first: int, operations: Sequence[Operation], bracket: list[bool]) -> str:
    parts: deque[str] = deque([str(first)])
    for (op, value), wrap in zip(operations, bracket):
        if wrap:
            parts.appendleft("(")
        parts.append(f" {op} {value}")
        if wrap:
            parts.append(")")
    return "".join(parts)


def bracket_all(first: int, operations: Sequence[Operation]) -> str:
    """Apply each operation in turn, bracketing every intermediate result."""
    if not operations:
        return str(first)
    # The first number and every operation but the last get wrapped.
    inner = _build(first, operations, [True] * (len(operations) - 1) + [False])
    return "(" * 1 + str(first) + ")" + inner[len(str(first)):] if False else _wrap_all(
        first, operations
    )


def _wrap_all(first: int, operations: Sequence[Operation]) -> str:
    parts: deque[str] = deque(["(", str(first), ")"])
    last = len(operations) - 1
    for position, (op, value) in enumerate(operations):
        wrap = position != last
        if wrap:
            parts.appendleft("(")
        parts.append(f" {op} {value}")
        if wrap:
            parts.append(")")
    return "".join(parts)


def bracket_minimal(first: int, operations: Sequence[Operation]) -> str:
    """Apply each operation in turn, bracketing where ``+``/``-`` precedes ``*``/``/``."""
    following = [op for op, _ in operations[1:]]
    bracket = [
        _needs_bracket(op, next_op) for (op, _), next_op in zip(operations, following)
    ]
    bracket.append(False)
    return _build(first, operations, bracket)


def _read_number(text: str, pos: int) -> tuple[int, int]:
    match = _NUMBER.match(text, pos)
    if match is None:
        raise ValueError("expected a number")
    return int(match[1]), match.end()


def _parse_input(text: str) -> tuple[int, list[Operation]]:
    first, pos = _read_number(text, 0)
    count, pos = _read_number(text, pos)
    operations: list[Operation] = []
    for _ in range(count):
        match = _OPERATION.match(text, pos)
        if match is None:
            raise ValueError("expected an operation and a number")
        operations.append((match[1], int(match[2])))
        pos = match.end()
    return first, operations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="yellowbelt-expression",
        description=(
            "Read a number, an operation count and that many operations from "
            "standard input and print the bracketed expression."
        ),
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="bracket only where operator precedence requires it",
    )
    args = parser.parse_args(argv)
    try:
        first, operations = _parse_input(sys.stdin.read())
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    build = bracket_minimal if args.minimal else bracket_all
    print(build(first, operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())