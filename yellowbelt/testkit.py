"""A small assertion and test-running toolkit with readable failure messages."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO

DEFAULT_MIN_YEAR = 0
DEFAULT_MAX_YEAR = 2019


class AssertionFailure(Exception):
    """Raised when an assertion made through this toolkit does not hold."""


def _ordered(items: Iterable[Any]) -> list[Any]:
    values = list(items)
    try:
        return sorted(values)
    except TypeError:
        return values


def _join(parts: Iterable[str]) -> str:
    return "{" + ", ".join(parts) + "}"


def format_value(value: Any) -> str:
    """Render a value the way failure messages show it.

    Sequences and sets appear as ``{a, b}``, mappings as ``{k: v}``, pairs as
    ``{first: second}``; sets and mapping keys are shown in sorted order and
    booleans as ``1`` or ``0``.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return _join(
            f"{format_value(key)}: {format_value(value[key])}" for key in _ordered(value)
        )
    if isinstance(value, (set, frozenset)):
        return _join(format_value(item) for item in _ordered(value))
    if isinstance(value, tuple) and len(value) == 2:
        first, second = value
        return "{" + f"{format_value(first)}: {format_value(second)}" + "}"
    if isinstance(value, (list, tuple)):
        return _join(format_value(item) for item in value)
    return str(value)


def assert_equal(actual: Any, expected: Any, hint: str = "") -> None:
    """Raise :class:`AssertionFailure` unless ``actual == expected``."""
    if actual != expected:
        raise AssertionFailure(
            f"Assertion failed: {format_value(actual)} != {format_value(expected)} hint: {hint}"
        )


def assert_true(condition: bool, hint: str = "") -> None:
    """Raise :class:`AssertionFailure` unless ``condition`` is true."""
    assert_equal(bool(condition), True, hint)


class TestRunner:
    """Runs test callables, reports each outcome and counts failures.

    Used as a context manager, it ends the program with a failure status
    on exit if any test failed.
    """

    __test__ = False

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err
        self.fail_count = 0

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def run_test(self, func: Callable[[], Any], name: str) -> bool:
        """Run one test; return whether it passed."""
        self.out.write(f"{name} ")
        self.out.flush()
        try:
            func()
        except Exception as error:  # every test failure is reported, not propagated
            self.fail_count += 1
            self.err.write(f"failed: {error}\n")
            return False
        self.err.write("OK\n")
        return True

    def __enter__(self) -> TestRunner:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and self.fail_count > 0:
            self.out.write(f"{self.fail_count} unit tests failed. Terminate")
            self.out.flush()
            raise SystemExit(1)


class RandomYearGenerator:
    """Draws years uniformly from ``[min_year, max_year]``."""

    def __init__(
        self,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: int = DEFAULT_MAX_YEAR,
        seed: int | None = None,
    ) -> None:
        if seed is None:
            seed = time.monotonic_ns() & 0xFFFFFFFF
        self.seed = seed
        self.min_year = min_year
        self.max_year = max_year
        self._random = random.Random(seed)
        self.last_year = DEFAULT_MIN_YEAR

    def next_year(self) -> int:
        """Draw a new year and remember it as ``last_year``."""
        self.last_year = self._random.randint(self.min_year, self.max_year)
        return self.last_year