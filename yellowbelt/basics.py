"""Small arithmetic, string and geometry helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def add(x: int, y: int) -> int:
    """The sum of ``x`` and ``y``."""
    return x + y


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def sort_numbers(numbers: Iterable[int]) -> list[int]:
    """The numbers in ascending order, as a new list."""
    return sorted(numbers)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its width and height."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def perimeter(self) -> int:
        return 2 * (self.width + self.height)