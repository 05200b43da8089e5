"""Small sequence and set algorithms: searching, splitting, de-duplicating."""

from __future__ import annotations

import bisect
import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def vector_part(numbers: Iterable[int]) -> list[int]:
    """The numbers before the first negative one, in reverse order."""
    prefix = list(itertools.takewhile(lambda number: number >= 0, numbers))
    return prefix[::-1]


def find_greater_elements(elements: Iterable[T], border: T) -> list[T]:
    """The elements strictly greater than ``border``, in ascending order."""
    return sorted(element for element in elements if element > border)


def split_into_words(text: str) -> list[str]:
    """Split ``text`` at every single space; adjacent spaces give empty words."""
    return text.split(" ")


def remove_duplicates(elements: Iterable[T]) -> list[T]:
    """The distinct elements in ascending order."""
    return sorted(set(elements))


def reverse_permutations(n: int) -> Iterator[tuple[int, ...]]:
    """Every permutation of ``1..n``, from ``(n, ..., 1)`` down to ``(1, ..., n)``."""
    if n < 0:
        raise ValueError(f"permutation length must not be negative: {n}")
    return itertools.permutations(range(n, 0, -1))


def find_nearest_element(numbers: Iterable[int], border: int) -> int | None:
    """The element closest to ``border``; on a tie the smaller one.

    Returns None when there are no numbers.
    """
    ordered = sorted(set(numbers))
    if not ordered:
        return None

    index = bisect.bisect_left(ordered, border)
    if index == len(ordered):
        return ordered[-1]
    if index == 0 or ordered[index] == border:
        return ordered[index]

    before, after = ordered[index - 1], ordered[index]
    return before if border - before <= after - border else after


def find_starts_with(sorted_strings: Sequence[str], prefix: str) -> tuple[int, int]:
    """The ``(start, stop)`` index range of the strings beginning with ``prefix``.

    ``sorted_strings`` must be sorted. An empty range sits where strings with
    that prefix would be inserted.
    """
    length = len(prefix)

    def key(text: Any) -> str:
        return text[:length]

    start = bisect.bisect_left(sorted_strings, prefix, key=key)
    stop = bisect.bisect_right(sorted_strings, prefix, key=key)
    return start, stop


def is_even(number: int) -> bool:
    """Whether ``number`` is even."""
    return (number & 1) == 0