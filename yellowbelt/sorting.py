"""Merge sort splitting into halves or into thirds."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def _halves(items: list[T]) -> list[T]:
    if len(items) < 2:
        return items
    middle = len(items) // 2
    return list(heapq.merge(_halves(items[:middle]), _halves(items[middle:])))


def _thirds(items: list[T]) -> list[T]:
    if len(items) < 2:
        return items
    third = len(items) // 3
    if third == 0:
        raise ValueError("a range of two elements cannot be split into thirds")
    left = _thirds(items[:third])
    middle = _thirds(items[third : 2 * third])
    right = _thirds(items[2 * third :])
    return list(heapq.merge(heapq.merge(left, middle), right))


def merge_sort_halves(items: Iterable[T]) -> list[T]:
    """A sorted copy of ``items``, merge-sorted by halving."""
    return _halves(list(items))


def merge_sort_thirds(items: Iterable[T]) -> list[T]:
    """A sorted copy of ``items``, merge-sorted by splitting into thirds.

    Raises ValueError when a split reaches a part of exactly two elements,
    which has no non-empty thirds.
    """
    return _thirds(list(items))