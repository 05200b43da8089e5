"""Counting the distinct real roots of ``a*x**2 + b*x + c = 0``."""

from __future__ import annotations


def _discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def distinct_real_root_count(a: float, b: float, c: float) -> int:
    """Return how many distinct real roots ``a*x**2 + b*x + c = 0`` has.

    A linear equation (``a == 0``) has one root when ``b`` is non-zero.
    The degenerate equation with ``a == b == 0`` counts as having none.
    """
    if a == 0:
        return 1 if b != 0 else 0

    discriminant = _discriminant(a, b, c)
    if discriminant > 0:
        return 2
    if discriminant == 0:
        return 1
    return 0