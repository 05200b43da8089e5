"""Palindrome check."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards, character for character."""
    return text == text[::-1]