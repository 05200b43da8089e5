"""Splitting a condition string into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    DATE = auto()
    EVENT = auto()
    COLUMN = auto()
    LOGICAL_OP = auto()
    COMPARE_OP = auto()
    PAREN_LEFT = auto()
    PAREN_RIGHT = auto()


@dataclass(frozen=True)
class Token:
    value: str
    type: TokenType


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9" if char else False


class _Reader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def get(self) -> str:
        char = self.peek()
        if char:
            self._pos += 1
        return char

    def next_non_space(self) -> str:
        while self.peek().isspace():
            self._pos += 1
        return self.get()

    def read_digits(self) -> str:
        start = self._pos
        while _is_digit(self.peek()):
            self._pos += 1
        return self._text[start:self._pos]

    def read_until(self, delimiter: str) -> str:
        end = self._text.find(delimiter, self._pos)
        if end < 0:
            value, self._pos = self._text[self._pos:], len(self._text)
        else:
            value, self._pos = self._text[self._pos:end], end + 1
        return value

    def expect(self, word: str) -> bool:
        return all(self.get() == char for char in word)


_KEYWORDS = {
    "d": ("ate", Token("date", TokenType.COLUMN)),
    "e": ("vent", Token("event", TokenType.COLUMN)),
    "A": ("ND", Token("AND", TokenType.LOGICAL_OP)),
    "O": ("R", Token("OR", TokenType.LOGICAL_OP)),
    "=": ("=", Token("==", TokenType.COMPARE_OP)),
    "!": ("=", Token("!=", TokenType.COMPARE_OP)),
}


def tokenize(text: str) -> list[Token]:
    """Split a condition into tokens; characters that start no token are skipped."""
    reader = _Reader(text)
    tokens: list[Token] = []

    while char := reader.next_non_space():
        if _is_digit(char):
            value = char + reader.read_digits()
            for _ in range(2):
                value += reader.get() + reader.read_digits()
            tokens.append(Token(value, TokenType.DATE))
        elif char == '"':
            tokens.append(Token(reader.read_until('"'), TokenType.EVENT))
        elif char in _KEYWORDS:
            rest, token = _KEYWORDS[char]
            if not reader.expect(rest):
                raise ValueError("Unknown token")
            tokens.append(token)
        elif char == "(":
            tokens.append(Token("(", TokenType.PAREN_LEFT))
        elif char == ")":
            tokens.append(Token(")", TokenType.PAREN_RIGHT))
        elif char in "<>":
            if reader.peek() == "=":
                reader.get()
                char += "="
            tokens.append(Token(char, TokenType.COMPARE_OP))

    return tokens