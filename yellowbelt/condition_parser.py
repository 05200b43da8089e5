"""Parsing condition strings into evaluable node trees."""

from __future__ import annotations

from yellowbelt.date import parse_date
from yellowbelt.nodes import (
    Comparison,
    DateComparisonNode,
    EmptyNode,
    EventComparisonNode,
    LogicalOperation,
    LogicalOperationNode,
    Node,
)
from yellowbelt.tokens import Token, TokenType, tokenize

_COMPARISONS = {
    "<": Comparison.LESS,
    "<=": Comparison.LESS_OR_EQUAL,
    ">": Comparison.GREATER,
    ">=": Comparison.GREATER_OR_EQUAL,
    "==": Comparison.EQUAL,
    "!=": Comparison.NOT_EQUAL,
}

_PRECEDENCE = {LogicalOperation.OR: 1, LogicalOperation.AND: 2}


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        return None if self.at_end() else self._tokens[self._pos]

    def _take(self, expected: TokenType | None, message: str) -> Token:
        token = self._peek()
        if token is None or (expected is not None and token.type is not expected):
            raise ValueError(message)
        self._pos += 1
        return token

    def parse_comparison(self) -> Node:
        column = self._take(TokenType.COLUMN, "Expected column name: date or event")
        op = self._take(TokenType.COMPARE_OP, "Expected comparison operation")
        value = self._take(None, "Expected right value of comparison").value

        comparison = _COMPARISONS.get(op.value)
        if comparison is None:
            raise ValueError(f"Unknown comparison token: {op.value}")

        if column.value == "date":
            return DateComparisonNode(comparison, parse_date(value))
        return EventComparisonNode(comparison, value)

    def parse_expression(self, precedence: int) -> Node | None:
        token = self._peek()
        if token is None:
            return None

        if token.type is TokenType.PAREN_LEFT:
            self._pos += 1
            left = self.parse_expression(0)
            self._take(TokenType.PAREN_RIGHT, "Missing right paren")
            if left is None:
                raise ValueError("Expected column name: date or event")
        else:
            left = self.parse_comparison()

        while (token := self._peek()) is not None and token.type is not TokenType.PAREN_RIGHT:
            if token.type is not TokenType.LOGICAL_OP:
                raise ValueError("Expected logic operation")

            operation = LogicalOperation.AND if token.value == "AND" else LogicalOperation.OR
            current = _PRECEDENCE[operation]
            if current <= precedence:
                break

            self._pos += 1
            right = self.parse_expression(current)
            if right is None:
                raise ValueError("Expected expression after logical operation")
            left = LogicalOperationNode(operation, left, right)

        return left


def parse_condition(text: str) -> Node:
    """Parse a condition; an empty condition matches everything."""
    parser = _Parser(tokenize(text))
    node = parser.parse_expression(0)
    if node is None:
        node = EmptyNode()
    if not parser.at_end():
        raise ValueError("Unexpected tokens after condition")
    return node