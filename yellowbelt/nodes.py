"""Condition trees evaluated against a date and an event."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from yellowbelt.date import Date


class Comparison(Enum):
    NOT_EQUAL = auto()
    EQUAL = auto()
    LESS = auto()
    LESS_OR_EQUAL = auto()
    GREATER = auto()
    GREATER_OR_EQUAL = auto()


class LogicalOperation(Enum):
    OR = auto()
    AND = auto()


_OPERATORS = {
    Comparison.NOT_EQUAL: operator.ne,
    Comparison.EQUAL: operator.eq,
    Comparison.LESS: operator.lt,
    Comparison.LESS_OR_EQUAL: operator.le,
    Comparison.GREATER: operator.gt,
    Comparison.GREATER_OR_EQUAL: operator.ge,
}


def compare(lhs: Any, comparison: Comparison, rhs: Any) -> bool:
    """Apply ``comparison`` to the two operands."""
    return bool(_OPERATORS[comparison](lhs, rhs))


class Node(ABC):
    """A condition on a (date, event) pair."""

    @abstractmethod
    def evaluate(self, date: Date, event: str) -> bool:
        """Whether the condition holds for this entry."""


@dataclass(frozen=True)
class EmptyNode(Node):
    """Matches every entry."""

    def evaluate(self, date: Date, event: str) -> bool:
        return True


@dataclass(frozen=True)
class DateComparisonNode(Node):
    comparison: Comparison
    date: Date

    def evaluate(self, date: Date, event: str) -> bool:
        return compare(date, self.comparison, self.date)


@dataclass(frozen=True)
class EventComparisonNode(Node):
    comparison: Comparison
    event: str

    def evaluate(self, date: Date, event: str) -> bool:
        return compare(event, self.comparison, self.event)


@dataclass(frozen=True)
class LogicalOperationNode(Node):
    operation: LogicalOperation
    left: Node
    right: Node

    def evaluate(self, date: Date, event: str) -> bool:
        if self.operation is LogicalOperation.OR:
            return self.left.evaluate(date, event) or self.right.evaluate(date, event)
        return self.left.evaluate(date, event) and self.right.evaluate(date, event)