"""Data models for lettercalc.

Operator and GroupMode enums plus FoldState, the running (first, second,
operator) triple the evaluator folds left to right. All the reduction rules
for numbers, operators, groups and end of input live on FoldState.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lettercalc.errors import DivisionByZero, InvalidInput

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Binary operators, keyed by their letter."""

    ADD = "a"
    SUBTRACT = "b"
    MULTIPLY = "c"
    DIVIDE = "d"

    def apply(self, a: float, b: float) -> float:
        """Apply the operator to (a, b).

        Raises:
            DivisionByZero: for DIVIDE when b is exactly 0.0.
        """
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        if b == 0.0:
            raise DivisionByZero(f"cannot divide {a!r} by zero")
        return a / b


OPERATOR_LETTERS = frozenset(op.value for op in Operator)
GROUP_OPEN = "e"
GROUP_CLOSE = "f"


class GroupMode(str, Enum):
    """How nested group markers are handed to the recursive evaluation.

    FLAT drops inner open/close markers, flattening nested groups into their
    parent (historical behavior). NESTED keeps them so inner groups are
    evaluated as real sub-groups.
    """

    FLAT = "flat"
    NESTED = "nested"


@dataclass
class FoldState:
    """Operand slots and pending operator for one left-to-right fold."""

    first: Optional[float] = None
    second: Optional[float] = None
    operator: Optional[Operator] = None

    def _ready(self) -> bool:
        return self.operator is not None and self.first is not None and self.second is not None

    def _reduce(self) -> float:
        result = self.operator.apply(self.first, self.second)
        logger.debug("%r %s %r = %r", self.first, self.operator.name, self.second, result)
        return result

    def push_number(self, value: float) -> None:
        """Fold a freshly lexed number. The pending operator is kept."""
        if self._ready():
            self.first = self._reduce()
            self.second = value
        elif self.first is not None and self.second is None:
            self.second = value
        else:
            self.first = value
            self.second = None

    def push_operator(self, op: Operator) -> None:
        """Reduce a complete pair if there is one, then make op pending."""
        if self._ready():
            self.first = self._reduce()
            self.second = None
        self.operator = op

    def push_group(self, value: float) -> None:
        """Fold a group result. Never reduces eagerly, unlike push_number."""
        if self.first is not None:
            self.second = value
        else:
            self.first = value

    def finish(self) -> float:
        """Final value at end of input.

        Raises:
            InvalidInput: when no operand was ever produced.
        """
        if self._ready():
            return self._reduce()
        if self.first is None:
            raise InvalidInput("expression has no operand")
        return self.first
