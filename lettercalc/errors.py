"""Error taxonomy for lettercalc.

Exactly four kinds, all raised as exceptions and never wrapped. Each kind
also inherits the closest builtin so callers that only care about "bad
input" or "divided by zero" can catch ValueError / ZeroDivisionError.
"""

from __future__ import annotations


class EvalError(Exception):
    """Base class for every evaluation failure."""

    @property
    def kind(self) -> str:
        """Short kind name, e.g. 'DivisionByZero'. This is what the CLI prints."""
        return type(self).__name__


class DivisionByZero(EvalError, ZeroDivisionError):
    """A divide's right operand was exactly 0.0."""


class InvalidCharacter(EvalError, ValueError):
    """A character outside the grammar appeared where a token was expected."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"unexpected character {char!r} at position {position}")
        self.char = char
        self.position = position


class InvalidBlock(EvalError, ValueError):
    """Input ended before an open group was closed."""


class InvalidInput(EvalError, ValueError):
    """The expression produced no usable operand (empty, or operators only)."""
