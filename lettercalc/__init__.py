"""lettercalc: left-to-right calculator for a flat letter notation.

Digits are numbers, a/b/c/d are add/subtract/multiply/divide, and e ... f
wraps a group. There is no precedence: everything folds left to right.

Usage:
    python -m lettercalc 3ae4c66fb32              # Result: 235
    python -m lettercalc 4d0                      # Error: DivisionByZero
    python -m lettercalc e1ae2c3ff --groups nested

    >>> from lettercalc import evaluate
    >>> evaluate("2b3c4")
    -4.0
"""

from lettercalc.errors import (
    DivisionByZero,
    EvalError,
    InvalidBlock,
    InvalidCharacter,
    InvalidInput,
)
from lettercalc.evaluator import evaluate
from lettercalc.models import GroupMode, Operator

__all__ = [
    "DivisionByZero",
    "EvalError",
    "GroupMode",
    "InvalidBlock",
    "InvalidCharacter",
    "InvalidInput",
    "Operator",
    "evaluate",
]
