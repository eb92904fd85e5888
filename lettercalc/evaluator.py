"""Single-pass evaluator for the letter notation.

Data flow per call:
1. Wrap the expression in a Cursor and start an empty FoldState
2. Peek one character and dispatch:
   - digit          -> read_number, fold it in
   - a / b / c / d  -> make it the pending operator
   - e              -> extract_group, evaluate the inner text recursively
   - anything else  -> InvalidCharacter
3. At end of input, apply any complete pending operation and return

Evaluation is strictly left to right with no precedence: "2b3c4" is
(2 - 3) * 4. Recursion only happens for groups, so stack depth follows
bracket nesting rather than input length.
"""

from __future__ import annotations

import logging

from lettercalc.cursor import Cursor
from lettercalc.errors import InvalidBlock, InvalidCharacter
from lettercalc.models import (
    GROUP_CLOSE,
    GROUP_OPEN,
    OPERATOR_LETTERS,
    FoldState,
    GroupMode,
    Operator,
)

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def _is_digit(char: str | None) -> bool:
    # str.isdigit() accepts '²', '٣' and friends; only ASCII digits are tokens.
    return char is not None and char in _DIGITS


def read_number(cursor: Cursor) -> float:
    """Consume a run of ASCII digits and return its base-10 value.

    The caller has already checked that the next character is a digit. The
    first non-digit is left for the caller. Values accumulate as floats, so
    literals past 2**53 lose precision silently.
    """
    value = 0.0
    while _is_digit(cursor.peek()):
        value = value * 10 + int(cursor.advance())
    return value


def extract_group(cursor: Cursor, mode: GroupMode = GroupMode.FLAT) -> str:
    """Consume one balanced group and return its inner text.

    The opening marker has already been consumed. Nesting is tracked with a
    plain counter, so any text between the markers is accepted here and only
    checked when the inner text is evaluated.

    In FLAT mode inner open/close markers are dropped from the returned text;
    in NESTED mode they are kept verbatim.

    Raises:
        InvalidBlock: if the input ends before the matching close marker.
    """
    depth = 1
    inner: list[str] = []
    keep_markers = mode is GroupMode.NESTED

    while True:
        char = cursor.advance()
        if char is None:
            raise InvalidBlock(f"group not closed, {depth} marker(s) still open")
        if char == GROUP_OPEN:
            depth += 1
            if keep_markers:
                inner.append(char)
        elif char == GROUP_CLOSE:
            depth -= 1
            if depth == 0:
                return "".join(inner)
            if keep_markers:
                inner.append(char)
        else:
            inner.append(char)


def evaluate(expression: str, group_mode: GroupMode = GroupMode.FLAT) -> float:
    """Evaluate an expression in letter notation.

    Args:
        expression: Digits plus the letters a-f, no whitespace.
        group_mode: How nested group markers are treated (see GroupMode).

    Returns:
        The result as a float.

    Raises:
        DivisionByZero: a divide's right operand was exactly zero.
        InvalidCharacter: a character outside the grammar was found.
        InvalidBlock: a group was never closed.
        InvalidInput: nothing to evaluate (empty input, or operators only).
    """
    cursor = Cursor(expression)
    state = FoldState()

    while not cursor.exhausted():
        char = cursor.peek()

        if _is_digit(char):
            state.push_number(read_number(cursor))
        elif char in OPERATOR_LETTERS:
            state.push_operator(Operator(cursor.advance()))
        elif char == GROUP_OPEN:
            cursor.advance()
            inner = extract_group(cursor, group_mode)
            logger.debug("group %r", inner)
            state.push_group(evaluate(inner, group_mode))
        else:
            raise InvalidCharacter(char, cursor.position)

    result = state.finish()
    logger.debug("%r -> %r", expression, result)
    return result
