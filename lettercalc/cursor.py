"""Forward-only cursor over an expression string."""

from __future__ import annotations

from typing import Optional


class Cursor:
    """One-character lookahead over a string. Never moves backwards."""

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        """Index of the next unconsumed character."""
        return self._pos

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at the end."""
        if self._pos >= len(self._text):
            return None
        return self._text[self._pos]

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at the end."""
        char = self.peek()
        if char is not None:
            self._pos += 1
        return char

    def exhausted(self) -> bool:
        return self._pos >= len(self._text)
