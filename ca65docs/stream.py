"""A forward-only character cursor over a piece of text."""

from __future__ import annotations


class Stream:
    """Reads a string one character at a time, remembering the position."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._position = 0

    def pos(self) -> int:
        """Index of the next character to be read."""
        return self._position

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self.at_end():
            return None
        return self._text[self._position]

    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._position >= len(self._text)

    def advance(self) -> str:
        """Consume and return the next character.

        Raises IndexError when the stream is already exhausted.
        """
        if self.at_end():
            raise IndexError("cannot advance past the end of the stream")
        char = self._text[self._position]
        self._position += 1
        return char

    def match_char(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self.peek() != expected:
            return False
        self._position += 1
        return True

    def slice(self, start: int, end: int) -> str:
        """Return the text between two positions."""
        return self._text[start:end]