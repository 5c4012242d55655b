"""
Cursor module - position tracking over an immutable source line.

The cursor never fails: reading at or past the end yields the
terminator character, so every loop built on top of it halts on its own.
"""

TERMINATOR = "\n"


class Cursor:
    """
    Read position over a fixed source string.

    The position always stays within [0, len(source)]. At the end position
    (or on empty text) the current character is TERMINATOR.
    """

    def __init__(self, source: str):
        self._source = source
        self._pos = 0
        self._length = len(source)

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._length

    def current(self) -> str:
        """Return the character under the cursor, or TERMINATOR at the end."""
        if self._pos >= self._length:
            return TERMINATOR
        return self._source[self._pos]

    def advance(self) -> str:
        """Move forward by one (no-op at the end) and return the new current character."""
        if self._pos < self._length:
            self._pos += 1
        return self.current()

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, current={self.current()!r})"
