"""Lookahead window over the scanned text.

TIER 0: No internal imports, only Python stdlib.
"""


class Cursor:
    """Forward-only position over a string with bounded peeking.

    Peeking outside the text yields an empty string, so callers can compare
    neighbours without bounds checks.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.index = 0
        self.length = len(text)

    @property
    def done(self) -> bool:
        """True once every character has been consumed."""
        return self.index >= self.length

    def peek(self, offset: int = 0) -> str:
        """Return the character at ``index + offset`` or ``""``."""
        pos = self.index + offset
        if 0 <= pos < self.length:
            return self.text[pos]
        return ""

    def advance(self, n: int = 1) -> None:
        """Move forward ``n`` characters (never past the end)."""
        self.index = min(self.index + n, self.length)

    def window(self) -> tuple[str, str, str, str]:
        """Return ``(prev_prev, prev, char, next)`` at the current position."""
        return self.peek(-2), self.peek(-1), self.peek(), self.peek(1)
