"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from enum import Enum


class CommentKind(str, Enum):
    """Comment mode of the scanner."""

    NONE = ""
    LINE = "//"
    BLOCK = "/*"


class Container(str, Enum):
    """Open collection kinds tracked on the nesting stack."""

    OBJECT = "{"
    ARRAY = "["

    @property
    def closer(self) -> str:
        """Character that closes this container."""
        return "}" if self is Container.OBJECT else "]"

    @classmethod
    def for_closer(cls, char: str) -> "Container | None":
        """Return the container closed by ``char``, if any."""
        if char == "}":
            return cls.OBJECT
        if char == "]":
            return cls.ARRAY
        return None


SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
ESCAPE = "\\"

WHITESPACE = frozenset(" \t\r\n")
DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Raw control characters and their escaped form inside strings
STRING_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r"}

# Characters that never start a bare object key
NOT_KEY_START = frozenset("[]{}'\",/*:") | WHITESPACE

# Characters that end a bare object key
KEY_END = frozenset(":'") | WHITESPACE

# Second character of `//` and `/*`
COMMENT_OPENERS = frozenset("/*")
QUOTES = frozenset("'\"")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
