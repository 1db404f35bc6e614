"""JSONC scanner - JSON5-lite to strict JSON.

TIER 0: No internal imports, only Python stdlib.

Rewrites in a single forward pass:
- Line (``//``) and block (``/* */``) comments are removed
- Trailing commas before ``]`` and ``}`` are removed
- Bare object keys are double quoted
- Single-quoted strings become double-quoted strings
- Raw newlines, tabs and carriage returns inside strings are escaped
- Hex integers (``0x1F``) become decimal, ``.5``/``5.`` gain a zero,
  explicit ``+`` signs are dropped

Malformed input is passed through; errors surface when the output is
decoded as strict JSON.
"""

from dataclasses import dataclass, field

from core.cursor import Cursor
from core.types import (
    COMMENT_OPENERS,
    DIGITS,
    DOUBLE_QUOTE,
    ESCAPE,
    HEX_DIGITS,
    INT32_MAX,
    INT32_MIN,
    KEY_END,
    NOT_KEY_START,
    QUOTES,
    SINGLE_QUOTE,
    STRING_ESCAPES,
    WHITESPACE,
    CommentKind,
    Container,
)


@dataclass
class ScanState:
    """Mutable state of one scan.

    ``delimiter`` is empty outside strings. ``stack`` holds the open
    containers, innermost last.
    """

    comment: CommentKind = CommentKind.NONE
    delimiter: str = ""
    stack: list[Container] = field(default_factory=list)
    last_significant: str = ""
    in_bare_key: bool = False
    escaped: bool = False

    def reset(self) -> None:
        """Restore every field to its initial value."""
        self.comment = CommentKind.NONE
        self.delimiter = ""
        self.stack = []
        self.last_significant = ""
        self.in_bare_key = False
        self.escaped = False

    @property
    def in_string(self) -> bool:
        return self.delimiter != ""

    @property
    def in_comment(self) -> bool:
        return self.comment is not CommentKind.NONE

    @property
    def in_object(self) -> bool:
        return bool(self.stack) and self.stack[-1] is Container.OBJECT

    @property
    def in_array(self) -> bool:
        return bool(self.stack) and self.stack[-1] is Container.ARRAY

    @property
    def object_depth(self) -> int:
        return self.stack.count(Container.OBJECT)

    @property
    def array_depth(self) -> int:
        return self.stack.count(Container.ARRAY)

    @property
    def at_key_start(self) -> bool:
        """True where an object key must begin (after ``{`` or ``,``)."""
        return self.in_object and self.last_significant in ("{", ",")

    def enter_string(self, delimiter: str) -> None:
        self.delimiter = delimiter
        self.escaped = False

    def leave_string(self) -> None:
        self.delimiter = ""
        self.in_bare_key = False
        self.escaped = False

    def closes(self, char: str) -> bool:
        """Check if ``char`` closes the innermost open container."""
        closed = Container.for_closer(char)
        return closed is not None and bool(self.stack) and self.stack[-1] is closed


class Scanner:
    """Single-pass JSON5-lite to strict JSON rewriter.

    One instance holds the state of one scan at a time. Every call resets
    it, so an instance may be reused sequentially but not shared between
    threads.

    Example:
        >>> Scanner().strip_text('{a: 0x1F, b: [1, 2,], /* c */}')
        '{"a": 31, "b": [1, 2] }'
    """

    def __init__(self) -> None:
        self.state = ScanState()
        self.cursor = Cursor()
        self._out: list[str] = []

    def strip(self, data: bytes) -> bytes:
        """Strip UTF-8 encoded JSON5-lite bytes.

        Undecodable bytes are carried through unchanged.
        """
        text = data.decode("utf-8", errors="surrogateescape")
        return self.strip_text(text).encode("utf-8", errors="surrogateescape")

    def strip_text(self, text: str) -> str:
        """Convert JSON5-lite text to strict JSON text.

        Args:
            text: Input with comments, trailing commas, bare keys etc.

        Returns:
            Text ready for ``json.loads()``. Never raises.
        """
        self.state.reset()
        self.cursor = Cursor(text)
        self._out = []

        while not self.cursor.done:
            self.cursor.advance(self._step())

        return "".join(self._out)

    def _step(self) -> int:
        """Scan the character under the cursor.

        Returns:
            Number of input characters consumed.
        """
        state = self.state
        _, prev, char, nxt = self.cursor.window()

        # Nothing but the comment terminator matters inside a comment
        if state.in_comment:
            return self._scan_comment(char, nxt)

        if not state.in_string and not state.at_key_start and self._is_hex_start(prev, char, nxt):
            return self._hexadecimal()

        self._quote_key(char)

        if not state.in_string:
            if state.closes(char):
                self._erase_trailing_commas()
            self._track_structure(char, nxt)

        if state.in_string:
            return self._scan_string(char, nxt)

        if char in QUOTES:
            state.enter_string(char)
            self._emit(DOUBLE_QUOTE)
            return 1

        if char == "/" and nxt in COMMENT_OPENERS:
            state.comment = CommentKind.LINE if nxt == "/" else CommentKind.BLOCK
            return 2

        self._emit(self._normalize_number(prev, char, nxt))
        return 1

    def _emit(self, text: str) -> None:
        if text:
            self._out.append(text)

    # -- comments ---------------------------------------------------------

    def _scan_comment(self, char: str, nxt: str) -> int:
        state = self.state

        if state.comment is CommentKind.LINE and char == "\n":
            state.comment = CommentKind.NONE
            # Drop indentation and blank lines left in front of the comment
            while self._out and self._out[-1] in WHITESPACE:
                self._out.pop()
            self._emit(char)
            return 1

        if state.comment is CommentKind.BLOCK and char == "*" and nxt == "/":
            state.comment = CommentKind.NONE
            return 2

        return 1

    # -- strings ----------------------------------------------------------

    def _scan_string(self, char: str, nxt: str) -> int:
        state = self.state
        # Set by an un-escaped backslash, applies to the next character only
        escaped, state.escaped = state.escaped, False

        if char == ESCAPE and not escaped:
            # Line continuation: drop backslash and newline
            if nxt == "\n":
                return 2
            if nxt == "\r" and self.cursor.peek(2) == "\n":
                return 3
            if nxt == SINGLE_QUOTE and state.delimiter == SINGLE_QUOTE:
                self._emit(SINGLE_QUOTE)
                return 2
            state.escaped = True
            self._emit(char)
            return 1

        if char == state.delimiter and not escaped:
            state.leave_string()
            self._emit(DOUBLE_QUOTE)
            return 1

        if char in STRING_ESCAPES:
            self._emit(STRING_ESCAPES[char])
            return 1

        if char == DOUBLE_QUOTE and state.delimiter == SINGLE_QUOTE and not escaped:
            self._emit(ESCAPE + DOUBLE_QUOTE)
            return 1

        self._emit(char)
        return 1

    def _quote_key(self, char: str) -> None:
        """Open or close a synthesized quote around a bare object key."""
        state = self.state
        if not state.at_key_start:
            return

        if state.in_bare_key:
            if char in KEY_END:
                state.leave_string()
                self._emit(DOUBLE_QUOTE)
        elif not state.in_string and char not in NOT_KEY_START:
            state.enter_string(DOUBLE_QUOTE)
            state.in_bare_key = True
            self._emit(DOUBLE_QUOTE)

    # -- structure --------------------------------------------------------

    def _track_structure(self, char: str, nxt: str) -> None:
        state = self.state

        if char not in WHITESPACE and not (char == "/" and nxt in COMMENT_OPENERS):
            state.last_significant = char

        if char == "{":
            state.stack.append(Container.OBJECT)
        elif char == "[":
            state.stack.append(Container.ARRAY)
        elif state.closes(char):
            state.stack.pop()

    def _erase_trailing_commas(self) -> None:
        """Remove the comma run right before a closer.

        Whitespace before the first and after the last comma is kept.
        """
        out = self._out
        pos = len(out)
        first = last = -1

        while pos > 0 and (out[pos - 1] == "," or out[pos - 1] in WHITESPACE):
            pos -= 1
            if out[pos] == ",":
                if last < 0:
                    last = pos
                first = pos

        if last >= 0:
            del out[first : last + 1]

    # -- numbers ----------------------------------------------------------

    @staticmethod
    def _is_hex_start(prev: str, char: str, nxt: str) -> bool:
        return char == "0" and nxt in ("x", "X") and not prev.isalnum() and prev != "."

    def _hexadecimal(self) -> int:
        """Emit the hex literal under the cursor in base 10.

        Returns:
            Length of the literal including its ``0x`` prefix.
        """
        offset = 2
        digits = ""
        while (c := self.cursor.peek(offset)) in HEX_DIGITS:
            digits += c
            offset += 1

        value = int(digits, 16) if digits else 0
        self._emit(str(max(INT32_MIN, min(value, INT32_MAX))))
        return offset

    @staticmethod
    def _normalize_number(prev: str, char: str, nxt: str) -> str:
        # Explicit positive sign (exponent signs are left alone)
        if char == "+" and nxt in DIGITS and prev not in ("e", "E"):
            return ""

        if char == ".":
            before, after = prev in DIGITS, nxt in DIGITS
            if after and not before:
                return "0."
            if before and not after:
                return ".0"

        return char


def strip_text(text: str) -> str:
    """Convert JSON5-lite text to strict JSON text with a fresh scanner."""
    return Scanner().strip_text(text)


def strip(data: bytes) -> bytes:
    """Convert JSON5-lite bytes to strict JSON bytes with a fresh scanner."""
    return Scanner().strip(data)
