"""Core module - scanner, types, errors.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Scanner: Scanner, ScanState, strip, strip_text
- Cursor: Cursor
- Error types: JsoncError, ConfigError, CacheError
- Enums: CommentKind, Container
"""

from core.cursor import Cursor
from core.errors import CacheError, ConfigError, JsoncError
from core.jsonc import Scanner, ScanState, strip, strip_text
from core.types import CommentKind, Container

__all__ = [
    "CacheError",
    "CommentKind",
    "ConfigError",
    "Container",
    "Cursor",
    "JsoncError",
    "ScanState",
    "Scanner",
    "strip",
    "strip_text",
]
