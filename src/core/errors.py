"""Custom exceptions for jsonc.

TIER 0: No internal imports, only Python stdlib.

Decode failures are ``json.JSONDecodeError`` and file failures are
``OSError``; both are raised as-is and are not part of this hierarchy.
"""


class JsoncError(Exception):
    """Base exception for jsonc."""

    pass


class ConfigError(JsoncError):
    """Configuration error."""

    pass


class CacheError(JsoncError):
    """Side cache could not be written."""

    pass
