"""Strip-then-decode helpers.

TIER 1: May import from core only.

Errors from the strict decoder (``json.JSONDecodeError``) and from file
access (``OSError``) propagate unchanged.
"""

import json
from pathlib import Path
from typing import Any

from core.jsonc import strip, strip_text


def unmarshal(data: bytes | str, **kwargs: Any) -> Any:
    """Strip JSON5-lite and decode it as strict JSON.

    Args:
        data: JSON5-lite document as bytes (UTF-8) or text.
        **kwargs: Passed to ``json.loads`` (object_hook, parse_float, ...).

    Returns:
        Decoded Python value.

    Raises:
        json.JSONDecodeError: If the stripped text is not valid JSON.
    """
    if isinstance(data, str):
        return json.loads(strip_text(data), **kwargs)
    return json.loads(strip(data), **kwargs)


def unmarshal_file(path: str | Path, **kwargs: Any) -> Any:
    """Read a JSON5-lite file and decode it.

    Args:
        path: File to read fully into memory.
        **kwargs: Passed to ``json.loads``.

    Returns:
        Decoded Python value.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the stripped content is not valid JSON.
    """
    return unmarshal(Path(path).read_bytes(), **kwargs)
