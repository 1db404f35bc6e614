"""Side cache for stripped documents.

TIER 1: May import from core only.

A stripped copy of ``settings.json5`` is stored next to it as
``settings.cached.json``. The copy is stamped with the source's mtime, so
freshness is a single mtime comparison and the scanner is skipped on a hit.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import CacheError
from core.jsonc import Scanner
from lib import config
from lib.logger import get_logger

logger = get_logger("cache")


class CachedDecoder:
    """Decoder that keeps one stripped copy per source file.

    There is no eviction; a cache file is rewritten whenever its mtime no
    longer equals the source's.
    """

    def __init__(self, suffix: str | None = None) -> None:
        self.suffix = suffix or config.get("cache.suffix")
        self.scanner = Scanner()

    def cache_path(self, path: str | Path) -> Path:
        """Return the cache file for ``path`` (extension replaced by suffix)."""
        source = Path(path)
        return source.with_name(source.stem + self.suffix)

    def is_fresh(self, path: str | Path) -> bool:
        """Check if the cache file exists and matches the source mtime.

        Raises:
            OSError: If the source cannot be stat'ed.
        """
        source_stat = os.stat(path)
        try:
            cache_stat = os.stat(self.cache_path(path))
        except FileNotFoundError:
            return False
        return cache_stat.st_mtime_ns == source_stat.st_mtime_ns

    def invalidate(self, path: str | Path) -> bool:
        """Remove the cache file for ``path``.

        Returns:
            True if a cache file was removed.
        """
        try:
            self.cache_path(path).unlink()
        except FileNotFoundError:
            return False
        logger.debug("Invalidated cache for %s", path)
        return True

    def decode(self, path: str | Path, **kwargs: Any) -> Any:
        """Decode ``path`` through the side cache.

        Args:
            path: JSON5-lite source file.
            **kwargs: Passed to ``json.loads``.

        Returns:
            Decoded Python value.

        Raises:
            OSError: If the source or a fresh cache file cannot be read.
            CacheError: If the cache file cannot be written.
            json.JSONDecodeError: If the stripped content is not valid JSON.
        """
        cache = self.cache_path(path)

        if self.is_fresh(path):
            logger.debug("Cache hit: %s", cache)
            return json.loads(cache.read_bytes(), **kwargs)

        logger.debug("Cache miss: %s", cache)
        data = self.scanner.strip(Path(path).read_bytes())
        self._write(path, cache, data)
        return json.loads(data, **kwargs)

    def _write(self, path: str | Path, cache: Path, data: bytes) -> None:
        """Write the stripped copy and stamp it with the source's times."""
        source_stat = os.stat(path)
        try:
            cache.write_bytes(data)
            os.utime(cache, ns=(source_stat.st_atime_ns, source_stat.st_mtime_ns))
        except OSError as e:
            logger.error("Cannot write cache %s: %s", cache, e)
            raise CacheError(f"Cannot write cache {cache}: {e}") from e
