"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from lib.cache import CachedDecoder
from lib.config import clear_cache, get, load_config
from lib.decode import unmarshal, unmarshal_file
from lib.logger import get_logger, reload_log_level, set_log_level

__all__ = [
    "CachedDecoder",
    "clear_cache",
    "get",
    "get_logger",
    "load_config",
    "reload_log_level",
    "set_log_level",
    "unmarshal",
    "unmarshal_file",
]
