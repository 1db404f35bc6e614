"""Configuration management.

TIER 1: May import from core only.

Settings are resolved in priority order: environment variable, config
file, default. The config file is JSONC itself and goes through the
scanner before decoding.
"""

import json
import os
from pathlib import Path
from typing import Any

from core.errors import ConfigError
from core.jsonc import strip_text

# Cache for loaded config
_config_cache: dict | None = None

# Config file names (priority order)
CONFIG_FILES = ["jsonc.config.jsonc", "jsonc.config.json"]

# Built-in defaults, dot notation
DEFAULTS: dict[str, Any] = {
    "cache.suffix": ".cached.json",
    "log.level": "WARNING",
}

# Environment overrides, dot notation -> variable name
ENV_VARS = {
    "cache.suffix": "JSONC_CACHE_SUFFIX",
    "log.level": "JSONC_LOG_LEVEL",
}


def get_config_path() -> Path | None:
    """Find config file path.

    Uses $JSONC_CONFIG when set, else looks for jsonc.config.jsonc, then
    jsonc.config.json in the current directory.

    Returns:
        Path to config file, or None if not found.

    Raises:
        ConfigError: If $JSONC_CONFIG points to a missing file.
    """
    if env_path := os.environ.get("JSONC_CONFIG"):
        config_path = Path(env_path)
        if not config_path.is_file():
            raise ConfigError(f"JSONC_CONFIG file not found: {config_path}")
        return config_path

    for filename in CONFIG_FILES:
        config_path = Path.cwd() / filename
        if config_path.exists():
            return config_path

    return None


def load_config() -> dict:
    """Load the config file.

    Comments, trailing commas and the other JSON5-lite extensions are
    accepted in both .jsonc and .json files.

    Returns:
        Configuration dictionary (empty if no config file).

    Raises:
        ConfigError: If the file is unreadable or not a JSON object.
    """
    global _config_cache

    if _config_cache is not None:
        return _config_cache

    config_path = get_config_path()

    if config_path is None:
        _config_cache = {}
        return _config_cache

    try:
        config = json.loads(strip_text(config_path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid {config_path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Invalid {config_path.name}: top level must be an object")

    _config_cache = config
    return _config_cache


def get(key: str, default: Any = None) -> Any:
    """Get config value by dot notation.

    Args:
        key: Dot-separated key path (e.g., "cache.suffix").
        default: Fallback when neither env, file nor DEFAULTS define the key.

    Returns:
        Config value or default.

    Example:
        get("cache.suffix")  # ".cached.json" unless overridden
        get("log.level", "INFO")
    """
    env_name = ENV_VARS.get(key)
    if env_name and (env_value := os.environ.get(env_name)):
        return env_value

    value: Any = load_config()
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return DEFAULTS.get(key, default)

    return value


def clear_cache() -> None:
    """Clear config cache (for testing)."""
    global _config_cache
    _config_cache = None
