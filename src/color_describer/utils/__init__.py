# color_describer/utils/__init__.py
"""

Does: Provide settings loading and lightweight debug logging utilities.
Returns: Public API via load_config/load_settings/current_settings and
         debug/reload_topics.
Used by: Palette sources, nearest-color search, the CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    Settings,
    clear_config_cache,
    current_settings,
    load_config,
    load_settings,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    enable_all_topics,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "load_settings",
    "current_settings",
    "resolve_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "Settings",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_all_topics",
    "reload_topics",
]
