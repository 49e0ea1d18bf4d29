# color_value/utils/__init__.py
"""

Does: Provide settings loading and lightweight trace logging for the color_value package.
Returns: Public API via load_settings/clear_settings_cache and debug/reload_topics.
Used by: Conversions, ColorValue formatting, the demo CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ColorSettings,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DEFAULT_SETTINGS,
    clear_settings_cache,
    load_settings,
    temp_settings_file,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Settings loading
    "ColorSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "clear_settings_cache",
    "temp_settings_file",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
