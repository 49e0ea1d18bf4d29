# src/color_value/utils/load_config.py

"""Load color formatting settings from a JSON file with caching and typed errors.

Resolution order:
- explicit `path` argument
- COLOR_VALUE_SETTINGS environment variable
- built-in defaults (no file needed)

Used by conversions and ColorValue formatting, and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any

from color_value.types import AlphaDecoding
from color_value.utils.log import debug

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "ColorSettings",
    "DEFAULT_SETTINGS",
    "ENV_VAR",
    "load_settings",
    "clear_settings_cache",
    "temp_settings_file",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VAR = "COLOR_VALUE_SETTINGS"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested settings file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails or a value is not acceptable."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Settings model ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorSettings:
    """Formatting knobs read by the conversions and ColorValue."""

    alpha_decoding: AlphaDecoding = AlphaDecoding.NORMALIZED
    unset_token: str = "undefined"


DEFAULT_SETTINGS = ColorSettings()

_KNOWN_KEYS = frozenset({"alpha_decoding", "unset_token"})

# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: resolved path + mtime
_SETTINGS_CACHE: dict[tuple[Path, float], ColorSettings] = {}


def clear_settings_cache() -> None:
    """Empty the in-memory settings cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _SETTINGS_CACHE.clear()
        log.debug("Settings cache cleared.")


def _env_settings_path() -> Path | None:
    v = os.environ.get(ENV_VAR)
    if v:
        return Path(os.path.expanduser(v)).resolve()
    return None


def _coerce(data: Any, path: Path) -> ColorSettings:
    """Turn a parsed JSON document into ColorSettings or raise."""
    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigTypeError(f"{path.name}: unknown settings keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    if "alpha_decoding" in data:
        raw = data["alpha_decoding"]
        try:
            kwargs["alpha_decoding"] = AlphaDecoding(str(raw).lower())
        except ValueError as e:
            choices = ", ".join(m.value for m in AlphaDecoding)
            raise ConfigParseError(
                f"{path.name}: alpha_decoding must be one of {choices}, got {raw!r}"
            ) from e
    if "unset_token" in data:
        token = data["unset_token"]
        if not isinstance(token, str):
            raise ConfigTypeError(
                f"{path.name}: unset_token must be a string, got {type(token).__name__}"
            )
        kwargs["unset_token"] = token
    return ColorSettings(**kwargs)


def load_settings(path: str | os.PathLike[str] | None = None) -> ColorSettings:
    """Load settings from `path`, the env override, or fall back to defaults."""
    if path is None:
        resolved = _env_settings_path()
        if resolved is None:
            return DEFAULT_SETTINGS
    else:
        resolved = Path(os.path.expanduser(os.fspath(path))).resolve()

    if not resolved.is_file():
        raise ConfigFileNotFound(f"Settings file not found: {resolved}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = resolved.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {resolved}: {e}") from e

    cache_key = (resolved, mtime)
    with _CACHE_LOCK:
        if cache_key in _SETTINGS_CACHE:
            log.debug("Settings cache HIT: %s", resolved.name)
            return _SETTINGS_CACHE[cache_key]

    try:
        with resolved.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {resolved}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {resolved}: {e}") from e

    settings = _coerce(data, resolved)
    with _CACHE_LOCK:
        _SETTINGS_CACHE[cache_key] = settings
    debug(f"loaded {resolved.name}: {settings}", topic="config")
    return settings


# ── Context manager to temporarily point at another settings file ────────────
class temp_settings_file:
    """Temporarily set the settings file via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_settings_file:
        self._old = os.environ.get(ENV_VAR)
        os.environ[ENV_VAR] = self._new
        clear_settings_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(ENV_VAR, None)
        else:
            os.environ[ENV_VAR] = self._old
        clear_settings_cache()
