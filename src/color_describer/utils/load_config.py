# src/color_describer/utils/load_config.py

"""Load settings.json from a <data/> directory with caching and validation.

- `load_config()` reads <data>/<file>.json (json5 when comments are allowed),
  runs an optional validator and caches the result per file mtime.
- `load_settings()` returns the validated, frozen `Settings` record;
  `current_settings()` falls back to defaults when no settings file exists.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path
from types import TracebackType
from typing import Any

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except Exception:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "Settings",
    "PALETTE_SOURCES",
    "load_config",
    "resolve_data_dir",
    "load_settings",
    "current_settings",
    "validate_settings",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("COLOR_DESCRIBER_DATA_DIR", "DATA_DIR")
PALETTE_SOURCES = ("bundled", "css3", "xkcd")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding, allow_comments, validator
_CONFIG_CACHE: dict[tuple[Path, float, str, bool, Any], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Env override > explicit base_dir > discovery from the package location."""
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    if base_dir is not None:
        return base_dir.resolve()
    return _default_data_dir()


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[Any], Any] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, validate and cache the result."""
    data_dir = resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    cache_key = (path, mtime, encoding, allow_comments, validator)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    if allow_comments and _json5 is None:
        raise ConfigParseError("json5 requested (allow_comments=True) but not installed")
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = _json5.load(f) if allow_comments else json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    except ValueError as e:  # JSONDecodeError and json5's ValueError
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e

    if validator is not None:
        try:
            data = validator(data)
        except ConfigTypeError:
            raise
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return data


# ── Typed settings ───────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Settings:
    """Defaults for palette loading and search, read from settings.json."""

    palette_file: str = "palette.txt"
    palette_source: str = "bundled"
    strict_channels: bool = False
    palette_encoding: str = "utf-8"


_SETTINGS_TYPES: dict[str, type] = {
    "palette_file": str,
    "palette_source": str,
    "strict_channels": bool,
    "palette_encoding": str,
}


def validate_settings(raw: Any) -> Settings:
    """Reject non-objects, unknown keys and wrong types; fill missing keys."""
    if not isinstance(raw, dict):
        raise ConfigTypeError(f"settings: expected an object, got {type(raw).__name__}")
    unknown = sorted(set(raw) - set(_SETTINGS_TYPES))
    if unknown:
        raise ValueError(f"unknown settings key(s): {', '.join(unknown)}")
    out = asdict(Settings())
    for key, value in raw.items():
        expected = _SETTINGS_TYPES[key]
        if not isinstance(value, expected):
            raise ValueError(
                f"'{key}' must be {expected.__name__}, got {type(value).__name__}"
            )
        out[key] = value
    if out["palette_source"] not in PALETTE_SOURCES:
        raise ValueError(
            f"'palette_source' must be one of {', '.join(PALETTE_SOURCES)}, "
            f"got {out['palette_source']!r}"
        )
    return Settings(**out)


def load_settings(base_dir: Path | None = None) -> Settings:
    """Load and validate <data>/settings.json; comments allowed when json5 is installed."""
    return load_config(
        "settings",
        base_dir=base_dir,
        validator=validate_settings,
        allow_comments=_json5 is not None,
    )


def current_settings(base_dir: Path | None = None) -> Settings:
    """Like load_settings, but defaults when the data dir has no settings.json."""
    try:
        return load_settings(base_dir)
    except ConfigFileNotFound:
        log.debug("settings.json not found; using defaults")
        return Settings()


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(DATA_DIR_ENV_VARS[0])
        os.environ[DATA_DIR_ENV_VARS[0]] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(DATA_DIR_ENV_VARS[0], None)
        else:
            os.environ[DATA_DIR_ENV_VARS[0]] = self._old
        clear_config_cache()
