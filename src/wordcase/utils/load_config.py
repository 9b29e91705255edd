# src/wordcase/utils/load_config.py

"""
load_config.py.

Does: Read a JSON object from the data directory, run an optional validator
      over it, and memoize the result per file version (resolved path + mtime).
      Data dir: explicit `base_dir` > WORDCASE_DATA_DIR > first `data/`
      walking up from this package (the bundled `wordcase/data/`).
Returns: load_config(), resolve_data_dir(), clear_config_cache().
Used by: The case-style table in wordcase.case.convert.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "ENV_DATA_DIR",
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_DATA_DIR = "WORDCASE_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory exists above the package."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a config file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON or its validator fails."""


class ConfigTypeError(TypeError):
    """Raise when parsed JSON doesn't have the expected shape."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: resolved path, mtime_ns, validator
_CONFIG_CACHE: dict[tuple[Path, int, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def resolve_data_dir(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """
    Does: Pick the data directory: explicit > env > discovery.
    Raises: DataDirNotFound when discovery finds nothing.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(ENV_DATA_DIR)
    if env:
        return Path(env).expanduser().resolve()
    here = Path(__file__).resolve().parent
    tried = [p / "data" for p in [here, *here.parents]]
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("No 'data' directory found. Tried:\n  " + "\n  ".join(map(str, tried)))


def _config_path(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    return data


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: str | os.PathLike[str] | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """
    Does: Load <data>/<file>.json as a dict and apply `validator`.
          Results are cached per (path, mtime, validator), so switching the
          data dir or editing the file yields a fresh load.
    Returns: The (validated) dict. Cached objects are shared: copy before mutating.
    Raises: ConfigFileNotFound, ConfigParseError, ConfigTypeError.
            A ConfigTypeError from the validator propagates unchanged; any
            other validator error becomes ConfigParseError.
    """
    path = _config_path(resolve_data_dir(base_dir), file)
    try:
        mtime = path.stat().st_mtime_ns
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    key = (path, mtime, validator)
    with _CACHE_LOCK:
        cached = _CONFIG_CACHE.get(key)
    if cached is not None:
        log.debug("Config cache HIT: %s", path)
        return cached

    data = _read_json_object(path)
    if validator is not None:
        try:
            data = validator(data)
        except ConfigTypeError:
            raise
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s", path)
    return data
