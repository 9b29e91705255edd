# wordcase/utils/__init__.py
"""

Does: Provide config loading and topic-filtered debug logging for the package.
Returns: Public API via load_config/resolve_data_dir/clear_config_cache and debug/reload_topics.
Used by: The case converter and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
