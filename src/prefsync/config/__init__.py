"""
prefsync configuration module.

Settings live in prefsync.config (key=value) in the current directory and can
be overridden by PREFSYNC_* environment variables.
"""

from prefsync.config.base import (
    CONFIG_FILE_NAME,
    PrefSyncConfig,
    config_file_exists,
    create_config,
    get_config_file_path,
    get_config_or_default,
    load_config,
    validate_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "PrefSyncConfig",
    "config_file_exists",
    "create_config",
    "get_config_file_path",
    "get_config_or_default",
    "load_config",
    "validate_config",
]
