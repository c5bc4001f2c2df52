"""
prefsync configuration management.

Loads configuration from a prefsync.config file in the current directory.
Values can be overridden with PREFSYNC_<KEY> environment variables, and
command-line options override both.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator

CONFIG_FILE_NAME = "prefsync.config"
ENV_PREFIX = "PREFSYNC_"


class PrefSyncConfig(BaseModel):
    """prefsync configuration."""

    DEFAULT_BASELINE_URL: ClassVar[str] = (
        "https://codeberg.org/librewolf/settings/raw/branch/master/librewolf.cfg"
    )
    DEFAULT_EXCLUDE_NAMESPACE: ClassVar[str] = "librewolf"
    DEFAULT_PREFS_FILENAME: ClassVar[str] = "prefs.js"
    DEFAULT_FETCH_TIMEOUT: ClassVar[float] = 30.0

    BASELINE_URL: str = Field(
        default=DEFAULT_BASELINE_URL,
        description="URL of the hardened configuration baseline",
    )
    EXCLUDE_NAMESPACE: str = Field(
        default=DEFAULT_EXCLUDE_NAMESPACE,
        description="Preference keys containing this text are never imported (empty disables)",
    )
    PREFS_FILENAME: str = Field(
        default=DEFAULT_PREFS_FILENAME,
        description="Name of the preferences file inside each profile directory",
    )
    FETCH_TIMEOUT: float = Field(
        default=DEFAULT_FETCH_TIMEOUT,
        description="Timeout in seconds for downloading the baseline",
        ge=1,
        le=300,
    )
    PROFILES_ROOT: str | None = Field(
        default=None,
        description="Directory containing the browser profiles (auto-detected when unset)",
    )
    BACKUP_ENABLED: bool = Field(
        default=True,
        description="Back up the preferences file before writing",
    )

    @field_validator("BACKUP_ENABLED", mode="before")
    @classmethod
    def validate_backup_enabled(cls, v: Any) -> bool:
        """
        Convert various string representations to boolean.

        Truthy values: "true", "1", "yes", "on" (case-insensitive)
        """
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "on")
        return bool(v)

    @field_validator("PROFILES_ROOT", mode="before")
    @classmethod
    def validate_profiles_root(cls, v: Any) -> str | None:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return str(v)

    def get_profiles_root(self) -> Path | None:
        """Get the configured profiles root with ~ expanded."""
        if self.PROFILES_ROOT is None:
            return None
        return Path(self.PROFILES_ROOT).expanduser()


def get_config_file_path() -> Path:
    """Get the path to the prefsync configuration file."""
    return Path.cwd() / CONFIG_FILE_NAME


def config_file_exists() -> bool:
    """Check if prefsync.config exists in the current directory."""
    return get_config_file_path().exists()


def _read_config_file(config_file: Path) -> dict[str, str]:
    config_data = {}
    with open(config_file, "r") as f:
        for line in f:
            line = line.strip()
            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                config_data[key.strip()] = value.strip().strip('"').strip("'")
    return config_data


def _read_env_overrides() -> dict[str, str]:
    overrides = {}
    for name in PrefSyncConfig.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_config() -> PrefSyncConfig:
    """
    Load prefsync configuration from prefsync.config in the current directory.

    The file contains key=value pairs:

        BASELINE_URL="https://example.org/hardened.cfg"
        FETCH_TIMEOUT=15
        BACKUP_ENABLED=false

    PREFSYNC_<KEY> environment variables take precedence over the file.

    Returns:
        PrefSyncConfig with loaded settings

    Raises:
        FileNotFoundError: If prefsync.config doesn't exist
        pydantic.ValidationError: If a value is invalid
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        raise FileNotFoundError(
            f"prefsync configuration file not found: {config_file}\n"
            "Run 'prefsync --init-config' to create one."
        )

    config_data = _read_config_file(config_file)
    config_data.update(_read_env_overrides())
    return PrefSyncConfig(**config_data)


def get_config_or_default() -> PrefSyncConfig:
    """
    Get configuration, or defaults (plus environment overrides) if
    prefsync.config doesn't exist.
    """
    if config_file_exists():
        return load_config()
    return PrefSyncConfig(**_read_env_overrides())


def create_config(config: PrefSyncConfig | None = None) -> PrefSyncConfig:
    """
    Write a prefsync.config file in the current directory.

    Args:
        config: Configuration to write (defaults when None)

    Returns:
        The written PrefSyncConfig
    """
    config = config or PrefSyncConfig()
    config_file = get_config_file_path()

    with open(config_file, "w") as f:
        f.write("# prefsync configuration\n")
        f.write("# This file is auto-generated by 'prefsync --init-config'\n\n")
        f.write(f'BASELINE_URL="{config.BASELINE_URL}"\n')
        f.write(f'EXCLUDE_NAMESPACE="{config.EXCLUDE_NAMESPACE}"\n')
        f.write(f'PREFS_FILENAME="{config.PREFS_FILENAME}"\n')
        f.write(f"FETCH_TIMEOUT={config.FETCH_TIMEOUT}\n")
        f.write(f"BACKUP_ENABLED={config.BACKUP_ENABLED}\n")
        if config.PROFILES_ROOT:
            f.write(f'PROFILES_ROOT="{config.PROFILES_ROOT}"\n')
        else:
            f.write("\n# Leave unset to auto-detect the Firefox profiles directory\n")
            f.write("# PROFILES_ROOT=\n")

    return config


def validate_config(config: PrefSyncConfig) -> list[str]:
    """
    Validate configuration and return a list of issues.

    Returns:
        List of validation issues (empty if all valid)
    """
    issues = []

    if not config.BASELINE_URL.startswith("https://"):
        issues.append(f"BASELINE_URL should use https: {config.BASELINE_URL}")

    if not config.PREFS_FILENAME.strip():
        issues.append("PREFS_FILENAME is empty")

    profiles_root = config.get_profiles_root()
    if profiles_root is not None and not profiles_root.is_dir():
        issues.append(f"PROFILES_ROOT does not exist: {profiles_root}")

    return issues
