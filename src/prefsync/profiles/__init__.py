"""Profile discovery, selection and synchronization."""

from prefsync.profiles.discovery import (
    default_profiles_roots,
    detect_profiles_root,
    list_profile_dirs,
    resolve_selection,
    resolve_selections,
)
from prefsync.profiles.sync import (
    ProfileSyncResult,
    backup_path_for,
    backup_preferences,
    iter_sync_profiles,
    read_preferences,
    sync_profile,
    write_preferences,
)

__all__ = [
    "ProfileSyncResult",
    "backup_path_for",
    "backup_preferences",
    "default_profiles_roots",
    "detect_profiles_root",
    "iter_sync_profiles",
    "list_profile_dirs",
    "read_preferences",
    "resolve_selection",
    "resolve_selections",
    "sync_profile",
    "write_preferences",
]
