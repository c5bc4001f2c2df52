"""
Apply a parsed baseline to profile preference files.

Each profile is read fresh, merged against its own copy of the baseline and
written back unless running in dry-run mode. The backup timestamp is chosen
once per run by the caller so every backup of a run shares it.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from prefsync.errors import MissingFileError
from prefsync.prefs import Directive, MergeResult, merge_preferences, split_lines

logger = logging.getLogger(__name__)

DEFAULT_PREFS_FILENAME = "prefs.js"


@dataclass
class ProfileSyncResult:
    """Result of synchronizing a single profile."""

    profile_dir: Path
    prefs_file: Path
    merge: MergeResult
    backup_file: Path | None = None
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "profile": self.profile_dir.name,
            "prefs_file": str(self.prefs_file),
            "backup_file": str(self.backup_file) if self.backup_file else None,
            **self.merge.to_dict(),
        }


def read_preferences(prefs_file: Path) -> list[str]:
    """
    Read all lines of a preferences file.

    Bytes that are not valid UTF-8 are kept as surrogate escapes so that
    write_preferences() puts them back unchanged.
    """
    text = prefs_file.read_bytes().decode("utf-8", errors="surrogateescape")
    return split_lines(text)


def write_preferences(prefs_file: Path, lines: Sequence[str]) -> None:
    """
    Replace a preferences file with lines, one per line.

    The lines go to a temporary file in the same directory which is then
    renamed over prefs_file, so an interrupted write never leaves it truncated.
    """
    fd, tmp_path = tempfile.mkstemp(
        dir=prefs_file.parent, prefix=f".{prefs_file.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            for line in lines:
                f.write(line + "\n")
        if prefs_file.exists():
            shutil.copymode(prefs_file, tmp_path)
        os.replace(tmp_path, prefs_file)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise


def backup_path_for(prefs_file: Path, run_timestamp: int) -> Path:
    """Backup location: <prefs_file>.<run_timestamp>.bak"""
    return prefs_file.with_name(f"{prefs_file.name}.{run_timestamp}.bak")


def backup_preferences(prefs_file: Path, run_timestamp: int) -> Path:
    """Copy a preferences file to its timestamped backup, replacing any existing one."""
    backup_file = backup_path_for(prefs_file, run_timestamp)
    shutil.copy2(prefs_file, backup_file)
    logger.debug("Backed up %s to %s", prefs_file, backup_file)
    return backup_file


def sync_profile(
    baseline: Mapping[str, Directive],
    profile_dir: Path,
    *,
    run_timestamp: int,
    prefs_filename: str = DEFAULT_PREFS_FILENAME,
    dry_run: bool = False,
    backup: bool = True,
) -> ProfileSyncResult:
    """
    Merge the baseline into one profile's preferences file.

    Args:
        baseline: Parsed baseline directives
        profile_dir: Profile directory containing the preferences file
        run_timestamp: Epoch seconds shared by all backups of this run
        prefs_filename: Preferences file name inside the profile
        dry_run: Compute the merge without backing up or writing
        backup: Back up the file before writing

    Returns:
        ProfileSyncResult for reporting

    Raises:
        MissingFileError: If the profile has no preferences file
    """
    prefs_file = profile_dir / prefs_filename
    if not prefs_file.is_file():
        raise MissingFileError(prefs_file)

    backup_file = None
    if backup and not dry_run:
        backup_file = backup_preferences(prefs_file, run_timestamp)

    merge = merge_preferences(dict(baseline), read_preferences(prefs_file))

    if not dry_run:
        write_preferences(prefs_file, merge.merged_lines)
        logger.debug("Wrote %d lines to %s", len(merge.merged_lines), prefs_file)

    return ProfileSyncResult(
        profile_dir=profile_dir,
        prefs_file=prefs_file,
        merge=merge,
        backup_file=backup_file,
        dry_run=dry_run,
    )


def iter_sync_profiles(
    baseline: Mapping[str, Directive],
    profile_dirs: Sequence[Path],
    **kwargs: Any,
) -> Iterator[ProfileSyncResult]:
    """
    Synchronize profiles one after another.

    Stops at the first profile without a preferences file (MissingFileError
    propagates); profiles already yielded keep their written changes.
    """
    for profile_dir in profile_dirs:
        yield sync_profile(baseline, profile_dir, **kwargs)
