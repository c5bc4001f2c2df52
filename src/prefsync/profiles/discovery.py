"""
Browser profile discovery and selection.

A profiles root is a directory whose immediate subdirectories are profiles,
e.g. ~/.mozilla/firefox/abcd1234.default-release.
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Sequence
from pathlib import Path

from prefsync.errors import ProfileRootError, SelectionError

logger = logging.getLogger(__name__)

ALL_PROFILES_CHOICES = ("0", "all")


def default_profiles_roots() -> list[Path]:
    """Candidate Firefox profile roots for the current platform."""
    system = platform.system().lower()
    home = Path.home()

    if system == "windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            return []
        return [Path(appdata) / "Mozilla" / "Firefox" / "Profiles"]
    if system == "darwin":
        return [home / "Library" / "Application Support" / "Firefox" / "Profiles"]
    return [
        home / ".mozilla" / "firefox",
        home / "snap" / "firefox" / "common" / ".mozilla" / "firefox",
        home / ".var" / "app" / "org.mozilla.firefox" / ".mozilla" / "firefox",
    ]


def detect_profiles_root() -> Path | None:
    """Return the first existing default profiles root, or None."""
    for candidate in default_profiles_roots():
        if candidate.is_dir():
            logger.debug("Detected profiles root %s", candidate)
            return candidate
    return None


def list_profile_dirs(root: Path | None) -> list[Path]:
    """
    List profile directories under root, sorted by name.

    Raises:
        ProfileRootError: If root is not a directory or contains no profiles
    """
    if root is None or not root.is_dir():
        raise ProfileRootError("First argument must be a valid profile directory.")

    profile_dirs = sorted((p for p in root.iterdir() if p.is_dir()), key=lambda p: p.name)
    if not profile_dirs:
        raise ProfileRootError("No profiles found in the specified directory.")

    logger.debug("Found %d profiles under %s", len(profile_dirs), root)
    return profile_dirs


def resolve_selection(choice: str, profile_dirs: Sequence[Path]) -> list[Path]:
    """
    Resolve one selection to profile directories.

    Accepts "0" or "all" for every profile, a 1-based index, or a profile
    directory name.

    Raises:
        SelectionError: If the choice matches nothing
    """
    choice = choice.strip()
    if choice.lower() in ALL_PROFILES_CHOICES:
        return list(profile_dirs)

    if choice.isdigit():
        index = int(choice)
        if 1 <= index <= len(profile_dirs):
            return [profile_dirs[index - 1]]
        raise SelectionError(choice)

    for profile_dir in profile_dirs:
        if profile_dir.name == choice:
            return [profile_dir]
    raise SelectionError(choice)


def resolve_selections(choices: Sequence[str], profile_dirs: Sequence[Path]) -> list[Path]:
    """Resolve several selections, keeping first-seen order without duplicates."""
    if not choices:
        raise SelectionError()

    selected: list[Path] = []
    for choice in choices:
        for profile_dir in resolve_selection(choice, profile_dirs):
            if profile_dir not in selected:
                selected.append(profile_dir)
    return selected
