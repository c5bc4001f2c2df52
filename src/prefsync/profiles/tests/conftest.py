"""Fixtures for profile discovery and sync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

PREFS_HEADER = [
    "// Mozilla User Preferences",
    "",
    "// DO NOT EDIT THIS FILE.",
]


def write_prefs(profile_dir: Path, lines: list[str]) -> Path:
    """Create a profile directory holding a prefs.js with the given lines."""
    profile_dir.mkdir(parents=True, exist_ok=True)
    prefs_file = profile_dir / "prefs.js"
    prefs_file.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return prefs_file


@pytest.fixture
def tmp_profiles(tmp_path: Path) -> Path:
    """
    Create a profiles root with two profiles.

    Layout:
        profiles/
            abcd1234.default-release/prefs.js
            wxyz9876.work/prefs.js
    """
    root = tmp_path / "profiles"
    write_prefs(
        root / "abcd1234.default-release",
        PREFS_HEADER + ['user_pref("privacy.resistFingerprinting", false);'],
    )
    write_prefs(
        root / "wxyz9876.work",
        PREFS_HEADER + ['user_pref("browser.startup.homepage", "about:home");'],
    )
    return root
