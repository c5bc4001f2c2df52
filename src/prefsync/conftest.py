"""Root pytest configuration for prefsync.

Re-exports fixtures from the test modules so they're available everywhere,
and keeps every test away from the developer's own config and environment.
"""

from __future__ import annotations

import os

import pytest

from prefsync.cli.tests.conftest import cli_runner
from prefsync.prefs.tests.conftest import sample_baseline_text
from prefsync.profiles.tests.conftest import tmp_profiles

__all__ = [
    "cli_runner",
    "sample_baseline_text",
    "tmp_profiles",
    "tmp_workdir",
]


@pytest.fixture(autouse=True)
def _clean_prefsync_env(monkeypatch):
    """Drop PREFSYNC_* variables inherited from the shell or a .env file."""
    for name in list(os.environ):
        if name.startswith("PREFSYNC_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tmp_workdir(monkeypatch, tmp_path):
    """Run the test from an empty working directory (no prefsync.config)."""
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir
