"""Output formatting for CLI commands."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prefsync.profiles import ProfileSyncResult

DRY_RUN_PREFIX = "[DRY-RUN] "


def print_json(data: Any) -> None:
    """Print JSON output for automation."""
    print(json.dumps(data, indent=2, default=str))


def print_profile_choices(console: Console, profile_dirs: Sequence[Path]) -> None:
    """Print the numbered profile menu."""
    console.print("Which profile would you like to update?")
    console.print("0. All profiles", markup=False)
    for i, profile_dir in enumerate(profile_dirs, start=1):
        console.print(f"{i}. {profile_dir.name}", markup=False)


def print_profile_result(console: Console, result: ProfileSyncResult, *, verbose: bool) -> None:
    """Print the outcome of one profile in human-readable form."""
    prefix = DRY_RUN_PREFIX if result.dry_run else ""

    if result.backup_file:
        console.print(
            f"[dim]Backed up {result.prefs_file.name} to {escape(str(result.backup_file))}[/dim]",
            highlight=False,
        )

    action = "Would update" if result.dry_run else "Updated"
    console.print(f"[green]{escape(prefix)}{action} {escape(result.profile_dir.name)}[/green]")
    console.print(f"Overridden {result.merge.overridden_count} preferences")
    console.print(f"Inserted {result.merge.inserted_count} new preferences")

    if verbose and (result.merge.overridden_keys or result.merge.inserted_keys):
        table = Table(title=f"Preferences in {escape(result.profile_dir.name)}")
        table.add_column("Key", style="cyan")
        table.add_column("Change", style="bold")
        for key in result.merge.overridden_keys:
            table.add_row(escape(key), "[yellow]overridden[/yellow]")
        for key in result.merge.inserted_keys:
            table.add_row(escape(key), "[green]inserted[/green]")
        console.print(table)


def build_json_report(
    results: Sequence[ProfileSyncResult],
    *,
    baseline_url: str,
    baseline_size: int,
    dry_run: bool,
) -> dict[str, Any]:
    """Build the JSON report for a run."""
    return {
        "dry_run": dry_run,
        "baseline_url": baseline_url,
        "baseline_size": baseline_size,
        "profiles": [result.to_dict() for result in results],
    }
