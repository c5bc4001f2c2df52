"""prefsync CLI - Main command-line interface."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from prefsync import __version__
from prefsync.cli.options import (
    add_selection_options,
    backup_option,
    dry_run_option,
    format_option,
    verbose_option,
)
from prefsync.cli.output import (
    DRY_RUN_PREFIX,
    build_json_report,
    print_json,
    print_profile_choices,
    print_profile_result,
)
from prefsync.config import (
    PrefSyncConfig,
    config_file_exists,
    create_config,
    get_config_file_path,
    get_config_or_default,
    validate_config,
)
from prefsync.errors import PrefSyncError, SelectionError
from prefsync.fetch import fetch_baseline
from prefsync.prefs import parse_directives
from prefsync.profiles import (
    detect_profiles_root,
    iter_sync_profiles,
    list_profile_dirs,
    resolve_selection,
    resolve_selections,
)

load_dotenv()

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _init_config() -> None:
    """Write a default prefsync.config in the current directory."""
    config_file = get_config_file_path()
    if config_file_exists():
        console.print(f"[yellow]Configuration already exists ({config_file})[/yellow]")
        overwrite = console.input("Overwrite? (y/N): ")
        if overwrite.lower() != "y":
            console.print("[dim]Keeping existing configuration[/dim]")
            return

    config = create_config()
    console.print(f"[green]✓[/green] Created config: {config_file}")
    console.print(f"[dim]  BASELINE_URL={config.BASELINE_URL}[/dim]")
    console.print(f"[dim]  PREFS_FILENAME={config.PREFS_FILENAME}[/dim]")


def _resolve_profiles_root(profiles_root: Path | None, config: PrefSyncConfig) -> Path | None:
    if profiles_root is not None:
        return profiles_root
    return config.get_profiles_root() or detect_profiles_root()


def _select_profiles(
    profile_dirs: list[Path],
    profile_choices: tuple[str, ...],
    all_profiles: bool,
    interactive: bool = True,
) -> list[Path]:
    if all_profiles:
        return list(profile_dirs)
    if profile_choices:
        return resolve_selections(profile_choices, profile_dirs)
    if not interactive:
        raise SelectionError()

    print_profile_choices(console, profile_dirs)
    choice = console.input()
    if not choice.strip():
        raise SelectionError(choice)
    return resolve_selection(choice, profile_dirs)


@click.command()
@click.argument(
    "profiles_root",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@add_selection_options()
@click.option("--url", "baseline_url", help="Baseline configuration URL (overrides config)")
@click.option(
    "--exclude-namespace",
    help="Skip preference keys containing this text (overrides config, '' disables)",
)
@backup_option
@dry_run_option
@format_option
@verbose_option
@click.option(
    "--init-config",
    is_flag=True,
    help="Write a default prefsync.config in the current directory and exit",
)
@click.version_option(version=__version__, prog_name="prefsync")
def main(
    profiles_root: Path | None,
    profile_choices: tuple[str, ...],
    all_profiles: bool,
    baseline_url: str | None,
    exclude_namespace: str | None,
    backup: bool | None,
    dry_run: bool,
    output_format: str,
    verbose: bool,
    init_config: bool,
):
    """
    Update browser profile preferences with a hardened baseline.

    Downloads the baseline configuration (LibreWolf's librewolf.cfg by
    default), then overrides matching preferences in each selected profile's
    prefs.js and appends the ones it does not have yet.

    \b
    Examples:
      prefsync ~/.mozilla/firefox                 # Choose a profile interactively
      prefsync ~/.mozilla/firefox --all           # Update every profile
      prefsync -p abcd1234.default-release        # Auto-detected root, one profile
      prefsync --all --dry-run --format json      # Preview as JSON
    """
    _configure_logging(verbose)

    if init_config:
        _init_config()
        return

    try:
        config = get_config_or_default()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    for issue in validate_config(config):
        logger.warning("Configuration: %s", issue)

    baseline_url = baseline_url or config.BASELINE_URL
    if exclude_namespace is None:
        exclude_namespace = config.EXCLUDE_NAMESPACE
    if backup is None:
        backup = config.BACKUP_ENABLED
    as_json = output_format == "json"

    # Shared by every backup taken in this run
    run_timestamp = int(time.time())

    if not as_json:
        console.print("Update browser profile preferences with the hardened baseline")

    try:
        root = _resolve_profiles_root(profiles_root, config)
        profile_dirs = list_profile_dirs(root)

        baseline = parse_directives(
            fetch_baseline(baseline_url, timeout=config.FETCH_TIMEOUT),
            exclude_namespace=exclude_namespace,
        )
        if not baseline:
            logger.info("No preference directives found in %s", baseline_url)
            if not as_json:
                console.print("[yellow]⚠ Baseline contains no preferences to merge[/yellow]")

        selected = _select_profiles(
            profile_dirs, profile_choices, all_profiles, interactive=not as_json
        )

        results = []
        for result in iter_sync_profiles(
            baseline,
            selected,
            run_timestamp=run_timestamp,
            prefs_filename=config.PREFS_FILENAME,
            dry_run=dry_run,
            backup=backup,
        ):
            results.append(result)
            if not as_json:
                print_profile_result(console, result, verbose=verbose)
    except PrefSyncError as e:
        if as_json:
            print_json({"error": str(e), "type": type(e).__name__})
        else:
            console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise SystemExit(1)

    if as_json:
        print_json(
            build_json_report(
                results,
                baseline_url=baseline_url,
                baseline_size=len(baseline),
                dry_run=dry_run,
            )
        )
    elif dry_run:
        console.print(f"[dim]{escape(DRY_RUN_PREFIX)}No files were changed[/dim]")


if __name__ == "__main__":
    main()
