"""Shared CLI options for prefsync commands.

Reusable Click options to keep flags consistent across commands.
"""

import click

# =============================================================================
# Output Format Options
# =============================================================================

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default="text",
    help="Output format (json for automation, text for humans)",
)

verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show debug logs and the keys touched in each profile",
)

# =============================================================================
# Safety/Confirmation Options
# =============================================================================

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Preview what would happen without making changes",
)

backup_option = click.option(
    "--backup/--no-backup",
    default=None,
    help="Back up the preferences file before writing (default: yes)",
)

# =============================================================================
# Profile Selection Options
# =============================================================================

profile_option = click.option(
    "--profile",
    "-p",
    "profile_choices",
    multiple=True,
    help="Profile to update by name or 1-based index; 0 or 'all' for every profile (repeatable)",
)

all_profiles_option = click.option(
    "--all",
    "all_profiles",
    is_flag=True,
    help="Update every profile without prompting",
)


# =============================================================================
# Composed Decorators
# =============================================================================


def add_selection_options():
    """
    Decorator to add profile selection options to a command.

    Usage:
        @click.command("sync")
        @add_selection_options()
        def sync(profile_choices, all_profiles):
            ...
    """

    def decorator(f):
        f = all_profiles_option(f)
        f = profile_option(f)
        return f

    return decorator
