"""Preference directive parsing and merging."""

from prefsync.prefs.merge import MergeResult, merge_preferences
from prefsync.prefs.parser import (
    CANONICAL_VERB,
    DEFAULT_EXCLUDE_NAMESPACE,
    BaselineSet,
    Directive,
    match_directive,
    parse_directives,
    split_lines,
)

__all__ = [
    "CANONICAL_VERB",
    "DEFAULT_EXCLUDE_NAMESPACE",
    "BaselineSet",
    "Directive",
    "MergeResult",
    "match_directive",
    "merge_preferences",
    "parse_directives",
    "split_lines",
]
