"""Merge a baseline of preference directives into an existing preferences file."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from prefsync.prefs.parser import Directive, match_directive

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Outcome of merging a baseline into one preferences file."""

    merged_lines: list[str] = field(default_factory=list)
    overridden_keys: list[str] = field(default_factory=list)
    inserted_keys: list[str] = field(default_factory=list)

    @property
    def overridden_count(self) -> int:
        return len(self.overridden_keys)

    @property
    def inserted_count(self) -> int:
        return len(self.inserted_keys)

    def to_dict(self) -> dict[str, int]:
        """Convert counts to a dictionary for JSON output."""
        return {"overridden": self.overridden_count, "inserted": self.inserted_count}


def merge_preferences(
    baseline: Mapping[str, Directive],
    existing_lines: Sequence[str],
) -> MergeResult:
    """
    Merge baseline directives into the lines of a preferences file.

    Lines are walked in order. A directive line whose key is in the baseline
    is replaced by the baseline's normalized line; every other line is kept
    verbatim. Baseline directives never matched are appended at the end in
    mapping order.

    Only the first line carrying a given key is overridden. Later lines with
    the same key are left as they are.

    Neither argument is modified.

    Args:
        baseline: Parsed baseline directives (key -> Directive)
        existing_lines: Current lines of the preferences file

    Returns:
        MergeResult with the merged lines and overridden/inserted keys
    """
    result = MergeResult()
    satisfied: set[str] = set()

    for line in existing_lines:
        matched = match_directive(line)
        if matched is None:
            result.merged_lines.append(line)
            continue

        _, key = matched
        directive = baseline.get(key)
        if directive is None or key in satisfied:
            result.merged_lines.append(line)
            continue

        result.merged_lines.append(directive.raw_line)
        result.overridden_keys.append(key)
        satisfied.add(key)

    for key, directive in baseline.items():
        if key in satisfied:
            continue
        result.merged_lines.append(directive.raw_line)
        result.inserted_keys.append(key)

    logger.debug(
        "Merged %d baseline directives: %d overridden, %d inserted",
        len(baseline),
        result.overridden_count,
        result.inserted_count,
    )
    return result
