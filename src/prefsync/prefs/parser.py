"""
Preference directive parsing.

A directive is a single line of the form::

    defaultPref("privacy.resistFingerprinting", true);

where the verb is any identifier ending in ``ref`` (``pref``, ``defaultPref``,
``lockPref``, ``user_pref``...). Lines that do not match are ignored, never
rejected.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# defaultPref, pref, lockPref, user_pref
DIRECTIVE_RE = re.compile(r'^\s*(?P<verb>\w*ref)\("(?P<key>[^"]+)",', re.IGNORECASE)

# Verb understood by the browser's preference loader
CANONICAL_VERB = "pref"

DEFAULT_EXCLUDE_NAMESPACE = "librewolf"

# Physical line breaks only; \x85, U+2028 and friends stay inside the line
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Directive:
    """A single preference statement, normalized to the canonical verb."""

    key: str
    verb: str
    raw_line: str

    @property
    def kind(self) -> str:
        """Directive verb family, e.g. 'defaultpref' or 'lockpref'."""
        return self.verb.lower()


# Mapping from preference key to its (last) directive
BaselineSet = dict[str, Directive]


def split_lines(text: str) -> list[str]:
    """Split text into lines on \\r\\n, \\r and \\n, dropping the final empty line."""
    lines = LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def match_directive(line: str) -> tuple[str, str] | None:
    """Return (verb, key) if the line is a preference directive, else None."""
    match = DIRECTIVE_RE.match(line)
    if match is None:
        return None
    return match.group("verb"), match.group("key")


def normalize_directive(line: str, verb: str) -> str:
    """Replace the first occurrence of verb in line with the canonical verb."""
    return line.replace(verb, CANONICAL_VERB, 1)


def is_excluded(key: str, exclude_namespace: str | None) -> bool:
    """Check whether a key belongs to the excluded namespace (case-insensitive)."""
    if not exclude_namespace:
        return False
    return exclude_namespace.lower() in key.lower()


def parse_directives(
    config_text: str,
    exclude_namespace: str | None = DEFAULT_EXCLUDE_NAMESPACE,
) -> BaselineSet:
    """
    Parse preference directives from a configuration text.

    Args:
        config_text: Raw configuration (e.g. the fetched librewolf.cfg)
        exclude_namespace: Keys containing this substring are skipped.
            None or "" disables the exclusion.

    Returns:
        Mapping of key -> Directive. A key seen more than once keeps its
        last directive. Text without directives yields an empty mapping.
    """
    baseline: BaselineSet = {}
    excluded = 0

    for line in split_lines(config_text):
        matched = match_directive(line)
        if matched is None:
            continue

        verb, key = matched
        if is_excluded(key, exclude_namespace):
            excluded += 1
            continue

        baseline[key] = Directive(key=key, verb=verb, raw_line=normalize_directive(line, verb))

    logger.debug("Parsed %d directives (%d excluded)", len(baseline), excluded)
    return baseline
