"""prefsync - keep browser profile preferences in sync with a hardened baseline.

This package provides:
- Config: prefsync.config loading and PREFSYNC_* overrides (PrefSyncConfig)
- Prefs: directive parsing and the preference merge
- Fetch: baseline download over HTTP
- Profiles: profile discovery, selection and write-back
"""

__version__ = "0.1.0"

from prefsync.config import PrefSyncConfig as PrefSyncConfig
from prefsync.config import get_config_or_default as get_config_or_default
from prefsync.config import load_config as load_config
from prefsync.prefs import Directive as Directive
from prefsync.prefs import MergeResult as MergeResult
from prefsync.prefs import merge_preferences as merge_preferences
from prefsync.prefs import parse_directives as parse_directives
