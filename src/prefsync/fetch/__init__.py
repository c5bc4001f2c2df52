"""Baseline fetching."""

from prefsync.fetch.baseline import fetch_baseline

__all__ = ["fetch_baseline"]
