"""
Shared prefsync error classes.

Every failure the command line reports is a PrefSyncError. The preference
parser and merger never raise: unrecognized lines pass through untouched.
"""

from __future__ import annotations

from pathlib import Path


class PrefSyncError(Exception):
    """Base exception for prefsync errors."""

    pass


class FetchError(PrefSyncError):
    """Raised when the remote baseline cannot be downloaded.

    Attributes:
        url: URL that was requested.
        status_code: HTTP status code, or None for transport failures.
        reason: Reason phrase or transport error description.
    """

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        message = f"Error downloading {url}"
        if status_code is not None:
            message += f"\nStatus code: {status_code}"
        if reason:
            message += f"\nStatus description: {reason}"
        super().__init__(message)

    def __repr__(self) -> str:
        return f"FetchError(url={self.url!r}, status_code={self.status_code!r})"


class ProfileRootError(PrefSyncError):
    """Raised when the profiles root is missing or holds no profiles."""

    pass


class SelectionError(PrefSyncError):
    """Raised when no valid profile was selected."""

    def __init__(self, choice: str | None = None):
        self.choice = choice
        super().__init__("Invalid input.")


class MissingFileError(PrefSyncError):
    """Raised when a selected profile has no preferences file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path.name} not found in {path.parent.name}")
