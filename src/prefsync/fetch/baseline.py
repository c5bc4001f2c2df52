"""Download the hardened configuration baseline over HTTP."""

from __future__ import annotations

import logging

import httpx

from prefsync.errors import FetchError

logger = logging.getLogger(__name__)


def fetch_baseline(url: str, timeout: float = 30.0) -> str:
    """
    Fetch the raw baseline configuration text.

    Args:
        url: URL of the baseline (e.g. librewolf.cfg)
        timeout: Request timeout in seconds

    Returns:
        Response body as text, line endings untouched

    Raises:
        FetchError: On transport errors, non-success status or empty body
    """
    logger.debug("Fetching baseline from %s", url)
    try:
        response = httpx.get(url, follow_redirects=True, timeout=timeout)
    except httpx.HTTPError as e:
        raise FetchError(url, reason=f"{type(e).__name__}: {e}") from e

    if not response.is_success:
        raise FetchError(url, status_code=response.status_code, reason=response.reason_phrase)

    text = response.text
    if not text:
        raise FetchError(url, status_code=response.status_code, reason="empty response body")

    logger.debug("Fetched %d characters (status %s)", len(text), response.status_code)
    return text
