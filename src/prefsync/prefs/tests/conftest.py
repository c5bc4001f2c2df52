"""Fixtures for preference parsing and merging tests."""

from __future__ import annotations

import pytest

SAMPLE_BASELINE_TEXT = """\
/** LIBREWOLF SETTINGS
 * hardened defaults, see https://librewolf.net
 */

/** [SECTION] FINGERPRINTING */
defaultPref("privacy.resistFingerprinting", true);
defaultPref("librewolf.debugger.force_detach", true);

/** [SECTION] COOKIES */
defaultPref("network.cookie.cookieBehavior", 5); // total cookie protection

/** [SECTION] SAFE BROWSING */
lockPref("browser.safebrowsing.malware.enabled", false);

/** [SECTION] WEBRTC */
defaultPref("media.peerconnection.enabled", false);
lockPref("browser.librewolf.update.enabled", false);
"""


@pytest.fixture
def sample_baseline_text() -> str:
    """A small librewolf.cfg-style baseline."""
    return SAMPLE_BASELINE_TEXT
