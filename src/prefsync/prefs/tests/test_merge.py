"""Tests for merging a baseline into preference file lines."""

from __future__ import annotations

from prefsync.prefs.merge import MergeResult, merge_preferences
from prefsync.prefs.parser import parse_directives


class TestMergePreferences:
    """Test suite for merge_preferences."""

    def test_override_and_insert(self):
        """Test matching keys are overridden and new keys appended."""
        baseline = parse_directives('defaultPref("a.b", true);\nlockPref("c.d", 1);')
        existing = ["# comment", 'pref("a.b", false);']

        result = merge_preferences(baseline, existing)

        assert result.merged_lines == ["# comment", 'pref("a.b", true);', 'pref("c.d", 1);']
        assert result.overridden_count == 1
        assert result.inserted_count == 1
        assert result.overridden_keys == ["a.b"]
        assert result.inserted_keys == ["c.d"]

    def test_empty_existing_file(self):
        """Test an empty file receives exactly the baseline directives."""
        baseline = parse_directives('pref("x.y", "z");')

        result = merge_preferences(baseline, [])

        assert result.merged_lines == ['pref("x.y", "z");']
        assert result.overridden_count == 0
        assert result.inserted_count == 1

    def test_empty_baseline_passes_through(self):
        """Test an empty baseline leaves the file untouched."""
        existing = ["// header", 'user_pref("a.b", 1);', ""]

        result = merge_preferences({}, existing)

        assert result.merged_lines == existing
        assert result.overridden_count == 0
        assert result.inserted_count == 0

    def test_overrides_user_pref_lines(self):
        """Test user_pref lines in prefs.js are replaced with the canonical verb."""
        baseline = parse_directives('defaultPref("privacy.resistFingerprinting", true);')
        existing = ['user_pref("privacy.resistFingerprinting", false);']

        result = merge_preferences(baseline, existing)

        assert result.merged_lines == ['pref("privacy.resistFingerprinting", true);']

    def test_preserves_order_of_unrelated_lines(self, sample_baseline_text):
        """Test non-matching lines keep their text and relative order."""
        baseline = parse_directives(sample_baseline_text)
        existing = [
            "// Mozilla User Preferences",
            'user_pref("app.update.lastUpdateTime", 1700000000);',
            'user_pref("network.cookie.cookieBehavior", 0);',
            "",
            'user_pref("browser.startup.homepage", "about:home");',
        ]

        result = merge_preferences(baseline, existing)

        unrelated = [line for line in existing if "cookieBehavior" not in line]
        kept = [line for line in result.merged_lines if line in unrelated]
        assert kept == unrelated
        assert result.merged_lines[2] == (
            'pref("network.cookie.cookieBehavior", 5); // total cookie protection'
        )

    def test_first_occurrence_wins_for_duplicate_keys(self):
        """Test only the first line with a baseline key is overridden.

        Later lines with the same key stay as they are, so prefs.js may
        still hold a stale duplicate after a run.
        """
        baseline = parse_directives('defaultPref("a.b", true);')
        existing = ['user_pref("a.b", false);', 'user_pref("a.b", 0);']

        result = merge_preferences(baseline, existing)

        assert result.merged_lines == ['pref("a.b", true);', 'user_pref("a.b", 0);']
        assert result.overridden_count == 1
        assert result.inserted_count == 0

    def test_conservation(self, sample_baseline_text):
        """Test overridden + inserted always equals the baseline size."""
        baseline = parse_directives(sample_baseline_text)
        existing = [
            'user_pref("privacy.resistFingerprinting", false);',
            'user_pref("media.peerconnection.enabled", true);',
            'user_pref("unrelated.key", 1);',
        ]

        result = merge_preferences(baseline, existing)

        assert result.overridden_count == 2
        assert result.inserted_count == 2
        assert result.overridden_count + result.inserted_count == len(baseline)

    def test_idempotent(self, sample_baseline_text):
        """Test merging into a previous result overrides everything and inserts nothing."""
        baseline = parse_directives(sample_baseline_text)
        first = merge_preferences(baseline, ["// prefs", 'user_pref("unrelated.key", 1);'])

        second = merge_preferences(baseline, first.merged_lines)

        assert second.merged_lines == first.merged_lines
        assert second.overridden_count == len(baseline)
        assert second.inserted_count == 0

    def test_inserted_in_baseline_order(self):
        """Test appended directives follow the baseline mapping order."""
        baseline = parse_directives('pref("z", 1);\npref("a", 2);\npref("m", 3);')

        result = merge_preferences(baseline, ['pref("a", 0);'])

        assert result.merged_lines == ['pref("a", 2);', 'pref("z", 1);', 'pref("m", 3);']

    def test_does_not_mutate_inputs(self, sample_baseline_text):
        """Test the baseline and the existing lines are left unchanged."""
        baseline = parse_directives(sample_baseline_text)
        snapshot = dict(baseline)
        existing = ['user_pref("privacy.resistFingerprinting", false);']

        merge_preferences(baseline, existing)

        assert baseline == snapshot
        assert existing == ['user_pref("privacy.resistFingerprinting", false);']

    def test_same_baseline_reused_across_profiles(self, sample_baseline_text):
        """Test merging one profile does not affect the next one."""
        baseline = parse_directives(sample_baseline_text)

        first = merge_preferences(baseline, ['user_pref("privacy.resistFingerprinting", false);'])
        second = merge_preferences(baseline, [])

        assert first.inserted_count == len(baseline) - 1
        assert second.inserted_count == len(baseline)


class TestMergeResult:
    """Test suite for MergeResult."""

    def test_to_dict(self):
        """Test counts are exported for JSON output."""
        result = MergeResult(
            merged_lines=["a", "b"],
            overridden_keys=["a"],
            inserted_keys=["b", "c"],
        )

        assert result.to_dict() == {"overridden": 1, "inserted": 2}
