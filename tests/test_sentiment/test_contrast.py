"""Tests for "but" rebalancing."""

import pytest

from src.sentiment.contrast import but_check, find_contrast

WAFFLE_TOKENS = ["yeah", "waffles", "are", "great", "but", "have", "you", "ever", "tried", "spam"]


class TestButCheck:
    """Tests for but_check()."""

    def test_splits_around_but(self):
        """Test halving before "but" and 1.5x after it."""
        valences = [0.5, 0.1, 0.0, 0.2, 0.6, 0.25, 0.5, 0.5, 0.5, 0.5]
        but_check(WAFFLE_TOKENS, valences)
        assert valences == pytest.approx(
            [0.25, 0.05, 0.0, 0.1, 0.6, 0.375, 0.75, 0.75, 0.75, 0.75]
        )

    def test_mutates_in_place_and_returns_list(self):
        """Test the same list object is modified and returned."""
        valences = [1.0, 0.0, 1.0]
        result = but_check(["good", "but", "good"], valences)
        assert result is valences
        assert valences == [0.5, 0.0, 1.5]

    def test_no_but_is_noop(self):
        """Test sequences without "but" pass through unchanged."""
        valences = [1.0, -2.0, 0.0]
        assert but_check(["good", "bad", "meh"], valences) == [1.0, -2.0, 0.0]

    def test_case_insensitive(self):
        """Test "BUT" and "But" split too."""
        assert but_check(["good", "BUT", "bad"], [2.0, 0.0, -2.0]) == [1.0, 0.0, -3.0]
        assert but_check(["good", "But", "bad"], [2.0, 0.0, -2.0]) == [1.0, 0.0, -3.0]

    def test_only_first_but_governs(self):
        """Test a second "but" does not split again."""
        tokens = ["good", "but", "bad", "but", "fine"]
        valences = [2.0, 0.0, -2.0, 0.0, 1.0]
        assert but_check(tokens, valences) == [1.0, 0.0, -3.0, 0.0, 1.5]

    def test_but_at_edges(self):
        """Test "but" as first or last token."""
        assert but_check(["but", "good"], [0.0, 2.0]) == [0.0, 3.0]
        assert but_check(["good", "but"], [2.0, 0.0]) == [1.0, 0.0]

    def test_length_mismatch_raises(self):
        """Test tokens and valences must line up."""
        with pytest.raises(ValueError):
            but_check(["good", "but"], [1.0])

    def test_find_contrast(self):
        """Test locating the conjunction."""
        assert find_contrast(WAFFLE_TOKENS) == 4
        assert find_contrast(["butter", "is", "good"]) is None
