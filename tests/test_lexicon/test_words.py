"""Tests for the word valence lexicon."""

import pytest

from src.lexicon.words import WordLexicon, normalize_word


class TestWordLexicon:
    """Tests for WordLexicon lookups."""

    def test_case_insensitive_lookup(self, small_lexicon):
        """Test lookups ignore case."""
        assert small_lexicon["GOOD"] == 1.9
        assert small_lexicon.get("Good") == 1.9
        assert "BAD" in small_lexicon

    def test_keys_normalized_on_construction(self):
        """Test mixed-case keys are stored lower-cased."""
        lexicon = WordLexicon({"WoW": 2.8})
        assert list(lexicon) == ["wow"]
        assert lexicon["wow"] == 2.8

    def test_missing_word(self, small_lexicon):
        """Test unknown words raise on [] and default elsewhere."""
        with pytest.raises(KeyError):
            small_lexicon["qsv"]
        assert small_lexicon.get("qsv") is None
        assert small_lexicon.get("qsv", 0.5) == 0.5
        assert small_lexicon.valence("qsv") == 0.0

    def test_emoticon_keys(self, small_lexicon):
        """Test non-word keys are looked up verbatim."""
        assert small_lexicon.valence(":)") == 2.0

    def test_non_string_membership(self, small_lexicon):
        assert 1.9 not in small_lexicon

    def test_values_are_floats(self):
        """Test integer valences are stored as floats."""
        lexicon = WordLexicon({"ok": 1})
        assert isinstance(lexicon["ok"], float)

    def test_len_and_repr(self, small_lexicon):
        assert len(small_lexicon) == 15
        assert repr(small_lexicon) == "WordLexicon(15 entries)"

    def test_empty(self):
        lexicon = WordLexicon()
        assert len(lexicon) == 0
        assert lexicon.valence("good") == 0.0

    def test_normalize_word(self):
        assert normalize_word("HeLLo") == "hello"
