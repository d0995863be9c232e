"""Tests for the vader-sentiment CLI commands."""

import json
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from src.cli import main
from src.lexicon.loader import LexiconLoadError
from src.sentiment.analyzer import SentimentIntensityAnalyzer
from src.sentiment.demo import DEMO_SENTENCES


# ── Fixtures ──────────────────────────────────────────────


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patched_analyzer(small_lexicon, small_emoji_lexicon):
    """Make the CLI use an analyzer over the small in-memory lexicons."""
    analyzer = SentimentIntensityAnalyzer(
        lexicon=small_lexicon,
        emoji_lexicon=small_emoji_lexicon,
    )
    with patch("src.cli._build_analyzer", return_value=analyzer):
        yield analyzer


# ── score ─────────────────────────────────────────────────


class TestScore:
    """Tests for `score` command."""

    def test_score_text(self, runner, patched_analyzer):
        result = runner.invoke(main, ["score", "qsv is smart, handsome, and funny."])
        assert result.exit_code == 0, result.output
        assert "qsv is smart, handsome, and funny." in result.output
        assert "compound: 0.8316" in result.output

    def test_score_json(self, runner, patched_analyzer):
        """Test one JSON object per text."""
        result = runner.invoke(main, ["score", "--json", "good", "bad"])
        assert result.exit_code == 0, result.output

        lines = [json.loads(line) for line in result.output.strip().splitlines()]
        assert [line["text"] for line in lines] == ["good", "bad"]
        assert lines[0]["compound"] > 0
        assert lines[1]["compound"] < 0
        assert set(lines[0]) == {"text", "neg", "neu", "pos", "compound"}

    def test_score_requires_text(self, runner):
        result = runner.invoke(main, ["score"])
        assert result.exit_code != 0

    def test_lexicon_error_fails(self, runner):
        """Test a broken lexicon gives a clean error and non-zero exit."""
        error = LexiconLoadError("Word lexicon is empty", path="words.txt")
        with patch(
            "src.sentiment.analyzer.SentimentIntensityAnalyzer",
            side_effect=error,
        ):
            result = runner.invoke(main, ["score", "good"])
        assert result.exit_code == 1
        assert "Word lexicon is empty" in result.output


# ── explain ───────────────────────────────────────────────


class TestExplain:
    """Tests for `explain` command."""

    def test_explain_shows_stages(self, runner, patched_analyzer):
        result = runner.invoke(main, ["explain", "good but bad"])
        assert result.exit_code == 0, result.output
        assert "Tokens:" in result.output
        assert "'good', 'but', 'bad'" in result.output
        assert "0.9500" in result.output
        assert "-3.7500" in result.output
        assert "Emoji:" not in result.output

    def test_explain_lists_emoji(self, runner, patched_analyzer):
        result = runner.invoke(main, ["explain", "good 😀"])
        assert result.exit_code == 0, result.output
        assert "Emoji:           😀 -> grinning face" in result.output


# ── demo ──────────────────────────────────────────────────


class TestDemo:
    """Tests for `demo` command."""

    def test_demo_lists_sentences(self, runner, patched_analyzer):
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0, result.output
        assert "VADER Sentiment Demo" in result.output
        for sentence in DEMO_SENTENCES:
            assert repr(sentence) in result.output


# ── global options ────────────────────────────────────────


class TestDebugFlag:
    """Tests for the --debug flag."""

    def test_debug_sets_log_level(self, runner, patched_analyzer, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        result = runner.invoke(main, ["--debug", "score", "good"])
        assert result.exit_code == 0, result.output

        assert os.environ["LOG_LEVEL"] == "DEBUG"
