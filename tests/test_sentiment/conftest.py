"""Test fixtures for the sentiment analyzer."""

import pytest

from src.lexicon.emoji import EmojiLexicon
from src.lexicon.words import WordLexicon
from src.sentiment.analyzer import SentimentIntensityAnalyzer
from src.sentiment.config import SentimentConfig
from src.sentiment.valence import ValenceEngine


@pytest.fixture
def sentiment_config() -> SentimentConfig:
    """Create test sentiment configuration."""
    return SentimentConfig(
        normalization_alpha=15.0,
        emoji_substitution_enabled=True,
        trace_scoring=True,
    )


@pytest.fixture
def engine(small_lexicon: WordLexicon) -> ValenceEngine:
    """Valence engine over the small test lexicon."""
    return ValenceEngine(small_lexicon)


@pytest.fixture
def small_analyzer(
    small_lexicon: WordLexicon,
    small_emoji_lexicon: EmojiLexicon,
    sentiment_config: SentimentConfig,
) -> SentimentIntensityAnalyzer:
    """Analyzer backed by the small in-memory lexicons."""
    return SentimentIntensityAnalyzer(
        lexicon=small_lexicon,
        emoji_lexicon=small_emoji_lexicon,
        config=sentiment_config,
    )


@pytest.fixture(scope="module")
def analyzer() -> SentimentIntensityAnalyzer:
    """Analyzer backed by the packaged VADER lexicons."""
    return SentimentIntensityAnalyzer()


@pytest.fixture
def sample_positive_text() -> str:
    """Sample text with positive sentiment."""
    return "qsv is smart, handsome, and funny."


@pytest.fixture
def sample_negated_text() -> str:
    """Sample text with negated positive sentiment."""
    return "qsv is not smart, handsome, and funny."
