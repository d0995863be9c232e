"""Pytest fixtures for vader-sentiment tests."""

import pytest

from src.config.settings import Settings, get_settings
from src.lexicon.emoji import EmojiLexicon
from src.lexicon.words import WordLexicon

# Small hand-picked lexicon so rule tests do not depend on the packaged tables.
# Values match the packaged VADER lexicon for the same words.
SMALL_LEXICON: dict[str, float] = {
    "good": 1.9,
    "great": 3.1,
    "bad": -2.5,
    "horrible": -2.5,
    "smart": 1.7,
    "handsome": 2.2,
    "funny": 1.9,
    "love": 3.2,
    "problems": -1.7,
    "no": -1.2,
    "kind": 2.4,
    "bomb": -2.2,
    "grinning": 1.6,
    "incredible": 3.2,
    ":)": 2.0,
}

SMALL_EMOJI: dict[str, str] = {
    "😀": "grinning face",
    "👽": "alien",
    "🖖": "vulcan salute",
    "🖖🏻": "vulcan salute: light skin tone",
    "👨‍🎓": "man student",
    "👨🏿‍🎓": "man student: dark skin tone",
}


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Ensure each test reads settings from a clean environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture
def small_lexicon() -> WordLexicon:
    """Word lexicon with a handful of entries."""
    return WordLexicon(SMALL_LEXICON)


@pytest.fixture
def small_emoji_lexicon() -> EmojiLexicon:
    """Emoji lexicon with single and compound sequences."""
    return EmojiLexicon(SMALL_EMOJI)
