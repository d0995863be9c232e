"""
Static lexicons used by the sentiment scorer.

Components:
- WordLexicon: case-insensitive word -> valence mapping
- EmojiLexicon: emoji sequence -> description mapping with text substitution
- load_word_lexicon / load_emoji_lexicon: tab-separated table loaders
- get_word_lexicon / get_emoji_lexicon: process-wide, load-once accessors
"""

from src.lexicon.config import LexiconConfig
from src.lexicon.emoji import EmojiLexicon
from src.lexicon.loader import (
    LexiconLoadError,
    get_emoji_lexicon,
    get_word_lexicon,
    load_emoji_lexicon,
    load_word_lexicon,
)
from src.lexicon.words import WordLexicon

__all__ = [
    "LexiconConfig",
    "LexiconLoadError",
    "EmojiLexicon",
    "WordLexicon",
    "get_emoji_lexicon",
    "get_word_lexicon",
    "load_emoji_lexicon",
    "load_word_lexicon",
]
