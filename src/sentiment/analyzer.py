"""
Rule-based sentiment intensity analyzer.

Scores short informal text (social media posts, chat messages, reviews) with
a valence lexicon and a fixed pipeline of heuristics:

    emoji -> descriptions -> tokens + text signals -> token valences
          -> "but" rebalancing -> compound / pos / neg / neu

Usage:
    from src.sentiment.analyzer import SentimentIntensityAnalyzer

    analyzer = SentimentIntensityAnalyzer()
    analyzer.polarity_scores("The book was good, but the movie was AWFUL!!")
    # {"neg": ..., "neu": ..., "pos": ..., "compound": ...}
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import structlog

from src.lexicon.emoji import EmojiLexicon
from src.lexicon.loader import get_emoji_lexicon, get_word_lexicon
from src.lexicon.words import WordLexicon
from src.sentiment.aggregation import ScoreAggregator, ScoreSet
from src.sentiment.config import SentimentConfig
from src.sentiment.contrast import but_check
from src.sentiment.parser import ParsedText
from src.sentiment.valence import ValenceEngine

logger = structlog.get_logger(__name__)


class SentimentIntensityAnalyzer:
    """
    Gives a sentiment intensity score to sentences.

    Lexicons are loaded once per process (or injected) and only read
    afterwards; every call builds its own tokens and valences, so a single
    analyzer can be shared between threads.

    Usage:
        analyzer = SentimentIntensityAnalyzer()
        scores = analyzer.polarity_scores("VADER is smart, handsome, and funny!")
        print(scores["compound"])

        # Custom lexicons (plain mappings are wrapped automatically)
        analyzer = SentimentIntensityAnalyzer(
            lexicon={"good": 1.9},
            emoji_lexicon={"😀": "grinning face"},
        )
    """

    def __init__(
        self,
        lexicon: Mapping[str, float] | None = None,
        emoji_lexicon: Mapping[str, str] | None = None,
        config: SentimentConfig | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            lexicon: Word -> valence mapping (process-wide lexicon if None)
            emoji_lexicon: Emoji -> description mapping (process-wide lexicon if None)
            config: Sentiment configuration (uses defaults if None)

        Raises:
            LexiconLoadError: If a default lexicon cannot be loaded
        """
        self._config = config or SentimentConfig()

        if lexicon is None:
            lexicon = get_word_lexicon()
        elif not isinstance(lexicon, WordLexicon):
            lexicon = WordLexicon(lexicon)

        if emoji_lexicon is None:
            emoji_lexicon = get_emoji_lexicon()
        elif not isinstance(emoji_lexicon, EmojiLexicon):
            emoji_lexicon = EmojiLexicon(emoji_lexicon)

        self._lexicon: WordLexicon = lexicon
        self._emoji_lexicon: EmojiLexicon = emoji_lexicon
        self._engine = ValenceEngine(self._lexicon)
        self._aggregator = ScoreAggregator(alpha=self._config.normalization_alpha)

        logger.debug(
            "SentimentIntensityAnalyzer created",
            words=len(self._lexicon),
            emojis=len(self._emoji_lexicon),
            alpha=self._config.normalization_alpha,
        )

    @property
    def lexicon(self) -> WordLexicon:
        return self._lexicon

    @property
    def emoji_lexicon(self) -> EmojiLexicon:
        return self._emoji_lexicon

    def append_emoji_descriptions(self, text: str) -> str:
        """
        Replace emoji in text with their textual descriptions.

        Multi-codepoint sequences (skin tones, ZWJ compounds) are matched
        before their single-codepoint prefixes.
        """
        return self._emoji_lexicon.substitute(text)

    def _prepare(self, text: str) -> ParsedText:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        if self._config.emoji_substitution_enabled:
            text = self.append_emoji_descriptions(text)
        return ParsedText.from_text(text)

    def score(self, text: str) -> ScoreSet:
        """
        Score text and return the ScoreSet.

        Args:
            text: Input text

        Returns:
            ScoreSet; neutral (neu=1.0) when the text has no tokens
        """
        parsed = self._prepare(text)
        if not parsed.tokens:
            return ScoreSet.neutral()

        valences = self._engine.sentiment_valences(parsed)
        but_check(parsed.tokens, valences)
        scores = self._aggregator.aggregate(valences)

        if self._config.trace_scoring:
            logger.debug(
                "Text scored",
                tokens=list(parsed.tokens),
                valences=valences,
                compound=scores.compound,
            )
        return scores

    def polarity_scores(self, text: str) -> dict[str, float]:
        """
        Return sentiment strength scores for the input text.

        Args:
            text: Input text

        Returns:
            Dict with "neg", "neu", "pos" (summing to 1.0) and "compound"
            (in [-1, 1]; positive values mean positive valence)
        """
        return self.score(text).to_dict()

    def explain(self, text: str) -> dict[str, Any]:
        """
        Score text and return every intermediate stage.

        Useful for debugging why a sentence scored the way it did.
        """
        parsed = self._prepare(text)
        emoji = (
            self._emoji_lexicon.extract(text)
            if self._config.emoji_substitution_enabled
            else []
        )
        valences = self._engine.sentiment_valences(parsed)
        adjusted = but_check(parsed.tokens, list(valences))
        if parsed.tokens:
            scores = self._aggregator.aggregate(adjusted)
        else:
            scores = ScoreSet.neutral()

        return {
            "emoji": [(e, self._emoji_lexicon[e]) for e in emoji],
            "tokens": list(parsed.tokens),
            "has_mixed_caps": parsed.has_mixed_caps,
            "punc_amplifier": parsed.punc_amplifier,
            "valences": valences,
            "adjusted_valences": adjusted,
            "scores": scores.to_dict(),
        }


@lru_cache
def get_analyzer() -> SentimentIntensityAnalyzer:
    """Get cached analyzer instance backed by the process-wide lexicons."""
    return SentimentIntensityAnalyzer()
