"""
Rule-based sentiment intensity scoring for short informal text.

Provides lexicon and heuristic scoring with:
- Emoji substitution (emoji are scored through their descriptions)
- Emoticon-preserving tokenization
- Degree modifiers ("very", "slightly", "kind of")
- Negation handling ("not", "isn't", "no", "never so")
- ALL-CAPS and "!"/"?" emphasis
- Contrastive conjunction ("but") rebalancing
- Normalized compound score plus pos/neg/neu proportions

Usage:
    from src.sentiment import SentimentIntensityAnalyzer

    analyzer = SentimentIntensityAnalyzer()
    scores = analyzer.polarity_scores("The food was great but the service SUCKED!!")
    print(f"compound={scores['compound']:.4f}")
"""

from src.sentiment.aggregation import ScoreAggregator, ScoreSet, normalize
from src.sentiment.analyzer import SentimentIntensityAnalyzer, get_analyzer
from src.sentiment.config import SentimentConfig
from src.sentiment.contrast import but_check
from src.sentiment.parser import ParsedText, has_mixed_caps, punc_amplifier, tokenize
from src.sentiment.valence import ValenceEngine

__all__ = [
    # Core analyzer
    "SentimentConfig",
    "SentimentIntensityAnalyzer",
    "get_analyzer",
    # Pipeline stages
    "ParsedText",
    "ValenceEngine",
    "but_check",
    "ScoreAggregator",
    "ScoreSet",
    # Helpers
    "has_mixed_caps",
    "normalize",
    "punc_amplifier",
    "tokenize",
]
