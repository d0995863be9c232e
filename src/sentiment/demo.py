"""Demonstration sentences covering each scoring heuristic."""

from src.sentiment.analyzer import SentimentIntensityAnalyzer

DEMO_SENTENCES: list[str] = [
    # plain, punctuation, booster and caps emphasis
    "VADER is smart, handsome, and funny.",
    "VADER is smart, handsome, and funny!",
    "VADER is very smart, handsome, and funny.",
    "VADER is VERY SMART, handsome, and FUNNY.",
    "VADER is VERY SMART, handsome, and FUNNY!!!",
    "VADER is VERY SMART, uber handsome, and FRIGGIN FUNNY!!!",
    # negation
    "VADER is not smart, handsome, nor funny.",
    "At least it isn't a horrible book.",
    "Not bad at all",
    # dampeners
    "The book was good.",
    "The book was only kind of good.",
    # contrastive conjunction
    "The plot was good, but the characters are uncompelling and the dialog is not great.",
    # slang, emoticons and emoji
    "Today SUX!",
    "Today only kinda sux! But I'll get by, lol",
    "Make sure you :) or :D today!",
    "Catch utf-8 emoji such as 💘 and 💋 and 😁",
    "",
]


def run_demo(
    analyzer: SentimentIntensityAnalyzer | None = None,
) -> list[tuple[str, dict[str, float]]]:
    """
    Score every demo sentence.

    Args:
        analyzer: Analyzer to use (a default one if None)

    Returns:
        List of (sentence, scores) pairs in DEMO_SENTENCES order
    """
    analyzer = analyzer or SentimentIntensityAnalyzer()
    return [(sentence, analyzer.polarity_scores(sentence)) for sentence in DEMO_SENTENCES]
