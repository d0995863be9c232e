"""
Score aggregation for per-token valences.

Turns the adjusted valence sequence of one input into the four reported
scores: a normalized compound score and the positive, negative and
neutral proportions.

Usage:
    from src.sentiment.aggregation import ScoreAggregator

    aggregator = ScoreAggregator()
    scores = aggregator.aggregate([1.7, 0.0, 2.2])
    print(f"compound={scores.compound:.4f} pos={scores.pos:.1%}")
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Tuple

from src.sentiment.constants import NORMALIZATION_ALPHA


def normalize(score: float, alpha: float = NORMALIZATION_ALPHA) -> float:
    """
    Normalize a raw valence sum into [-1, 1].

    Uses score / sqrt(score^2 + alpha), where alpha approximates the
    largest sum expected from a typical sentence.
    """
    norm_score = score / math.sqrt((score * score) + alpha)
    if norm_score < -1.0:
        return -1.0
    if norm_score > 1.0:
        return 1.0
    return norm_score


@dataclass(frozen=True)
class ScoreSet:
    """
    Sentiment scores for one input.

    pos + neg + neu sum to 1.0 for any input with at least one token;
    compound is always within [-1, 1].
    """

    neg: float
    neu: float
    pos: float
    compound: float

    @classmethod
    def neutral(cls) -> "ScoreSet":
        """Scores for input that carries no tokens at all."""
        return cls(neg=0.0, neu=1.0, pos=0.0, compound=0.0)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


class ScoreAggregator:
    """
    Combines adjusted token valences into a ScoreSet.

    Positive tokens count as (valence + 1) and negative ones as
    (valence - 1) towards their sums, so that every token weighs at least as
    much as a neutral one in the proportions.
    """

    def __init__(self, alpha: float = NORMALIZATION_ALPHA):
        if alpha <= 0:
            raise ValueError("alpha must be positive")
        self._alpha = alpha

    @property
    def alpha(self) -> float:
        return self._alpha

    @staticmethod
    def sift_sentiment_scores(valences: Sequence[float]) -> Tuple[float, float, int]:
        """
        Split valences into positive sum, negative sum and neutral count.

        Returns:
            Tuple of (pos_sum, neg_sum, neu_count); neg_sum is <= 0
        """
        pos_sum = 0.0
        neg_sum = 0.0
        neu_count = 0
        for valence in valences:
            if valence > 0:
                pos_sum += valence + 1.0
            elif valence < 0:
                neg_sum += valence - 1.0
            else:
                neu_count += 1
        return pos_sum, neg_sum, neu_count

    def aggregate(self, valences: Sequence[float]) -> ScoreSet:
        """
        Compute the four scores for an adjusted valence sequence.

        Args:
            valences: Adjusted per-token valences

        Returns:
            ScoreSet; all zeros when the sequence is empty
        """
        pos_sum, neg_sum, neu_count = self.sift_sentiment_scores(valences)
        total = pos_sum + math.fabs(neg_sum) + neu_count

        if total == 0:
            return ScoreSet(neg=0.0, neu=0.0, pos=0.0, compound=0.0)

        compound = normalize(float(sum(valences)), self._alpha)

        return ScoreSet(
            neg=math.fabs(neg_sum) / total,
            neu=neu_count / total,
            pos=pos_sum / total,
            compound=compound,
        )
