"""Contrastive conjunction ("but") rebalancing of token valences."""

from collections.abc import Sequence

from src.sentiment.constants import CONTRAST_AFTER, CONTRAST_BEFORE, CONTRAST_WORD


def find_contrast(tokens: Sequence[str]) -> int | None:
    """Index of the first contrastive conjunction, or None."""
    for i, token in enumerate(tokens):
        if token.lower() == CONTRAST_WORD:
            return i
    return None


def but_check(tokens: Sequence[str], valences: list[float]) -> list[float]:
    """
    Shift weight from the clause before "but" to the clause after it.

    Valences before the first "but" are halved, the conjunction itself is
    left alone, and valences after it are multiplied by 1.5. Later
    occurrences of "but" do not split again.

    Args:
        tokens: Parsed tokens
        valences: One valence per token, modified in place

    Returns:
        The same list, for chaining
    """
    if len(tokens) != len(valences):
        raise ValueError(
            f"Token/valence length mismatch: {len(tokens)} != {len(valences)}"
        )

    split = find_contrast(tokens)
    if split is None:
        return valences

    for i in range(len(valences)):
        if i < split:
            valences[i] *= CONTRAST_BEFORE
        elif i > split:
            valences[i] *= CONTRAST_AFTER
    return valences
