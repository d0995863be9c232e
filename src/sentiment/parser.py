"""
Text parsing for valence scoring.

Splits raw text into case-preserved tokens (keeping emoticons intact) and
derives the two sentence-level signals used by the valence rules: whether
the text mixes shouted and normal words, and how much emphasis its
exclamation and question marks add.

Usage:
    from src.sentiment.parser import ParsedText

    parsed = ParsedText.from_text("WOAH!!! ,Who? DO u Think you're?? :)")
    parsed.tokens          # ("WOAH", "Who", "DO", "Think", "you're", ":)")
    parsed.has_mixed_caps  # True
    parsed.punc_amplifier  # 3 * 0.292 + 3 * 0.18
"""

import string
from collections.abc import Sequence
from dataclasses import dataclass

from src.sentiment.constants import (
    EP_INCR,
    EP_MAX_COUNT,
    QM_INCR,
    QM_MAX_AMPLIFIER,
    QM_MAX_COUNT,
)


def _strip_punc_if_word(unit: str) -> str:
    """
    Strip leading and trailing punctuation from a word.

    Units that strip to nothing (":)", "!!!") or that start with punctuation
    and keep a single character (":D") are emoticons and stay verbatim.
    A letter followed by punctuation ("u.", "I,") is stripped like a word.
    """
    stripped = unit.strip(string.punctuation)
    if not stripped:
        return unit
    if len(stripped) == 1 and unit[0] in string.punctuation:
        return unit
    return stripped


def tokenize(text: str) -> list[str]:
    """
    Split text into tokens.

    Single letters ("u", "I", "a.") and lone punctuation marks are dropped
    after stripping; emoticons are kept whole.
    Order and case are preserved.

    Args:
        text: Raw text

    Returns:
        Tokens in order of appearance
    """
    tokens = []
    for unit in text.split():
        token = _strip_punc_if_word(unit)
        if len(token) == 1 and (token.isalpha() or token in string.punctuation):
            continue
        tokens.append(token)
    return tokens


def is_cap_eligible(token: str) -> bool:
    """Check if a token can signal capitalization (len > 1 and has a letter)."""
    return len(token) > 1 and any(char.isalpha() for char in token)


def is_shouting(token: str) -> bool:
    """Check if an eligible token is written in ALL CAPS."""
    return is_cap_eligible(token) and token.isupper()


def has_mixed_caps(tokens: Sequence[str]) -> bool:
    """
    Check whether some, but not all, eligible tokens are ALL CAPS.

    Args:
        tokens: Parsed tokens

    Returns:
        True if at least one eligible token shouts and another does not
    """
    shouting = False
    calm = False
    for token in tokens:
        if not is_cap_eligible(token):
            continue
        if token.isupper():
            shouting = True
        else:
            calm = True
        if shouting and calm:
            return True
    return False


def punc_amplifier(text: str) -> float:
    """
    Compute the emphasis added by "!" and "?" anywhere in the text.

    Exclamation marks count up to four. Question marks add a fixed amount
    each up to three, after which the contribution is capped.
    """
    ep_count = min(text.count("!"), EP_MAX_COUNT)
    ep_amplifier = ep_count * EP_INCR

    qm_count = text.count("?")
    if qm_count <= QM_MAX_COUNT:
        qm_amplifier = qm_count * QM_INCR
    else:
        qm_amplifier = QM_MAX_AMPLIFIER

    return ep_amplifier + qm_amplifier


@dataclass(frozen=True)
class ParsedText:
    """
    Tokens and sentence-level signals for one input string.

    Built once per scoring call and never modified.
    """

    tokens: tuple[str, ...]
    has_mixed_caps: bool
    punc_amplifier: float

    @classmethod
    def from_text(cls, text: str) -> "ParsedText":
        """Parse text into tokens plus capitalization and punctuation signals."""
        tokens = tokenize(text)
        return cls(
            tokens=tuple(tokens),
            has_mixed_caps=has_mixed_caps(tokens),
            punc_amplifier=punc_amplifier(text),
        )

    def __len__(self) -> int:
        return len(self.tokens)
