"""
Per-token valence computation.

Resolves each token's base valence from the word lexicon and then runs an
explicit, ordered list of rules over the whole valence sequence:

1. degree modifiers ("very good", "slightly bad")
2. negation ("not good", "isn't bad", "no problems")
3. ALL-CAPS emphasis ("this is GREAT" among calm words)
4. emphasis punctuation, added once to the last sentiment-bearing token

Each rule takes the current valences plus read-only context and returns a
new list of the same length, so rules can be tested one at a time.

Usage:
    from src.sentiment.parser import ParsedText
    from src.sentiment.valence import ValenceEngine

    engine = ValenceEngine(lexicon)
    valences = engine.sentiment_valences(ParsedText.from_text("not very good!"))
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.lexicon.words import WordLexicon
from src.sentiment.constants import (
    BOOSTER_DICT,
    C_INCR,
    DISTANCE_DECAY,
    MODIFIER_WINDOW,
    N_SCALAR,
    NEGATE,
    NEVER_EMPHASIS,
    SPECIAL_CASES,
)
from src.sentiment.parser import ParsedText, is_shouting


@dataclass(frozen=True)
class ValenceContext:
    """Read-only view of a parsed text shared by all valence rules."""

    tokens: tuple[str, ...]
    lowered: tuple[str, ...]
    has_mixed_caps: bool
    punc_amplifier: float

    @classmethod
    def from_parsed(cls, parsed: ParsedText) -> "ValenceContext":
        return cls(
            tokens=parsed.tokens,
            lowered=tuple(token.lower() for token in parsed.tokens),
            has_mixed_caps=parsed.has_mixed_caps,
            punc_amplifier=parsed.punc_amplifier,
        )


ValenceRule = Callable[[list[float], ValenceContext], list[float]]


def is_negator(word: str) -> bool:
    """Check if a lowercased token negates what follows it."""
    word = word.replace("’", "'")  # "isn’t" as typed on phones
    return word in NEGATE or "n't" in word


def degree_weight(lowered: Sequence[str], j: int) -> float:
    """
    Get the booster/dampener weight of the token at index j.

    Two-word dampeners ("kind of", "sort of") are recognized by their
    second word, so the pair counts once.
    """
    weight = BOOSTER_DICT.get(lowered[j])
    if weight is not None:
        return weight
    if j > 0:
        return BOOSTER_DICT.get(f"{lowered[j - 1]} {lowered[j]}", 0.0)
    return 0.0


def negation_factor(lowered: Sequence[str], i: int) -> float:
    """
    Get the multiplier that negation words before index i apply.

    Returns N_SCALAR when the token is negated, NEVER_EMPHASIS for
    "never so ..." / "never this ...", 1.0 otherwise.
    """
    window = lowered[max(0, i - MODIFIER_WINDOW):i]
    factor = 1.0
    negated = False

    for k, word in enumerate(window):
        rest = window[k + 1:]
        if word == "never" and ("so" in rest or "this" in rest):
            factor = NEVER_EMPHASIS
            continue
        if word == "without" and "doubt" in rest:
            continue
        if is_negator(word):
            negated = True

    # "no" as a determiner: "no problems", "no real problems", "no bugs or crashes"
    if (i > 0 and lowered[i - 1] == "no") or (i > 1 and lowered[i - 2] == "no"):
        negated = True
    elif i > 2 and lowered[i - 3] == "no" and lowered[i - 1] in ("or", "nor"):
        negated = True

    # "least good" negates, "at least good" does not
    if i > 0 and lowered[i - 1] == "least":
        if i == 1 or lowered[i - 2] not in ("at", "very"):
            negated = True

    if negated:
        factor *= N_SCALAR
    return factor


class ValenceEngine:
    """
    Computes one adjusted valence per token.

    The lexicon is only read, so one engine can serve any number of
    concurrent scoring calls.
    """

    def __init__(self, lexicon: WordLexicon):
        self._lexicon = lexicon

    @property
    def lexicon(self) -> WordLexicon:
        return self._lexicon

    @property
    def rules(self) -> tuple[ValenceRule, ...]:
        """Rules applied after base lookup, in order."""
        return (
            self.apply_degree_modifiers,
            self.apply_negation,
            self.apply_caps_emphasis,
            self.apply_punctuation_emphasis,
        )

    def sentiment_valences(self, parsed: ParsedText) -> list[float]:
        """
        Compute adjusted valences for every token of a parsed text.

        Args:
            parsed: Parsed input

        Returns:
            One float per token, in token order
        """
        context = ValenceContext.from_parsed(parsed)
        valences = self.base_valences(context)
        for rule in self.rules:
            valences = rule(valences, context)
        return valences

    # -- base lookup ---------------------------------------------------------

    def base_valences(self, context: ValenceContext) -> list[float]:
        """Look up the unmodified valence of each token (0.0 if unknown)."""
        return [self._base_valence(context.lowered, i) for i in range(len(context.lowered))]

    def _base_valence(self, lowered: Sequence[str], i: int) -> float:
        word = lowered[i]

        # modifiers carry no sentiment of their own
        if word in BOOSTER_DICT:
            return 0.0
        if word in ("kind", "sort") and i + 1 < len(lowered) and lowered[i + 1] == "of":
            return 0.0

        if word not in self._lexicon:
            return 0.0
        valence = self._lexicon.valence(word)

        # "no" in front of a sentiment word negates it instead of scoring itself
        if word == "no" and i + 1 < len(lowered) and lowered[i + 1] in self._lexicon:
            return 0.0

        idiom = self._idiom_valence(lowered, i)
        if idiom is not None:
            return idiom
        return valence

    @staticmethod
    def _idiom_valence(lowered: Sequence[str], i: int) -> float | None:
        """Valence of the longest known idiom covering token i, if any."""
        for size in (3, 2):
            for start in range(i - size + 1, i + 1):
                end = start + size
                if start < 0 or end > len(lowered):
                    continue
                phrase = " ".join(lowered[start:end])
                if phrase in SPECIAL_CASES:
                    return SPECIAL_CASES[phrase]
        return None

    # -- rules ---------------------------------------------------------------

    def apply_degree_modifiers(
        self, valences: list[float], context: ValenceContext
    ) -> list[float]:
        """Scale valences by boosters/dampeners among the preceding tokens."""
        adjusted = []
        for i, valence in enumerate(valences):
            if valence:
                scale = 1.0
                for distance, decay in enumerate(DISTANCE_DECAY, start=1):
                    j = i - distance
                    if j < 0:
                        break
                    weight = degree_weight(context.lowered, j)
                    if weight:
                        scale *= 1.0 + weight * decay
                valence *= scale
            adjusted.append(valence)
        return adjusted

    def apply_negation(
        self, valences: list[float], context: ValenceContext
    ) -> list[float]:
        """Flip and dampen valences governed by a negation word."""
        return [
            valence * negation_factor(context.lowered, i) if valence else valence
            for i, valence in enumerate(valences)
        ]

    def apply_caps_emphasis(
        self, valences: list[float], context: ValenceContext
    ) -> list[float]:
        """Push shouted sentiment words further from zero in mixed-case text."""
        if not context.has_mixed_caps:
            return list(valences)

        adjusted = []
        for token, valence in zip(context.tokens, valences):
            if valence and is_shouting(token):
                valence += C_INCR if valence > 0 else -C_INCR
            adjusted.append(valence)
        return adjusted

    def apply_punctuation_emphasis(
        self, valences: list[float], context: ValenceContext
    ) -> list[float]:
        """Add the punctuation amplifier once, to the last non-zero valence."""
        adjusted = list(valences)
        amplifier = context.punc_amplifier
        if not amplifier:
            return adjusted

        for i in range(len(adjusted) - 1, -1, -1):
            if adjusted[i] > 0:
                adjusted[i] += amplifier
                break
            if adjusted[i] < 0:
                adjusted[i] -= amplifier
                break
        return adjusted
