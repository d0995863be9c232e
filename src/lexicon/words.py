"""
Case-insensitive word valence lexicon.

Wraps a plain mapping of word -> valence so that lookups ignore case while
tokens keep their original spelling for the capitalization heuristics.

Usage:
    from src.lexicon.words import WordLexicon

    lexicon = WordLexicon({"Good": 1.9, "bad": -2.5})
    lexicon.get("GOOD")  # 1.9
    "Bad" in lexicon     # True
"""

from collections.abc import Iterator, Mapping


def normalize_word(word: str) -> str:
    """Normalize a word to its lexicon key."""
    return word.lower()


class WordLexicon(Mapping[str, float]):
    """
    Read-only mapping from word to base valence (roughly -4..+4).

    Keys are normalized on construction and on every lookup, so
    ``lexicon["WOW"]`` and ``lexicon["wow"]`` resolve to the same entry.
    """

    def __init__(self, entries: Mapping[str, float] | None = None):
        self._entries: dict[str, float] = {}
        for word, valence in (entries or {}).items():
            self._entries[normalize_word(word)] = float(valence)

    def __getitem__(self, word: str) -> float:
        return self._entries[normalize_word(word)]

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return normalize_word(word) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, word: str, default: float | None = None) -> float | None:  # type: ignore[override]
        return self._entries.get(normalize_word(word), default)

    def valence(self, word: str) -> float:
        """Get valence for a token, 0.0 if the word is unknown."""
        return self._entries.get(normalize_word(word), 0.0)

    def __repr__(self) -> str:
        return f"WordLexicon({len(self._entries)} entries)"
