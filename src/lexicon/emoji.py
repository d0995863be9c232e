"""
Emoji description lexicon.

Maps emoji grapheme sequences (including skin-tone, gender and ZWJ
compounds) to short English descriptions, so that emoji can be scored
through the word lexicon once they are spelled out.

Usage:
    from src.lexicon.emoji import EmojiLexicon

    emojis = EmojiLexicon({"😀": "grinning face"})
    emojis.substitute("hey 😀 there")     # "hey grinning face there"
    emojis.extract("😀😀 nice")           # ["😀", "😀"]
"""

import re
from collections.abc import Iterator, Mapping


class EmojiLexicon(Mapping[str, str]):
    """
    Read-only mapping from emoji sequence to description.

    Keys match exactly. Scanning uses a single alternation pattern with the
    longest sequences first, so "🖖🏻" wins over "🖖" at the same position.
    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = dict(entries or {})
        self._pattern = self._compile(self._entries)

    @staticmethod
    def _compile(entries: Mapping[str, str]) -> re.Pattern[str] | None:
        if not entries:
            return None
        keys = sorted(entries, key=len, reverse=True)
        return re.compile("|".join(re.escape(key) for key in keys))

    def __getitem__(self, emoji: str) -> str:
        return self._entries[emoji]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def extract(self, text: str) -> list[str]:
        """
        Extract all known emoji sequences from text.

        Args:
            text: Input text containing emojis

        Returns:
            Emoji keys in order of appearance (duplicates kept)
        """
        if not text or self._pattern is None:
            return []
        return self._pattern.findall(text)

    def substitute(self, text: str) -> str:
        """
        Replace every known emoji with its description.

        A single space separates a description from an adjacent
        non-whitespace neighbour (text or another description); all other
        characters are copied unchanged. Text without known emoji is
        returned as is.

        Args:
            text: Raw input text

        Returns:
            Text with emoji spelled out
        """
        if not text or self._pattern is None:
            return text

        pieces: list[str] = []
        last_end = 0
        after_emoji = False

        for match in self._pattern.finditer(text):
            literal = text[last_end:match.start()]
            if literal:
                if after_emoji and not literal[0].isspace():
                    pieces.append(" ")
                pieces.append(literal)
            if pieces and pieces[-1] and not pieces[-1][-1].isspace():
                pieces.append(" ")
            pieces.append(self._entries[match.group()])
            last_end = match.end()
            after_emoji = True

        tail = text[last_end:]
        if tail:
            if after_emoji and not tail[0].isspace():
                pieces.append(" ")
            pieces.append(tail)

        return "".join(pieces)

    def __repr__(self) -> str:
        return f"EmojiLexicon({len(self._entries)} entries)"
