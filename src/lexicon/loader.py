"""
Loaders for the tab-separated lexicon tables.

Word table lines look like ``word<TAB>mean<TAB>stddev<TAB>[ratings]``; only
the first two columns are used. Emoji table lines look like
``emoji<TAB>description``. Blank lines are skipped in both.

Any problem with a table is fatal: it raises LexiconLoadError when the
lexicon is built, never while scoring.

Usage:
    from src.lexicon.loader import get_emoji_lexicon, get_word_lexicon

    words = get_word_lexicon()    # loaded once per process
    emojis = get_emoji_lexicon()
"""

from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

import structlog

from src.lexicon.config import LexiconConfig
from src.lexicon.emoji import EmojiLexicon
from src.lexicon.words import WordLexicon

logger = structlog.get_logger(__name__)


class LexiconLoadError(Exception):
    """Raised when a lexicon table is missing or malformed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.line_number = line_number


def _packaged_table(package: str, file_name: str) -> Traversable:
    try:
        return resources.files(package).joinpath(file_name)
    except ModuleNotFoundError as e:
        raise LexiconLoadError(
            f"Lexicon data package '{package}' is not installed",
            path=f"{package}/{file_name}",
        ) from e


def _read_rows(source: Traversable | Path) -> list[tuple[int, list[str]]]:
    """Read a table into (line_number, columns) rows, skipping blank lines."""
    try:
        content = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(f"Cannot read lexicon table: {e}", path=str(source)) from e

    rows = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        columns = line.split("\t")
        if len(columns) < 2 or not columns[0]:
            raise LexiconLoadError(
                f"Expected at least two tab-separated columns, got {line!r}",
                path=str(source),
                line_number=line_number,
            )
        rows.append((line_number, columns))
    return rows


def load_word_lexicon(source: Traversable | Path) -> WordLexicon:
    """
    Build a WordLexicon from a word valence table.

    Args:
        source: Path or packaged resource of the table

    Returns:
        Populated WordLexicon

    Raises:
        LexiconLoadError: If the table is missing, empty or has a bad valence
    """
    entries: dict[str, float] = {}
    for line_number, columns in _read_rows(source):
        word, measure = columns[0].strip(), columns[1].strip()
        try:
            entries[word] = float(measure)
        except ValueError as e:
            raise LexiconLoadError(
                f"Invalid valence {measure!r} for {word!r}",
                path=str(source),
                line_number=line_number,
            ) from e

    if not entries:
        raise LexiconLoadError("Word lexicon is empty", path=str(source))

    lexicon = WordLexicon(entries)
    logger.info("Word lexicon loaded", entries=len(lexicon), source=str(source))
    return lexicon


def load_emoji_lexicon(source: Traversable | Path) -> EmojiLexicon:
    """
    Build an EmojiLexicon from an emoji description table.

    Args:
        source: Path or packaged resource of the table

    Returns:
        Populated EmojiLexicon

    Raises:
        LexiconLoadError: If the table is missing, empty or has a blank description
    """
    entries: dict[str, str] = {}
    for line_number, columns in _read_rows(source):
        emoji, description = columns[0], columns[1].strip()
        if not description:
            raise LexiconLoadError(
                f"Missing description for {emoji!r}",
                path=str(source),
                line_number=line_number,
            )
        entries[emoji] = description

    if not entries:
        raise LexiconLoadError("Emoji lexicon is empty", path=str(source))

    lexicon = EmojiLexicon(entries)
    logger.info("Emoji lexicon loaded", entries=len(lexicon), source=str(source))
    return lexicon


def word_lexicon_source(config: LexiconConfig | None = None) -> Traversable | Path:
    """Resolve where the word table comes from."""
    config = config or LexiconConfig()
    if config.words_path is not None:
        return config.words_path
    return _packaged_table(config.data_package, config.words_file)


def emoji_lexicon_source(config: LexiconConfig | None = None) -> Traversable | Path:
    """Resolve where the emoji table comes from."""
    config = config or LexiconConfig()
    if config.emoji_path is not None:
        return config.emoji_path
    return _packaged_table(config.data_package, config.emoji_file)


@lru_cache
def get_word_lexicon() -> WordLexicon:
    """
    Get the process-wide word lexicon.

    Built once on first use; clear with get_word_lexicon.cache_clear().
    """
    return load_word_lexicon(word_lexicon_source())


@lru_cache
def get_emoji_lexicon() -> EmojiLexicon:
    """
    Get the process-wide emoji lexicon.

    Built once on first use; clear with get_emoji_lexicon.cache_clear().
    """
    return load_emoji_lexicon(emoji_lexicon_source())
