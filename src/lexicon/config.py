"""Configuration for lexicon loading.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other configs in the project.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LexiconConfig(BaseSettings):
    """
    Configuration for the word and emoji lexicons.

    All settings can be overridden via environment variables with LEXICON_ prefix.
    Example: LEXICON_WORDS_PATH=/data/custom_lexicon.txt

    Attributes:
        data_package: Distribution package that ships the default tables.
        words_file: File name of the word table inside data_package.
        emoji_file: File name of the emoji table inside data_package.
        words_path: Explicit word table path (overrides the packaged table).
        emoji_path: Explicit emoji table path (overrides the packaged table).
    """

    model_config = SettingsConfigDict(
        env_prefix="LEXICON_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Packaged tables
    data_package: str = Field(
        default="vaderSentiment",
        description="Package whose data files hold the default lexicons.",
    )
    words_file: str = Field(
        default="vader_lexicon.txt",
        description="Word valence table shipped in data_package.",
    )
    emoji_file: str = Field(
        default="emoji_utf8_lexicon.txt",
        description="Emoji description table shipped in data_package.",
    )

    # Overrides
    words_path: Path | None = Field(
        default=None,
        description="Path to a custom word valence table.",
    )
    emoji_path: Path | None = Field(
        default=None,
        description="Path to a custom emoji description table.",
    )
