"""
Sentiment scoring configuration.

Provides Pydantic settings for the rule-based sentiment analyzer:
normalization, emoji handling and logging of per-call traces.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.sentiment.constants import NORMALIZATION_ALPHA


class SentimentConfig(BaseSettings):
    """
    Configuration for the sentiment analyzer.

    Settings can be overridden via environment variables prefixed with SENTIMENT_.

    Example:
        SENTIMENT_NORMALIZATION_ALPHA=15
        SENTIMENT_EMOJI_SUBSTITUTION_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="SENTIMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Compound score normalization
    normalization_alpha: float = Field(
        default=NORMALIZATION_ALPHA,
        gt=0.0,
        le=1000.0,
        description="Constant alpha in sum / sqrt(sum^2 + alpha)",
    )

    # Emoji handling
    emoji_substitution_enabled: bool = Field(
        default=True,
        description="Replace emoji with their descriptions before parsing",
    )

    # Debugging
    trace_scoring: bool = Field(
        default=False,
        description="Log tokens and valences of every scored text at DEBUG level",
    )
