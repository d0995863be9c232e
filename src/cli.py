"""
Command-line interface for vader-sentiment.

Thin wrapper around SentimentIntensityAnalyzer.polarity_scores.

Usage:
    vader-sentiment score "The food was great!"   # Score one or more texts
    vader-sentiment score --json "meh" "ugh :("    # JSON lines output
    vader-sentiment explain "not bad at all"       # Show every scoring stage
    vader-sentiment demo                           # Score the demo sentences
"""

import json
import os

import click

from src.lexicon.loader import LexiconLoadError
from src.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _fmt_scores(scores: dict[str, float]) -> str:
    """Format scores on one line."""
    return "  ".join(f"{key}: {scores[key]:.4f}" for key in ("neg", "neu", "pos", "compound"))


def _build_analyzer():
    """Create the analyzer, turning lexicon errors into a CLI failure."""
    from src.sentiment.analyzer import SentimentIntensityAnalyzer

    try:
        return SentimentIntensityAnalyzer()
    except LexiconLoadError as e:
        logger.error("Lexicon could not be loaded", path=e.path, line=e.line_number)
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """VADER Sentiment - rule-based sentiment intensity scoring."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        from src.config.settings import get_settings

        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON object per text")
def score(texts: tuple[str, ...], as_json: bool) -> None:
    """Score one or more texts.

    Example:
        vader-sentiment score "VADER is smart, handsome, and funny."
    """
    analyzer = _build_analyzer()

    for text in texts:
        scores = analyzer.polarity_scores(text)
        if as_json:
            click.echo(json.dumps({"text": text, **scores}, ensure_ascii=False))
        else:
            click.echo(f"{text}")
            click.echo(f"  {_fmt_scores(scores)}")


@main.command()
@click.argument("text")
def explain(text: str) -> None:
    """Show tokens and valences behind a score."""
    analyzer = _build_analyzer()
    trace = analyzer.explain(text)

    for emoji, description in trace["emoji"]:
        click.echo(f"Emoji:           {emoji} -> {description}")
    click.echo(f"Tokens:          {trace['tokens']}")
    click.echo(f"Mixed caps:      {trace['has_mixed_caps']}")
    click.echo(f"Punctuation amp: {trace['punc_amplifier']:.3f}")
    click.echo("Valences:")
    for token, before, after in zip(
        trace["tokens"], trace["valences"], trace["adjusted_valences"]
    ):
        click.echo(f"  {token:20s} {before:8.4f} {after:8.4f}")
    click.echo(f"Scores:          {_fmt_scores(trace['scores'])}")


@main.command()
def demo() -> None:
    """Score a fixed set of sentences showing each heuristic."""
    from src.sentiment.demo import run_demo

    analyzer = _build_analyzer()

    click.echo("\nVADER Sentiment Demo")
    click.echo("=" * 60)
    for sentence, scores in run_demo(analyzer):
        click.echo(f"{sentence!r}")
        click.echo(f"  {_fmt_scores(scores)}")


if __name__ == "__main__":
    main()
