"""Command-line interface for the text-bayes classifier.

Every command works against a persisted model file: mutating commands load
the file (when it exists), apply the change, and save it back atomically.
Text arguments default to standard input.

Usage::

    text-bayes train spam "buy now limited offer"
    echo "meeting notes" | text-bayes train ham
    text-bayes classify "limited offer"
    text-bayes score --output json "limited offer"
    text-bayes info
    text-bayes reset
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import NoReturn, Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .classifier import NaiveBayesClassifier
from .config import Settings
from .errors import InvalidArgumentError, InvalidDataError
from .persistence import resolve_model_path
from .tokenizer import TokenizerSettings, resolve_language

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

_OUTPUT_OPTION = click.option(
    "--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
    help="Output format.",
)


@dataclass
class CliState:
    settings: Settings
    language_flag: Optional[str] = None
    stop_words_flag: Optional[bool] = None

    @property
    def model_path(self) -> Path:
        return resolve_model_path(self.settings.model_path)

    def open_classifier(self) -> NaiveBayesClassifier:
        """Build a classifier and load the model file if one exists.

        A model file that records tokenizer settings wins over the
        configured ones; explicit flags that disagree are reported.
        """
        classifier = NaiveBayesClassifier(
            language=self.settings.language,
            remove_stop_words=self.settings.remove_stop_words,
        )
        path = self.model_path
        if path.exists():
            classifier.load_from_file(path)
            self._warn_on_ignored_flags(classifier.tokenizer_settings, path)
        else:
            logger.info("No model at %s, starting empty", path)
        return classifier

    def _warn_on_ignored_flags(self, persisted: Optional[TokenizerSettings], path: Path) -> None:
        if persisted is None:
            return
        if self.language_flag is not None and resolve_language(self.language_flag) != persisted.language:
            logger.warning(
                "Ignoring --language %s: model %s was trained with language %s",
                self.language_flag, path, persisted.language,
            )
        if self.stop_words_flag is not None and self.stop_words_flag != persisted.remove_stop_words:
            logger.warning(
                "Ignoring --%s-stop-words: model %s was trained with remove_stop_words=%s",
                "remove" if self.stop_words_flag else "keep", path, persisted.remove_stop_words,
            )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(exc: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/] {exc}")
    sys.exit(1)


def _read_text(text: Optional[str]) -> str:
    if text is not None:
        return text
    return click.get_text_stream("stdin").read()


@click.group()
@click.version_option(package_name="text-bayes")
@click.option("--model-path", "-m", default=None,
              help="Absolute path of the model file (env: TEXT_BAYES_MODEL_PATH).")
@click.option("--language", "-l", default=None,
              help="Stemmer language for the default tokenizer (env: TEXT_BAYES_LANGUAGE).")
@click.option("--remove-stop-words/--keep-stop-words", default=None,
              help="Drop stopwords while tokenizing (env: TEXT_BAYES_REMOVE_STOP_WORDS).")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log training and persistence events (env: TEXT_BAYES_VERBOSE).")
@click.pass_context
def main(
    ctx: click.Context,
    model_path: Optional[str],
    language: Optional[str],
    remove_stop_words: Optional[bool],
    verbose: bool,
) -> None:
    """Naive-Bayes text classifier.

    Train categories with labeled text, then score or classify new text.
    """
    load_dotenv()
    settings = Settings.from_env()

    overrides: dict = {}
    if model_path is not None:
        overrides["model_path"] = model_path
    if language is not None:
        overrides["language"] = language
    if remove_stop_words is not None:
        overrides["remove_stop_words"] = remove_stop_words
    if verbose:
        overrides["verbose"] = True
    settings = replace(settings, **overrides)

    _configure_logging(settings.verbose)
    ctx.obj = CliState(
        settings=settings, language_flag=language, stop_words_flag=remove_stop_words,
    )


@main.command()
@click.argument("category")
@click.argument("text", required=False)
@click.pass_obj
def train(state: CliState, category: str, text: Optional[str]) -> None:
    """Train CATEGORY with TEXT (or standard input).

    Example: text-bayes train spam "buy now limited offer"
    """
    try:
        classifier = state.open_classifier()
        classifier.train(category, _read_text(text))
        path = classifier.save_to_file(state.model_path)
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    console.print(f"Trained [cyan]{category.strip()}[/] [dim]({path})[/]")


@main.command()
@click.argument("category")
@click.argument("text", required=False)
@click.pass_obj
def untrain(state: CliState, category: str, text: Optional[str]) -> None:
    """Remove TEXT (or standard input) from CATEGORY.

    Example: text-bayes untrain spam "buy now"
    """
    try:
        classifier = state.open_classifier()
        classifier.untrain(category, _read_text(text))
        path = classifier.save_to_file(state.model_path)
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    console.print(f"Untrained [cyan]{category.strip()}[/] [dim]({path})[/]")


@main.command()
@click.argument("text", required=False)
@_OUTPUT_OPTION
@click.pass_obj
def score(state: CliState, text: Optional[str], output: str) -> None:
    """Score TEXT (or standard input) against every category."""
    try:
        scores = state.open_classifier().get_scores(_read_text(text))
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
    if output == "json":
        click.echo(json.dumps(dict(ranked), indent=2))
        return

    if not ranked:
        console.print("[dim]No category scored above zero.[/]")
        return

    table = Table(title="Scores")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    for name, value in ranked:
        table.add_row(name, f"{value:.4f}")
    console.print(table)


@main.command()
@click.argument("text", required=False)
@_OUTPUT_OPTION
@click.pass_obj
def classify(state: CliState, text: Optional[str], output: str) -> None:
    """Predict the best category for TEXT (or standard input)."""
    try:
        prediction = state.open_classifier().classify(_read_text(text))
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(prediction.to_dict(), indent=2))
    elif prediction.has_prediction:
        console.print(f"[bold cyan]{prediction.category}[/] (score {prediction.score:.4f})")
    else:
        console.print("[dim]No prediction.[/]")


@main.command()
@_OUTPUT_OPTION
@click.pass_obj
def info(state: CliState, output: str) -> None:
    """Show tally and priors for every trained category."""
    try:
        summaries = state.open_classifier().get_summaries()
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(
            {name: summaries[name].to_dict() for name in sorted(summaries)},
            indent=2,
        ))
        return

    table = Table(title=f"Categories: {state.model_path}")
    table.add_column("Category", style="cyan")
    table.add_column("Tally", justify="right")
    table.add_column("P(cat)", justify="right")
    table.add_column("P(not cat)", justify="right")
    for name in sorted(summaries):
        summary = summaries[name]
        table.add_row(
            name,
            str(summary.token_tally),
            f"{summary.prior_category:.4f}",
            f"{summary.prior_non_category:.4f}",
        )
    console.print(table)


@main.command()
@click.pass_obj
def reset(state: CliState) -> None:
    """Forget every category and save the empty model."""
    try:
        classifier = state.open_classifier()
        classifier.reset()
        path = classifier.save_to_file(state.model_path)
    except (InvalidArgumentError, InvalidDataError, OSError) as e:
        _fail(e)

    console.print(f"Model reset [dim]({path})[/]")


if __name__ == "__main__":
    main()
