"""Trainable in-memory naive-Bayes text classifier.

Callers train categories with labeled text, then score or classify
unlabeled text. Each category keeps a token-frequency table, a running
token tally, and cached priors derived from its share of all trained
tokens.

Scoring is a per-token Bayesian posterior summed across the input tokens:

    p_cat  = count_in_category / count_in_all_categories
    p_non  = 1 - p_cat
    score += occurrences * (p_cat * prior) / (p_cat * prior + p_non * (1 - prior))

Tokens that no category has seen contribute nothing. Accumulation is
additive, not the textbook product of likelihoods, so existing models keep
their scores.

All state lives on the instance and is guarded by a reader/writer lock:
training, untraining, reset and load are exclusive; scoring, classifying,
summaries and save share the lock. Text is tokenized while the lock is
held, so a load that swaps the tokenizer is ordered with every other call.
"""

from __future__ import annotations

import io
import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from typing import IO, Optional, Union

from .errors import InvalidArgumentError
from .locking import ReadWriteLock
from .models import (
    CategoryState,
    CategorySummary,
    ClassificationPrediction,
    is_valid_category_name,
)
from .persistence import atomic_write, read_file, resolve_model_path
from .snapshot import build_snapshot, deserialize, serialize
from .tokenizer import DEFAULT_LANGUAGE, DefaultTokenizer, Tokenizer, TokenizerSettings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def normalize_category(category: Optional[str]) -> str:
    """Trim and validate a category name.

    Raises:
        InvalidArgumentError: If the name is blank or breaks the grammar.
    """
    if category is None or not str(category).strip():
        raise InvalidArgumentError("Category is required.")
    normalized = str(category).strip()
    if not is_valid_category_name(normalized):
        raise InvalidArgumentError(
            "Category must be 1-64 characters and contain only letters, "
            f"numbers, underscore, or hyphen: {category!r}"
        )
    return normalized


def count_tokens(tokens: Iterable[str]) -> Counter[str]:
    """Count occurrences of each token, case-insensitively."""
    return Counter(token.lower() for token in tokens)


# ---------------------------------------------------------------------------
# Classifier engine
# ---------------------------------------------------------------------------

class NaiveBayesClassifier:
    """Thread-safe naive-Bayes classifier over an injected tokenizer.

    Example::

        classifier = NaiveBayesClassifier()
        classifier.train("spam", "buy now limited offer")
        classifier.train("ham", "meeting notes for tomorrow")

        prediction = classifier.classify("buy this offer now")
        print(prediction.category)  # "spam"

        classifier.save_to_file("/var/lib/text-bayes/model.json")

    Args:
        tokenizer: Custom tokenizer. When omitted a :class:`DefaultTokenizer`
            is built from ``language`` and ``remove_stop_words``.
        language: Stemmer language for the default tokenizer.
        remove_stop_words: Stopword removal for the default tokenizer.
    """

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        *,
        language: Optional[str] = DEFAULT_LANGUAGE,
        remove_stop_words: bool = False,
    ) -> None:
        self._tokenizer: Tokenizer = tokenizer or DefaultTokenizer(language, remove_stop_words)
        self._categories: dict[str, CategoryState] = {}
        self._lock = ReadWriteLock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def categories(self) -> list[str]:
        """Trained category names in ordinal order."""
        with self._lock.read_locked():
            return sorted(state.name for state in self._categories.values())

    @property
    def tokenizer_settings(self) -> Optional[TokenizerSettings]:
        """Settings of the default tokenizer, or ``None`` for a custom one."""
        with self._lock.read_locked():
            return self._current_tokenizer_settings()

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------

    def train(self, category: str, text: Optional[str]) -> None:
        """Add the tokens of ``text`` to ``category``, creating it if needed.

        Raises:
            InvalidArgumentError: If the category name is invalid.
        """
        name = normalize_category(category)

        with self._lock.write_locked():
            occurrences = self._count(text)
            key = name.lower()
            state = self._categories.get(key)
            if state is None:
                state = CategoryState(name=name)
                self._categories[key] = state
                logger.debug("Created category %s", name)

            state.add_tokens(occurrences)
            self._recalculate_priors()

        logger.debug("Trained %s with %d tokens", name, sum(occurrences.values()))

    def untrain(self, category: str, text: Optional[str]) -> None:
        """Remove the tokens of ``text`` from ``category``.

        Counts are clamped at zero. A category whose tally drops to zero is
        removed. Unknown categories are ignored.

        Raises:
            InvalidArgumentError: If the category name is invalid.
        """
        name = normalize_category(category)

        with self._lock.write_locked():
            key = name.lower()
            state = self._categories.get(key)
            if state is None:
                return

            occurrences = self._count(text)

            state.remove_tokens(occurrences)
            if state.is_empty:
                del self._categories[key]
                logger.debug("Removed empty category %s", state.name)

            self._recalculate_priors()

    def reset(self) -> None:
        """Forget every trained category."""
        with self._lock.write_locked():
            self._categories.clear()
        logger.debug("Classifier reset")

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def get_scores(self, text: Optional[str]) -> dict[str, float]:
        """Score ``text`` against every category.

        Returns:
            Mapping of category name to score, containing only categories
            with a score above zero.
        """
        with self._lock.read_locked():
            return self._score(self._count(text))

    def classify(self, text: Optional[str]) -> ClassificationPrediction:
        """Predict the best-matching category for ``text``.

        Ties go to the lexically smallest category name. Returns an empty
        prediction when nothing scores above zero.
        """
        with self._lock.read_locked():
            scores = self._score(self._count(text))

        if not scores:
            return ClassificationPrediction()

        best_category: Optional[str] = None
        best_score = 0.0
        for name in sorted(scores):
            if scores[name] > best_score:
                best_score = scores[name]
                best_category = name

        if best_category is None:
            return ClassificationPrediction()
        return ClassificationPrediction(category=best_category, score=best_score)

    def get_summaries(self) -> dict[str, CategorySummary]:
        """Tally and priors for every category, keyed by name."""
        with self._lock.read_locked():
            return {state.name: state.summary() for state in self._categories.values()}

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, destination: IO[bytes]) -> None:
        """Write a snapshot of the model to a binary stream.

        Raises:
            InvalidArgumentError: If the stream is not a writable binary stream.
        """
        if not _stream_supports(destination, "writable"):
            raise InvalidArgumentError("Destination stream must be writable.")
        destination.write(self._encode_snapshot())

    def load(self, source: IO[bytes]) -> None:
        """Replace the model with a snapshot read from a binary stream.

        The snapshot is fully validated before the current model is
        touched; on failure the existing model is kept.

        Raises:
            InvalidArgumentError: If the stream is not a readable binary stream.
            InvalidDataError: If the snapshot is malformed or inconsistent.
        """
        if not _stream_supports(source, "readable"):
            raise InvalidArgumentError("Source stream must be readable.")
        payload = source.read()
        if not isinstance(payload, (bytes, bytearray)):
            raise InvalidArgumentError("Source stream must be a readable binary stream.")
        self._install(bytes(payload))

    def save_to_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Atomically write a snapshot to an absolute file path.

        Args:
            path: Absolute target path; ``None`` uses the default location.

        Returns:
            The path written.

        Raises:
            InvalidArgumentError: If the path is relative.
            OSError: If writing fails. The previous file stays intact.
        """
        resolved = resolve_model_path(path)
        atomic_write(resolved, self._encode_snapshot())
        logger.info("Saved model to %s", resolved)
        return resolved

    def load_from_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Replace the model with a snapshot read from an absolute file path.

        Raises:
            InvalidArgumentError: If the path is relative.
            FileNotFoundError: If the file does not exist.
            InvalidDataError: If the snapshot is invalid.
        """
        resolved = resolve_model_path(path)
        self._install(read_file(resolved))
        logger.info("Loaded model from %s", resolved)
        return resolved

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _encode_snapshot(self) -> bytes:
        with self._lock.read_locked():
            snapshot = build_snapshot(self._categories, self._current_tokenizer_settings())
        return serialize(snapshot)

    def _install(self, payload: bytes) -> None:
        decoded = deserialize(payload)
        tokenizer = (
            DefaultTokenizer.from_settings(decoded.tokenizer_settings)
            if decoded.tokenizer_settings is not None
            else None
        )

        with self._lock.write_locked():
            self._categories = decoded.categories
            if tokenizer is not None:
                self._tokenizer = tokenizer
            self._recalculate_priors()

        logger.debug("Installed snapshot with %d categories", len(decoded.categories))

    def _count(self, text: Optional[str]) -> Counter[str]:
        """Tokenize and count ``text``. Caller holds the lock."""
        return count_tokens(self._tokenizer.tokenize(text or ""))

    def _current_tokenizer_settings(self) -> Optional[TokenizerSettings]:
        if isinstance(self._tokenizer, DefaultTokenizer):
            return self._tokenizer.settings
        return None

    def _recalculate_priors(self) -> None:
        """Recompute every category's priors from the current tallies."""
        total_tally = sum(state.token_tally for state in self._categories.values())
        for state in self._categories.values():
            state.prior_category = state.token_tally / total_tally if total_tally > 0 else 0.0
            state.prior_non_category = 1.0 - state.prior_category

    def _score(self, occurrences: Counter[str]) -> dict[str, float]:
        """Accumulate per-token posteriors. Caller holds the read lock."""
        states = list(self._categories.values())
        scores = {state.name: 0.0 for state in states}

        for token, token_count in occurrences.items():
            category_counts = [state.token_counts.get(token, 0) for state in states]
            total_token_count = sum(category_counts)
            if total_token_count == 0:
                continue

            for state, category_count in zip(states, category_counts):
                scores[state.name] += token_count * bayesian_probability(
                    state, category_count, total_token_count
                )

        return {name: score for name, score in scores.items() if score > 0}


def bayesian_probability(state: CategoryState, token_score: int, total_token_count: int) -> float:
    """Single-token posterior that a token belongs to ``state``'s category.

    Returns 0.0 when the denominator vanishes (all-zero priors).
    """
    p_token_given_category = token_score / total_token_count
    p_token_given_non_category = (total_token_count - token_score) / total_token_count

    numerator = p_token_given_category * state.prior_category
    denominator = numerator + p_token_given_non_category * state.prior_non_category
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _stream_supports(stream: object, capability: str) -> bool:
    # Snapshots are bytes; text streams cannot carry them.
    if isinstance(stream, io.TextIOBase):
        return False
    check = getattr(stream, capability, None)
    if check is None:
        return hasattr(stream, "write" if capability == "writable" else "read")
    try:
        return bool(check())
    except (ValueError, io.UnsupportedOperation):
        return False
