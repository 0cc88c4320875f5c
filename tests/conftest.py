"""Shared test fixtures for text-bayes tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from text_bayes.classifier import NaiveBayesClassifier


class WhitespaceTokenizer:
    """Lowercasing whitespace splitter, free of stemming side effects."""

    def tokenize(self, text: str) -> list[str]:
        return text.lower().split()


@pytest.fixture
def classifier() -> NaiveBayesClassifier:
    """Empty classifier with the default English tokenizer."""
    return NaiveBayesClassifier()


@pytest.fixture
def plain_classifier() -> NaiveBayesClassifier:
    """Empty classifier that tokenizes on whitespace only."""
    return NaiveBayesClassifier(WhitespaceTokenizer())


@pytest.fixture
def trained_classifier() -> NaiveBayesClassifier:
    """Classifier with a small spam/ham model."""
    clf = NaiveBayesClassifier()
    clf.train("spam", "buy now offer")
    clf.train("ham", "meeting notes calendar")
    return clf


@pytest.fixture
def model_path(tmp_path: Path) -> Path:
    """Absolute path for a model file inside a temporary directory."""
    return tmp_path / "models" / "model.json"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TEXT_BAYES_* variables out of the tests."""
    for key in (
        "TEXT_BAYES_MODEL_PATH",
        "TEXT_BAYES_LANGUAGE",
        "TEXT_BAYES_REMOVE_STOP_WORDS",
        "TEXT_BAYES_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
