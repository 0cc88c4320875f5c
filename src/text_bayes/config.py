"""Runtime configuration read from the environment.

Values come from ``TEXT_BAYES_*`` environment variables (the CLI loads a
``.env`` file into the environment first). Blank values fall back to the
defaults; command-line flags override whatever is configured here.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from .persistence import DEFAULT_MODEL_PATH
from .tokenizer import DEFAULT_LANGUAGE

ENV_MODEL_PATH = "TEXT_BAYES_MODEL_PATH"
ENV_LANGUAGE = "TEXT_BAYES_LANGUAGE"
ENV_REMOVE_STOP_WORDS = "TEXT_BAYES_REMOVE_STOP_WORDS"
ENV_VERBOSE = "TEXT_BAYES_VERBOSE"

_TRUTHY = frozenset({"1", "true", "yes"})


def is_truthy(value: str) -> bool:
    """Interpret ``1``, ``true`` or ``yes`` (any case) as true."""
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Classifier and CLI settings.

    Attributes:
        model_path: Absolute path of the persisted model file.
        language: Stemmer language for the default tokenizer.
        remove_stop_words: Whether the default tokenizer drops stopwords.
        verbose: Log persistence and training events at INFO level.
    """

    model_path: str = DEFAULT_MODEL_PATH
    language: str = DEFAULT_LANGUAGE
    remove_stop_words: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
        """
        env = os.environ if environ is None else environ

        def _get(key: str) -> Optional[str]:
            value = env.get(key)
            if value is None or not value.strip():
                return None
            return value.strip()

        model_path = _get(ENV_MODEL_PATH)
        language = _get(ENV_LANGUAGE)
        remove_stop_words = _get(ENV_REMOVE_STOP_WORDS)
        verbose = _get(ENV_VERBOSE)

        return cls(
            model_path=model_path or DEFAULT_MODEL_PATH,
            language=language or DEFAULT_LANGUAGE,
            remove_stop_words=is_truthy(remove_stop_words) if remove_stop_words else False,
            verbose=is_truthy(verbose) if verbose else False,
        )
