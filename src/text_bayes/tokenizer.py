"""Text tokenization for classifier training and scoring.

The classifier only depends on the :class:`Tokenizer` protocol: any object
with a deterministic ``tokenize(text)`` method can be injected. The
:class:`DefaultTokenizer` implements the standard pipeline:

1. Unicode NFKC normalization and lowercasing
2. Splitting into maximal runs of letters and digits
3. Snowball stemming for the configured language
4. Optional stopword removal (raw token or its stem)

Stemmers come from NLTK's Snowball implementations, resolved once per
tokenizer from a fixed registry. Unknown or blank languages fall back to
English.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from nltk.stem.porter import PorterStemmer
from nltk.stem.snowball import (
    ArabicStemmer,
    DanishStemmer,
    DutchStemmer,
    EnglishStemmer,
    FinnishStemmer,
    FrenchStemmer,
    GermanStemmer,
    HungarianStemmer,
    ItalianStemmer,
    NorwegianStemmer,
    PortugueseStemmer,
    RomanianStemmer,
    RussianStemmer,
    SpanishStemmer,
    SwedishStemmer,
)

from .stopwords import get_stopwords

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"

StemFunction = Callable[[str], str]


# ---------------------------------------------------------------------------
# Stemmer registry
# ---------------------------------------------------------------------------

_STEMMER_FACTORIES: dict[str, Callable[[], object]] = {
    "arabic": ArabicStemmer,
    "danish": DanishStemmer,
    "dutch": DutchStemmer,
    "english": EnglishStemmer,
    "finnish": FinnishStemmer,
    "french": FrenchStemmer,
    "german": GermanStemmer,
    "hungarian": HungarianStemmer,
    "italian": ItalianStemmer,
    "norwegian": NorwegianStemmer,
    "porter": PorterStemmer,
    "portuguese": PortugueseStemmer,
    "romanian": RomanianStemmer,
    "russian": RussianStemmer,
    "spanish": SpanishStemmer,
    "swedish": SwedishStemmer,
}

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(_STEMMER_FACTORIES)


def resolve_language(language: Optional[str]) -> str:
    """Normalize a language name, falling back to English when unsupported."""
    normalized = (language or "").strip().lower()
    if normalized in SUPPORTED_LANGUAGES:
        return normalized
    if normalized:
        logger.warning("Unsupported tokenizer language %r, using %s", language, DEFAULT_LANGUAGE)
    return DEFAULT_LANGUAGE


def create_stemmer(language: Optional[str]) -> StemFunction:
    """Build a stem function for ``language``.

    Snowball stemmers keep no state between calls, so the returned function
    can be shared by concurrent callers.
    """
    stemmer = _STEMMER_FACTORIES[resolve_language(language)]()
    return stemmer.stem  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Tokenizer protocol and settings
# ---------------------------------------------------------------------------

@runtime_checkable
class Tokenizer(Protocol):
    """Anything that turns text into a sequence of tokens."""

    def tokenize(self, text: str) -> Sequence[str]:
        ...


@dataclass(frozen=True)
class TokenizerSettings:
    """Persistable configuration of the default tokenizer."""

    language: str = DEFAULT_LANGUAGE
    remove_stop_words: bool = False

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "removeStopWords": self.remove_stop_words,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TokenizerSettings":
        """Build settings from the persisted ``tokenizer`` block.

        Raises:
            ValueError: If a field has the wrong type.
        """
        language = data.get("language", DEFAULT_LANGUAGE)
        remove_stop_words = data.get("removeStopWords", False)
        if language is not None and not isinstance(language, str):
            raise ValueError(f"tokenizer language must be a string, got {language!r}")
        if not isinstance(remove_stop_words, bool):
            raise ValueError(
                f"tokenizer removeStopWords must be a boolean, got {remove_stop_words!r}"
            )
        return cls(language=resolve_language(language), remove_stop_words=remove_stop_words)


# ---------------------------------------------------------------------------
# Default tokenizer
# ---------------------------------------------------------------------------

class DefaultTokenizer:
    """Normalizing, stemming tokenizer with optional stopword removal.

    Example::

        tokenizer = DefaultTokenizer("english", remove_stop_words=True)
        tokenizer.tokenize("The offers were boxed")  # ["offer", "box"]

    Args:
        language: Stemmer language (e.g. ``"english"``, ``"spanish"``).
            Unknown values fall back to English.
        remove_stop_words: Drop stopwords for the language, when a list exists.
        stemmer: Optional stem function replacing the Snowball stemmer.
    """

    def __init__(
        self,
        language: Optional[str] = DEFAULT_LANGUAGE,
        remove_stop_words: bool = False,
        stemmer: Optional[StemFunction] = None,
    ) -> None:
        self._language = resolve_language(language)
        self._remove_stop_words = remove_stop_words
        self._stem = stemmer or create_stemmer(self._language)

        self._stopwords: frozenset[str] = frozenset()
        self._stemmed_stopwords: frozenset[str] = frozenset()
        if remove_stop_words:
            stopwords = get_stopwords(self._language)
            if stopwords is None:
                logger.debug("No stopword list for %s, keeping all tokens", self._language)
            else:
                self._stopwords = stopwords
                self._stemmed_stopwords = frozenset(self._stem(w) for w in stopwords)

    @property
    def language(self) -> str:
        """Resolved stemmer language."""
        return self._language

    @property
    def remove_stop_words(self) -> bool:
        return self._remove_stop_words

    @property
    def settings(self) -> TokenizerSettings:
        return TokenizerSettings(self._language, self._remove_stop_words)

    @classmethod
    def from_settings(cls, settings: TokenizerSettings) -> "DefaultTokenizer":
        return cls(settings.language, settings.remove_stop_words)

    def tokenize(self, text: str) -> list[str]:
        """Split ``text`` into normalized, stemmed tokens."""
        if not text:
            return []

        normalized = unicodedata.normalize("NFKC", text).lower()
        tokens: list[str] = []
        current: list[str] = []

        for char in normalized:
            if char.isalnum():
                current.append(char)
                continue
            self._flush(current, tokens)

        self._flush(current, tokens)
        return tokens

    def _flush(self, current: list[str], tokens: list[str]) -> None:
        if not current:
            return
        word = "".join(current)
        current.clear()

        if word in self._stopwords:
            return

        stemmed = self._stem(word)
        if not stemmed or not stemmed.strip():
            return
        if stemmed in self._stemmed_stopwords:
            return
        tokens.append(stemmed)
