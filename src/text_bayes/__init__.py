"""text-bayes -- trainable in-memory naive-Bayes text classifier."""

__version__ = "1.0.0"

from .classifier import NaiveBayesClassifier, bayesian_probability
from .config import Settings
from .errors import InvalidArgumentError, InvalidDataError, SnapshotIssue
from .locking import ReadWriteLock
from .models import CategoryState, CategorySummary, ClassificationPrediction
from .persistence import DEFAULT_MODEL_PATH
from .snapshot import SCHEMA_VERSION, DecodedSnapshot, build_snapshot, deserialize, serialize
from .tokenizer import (
    SUPPORTED_LANGUAGES,
    DefaultTokenizer,
    Tokenizer,
    TokenizerSettings,
)

__all__ = [
    # Engine
    "NaiveBayesClassifier",
    "bayesian_probability",
    "ReadWriteLock",
    # Models
    "CategoryState",
    "CategorySummary",
    "ClassificationPrediction",
    # Tokenization
    "Tokenizer",
    "DefaultTokenizer",
    "TokenizerSettings",
    "SUPPORTED_LANGUAGES",
    # Persistence
    "SCHEMA_VERSION",
    "DEFAULT_MODEL_PATH",
    "DecodedSnapshot",
    "build_snapshot",
    "serialize",
    "deserialize",
    # Errors
    "InvalidArgumentError",
    "InvalidDataError",
    "SnapshotIssue",
    # Configuration
    "Settings",
]
