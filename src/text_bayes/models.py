"""Data models for the naive-Bayes text classifier."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

# Category names: 1-64 letters, digits, underscores or hyphens.
CATEGORY_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}\Z")


def is_valid_category_name(name: object) -> bool:
    return isinstance(name, str) and CATEGORY_PATTERN.match(name) is not None


@dataclass
class CategoryState:
    """Token statistics and cached priors for one trained category.

    ``token_tally`` always equals the sum of ``token_counts`` values. It is
    maintained incrementally by :meth:`add_tokens` and :meth:`remove_tokens`.
    """

    name: str
    token_counts: dict[str, int] = field(default_factory=dict)
    token_tally: int = 0
    prior_category: float = 0.0
    prior_non_category: float = 1.0

    @property
    def is_empty(self) -> bool:
        return self.token_tally == 0

    def add_tokens(self, occurrences: Mapping[str, int]) -> None:
        """Add token occurrence counts to this category."""
        for token, count in occurrences.items():
            self.token_counts[token] = self.token_counts.get(token, 0) + count
            self.token_tally += count

    def remove_tokens(self, occurrences: Mapping[str, int]) -> None:
        """Subtract token occurrence counts, clamping each token at zero.

        Tokens whose count is fully consumed are dropped from the table.
        """
        for token, count in occurrences.items():
            current = self.token_counts.get(token)
            if current is None:
                continue
            if count >= current:
                del self.token_counts[token]
                self.token_tally -= current
            else:
                self.token_counts[token] = current - count
                self.token_tally -= count

    def summary(self) -> "CategorySummary":
        return CategorySummary(
            token_tally=self.token_tally,
            prior_category=self.prior_category,
            prior_non_category=self.prior_non_category,
        )


@dataclass(frozen=True)
class CategorySummary:
    """Read-only view of a category's tally and priors."""

    token_tally: int
    prior_category: float
    prior_non_category: float

    def to_dict(self) -> dict:
        return {
            "token_tally": self.token_tally,
            "prior_category": round(self.prior_category, 6),
            "prior_non_category": round(self.prior_non_category, 6),
        }


@dataclass(frozen=True)
class ClassificationPrediction:
    """Best-matching category for a classified text.

    ``category`` is ``None`` when no trained category scored above zero.
    """

    category: Optional[str] = None
    score: float = 0.0

    @property
    def has_prediction(self) -> bool:
        return self.category is not None

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "score": round(self.score, 6),
        }
