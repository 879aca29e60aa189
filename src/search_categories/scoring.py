"""Quality scorers and score arithmetic for category selection.

Relevance comes from the category definitions themselves. Credibility and
accuracy are not derived from any signal yet: the defaults below return
fixed values, and a real scorer can be swapped in through the protocols
without touching the finder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .categories.base import CategoryDefinition

DEFAULT_CREDIBILITY_SCORE = 80.0
DEFAULT_ACCURACY_SCORE = 85.0


class CredibilityScorer(Protocol):
    """Protocol for credibility scoring of a category against content."""

    def score(self, definition: CategoryDefinition, content: str, query: str) -> float:
        """Return a credibility score in the 0-100 range."""
        ...


class AccuracyScorer(Protocol):
    """Protocol for accuracy scoring of a category against content."""

    def score(self, definition: CategoryDefinition, content: str, query: str) -> float:
        """Return an accuracy score in the 0-100 range."""
        ...


@dataclass(frozen=True)
class ConstantScorer:
    """Scorer returning the same value for every category."""

    value: float

    def score(self, definition: CategoryDefinition, content: str, query: str) -> float:
        return self.value


def default_credibility_scorer() -> ConstantScorer:
    return ConstantScorer(DEFAULT_CREDIBILITY_SCORE)


def default_accuracy_scorer() -> ConstantScorer:
    return ConstantScorer(DEFAULT_ACCURACY_SCORE)


def weighted_score(relevance: float, credibility: float, accuracy: float) -> float:
    """Combined ranking metric; relevance counts twice."""
    return (relevance * 2 + credibility + accuracy) / 4


def meets_thresholds(threshold: float, *scores: float) -> bool:
    return all(score >= threshold for score in scores)
