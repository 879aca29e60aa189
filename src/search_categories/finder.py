"""Category selection.

Scores every taxonomy entry against a piece of content, filters by quality
thresholds (relaxing once when too few survive), guarantees mandatory
categories, enforces a per-kind diversity cap and returns a bounded list
ordered by priority, then weighted score.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Union

from .categories import CategoryBase, CategoryDefinition, get_all_categories, get_special_categories
from .config import FinderConfig
from .logging_config import get_logger
from .models import ClassificationOptions, ScoredCategory
from .scoring import (
    AccuracyScorer,
    CredibilityScorer,
    default_accuracy_scorer,
    default_credibility_scorer,
    meets_thresholds,
    weighted_score,
)

logger = get_logger("finder")

OptionsArg = Union[ClassificationOptions, Dict[str, Any], None]


class CategoryFinder:
    """Selects the best categories for a piece of content."""

    def __init__(
        self,
        config: Optional[FinderConfig] = None,
        *,
        categories: Optional[Sequence[CategoryDefinition]] = None,
        credibility_scorer: Optional[CredibilityScorer] = None,
        accuracy_scorer: Optional[AccuracyScorer] = None,
    ) -> None:
        self.config = config or FinderConfig()
        self.credibility_scorer = credibility_scorer or default_credibility_scorer()
        self.accuracy_scorer = accuracy_scorer or default_accuracy_scorer()

        definitions = list(categories) if categories is not None else get_all_categories()
        for special in get_special_categories():
            if special.always_evaluate and special not in definitions:
                definitions.insert(0, special)
        self.categories = [CategoryBase(definition) for definition in definitions]

    def score_categories(self, content: str, query: str = "") -> List[ScoredCategory]:
        """Evaluate every category and attach quality scores."""
        threshold = self.config.primary_threshold
        scored: List[ScoredCategory] = []
        for category in self.categories:
            evaluation = category.evaluate(content, query)
            relevance = evaluation.score
            credibility = float(self.credibility_scorer.score(category.definition, content, query))
            accuracy = float(self.accuracy_scorer.score(category.definition, content, query))
            scored.append(
                ScoredCategory(
                    evaluation=evaluation,
                    relevance_score=relevance,
                    credibility_score=credibility,
                    accuracy_score=accuracy,
                    weighted_score=weighted_score(relevance, credibility, accuracy),
                    meets_threshold=meets_thresholds(threshold, relevance, credibility, accuracy),
                )
            )
        return scored

    def find_best_categories(
        self,
        content: object,
        query: object = "",
        options: OptionsArg = None,
    ) -> List[ScoredCategory]:
        """Return at most ``max_categories`` categories for content; never raises on bad input."""
        if not content or not isinstance(content, str) or not content.strip():
            return []
        if not isinstance(query, str):
            query = ""
        opts = ClassificationOptions.from_value(options)
        config = self.config

        scored = self.score_categories(content, query)
        if opts.debug:
            logger.info(f"Evaluating {len(scored)} categories for query {query!r}, content {content[:100]!r}")

        selected = [category for category in scored if category.meets_threshold]

        if len(selected) < config.min_categories:
            logger.debug(
                f"Only {len(selected)} categories meet {config.primary_threshold}, "
                f"relaxing to {config.fallback_threshold}"
            )
            selected = [
                category
                for category in scored
                if meets_thresholds(
                    config.fallback_threshold,
                    category.relevance_score,
                    category.credibility_score,
                    category.accuracy_score,
                )
            ]

        selected_ids = {category.id for category in selected}
        for category in scored:
            if not category.definition.mandatory or category.id in selected_ids:
                continue
            if category.relevance_score >= config.fallback_threshold:
                logger.debug(f"Including mandatory category {category.id}")
                selected.append(category)
                selected_ids.add(category.id)

        selected.sort(key=lambda category: category.weighted_score, reverse=True)

        chosen = self._select_diverse(selected)

        chosen.sort(key=lambda category: (category.priority, -category.weighted_score))
        chosen = chosen[: config.max_categories]

        summary = ", ".join(f"{c.name} ({c.weighted_score:.1f})" for c in chosen)
        if opts.debug:
            logger.info(f"Selected categories: {summary}")
        else:
            logger.debug(f"Selected categories: {summary}")
        return chosen

    def _select_diverse(self, ranked: List[ScoredCategory]) -> List[ScoredCategory]:
        """Mandatory categories first, then at most ``max_per_kind`` per kind, then backfill."""
        limit = self.config.max_categories
        chosen: List[ScoredCategory] = [c for c in ranked if c.definition.mandatory][:limit]
        chosen_ids = {c.id for c in chosen}
        kind_counts = Counter(c.kind for c in chosen)

        for category in ranked:
            if len(chosen) >= limit:
                break
            if category.id in chosen_ids:
                continue
            if kind_counts[category.kind] >= self.config.max_per_kind:
                continue
            chosen.append(category)
            chosen_ids.add(category.id)
            kind_counts[category.kind] += 1

        if len(chosen) < min(limit, len(ranked)):
            for category in ranked:
                if len(chosen) >= limit:
                    break
                if category.id not in chosen_ids:
                    chosen.append(category)
                    chosen_ids.add(category.id)

        return chosen

    def find_best_category(
        self,
        content: object,
        query: object = "",
        options: OptionsArg = None,
    ) -> Optional[ScoredCategory]:
        categories = self.find_best_categories(content, query, options)
        return categories[0] if categories else None


_DEFAULT_FINDER: Optional[CategoryFinder] = None


def _get_default_finder() -> CategoryFinder:
    global _DEFAULT_FINDER
    if _DEFAULT_FINDER is None:
        _DEFAULT_FINDER = CategoryFinder()
    return _DEFAULT_FINDER


def find_best_categories(content: object, query: object = "", options: OptionsArg = None) -> List[ScoredCategory]:
    """Module-level shortcut using a finder with the default configuration."""
    return _get_default_finder().find_best_categories(content, query, options)


def find_best_category(content: object, query: object = "", options: OptionsArg = None) -> Optional[ScoredCategory]:
    return _get_default_finder().find_best_category(content, query, options)
