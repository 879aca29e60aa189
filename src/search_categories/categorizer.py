"""Text-to-category grouping.

Splits result text into blank-line delimited sections, classifies each
section with the ``CategoryFinder``, groups sections under their primary
category and builds the final per-category content.
"""

from __future__ import annotations

import re
from collections import OrderedDict
from statistics import mean
from typing import Any, Dict, List, Optional, Sequence, Union

from rapidfuzz import fuzz

from .categories import CategoryBase, CategoryKind
from .config import FinderConfig
from .finder import CategoryFinder, OptionsArg
from .keywords import is_business_query
from .logging_config import get_logger
from .models import Category, CategoryMetrics, ClassificationOptions, ContentSection, ScoredCategory, SourceRecord

logger = get_logger("categorizer")

SECTION_SPLIT_PATTERN = re.compile(r"\n\s*\n+")
NEAR_DUPLICATE_RATIO = 95


def split_into_sections(text: object, min_length: int = 50) -> List[ContentSection]:
    """Split on runs of blank lines, dropping sections of ``min_length`` characters or fewer."""
    if not text or not isinstance(text, str):
        return []
    sections: List[ContentSection] = []
    for chunk in SECTION_SPLIT_PATTERN.split(text):
        stripped = chunk.strip()
        if len(stripped) <= min_length:
            continue
        index = len(sections)
        sections.append(ContentSection(id=f"section-{index}", text=stripped, index=index))
    return sections


def filter_duplicate_sections(
    sections: Sequence[ContentSection],
    threshold: float = NEAR_DUPLICATE_RATIO,
) -> List[ContentSection]:
    """Drop sections that are near-identical to an earlier one."""
    kept: List[ContentSection] = []
    for section in sections:
        normalized = " ".join(section.text.lower().split())
        if any(
            fuzz.ratio(normalized, " ".join(existing.text.lower().split())) >= threshold
            for existing in kept
        ):
            logger.debug(f"Dropping near-duplicate {section.id}")
            continue
        kept.append(section)
    return kept


def filter_duplicate_sources(
    sources: Optional[Sequence[Union[SourceRecord, Dict[str, Any]]]],
    threshold: float = NEAR_DUPLICATE_RATIO,
) -> List[SourceRecord]:
    """Drop repeated URLs and sources whose titles are near-identical."""
    kept: List[SourceRecord] = []
    seen_urls = set()
    for raw in sources or []:
        if isinstance(raw, SourceRecord):
            record = raw
        elif isinstance(raw, dict):
            record = SourceRecord.from_dict(raw)
        else:
            continue

        url = record.url.strip().rstrip("/").lower()
        if url and url in seen_urls:
            continue

        title = record.title.strip().lower()
        if len(title) > 5 and any(
            len(existing.title.strip()) > 5
            and fuzz.ratio(title, existing.title.strip().lower()) >= threshold
            for existing in kept
        ):
            logger.debug(f"Dropping near-duplicate source {record.title!r}")
            continue

        if url:
            seen_urls.add(url)
        kept.append(record)
    return kept


def pick_primary_category(results: Sequence[ScoredCategory]) -> Optional[ScoredCategory]:
    """Best topical category for a section.

    Special categories summarise across topics, so they only win a section
    when nothing else qualified.
    """
    topical = [result for result in results if result.kind is not CategoryKind.SPECIAL]
    candidates = topical or list(results)
    if not candidates:
        return None
    return max(candidates, key=lambda result: result.weighted_score)


class DynamicCategorizer:
    """Groups sections of result text under their best-matching category."""

    def __init__(
        self,
        finder: Optional[CategoryFinder] = None,
        config: Optional[FinderConfig] = None,
    ) -> None:
        self.finder = finder or CategoryFinder(config)
        self.config = config or self.finder.config

    def categorize_sections(
        self,
        sections: Sequence[ContentSection],
        query: str = "",
        options: OptionsArg = None,
    ) -> List[ContentSection]:
        """Attach a primary category to each section in place."""
        for section in sections:
            results = self.finder.find_best_categories(section.text, query, options)
            section.primary_category = pick_primary_category(results)
        return list(sections)

    def create_categories(
        self,
        text: object,
        sources: Optional[Sequence[Union[SourceRecord, Dict[str, Any]]]] = None,
        query: object = "",
        options: OptionsArg = None,
    ) -> List[Category]:
        """Build the final category list for result text."""
        if not text or not isinstance(text, str) or not text.strip():
            return []
        if not isinstance(query, str):
            query = ""
        opts = ClassificationOptions.from_value(options)
        # Sources never affect scoring; callers de-duplicate them with filter_duplicate_sources
        source_count = len(sources or [])

        sections = filter_duplicate_sections(split_into_sections(text, self.config.min_section_length))
        if opts.debug:
            logger.info(f"Split content into {len(sections)} sections ({source_count} sources)")

        self.categorize_sections(sections, query, opts)

        groups: "OrderedDict[str, List[ContentSection]]" = OrderedDict()
        for section in sections:
            if section.primary_category is None:
                logger.debug(f"No qualifying category for {section.id}")
                continue
            groups.setdefault(section.primary_category.id, []).append(section)

        business = opts.is_business_query if opts.is_business_query is not None else is_business_query(query)
        categories = [self._build_category(members) for members in groups.values()]

        def sort_key(category: Category) -> tuple:
            definition = groups[category.id][0].primary_category.definition
            priority = category.priority
            if business and definition.business:
                priority -= self.config.business_priority_boost
            return (priority, -category.score)

        categories.sort(key=sort_key)
        categories = categories[: self.config.max_categories]

        if opts.debug:
            logger.info(f"Created {len(categories)} dynamic categories: {[c.id for c in categories]}")
        return categories

    def _build_category(self, members: List[ContentSection]) -> Category:
        scored = [section.primary_category for section in members]
        definition = scored[0].definition
        combined = "\n\n".join(section.text for section in members)

        relevance = mean(s.relevance_score for s in scored)
        credibility = mean(s.credibility_score for s in scored)
        accuracy = mean(s.accuracy_score for s in scored)
        metrics = CategoryMetrics(
            relevance=round(relevance, 2),
            credibility=round(credibility, 2),
            accuracy=round(accuracy, 2),
            overall=round((relevance * 2 + accuracy + credibility) / 4),
        )

        return Category(
            id=definition.id,
            name=definition.name,
            content=combined,
            color=definition.color,
            metrics=metrics,
            score=round(mean(s.weighted_score for s in scored), 2),
            description=definition.description,
            icon=definition.icon,
            priority=definition.priority,
            formatted_content=CategoryBase(definition).format_content(combined),
            section_ids=[section.id for section in members],
        )


def create_dynamic_categories_from_text(
    text: object,
    sources: Optional[Sequence[Union[SourceRecord, Dict[str, Any]]]] = None,
    query: object = "",
    options: OptionsArg = None,
    *,
    categorizer: Optional[DynamicCategorizer] = None,
) -> List[Category]:
    """Module-level shortcut for ``DynamicCategorizer.create_categories``."""
    categorizer = categorizer or DynamicCategorizer()
    return categorizer.create_categories(text, sources, query, options)
