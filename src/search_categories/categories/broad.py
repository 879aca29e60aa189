"""Broad fallback categories.

These score permissively (a base of 70 before any keyword hit) so they stay
viable when the specific categories miss the thresholds.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from ..keywords import KEYWORDS
from .base import CategoryDefinition, CategoryKind, ScoreFn, create_category, keyword_hits

BROAD_BASE_SCORE = 70
KEYWORD_HIT_BONUS = 5
QUERY_TERM_BONUS = 10
FIGURE_BONUS = 10
MAX_SCORE = 100

FINANCIAL_FIGURE_PATTERN = re.compile(r"(\$\d+(\.\d+)?(M|B|K)?|\d+(\.\d+)?%)")


def broad_score(
    keywords: Sequence[str],
    boost_terms: Sequence[str],
    *,
    figure_bonus: bool = False,
) -> ScoreFn:
    """Build a broad-category scorer: base + keyword bonus + query bonus, capped."""

    def score(content: str, query: str) -> float:
        value = min(BROAD_BASE_SCORE + len(keyword_hits(keywords, content)) * KEYWORD_HIT_BONUS, MAX_SCORE)
        if figure_bonus and FINANCIAL_FIGURE_PATTERN.search(content):
            value += FIGURE_BONUS
        if query:
            query_lower = query.lower()
            if any(term in query_lower for term in boost_terms):
                value += QUERY_TERM_BONUS
        return float(min(value, MAX_SCORE))

    return score


def emphasize_figures(content: str) -> str:
    """Wrap money amounts and percentages in <strong> tags."""
    return FINANCIAL_FIGURE_PATTERN.sub(r"<strong>\1</strong>", content)


MARKET_OVERVIEW = create_category(
    "market-overview",
    "Market Overview",
    "Overview of market trends, industry landscape, and sector analysis",
    KEYWORDS.terms("market-overview"),
    color="#4285F4",
    icon="chart-line",
    priority=1,
    kind=CategoryKind.BROAD,
    business=True,
    score_fn=broad_score(
        KEYWORDS.terms("market-overview"),
        ("market", "industry", "sector", "trend"),
    ),
)

FINANCIAL_OVERVIEW = create_category(
    "financial-overview",
    "Financial Overview",
    "Financial analysis, metrics, funding, and investment information",
    KEYWORDS.terms("financial-overview"),
    color="#F4B400",
    icon="chart-pie",
    priority=1,
    kind=CategoryKind.BROAD,
    business=True,
    score_fn=broad_score(
        KEYWORDS.terms("financial-overview"),
        ("financial", "finance", "money", "revenue", "profit", "investment"),
        figure_bonus=True,
    ),
    format_fn=emphasize_figures,
)

BUSINESS_STRATEGY = create_category(
    "business-strategy",
    "Business Strategy",
    "Strategic approaches, business models, and operational plans",
    KEYWORDS.terms("business-strategy"),
    color="#0F9D58",
    icon="chess",
    priority=1,
    kind=CategoryKind.BROAD,
    business=True,
    score_fn=broad_score(
        KEYWORDS.terms("business-strategy"),
        ("strategy", "plan", "approach", "model", "roadmap"),
    ),
)

INDUSTRY_INSIGHTS = create_category(
    "industry-insights",
    "Industry Insights",
    "Deep insights into specific industries, sectors, and verticals",
    KEYWORDS.terms("industry-insights"),
    color="#DB4437",
    icon="industry",
    priority=1,
    kind=CategoryKind.BROAD,
    business=True,
    score_fn=broad_score(
        KEYWORDS.terms("industry-insights"),
        ("industry", "sector", "vertical", "segment"),
    ),
)


def get_broad_categories() -> List[CategoryDefinition]:
    return [MARKET_OVERVIEW, FINANCIAL_OVERVIEW, BUSINESS_STRATEGY, INDUSTRY_INSIGHTS]
