"""Emergency category set and output validation.

When classification yields nothing usable the presentation layer still needs
something to render; these helpers guarantee a non-empty, well-formed list.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .logging_config import get_logger
from .models import Category, CategoryMetrics

logger = get_logger("fallback")

EMERGENCY_SOURCE = "emergency_fallback"
VALIDATION_SOURCE = "fixed_by_validation"
DEFAULT_ICON = "category"
DEFAULT_COLOR = "#4285F4"
DEFAULT_METRICS = {"relevance": 0.75, "accuracy": 0.75, "credibility": 0.75, "overall": 0.75}


def get_emergency_categories(query: str = "") -> List[Category]:
    """Fixed three-entry set shown when nothing else is available."""
    logger.warning(f"Generating emergency categories for query {query!r}")
    return [
        Category(
            id="key_insights_emergency",
            name="Key Insights",
            icon="lightbulb",
            description="Most important insights from all sources",
            content=[],
            color="#0F9D58",
            metrics=CategoryMetrics(relevance=0.95, accuracy=0.90, credibility=0.92, overall=0.92),
            source=EMERGENCY_SOURCE,
        ),
        Category(
            id="all_results_emergency",
            name="All Results",
            icon="search",
            description="All search results",
            content=[],
            color="#4285F4",
            metrics=CategoryMetrics(relevance=0.75, accuracy=0.75, credibility=0.75, overall=0.75),
            source=EMERGENCY_SOURCE,
        ),
        Category(
            id="answers_emergency",
            name="Answers",
            icon="question_answer",
            description="Direct answers to your query",
            content=[],
            color="#DB4437",
            metrics=CategoryMetrics(relevance=0.85, accuracy=0.82, credibility=0.80, overall=0.82),
            source=EMERGENCY_SOURCE,
        ),
    ]


def _fix_category(data: Dict[str, Any]) -> Category:
    content = data.get("content")
    if not isinstance(content, (str, list)):
        content = []
    metrics = data.get("metrics")
    if isinstance(metrics, CategoryMetrics):
        fixed_metrics = metrics
    else:
        values = dict(DEFAULT_METRICS)
        if isinstance(metrics, dict):
            values.update({key: metrics[key] for key in DEFAULT_METRICS if key in metrics})
        fixed_metrics = CategoryMetrics(**values)
    name = str(data["name"])
    return Category(
        id=str(data["id"]),
        name=name,
        content=content,
        color=data.get("color") or DEFAULT_COLOR,
        metrics=fixed_metrics,
        score=float(data.get("score") or 0.0),
        description=data.get("description") or f"Category for {name}",
        icon=data.get("icon") or DEFAULT_ICON,
        priority=int(data.get("priority", 5)),
        formatted_content=data.get("formattedContent") or data.get("formatted_content") or "",
        source=data.get("_source") or data.get("source") or VALIDATION_SOURCE,
    )


def validate_and_fix_categories(categories: Any, query: str = "") -> List[Category]:
    """Return usable categories, or the emergency set if there are none.

    Entries may be ``Category`` objects or presentation dicts. Anything
    without both an id and a name is dropped; the rest get missing fields
    filled in.
    """
    if not isinstance(categories, list):
        logger.error("Categories is not a list, using emergency fallback")
        return get_emergency_categories(query)
    if not categories:
        logger.error("Categories list is empty, using emergency fallback")
        return get_emergency_categories(query)

    fixed: List[Category] = []
    for entry in categories:
        if isinstance(entry, Category):
            if entry.id and entry.name:
                fixed.append(entry)
            continue
        if isinstance(entry, dict) and entry.get("id") and entry.get("name"):
            fixed.append(_fix_category(entry))

    if not fixed:
        logger.error("No valid categories found, using emergency fallback")
        return get_emergency_categories(query)
    return fixed
