"""Special categories: always evaluated, and forced into results when close enough."""

from __future__ import annotations

import re
from typing import List

from ..keywords import KEYWORDS
from .base import CategoryDefinition, CategoryKind, create_category

NUMBER_PATTERN = re.compile(r"\d+(\.\d+)?%?")
LIST_MARKER_PATTERN = re.compile(r"•|-|\*|\d+\.")

KEY_INSIGHTS_BASE_SCORE = 70
KEY_INSIGHTS_SIGNAL_BONUS = 10


def _score_key_insights(content: str, query: str) -> float:
    lowered = content.lower()
    signals = [
        NUMBER_PATTERN.search(content) is not None,
        LIST_MARKER_PATTERN.search(content) is not None,
        any(keyword.lower() in lowered for keyword in KEYWORDS.terms("key-insights")),
    ]
    score = KEY_INSIGHTS_BASE_SCORE + KEY_INSIGHTS_SIGNAL_BONUS * sum(signals)
    return float(min(score, 100))


def _format_key_insights(content: str) -> str:
    """Normalise list markers, bullet every line and bold the figures."""
    formatted = re.sub(r"•\s+", "• ", content)
    formatted = re.sub(r"\*\s+", "• ", formatted)
    formatted = re.sub(r"(\d+)\.\s+", "• ", formatted)

    lines = []
    for line in formatted.split("\n"):
        line = line.strip()
        if line and not line.startswith("•") and not line.startswith("-"):
            line = f"• {line}"
        lines.append(line)
    formatted = "\n".join(lines)

    return re.sub(r"(\d+(\.\d+)?%?)", r"<strong>\1</strong>", formatted)


KEY_INSIGHTS = create_category(
    "key-insights",
    "Key Insights",
    "Most important insights related to your search",
    KEYWORDS.terms("key-insights"),
    color="#673AB7",
    icon="lightbulb",
    priority=0,
    kind=CategoryKind.SPECIAL,
    always_evaluate=True,
    mandatory=True,
    score_fn=_score_key_insights,
    format_fn=_format_key_insights,
)


def get_special_categories() -> List[CategoryDefinition]:
    return [KEY_INSIGHTS]
