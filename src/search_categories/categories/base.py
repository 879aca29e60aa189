"""Category definitions and the default scoring/formatting behaviour.

A ``CategoryDefinition`` is an immutable taxonomy entry. ``CategoryBase``
wraps a definition and provides scoring, relevance checks and evaluation,
delegating to a definition's ``score_fn``/``format_fn`` when it supplies them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..logging_config import get_logger
from ..models import CategoryEvaluation

logger = get_logger("categories")

DEFAULT_COLOR = "#6c757d"
DEFAULT_ICON = "folder"
DEFAULT_PRIORITY = 5
RELEVANCE_THRESHOLD = 70
KEYWORD_MATCH_FLOOR = 50
KEYWORD_WEIGHT = 0.7
QUERY_WEIGHT = 0.3
MIN_QUERY_TERM_LENGTH = 3

ScoreFn = Callable[[str, str], float]
FormatFn = Callable[[str], str]


class CategoryKind(str, Enum):
    """Taxonomy tier a category belongs to."""

    SPECIAL = "special"
    BROAD = "broad"
    SPECIFIC = "specific"


@dataclass(frozen=True)
class CategoryDefinition:
    """Static taxonomy entry."""

    id: str
    name: str
    description: str = ""
    color: str = DEFAULT_COLOR
    icon: str = DEFAULT_ICON
    priority: int = DEFAULT_PRIORITY
    keywords: Tuple[str, ...] = ()
    kind: CategoryKind = CategoryKind.SPECIFIC
    always_evaluate: bool = False
    mandatory: bool = False
    business: bool = False
    score_fn: Optional[ScoreFn] = field(default=None, compare=False, repr=False)
    format_fn: Optional[FormatFn] = field(default=None, compare=False, repr=False)


def create_category(
    category_id: str,
    name: str,
    description: str,
    keywords: Sequence[str],
    **options: Any,
) -> CategoryDefinition:
    """Build a definition with the standard defaults filled in."""
    return CategoryDefinition(
        id=category_id,
        name=name,
        description=description,
        keywords=tuple(keywords),
        color=options.get("color", DEFAULT_COLOR),
        icon=options.get("icon", DEFAULT_ICON),
        priority=options.get("priority", DEFAULT_PRIORITY),
        kind=options.get("kind", CategoryKind.SPECIFIC),
        always_evaluate=options.get("always_evaluate", False),
        mandatory=options.get("mandatory", False),
        business=options.get("business", False),
        score_fn=options.get("score_fn"),
        format_fn=options.get("format_fn"),
    )


def keyword_hits(keywords: Sequence[str], content: str) -> List[str]:
    """Return the keywords found (case-insensitively) in content."""
    lowered = content.lower()
    return [keyword for keyword in keywords if keyword.lower() in lowered]


def query_term_ratio(query: str, content: str) -> float:
    """Percentage of query terms that are longer than two characters and occur in content."""
    terms = query.lower().split()
    if not terms:
        return 0.0
    lowered = content.lower()
    found = [term for term in terms if len(term) >= MIN_QUERY_TERM_LENGTH and term in lowered]
    return len(found) / len(terms) * 100


def default_score(keywords: Sequence[str], content: object, query: object = "") -> float:
    """Keyword coverage, blended 70/30 with query overlap when a query is given."""
    if not content or not isinstance(content, str):
        return 0.0
    if not isinstance(query, str):
        query = ""

    matched = keyword_hits(keywords, content)
    keyword_percentage = len(matched) / len(keywords) * 100 if keywords else 0.0

    if query:
        score = keyword_percentage * KEYWORD_WEIGHT + query_term_ratio(query, content) * QUERY_WEIGHT
    else:
        score = keyword_percentage

    if matched:
        return max(float(KEYWORD_MATCH_FLOOR), score)
    return score


class CategoryBase:
    """Scoring and formatting behaviour for a single category definition."""

    def __init__(self, definition: CategoryDefinition, *, debug: bool = False) -> None:
        self.definition = definition
        self.debug = debug

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    def get_score(self, content: object, query: object = "") -> float:
        """Relevance of content to this category, 0-100."""
        if not content or not isinstance(content, str):
            return 0.0
        if not isinstance(query, str):
            query = ""
        if self.definition.score_fn is not None:
            return float(self.definition.score_fn(content, query))
        return default_score(self.definition.keywords, content, query)

    def format_content(self, content: object) -> str:
        if not content or not isinstance(content, str):
            return ""
        if self.definition.format_fn is not None:
            return self.definition.format_fn(content)
        return content

    def is_relevant(self, content: object, query: object = "", threshold: float = RELEVANCE_THRESHOLD) -> bool:
        return self.get_score(content, query) >= threshold

    def evaluate(self, content: object, query: object = "") -> CategoryEvaluation:
        """Score, relevance flag and formatted content for this category."""
        score = self.get_score(content, query)
        evaluation = CategoryEvaluation(
            definition=self.definition,
            score=score,
            relevant=score >= RELEVANCE_THRESHOLD,
            formatted_content=self.format_content(content),
        )
        if self.debug:
            preview = content[:100] if isinstance(content, str) else "No content"
            logger.debug(f"Evaluated {self.name}: score={score:.1f} relevant={evaluation.relevant} content={preview!r}")
        return evaluation
