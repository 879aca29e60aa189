"""Data models for the search category engine.

Everything here is request-scoped: match results, scored categories, content
sections and the final categories are built during a single classification
call and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

if TYPE_CHECKING:
    from .categories.base import CategoryDefinition, CategoryKind


@dataclass(frozen=True)
class ClassificationOptions:
    """Per-call options accepted by the finder, the categorizer and ``classify``."""

    debug: bool = False
    is_business_query: Optional[bool] = None  # None: detect from the query
    include_default_categories: bool = False

    @classmethod
    def from_value(
        cls, value: Union["ClassificationOptions", Dict[str, Any], None]
    ) -> "ClassificationOptions":
        """Accept an options object, a dict (snake or camel case keys) or None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, dict):
            return cls()
        is_business = value.get("is_business_query", value.get("isBusinessQuery"))
        return cls(
            debug=bool(value.get("debug", False)),
            is_business_query=None if is_business is None else bool(is_business),
            include_default_categories=bool(
                value.get("include_default_categories", value.get("includeDefaultCategories", False))
            ),
        )


@dataclass(frozen=True)
class KeywordHit:
    """A single keyword found in the scanned text."""

    keyword: str
    priority: str  # "high", "medium", "low"
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {"keyword": self.keyword, "priority": self.priority, "weight": self.weight}


@dataclass
class MatchResult:
    """Outcome of scoring text against one keyword domain."""

    domain: str
    matched: bool = False
    score: int = 0
    matches: List[KeywordHit] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "score": self.score,
            "matches": [hit.to_dict() for hit in self.matches],
            "domain": self.domain,
        }


@dataclass
class DomainMatch:
    """A matching domain inside a ``MatchAllResult``."""

    domain: str
    score: int
    matches: List[KeywordHit] = field(default_factory=list)


@dataclass
class MatchAllResult:
    """Outcome of scoring text against every registered keyword domain."""

    matched: bool = False
    categories: List[DomainMatch] = field(default_factory=list)

    @property
    def primary_domain(self) -> Optional[str]:
        return self.categories[0].domain if self.categories else None

    @property
    def primary_score(self) -> int:
        return self.categories[0].score if self.categories else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "categories": [
                {
                    "domain": entry.domain,
                    "score": entry.score,
                    "matches": [hit.to_dict() for hit in entry.matches],
                }
                for entry in self.categories
            ],
            "primaryDomain": self.primary_domain,
            "primaryScore": self.primary_score,
        }


@dataclass
class SourceRecord:
    """Already-fetched source supplied by the caller alongside result text."""

    title: str = ""
    url: str = ""
    content: str = ""
    source: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SourceRecord":
        return cls(
            title=str(data.get("title") or ""),
            url=str(data.get("url") or data.get("link") or ""),
            content=str(data.get("content") or ""),
            source=str(data.get("source") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "url": self.url, "content": self.content, "source": self.source}


@dataclass
class CategoryEvaluation:
    """Result of evaluating one category definition against content."""

    definition: "CategoryDefinition"
    score: float
    relevant: bool
    formatted_content: str

    def to_dict(self) -> Dict[str, Any]:
        definition = self.definition
        return {
            "id": definition.id,
            "name": definition.name,
            "description": definition.description,
            "color": definition.color,
            "icon": definition.icon,
            "priority": definition.priority,
            "score": self.score,
            "relevant": self.relevant,
            "formattedContent": self.formatted_content,
        }


@dataclass
class ScoredCategory:
    """A category definition scored for a single piece of content."""

    evaluation: CategoryEvaluation
    relevance_score: float
    credibility_score: float
    accuracy_score: float
    weighted_score: float
    meets_threshold: bool

    @property
    def definition(self) -> "CategoryDefinition":
        return self.evaluation.definition

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def priority(self) -> int:
        return self.definition.priority

    @property
    def kind(self) -> "CategoryKind":
        return self.definition.kind

    @property
    def score(self) -> float:
        return self.evaluation.score

    @property
    def formatted_content(self) -> str:
        return self.evaluation.formatted_content

    def to_dict(self) -> Dict[str, Any]:
        data = self.evaluation.to_dict()
        data.update(
            {
                "relevanceScore": self.relevance_score,
                "credibilityScore": self.credibility_score,
                "accuracyScore": self.accuracy_score,
                "weightedScore": self.weighted_score,
                "meetsThreshold": self.meets_threshold,
            }
        )
        return data


@dataclass
class ContentSection:
    """Blank-line delimited chunk of result text classified on its own."""

    id: str
    text: str
    index: int
    primary_category: Optional[ScoredCategory] = None


@dataclass
class CategoryMetrics:
    """Presentation metrics for a final category."""

    relevance: float = 0.0
    credibility: float = 0.0
    accuracy: float = 0.0
    overall: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "relevance": self.relevance,
            "accuracy": self.accuracy,
            "credibility": self.credibility,
            "overall": self.overall,
        }


@dataclass
class Category:
    """Final category handed to the presentation layer."""

    id: str
    name: str
    content: Union[str, List[Any]] = ""
    color: str = "#4285F4"
    metrics: CategoryMetrics = field(default_factory=CategoryMetrics)
    score: float = 0.0
    description: str = ""
    icon: str = "category"
    priority: int = 5
    formatted_content: str = ""
    section_ids: List[str] = field(default_factory=list)
    source: str = ""  # "emergency_fallback", "fixed_by_validation" or empty

    def to_dict(self) -> Dict[str, Any]:
        if self.source:
            return self.to_fallback_dict()
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "priority": self.priority,
            "content": self.content,
            "formattedContent": self.formatted_content,
            "metrics": self.metrics.to_dict(),
            "score": self.score,
        }

    def to_fallback_dict(self) -> Dict[str, Any]:
        """Reduced shape used by emergency and validation-fixed categories."""
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
            "content": self.content,
            "color": self.color,
            "metrics": self.metrics.to_dict(),
            "_source": self.source,
        }
