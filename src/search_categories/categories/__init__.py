"""Category taxonomy: Special, Broad and Specific registries."""

from typing import Dict, List, Optional

from src.search_categories.categories.base import (
    CategoryBase,
    CategoryDefinition,
    CategoryKind,
    create_category,
    default_score,
)
from src.search_categories.categories.broad import (
    BUSINESS_STRATEGY,
    FINANCIAL_OVERVIEW,
    INDUSTRY_INSIGHTS,
    MARKET_OVERVIEW,
    get_broad_categories,
)
from src.search_categories.categories.special import KEY_INSIGHTS, get_special_categories
from src.search_categories.categories.specific import get_specific_categories


def get_all_categories() -> List[CategoryDefinition]:
    """Every taxonomy entry in evaluation order: Special, Specific, Broad."""
    return [*get_special_categories(), *get_specific_categories(), *get_broad_categories()]


def _build_index(definitions: List[CategoryDefinition]) -> Dict[str, CategoryDefinition]:
    index: Dict[str, CategoryDefinition] = {}
    for definition in definitions:
        if definition.id in index:
            raise ValueError(f"Duplicate category id in taxonomy: {definition.id}")
        index[definition.id] = definition
    return index


_CATEGORY_INDEX = _build_index(get_all_categories())


def get_category(category_id: str) -> Optional[CategoryDefinition]:
    return _CATEGORY_INDEX.get(category_id)


__all__ = [
    "BUSINESS_STRATEGY",
    "CategoryBase",
    "CategoryDefinition",
    "CategoryKind",
    "FINANCIAL_OVERVIEW",
    "INDUSTRY_INSIGHTS",
    "KEY_INSIGHTS",
    "MARKET_OVERVIEW",
    "create_category",
    "default_score",
    "get_all_categories",
    "get_broad_categories",
    "get_category",
    "get_special_categories",
    "get_specific_categories",
]
