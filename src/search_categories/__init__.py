"""Search category engine package namespace."""

from importlib import import_module
from typing import Any

__all__ = [
    "KeywordMatcher",
    "KeywordSet",
    "CategoryFinder",
    "DynamicCategorizer",
    "CategoryCache",
    "ClassificationOptions",
    "Category",
    "FinderConfig",
    "classify",
    "create_dynamic_categories_from_text",
    "find_best_categories",
    "get_emergency_categories",
    "validate_and_fix_categories",
]


def __getattr__(name: str) -> Any:
    if name in ("KeywordMatcher", "KeywordSet"):
        module = import_module("src.search_categories.keywords")
        return getattr(module, name)
    elif name in ("CategoryFinder", "find_best_categories"):
        module = import_module("src.search_categories.finder")
        return getattr(module, name)
    elif name in ("DynamicCategorizer", "create_dynamic_categories_from_text"):
        module = import_module("src.search_categories.categorizer")
        return getattr(module, name)
    elif name == "CategoryCache":
        module = import_module("src.search_categories.cache")
        return getattr(module, name)
    elif name in ("ClassificationOptions", "Category"):
        module = import_module("src.search_categories.models")
        return getattr(module, name)
    elif name == "FinderConfig":
        module = import_module("src.search_categories.config")
        return getattr(module, name)
    elif name == "classify":
        module = import_module("src.search_categories.classifier")
        return getattr(module, name)
    elif name in ("get_emergency_categories", "validate_and_fix_categories"):
        module = import_module("src.search_categories.fallback")
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
