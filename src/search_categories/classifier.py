"""Top-level entry point: content and query in, categories out."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from .cache import CategoryCache
from .categorizer import DynamicCategorizer
from .fallback import get_emergency_categories
from .finder import CategoryFinder, OptionsArg
from .logging_config import get_logger
from .models import Category, ClassificationOptions, SourceRecord

logger = get_logger("classifier")


def classify(
    content: object,
    query: object = "",
    options: OptionsArg = None,
    *,
    cache: Optional[CategoryCache] = None,
    finder: Optional[CategoryFinder] = None,
    categorizer: Optional[DynamicCategorizer] = None,
    sources: Optional[Sequence[Union[SourceRecord, Dict[str, Any]]]] = None,
) -> List[Category]:
    """Classify result text into presentation categories.

    Results are served from ``cache`` when one is given and holds a fresh
    entry for the same query and content. With ``include_default_categories``
    an empty result is replaced by the emergency set.
    """
    opts = ClassificationOptions.from_value(options)
    text = content if isinstance(content, str) else ""
    query_text = query if isinstance(query, str) else ""
    variant = f"business={opts.is_business_query}"

    categories = cache.get(query_text, text, variant) if cache is not None and text else None
    if categories is not None:
        logger.debug("Serving categories from cache")
    else:
        categorizer = categorizer or DynamicCategorizer(finder)
        categories = categorizer.create_categories(text, sources, query_text, opts)
        if cache is not None and text:
            cache.set(query_text, text, categories, variant)

    # The emergency set is never cached
    if not categories and opts.include_default_categories:
        logger.warning("No categories found, using emergency fallback")
        return get_emergency_categories(query_text)
    return categories
