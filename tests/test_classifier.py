"""Tests for the top-level classify entry point."""

import pytest

from src.search_categories.cache import CategoryCache
from src.search_categories.classifier import classify
from src.search_categories.models import Category, ClassificationOptions


FINANCIAL_PARAGRAPH = (
    "The company reported quarterly revenue of $5.2B and profit growth, with strong "
    "earnings and healthy cash flow across its balance sheet."
)


class RecordingCategorizer:
    """Stand-in categorizer that records its calls."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else [Category(id="stub", name="Stub")]

    def create_categories(self, text, sources=None, query="", options=None):
        self.calls.append((text, query, options))
        return list(self.result)


def test_classify_returns_categories():
    categories = classify(FINANCIAL_PARAGRAPH, "company earnings")
    assert [c.id for c in categories] == ["financial-overview"]


@pytest.mark.parametrize("content", [None, "", "short"])
def test_classify_empty_result(content):
    assert classify(content) == []


def test_classify_emergency_fallback_when_requested():
    categories = classify("", options={"includeDefaultCategories": True})
    assert [c.source for c in categories] == ["emergency_fallback"] * 3


def test_classify_uses_cache():
    cache = CategoryCache()
    categorizer = RecordingCategorizer()

    first = classify(FINANCIAL_PARAGRAPH, "q", cache=cache, categorizer=categorizer)
    second = classify(FINANCIAL_PARAGRAPH, "q", cache=cache, categorizer=categorizer)

    assert [c.id for c in first] == [c.id for c in second] == ["stub"]
    assert len(categorizer.calls) == 1
    assert len(cache) == 1


def test_classify_cache_is_keyed_by_query():
    cache = CategoryCache()
    categorizer = RecordingCategorizer()

    classify(FINANCIAL_PARAGRAPH, "first", cache=cache, categorizer=categorizer)
    classify(FINANCIAL_PARAGRAPH, "second", cache=cache, categorizer=categorizer)

    assert len(categorizer.calls) == 2


def test_classify_normalises_options():
    categorizer = RecordingCategorizer()
    classify(FINANCIAL_PARAGRAPH, None, {"debug": True}, categorizer=categorizer)

    text, query, options = categorizer.calls[0]
    assert query == ""
    assert options == ClassificationOptions(debug=True)


def test_emergency_set_is_not_cached():
    cache = CategoryCache()
    categorizer = RecordingCategorizer(result=[])

    first = classify("short text", "q", {"includeDefaultCategories": True}, cache=cache, categorizer=categorizer)
    second = classify("short text", "q", {"includeDefaultCategories": False}, cache=cache, categorizer=categorizer)

    assert len(first) == 3
    assert second == []
    assert len(categorizer.calls) == 1


def test_cache_entries_are_separated_by_business_flag():
    cache = CategoryCache()
    categorizer = RecordingCategorizer()

    classify(FINANCIAL_PARAGRAPH, "q", {"isBusinessQuery": True}, cache=cache, categorizer=categorizer)
    classify(FINANCIAL_PARAGRAPH, "q", {"isBusinessQuery": False}, cache=cache, categorizer=categorizer)
    classify(FINANCIAL_PARAGRAPH, "q", {"isBusinessQuery": True}, cache=cache, categorizer=categorizer)

    assert len(categorizer.calls) == 2
    assert len(cache) == 2
