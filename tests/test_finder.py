"""Tests for category selection."""

import pytest

from src.search_categories.categories import CategoryKind, create_category
from src.search_categories.config import FinderConfig
from src.search_categories.finder import CategoryFinder, find_best_categories, find_best_category
from src.search_categories.scoring import ConstantScorer, weighted_score


FINANCIAL_PARAGRAPH = (
    "The company reported quarterly revenue of $5.2B and profit growth, with strong "
    "earnings and healthy cash flow across its balance sheet."
)

# No digits, hyphens, bullets or insight terms: Key Insights scores exactly 70.
NEUTRAL_CONTENT = "Plain words about nothing in particular"


def fixed(category_id, score, kind=CategoryKind.SPECIFIC, priority=3, **options):
    """Definition with a constant relevance score."""
    return create_category(
        category_id,
        category_id.upper(),
        f"Fixed {score}",
        (),
        kind=kind,
        priority=priority,
        score_fn=lambda content, query: score,
        **options,
    )


@pytest.fixture
def finder():
    """Create a CategoryFinder over the full taxonomy."""
    return CategoryFinder()


def test_weighted_score_counts_relevance_twice():
    assert weighted_score(100, 80, 85) == 91.25


@pytest.mark.parametrize("content", ["", None, "   ", 42])
def test_invalid_content_returns_empty(finder, content):
    assert finder.find_best_categories(content) == []
    assert finder.find_best_category(content) is None


def test_results_are_bounded_and_ordered(finder):
    results = finder.find_best_categories(FINANCIAL_PARAGRAPH, "company earnings")

    assert 0 < len(results) <= 6
    keys = [(c.priority, -c.weighted_score) for c in results]
    assert keys == sorted(keys)


def test_key_insights_always_included(finder):
    results = finder.find_best_categories(FINANCIAL_PARAGRAPH)
    assert results[0].id == "key-insights"


def test_financial_paragraph_selection(finder):
    results = finder.find_best_categories(FINANCIAL_PARAGRAPH)
    by_id = {c.id: c for c in results}

    assert by_id["financial-overview"].relevance_score == 100.0
    assert by_id["financial-overview"].weighted_score == 91.25
    assert by_id["financial-overview"].meets_threshold is True
    assert by_id["financial-overview"].credibility_score == 80.0
    assert by_id["financial-overview"].accuracy_score == 85.0


def test_selection_is_deterministic(finder):
    first = finder.find_best_categories(FINANCIAL_PARAGRAPH, "revenue")
    second = finder.find_best_categories(FINANCIAL_PARAGRAPH, "revenue")
    assert [(c.id, c.weighted_score) for c in first] == [(c.id, c.weighted_score) for c in second]


def test_diversity_cap_per_kind():
    categories = [
        fixed("a", 100),
        fixed("b", 100),
        fixed("c", 100),
        fixed("d", 90, kind=CategoryKind.BROAD, priority=1),
        fixed("e", 90, kind=CategoryKind.BROAD, priority=1),
    ]
    finder = CategoryFinder(FinderConfig(max_categories=5), categories=categories)

    results = finder.find_best_categories(NEUTRAL_CONTENT)

    assert [c.id for c in results] == ["key-insights", "d", "e", "a", "b"]


def test_backfill_when_too_few_kinds():
    finder = CategoryFinder(categories=[fixed("a", 100), fixed("b", 95), fixed("c", 90)])

    results = finder.find_best_categories(NEUTRAL_CONTENT)

    assert [c.id for c in results] == ["key-insights", "a", "b", "c"]


def test_fallback_threshold_relaxation():
    categories = [fixed("near-1", 67), fixed("near-2", 66), fixed("far", 60)]
    finder = CategoryFinder(categories=categories)

    ids = [c.id for c in finder.find_best_categories(NEUTRAL_CONTENT)]

    assert "near-1" in ids
    assert "near-2" in ids
    assert "far" not in ids


def test_no_relaxation_when_enough_pass():
    categories = [fixed("a", 90), fixed("b", 90), fixed("near", 67)]
    finder = CategoryFinder(categories=categories)

    ids = [c.id for c in finder.find_best_categories(NEUTRAL_CONTENT)]

    assert ids == ["key-insights", "a", "b"]


def test_mandatory_category_included_above_fallback():
    categories = [
        fixed("a", 90),
        fixed("b", 90),
        fixed("c", 90),
        fixed("must", 66, mandatory=True),
    ]
    finder = CategoryFinder(categories=categories)

    ids = [c.id for c in finder.find_best_categories(NEUTRAL_CONTENT)]

    assert "must" in ids
    assert "key-insights" in ids


def test_mandatory_category_below_fallback_excluded():
    categories = [fixed("a", 90), fixed("b", 90), fixed("c", 90), fixed("must", 60, mandatory=True)]
    finder = CategoryFinder(categories=categories)

    assert "must" not in [c.id for c in finder.find_best_categories(NEUTRAL_CONTENT)]


def test_custom_quality_scorers_gate_selection():
    finder = CategoryFinder(
        categories=[fixed("a", 100)],
        credibility_scorer=ConstantScorer(40.0),
    )
    # nothing meets either threshold once credibility is low; Key Insights
    # still qualifies as mandatory on relevance alone
    assert [c.id for c in finder.find_best_categories(NEUTRAL_CONTENT)] == ["key-insights"]


def test_max_categories_limit():
    categories = [fixed(f"c{i}", 90, kind=kind, priority=3) for i, kind in enumerate(CategoryKind)]
    categories += [fixed(f"x{i}", 90) for i in range(6)]
    finder = CategoryFinder(FinderConfig(max_categories=3), categories=categories)

    assert len(finder.find_best_categories(NEUTRAL_CONTENT)) == 3


def test_module_level_shortcuts():
    results = find_best_categories(FINANCIAL_PARAGRAPH)
    assert results
    assert find_best_category(FINANCIAL_PARAGRAPH).id == results[0].id


def test_to_dict_shape(finder):
    data = finder.find_best_categories(FINANCIAL_PARAGRAPH)[0].to_dict()
    for key in ("id", "name", "description", "color", "icon", "priority", "score", "relevant", "formattedContent"):
        assert key in data
