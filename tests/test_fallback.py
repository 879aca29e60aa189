"""Tests for the emergency category set and output validation."""

import json

import pytest

from src.search_categories.fallback import get_emergency_categories, validate_and_fix_categories
from src.search_categories.models import Category


def test_emergency_categories_shape():
    categories = get_emergency_categories("anything")

    assert [c.id for c in categories] == ["key_insights_emergency", "all_results_emergency", "answers_emergency"]
    answers = categories[2].to_dict()
    assert answers["name"] == "Answers"
    assert answers["icon"] == "question_answer"
    assert answers["color"] == "#DB4437"
    assert answers["description"] == "Direct answers to your query"
    assert answers["content"] == []
    assert answers["_source"] == "emergency_fallback"
    assert answers["metrics"] == {"relevance": 0.85, "credibility": 0.80, "accuracy": 0.82, "overall": 0.82}


def test_emergency_key_insights_metrics():
    key_insights = get_emergency_categories()[0]
    assert key_insights.color == "#0F9D58"
    assert key_insights.icon == "lightbulb"
    assert key_insights.metrics.relevance == 0.95
    assert key_insights.metrics.overall == 0.92


@pytest.mark.parametrize("value", [None, "categories", {"id": "x", "name": "X"}, [], [{"name": "no id"}, None, 3]])
def test_invalid_input_falls_back_to_emergency(value):
    categories = validate_and_fix_categories(value)
    assert [c.id for c in categories] == ["key_insights_emergency", "all_results_emergency", "answers_emergency"]


def test_missing_fields_are_filled():
    categories = validate_and_fix_categories([{"id": "custom", "name": "Custom"}, {"id": "", "name": "Dropped"}])

    assert len(categories) == 1
    fixed = categories[0]
    assert fixed.icon == "category"
    assert fixed.color == "#4285F4"
    assert fixed.description == "Category for Custom"
    assert fixed.content == []
    assert fixed.metrics.overall == 0.75
    assert fixed.to_dict()["_source"] == "fixed_by_validation"


def test_existing_fields_are_kept():
    categories = validate_and_fix_categories(
        [
            {
                "id": "custom",
                "name": "Custom",
                "icon": "star",
                "content": "Body text",
                "metrics": {"relevance": 0.9},
                "_source": "llm",
            }
        ]
    )

    fixed = categories[0]
    assert fixed.icon == "star"
    assert fixed.content == "Body text"
    assert fixed.metrics.relevance == 0.9
    assert fixed.metrics.accuracy == 0.75
    assert fixed.source == "llm"


def test_category_objects_pass_through():
    category = Category(id="market-overview", name="Market Overview", content="text")
    assert validate_and_fix_categories([category]) == [category]


def test_emergency_serialisation_is_exact():
    expected = [
        {
            "id": "key_insights_emergency",
            "name": "Key Insights",
            "icon": "lightbulb",
            "description": "Most important insights from all sources",
            "content": [],
            "color": "#0F9D58",
            "metrics": {"relevance": 0.95, "accuracy": 0.90, "credibility": 0.92, "overall": 0.92},
            "_source": "emergency_fallback",
        },
        {
            "id": "all_results_emergency",
            "name": "All Results",
            "icon": "search",
            "description": "All search results",
            "content": [],
            "color": "#4285F4",
            "metrics": {"relevance": 0.75, "accuracy": 0.75, "credibility": 0.75, "overall": 0.75},
            "_source": "emergency_fallback",
        },
        {
            "id": "answers_emergency",
            "name": "Answers",
            "icon": "question_answer",
            "description": "Direct answers to your query",
            "content": [],
            "color": "#DB4437",
            "metrics": {"relevance": 0.85, "accuracy": 0.82, "credibility": 0.80, "overall": 0.82},
            "_source": "emergency_fallback",
        },
    ]

    serialised = json.dumps([c.to_dict() for c in get_emergency_categories()])

    assert serialised == json.dumps(expected)


def test_validation_fixed_serialisation_keys():
    fixed = validate_and_fix_categories([{"id": "custom", "name": "Custom"}])[0]
    assert list(fixed.to_dict()) == ["id", "name", "icon", "description", "content", "color", "metrics", "_source"]
    assert list(fixed.to_dict()["metrics"]) == ["relevance", "accuracy", "credibility", "overall"]
