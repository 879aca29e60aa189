"""Tests for the classification cache."""

import pytest

from src.search_categories.cache import CategoryCache, compute_cache_key
from src.search_categories.config import CacheConfig
from src.search_categories.models import Category


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Create a small cache driven by a fake clock."""
    return CategoryCache(CacheConfig(ttl_seconds=300, max_entries=2), clock=clock)


def sample(category_id="a"):
    return [Category(id=category_id, name=category_id.upper())]


def test_cache_key_is_deterministic():
    assert compute_cache_key("q", "content") == compute_cache_key("q", "content")
    assert compute_cache_key("q", "content") != compute_cache_key("q2", "content")
    # the separator keeps (query, content) pairs apart
    assert compute_cache_key("ab", "c") != compute_cache_key("a", "bc")
    assert len(compute_cache_key("", "")) == 64


def test_get_returns_stored_categories(cache):
    cache.set("q", "content", sample())
    assert [c.id for c in cache.get("q", "content")] == ["a"]
    assert cache.get("other", "content") is None


def test_entries_expire_after_ttl(cache, clock):
    cache.set("q", "content", sample())

    clock.now += 300
    assert cache.get("q", "content") is not None

    clock.now += 1
    assert cache.get("q", "content") is None
    assert len(cache) == 0


def test_least_recently_used_entry_is_evicted(cache):
    cache.set("q1", "content", sample("a"))
    cache.set("q2", "content", sample("b"))
    cache.get("q1", "content")
    cache.set("q3", "content", sample("c"))

    assert len(cache) == 2
    assert cache.get("q2", "content") is None
    assert cache.get("q1", "content") is not None
    assert cache.get("q3", "content") is not None


def test_clear(cache):
    cache.set("q", "content", sample())
    cache.clear()
    assert len(cache) == 0


def test_stored_list_is_copied(cache):
    categories = sample()
    cache.set("q", "content", categories)
    categories.append(Category(id="late", name="Late"))

    assert [c.id for c in cache.get("q", "content")] == ["a"]


def test_variant_is_part_of_key(cache):
    cache.set("q", "content", sample("plain"), variant="business=None")

    assert cache.get("q", "content", variant="business=True") is None
    assert [c.id for c in cache.get("q", "content", variant="business=None")] == ["plain"]


def test_returned_categories_are_independent_copies(cache):
    cache.set("q", "content", sample())

    served = cache.get("q", "content")
    served[0].content = "edited"
    served[0].metrics.relevance = 1.0

    again = cache.get("q", "content")[0]
    assert again.content == ""
    assert again.metrics.relevance == 0.0
