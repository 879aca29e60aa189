"""Caller-owned, bounded cache for classification results."""

from __future__ import annotations

import copy
import hashlib
import threading
import time
from collections import OrderedDict
from typing import Callable, List, Optional, Tuple

from .config import CacheConfig
from .logging_config import get_logger
from .models import Category

logger = get_logger("cache")


def compute_cache_key(query: str, content: str, variant: str = "") -> str:
    """Deterministic SHA-256 key for a (query, content) pair plus an options variant."""
    payload = f"{query}\x00{content}\x00{variant}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CategoryCache:
    """TTL cache with LRU eviction, safe to share between threads."""

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or CacheConfig()
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, List[Category]]]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, query: str, content: str, variant: str = "") -> Optional[List[Category]]:
        key = compute_cache_key(query, content, variant)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, categories = entry
            if self._clock() - stored_at > self.config.ttl_seconds:
                del self._entries[key]
                logger.debug(f"Cache entry expired: {key[:12]}")
                return None
            self._entries.move_to_end(key)
            return copy.deepcopy(categories)

    def set(self, query: str, content: str, categories: List[Category], variant: str = "") -> None:
        key = compute_cache_key(query, content, variant)
        with self._lock:
            self._entries[key] = (self._clock(), copy.deepcopy(categories))
            self._entries.move_to_end(key)
            while len(self._entries) > self.config.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted cache entry: {evicted[:12]}")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
