"""Configuration for category selection, grouping and caching."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class ConfigurationError(ValueError):
    """Raised when thresholds or limits are inconsistent."""


@dataclass(frozen=True)
class FinderConfig:
    """Thresholds and limits used by the finder and the categorizer."""

    max_categories: int = 6
    primary_threshold: float = 70.0
    fallback_threshold: float = 65.0
    min_categories: int = 3
    max_per_kind: int = 2
    min_section_length: int = 50
    business_priority_boost: int = 3

    def __post_init__(self) -> None:
        if self.max_categories < 1:
            raise ConfigurationError(f"max_categories must be positive, got {self.max_categories}")
        if self.min_categories < 0:
            raise ConfigurationError(f"min_categories must not be negative, got {self.min_categories}")
        if self.max_per_kind < 1:
            raise ConfigurationError(f"max_per_kind must be positive, got {self.max_per_kind}")
        if self.min_section_length < 0:
            raise ConfigurationError(f"min_section_length must not be negative, got {self.min_section_length}")
        for name in ("primary_threshold", "fallback_threshold"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ConfigurationError(f"{name} must be within 0-100, got {value}")
        if self.fallback_threshold > self.primary_threshold:
            raise ConfigurationError(
                f"fallback_threshold ({self.fallback_threshold}) must not exceed "
                f"primary_threshold ({self.primary_threshold})"
            )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FinderConfig":
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown finder settings: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls) -> "FinderConfig":
        """Load configuration from SEARCH_CATEGORIES_* environment variables."""
        defaults = cls()
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = os.environ.get(f"SEARCH_CATEGORIES_{f.name.upper()}")
            if raw is None or not raw.strip():
                continue
            converter = float if isinstance(getattr(defaults, f.name), float) else int
            try:
                values[f.name] = converter(raw)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid value for {f.name}: {raw!r}") from exc
        return cls(**values)


@dataclass(frozen=True)
class CacheConfig:
    """Settings for the caller-owned category cache."""

    ttl_seconds: float = 300.0
    max_entries: int = 128

    def __post_init__(self) -> None:
        if self.ttl_seconds <= 0:
            raise ConfigurationError(f"ttl_seconds must be positive, got {self.ttl_seconds}")
        if self.max_entries < 1:
            raise ConfigurationError(f"max_entries must be positive, got {self.max_entries}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CacheConfig":
        data = data or {}
        return cls(
            ttl_seconds=float(data.get("ttl_seconds", 300.0)),
            max_entries=int(data.get("max_entries", 128)),
        )


class CategoryConfig:
    """Central configuration container loaded from YAML."""

    DEFAULT_CONFIG_PATH = Path("config/search_categories.yaml")

    def __init__(self, config_path: Optional[Path | str] = None) -> None:
        path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        if not path.is_absolute():
            path = Path.cwd() / path
        self.config_path = path
        self._data = self._load_config()
        self.finder = FinderConfig.from_dict(self._data.get("finder"))
        self.cache = CacheConfig.from_dict(self._data.get("cache"))

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {"finder": {}, "cache": {}, "scoring": {}}
        with open(self.config_path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {self.config_path}")
        return data

    def get_scoring_setting(self, key: str, default: Any = None) -> Any:
        return (self._data.get("scoring") or {}).get(key, default)
