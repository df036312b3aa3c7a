"""Configuration loader for keyword resolution and the translation cache."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, get_type_hints

import yaml

_TRUE_WORDS = {"1", "true", "yes", "on", "ja", "an"}


@dataclass(frozen=True)
class CacheConfig:
    capacity: int
    language: str
    fallback_languages: Tuple[str, ...]
    translations_path: Optional[Path]


@dataclass(frozen=True)
class ActionWordsConfig:
    ignore_case: bool
    vocabulary_path: Optional[Path]
    cache: CacheConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActionWordsConfig":
        cache_data = data.get("cache", {}) or {}
        vocabulary = data.get("vocabulary_path")
        translations = cache_data.get("translations_path")
        return cls(
            ignore_case=_as_bool(data.get("ignore_case", True)),
            vocabulary_path=Path(vocabulary) if vocabulary else None,
            cache=CacheConfig(
                capacity=int(cache_data.get("capacity", 17)),
                language=str(cache_data.get("language", "en")),
                fallback_languages=tuple(cache_data.get("fallback_languages", ["en", "de"])),
                translations_path=Path(translations) if translations else None,
            ),
        )


ENV_MAP = {
    "ignore_case": "ACTIONWORDS_IGNORE_CASE",
    "vocabulary_path": "ACTIONWORDS_VOCABULARY_PATH",
    "cache.capacity": "LANGCACHE_CAPACITY",
    "cache.language": "LANGCACHE_LANGUAGE",
    "cache.translations_path": "LANGCACHE_TRANSLATIONS_PATH",
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_WORDS


def _field_type(dotted_key: str) -> Any:
    """Declared dataclass type of a dotted config key."""
    owner: Any = ActionWordsConfig
    parts = dotted_key.split(".")
    for part in parts[:-1]:
        owner = get_type_hints(owner)[part]
    return get_type_hints(owner)[parts[-1]]


def _cast_env(dotted_key: str, raw: str) -> Any:
    field_type = _field_type(dotted_key)
    if field_type is bool:
        return _as_bool(raw)
    if field_type is int:
        return int(raw)
    return raw


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = _cast_env(dotted_key, os.environ[env_name])

    return merged


def load_config(config_path: str | Path = "config/actionwords.defaults.yml") -> ActionWordsConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return ActionWordsConfig.from_dict(data)
