"""
Translation lookup layer.

TranslationStore holds the mutable language tables; BoundedLookupCache is a
small ring buffer in front of it. Both share one ReadWriteLock.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cache import DEFAULT_CAPACITY, BoundedLookupCache
from .rwlock import ReadWriteLock
from .store import TranslationStore

if TYPE_CHECKING:
    from actionwords.config import CacheConfig


def build_cache(config: "CacheConfig") -> BoundedLookupCache:
    """Wire a store and its cache around one shared lock."""
    lock = ReadWriteLock()
    if config.translations_path is not None:
        store = TranslationStore.from_yaml(
            config.translations_path,
            language=config.language,
            fallback_languages=config.fallback_languages,
            lock=lock,
        )
    else:
        store = TranslationStore(
            language=config.language,
            fallback_languages=config.fallback_languages,
            lock=lock,
        )
    return BoundedLookupCache(store, config.capacity)


__all__ = [
    'BoundedLookupCache', 'DEFAULT_CAPACITY', 'ReadWriteLock', 'TranslationStore',
    'build_cache',
]
