"""
Bounded translation lookup cache.

A fixed-capacity ring buffer of (key, value) slots in front of a
TranslationStore. Slots are overwritten in insertion order, oldest first;
reading an entry does not keep it alive longer. The cache shares the
store's reader/writer lock, so readers see either the old or the new slot
contents, never half of an insert.

A key may briefly occupy two slots (no duplicate check on insert). Both
hold the same value unless the store changed in between; the first slot
found wins.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from .store import TranslationStore

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 17

_QUOTES = ("'", '"')


def trim_key(key: Optional[str]) -> Optional[str]:
    """Strip whitespace and one pair of surrounding quotes; None if empty."""
    if key is None:
        return None
    trimmed = str(key).strip()
    if len(trimmed) >= 2 and trimmed[0] == trimmed[-1] and trimmed[0] in _QUOTES:
        trimmed = trimmed[1:-1].strip()
    return trimmed or None


class BoundedLookupCache:
    def __init__(self, store: TranslationStore, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"cache capacity must be positive, got {capacity}")
        self._store = store
        self._lock = store.lock
        self._capacity = capacity
        self._keys: List[Optional[str]] = [None] * capacity
        self._values: List[Optional[str]] = [None] * capacity
        self._put_index = 0
        self._last_hit = 0
        self._generation = 0
        self._language_version = store.language_version

        self._stats_lock = threading.Lock()
        self.stats = {
            "hits": 0,
            "misses": 0,
            "writes": 0,
            "evictions": 0,
        }

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def store(self) -> TranslationStore:
        return self._store

    def _count(self, name: str) -> None:
        with self._stats_lock:
            self.stats[name] += 1

    def _find(self, key: str) -> Optional[int]:
        """Slot holding ``key``, scanning from the last hit; caller holds a lock."""
        start = self._last_hit
        for offset in range(self._capacity):
            slot = (start + offset) % self._capacity
            if self._keys[slot] == key:
                return slot
        return None

    def _sync_language(self) -> None:
        """Empty the ring if the store switched language behind our back."""
        if self._language_version == self._store.language_version:
            return
        with self._lock.write_locked():
            if self._language_version == self._store.language_version:
                return
            self._reset_unlocked()
        logger.debug("Translation cache emptied after switch to %s", self._store.language)

    def get(self, key: Optional[str], default: Optional[str] = None) -> Optional[str]:
        """
        Value for ``key`` in the store's current language.

        Served from the ring when present; otherwise fetched from the store
        and written to the oldest slot. Absent values are cached too, the
        ``default`` is only substituted on return.
        """
        tkey = trim_key(key)
        if tkey is None:
            return default

        self._sync_language()
        value: Optional[str] = None
        with self._lock.read_locked():
            slot = self._find(tkey)
            if slot is not None:
                self._last_hit = slot  # hint only, racing readers may overwrite it
                value = self._values[slot]
            generation = self._generation
            language_version = self._language_version

        if slot is not None:
            self._count("hits")
            return value if value is not None else default

        self._count("misses")
        value = self._store.lookup(tkey)
        self._insert(tkey, value, generation, language_version)
        return value if value is not None else default

    def _insert(self, key: str, value: Optional[str], generation: int, language_version: int) -> None:
        with self._lock.write_locked():
            if generation != self._generation or language_version != self._store.language_version:
                # cache was cleared or the language changed meanwhile, value may be stale
                return
            slot = self._put_index
            evicted = self._keys[slot]
            self._keys[slot] = key
            self._values[slot] = value
            self._put_index = (slot + 1) % self._capacity
        self._count("writes")
        if evicted is not None:
            self._count("evictions")
            logger.debug("Evicted %r from slot %d for %r", evicted, slot, key)

    def __contains__(self, key: object) -> bool:
        """True if ``key`` sits in the ring; never consults the store."""
        tkey = trim_key(key) if isinstance(key, str) else None
        if tkey is None:
            return False
        self._sync_language()
        with self._lock.read_locked():
            return self._find(tkey) is not None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return sum(1 for key in self._keys if key is not None)

    def _reset_unlocked(self) -> None:
        self._keys = [None] * self._capacity
        self._values = [None] * self._capacity
        self._put_index = 0
        self._last_hit = 0
        self._generation += 1
        self._language_version = self._store.language_version

    def clear(self) -> None:
        with self._lock.write_locked():
            self._reset_unlocked()
        logger.debug("Translation cache cleared")

    def switch_language(self, language: str) -> bool:
        """Change the store's language; empties the cache if it changed."""
        with self._lock.write_locked():
            changed = self._store._select_language(language)
            if changed:
                self._reset_unlocked()
        if changed:
            logger.debug("Translation cache switched to %s", self._store.language)
        return changed

    def format_message(self, key: str, default_pattern: Optional[str] = None, *params: Any) -> Optional[str]:
        """
        Localized ``str.format`` pattern for ``key`` filled with ``params``.

        A pattern the params do not fit (named fields, missing positions,
        stray braces) is returned unformatted.
        """
        pattern = self.get(key, default_pattern)
        if pattern is None or not params:
            return pattern
        try:
            return pattern.format(*params)
        except (KeyError, IndexError, ValueError) as exc:
            logger.warning("Cannot format message %r with %d params: %s", key, len(params), exc)
            return pattern

    def get_stats(self) -> Dict[str, Any]:
        with self._stats_lock:
            stats = dict(self.stats)
        total_requests = stats["hits"] + stats["misses"]
        hit_rate = (stats["hits"] / total_requests * 100) if total_requests > 0 else 0
        return {
            **stats,
            "hit_rate_percent": round(hit_rate, 1),
            "total_requests": total_requests,
            "entries": len(self),
            "capacity": self._capacity,
            "language": self._store.language,
        }
