#!/usr/bin/env python3
"""
Unit tests for the bounded translation lookup cache
Ring buffer eviction, fill-on-miss, language switching, stats
"""

import logging
import sys
import threading
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from actionwords.config import CacheConfig
from langcache import build_cache
from langcache.cache import DEFAULT_CAPACITY, BoundedLookupCache, trim_key
from langcache.store import TranslationStore

TRANSLATIONS = {
    "en": {"mon": "Monday", "tue": "Tuesday", "wed": "Wednesday", "wedaclock": "{0}, {1} {2}"},
    "de": {"mon": "Montag", "tue": "Dienstag", "abort": "Abbruch"},
    "fr": {"mon": "lundi"},
}


@pytest.fixture
def store():
    return TranslationStore(TRANSLATIONS, language="en")


@pytest.fixture
def cache(store):
    return BoundedLookupCache(store)


class TestLookup:
    """Fill on miss, serve on hit."""

    def test_miss_then_hit(self, cache):
        assert cache.get("mon") == "Monday"
        assert cache.get("mon") == "Monday"

        stats = cache.get_stats()
        assert stats["misses"] == 1
        assert stats["hits"] == 1
        assert stats["writes"] == 1
        assert stats["entries"] == 1
        assert stats["hit_rate_percent"] == 50.0

    def test_repeated_gets_are_stable(self, cache):
        values = {cache.get("tue") for _ in range(50)}
        assert values == {"Tuesday"}

    def test_absent_value_cached_default_not_stored(self, cache):
        assert cache.get("nope") is None
        assert cache.get("nope", "fallback") == "fallback"
        assert "nope" in cache
        assert cache.get_stats()["misses"] == 1

    def test_key_trimming(self, cache):
        assert cache.get("  'mon' ") == "Monday"
        assert cache.get(' "mon"') == "Monday"
        assert cache.get("   ", "dflt") == "dflt"
        assert cache.get(None, "dflt") == "dflt"
        assert len(cache) == 1

    def test_fallback_language(self, store, cache):
        store.set_language("fr")
        assert cache.get("mon") == "lundi"
        assert cache.get("wed") == "Wednesday"
        assert cache.get("abort") == "Abbruch"

    def test_stale_until_overwritten_or_cleared(self, store, cache):
        assert cache.get("thu") is None
        store.put("en", "thu", "Thursday")

        assert cache.get("thu") is None
        assert store.lookup("thu") == "Thursday"

        cache.clear()
        assert cache.get("thu") == "Thursday"


class TestRingBuffer:
    """Overwrite-oldest eviction, independent of reads."""

    def test_default_capacity(self, cache):
        assert cache.capacity == DEFAULT_CAPACITY == 17

    def test_capacity_plus_one_evicts_first(self, store, cache):
        for i in range(DEFAULT_CAPACITY + 1):
            store.put("en", f"k{i}", f"v{i}")
        for i in range(DEFAULT_CAPACITY + 1):
            cache.get(f"k{i}")

        assert "k0" not in cache
        assert all(f"k{i}" in cache for i in range(1, DEFAULT_CAPACITY + 1))
        assert store.lookup("k0") == "v0"
        assert cache.get_stats()["evictions"] == 1
        assert len(cache) == DEFAULT_CAPACITY

    def test_reads_do_not_promote(self, store):
        cache = BoundedLookupCache(store, capacity=2)
        cache.get("mon")
        cache.get("tue")
        cache.get("mon")  # hit, not promoted
        cache.get("wed")

        assert "mon" not in cache
        assert "tue" in cache
        assert "wed" in cache

    def test_duplicate_key_may_take_two_slots(self, store):
        cache = BoundedLookupCache(store, capacity=3)
        cache._insert("mon", "Monday", cache._generation, cache._language_version)
        cache._insert("mon", "Monday", cache._generation, cache._language_version)

        assert len(cache) == 2
        assert cache.get("mon") == "Monday"

    def test_insert_after_clear_is_dropped(self, cache):
        generation = cache._generation
        language_version = cache._language_version
        cache.clear()
        cache._insert("mon", "Monday", generation, language_version)

        assert "mon" not in cache

    def test_invalid_capacity(self, store):
        with pytest.raises(ValueError):
            BoundedLookupCache(store, capacity=0)


class TestLanguageSwitch:
    def test_switch_clears_cache(self, store, cache):
        assert cache.get("mon") == "Monday"

        assert cache.switch_language(" DE ") is True
        assert len(cache) == 0
        assert store.language == "de"
        assert cache.get("mon") == "Montag"

    def test_same_language_keeps_cache(self, cache):
        cache.get("mon")
        assert cache.switch_language("en") is False
        assert "mon" in cache

    def test_switch_through_store_is_noticed(self, store, cache):
        assert cache.get("mon") == "Monday"
        assert "mon" in cache

        store.set_language("de")

        assert "mon" not in cache
        assert cache.get("mon") == "Montag"
        assert cache.get("tue") == "Dienstag"

        store.set_language("en")
        assert cache.get("mon") == "Monday"

    def test_switch_logged_at_debug(self, cache, caplog):
        with caplog.at_level(logging.DEBUG, logger="langcache.cache"):
            cache.switch_language("fr")

        switched = [r for r in caplog.records if "switched to fr" in r.getMessage()]
        assert [r.levelno for r in switched] == [logging.DEBUG]

    def test_bad_language(self, cache):
        with pytest.raises(ValueError):
            cache.switch_language("english")


class TestFormatMessage:
    def test_pattern_with_params(self, cache):
        assert cache.format_message("wedaclock", None, "Monday", 2, "March") == "Monday, 2 March"

    def test_default_pattern(self, cache):
        assert cache.format_message("missing", "{0}!", "hi") == "hi!"
        assert cache.format_message("missing") is None
        assert cache.format_message("mon") == "Monday"

    def test_params_without_placeholders(self, cache):
        assert cache.format_message("mon", None, "ignored") == "Monday"

    def test_unfit_pattern_is_returned_unformatted(self, cache):
        assert cache.format_message("missing", "{day} at {0}", "noon") == "{day} at {0}"
        assert cache.format_message("missing", "{0} {1}", "only") == "{0} {1}"
        assert cache.format_message("missing", "set {a", "x") == "set {a"


class TestConcurrency:
    def test_readers_and_writers(self, store):
        cache = BoundedLookupCache(store, capacity=4)
        keys = ["mon", "tue", "wed", "k1", "k2", "k3"]
        errors = []
        stop = threading.Event()

        def reader():
            try:
                for _ in range(300):
                    for key in keys:
                        value = cache.get(key, "")
                        assert value in {"", "Monday", "Tuesday", "Wednesday", "x1", "x2", "x3"}
            except Exception as exc:  # noqa: BLE001
                errors.append(exc)

        def writer():
            i = 0
            while not stop.is_set():
                i = i % 3 + 1
                store.put("en", f"k{i}", f"x{i}")
                store.remove("en", f"k{i}")

        threads = [threading.Thread(target=reader) for _ in range(4)]
        mutator = threading.Thread(target=writer)
        mutator.start()
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)
        stop.set()
        mutator.join(timeout=5)

        assert not errors
        assert len(cache) <= 4
        stats = cache.get_stats()
        assert stats["hits"] + stats["misses"] == 4 * 300 * len(keys)


class TestHelpers:
    def test_trim_key(self):
        assert trim_key(" a ") == "a"
        assert trim_key("'a b'") == "a b"
        assert trim_key("'") == "'"
        assert trim_key("''") is None
        assert trim_key(None) is None

    def test_build_cache_shares_lock(self, tmp_path):
        source = tmp_path / "translations.yml"
        source.write_text("en:\n  mon: Monday\nde:\n  mon: Montag\n", encoding="utf-8")
        cfg = CacheConfig(
            capacity=5, language="de", fallback_languages=("en",), translations_path=source
        )

        cache = build_cache(cfg)

        assert cache.capacity == 5
        assert cache.store.lock is cache._lock
        assert cache.get("mon") == "Montag"

    def test_build_cache_without_file(self):
        cfg = CacheConfig(capacity=3, language="en", fallback_languages=(), translations_path=None)
        cache = build_cache(cfg)
        assert cache.get("mon", "?") == "?"
