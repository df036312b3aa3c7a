"""Language keyed translation table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

import yaml

from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_LANGUAGES = ("en", "de")


def normalize_language(code: str) -> str:
    """Two letter lower case language code, e.g. ' DE ' -> 'de'."""
    normalized = str(code).strip().lower() if code is not None else ""
    if len(normalized) != 2 or not normalized.isalpha():
        raise ValueError(f"invalid language code: {code!r}")
    return normalized


class TranslationStore:
    """
    Mutable {language: {key: value}} table.

    Lookups run under the shared read lock, mutations under the write lock.
    A key missing in the current language is looked up in the fallback
    languages in order.
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, Mapping[str, str]]] = None,
        language: str = "en",
        fallback_languages: Iterable[str] = DEFAULT_FALLBACK_LANGUAGES,
        lock: Optional[ReadWriteLock] = None,
    ) -> None:
        self._lock = lock or ReadWriteLock()
        self._tables: Dict[str, Dict[str, str]] = {}
        for lang, table in (translations or {}).items():
            self._tables[normalize_language(lang)] = {str(k): str(v) for k, v in (table or {}).items()}
        self._language = normalize_language(language)
        self._language_version = 0
        self._fallbacks: List[str] = [normalize_language(lang) for lang in fallback_languages]

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        language: str = "en",
        fallback_languages: Iterable[str] = DEFAULT_FALLBACK_LANGUAGES,
        lock: Optional[ReadWriteLock] = None,
    ) -> "TranslationStore":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Translations file not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise ValueError(f"translations {path} must map languages to tables")
        store = cls(data, language, fallback_languages, lock)
        logger.info("Loaded translations for %s from %s", ", ".join(store.languages()), path)
        return store

    @property
    def lock(self) -> ReadWriteLock:
        return self._lock

    @property
    def language(self) -> str:
        return self._language

    @property
    def language_version(self) -> int:
        """Bumped on every language switch; caches compare it to drop stale slots."""
        return self._language_version

    def languages(self) -> List[str]:
        with self._lock.read_locked():
            return sorted(self._tables)

    def lookup(self, key: str) -> Optional[str]:
        with self._lock.read_locked():
            return self._lookup_unlocked(key)

    def _lookup_unlocked(self, key: str) -> Optional[str]:
        current = self._tables.get(self._language)
        if current is not None and key in current:
            return current[key]
        for lang in self._fallbacks:
            if lang == self._language:
                continue
            table = self._tables.get(lang)
            if table is not None and key in table:
                return table[key]
        return None

    def put(self, language: str, key: str, value: str) -> None:
        lang = normalize_language(language)
        with self._lock.write_locked():
            self._tables.setdefault(lang, {})[key] = value

    def update(self, language: str, mapping: Mapping[str, str]) -> None:
        lang = normalize_language(language)
        with self._lock.write_locked():
            self._tables.setdefault(lang, {}).update(mapping)

    def remove(self, language: str, key: str) -> bool:
        lang = normalize_language(language)
        with self._lock.write_locked():
            table = self._tables.get(lang)
            if table is None or key not in table:
                return False
            del table[key]
            return True

    def set_language(self, language: str) -> bool:
        """Switch the current language; True if it changed."""
        with self._lock.write_locked():
            return self._select_language(language)

    def _select_language(self, language: str) -> bool:
        lang = normalize_language(language)
        if lang == self._language:
            return False
        logger.debug("Translation language %s -> %s", self._language, lang)
        self._language = lang
        self._language_version += 1
        return True
