"""File-backed action vocabulary registry."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import yaml

from .actions import ActionEntry
from .config import ActionWordsConfig
from .filters import code_filter
from .observability import ResolutionLogRecord
from .resolver import Resolution, explain
from .vocabularies import TIME_CHOOSE

logger = logging.getLogger(__name__)


def _entry_from_dict(item: Any, position: int) -> ActionEntry:
    if not isinstance(item, dict):
        raise ValueError(f"vocabulary item {position} is not a mapping: {item!r}")
    missing = [name for name in ("code", "value") if name not in item]
    if missing:
        raise ValueError(f"vocabulary item {position} lacks {', '.join(missing)}")
    keywords = item.get("keywords", [])
    if not isinstance(keywords, list):
        raise ValueError(f"vocabulary item {position}: keywords must be a list")
    for key in keywords:
        # unquoted YAML words like off/no/on load as booleans
        if key is not None and not isinstance(key, str):
            raise ValueError(f"vocabulary item {position}: keyword {key!r} is not a string, quote it")
    return ActionEntry(
        code=int(item["code"]),
        value=int(item["value"]),
        keywords=tuple(None if key is None else key.strip() for key in keywords),
    )


def load_entries(path: Path) -> Tuple[ActionEntry, ...]:
    if not path.exists():
        raise FileNotFoundError(f"Vocabulary file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() in {".yml", ".yaml"}:
            data = yaml.safe_load(handle) or []
        else:
            data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError(f"vocabulary {path} must hold a list of actions")
    return tuple(_entry_from_dict(item, pos) for pos, item in enumerate(data))


class ActionRegistry:
    def __init__(self, path: Optional[Path] = None, ignore_case: bool = True) -> None:
        self._path = Path(path) if path is not None else None
        self._ignore_case = ignore_case
        self._entries: Tuple[ActionEntry, ...] = ()
        if self._path is not None:
            self._load()

    @classmethod
    def from_entries(cls, entries: Iterable[ActionEntry], ignore_case: bool = True) -> "ActionRegistry":
        registry = cls(ignore_case=ignore_case)
        registry._entries = tuple(entries)
        return registry

    @classmethod
    def from_config(cls, config: ActionWordsConfig) -> "ActionRegistry":
        if config.vocabulary_path is not None:
            return cls(config.vocabulary_path, ignore_case=config.ignore_case)
        return cls.from_entries(TIME_CHOOSE, ignore_case=config.ignore_case)

    def _load(self) -> None:
        self._entries = load_entries(self._path)
        logger.info("Loaded %d actions from %s", len(self._entries), self._path)

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    def explain(self, token: Optional[str], code: Optional[int] = None) -> Resolution:
        started = time.perf_counter()
        narrowed = code_filter(code) if code is not None else None
        resolution = explain(self._entries, token, narrowed, self._ignore_case)
        if not logger.isEnabledFor(logging.DEBUG):
            return resolution
        record = ResolutionLogRecord.from_resolution(
            token,
            resolution,
            ignore_case=self._ignore_case,
            table_size=len(self._entries),
            code_filter=code,
            latency_ms=(time.perf_counter() - started) * 1000,
        )
        logger.debug("resolution %s", record.to_dict())
        return resolution

    def match(self, token: Optional[str], code: Optional[int] = None) -> Optional[ActionEntry]:
        return self.explain(token, code).entry

    def entries(self) -> Tuple[ActionEntry, ...]:
        return self._entries

    def codes(self) -> List[int]:
        seen: List[int] = []
        for entry in self._entries:
            if entry.code not in seen:
                seen.append(entry.code)
        return seen

    def __len__(self) -> int:
        return len(self._entries)


if __name__ == "__main__":
    import sys

    logging.basicConfig(level=logging.DEBUG)
    registry = ActionRegistry.from_entries(TIME_CHOOSE)
    for word in sys.argv[1:] or ["now", "Tu", "Mo", "cEt", "wes."]:
        found = registry.explain(word)
        print(f"{word!r:>12} -> {found.outcome.value}: {found.entry}")
