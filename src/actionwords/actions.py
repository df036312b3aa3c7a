"""Action entries: (code, value) pairs selectable by polyglot keywords."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence


class ActionCode(IntEnum):
    """Well-known action categories used by the built-in vocabularies."""
    NOP = 0
    WEEKDAY = 3
    MONTH = 4
    TIME_ZONE_OFFSET = 5
    TIME_OF_DAY = 6
    DAY = 7
    DATE = 8
    RATE = 11
    VERBOSITY = 13
    COLOR = 32


@dataclass(frozen=True)
class ActionEntry:
    """
    One selectable action.

    Two entries are equal when code and value match; the keyword lists are
    not compared. The keyword sequence is held as given, callers must not
    mutate it after construction.
    """
    code: int
    value: int
    keywords: Sequence[Optional[str]] = field(default=(), compare=False)

    @property
    def keyword_count(self) -> int:
        return len(self.keywords) if self.keywords is not None else 0

    def get_key(self, number: int) -> Optional[str]:
        """Keyword at a signed 1-based position (sign ignored, 0 is invalid)."""
        if number < 0:
            number = -number
        if number == 0 or number > self.keyword_count:
            return None
        return self.keywords[number - 1]

    def __str__(self) -> str:
        head = f"Action({self.code}, {self.value}) : "
        if self.keyword_count == 0:
            return head + "< no keys >"
        return head + ", ".join(str(key) for key in self.keywords)
