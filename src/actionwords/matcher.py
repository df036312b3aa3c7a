"""Single-entry keyword matching."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .actions import ActionEntry

ABBREVIATION_MARKER = "."
MIN_TOKEN_LENGTH = 2


class MatchKind(Enum):
    NONE = "none"
    ABBREVIATION = "abbreviation"
    EXACT = "exact"


@dataclass(frozen=True)
class MatchResult:
    kind: MatchKind
    index: int = 0  # 1-based keyword position, 0 for no match

    @property
    def signed_index(self) -> int:
        """+index for exact, -index for abbreviation, 0 for no match."""
        if self.kind is MatchKind.EXACT:
            return self.index
        if self.kind is MatchKind.ABBREVIATION:
            return -self.index
        return 0

    def __bool__(self) -> bool:
        return self.kind is not MatchKind.NONE


NO_MATCH = MatchResult(MatchKind.NONE)


def normalize_token(token: Optional[str]) -> Optional[str]:
    """Drop one trailing abbreviation marker; None if the rest is too short."""
    if token is None or len(token) < MIN_TOKEN_LENGTH:
        return None
    if token.endswith(ABBREVIATION_MARKER):
        token = token[:-1]
        if len(token) < MIN_TOKEN_LENGTH:
            return None
    return token


def starts_with(keyword: str, token: str, ignore_case: bool) -> bool:
    if len(token) > len(keyword):
        return False
    head = keyword[: len(token)]
    if ignore_case:
        return head.lower() == token.lower()
    return head == token


def match_normalized(entry: ActionEntry, token: str, ignore_case: bool) -> MatchResult:
    """Match an already normalized token; first matching keyword wins."""
    if not entry.keywords:
        return NO_MATCH
    for position, keyword in enumerate(entry.keywords, start=1):
        if keyword is None or len(keyword) < len(token):
            continue
        if starts_with(keyword, token, ignore_case):
            kind = MatchKind.EXACT if len(keyword) == len(token) else MatchKind.ABBREVIATION
            return MatchResult(kind, position)
    return NO_MATCH


def match(entry: ActionEntry, token: Optional[str], ignore_case: bool = False) -> MatchResult:
    normalized = normalize_token(token)
    if normalized is None:
        return NO_MATCH
    return match_normalized(entry, normalized, ignore_case)
