"""
Keyword to action resolution.

A token is resolved against an ordered table in a single pass:
- the first exact keyword match anywhere in the table wins outright
- otherwise a unique abbreviation match wins
- abbreviation matches of two non-equal entries are ambiguous and resolve
  to nothing, unless an exact match turns up later in the scan
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .actions import ActionEntry
from .filters import Filter
from .matcher import MatchKind, match_normalized, normalize_token


class Outcome(Enum):
    RESOLVED_EXACT = "resolved_exact"
    RESOLVED_ABBREVIATION = "resolved_abbreviation"
    INVALID_TOKEN = "invalid_token"
    NO_MATCH = "no_match"
    AMBIGUOUS = "ambiguous"


class AbbreviationStatus(Enum):
    UNSET = "unset"
    CANDIDATE = "candidate"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class AbbreviationState:
    """Abbreviation bookkeeping; only moves UNSET -> CANDIDATE -> AMBIGUOUS."""
    status: AbbreviationStatus = AbbreviationStatus.UNSET
    entry: Optional[ActionEntry] = None
    index: int = 0

    def record(self, entry: ActionEntry, index: int) -> "AbbreviationState":
        if self.status is AbbreviationStatus.UNSET:
            return AbbreviationState(AbbreviationStatus.CANDIDATE, entry, index)
        if self.status is AbbreviationStatus.CANDIDATE and entry != self.entry:
            return AbbreviationState(AbbreviationStatus.AMBIGUOUS)
        return self


@dataclass(frozen=True)
class Resolution:
    outcome: Outcome
    entry: Optional[ActionEntry] = None
    signed_index: int = 0
    token: Optional[str] = None  # normalized token

    @property
    def resolved(self) -> bool:
        return self.entry is not None


def explain(
    table: Optional[Iterable[Optional[ActionEntry]]],
    token: Optional[str],
    accept: Optional[Filter] = None,
    ignore_case: bool = True,
) -> Resolution:
    """Resolve ``token`` and report why the result is what it is."""
    normalized = normalize_token(token)
    if normalized is None:
        return Resolution(Outcome.INVALID_TOKEN)
    if not table:
        return Resolution(Outcome.NO_MATCH, token=normalized)

    state = AbbreviationState()
    for entry in table:
        if entry is None:
            continue
        if accept is not None and not accept(entry):
            continue
        result = match_normalized(entry, normalized, ignore_case)
        if result.kind is MatchKind.EXACT:
            return Resolution(Outcome.RESOLVED_EXACT, entry, result.signed_index, normalized)
        if result.kind is MatchKind.ABBREVIATION:
            state = state.record(entry, result.signed_index)

    if state.status is AbbreviationStatus.CANDIDATE:
        return Resolution(Outcome.RESOLVED_ABBREVIATION, state.entry, state.index, normalized)
    if state.status is AbbreviationStatus.AMBIGUOUS:
        return Resolution(Outcome.AMBIGUOUS, token=normalized)
    return Resolution(Outcome.NO_MATCH, token=normalized)


def resolve(
    table: Optional[Iterable[Optional[ActionEntry]]],
    token: Optional[str],
    accept: Optional[Filter] = None,
    ignore_case: bool = True,
) -> Optional[ActionEntry]:
    return explain(table, token, accept, ignore_case).entry
