"""Predicates narrowing the candidate set before matching."""

from __future__ import annotations

from typing import Callable, Optional

from .actions import ActionEntry

Filter = Callable[[Optional[ActionEntry]], bool]


def accept_all(entry: Optional[ActionEntry]) -> bool:
    return entry is not None


def code_filter(code: int) -> Filter:
    def _accept(entry: Optional[ActionEntry]) -> bool:
        return entry is not None and entry.code == code

    return _accept


def any_code_filter(*codes: int) -> Filter:
    wanted = frozenset(codes)

    def _accept(entry: Optional[ActionEntry]) -> bool:
        return entry is not None and entry.code in wanted

    return _accept
