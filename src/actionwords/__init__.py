"""
Polyglot keyword resolution.

Maps short, possibly abbreviated, multilingual tokens onto (code, value)
actions with deterministic handling of ambiguous abbreviations.
"""

from .actions import ActionCode, ActionEntry
from .filters import Filter, accept_all, any_code_filter, code_filter
from .matcher import MatchKind, MatchResult, match, normalize_token
from .registry import ActionRegistry
from .resolver import Outcome, Resolution, explain, resolve

__all__ = [
    'ActionCode', 'ActionEntry',
    'Filter', 'accept_all', 'any_code_filter', 'code_filter',
    'MatchKind', 'MatchResult', 'match', 'normalize_token',
    'ActionRegistry',
    'Outcome', 'Resolution', 'explain', 'resolve',
]
