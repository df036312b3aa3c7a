"""Resolution decision log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

from .resolver import Outcome, Resolution

RESOLUTION_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "resolved_at",
        "token",
        "outcome",
        "ignore_case",
        "table_size",
        "code",
        "value",
        "keyword_index",
    ],
    "properties": {
        "resolved_at": {"type": "string", "format": "date-time"},
        "token": {"type": ["string", "null"]},
        "normalized_token": {"type": ["string", "null"]},
        "outcome": {"type": "string", "enum": [outcome.value for outcome in Outcome]},
        "ignore_case": {"type": "boolean"},
        "table_size": {"type": "integer", "minimum": 0},
        "code_filter": {"type": ["integer", "null"]},
        "code": {"type": ["integer", "null"]},
        "value": {"type": ["integer", "null"]},
        "keyword": {"type": ["string", "null"]},
        "keyword_index": {"type": "integer"},
        "latency_ms": {"type": "number", "minimum": 0},
    },
}

_validator = Draft7Validator(RESOLUTION_SCHEMA)


def validate_resolution(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"resolution log validation failed: {messages}")


@dataclass
class ResolutionLogRecord:
    token: Optional[str]
    outcome: str
    ignore_case: bool
    table_size: int
    code: Optional[int] = None
    value: Optional[int] = None
    keyword: Optional[str] = None
    keyword_index: int = 0
    normalized_token: Optional[str] = None
    code_filter: Optional[int] = None
    latency_ms: float = 0.0
    resolved_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def from_resolution(
        cls,
        token: Optional[str],
        resolution: Resolution,
        ignore_case: bool,
        table_size: int,
        code_filter: Optional[int] = None,
        latency_ms: float = 0.0,
    ) -> "ResolutionLogRecord":
        entry = resolution.entry
        return cls(
            token=token,
            outcome=resolution.outcome.value,
            ignore_case=ignore_case,
            table_size=table_size,
            code=int(entry.code) if entry else None,
            value=int(entry.value) if entry else None,
            keyword=entry.get_key(resolution.signed_index) if entry else None,
            keyword_index=resolution.signed_index,
            normalized_token=resolution.token,
            code_filter=code_filter,
            latency_ms=latency_ms,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "resolved_at": self.resolved_at,
            "token": self.token,
            "normalized_token": self.normalized_token,
            "outcome": self.outcome,
            "ignore_case": self.ignore_case,
            "table_size": self.table_size,
            "code_filter": self.code_filter,
            "code": self.code,
            "value": self.value,
            "keyword": self.keyword,
            "keyword_index": self.keyword_index,
            "latency_ms": self.latency_ms,
        }
        validate_resolution(payload)
        return payload
