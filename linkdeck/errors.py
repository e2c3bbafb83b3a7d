"""Structured error reports shown to the user."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any


class ErrorType(enum.Enum):
    ERROR = "Error"
    WARNING = "Warning"


def _strings(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return tuple(value)


def _string(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass(frozen=True)
class ErrorReporter:
    """A finished report: what went wrong, why, and how to fix it."""

    actual_error: str
    why_error: tuple[str, ...]
    how_to_fix: tuple[str, ...]
    error_title: str
    when_error: str
    error_type: ErrorType

    def to_dict(self) -> dict[str, Any]:
        return {
            "actual_error": self.actual_error,
            "why_error": list(self.why_error),
            "how_to_fix": list(self.how_to_fix),
            "error_title": self.error_title,
            "when_error": self.when_error,
            "error_type": self.error_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ErrorReporter:
        if not isinstance(data, dict):
            raise ValueError("an error report must be an object")
        try:
            return cls(
                actual_error=_string(data, "actual_error"),
                why_error=_strings(data, "why_error"),
                how_to_fix=_strings(data, "how_to_fix"),
                error_title=_string(data, "error_title"),
                when_error=_string(data, "when_error"),
                error_type=ErrorType(data["error_type"]),
            )
        except KeyError as err:
            raise ValueError(f"missing field {err.args[0]!r}") from None

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> ErrorReporter:
        return cls.from_dict(json.loads(text))


@dataclass
class ErrorReporterBuilder:
    """Collects the parts of a report; ``build`` phrases them for display."""

    actual_error: str
    error_title: str
    when_error: str
    error_type: ErrorType
    why_error: list[str] = field(default_factory=list)
    how_to_fix: list[str] = field(default_factory=list)

    def build(self) -> ErrorReporter:
        return ErrorReporter(
            actual_error=self.actual_error,
            why_error=tuple(self.why_error),
            how_to_fix=tuple(self.how_to_fix),
            error_title=self.error_title,
            when_error=f"The error occurred when {self.when_error.lower()}",
            error_type=self.error_type,
        )