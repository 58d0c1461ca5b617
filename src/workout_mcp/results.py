"""
Tagged tool results.

Operations return a ToolResult rather than raw text so callers can tell a
missing record from an upstream failure. Transports flatten it with
to_envelope() into the MCP content shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResultStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ErrorKind(str, Enum):
    UPSTREAM_FAILURE = "upstream_failure"
    INVALID_ARGUMENTS = "invalid_arguments"


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a single tool invocation."""
    status: ResultStatus
    text: str
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(ResultStatus.OK, text)

    @classmethod
    def not_found(cls, text: str) -> "ToolResult":
        return cls(ResultStatus.NOT_FOUND, text)

    @classmethod
    def error(cls, kind: ErrorKind, text: str) -> "ToolResult":
        return cls(ResultStatus.ERROR, text, kind)

    @property
    def success(self) -> bool:
        """A missing record is a normal outcome, not a failure."""
        return self.status is not ResultStatus.ERROR

    def to_envelope(self) -> dict:
        """Flatten to {"content": [{"type": "text", "text": ...}]}."""
        return {"content": [{"type": "text", "text": self.text}]}
