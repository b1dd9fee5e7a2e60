"""Explicit outcome of a manager operation — the caller decides how to present it."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    FETCH = "fetch"
    MUTATION = "mutation"
    VALIDATION = "validation"
    BUSY = "busy"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OperationResult:
    """Success payload or structured error of one operation."""

    ok: bool
    value: Any = None
    error: str | None = None
    kind: ErrorKind | None = None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "OperationResult":
        return cls(ok=False, error=message, kind=kind)

    def __bool__(self) -> bool:
        return self.ok
