"""
Shared result contract for every upstream call.

OperationResult is a tagged union: a success carries data and no error,
a failure carries an error message and no data. Callers branch on
``success`` before touching ``data``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

UNKNOWN_ERROR = "Unknown error occurred"


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[T]):
    """
    Outcome of one upstream operation.

    Attributes:
        success: True when ``data`` holds the normalized payload.
        data: The normalized payload, None on failure.
        error: Human-readable failure message, None on success.
    """

    success: bool
    data: T | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("A failed result needs an error message")

    @classmethod
    def ok(cls, data: T) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str | None) -> "OperationResult[T]":
        return cls(success=False, error=error or UNKNOWN_ERROR)
