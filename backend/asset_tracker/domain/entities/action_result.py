"""Uniform success/failure value returned by the action wrapper."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ActionResult(Generic[T]):
    """Result of one user-facing action.

    Failures carry a short human-readable ``message`` and the
    ``error_code`` of the exception that caused them.
    """

    success: bool
    data: T | None = None
    message: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ActionResult[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, error_code: str = "failed") -> "ActionResult[T]":
        return cls(success=False, message=message, error_code=error_code)
