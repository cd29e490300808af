"""Shared value types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FieldResult(Generic[T]):
    """Outcome of a best-effort field decoding: either a value or an error."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FieldResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "FieldResult[T]":
        return cls(error=error)
