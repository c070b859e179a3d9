"""Explicit result type for service operations that reach external systems."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(Enum):
    """Outcome of a service operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Value or failure reason returned by a service operation.

    Callers branch on ``status`` instead of testing for ``None``.
    """

    status: ResultStatus
    value: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(status=ResultStatus.SUCCESS, value=value)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls(status=ResultStatus.NOT_FOUND, message=message)

    @classmethod
    def upstream_failure(cls, message: str) -> "Result[T]":
        return cls(status=ResultStatus.UPSTREAM_FAILURE, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS
