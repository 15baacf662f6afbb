"""Outcome values returned by protected attempts.

``CircuitBreaker.attempt`` never raises for an operation failure or a
rejection; it returns either ``Success`` or ``Failure`` instead.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Attempt that ran and returned ``value``."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: T) -> T:
        _ = default
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def if_success(self, callback: Callable[[T], object]) -> "Success[T]":
        callback(self.value)
        return self

    def if_failure(self, callback: Callable[[Exception], object]) -> "Success[T]":
        _ = callback
        return self


@dataclass(frozen=True, slots=True)
class Failure:
    """Attempt that failed or was rejected; ``error`` explains why."""

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        """Raise the captured error."""
        raise self.error

    def get_or_else(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[object], object]) -> "Failure":
        _ = fn
        return self

    def if_success(self, callback: Callable[[object], object]) -> "Failure":
        _ = callback
        return self

    def if_failure(self, callback: Callable[[Exception], object]) -> "Failure":
        callback(self.error)
        return self


Result = Success[T] | Failure
