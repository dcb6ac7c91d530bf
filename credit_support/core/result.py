"""Result[T, E] -- error values instead of exceptions.

Calculations that can fail return ``Ok[T] | Err[E]``; callers pattern-match
on the variant. ``unwrap`` is reserved for tests and process boundaries.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant."""

    value: T

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Short-circuit: f is never called."""
        return self


def unwrap(result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
