"""Explicit success/failure values for pure parsers.

Validators return `Ok` or `Err` instead of raising, so call sites have to
look at the failure branch (typically with `match`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from core.domain.errors import HttpieLiteError

T = TypeVar("T")
E = TypeVar("E", bound=HttpieLiteError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""

        raise self.error


Result = Union[Ok[T], Err[E]]
