"""
The shared sorting contract.

Every strategy module in this package exposes one function with the same
shape:

    sort(a: Sequence[T], less: Less[T] = operator.lt) -> list[T]

Conventions:
- `less(x, y)` is True iff `x` must come before `y`; it must be a strict
  weak ordering over the elements present (not checked).
- The input is never mutated. Strategies work on, and return, a new list.
- An empty input raises `EmptySequenceError` before any other work.
"""

from __future__ import annotations

import operator
from typing import Callable, List, Sequence, TypeVar

from sortcatalog.errors import EmptySequenceError

__all__ = ["T", "Less", "SortFn", "DEFAULT_LESS", "as_list_checked"]

T = TypeVar("T")

Less = Callable[[T, T], bool]
SortFn = Callable[..., List[T]]

DEFAULT_LESS: Callable[[object, object], bool] = operator.lt


def as_list_checked(a: Sequence[T]) -> List[T]:
    """Return a fresh list copy of `a`, raising EmptySequenceError if it is empty."""
    out = list(a)
    if not out:
        raise EmptySequenceError()
    return out
