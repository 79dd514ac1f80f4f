"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth. The caller's `less`
predicate is turned into a key with `functools.cmp_to_key`, so the oracle
honours the same ordering the strategies are given:
- Deterministic and portable
- Stable, so it also serves as the reference for stable strategies

Public API (stable):
    oracle_sort(a, less=operator.lt) -> list
    equals_oracle(a, out, less=operator.lt) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- For distinguishable-but-equal elements only stable strategies are expected
  to match the oracle exactly; compare unstable ones via the properties module.
"""

from __future__ import annotations

import functools
import operator
from typing import Any, Callable, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "cmp_from_less"]


def cmp_from_less(less: Callable[[Any, Any], bool]) -> Callable[[Any, Any], int]:
    """Build a three-way comparison function from a strict `less` predicate."""

    def cmp(x: Any, y: Any) -> int:
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return 0

    return cmp


def oracle_sort(a: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt) -> List[Any]:
    """
    Return the ground-truth sorted output for `a` under `less`.

    Parameters
    ----------
    a : Sequence
        Input elements. The oracle does not mutate `a`.
    less : Callable[[x, y], bool]
        Strict ordering predicate; defaults to natural ascending order.

    Returns
    -------
    list
        A new list with the same elements as `a`, ordered by `less`.
    """
    if less is operator.lt:
        return sorted(a)
    return sorted(a, key=functools.cmp_to_key(cmp_from_less(less)))


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt
) -> bool:
    """True iff `out` is exactly equal to `oracle_sort(a, less)`."""
    return list(out) == oracle_sort(a, less)
