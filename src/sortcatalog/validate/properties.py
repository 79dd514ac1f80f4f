"""
Property helpers for validating sorting results.

These are the checks the test-suite and the benchmark runner apply to every
strategy's output. Ordering checks take the same `less` predicate that was
handed to the strategy.

Public API (stable):
    is_ordered(xs, less=operator.lt) -> bool
    first_order_violation_index(xs, less=operator.lt) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    is_stable(tagged_out, key=...) -> bool

Notes
-----
- Stability cannot be seen from values alone when equal keys are
  indistinguishable, so `is_stable` works on (key, tag) pairs where the tag is
  the element's original input position.
- `is_permutation` uses multiset counting, so elements must be hashable.
"""

from __future__ import annotations

import operator
from collections import Counter
from typing import Any, Callable, Dict, Hashable, Sequence, Tuple

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
]


def is_ordered(xs: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt) -> bool:
    """Return True iff less(xs[i+1], xs[i]) is False for all i."""
    return first_order_violation_index(xs, less) is None


def first_order_violation_index(
    xs: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt
) -> int | None:
    """
    Return the first index i where less(xs[i+1], xs[i]), or None if ordered.

    Useful for precise error messages:
        i = first_order_violation_index(out, less)
        assert i is None, f"out of order at i={i}: {out[i]} then {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if less(xs[i + 1], xs[i]):
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that a strategy left its input untouched.

    Raises AssertionError naming the length change or first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def is_stable(
    tagged_out: Sequence[Tuple[Any, int]],
    key: Callable[[Tuple[Any, int]], Any] = operator.itemgetter(0),
) -> bool:
    """
    Return True iff elements with equal keys appear in increasing tag order.

    `tagged_out` holds (key, tag) pairs, tag being the original input index.
    """
    last_tag: Dict[Any, int] = {}
    for item in tagged_out:
        k = key(item)
        tag = item[1]
        if k in last_tag and last_tag[k] > tag:
            return False
        last_tag[k] = tag
    return True
