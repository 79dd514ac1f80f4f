"""
LSD radix sort (base 10) for non-negative integers.

Steps:
1. Reject elements that are not integers or are negative.
2. Find the maximum element with `less` (first maximal element wins) and count
   its base-10 digits; a maximum of 0 still takes one pass.
3. For exp = 1, 10, 100, ... run a stable counting pass keyed on
   (x // exp) % 10: histogram, prefix sums, then a reverse scan placing each
   element at --count[digit].
4. Check every adjacent pair of the result: it must be in ascending numeric
   order and `less` must not put the right element first.

The passes order by numeric value, whatever `less` says. Step 2 also trusts
`less` to find the numeric maximum; a comparator that picks a smaller element
leaves too few passes and the result is only partly sorted. Either way a
comparator that disagrees with ascending numeric order (e.g. `operator.gt`)
is reported as `ComparatorMismatchError` instead of returning such a list.

O(d * (n + 10)) where d is the digit count of the maximum.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from sortcatalog.errors import ComparatorMismatchError, UnsupportedElementError

from ._contract import DEFAULT_LESS, Less, as_list_checked

__all__ = ["sort", "digit_count", "counting_pass"]

BASE = 10


def _check_elements(xs: List[int]) -> None:
    for i, x in enumerate(xs):
        if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)):
            raise UnsupportedElementError(i, x, "radix sort needs integers")
        if x < 0:
            raise UnsupportedElementError(i, x, "radix sort needs non-negative values")


def _max_element(xs: List[int], less: Less) -> int:
    best = xs[0]
    for x in xs[1:]:
        if less(best, x):
            best = x
    return best


def digit_count(value: int) -> int:
    """Number of base-10 digits in a non-negative integer (0 -> 1)."""
    value = int(value)
    digits = 1
    while value >= BASE:
        value //= BASE
        digits += 1
    return digits


def counting_pass(xs: List[int], exp: int) -> List[int]:
    """One stable counting sort of `xs` keyed on the digit at `exp`; returns a new list."""
    count = [0] * BASE
    for x in xs:
        count[(int(x) // exp) % BASE] += 1

    for d in range(1, BASE):
        count[d] += count[d - 1]

    out: List[int] = [0] * len(xs)
    # Right to left keeps equal digits in input order
    for x in reversed(xs):
        d = (int(x) // exp) % BASE
        count[d] -= 1
        out[count[d]] = x
    return out


def sort(a: Sequence[int], less: Less = DEFAULT_LESS) -> List[int]:
    out = as_list_checked(a)
    _check_elements(out)

    exp = 1
    for _ in range(digit_count(_max_element(out, less))):
        out = counting_pass(out, exp)
        exp *= BASE

    for i in range(len(out) - 1):
        if out[i] > out[i + 1] or less(out[i + 1], out[i]):
            raise ComparatorMismatchError(i, out[i], out[i + 1])
    return out
