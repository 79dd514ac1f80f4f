"""
Rank-counting sort.

Every unordered pair (i, j), i < j, charges exactly one credit: to i when
`less(v[j], v[i])`, otherwise to j. After all n(n-1)/2 comparisons each
element's credit count is its 0-based rank, so it is written straight to that
index in the output.

O(n^2) time, O(n) extra space. Stable: when neither element precedes the
other the later one takes the credit, so the earlier one keeps the lower rank.
"""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort", "ranks"]


def ranks(xs: Sequence[T], less: Less = DEFAULT_LESS) -> List[int]:
    """Return the final 0-based position of each element of `xs`."""
    n = len(xs)
    credit = [0] * n
    for i in range(n - 1):
        x = xs[i]
        for j in range(i + 1, n):
            if less(xs[j], x):
                credit[i] += 1
            else:
                credit[j] += 1
    return credit


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    src = as_list_checked(a)

    out: List[T] = [None] * len(src)  # type: ignore[list-item]
    for x, r in zip(src, ranks(src, less)):
        out[r] = x
    return out
