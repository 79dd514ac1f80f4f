"""Selection sort: swap the minimum of the unsorted suffix to the front. O(n^2), not stable."""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort"]


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    out = as_list_checked(a)
    n = len(out)

    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            # Strict test: the first of several equal minima wins
            if less(out[j], out[min_index]):
                min_index = j
        if min_index != i:
            out[i], out[min_index] = out[min_index], out[i]

    return out
