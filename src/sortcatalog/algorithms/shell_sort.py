"""
Shell sort with the halving gap sequence n//2, n//4, ..., 1.

Each round is an insertion sort over elements `gap` apart. Worst case O(n^2)
for this gap sequence, usually much better. Not stable.
"""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort", "gap_sequence"]


def gap_sequence(n: int) -> List[int]:
    """Return the gaps used for a sequence of length n, largest first."""
    gaps = []
    gap = n // 2
    while gap > 0:
        gaps.append(gap)
        gap //= 2
    return gaps


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    out = as_list_checked(a)
    n = len(out)

    for gap in gap_sequence(n):
        for i in range(gap, n):
            tmp = out[i]
            j = i
            while j >= gap and less(tmp, out[j - gap]):
                out[j] = out[j - gap]
                j -= gap
            out[j] = tmp

    return out
