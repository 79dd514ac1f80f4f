"""
Quicksort with Lomuto partitioning (last element of the range as pivot).

Pending ranges live on an explicit stack rather than the Python call stack.
The larger side of each partition is pushed first so the smaller side is
handled next; the stack therefore never holds more than O(log n) ranges, even
on already-sorted input where every partition is maximally lopsided.

Average O(n log n), worst O(n^2) (sorted or reverse-sorted input). Not stable.
"""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort", "lomuto_partition"]


def lomuto_partition(arr: List[T], lo: int, hi: int, less: Less = DEFAULT_LESS) -> int:
    """
    Partition arr[lo..hi] (inclusive) around arr[hi] and return the pivot's final index.

    After the call every element left of the returned index satisfies
    `less(e, pivot)` and no element right of it does.
    """
    pivot = arr[hi]
    i = lo
    for j in range(lo, hi):
        if less(arr[j], pivot):
            arr[i], arr[j] = arr[j], arr[i]
            i += 1
    arr[i], arr[hi] = arr[hi], arr[i]
    return i


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    out = as_list_checked(a)

    stack = [(0, len(out) - 1)]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        p = lomuto_partition(out, lo, hi, less)
        left = (lo, p - 1)
        right = (p + 1, hi)
        # Smaller side on top of the stack
        if p - lo < hi - p:
            stack.append(right)
            stack.append(left)
        else:
            stack.append(left)
            stack.append(right)

    return out
