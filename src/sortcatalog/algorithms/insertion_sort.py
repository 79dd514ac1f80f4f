"""
Insertion sort.

Grows a sorted prefix; each new element shifts left past every prefix element
it must precede. O(n^2) worst/average, O(n) on already-sorted input. Stable:
only strictly-greater elements are shifted.
"""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort"]


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    out = as_list_checked(a)

    for i in range(1, len(out)):
        key = out[i]
        j = i - 1
        while j >= 0 and less(key, out[j]):
            out[j + 1] = out[j]  # move up one position
            j -= 1
        out[j + 1] = key

    return out
