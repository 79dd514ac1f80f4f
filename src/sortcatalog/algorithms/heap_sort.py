"""
Heapsort over a max-heap ordered by `less`.

The heap is built by sifting down every non-leaf node from the middle of the
array to the root; the root is then repeatedly swapped with the last unsorted
slot and sifted down within the shrinking heap. Sift-down is a loop, not a
recursion. O(n log n) always, not stable.
"""

from __future__ import annotations

from typing import List, Sequence

from ._contract import DEFAULT_LESS, Less, T, as_list_checked

__all__ = ["sort", "sift_down"]


def sift_down(arr: List[T], heap_size: int, root: int, less: Less = DEFAULT_LESS) -> None:
    """Restore the heap property for the subtree rooted at `root` within arr[:heap_size]."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < heap_size and less(arr[largest], arr[left]):
            largest = left
        if right < heap_size and less(arr[largest], arr[right]):
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def sort(a: Sequence[T], less: Less = DEFAULT_LESS) -> List[T]:
    out = as_list_checked(a)
    n = len(out)

    for i in range(n // 2 - 1, -1, -1):
        sift_down(out, n, i, less)

    for end in range(n - 1, 0, -1):
        out[0], out[end] = out[end], out[0]
        sift_down(out, end, 0, less)

    return out
