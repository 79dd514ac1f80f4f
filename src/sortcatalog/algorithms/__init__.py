"""
Sorting strategies public API.

Each strategy is a module exposing `sort(a, less=operator.lt) -> list`:
    rank_counting_sort, insertion_sort, selection_sort, shell_sort,
    quick_sort, heap_sort, radix_sort

The catalogue is fixed; `STRATEGIES` maps each module name to a `Strategy`
record so callers (and the benchmark runner) can pick one by name:
    from sortcatalog.algorithms import get_strategy
    get_strategy("heap_sort").sort([3, 1, 2])
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple

from . import (
    heap_sort,
    insertion_sort,
    quick_sort,
    radix_sort,
    rank_counting_sort,
    selection_sort,
    shell_sort,
)
from ._contract import DEFAULT_LESS, Less, SortFn


class Strategy(NamedTuple):
    name: str
    sort: SortFn
    stable: bool
    # False means numeric-only (non-negative integers, ascending)
    comparator_generic: bool = True


STRATEGIES: Dict[str, Strategy] = {
    s.name: s
    for s in (
        Strategy("rank_counting_sort", rank_counting_sort.sort, stable=True),
        Strategy("insertion_sort", insertion_sort.sort, stable=True),
        Strategy("selection_sort", selection_sort.sort, stable=False),
        Strategy("shell_sort", shell_sort.sort, stable=False),
        Strategy("quick_sort", quick_sort.sort, stable=False),
        Strategy("heap_sort", heap_sort.sort, stable=False),
        Strategy("radix_sort", radix_sort.sort, stable=True, comparator_generic=False),
    )
}


def available_strategies() -> List[str]:
    """Names of all strategies, in catalogue order."""
    return list(STRATEGIES)


def get_strategy(name: str) -> Strategy:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown sorting strategy: {name!r}. Available: {available_strategies()}"
        ) from None


__all__ = [
    "DEFAULT_LESS",
    "Less",
    "SortFn",
    "Strategy",
    "STRATEGIES",
    "available_strategies",
    "get_strategy",
    "heap_sort",
    "insertion_sort",
    "quick_sort",
    "radix_sort",
    "rank_counting_sort",
    "selection_sort",
    "shell_sort",
]
