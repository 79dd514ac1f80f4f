"""
Correctness tests for every sorting strategy against the oracle (Python's built-in sorted).

What we check:
- Output exactly matches the oracle (numeric inputs, where equal elements are indistinguishable)
- Ordered under the supplied comparator
- Permutation preservation (no lost/duplicated elements)
- No input mutation (API contract)
- Idempotence and determinism
- Empty input is rejected before any comparison is made
"""

from __future__ import annotations

import operator
from typing import Any, Callable, List

import pytest
from hypothesis import given, settings, strategies as st

from sortcatalog.algorithms import STRATEGIES, Strategy, get_strategy
from sortcatalog.errors import EmptySequenceError, InvalidArgumentError
from sortcatalog.validate import (
    assert_no_mutation,
    first_order_violation_index,
    is_permutation,
    is_stable,
    oracle_sort,
)

ALL = list(STRATEGIES.values())
GENERIC = [s for s in ALL if s.comparator_generic]
STABLE = [s for s in GENERIC if s.stable]


def _ids(s: Strategy) -> str:
    return s.name


# ------------------------- helpers ------------------------- #

def _check_one(
    strategy: Strategy, a: List[Any], less: Callable[[Any, Any], bool] = operator.lt
) -> List[Any]:
    """Common assertion bundle for one input."""
    a_before = list(a)
    out = strategy.sort(a, less)

    assert_no_mutation(a_before, a)
    assert isinstance(out, list)
    assert out is not a

    i = first_order_violation_index(out, less)
    assert i is None, f"{strategy.name}: out of order at i={i}: {out[i]} then {out[i + 1]}"
    assert is_permutation(a, out), f"{strategy.name}: output is not a permutation of input"
    assert out == oracle_sort(a, less), f"{strategy.name}: output must match the oracle"

    out2 = strategy.sort(a, less)
    assert out2 == out, "Strategy must be deterministic"
    return out


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize(
    "a",
    [
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [0, 0, 0],
        [1, 3, 2, 3, 1, 2],
        [55, 132, 72, 2, 8, 13],
        [170, 45, 75, 90, 802, 24, 2, 66],
        [10, 0, 100, 7, 7, 3, 999],
        list(range(20)),
        list(range(20))[::-1],
    ],
)
def test_unit_cases(strategy: Strategy, a: List[int]) -> None:
    _check_one(strategy, a)


def test_small_mixed_input(strategy: Strategy) -> None:
    out = strategy.sort([55, 132, 72, 2, 8, 13], lambda x, y: x < y)
    assert out == [2, 8, 13, 55, 72, 132]


def test_single_element_unchanged(strategy: Strategy) -> None:
    assert strategy.sort([5]) == [5]


def test_duplicates_preserved(strategy: Strategy) -> None:
    assert strategy.sort([3, 3, 3], operator.lt) == [3, 3, 3]


def test_accepts_any_sequence(strategy: Strategy) -> None:
    data = (4, 1, 3)
    assert strategy.sort(data) == [1, 3, 4]
    assert strategy.sort(range(5, 0, -1)) == [1, 2, 3, 4, 5]


def test_empty_input_rejected(strategy: Strategy) -> None:
    def never_called(x: Any, y: Any) -> bool:
        raise AssertionError("comparator must not be called on empty input")

    with pytest.raises(EmptySequenceError, match="sequence must not be empty"):
        strategy.sort([], never_called)
    with pytest.raises(InvalidArgumentError):
        strategy.sort(())
    with pytest.raises(ValueError):
        strategy.sort([])


def test_get_strategy_unknown_name() -> None:
    with pytest.raises(KeyError, match="bogo_sort"):
        get_strategy("bogo_sort")


def test_catalogue_is_complete() -> None:
    assert set(STRATEGIES) == {
        "rank_counting_sort",
        "insertion_sort",
        "selection_sort",
        "shell_sort",
        "quick_sort",
        "heap_sort",
        "radix_sort",
    }
    assert [s.name for s in ALL if not s.comparator_generic] == ["radix_sort"]


# ------------------------- comparator-generic strategies ------------------------- #

def test_descending_comparator(generic_strategy: Strategy) -> None:
    a = [55, 132, 72, 2, 8, 13, 72]
    assert _check_one(generic_strategy, a, operator.gt) == [132, 72, 72, 55, 13, 8, 2]


def test_sorts_non_numeric_elements(generic_strategy: Strategy) -> None:
    words = ["pear", "Apple", "fig", "banana", "cherry"]
    assert _check_one(generic_strategy, words) == sorted(words)
    by_len = generic_strategy.sort(words, lambda x, y: len(x) < len(y))
    assert [len(w) for w in by_len] == [3, 4, 5, 6, 6]


@pytest.mark.parametrize("algo", STABLE, ids=_ids)
def test_stability_on_tagged_pairs(algo: Strategy) -> None:
    tagged = [(2, 0), (1, 1), (2, 2), (1, 3)]
    out = algo.sort(tagged, lambda x, y: x[0] < y[0])
    assert out == [(1, 1), (1, 3), (2, 0), (2, 2)]
    assert is_stable(out)


def test_cross_strategy_consistency() -> None:
    tagged = [(k, i) for i, k in enumerate([3, 1, 2, 3, 1, 2, 0, 3])]

    def by_key(x, y):
        return x[0] < y[0]

    expected_keys = sorted(k for k, _ in tagged)
    for s in GENERIC:
        out = s.sort(tagged, by_key)
        assert [k for k, _ in out] == expected_keys, s.name
        assert sorted(out) == sorted(tagged), s.name


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)
non_negative = st.integers(min_value=0, max_value=2**31 - 1)


@pytest.mark.parametrize("algo", GENERIC, ids=_ids)
@settings(deadline=None, max_examples=60)
@given(st.lists(small_ints, min_size=1, max_size=150))
def test_property_random_small_range(algo: Strategy, a: List[int]) -> None:
    _check_one(algo, a)


@pytest.mark.parametrize("algo", ALL, ids=_ids)
@settings(deadline=None, max_examples=60)
@given(st.lists(non_negative, min_size=1, max_size=150))
def test_property_random_non_negative(algo: Strategy, a: List[int]) -> None:
    _check_one(algo, a)


@pytest.mark.parametrize("algo", ALL, ids=_ids)
@settings(deadline=None, max_examples=40)
@given(st.lists(st.integers(min_value=0, max_value=15), min_size=1, max_size=200))
def test_property_many_duplicates(algo: Strategy, a: List[int]) -> None:
    _check_one(algo, a)


@pytest.mark.parametrize("algo", GENERIC, ids=_ids)
@settings(deadline=None, max_examples=40)
@given(st.lists(small_ints, min_size=1, max_size=100))
def test_property_descending(algo: Strategy, a: List[int]) -> None:
    out = _check_one(algo, a, operator.gt)
    assert out == sorted(a, reverse=True)


@pytest.mark.parametrize("algo", ALL, ids=_ids)
@settings(deadline=None, max_examples=40)
@given(st.lists(non_negative, min_size=1, max_size=100))
def test_property_idempotent(algo: Strategy, a: List[int]) -> None:
    once = algo.sort(a)
    assert algo.sort(once) == once


@pytest.mark.parametrize("algo", STABLE, ids=_ids)
@settings(deadline=None, max_examples=40)
@given(st.lists(st.integers(min_value=0, max_value=5), min_size=1, max_size=80))
def test_property_stable(algo: Strategy, keys: List[int]) -> None:
    tagged = [(k, i) for i, k in enumerate(keys)]
    out = algo.sort(tagged, lambda x, y: x[0] < y[0])
    assert is_stable(out)
    assert out == sorted(tagged, key=operator.itemgetter(0))
