"""
Dataset generators for sorting tests and benchmarks.

Distributions:
- "random":        uniform integers from an inclusive range.
- "sorted":        [0, 1, ..., n-1]; worst case for last-element-pivot quicksort.
- "reversed":      [n-1, ..., 0].
- "nearly_sorted": sorted, then ceil(swap_frac * n) random index swaps.
- "few_uniques":   up to k distinct values drawn from a range, then sampled.
- "small_range":   uniform integers from a small range (default bytes, [0, 255]).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- `spec` is {"dist": <name>, "params": {...}}; params may be omitted.
- Ranges are inclusive on both ends and default to non-negative values, so
  every generated dataset is also valid input for radix_sort.
- Returns a plain Python `list[int]`; strategies stay NumPy-agnostic.
- The caller owns and seeds the RNG. "sorted" and "reversed" ignore it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

DEFAULT_RANGE: Tuple[int, int] = (0, 2**31 - 1)

__all__ = ["SUPPORTED_DISTS", "DEFAULT_RANGE", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Random:         {"dist": "random", "params": {"range": [lo, hi]}}
        Sorted:         {"dist": "sorted"}
        Reversed:       {"dist": "reversed"}
        Nearly-sorted:  {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
        Few-uniques:    {"dist": "few_uniques", "params": {"k": 10, "range": [lo, hi]}}
        Small-range:    {"dist": "small_range", "params": {"min_val": 0, "max_val": 255}}
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If `n` or `spec` is invalid or the distribution is unsupported.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)  # type: ignore[arg-type]
    if gen is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


# ------------------------- distributions ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_range(params, "random", DEFAULT_RANGE)
    return _uniform(rng, lo, hi, n)


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return arr
    idxs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in idxs.tolist():
        # i == j is a no-op; effective swaps may be fewer than requested
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params, "few_uniques", DEFAULT_RANGE)
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    # Draw until we hold actual_k distinct values, keeping everything on `rng`
    values: List[int] = []
    seen = set()
    while len(values) < actual_k:
        for v in _uniform(rng, lo, hi, 2 * (actual_k - len(values))):
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == actual_k:
                    break

    picks = rng.integers(0, actual_k, size=n)
    return [values[t] for t in picks.tolist()]


def _small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params, "small_range", (0, 255))
    else:
        lo, hi = params.get("min_val", 0), params.get("max_val", 255)
        if not _is_int_like(lo) or not _is_int_like(hi):
            raise ValueError("small_range params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    return _uniform(rng, lo, hi, n)


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _random,
    "sorted": _sorted,
    "reversed": _reversed,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "small_range": _small_range,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _uniform(rng: np.random.Generator, lo: int, hi: int, n: int) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes `hi` inclusive
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _parse_range(params: Dict[str, Any], dist: str, default: Tuple[int, int]) -> Tuple[int, int]:
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
