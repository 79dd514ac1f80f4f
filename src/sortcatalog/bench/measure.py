"""
Timing harness for sorting strategies.

We measure exactly one call to a strategy's `sort(a, less)` per sample, using
a monotonic high-resolution clock. Copying, GC and warmup happen outside the
timed block, and so does output validation.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # populated for "error" and "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import operator
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from sortcatalog.validate import first_order_violation_index, is_permutation

__all__ = ["time_sort_call", "check_output"]

logger = logging.getLogger(__name__)


def check_output(
    a: Sequence[Any], out: Sequence[Any], less: Callable[[Any, Any], bool]
) -> Optional[str]:
    """Return a description of the first contract violation in `out`, or None."""
    if len(out) != len(a):
        return f"length changed from {len(a)} to {len(out)}"
    i = first_order_violation_index(out, less)
    if i is not None:
        return f"out of order at index {i}: {out[i]!r} then {out[i + 1]!r}"
    if not is_permutation(a, out):
        return "output is not a permutation of the input"
    return None


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    less: Callable[[Any, Any], bool] = operator.lt,
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool = True,
    validate: bool = False,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, less)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the strategy (for logs/records).
    algo_fn : Callable
        A strategy `sort(a, less) -> list`.
    a : list
        Input array, shared across strategies; must not be mutated.
    less : Callable[[x, y], bool]
        Ordering predicate handed to every call.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A single call exceeding it marks status="timeout"
        and stops further sampling.
    defensive_copy : bool
        If True, copy the input outside each timed call and pass the copy.
    validate : bool
        If True, check the first sample's output against the sort contract;
        a violation marks status="invalid" and stops sampling.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, less)
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, less)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if validate and r == 0:
                problem = check_output(a, out, less)
                if problem is not None:
                    logger.warning("%s: invalid output: %s", algo_name, problem)
                    result["status"] = "invalid"
                    result["error"] = problem
                    break

            if elapsed > threshold_ns:
                logger.info("%s: sample %d exceeded %.3fs", algo_name, r, timeout_seconds)
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
