"""
Measurement harness for the insertion sort variants.

Each sample is one call to a variant on a freshly generated input; the
variant's own `SortMetrics` record supplies the counts and the elapsed time
(perf_counter_ns around the sorting loop only). Input generation, the
pre-sort snapshot, verification and GC handling all happen outside the timed
region.

Public API (stable):
    measure_variant(... ) -> dict

Returned dict schema:
    {
        "variant": str,
        "samples": list[SortMetrics],       # one per successful measured run
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based run index if timeout occurred
        "unsorted_runs": int,               # runs whose output failed verification
        "first_failure": str | None,        # description of the first failed verification
    }
"""

from __future__ import annotations

import gc
from typing import Any, Callable, Dict, List

from insertbench.algorithms import SortMetrics, VariantFn
from insertbench.validate import describe_sort_failure

__all__ = ["measure_variant"]


def measure_variant(
    *,
    variant_name: str,
    variant_fn: VariantFn,
    make_input: Callable[[], List[int]],
    warmup_runs: int,
    measurement_runs: int,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Warm up, then measure `measurement_runs` calls of `variant_fn`.

    Parameters
    ----------
    variant_name : str
        Logical name of the variant (for records).
    variant_fn : Callable
        In-place sort with signature fn(a, metrics=None) -> SortMetrics.
    make_input : Callable[[], list[int]]
        Produces a fresh input list per run.
    warmup_runs : int
        Untimed runs made before measuring (results discarded).
    measurement_runs : int
        Number of measured runs to collect.
    disable_gc : bool
        If True, collect and disable Python GC during the measured loop;
        restore afterward.
    timeout_seconds : float
        If a single run exceeds this threshold, status becomes "timeout" and
        no further runs are made. The over-threshold sample is still kept.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if warmup_runs < 0 or measurement_runs < 0:
        raise ValueError("warmup_runs and measurement_runs must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples: List[SortMetrics] = []
    result: Dict[str, Any] = {
        "variant": variant_name,
        "samples": samples,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "unsorted_runs": 0,
        "first_failure": None,
    }

    # ---- Warmup (outside GC disable) ----
    try:
        for _ in range(warmup_runs):
            variant_fn(make_input(), None)
    except Exception as e:  # pragma: no cover
        result["status"] = "error"
        result["error"] = f"warmup failed: {e!r}"
        return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(measurement_runs):
            try:
                arr = make_input()
                before = list(arr)

                metrics = variant_fn(arr, None)
                samples.append(metrics)

                failure = describe_sort_failure(before, arr)
                if failure is not None:
                    result["unsorted_runs"] += 1
                    if result["first_failure"] is None:
                        result["first_failure"] = f"run {r}: {failure}"

                if metrics.elapsed_ns > threshold_ns:
                    result["status"] = "timeout"
                    result["timed_out_on_repeat"] = r
                    break

            except Exception as e:  # pragma: no cover
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

    finally:
        # Restore GC only if we were the ones who disabled it.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
