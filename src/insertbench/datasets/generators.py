"""
Dataset generators for insertion sort benchmarks.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range; default [0, 10*n - 1].

- dist == "sorted":
    Deterministic increasing order: [0, 1, ..., n-1].

- dist == "reversed":
    Deterministic reversed order: [n-1, n-2, ..., 0].

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG (default swap_frac 0.05).

- dist == "few_unique":
    Integers drawn uniformly from [0, k); default k = max(5, n // 100).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Ranges in params["range"] are **inclusive** on both ends.
- "sorted" and "reversed" ignore params and RNG.
- Returns a Python `list[int]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs where applicable).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "sorted",
    "reversed",
    "nearly_sorted",
    "few_unique",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [0, 999]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_unique", "params": {"k": 8}}
            {"dist": "sorted"}
            {"dist": "reversed"}

        All params are optional.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]
        A list of length `n` containing integers consistent with `spec`.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "random":
        lo, hi = _parse_optional_inclusive_range(params, default=(0, max(10 * n - 1, 0)))
        if n == 0:
            return []
        # Generator.integers is half-open [low, high); +1 makes hi inclusive.
        arr = rng.integers(lo, hi + 1, size=n, dtype=np.int64)
        return arr.tolist()

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        if n == 0:
            return arr
        # ceil so that any nonzero frac makes at least one swap
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for s in range(num_swaps):
            i = int(idxs[2 * s])
            j = int(idxs[2 * s + 1])
            # i == j is a no-op; effective swaps may be fewer than requested
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "few_unique":
        k = _parse_k(params, default=max(5, n // 100))
        if n == 0:
            return []
        arr = rng.integers(0, k, size=n, dtype=np.int64)
        return arr.tolist()

    # Unreachable: dist was checked against SUPPORTED_DISTS above.
    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_optional_inclusive_range(
    params: Dict[str, Any], default: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Parse an optional inclusive integer range from params.
    If not present, return `default`.
    """
    if "range" not in params:
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """Parse and validate swap_frac in [0.0, 1.0]; default 0.05."""
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any], default: int) -> int:
    """Parse k (number of distinct values) for few_unique; must be an int >= 1."""
    k = params.get("k", default)
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_unique.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types (but not bools)
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
