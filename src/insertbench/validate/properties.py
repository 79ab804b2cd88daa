"""
Property helpers for validating in-place sorting results.

Used by the benchmark harness to verify every measured run, and by the tests.

Public API (stable):
    first_unsorted_index(xs: Sequence[int]) -> int | None
    is_permutation(a: Sequence[int], b: Sequence[int]) -> bool
    permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> dict[int, int]
    describe_sort_failure(before: Sequence[int], after: Sequence[int]) -> str | None

Notes
-----
- The in-place variants destroy their input, so callers snapshot `before`
  (a copy) prior to sorting and pass the mutated list as `after`.
- Stability is not checked: equal integers are indistinguishable.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = [
    "first_unsorted_index",
    "is_permutation",
    "permutation_counter_diff",
    "describe_sort_failure",
]


def first_unsorted_index(xs: Sequence[int]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

        i = first_unsorted_index(out)
        assert i is None, f"not sorted at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def describe_sort_failure(before: Sequence[int], after: Sequence[int]) -> Optional[str]:
    """
    Check that `after` is a sorted permutation of `before`.

    Returns None on success, otherwise a one-line description of the first
    problem found (suitable for console output).
    """
    if len(before) != len(after):
        return f"length changed from {len(before)} to {len(after)}"
    i = first_unsorted_index(after)
    if i is not None:
        return f"not sorted at i={i}: {after[i]} > {after[i + 1]}"
    diff = permutation_counter_diff(after, before)
    if diff:
        return f"not a permutation of the input (count diff {diff})"
    return None
