"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: correct total order for
integers, deterministic, and non-mutating.

Public API (stable):
    oracle_sort(a: Sequence[int]) -> list[int]
    matches_oracle(original: Sequence[int], result: Sequence[int]) -> bool
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["oracle_sort", "matches_oracle"]


def oracle_sort(a: Sequence[int]) -> List[int]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def matches_oracle(original: Sequence[int], result: Sequence[int]) -> bool:
    """
    True iff `result` (an in-place sorted list) equals the oracle output for
    `original` (a snapshot taken before sorting).
    """
    return list(result) == oracle_sort(original)
