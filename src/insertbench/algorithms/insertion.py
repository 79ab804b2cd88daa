"""
Insertion sort variants with built-in operation counting.

Four in-place variants over integer lists:
- insertion_sort            classic backward scan-and-shift
- binary_insertion_sort     binary search over the sorted prefix, then shift
- sentinel_insertion_sort   moves the minimum to index 0 so the inner loop
                            needs no lower-bound check
- adaptive_insertion_sort   skips keys already >= their predecessor

Public API (stable):
    variant(a: list[int] | None, metrics: SortMetrics | None = None) -> SortMetrics
    is_sorted(a: Sequence[int]) -> bool
    InsertionSorter            stateful wrapper exposing get_metrics()

Conventions:
- Every variant mutates `a` in place and returns the metrics record for the
  call (the one passed in, or a fresh one).
- `None`, empty and single-element inputs are a no-op: the record is returned
  untouched (not reset, not timed).
- Otherwise the record is reset on entry, so counts never accumulate across
  calls sharing one record.
- Time: O(n^2) worst case, O(n) best case (plain/adaptive/sentinel on sorted
  input). Space: O(1) auxiliary.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from .metrics import SortMetrics

__all__ = [
    "insertion_sort",
    "binary_insertion_sort",
    "sentinel_insertion_sort",
    "adaptive_insertion_sort",
    "is_sorted",
    "InsertionSorter",
]


def _is_trivial(a: Optional[Sequence[int]]) -> bool:
    return a is None or len(a) <= 1


def insertion_sort(
    a: Optional[MutableSequence[int]], metrics: Optional[SortMetrics] = None
) -> SortMetrics:
    """Plain insertion sort: scan backward from each key, shifting larger elements right."""
    m = metrics if metrics is not None else SortMetrics()
    if _is_trivial(a):
        return m

    m.reset()
    m.start_timer()

    for i in range(1, len(a)):
        key = a[i]
        m.increment_array_accesses()
        j = i - 1

        while j >= 0:
            m.increment_comparisons()
            if a[j] > key:
                m.increment_array_accesses()  # read a[j]
                a[j + 1] = a[j]
                m.increment_array_accesses()  # write a[j+1]
                m.increment_shifts()
                j -= 1
            else:
                break

        a[j + 1] = key
        m.increment_array_accesses()

    m.stop_timer()
    return m


def binary_insertion_sort(
    a: Optional[MutableSequence[int]], metrics: Optional[SortMetrics] = None
) -> SortMetrics:
    """
    Insertion sort that locates each key's slot by binary search.

    Comparisons drop to O(log i) per key; shifts stay the same as the plain
    variant. A key equal to a probed element is placed right after it.
    """
    m = metrics if metrics is not None else SortMetrics()
    if _is_trivial(a):
        return m

    m.reset()
    m.start_timer()

    for i in range(1, len(a)):
        key = a[i]
        m.increment_array_accesses()

        pos = _insertion_point(a, 0, i - 1, key, m)

        for j in range(i - 1, pos - 1, -1):
            a[j + 1] = a[j]
            m.increment_array_accesses()  # read
            m.increment_array_accesses()  # write
            m.increment_shifts()

        a[pos] = key
        m.increment_array_accesses()

    m.stop_timer()
    return m


def _insertion_point(
    a: Sequence[int], lo: int, hi: int, key: int, m: SortMetrics
) -> int:
    """
    Return the index in the sorted slice a[lo..hi] (inclusive) where `key`
    belongs.

    On an exact hit the key goes right after the probed element. The
    `a[mid] < key` branch counts two comparisons (equality test, then
    less-than), the other branches one.
    """
    while lo <= hi:
        mid = lo + (hi - lo) // 2

        m.increment_comparisons()
        m.increment_array_accesses()

        if a[mid] == key:
            return mid + 1
        elif a[mid] < key:
            m.increment_comparisons()
            lo = mid + 1
        else:
            hi = mid - 1

    return lo


def sentinel_insertion_sort(
    a: Optional[MutableSequence[int]], metrics: Optional[SortMetrics] = None
) -> SortMetrics:
    """
    Insertion sort with the global minimum parked at index 0 as a sentinel.

    With a[0] <= every key, the inner loop `while a[j] > key` always stops by
    j == 0, so it carries no `j >= 0` test. Index 1 needs no work after the
    pre-pass, so the main loop starts at 2.
    """
    m = metrics if metrics is not None else SortMetrics()
    if _is_trivial(a):
        return m

    m.reset()
    m.start_timer()

    min_index = 0
    for i in range(1, len(a)):
        m.increment_comparisons()
        m.increment_array_accesses()
        if a[i] < a[min_index]:
            min_index = i

    if min_index != 0:
        _swap(a, 0, min_index, m)

    for i in range(2, len(a)):
        key = a[i]
        m.increment_array_accesses()
        j = i - 1

        while a[j] > key:
            m.increment_comparisons()
            m.increment_array_accesses()
            a[j + 1] = a[j]
            m.increment_array_accesses()
            m.increment_shifts()
            j -= 1

        m.increment_comparisons()  # the comparison that ended the loop
        a[j + 1] = key
        m.increment_array_accesses()

    m.stop_timer()
    return m


def adaptive_insertion_sort(
    a: Optional[MutableSequence[int]], metrics: Optional[SortMetrics] = None
) -> SortMetrics:
    """
    Insertion sort that skips keys already in place.

    A key >= its predecessor extends the current sorted run and is left alone
    without entering the shift loop; on sorted input this costs n-1
    comparisons and zero shifts.
    """
    m = metrics if metrics is not None else SortMetrics()
    if _is_trivial(a):
        return m

    m.reset()
    m.start_timer()

    for i in range(1, len(a)):
        key = a[i]
        m.increment_array_accesses()

        m.increment_comparisons()
        m.increment_array_accesses()
        if key >= a[i - 1]:
            continue

        j = i - 1
        while j >= 0:
            m.increment_comparisons()
            m.increment_array_accesses()
            if a[j] > key:
                a[j + 1] = a[j]
                m.increment_array_accesses()
                m.increment_shifts()
                j -= 1
            else:
                break

        a[j + 1] = key
        m.increment_array_accesses()

    m.stop_timer()
    return m


def _swap(a: MutableSequence[int], i: int, j: int, m: SortMetrics) -> None:
    a[i], a[j] = a[j], a[i]
    m.increment_swaps()
    # read, read/write, write
    m.increment_array_accesses()
    m.increment_array_accesses()
    m.increment_array_accesses()


def is_sorted(a: Sequence[int]) -> bool:
    """Return True iff a[i-1] <= a[i] for every adjacent pair."""
    for i in range(1, len(a)):
        if a[i] < a[i - 1]:
            return False
    return True


class InsertionSorter:
    """
    Stateful facade over the variant functions.

    Holds one `SortMetrics` record, created with the sorter and reused by every
    call; `get_metrics()` reflects the most recent non-trivial call (all zeros
    before the first). Use one sorter per logical benchmark run; concurrent
    calls on the same instance would interleave counters.
    """

    def __init__(self) -> None:
        self.metrics = SortMetrics()

    def sort(self, a: Optional[List[int]]) -> None:
        insertion_sort(a, self.metrics)

    def binary_insertion_sort(self, a: Optional[List[int]]) -> None:
        binary_insertion_sort(a, self.metrics)

    def sentinel_insertion_sort(self, a: Optional[List[int]]) -> None:
        sentinel_insertion_sort(a, self.metrics)

    def adaptive_insertion_sort(self, a: Optional[List[int]]) -> None:
        adaptive_insertion_sort(a, self.metrics)

    def get_metrics(self) -> SortMetrics:
        return self.metrics

    is_sorted = staticmethod(is_sorted)
