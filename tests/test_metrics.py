"""
Instrumentation tests: exact operation counts per variant, reset semantics,
and the SortMetrics record itself.

Expected counts are worked out by hand from each variant's counting rules
(see the docstrings in insertbench/algorithms/insertion.py).
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from insertbench.algorithms import (
    InsertionSorter,
    SortMetrics,
    adaptive_insertion_sort,
    binary_insertion_sort,
    insertion_sort,
    sentinel_insertion_sort,
)


# ------------------------- SortMetrics ------------------------- #

def test_new_record_is_zeroed() -> None:
    m = SortMetrics()
    assert (m.comparisons, m.swaps, m.shifts, m.array_accesses) == (0, 0, 0, 0)
    assert m.elapsed_ns == 0
    assert m.elapsed_ms == 0.0


def test_increment_and_reset() -> None:
    m = SortMetrics()
    m.increment_comparisons()
    m.increment_comparisons()
    m.increment_swaps()
    m.increment_shifts()
    m.increment_array_accesses()
    m.start_timer()
    m.stop_timer()
    assert (m.comparisons, m.swaps, m.shifts, m.array_accesses) == (2, 1, 1, 1)
    assert m.elapsed_ns >= 0

    m.reset()
    assert m == SortMetrics()


def test_elapsed_millis_is_nanos_over_1e6() -> None:
    m = SortMetrics(start_ns=1_000, end_ns=2_501_000)
    assert m.elapsed_ns == 2_500_000
    assert m.elapsed_ms == pytest.approx(2.5)


def test_mean_uses_integer_division() -> None:
    a = SortMetrics(comparisons=10, swaps=1, shifts=4, array_accesses=7, start_ns=0, end_ns=100)
    b = SortMetrics(comparisons=5, swaps=0, shifts=3, array_accesses=8, start_ns=50, end_ns=101)
    avg = SortMetrics.mean([a, b])
    assert (avg.comparisons, avg.swaps, avg.shifts, avg.array_accesses) == (7, 0, 3, 7)
    assert avg.elapsed_ns == (100 + 51) // 2
    assert SortMetrics.mean([]) == SortMetrics()


def test_as_dict_and_str() -> None:
    m = SortMetrics(comparisons=3, swaps=1, shifts=2, array_accesses=9, start_ns=0, end_ns=1_250_000)
    d = m.as_dict()
    assert d == {
        "comparisons": 3,
        "swaps": 1,
        "shifts": 2,
        "array_accesses": 9,
        "elapsed_ns": 1_250_000,
        "elapsed_ms": 1.25,
    }
    assert str(m) == "SortMetrics(comparisons=3, swaps=1, shifts=2, array_accesses=9, time=1.25ms)"


# ------------------------- exact counts ------------------------- #

@pytest.mark.parametrize("n", [2, 5, 10, 40])
def test_plain_reverse_is_worst_case(n: int) -> None:
    a = list(range(n, 0, -1))
    m = insertion_sort(a)
    pairs = n * (n - 1) // 2
    assert m.comparisons == pairs
    assert m.shifts == pairs
    assert m.swaps == 0


def test_plain_reverse_five_elements() -> None:
    m = insertion_sort([5, 4, 3, 2, 1])
    assert m.comparisons == 10
    assert m.shifts == 10
    # per key: 1 read + 1 write, plus 2 accesses per shift
    assert m.array_accesses == 4 * 2 + 10 * 2
    assert m.elapsed_ns >= 0


def test_plain_sorted_counts_one_failing_comparison_per_key() -> None:
    m = insertion_sort([1, 2, 3, 4, 5])
    assert m.comparisons == 4
    assert m.shifts == 0


def test_adaptive_sorted_is_best_case() -> None:
    m = adaptive_insertion_sort([1, 2, 3, 4, 5])
    assert m.comparisons == 4
    assert m.comparisons > 0
    assert m.shifts == 0
    assert m.swaps == 0
    assert m.array_accesses == 8


def test_adaptive_single_inversion() -> None:
    m = adaptive_insertion_sort([2, 1])
    # early-exit check + one scan step that shifts
    assert m.comparisons == 2
    assert m.shifts == 1
    assert m.array_accesses == 5


def test_binary_counts_extra_comparison_when_probe_is_smaller() -> None:
    m = binary_insertion_sort([1, 2, 3])
    # key 2: one probe (1 < 2) -> 2 comparisons
    # key 3: two probes (1 < 3, 2 < 3) -> 4 comparisons
    assert m.comparisons == 6
    assert m.shifts == 0
    assert m.array_accesses == 7


def test_binary_equal_key_stops_at_first_hit() -> None:
    m = binary_insertion_sort([5, 5])
    # single probe hits equality: 1 comparison, inserted after it
    assert m.comparisons == 1
    assert m.shifts == 0


def test_binary_shift_count_matches_plain() -> None:
    data = [8, 3, 1, 7, 0, 10, 2]
    assert binary_insertion_sort(list(data)).shifts == insertion_sort(list(data)).shifts


def test_sentinel_reverse_counts() -> None:
    m = sentinel_insertion_sort([5, 4, 3, 2, 1])
    assert m.swaps == 1
    assert m.shifts == 3
    assert m.comparisons == 10
    assert m.array_accesses == 19


def test_sentinel_sorted_has_no_swap() -> None:
    m = sentinel_insertion_sort([1, 2, 3, 4, 5])
    # 4 pre-pass comparisons + one failing comparison for each of i=2..4
    assert m.comparisons == 7
    assert m.swaps == 0
    assert m.shifts == 0
    assert m.array_accesses == 10


def test_sentinel_two_elements_only_needs_prepass() -> None:
    a = [2, 1]
    m = sentinel_insertion_sort(a)
    assert a == [1, 2]
    assert m.comparisons == 1
    assert m.swaps == 1
    assert m.shifts == 0


# ------------------------- reset between calls ------------------------- #

@pytest.mark.parametrize(
    "method",
    ["sort", "binary_insertion_sort", "sentinel_insertion_sort", "adaptive_insertion_sort"],
)
def test_second_call_reflects_only_itself(method: str) -> None:
    sorter = InsertionSorter()
    getattr(sorter, method)(list(range(50, 0, -1)))
    first = SortMetrics(**vars(sorter.get_metrics()))

    fresh = InsertionSorter()
    getattr(fresh, method)([1, 2])
    expected = fresh.get_metrics()

    getattr(sorter, method)([1, 2])
    after = sorter.get_metrics()
    assert after.comparisons < first.comparisons
    assert (after.comparisons, after.swaps, after.shifts, after.array_accesses) == (
        expected.comparisons,
        expected.swaps,
        expected.shifts,
        expected.array_accesses,
    )


def test_plain_reset_exact() -> None:
    sorter = InsertionSorter()
    sorter.sort([5, 4, 3, 2, 1])
    sorter.sort([1, 2])
    m = sorter.get_metrics()
    assert m.comparisons == 1
    assert m.shifts == 0
    assert m.array_accesses == 2


def test_sorter_record_is_reused() -> None:
    sorter = InsertionSorter()
    record = sorter.get_metrics()
    assert record == SortMetrics()
    sorter.adaptive_insertion_sort([3, 1, 2])
    assert sorter.get_metrics() is record
    assert record.shifts == 2


def test_trivial_call_keeps_previous_record() -> None:
    sorter = InsertionSorter()
    sorter.binary_insertion_sort([3, 2, 1])
    snapshot = SortMetrics(**vars(sorter.get_metrics()))
    sorter.binary_insertion_sort([7])
    sorter.binary_insertion_sort([])
    sorter.binary_insertion_sort(None)
    assert sorter.get_metrics() == snapshot


def test_separate_calls_get_separate_records() -> None:
    m1 = insertion_sort([3, 2, 1])
    m2 = insertion_sort([1, 2, 3])
    assert m1 is not m2
    assert m1.shifts == 3
    assert m2.shifts == 0
