"""
Per-call instrumentation record for the insertion sort variants.

A `SortMetrics` instance is a small mutable bundle of counters plus a pair of
monotonic timestamps. Each sort call resets it on entry, increments it while
sorting, and stops the timer on exit, so a record always describes exactly one
completed call.

Counters:
    comparisons      element-vs-key (or element-vs-element) comparisons
    swaps            two-element exchanges
    shifts           one-position moves to the right to make room for a key
    array_accesses   raw reads/writes of list slots

Timing uses `time.perf_counter_ns()`; `elapsed_ms` is `elapsed_ns / 1e6`.

Not thread-safe: one record has a single logical owner at a time.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable

__all__ = ["SortMetrics"]


@dataclass
class SortMetrics:
    comparisons: int = 0
    swaps: int = 0
    shifts: int = 0
    array_accesses: int = 0
    start_ns: int = 0
    end_ns: int = 0

    def reset(self) -> None:
        self.comparisons = 0
        self.swaps = 0
        self.shifts = 0
        self.array_accesses = 0
        self.start_ns = 0
        self.end_ns = 0

    def start_timer(self) -> None:
        self.start_ns = time.perf_counter_ns()

    def stop_timer(self) -> None:
        self.end_ns = time.perf_counter_ns()

    def increment_comparisons(self) -> None:
        self.comparisons += 1

    def increment_swaps(self) -> None:
        self.swaps += 1

    def increment_shifts(self) -> None:
        self.shifts += 1

    def increment_array_accesses(self) -> None:
        self.array_accesses += 1

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1e6

    def as_dict(self) -> Dict[str, Any]:
        """Flat view of the counters and elapsed time (for CSV / JSON rows)."""
        out = asdict(self)
        del out["start_ns"], out["end_ns"]
        out["elapsed_ns"] = self.elapsed_ns
        out["elapsed_ms"] = self.elapsed_ms
        return out

    @classmethod
    def mean(cls, samples: Iterable["SortMetrics"]) -> "SortMetrics":
        """
        Average a batch of records into a single one.

        Counters and elapsed time are averaged with integer division. The
        averaged record carries `start_ns=0` and `end_ns=<mean elapsed>` so
        that `elapsed_ns` reads back the mean. An empty batch yields zeros.
        """
        items = list(samples)
        if not items:
            return cls()
        k = len(items)
        return cls(
            comparisons=sum(m.comparisons for m in items) // k,
            swaps=sum(m.swaps for m in items) // k,
            shifts=sum(m.shifts for m in items) // k,
            array_accesses=sum(m.array_accesses for m in items) // k,
            start_ns=0,
            end_ns=sum(m.elapsed_ns for m in items) // k,
        )

    def __str__(self) -> str:
        return (
            f"SortMetrics(comparisons={self.comparisons}, swaps={self.swaps}, "
            f"shifts={self.shifts}, array_accesses={self.array_accesses}, "
            f"time={self.elapsed_ms:.2f}ms)"
        )
