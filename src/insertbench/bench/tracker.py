"""
Result collection and export for benchmark sweeps.

One row per (variant, data type, size) holding the averaged `SortMetrics`.
Rows export to CSV through pandas and print as a rich table.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import pandas as pd
from rich.console import Console
from rich.table import Table

from insertbench.algorithms import SortMetrics

__all__ = ["CSV_COLUMNS", "BenchmarkResult", "PerformanceTracker"]

CSV_COLUMNS = [
    "Variant",
    "DataType",
    "InputSize",
    "Comparisons",
    "Swaps",
    "Shifts",
    "ArrayAccesses",
    "TimeNanos",
    "TimeMillis",
]


@dataclass(frozen=True)
class BenchmarkResult:
    variant: str
    data_type: str
    size: int
    comparisons: int
    swaps: int
    shifts: int
    array_accesses: int
    time_nanos: int
    time_millis: float

    @classmethod
    def from_metrics(
        cls, variant: str, data_type: str, size: int, metrics: SortMetrics
    ) -> "BenchmarkResult":
        # Snapshot now: the record may be reset by a later sort call.
        row = metrics.as_dict()
        return cls(
            variant=variant,
            data_type=data_type,
            size=int(size),
            comparisons=row["comparisons"],
            swaps=row["swaps"],
            shifts=row["shifts"],
            array_accesses=row["array_accesses"],
            time_nanos=row["elapsed_ns"],
            time_millis=row["elapsed_ms"],
        )


class PerformanceTracker:
    def __init__(self) -> None:
        self.results: List[BenchmarkResult] = []

    def add_result(
        self, data_type: str, size: int, metrics: SortMetrics, *, variant: str = "adaptive"
    ) -> BenchmarkResult:
        row = BenchmarkResult.from_metrics(variant, data_type, size, metrics)
        self.results.append(row)
        return row

    def to_frame(self) -> pd.DataFrame:
        rows = [
            [
                r.variant,
                r.data_type,
                r.size,
                r.comparisons,
                r.swaps,
                r.shifts,
                r.array_accesses,
                r.time_nanos,
                r.time_millis,
            ]
            for r in self.results
        ]
        df = pd.DataFrame(rows, columns=CSV_COLUMNS)
        # Keep integer dtypes even for an empty frame
        int_cols = [c for c in CSV_COLUMNS if c not in ("Variant", "DataType", "TimeMillis")]
        df[int_cols] = df[int_cols].astype("int64")
        df["TimeMillis"] = df["TimeMillis"].astype("float64")
        return df

    def export_csv(self, path: Union[str, Path]) -> Path:
        """Write all rows to `path`. I/O errors propagate to the caller."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame().to_csv(out, index=False, float_format="%.3f")
        return out

    def print_summary(self, console: Console) -> None:
        table = Table(title="Performance Summary")
        table.add_column("Variant", style="bold")
        table.add_column("Data type")
        table.add_column("n", justify="right")
        table.add_column("Comparisons", justify="right")
        table.add_column("Swaps", justify="right")
        table.add_column("Shifts", justify="right")
        table.add_column("Time (ms)", justify="right")

        if not self.results:
            console.print("(no results)")
            return

        for r in self.results:
            table.add_row(
                r.variant,
                r.data_type,
                str(r.size),
                f"{r.comparisons:,}",
                f"{r.swaps:,}",
                f"{r.shifts:,}",
                f"{r.time_millis:.2f}",
            )
        console.print()
        console.print(table)
        console.print()
