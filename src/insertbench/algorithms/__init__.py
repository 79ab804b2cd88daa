"""
Algorithms package public API.

Re-exports the insertion sort variants and the metrics record, plus a name ->
function registry so the benchmark runner can resolve variants from config:
    from insertbench.algorithms import VARIANTS, SortMetrics
"""

from typing import Dict, List, Optional, Protocol

from .insertion import (
    InsertionSorter,
    adaptive_insertion_sort,
    binary_insertion_sort,
    insertion_sort,
    is_sorted,
    sentinel_insertion_sort,
)
from .metrics import SortMetrics


class VariantFn(Protocol):
    """In-place sort: fn(a) or fn(a, metrics) -> the record filled for the call."""

    def __call__(
        self, a: Optional[List[int]], metrics: Optional[SortMetrics] = None
    ) -> SortMetrics: ...


VARIANTS: Dict[str, VariantFn] = {
    "plain": insertion_sort,
    "binary": binary_insertion_sort,
    "sentinel": sentinel_insertion_sort,
    "adaptive": adaptive_insertion_sort,
}

__all__ = [
    "VARIANTS",
    "VariantFn",
    "SortMetrics",
    "InsertionSorter",
    "insertion_sort",
    "binary_insertion_sort",
    "sentinel_insertion_sort",
    "adaptive_insertion_sort",
    "is_sorted",
]
