"""
Validation utilities public API.

Re-exports:
    - Oracle:
        oracle_sort
        matches_oracle

    - Property checks:
        first_unsorted_index
        is_permutation
        permutation_counter_diff
        describe_sort_failure
"""

from .oracle import matches_oracle, oracle_sort
from .properties import (
    describe_sort_failure,
    first_unsorted_index,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "oracle_sort",
    "matches_oracle",
    "first_unsorted_index",
    "is_permutation",
    "permutation_counter_diff",
    "describe_sort_failure",
]
