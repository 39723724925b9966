"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME, oracle_sort, equals_oracle

    - Sortedness / permutation oracles:
        is_sorted, is_sorted_by_index, is_nondecreasing,
        first_nondecreasing_violation_index,
        is_permutation, permutation_counter_diff, remove_one

    - Contracts:
        assert_no_mutation, assert_select_contract,
        assert_sorting_contract, is_sorting_algorithm
"""

from .contracts import (
    assert_no_mutation,
    assert_select_contract,
    assert_sorting_contract,
    is_sorting_algorithm,
)
from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_sorted,
    is_sorted_by_index,
    permutation_counter_diff,
    remove_one,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_sorted",
    "is_sorted_by_index",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "remove_one",
    "assert_no_mutation",
    "assert_select_contract",
    "assert_sorting_contract",
    "is_sorting_algorithm",
]
