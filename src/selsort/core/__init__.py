"""
Core selection-sort API.

Re-export the selection primitives so callers can write:
    from selsort.core import select, sort, selsort_with_fuel
"""

from .selection import (
    le_all,
    select,
    select_sort_steps,
    selection_sort,
    selsort_prime,
    selsort_with_fuel,
    sort,
)

__all__ = [
    "le_all",
    "select",
    "select_sort_steps",
    "selection_sort",
    "selsort_prime",
    "selsort_with_fuel",
    "sort",
]
