"""
Reference oracle for sorting results.

The built-in `sorted()` is the ground truth every algorithm in
`selsort.algorithms` is compared against.

Public API (stable):
    oracle_sort(a: Sequence) -> list
    equals_oracle(a: Sequence, out: Sequence) -> bool
"""

from __future__ import annotations

from typing import Any, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` is element-wise equal to `oracle_sort(a)`."""
    return list(out) == oracle_sort(a)
