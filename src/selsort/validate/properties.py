"""
Sortedness and permutation oracles.

These are the predicates the selection-sort contract is stated in: an output
is correct iff it `is_sorted` and `is_permutation` of the input. They work for
any elements with a total order (`<=`) that are hashable.

Public API (stable):
    is_sorted(xs) -> bool
    is_sorted_by_index(xs) -> bool
    is_nondecreasing(xs) -> bool                # alias of is_sorted
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    remove_one(xs, value) -> list

Notes
-----
- `is_sorted` checks adjacent pairs; `is_sorted_by_index` checks every pair
  i < j. They agree on all inputs because <= is transitive; the second form
  exists to test that claim.
- Permutation equivalence is multiset equality of `Counter`s, which is
  reflexive, symmetric and transitive.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Hashable, List, Sequence

__all__ = [
    "is_sorted",
    "is_sorted_by_index",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "remove_one",
]


def is_sorted(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all adjacent pairs."""
    return first_nondecreasing_violation_index(xs) is None


is_nondecreasing = is_sorted


def is_sorted_by_index(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[j] for all 0 <= i < j < len(xs)."""
    n = len(xs)
    return all(xs[i] <= xs[j] for i in range(n) for j in range(i + 1, n))


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if sorted.

    Handy in assertion messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"{out[i]} > {out[i+1]} at i={i}"
    """
    for i in range(len(xs) - 1):
        if not xs[i] <= xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` hold the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> Dict[Hashable, int]:
    """
    Map each value to count_a - count_b, leaving out values that balance.

    An empty dict means `a` and `b` are permutation-equivalent.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def remove_one(xs: Sequence[Any], value: Any) -> List[Any]:
    """
    Return a copy of `xs` without its first occurrence of `value`.

    Raises
    ------
    ValueError
        If `value` does not occur in `xs`.
    """
    out = list(xs)
    try:
        out.remove(value)
    except ValueError:
        raise ValueError(f"value {value!r} does not occur in sequence") from None
    return out
