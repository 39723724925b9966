"""
Assertion helpers for the Select and sorting contracts.

Each `assert_*` helper raises AssertionError with a short message naming the
first thing that is wrong, so a failing test or a runner validation line says
why without needing a debugger.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence, Tuple

from selsort.core import le_all

from .properties import (
    first_nondecreasing_violation_index,
    is_permutation,
    permutation_counter_diff,
    remove_one,
)

__all__ = [
    "assert_no_mutation",
    "assert_select_contract",
    "assert_sorting_contract",
    "is_sorting_algorithm",
]


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """Raise AssertionError if `after` differs from the `before` snapshot."""
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")


def assert_select_contract(
    candidate: Any, sequence: Sequence[Any], result: Tuple[Any, List[Any]]
) -> None:
    """
    Check a `select(candidate, sequence)` result.

    The minimum must be <= the candidate and <= every element of `sequence`,
    and the remainder must be ``[candidate, *sequence]`` with exactly one
    occurrence of the minimum taken out.
    """
    m, remainder = result
    if not m <= candidate:
        raise AssertionError(f"minimum {m!r} is greater than candidate {candidate!r}")
    if not le_all(m, sequence):
        raise AssertionError(f"minimum {m!r} is greater than some element of {list(sequence)!r}")
    pool = [candidate, *sequence]
    try:
        expected = remove_one(pool, m)
    except ValueError:
        raise AssertionError(f"minimum {m!r} does not occur in input {pool!r}") from None
    if not is_permutation(remainder, expected):
        diff = permutation_counter_diff(remainder, expected)
        raise AssertionError(f"remainder is not input minus minimum; count diff={diff}")


def assert_sorting_contract(inp: Sequence[Any], out: Sequence[Any]) -> None:
    """Raise AssertionError unless `out` is a sorted permutation of `inp`."""
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        raise AssertionError(f"not sorted at i={i}: {out[i]!r} > {out[i + 1]!r}")
    if not is_permutation(inp, out):
        diff = permutation_counter_diff(inp, out)
        raise AssertionError(
            f"not a permutation of input (len {len(inp)} -> {len(out)}); "
            f"count diff={diff}"
        )


def is_sorting_algorithm(
    fn: Callable[[List[Any]], Sequence[Any]], inputs: Iterable[Sequence[Any]]
) -> bool:
    """True iff `fn` returns a sorted permutation for every one of `inputs`."""
    for a in inputs:
        try:
            assert_sorting_contract(a, fn(list(a)))
        except AssertionError:
            return False
    return True
