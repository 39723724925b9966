"""
Selection sort by repeated minimum extraction.

Every sort in this module is built from one primitive, `select`, which pulls
the minimum out of a candidate plus a sequence and hands back what is left.
Two drivers repeat it until nothing is left:

- `selsort_with_fuel` counts down an explicit fuel budget. It always stops,
  but if the budget is smaller than the input it stops early and returns a
  shorter list that is NOT a permutation of the input. That behavior is kept
  on purpose and is covered by the tests; it is the legacy/demo entry point.
- `selsort_prime` keeps going while the remainder is non-empty. Each step
  shrinks the remainder by exactly one element, so no budget is needed and
  there is no early-stop mode. `sort` is this variant.

Public API (stable):
    select(candidate, sequence) -> tuple[T, list[T]]
    selsort_with_fuel(sequence, fuel) -> list[T]
    selection_sort(sequence) -> list[T]
    selsort_prime(sequence) -> list[T]
    sort(sequence) -> list[T]
    select_sort_steps(sequence) -> Iterator[tuple[T, list[T]]]
    le_all(x, sequence) -> bool

Conventions:
- Elements only need a total order through `<=`.
- Inputs are never mutated; every call returns new lists.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T")

__all__ = [
    "le_all",
    "select",
    "select_sort_steps",
    "selection_sort",
    "selsort_prime",
    "selsort_with_fuel",
    "sort",
]


def le_all(x: T, sequence: Sequence[T]) -> bool:
    """Return True iff x <= y for every y in sequence (vacuously True if empty)."""
    return all(x <= y for y in sequence)


def select(candidate: T, sequence: Sequence[T]) -> Tuple[T, List[T]]:
    """
    Extract the minimum of ``[candidate, *sequence]``.

    Parameters
    ----------
    candidate : T
        Starting value for the running minimum.
    sequence : Sequence[T]
        Remaining values to scan, left to right. May be empty.

    Returns
    -------
    (minimum, remainder) : tuple[T, list[T]]
        `minimum` is the smallest value seen. `remainder` holds every other
        value (each value displaced by a comparison, in scan order), so it is
        the input multiset minus one occurrence of `minimum`.
    """
    best = candidate
    remainder: List[T] = []
    for h in sequence:
        # Ties keep the running value; `h` goes to the remainder.
        if best <= h:
            remainder.append(h)
        else:
            remainder.append(best)
            best = h
    return best, remainder


def selsort_with_fuel(sequence: Sequence[T], fuel: int) -> List[T]:
    """
    Fuel-bounded selection sort (legacy/demo entry point).

    Each extracted minimum costs one unit of `fuel`. The result is a sorted
    permutation of `sequence` only when ``fuel >= len(sequence)``; extra fuel
    changes nothing. With less fuel the run stops once it is spent and the
    unsorted rest is dropped: the output holds the `fuel` smallest values and
    is shorter than the input. No error is raised in that case.

    Raises
    ------
    ValueError
        If `fuel` is not a nonnegative integer.
    """
    fuel = _validate_fuel(fuel)

    out: List[T] = []
    rest: List[T] = list(sequence)
    while rest:
        if fuel == 0:
            break
        m, rest = select(rest[0], rest[1:])
        out.append(m)
        fuel -= 1
    return out


def selection_sort(sequence: Sequence[T]) -> List[T]:
    """Sort with exactly len(sequence) units of fuel."""
    return selsort_with_fuel(sequence, len(sequence))


def select_sort_steps(sequence: Sequence[T]) -> Iterator[Tuple[T, List[T]]]:
    """
    Yield each ``(minimum, remainder)`` pair produced while sorting `sequence`.

    The remainder after each step is one element shorter than the sequence it
    came from, which is what bounds the number of steps to len(sequence).
    """
    rest: List[T] = list(sequence)
    while rest:
        m, rest = select(rest[0], rest[1:])
        yield m, list(rest)


def selsort_prime(sequence: Sequence[T]) -> List[T]:
    """Measure-based selection sort: recurse on the remainder until it is empty."""
    return [m for m, _ in select_sort_steps(sequence)]


sort = selsort_prime


def _validate_fuel(fuel: Any) -> int:
    # bool is an int subclass but not a meaningful fuel value
    if isinstance(fuel, bool) or not isinstance(fuel, (int, np.integer)):
        raise ValueError(f"fuel must be a nonnegative integer; got {fuel!r}")
    if fuel < 0:
        raise ValueError(f"fuel must be nonnegative; got {fuel}")
    return int(fuel)
