"""
Pluggable sorting algorithms.

Each module here exposes the runner contract:
    sort(a: list[int], *, config: dict | None = None) -> list[int]

and is resolved by name from an experiment config, e.g.
    algorithms:
      - name: selection_sort
      - name: selection_sort_fuel
        config: {fuel_delta: -1}
"""

ALGORITHMS = (
    "builtin_timsort",
    "selection_sort",
    "selection_sort_fuel",
)

__all__ = ["ALGORITHMS"]
