"""
Selection sort, fuel-bounded (legacy/demo).

Config keys (both optional, mutually exclusive):
    fuel       : int  absolute fuel budget
    fuel_delta : int  added to len(a); the result is clamped at 0

With neither key the fuel is exactly len(a) and the output is correct. With
less fuel than len(a) the output is silently truncated, which is the point
of running this variant in an experiment with validation turned on.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from selsort.core import selsort_with_fuel

from ._config import check_config

__all__ = ["resolve_fuel", "sort"]


def resolve_fuel(n: int, config: Optional[Dict[str, Any]] = None) -> int:
    """Compute the fuel budget for an input of length `n`."""
    cfg = check_config("selection_sort_fuel", config, allowed=("fuel", "fuel_delta"))
    if "fuel" in cfg and "fuel_delta" in cfg:
        raise ValueError("selection_sort_fuel: set at most one of 'fuel' and 'fuel_delta'")
    if "fuel" in cfg:
        return cfg["fuel"]
    delta = cfg.get("fuel_delta", 0)
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise ValueError(f"selection_sort_fuel: fuel_delta must be an int; got {delta!r}")
    return max(0, n + delta)


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return selsort_with_fuel(a, resolve_fuel(len(a), config))
