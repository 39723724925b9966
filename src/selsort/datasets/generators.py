"""
Seeded generators of natural-number datasets for selection-sort runs.

Distributions (spec = {"dist": <name>, "params": {...}}):

- "random":        uniform over params["range"] = [lo, hi], inclusive, required.
- "nearly_sorted": [0, 1, ..., n-1] with ceil(swap_frac * n) random pair
                   swaps; swap_frac in [0, 1], default 0.05.
- "few_uniques":   at most params["k"] distinct values drawn from an optional
                   inclusive range (default [0, 2**32 - 1]), then n uniform
                   picks among them. Produces many ties for `select`.
- "reversed":      [n-1, ..., 0]. Worst case for the number of displacements.
- "constant":      n copies of params["value"] (default 0).

All values are naturals (>= 0). The caller owns the numpy Generator, so the
same seed always reproduces the same list. "reversed" and "constant" never
touch it.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_DEFAULT_FEW_UNIQUES_RANGE = (0, 2**32 - 1)

Params = Dict[str, Any]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Build a list of `n` naturals following `spec`.

    Raises
    ------
    ValueError
        If `n` is not a nonnegative int, `spec` is not a dict, the dist is
        unknown, or its params are malformed.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"n must be an int; got {n!r}")
    if n < 0:
        raise ValueError(f"n must be nonnegative; got {n}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)
    if gen is None:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


def _random(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _natural_range("random", params["range"])
    # integers() is half-open; hi + 1 makes it inclusive
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _nearly_sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    swap_frac = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(swap_frac)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {swap_frac!r}") from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    arr = list(range(n))
    swaps = math.ceil(swap_frac * n)
    if n == 0 or swaps == 0:
        return arr
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _natural_range("few_uniques", params.get("range", _DEFAULT_FEW_UNIQUES_RANGE))
    if n == 0:
        return []

    k = min(k, n, hi - lo + 1)
    # Draw distinct values through `rng` only, so the seed fixes the output.
    values: List[int] = []
    seen = set()
    while len(values) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == k:
                    break
    return [values[i] for i in rng.integers(0, k, size=n).tolist()]


def _reversed(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _constant(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    value = params.get("value", 0)
    if not _is_natural(value):
        raise ValueError(f"constant.params.value must be a natural number; got {value!r}")
    return [int(value)] * n


_GENERATORS: Dict[str, Callable[[int, Params, np.random.Generator], List[int]]] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "reversed": _reversed,
    "constant": _constant,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


def _natural_range(dist: str, spec: Any) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo, hi = spec
    if not _is_natural(lo) or not _is_natural(hi):
        raise ValueError(f"{dist}.params.range values must be natural numbers; got {list(spec)}")
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return int(lo), int(hi)


def _is_natural(x: Any) -> bool:
    return not isinstance(x, bool) and isinstance(x, (int, np.integer)) and x >= 0
