"""
Correctness tests for every module in `selsort.algorithms`, checked against
the oracle (Python's built-in sorted) and the sortedness/permutation oracles.

What we check for each algorithm at its default config:
- Output exactly matches the oracle
- Nondecreasing order and permutation preservation
- No input mutation
- Determinism (same input -> same output)
"""

from __future__ import annotations

import importlib
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from selsort.algorithms import ALGORITHMS
from selsort.validate import assert_no_mutation, is_permutation, is_sorted, oracle_sort

MODULES = [importlib.import_module(f"selsort.algorithms.{name}") for name in ALGORITHMS]
IDS = list(ALGORITHMS)


def _check_one(sort, a: List[int]) -> None:
    a_before = list(a)
    out = sort(a, config=None)

    assert_no_mutation(a_before, a)
    assert out == oracle_sort(a), "Output must exactly match the oracle"
    assert is_sorted(out), "Output is not nondecreasing"
    assert is_permutation(a, out), "Output is not a permutation of input"
    assert sort(a, config=None) == out, "Algorithm must be deterministic"


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize("mod", MODULES, ids=IDS)
@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
        list(range(20)),
        list(range(20))[::-1],
    ],
)
def test_unit_cases(mod, a: List[int]) -> None:
    _check_one(mod.sort, a)


@pytest.mark.parametrize("mod", MODULES, ids=IDS)
def test_rejects_unknown_config_keys(mod) -> None:
    with pytest.raises(ValueError, match="unknown config keys"):
        mod.sort([2, 1], config={"nope": 1})


# ------------------------- property-based tests ------------------------- #

naturals = st.integers(min_value=0, max_value=10_000)


@pytest.mark.parametrize("mod", MODULES, ids=IDS)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(naturals, max_size=150))
def test_property_random_small_range(mod, a: List[int]) -> None:
    _check_one(mod.sort, a)


@pytest.mark.parametrize("mod", MODULES, ids=IDS)
@settings(deadline=None, max_examples=60)
@given(a=st.lists(st.integers(min_value=0, max_value=7), max_size=200))
def test_property_many_duplicates(mod, a: List[int]) -> None:
    _check_one(mod.sort, a)
