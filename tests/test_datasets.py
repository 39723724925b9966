"""Tests for the seeded dataset generators."""

from __future__ import annotations

import numpy as np
import pytest

from selsort.datasets import SUPPORTED_DISTS, make_dataset


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "random", "params": {"range": [0, 50]}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 4, "range": [10, 20]}},
        {"dist": "reversed"},
        {"dist": "constant", "params": {"value": 3}},
    ],
    ids=lambda s: s["dist"],
)
def test_every_dist_gives_n_naturals_deterministically(spec) -> None:
    a = make_dataset(100, spec, _rng(42))
    assert len(a) == 100
    assert all(isinstance(v, int) and v >= 0 for v in a)
    assert make_dataset(100, spec, _rng(42)) == a
    assert make_dataset(0, spec, _rng(42)) == []


def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {"random", "nearly_sorted", "few_uniques", "reversed", "constant"}


def test_random_range_is_inclusive() -> None:
    a = make_dataset(2000, {"dist": "random", "params": {"range": [3, 4]}}, _rng())
    assert set(a) == {3, 4}


def test_nearly_sorted_keeps_values() -> None:
    a = make_dataset(50, {"dist": "nearly_sorted", "params": {"swap_frac": 0.2}}, _rng(1))
    assert sorted(a) == list(range(50))
    assert make_dataset(50, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, _rng()) == list(range(50))


def test_few_uniques_caps_distinct_values() -> None:
    a = make_dataset(500, {"dist": "few_uniques", "params": {"k": 5}}, _rng(3))
    assert 1 <= len(set(a)) <= 5
    b = make_dataset(500, {"dist": "few_uniques", "params": {"k": 50, "range": [0, 2]}}, _rng(3))
    assert set(b) <= {0, 1, 2}


def test_reversed_and_constant() -> None:
    assert make_dataset(4, {"dist": "reversed"}, _rng()) == [3, 2, 1, 0]
    assert make_dataset(3, {"dist": "constant"}, _rng()) == [0, 0, 0]


@pytest.mark.parametrize(
    "n, spec, message",
    [
        (-1, {"dist": "reversed"}, "nonnegative"),
        (2.0, {"dist": "reversed"}, "must be an int"),
        (3, ["random"], "spec must be a dict"),
        (3, {"dist": "gaussian"}, "Unsupported dataset dist"),
        (3, {"dist": "random"}, "range must be provided"),
        (3, {"dist": "random", "params": {"range": [5, 1]}}, "min > max"),
        (3, {"dist": "random", "params": {"range": [-5, 1]}}, "natural numbers"),
        (3, {"dist": "random", "params": {"range": [1]}}, "2-element"),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 1.5}}, "swap_frac"),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}, "swap_frac"),
        (3, {"dist": "few_uniques", "params": {}}, "k must be"),
        (3, {"dist": "constant", "params": {"value": -1}}, "natural number"),
    ],
)
def test_invalid_specs_raise(n, spec, message) -> None:
    with pytest.raises(ValueError, match=message):
        make_dataset(n, spec, _rng())
