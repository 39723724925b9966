"""Tests for the sortedness/permutation oracles and the contract helpers."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from selsort.algorithms import selection_sort, selection_sort_fuel
from selsort.validate import (
    assert_no_mutation,
    assert_select_contract,
    assert_sorting_contract,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_sorted,
    is_sorted_by_index,
    is_sorting_algorithm,
    permutation_counter_diff,
    remove_one,
)

small_lists = st.lists(st.integers(min_value=0, max_value=20), max_size=25)


@pytest.mark.parametrize(
    "xs, expected",
    [
        ([], True),
        ([4], True),
        ([1, 1, 2], True),
        ([2, 1], False),
        ([1, 3, 2, 4], False),
    ],
)
def test_is_sorted_cases(xs, expected) -> None:
    assert is_sorted(xs) is expected
    assert is_sorted_by_index(xs) is expected


def test_is_nondecreasing_alias() -> None:
    assert is_nondecreasing is is_sorted


@settings(max_examples=200)
@given(xs=small_lists)
def test_adjacent_and_index_sortedness_agree(xs) -> None:
    assert is_sorted(xs) == is_sorted_by_index(xs)


def test_first_violation_index() -> None:
    assert first_nondecreasing_violation_index([1, 2, 2]) is None
    assert first_nondecreasing_violation_index([1, 3, 2, 0]) == 1


def test_permutation_oracle() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert not is_permutation([1], [1, 1])


@settings(max_examples=100)
@given(a=small_lists, b=small_lists, c=small_lists)
def test_permutation_is_an_equivalence(a, b, c) -> None:
    assert is_permutation(a, a)
    assert is_permutation(a, b) == is_permutation(b, a)
    if is_permutation(a, b) and is_permutation(b, c):
        assert is_permutation(a, c)
    assert is_permutation(a, list(reversed(a)))


def test_permutation_counter_diff() -> None:
    assert permutation_counter_diff([1, 2, 2], [2, 1, 2]) == {}
    assert permutation_counter_diff([1, 2, 2, 3], [1, 2, 4]) == {2: 1, 3: 1, 4: -1}


def test_remove_one() -> None:
    xs = [1, 2, 1]
    assert remove_one(xs, 1) == [2, 1]
    assert xs == [1, 2, 1]
    with pytest.raises(ValueError, match="does not occur"):
        remove_one(xs, 9)


def test_equals_oracle() -> None:
    assert equals_oracle([3, 1, 2], [1, 2, 3])
    assert not equals_oracle([3, 1, 2], [1, 2])


def test_assert_no_mutation() -> None:
    assert_no_mutation([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="length changed"):
        assert_no_mutation([1, 2], [1])
    with pytest.raises(AssertionError, match="index 1"):
        assert_no_mutation([1, 2], [1, 5])


def test_select_contract_accepts_valid_result() -> None:
    assert_select_contract(5, [2, 8, 1, 9], (1, [5, 8, 2, 9]))


@pytest.mark.parametrize(
    "result, message",
    [
        ((6, [5, 2, 8, 1, 9]), "greater than candidate"),
        ((2, [5, 8, 1, 9]), "greater than some element"),
        ((0, [5, 2, 8, 1, 9]), "does not occur"),
        ((1, [5, 8, 2]), "remainder"),
    ],
)
def test_select_contract_rejects_bad_results(result, message) -> None:
    with pytest.raises(AssertionError, match=message):
        assert_select_contract(5, [2, 8, 1, 9], result)


def test_sorting_contract_reports_first_violation() -> None:
    with pytest.raises(AssertionError, match="not sorted at i=1"):
        assert_sorting_contract([1, 3, 2], [1, 3, 2])


def test_is_sorting_algorithm() -> None:
    inputs = [[], [2, 1], [3, 1, 4, 1, 5]]
    assert is_sorting_algorithm(selection_sort.sort, inputs)
    assert is_sorting_algorithm(sorted, inputs)
    assert not is_sorting_algorithm(
        lambda a: selection_sort_fuel.sort(a, config={"fuel_delta": -2}), inputs
    )
    assert not is_sorting_algorithm(lambda a: a, inputs)
