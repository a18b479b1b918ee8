import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    insertion_sort,
    merge_sort,
    min_max,
    quicksort,
    selection_sort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@given(values=int_lists)
def test_sorts_match_builtin_sorted(values):
    expected = sorted(values)
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quicksort(values) == expected


def test_sort_does_not_mutate_input():
    values = [5, 3, 9, 1, 3]
    snapshot = list(values)
    expected = sorted(snapshot)
    assert insertion_sort(values) == expected
    assert values == snapshot
    assert selection_sort(values) == expected
    assert values == snapshot
    assert merge_sort(values) == expected
    assert values == snapshot
    assert quicksort(values) == expected
    assert values == snapshot


def test_sort_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([42]) == [42]
    assert selection_sort([]) == []
    assert selection_sort([42]) == [42]
    assert merge_sort([]) == []
    assert merge_sort([42]) == [42]
    assert quicksort([]) == []
    assert quicksort([42]) == [42]


def test_sort_accepts_any_iterable():
    expected = [2, 4, 6, 8]
    assert insertion_sort(iter((4, 2, 8, 6))) == expected
    assert selection_sort(iter((4, 2, 8, 6))) == expected
    assert merge_sort(iter((4, 2, 8, 6))) == expected
    assert quicksort(iter((4, 2, 8, 6))) == expected


def test_sort_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert quicksort(words) == expected


def test_quicksort_handles_long_sorted_input():
    values = list(range(5000))
    assert quicksort(values) == values
    assert quicksort(reversed(values)) == values


@given(values=st.lists(st.integers(), min_size=1, max_size=60))
def test_min_max_matches_builtins(values):
    assert min_max(values) == (min(values), max(values))


def test_min_max_single_element():
    assert min_max([7]) == (7, 7)


def test_min_max_two_elements_in_either_order():
    assert min_max([9, 2]) == (2, 9)
    assert min_max([2, 9]) == (2, 9)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])