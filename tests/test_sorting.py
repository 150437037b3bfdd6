from hypothesis import given
from hypothesis import strategies as st

from introalgos.sorting import insertion_sort, merge_sort, recursive_insertion_sort


def _ordered(result):
    return all(a <= b for a, b in zip(result, result[1:]))


@given(st.lists(st.integers(), max_size=200))
def test_sorts_match_builtin(values):
    expected = sorted(values)
    assert insertion_sort(values) == expected
    assert recursive_insertion_sort(values) == expected
    assert merge_sort(values) == expected


@given(st.lists(st.integers(-5, 5), max_size=100))
def test_result_is_ordered_permutation(values):
    for result in (
        insertion_sort(values),
        recursive_insertion_sort(values),
        merge_sort(values),
    ):
        assert len(result) == len(values)
        assert _ordered(result)
        assert sorted(result) == sorted(values)


def test_input_is_left_untouched():
    values = [5, 2, 4, 6, 1, 3]
    snapshot = list(values)
    assert insertion_sort(values) == [1, 2, 3, 4, 5, 6]
    assert values == snapshot
    assert recursive_insertion_sort(values) == [1, 2, 3, 4, 5, 6]
    assert values == snapshot
    assert merge_sort(values) == [1, 2, 3, 4, 5, 6]
    assert values == snapshot


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert recursive_insertion_sort([]) == []
    assert recursive_insertion_sort([7]) == [7]
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]


def test_accepts_any_iterable():
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(x for x in "cab") == ["a", "b", "c"]
    assert recursive_insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert recursive_insertion_sort(x for x in "cab") == ["a", "b", "c"]
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert merge_sort(x for x in "cab") == ["a", "b", "c"]


@given(st.lists(st.integers(), max_size=100))
def test_sorting_is_idempotent(values):
    once = insertion_sort(values)
    assert insertion_sort(once) == once
    once = recursive_insertion_sort(values)
    assert recursive_insertion_sort(once) == once
    once = merge_sort(values)
    assert merge_sort(once) == once


def test_reverse_ordered_input():
    values = list(range(50, 0, -1))
    expected = list(range(1, 51))
    assert insertion_sort(values) == expected
    assert recursive_insertion_sort(values) == expected
    assert merge_sort(values) == expected