import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrill.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    quick_sort,
    selection_sort,
    sort_colors,
)

SAMPLE = [4, 2, 8, 5, 7, 1, 0, 9, 3, 6]


def _copies(values):
    return tuple(list(values) for _ in range(6))


def test_sample_from_source():
    a, b, c, d, e, f = _copies(SAMPLE)
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    expected = sorted(SAMPLE)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected
    assert e == expected
    assert f == expected


def test_empty_and_single():
    a, b, c, d, e, f = _copies([])
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    assert a == b == c == d == e == f == []

    a, b, c, d, e, f = _copies([7])
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    assert a == b == c == d == e == f == [7]


def test_already_sorted_and_reversed():
    a, b, c, d, e, f = _copies(range(300))
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    assert a == b == c == d == e == f == list(range(300))

    a, b, c, d, e, f = _copies(range(300, 0, -1))
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    assert a == b == c == d == e == f == list(range(1, 301))


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin_sort(values):
    a, b, c, d, e, f = _copies(values)
    heap_sort(a)
    insertion_sort(b)
    merge_sort(c)
    quick_sort(d)
    selection_sort(e)
    bubble_sort(f)
    expected = sorted(values)
    assert a == expected
    assert b == expected
    assert c == expected
    assert d == expected
    assert e == expected
    assert f == expected


@given(values=st.lists(st.sampled_from([0, 1, 2]), max_size=60))
def test_sort_colors_orders_and_keeps_counts(values):
    nums = list(values)
    sort_colors(nums)
    assert nums == sorted(values)


def test_sort_colors_example():
    nums = [2, 0, 2, 1, 1, 0]
    sort_colors(nums)
    assert nums == [0, 0, 1, 1, 2, 2]


@given(
    first=st.lists(st.integers(-100, 100), max_size=20),
    second=st.lists(st.integers(-100, 100), max_size=20),
)
def test_merge_sorted_fills_buffer(first, second):
    a = sorted(first)
    b = sorted(second)
    buffer = a + [0] * len(b)
    merge_sorted(buffer, len(a), b, len(b))
    assert buffer == sorted(a + b)


def test_merge_sorted_with_empty_second():
    buffer = [1, 2, 3]
    merge_sorted(buffer, 3, [], 0)
    assert buffer == [1, 2, 3]


def test_merge_sorted_without_room_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_merge_sorted_negative_count_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], -1, [], 0)