import random

import pytest

from algotoolkit.sequences import (
    array_delete,
    array_insert,
    counting_sort,
    format_sequence,
    format_value,
    insertion_sort,
    merge,
    merge_sort,
)


def test_format_sequence_empty():
    assert format_sequence([]) == "[]"


def test_format_sequence_with_prefix_and_floats():
    assert format_sequence([0.0, 1.5, 2.0], "A = ") == "A = [0, 1.5, 2]"


def test_format_value_infinity():
    assert format_value(float("inf")) == "inf"


def test_format_value_int_matches_str():
    assert format_value(42) == str(42)


def test_array_insert_front_repeatedly():
    items = []
    for i in range(5):
        array_insert(items, 0, i)
    assert items == list(reversed(range(5)))


def test_array_insert_at_end_appends():
    items = [1, 2]
    array_insert(items, 2, 3)
    assert items == [1, 2, 3]


def test_array_insert_middle():
    items = [1, 3]
    array_insert(items, 1, 2)
    assert items == [1, 2, 3]


@pytest.mark.parametrize("index", [-1, 4])
def test_array_insert_out_of_range(index):
    items = [1, 2, 3]
    with pytest.raises(IndexError):
        array_insert(items, index, 0)
    assert items == [1, 2, 3]


def test_array_delete_front_until_empty():
    items = [0.0, 1.0, 2.0, 3.0, 4.0]
    seen = []
    while items:
        seen.append(items[0])
        array_delete(items, 0)
    assert seen == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert items == []


def test_array_delete_last_and_middle():
    items = [1, 2, 3, 4]
    array_delete(items, 3)
    assert items == [1, 2, 3]
    array_delete(items, 1)
    assert items == [1, 3]


@pytest.mark.parametrize("index", [-1, 3])
def test_array_delete_out_of_range(index):
    with pytest.raises(IndexError):
        array_delete([1, 2, 3], index)


def test_insertion_sort_driver_values():
    values = [3.0, 1.0, 0.0, 18.0, 7.0]
    expected = sorted(values)
    insertion_sort(values)
    assert values == expected


def test_insertion_sort_random_matches_sorted():
    rng = random.Random(1)
    values = [rng.randint(-50, 50) for _ in range(100)]
    expected = sorted(values)
    insertion_sort(values)
    assert values == expected


def test_merge_interleaves_sorted_inputs():
    assert merge([1, 4, 6], [2, 3, 7]) == sorted([1, 4, 6, 2, 3, 7])


def test_merge_is_stable():
    left = [(1, "left")]
    right = [(1, "right")]

    class Key:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    merged = merge([Key(p) for p in left], [Key(p) for p in right])
    assert [k.pair[1] for k in merged] == ["left", "right"]


def test_merge_sort_driver_values():
    values = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6, 17, 10, 11, 14, 16, 15, 7, 3, 13, 20]
    values = [float(v) for v in values]
    expected = sorted(values)
    merge_sort(values)
    assert values == expected


def test_merge_sort_empty_and_single():
    empty = []
    merge_sort(empty)
    assert empty == []
    single = [5]
    merge_sort(single)
    assert single == [5]


def test_counting_sort_driver_values():
    values = [5, 3, 0, 1, 5, 3]
    expected = sorted(values)
    counting_sort(values, 6)
    assert values == expected


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 6], 6)