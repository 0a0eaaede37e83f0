import random

from dsakit.sorting import binary_search, merge_sort

SOURCE_ARRAY = [401, 32, 199, 501, 222, 10, 2, 3, 919]


def test_merge_sort_source_example():
    assert merge_sort(SOURCE_ARRAY) == sorted(SOURCE_ARRAY)


def test_merge_sort_does_not_mutate_input():
    data = list(SOURCE_ARRAY)
    merge_sort(data)
    assert data == SOURCE_ARRAY


def test_merge_sort_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]


def test_merge_sort_random_lists():
    rng = random.Random(3)
    for _ in range(50):
        data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        assert merge_sort(data) == sorted(data)


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Key(1, "a"), Key(0, "b"), Key(1, "c"), Key(0, "d")]
    result = merge_sort(items)
    assert [k.tag for k in result] == ["b", "d", "a", "c"]


def test_binary_search_source_example():
    data = merge_sort(SOURCE_ARRAY)
    index = binary_search(data, 501)
    assert data[index] == 501


def test_binary_search_every_element_found():
    data = merge_sort(SOURCE_ARRAY)
    for value in SOURCE_ARRAY:
        assert data[binary_search(data, value)] == value


def test_binary_search_missing():
    data = merge_sort(SOURCE_ARRAY)
    assert binary_search(data, 4) is None
    assert binary_search(data, 10_000) is None
    assert binary_search([], 1) is None