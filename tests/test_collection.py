import pytest

from autops.common.collection import ComparatorList
from autops.common.errors import ListIndexOutOfRangeError, ListNilComparatorError


def int_compare(a, b):
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def test_list_basic_operations():
    values = ComparatorList(int_compare, [])
    assert values.is_empty()

    for value in (3, 1, 2, 2):
        values.append(value)

    assert values.find(3) == (0, 3)
    assert values.find(2) == (2, 2)
    assert values.find(56) is None

    assert len(values) == 4
    assert not values.is_empty()

    assert 1 in values
    assert 5 not in values
    assert 2 in values

    values.remove_index(1)
    assert 1 not in values
    assert values.items() == [3, 2, 2]

    values.remove(2)
    assert 2 in values
    values.remove(2)
    assert 2 not in values

    with pytest.raises(ListIndexOutOfRangeError):
        values.remove_index(10)

    values.append(4)
    values.append(3)
    values.remove_all(3)
    assert 3 not in values
    assert values.items() == [4]

    values.append(7)
    values.append(2)
    values.append(6)
    values.sort()
    assert values.items() == [2, 4, 6, 7]

    values.clear()
    assert values.is_empty()
    assert len(values) == 0


def test_remove_absent_item_is_noop():
    values = ComparatorList(int_compare, [1, 2])
    values.remove(9)
    assert values.items() == [1, 2]


def test_items_returns_copy():
    values = ComparatorList(int_compare, [1, 2])
    snapshot = values.items()
    snapshot.append(3)
    assert values.items() == [1, 2]


def test_iteration():
    values = ComparatorList(int_compare, [5, 6, 7])
    assert list(values) == [5, 6, 7]


def test_select_one():
    values = ComparatorList(int_compare, [1, 2, 3, 4, 5, 6])
    assert values.select_one(lambda i: i % 97 == 0) is None
    assert values.select_one(lambda i: i % 2 == 0) == 2


def test_select_all():
    values = ComparatorList(int_compare, [1, 2, 3, 4, 5, 6])
    match = values.select_all(lambda i: i % 2 == 0)
    assert match == [2, 4, 6]


def test_missing_comparator():
    values = ComparatorList(None, [1, 2])
    assert values.items() == [1, 2]
    with pytest.raises(ListNilComparatorError):
        _ = 1 in values