import pytest

from utilkit import Sequence, SequenceView
from utilkit.core.flatten import flatten, flatten_items, is_nested


def test_is_nested():
    assert is_nested([1])
    assert is_nested((1,))
    assert is_nested(Sequence([1]))
    assert is_nested(SequenceView([1, 2]))
    assert not is_nested("abc")
    assert not is_nested(b"abc")
    assert not is_nested(1)
    assert not is_nested({1: 2})


def test_flatten_leaf():
    assert flatten(1, 3) == [1]
    assert flatten("abc", 3) == ["abc"]


def test_flatten_zero_depth_keeps_value_whole():
    assert flatten([1, [2]], 0) == [[1, [2]]]


@pytest.mark.parametrize("depth, expected", [
    (1, [1, [2, [3]]]),
    (2, [1, 2, [3]]),
    (3, [1, 2, 3]),
    (100, [1, 2, 3]),
])
def test_flatten_depth(depth, expected):
    assert flatten([1, [2, [3]]], depth) == expected


def test_flatten_items_identity_at_depth_zero():
    items = [1, [2, [3]], (4,)]

    assert flatten_items(items, 0) == items
    assert flatten_items(items, 0) is not items


def test_flatten_items_full():
    assert flatten_items([[1, [2]], [], ([3],)], 3) == [1, 2, 3]


def test_flatten_items_view_of_list():
    base = [1, [2, 3], 4]

    assert flatten_items([SequenceView(base)[1:]], 2) == [2, 3, 4]


def test_flatten_items_negative_depth():
    with pytest.raises(ValueError):
        flatten_items([[1]], -1)
