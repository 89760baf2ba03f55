import logging

import pytest

from utilkit import NA, Sequence
from utilkit.lib import array


def test_new():
    seq = array.new(3, 0, int)

    assert seq == [0, 0, 0]
    assert seq.element_type is int
    assert array.size(array.new()) == 0


def test_new_negative_size():
    with pytest.raises(AssertionError):
        array.new(-1)


def test_new_without_initial_value_is_na():
    seq = array.new(2)

    assert all(isinstance(v, NA) for v in seq)


def test_from_items_and_from_string():
    assert array.from_items(1, 2, 3) == [1, 2, 3]
    assert array.from_string("ab") == ["a", "b"]


def test_push_pop_shift_unshift():
    seq = array.from_items(2, 3)
    array.push(seq, 4)
    array.unshift(seq, 1)

    assert seq == [1, 2, 3, 4]
    assert array.pop(seq) == 4
    assert array.shift(seq) == 1
    assert seq == [2, 3]


def test_get_and_set():
    seq = array.from_items(1, 2, 3)
    array.set(seq, 0, 10)

    assert array.get(seq, 0) == 10
    assert array.get(seq, 5) == 0
    with pytest.raises(IndexError):
        array.set(seq, 3, 0)
    with pytest.raises(IndexError):
        array.set(seq, -1, 0)


def test_search():
    seq = array.from_items(1, 5, 10, 11, 5)

    assert array.indexof(seq, 5) == 1
    assert array.lastindexof(seq, 5) == 4
    assert array.includes(seq, 10)
    assert array.find(seq, lambda v: v > 5) == 10
    assert array.find(seq, lambda v: v > 50) == 0
    assert array.find_index(seq, lambda v: v > 50) == -1


def test_every_and_some_default_to_truthiness():
    assert array.every(array.from_items(1, True, "x"))
    assert not array.every(array.from_items(1, 0))
    assert array.some(array.from_items(0, "", 3))
    assert not array.some(array.from_items(0, ""))


def test_fill_logs_rejected_range(caplog):
    seq = array.from_items(1, 2, 3)

    with caplog.at_level(logging.WARNING, logger="utilkit"):
        assert not array.fill(seq, 0, 5)

    assert seq == [1, 2, 3]
    assert "rejected" in caplog.text


def test_fill():
    seq = array.from_items(1, 2, 3)

    assert array.fill(seq, 0, 1)
    assert seq == [1, 0, 0]


def test_transforms():
    seq = array.from_items(1, [2, [3]])

    assert array.flat(seq, 2) == [1, 2, 3]
    assert array.map(array.from_items(1, 2), lambda v: v + 1) == [2, 3]
    assert array.flat_map(array.from_items(1, 2), lambda v: [v, v]) == [1, 1, 2, 2]
    assert array.join(array.from_items("a", "b", "c")) == "a,b,c"


def test_filter_in_place():
    seq = array.from_items(1, 2, 3, 4)

    assert array.filter(seq, lambda v: v > 2) == [3, 4]
    assert seq == [3, 4]


def test_reduce():
    seq = array.from_items(1, 2, 3)

    assert array.reduce(seq, lambda acc, v: acc + v) == 6
    assert array.reduce(seq, lambda acc, v: acc + v, 10) == 16


def test_reduce_from_none():
    seq = array.from_items(1, 2, 3)

    assert array.reduce(seq, lambda acc, v: v if acc is None else acc, None) == 1


def test_sort_reverse_and_sort_indices():
    seq = array.from_items(3, 1, 2)

    assert array.sort_indices(seq) == [1, 2, 0]
    assert array.sort_indices(seq, descending=True) == [0, 2, 1]

    array.sort(seq)
    assert seq == [1, 2, 3]

    array.reverse(seq)
    assert seq == [3, 2, 1]


def test_slice_splice_concat_copy():
    seq = array.from_items(1, 2, 3, 4, 5)

    assert array.slice(seq, 1, 3) == [2, 3]
    with pytest.raises(IndexError):
        array.slice(seq, 3, 1)

    assert array.to_spliced(seq, 0, 2) == [3, 4, 5]
    assert array.splice(seq, 1, 3, 99) == [1, 99, 5]

    copy = array.copy(seq)
    assert array.concat(seq, [6]) is seq
    assert seq == [1, 99, 5, 6]
    assert copy == [1, 99, 5]
    assert isinstance(copy, Sequence)
