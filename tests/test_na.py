from utilkit import NA
from utilkit.types.na import is_na


def test_na_is_cached_per_type():
    assert NA(int) is NA(int)
    assert NA() is NA(None)
    assert NA(int) is not NA(str)


def test_na_is_falsy_and_empty():
    assert not NA(int)
    assert str(NA(float)) == ""
    assert f"{NA(float)}" == ""
    assert f"{NA(float):.2f}" == "NaN"


def test_na_repr():
    assert repr(NA()) == "NA"
    assert repr(NA(int)) == "NA[int]"


def test_na_comparisons_are_false():
    na = NA(int)

    assert not na == na
    assert na != 1
    assert not na < 1
    assert not na > 1
    assert not na <= 1
    assert not na >= 1


def test_na_arithmetic_propagates():
    na = NA(int)

    assert is_na(na + 1)
    assert is_na(1 + na)
    assert is_na(na * 2)
    assert is_na(2 - na)
    assert is_na(-na)
    assert is_na(abs(na))


def test_na_is_hashable():
    assert len({NA(int), NA(int), NA(str)}) == 2
