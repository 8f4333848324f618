import pytest

from kordlib.octave import Octave


def test_self_overflow():
    with pytest.raises(OverflowError):
        Octave.from_index(15) + Octave.ONE


def test_int_add_overflow():
    with pytest.raises(OverflowError, match="overflow"):
        Octave.from_index(15) + 1


def test_int_add_underflow():
    with pytest.raises(OverflowError, match="underflow"):
        Octave.from_index(0) + -1


def test_int_sub_overflow():
    with pytest.raises(OverflowError, match="overflow"):
        Octave.from_index(15) - -1


def test_int_sub_underflow():
    with pytest.raises(OverflowError, match="underflow"):
        Octave.from_index(0) - 1


def test_add_assign_self():
    a = Octave.from_index(4)
    a += Octave.ONE
    assert a is Octave.FIVE
    assert a.static_name() == "5"


def test_add_assign_int():
    a = Octave.from_index(4)
    a += 1
    assert a is Octave.FIVE
    assert a.static_name() == "5"


def test_sub_assign_int():
    a = Octave.from_index(4)
    a -= 1
    assert a is Octave.THREE
    assert a.static_name() == "3"


def test_properties():
    assert Octave.default() is Octave.FOUR


def test_names():
    names = [Octave.from_index(i).static_name() for i in range(16)]
    assert " ".join(names) == "0 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15"


def test_from_index():
    assert Octave.from_index(0) is Octave.ZERO
    assert Octave.from_index(15) is Octave.FIFTEEN


def test_from_index_overflow():
    with pytest.raises(ValueError, match="Octave overflow."):
        Octave.from_index(16)


def test_add_returns_octave():
    result = Octave.from_index(2) + Octave.from_index(3)
    assert result is Octave.FIVE
    assert result.static_name() == "5"