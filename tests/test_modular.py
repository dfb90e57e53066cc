from math import gcd

import pytest

from hillcipher.errors import NoInverseError
from hillcipher.modular import mod_inverse, reduce


@pytest.mark.parametrize("x, expected", [
    (0, 0),
    (25, 25),
    (26, 0),
    (52, 0),
    (79, 1),
    (-1, 25),
    (-25, 1),
    (-27, 25),
    (-26, 0),
    (-52, 0),
])
def test_reduce(x, expected):
    assert reduce(x) == expected


def test_reduce_other_modulus():
    assert reduce(7, 5) == 2
    assert reduce(-7, 5) == 3


def test_reduce_always_in_range():
    for x in range(-200, 200):
        assert 0 <= reduce(x) < 26
        assert reduce(x) == x % 26


@pytest.mark.parametrize("a, expected", [(9, 3), (3, 9), (25, 25), (-1, 25), (27, 1), (1, 1)])
def test_mod_inverse(a, expected):
    assert mod_inverse(a) == expected


def test_mod_inverse_units():
    for a in range(1, 26):
        if gcd(a, 26) == 1:
            assert (a * mod_inverse(a)) % 26 == 1


@pytest.mark.parametrize("a", [0, 2, 4, 13, 26, -2])
def test_no_inverse(a):
    with pytest.raises(NoInverseError):
        mod_inverse(a)


def test_no_inverse_is_value_error():
    with pytest.raises(ValueError):
        mod_inverse(13)
