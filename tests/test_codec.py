import pytest

from hillcipher.codec import ColumnVector, decode, encode, normalize, pad


def test_normalize():
    assert normalize("Hello, World! 42") == "helloworld"
    assert normalize("123 !?") == ""


def test_pad():
    assert pad("abc") == "abcc"
    assert pad("ab") == "ab"
    assert pad("") == ""


def test_encode_pads_and_groups():
    assert encode("abc") == [ColumnVector(1, 2), ColumnVector(3, 3)]
    assert encode("Hello!") == [(8, 5), (12, 12), (15, 15)]
    assert encode("") == []


def test_decode():
    assert decode([ColumnVector(1, 2), ColumnVector(3, 3)]) == "abcc"
    assert decode([]) == ""


def test_decode_reduces_entries():
    assert decode([ColumnVector(27, -1)]) == "ay"
    assert decode([ColumnVector(26, 52)]) == "zz"


def test_column_vector_matrix_form():
    v = ColumnVector(4, 7)
    assert v.as_matrix() == [[4], [7]]
    assert ColumnVector.from_matrix([[4], [7]]) == v


def test_column_vector_bad_shape():
    with pytest.raises(ValueError):
        ColumnVector.from_matrix([[1, 2], [3, 4]])
