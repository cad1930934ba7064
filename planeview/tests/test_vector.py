import numpy as np
import pytest

from planeview import DimensionMismatch, IndexOutOfBounds, InvalidDimension, Vector


def test_zeros_has_requested_length():
    v = Vector.zeros(4)
    assert v.length == 4
    assert v.to_list() == [0.0, 0.0, 0.0, 0.0]


def test_zeros_rejects_negative_length():
    with pytest.raises(InvalidDimension):
        Vector.zeros(-1)


def test_add_is_in_place():
    v = Vector(1, 2, 3)
    result = v.add(Vector(10, 20, 30))
    assert result is v
    assert v.to_list() == [11.0, 22.0, 33.0]


def test_add_length_mismatch():
    with pytest.raises(DimensionMismatch):
        Vector(1, 2).add(Vector(1, 2, 3))


def test_scale_returns_new_vector():
    v = Vector(1, -2, 3)
    scaled = v.scale(2)
    assert scaled.to_list() == [2.0, -4.0, 6.0]
    assert v.to_list() == [1.0, -2.0, 3.0]


def test_dot_instance_and_static_forms_agree():
    a = Vector(1, 2, 3)
    b = Vector(4, -5, 6)
    assert a.dot(b) == 12.0
    assert Vector.inner(a, b) == a.dot(b)
    assert np.isclose(a.dot(b), np.dot(a.to_list(), b.to_list()))


def test_dot_length_mismatch():
    with pytest.raises(DimensionMismatch):
        Vector.inner(Vector(1), Vector(1, 2))


def test_copy_is_deep():
    v = Vector(1, 2)
    c = v.copy()
    c.add(Vector(1, 1))
    assert v.to_list() == [1.0, 2.0]
    assert Vector.from_vector(v) == v


def test_get_entry_out_of_range():
    v = Vector(1, 2)
    assert v[1] == 2.0
    with pytest.raises(IndexOutOfBounds):
        v.get_entry(2)
    with pytest.raises(IndexError):
        v[-1]


def test_str_prints_a_column():
    assert str(Vector(1, 2)) == "1.0\n2.0\n"
