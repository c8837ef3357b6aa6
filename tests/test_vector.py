"""Tests for Vector."""

import numpy as np
import pytest

from lineal import Vector, Index, Span, DimensionMismatchError, IndexOutOfRangeError


def test_zero_filled_construction():
    v = Vector(3)

    assert v.dimension == 3
    assert len(v) == 3
    assert list(v) == [0.0, 0.0, 0.0]


def test_construction_from_values():
    v = Vector([1.0, 2.0, 3.5])

    assert v.dimension == 3
    assert v.to_list() == [1.0, 2.0, 3.5]


def test_construction_copies_input():
    data = np.array([1.0, 2.0])
    v = Vector(data)
    data[0] = 100.0

    assert v[0] == 1.0


def test_invalid_construction():
    with pytest.raises(ValueError):
        Vector(-1)
    with pytest.raises(ValueError):
        Vector([[1.0, 2.0], [3.0, 4.0]])


def test_indexing_from_either_end():
    v = Vector([10.0, 20.0, 30.0])

    assert v[0] == 10.0
    assert v[-1] == 30.0
    assert v[Index(0, from_end=True)] == 30.0
    assert v[Index(1, from_end=True)] == 20.0

    v[-1] = 5.0
    v[Index(2, from_end=True)] = 7.0
    assert v.to_list() == [7.0, 20.0, 5.0]


def test_index_out_of_range():
    v = Vector(3)

    with pytest.raises(IndexOutOfRangeError):
        v[3]
    with pytest.raises(IndexOutOfRangeError):
        v[-4]
    with pytest.raises(IndexError):
        v[5] = 1.0


def test_range_read_is_a_copy():
    v = Vector([1.0, 2.0, 3.0, 4.0])

    part = v[1:3]
    assert part.dimension == 2
    assert part.to_list() == [2.0, 3.0]

    part[0] = 99.0
    assert v[1] == 2.0

    assert v[Span(2, 2)].to_list() == [3.0, 4.0]


def test_range_write():
    v = Vector(4)
    v[1:3] = Vector([5.0, 6.0])

    assert v.to_list() == [0.0, 5.0, 6.0, 0.0]


def test_range_write_dimension_mismatch():
    v = Vector(4)

    with pytest.raises(DimensionMismatchError) as excinfo:
        v[0:3] = Vector([1.0, 2.0])
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2


def test_add_subtract():
    v = Vector([1.0, 2.0, 3.0])
    w = Vector([4.0, 5.0, 6.0])

    assert (v + w).to_list() == [5.0, 7.0, 9.0]
    assert (w - v).to_list() == [3.0, 3.0, 3.0]


def test_hadamard():
    v = Vector([1.0, 2.0, 3.0])
    w = Vector([4.0, 5.0, 6.0])

    product = v ^ w
    assert product.dimension == v.dimension
    for i in range(v.dimension):
        assert product[i] == v[i] * w[i]
    assert v.hadamard(w) == product


def test_dot():
    v = Vector([1.0, 2.0, 3.0])
    w = Vector([4.0, -5.0, 6.0])

    expected = sum(v[i] * w[i] for i in range(3))
    assert v * w == expected
    assert v @ w == expected
    assert v.dot(w) == expected
    assert isinstance(v * w, float)


def test_scalar_multiply_both_orders():
    v = Vector([1.0, -2.0])

    assert (v * 3).to_list() == [3.0, -6.0]
    assert (3 * v).to_list() == [3.0, -6.0]
    assert (np.float64(0.5) * v).to_list() == [0.5, -1.0]


@pytest.mark.parametrize("operation", [
    lambda v, w: v + w,
    lambda v, w: v - w,
    lambda v, w: v ^ w,
    lambda v, w: v * w,
    lambda v, w: v.dot(w),
])
def test_dimension_mismatch(operation):
    with pytest.raises(DimensionMismatchError):
        operation(Vector(2), Vector(3))


def test_pair_is_a_two_dimensional_vector():
    v = Vector([1.0, 2.0])

    assert Vector.coerce((3.0, 4.0)) == Vector([3.0, 4.0])
    assert (v + (3.0, 4.0)).to_list() == [4.0, 6.0]
    assert ((3.0, 4.0) + v).to_list() == [4.0, 6.0]
    assert ((3.0, 4.0) - v).to_list() == [2.0, 2.0]
    assert v * (3.0, 4.0) == 11.0
    assert Vector.coerce((1.0, 2.0, 3.0)) is None


def test_iteration_is_restartable():
    v = Vector([1.0, 2.0, 3.0])

    assert list(v) == [1.0, 2.0, 3.0]
    assert list(v) == [1.0, 2.0, 3.0]
    assert sum(v) == 6.0


def test_string_forms():
    v = Vector([1.0, 2.5])

    assert str(v) == "1.0 2.5"
    assert repr(v) == "Vector([1.0, 2.5])"


def test_numpy_interop():
    v = Vector([1.0, 2.0])

    assert np.allclose(np.asarray(v), [1.0, 2.0])
    array = v.to_numpy()
    array[0] = 10.0
    assert v[0] == 1.0
