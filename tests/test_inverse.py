"""Tests for inverse() and inverse_gauss()."""

import logging

import numpy as np
import pytest

from lineal import Matrix, identity, DimensionMismatchError
from lineal.core.tolerances import INVERSE_IDENTITY


def random_well_conditioned(n, seed):
    rng = np.random.default_rng(seed)
    return rng.standard_normal((n, n)) + n * np.eye(n)


def test_two_by_two_adjugate():
    m = Matrix.from_rows([[1, 2], [3, 4]])

    assert m.inverse() == Matrix.from_rows([[-2, 1], [1.5, -0.5]])


def test_two_by_two_gauss_jordan():
    m = Matrix.from_rows([[1, 2], [3, 4]])

    assert m.inverse_gauss() == Matrix.from_rows([[-2, 1], [1.5, -0.5]])
    assert ~m == m.inverse_gauss()


def test_one_by_one():
    m = Matrix.from_rows([[4.0]])

    assert m.inverse() == Matrix.from_rows([[0.25]])
    assert m.inverse_gauss() == Matrix.from_rows([[0.25]])


def test_singular_has_no_inverse():
    m = Matrix.from_rows([[1, 2], [2, 4]])

    assert m.determinant() == 0.0
    assert m.inverse() is None


def test_non_square_has_no_inverse():
    assert Matrix(2, 3).inverse() is None


def test_gauss_jordan_singular_gives_non_finite_entries():
    m = Matrix.from_rows([[1, 2], [2, 4]])

    result = m.inverse_gauss()
    assert result.shape == (2, 2)
    assert not np.all(np.isfinite(result.to_numpy()))


def test_gauss_jordan_non_square():
    with pytest.raises(DimensionMismatchError):
        Matrix(2, 3).inverse_gauss()


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_adjugate_inverse_times_matrix_is_identity(n):
    m = Matrix.from_rows(random_well_conditioned(n, seed=n))

    product = m * m.inverse()
    assert np.allclose(product.to_numpy(), np.eye(n), rtol=0.0, atol=INVERSE_IDENTITY.atol)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8])
def test_gauss_jordan_inverse_times_matrix_is_identity(n):
    m = Matrix.from_rows(random_well_conditioned(n, seed=100 + n))

    product = m * m.inverse_gauss()
    assert np.allclose(product.to_numpy(), np.eye(n), rtol=0.0, atol=INVERSE_IDENTITY.atol)


def test_inverses_agree():
    m = Matrix.from_rows(random_well_conditioned(4, seed=7))

    assert np.allclose(m.inverse().to_numpy(), m.inverse_gauss().to_numpy(), atol=1e-10)


def test_inverse_is_memoized_but_not_shared():
    m = Matrix.from_rows([[1, 2], [3, 4]])

    first = m.inverse()
    first[0, 0] = 99.0

    assert m._cache.inverse is not None
    assert m.inverse()[0, 0] == -2.0


def test_cell_write_refreshes_inverse():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    m.inverse()

    m[0, 0] = 2.0

    assert m._cache.inverse is None
    assert m.inverse() == Matrix.from_rows([[2, -1], [-1.5, 1]])


def test_identity_is_its_own_inverse():
    eye = identity(4)

    assert eye.inverse() == eye
    assert eye.inverse_gauss() == eye


def test_singular_inverse_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="lineal"):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()

    assert "no inverse" in caplog.text
