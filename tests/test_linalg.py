import warnings

import numpy as np
import pytest

from cachematrix.debug.test_utils import *
from cachematrix.linalg import (
    ILL_CONDITIONED,
    InvalidShapeError,
    LinalgError,
    NonFiniteMatrixError,
    SingularMatrixError,
    invert,
)


def test_invert_2x2():
    assert_matrix_eq(invert(M1), M1_INV)
    assert_matrix_eq(invert(M2), M2_INV)


def test_invert_random():
    rng = np.random.default_rng(0)
    for n in [1, 3, 5, 8]:
        m = rng.normal(size=(n, n)) + n * np.eye(n)
        assert_is_inverse(m, invert(m))


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2, 3], [4, 5, 6]],
        [1, 2, 3],
        5,
        np.zeros((0, 0)),
        np.ones((2, 2, 2)),
    ],
)
def test_invalid_shape(matrix):
    with pytest.raises(InvalidShapeError):
        invert(matrix)


def test_singular():
    with pytest.raises(SingularMatrixError):
        invert([[1, 2], [2, 4]])
    with pytest.raises(SingularMatrixError):
        invert(np.zeros((3, 3)))


def test_errors_are_numpy_errors():
    # anyone already catching numpy's error still catches ours
    with pytest.raises(np.linalg.LinAlgError):
        invert([[1, 2], [2, 4]])
    with pytest.raises(ValueError):
        invert([[1, 2, 3]])
    assert issubclass(SingularMatrixError, LinalgError)
    assert issubclass(InvalidShapeError, LinalgError)


def test_rtol():
    nearly_singular = [[1, 1], [1, 1 + 1e-9]]
    with pytest.raises(SingularMatrixError):
        invert(nearly_singular, rtol=1e-6)

    # well conditioned matrices don't care
    assert_matrix_eq(invert(M1, rtol=1e-6), M1_INV)

    with pytest.raises(ValueError):
        invert(M1, rtol=-1)


def test_ill_conditioned_warns():
    nearly_singular = [[1, 1], [1, 1 + 1e-13]]
    assert np.linalg.cond(nearly_singular) > ILL_CONDITIONED
    with pytest.warns(RuntimeWarning, match="ill-conditioned"):
        invert(nearly_singular)


def test_well_conditioned_doesnt_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        invert(M1)


def test_doesnt_touch_input():
    m = np.array(M1, dtype=float)
    invert(m)
    assert_matrix_eq(m, M1)


@pytest.mark.parametrize(
    "matrix",
    [
        [[np.nan, 1.0], [1.0, 2.0]],
        [[np.inf, 1.0], [1.0, 2.0]],
        [[1.0, 0.0], [0.0, -np.inf]],
    ],
)
def test_non_finite(matrix):
    with pytest.raises(NonFiniteMatrixError):
        invert(matrix)
    with pytest.raises(NonFiniteMatrixError):
        invert(matrix, rtol=1e-6)
    # still one of ours, and still numpy's
    with pytest.raises(LinalgError):
        invert(matrix)
    with pytest.raises(np.linalg.LinAlgError):
        invert(matrix)


def test_rtol_cond_failure_is_singular(monkeypatch):
    def svd_fails(*args, **kwargs):
        raise np.linalg.LinAlgError("SVD did not converge")

    monkeypatch.setattr(np.linalg, "cond", svd_fails)
    with pytest.raises(SingularMatrixError):
        invert(M1, rtol=1e-6)


def test_default_path_doesnt_run_svd(monkeypatch):
    def no_svd(*args, **kwargs):
        raise AssertionError("cond should only run when rtol is given")

    monkeypatch.setattr(np.linalg, "cond", no_svd)
    assert_matrix_eq(invert(M1), M1_INV)
    with pytest.warns(RuntimeWarning, match="ill-conditioned"):
        invert([[1, 1], [1, 1 + 1e-13]])
