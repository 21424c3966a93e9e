"""The inversion primitive, plus the errors it raises.

Everything else in the package treats `invert` as opaque: it either returns the inverse or raises.
"""

import warnings
from typing import Optional

import numpy as np

# estimated condition numbers above this get a warning. the inverse is still returned.
ILL_CONDITIONED = 1e12


class LinalgError(np.linalg.LinAlgError):
    """Base class for inversion failures. Subclasses numpy's so `except LinAlgError` still works."""


class InvalidShapeError(LinalgError, ValueError):
    """The matrix isn't square (or isn't 2-D at all)."""


class SingularMatrixError(LinalgError):
    """The matrix has no inverse."""


class NonFiniteMatrixError(LinalgError, ValueError):
    """The matrix contains NaN or inf."""


def invert(matrix: np.ndarray, *, rtol: Optional[float] = None) -> np.ndarray:
    """
    Input: a square matrix of finite numbers (anything np.asarray accepts).
    Output: its inverse, as a new float array.

    args:
        rtol: if given, a matrix whose reciprocal condition number is below rtol counts as singular.
            numpy only catches exact singularity, so this is how you get stricter. costs an extra SVD.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] == 0:
        raise InvalidShapeError(f"Can only invert non-empty square matrices, got shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise NonFiniteMatrixError(f"Matrix of shape {matrix.shape} contains NaN or inf")

    if rtol is not None:
        if rtol < 0:
            raise ValueError(f"rtol must be non-negative, got {rtol}")
        try:
            cond = np.linalg.cond(matrix)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(f"Couldn't estimate the condition number of a {matrix.shape} matrix") from e
        if not np.isfinite(cond) or 1 / cond < rtol:
            raise SingularMatrixError(f"Matrix is singular to within rtol={rtol} (condition number {cond:.3g})")

    try:
        inverse = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(f"Matrix of shape {matrix.shape} is singular") from e

    # 1-norm condition number, from the inverse we already have. no second factorization.
    cond = np.linalg.norm(matrix, 1) * np.linalg.norm(inverse, 1)
    if cond > ILL_CONDITIONED:
        warnings.warn(f"Matrix is ill-conditioned (condition number ~{cond:.3g}); inverse may be inaccurate", RuntimeWarning)

    return inverse
