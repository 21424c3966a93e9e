import numpy as np


def debug_repr(container) -> str:
    """Shows the matrix and whether there's an inverse cached.

    >>> debug_repr(CacheMatrix([[1, 3], [2, 4]]))
    'CacheMatrix(matrix=[[1, 3], [2, 4]], inverse=None)'
    """
    matrix = _matrix_repr(container.get())
    inverse = container.get_inverse()
    inverse = "None" if inverse is None else _matrix_repr(inverse)
    return f"{container.__class__.__name__}(matrix={matrix}, inverse={inverse})"


def _matrix_repr(matrix: np.ndarray) -> str:
    return repr(matrix.tolist())
