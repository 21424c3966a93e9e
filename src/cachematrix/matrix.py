"""RULES OF CacheMatrix:

1. The stored matrix is NOT mutated in place. `set` replaces it with a fresh read-only copy, so the only way to
change the matrix is through the container, and every change goes through `set`.
2. `set` always throws away the cached inverse. There is no way to swap the matrix and keep a stale inverse.

The container doesn't know how to invert anything. That's `solve.cache_solve`'s job.
"""

from typing import Optional, Tuple

import numpy as np


def _frozen(matrix) -> np.ndarray:
    """Private read-only copy of matrix."""
    array = np.array(matrix, copy=True)
    array.flags.writeable = False
    return array


class CacheMatrix:
    """Holds one matrix and at most one cached inverse for it.

    Usage:
        cm = CacheMatrix([[1, 3], [2, 4]])
        inv = cache_solve(cm)  # computes
        inv = cache_solve(cm)  # cached
        cm.set(other)          # clears the cache
    """

    def __init__(self, matrix):
        self._inverse: Optional[np.ndarray] = None
        self.set(matrix)

    def set(self, matrix) -> None:
        """Replace the matrix. Always clears the cached inverse."""
        self._matrix = _frozen(matrix)
        self._inverse = None

    def get(self) -> np.ndarray:
        return self._matrix

    def set_inverse(self, inverse) -> None:
        """Store inverse as the cached inverse. Doesn't check that it's actually the inverse -- the caller has to."""
        self._inverse = _frozen(inverse)

    def get_inverse(self) -> Optional[np.ndarray]:
        """returns the cached inverse, or None if there isn't one"""
        return self._inverse

    # long names, for people who like to be explicit
    set_matrix = set
    get_matrix = get
    set_cached_inverse = set_inverse
    get_cached_inverse = get_inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._matrix.shape

    def __repr__(self) -> str:
        from .debug.utils import debug_repr

        return debug_repr(self)
