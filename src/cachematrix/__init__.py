from .linalg import InvalidShapeError, LinalgError, NonFiniteMatrixError, SingularMatrixError, invert
from .matrix import CacheMatrix
from .solve import CacheEvent, CacheSolver, cache_solve, resolve_inverse
