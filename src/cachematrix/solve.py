"""Memoized inversion over a CacheMatrix.
"""

import time
from logging import getLogger
from typing import Callable, Literal, NamedTuple, Optional, Tuple

import numpy as np

from .linalg import LinalgError, invert
from .matrix import CacheMatrix

log = getLogger(__name__)

HIT = "cache-hit"
MISS = "cache-miss"

_MESSAGES = {
    HIT: "...retrieving cached inverse",
    MISS: "...computing and caching inverse",
}


class CacheEvent(NamedTuple):
    kind: Literal["cache-hit", "cache-miss"]
    message: str
    shape: Tuple[int, ...]


def cache_solve(
    container: CacheMatrix, *, on_event: Optional[Callable[[CacheEvent], None]] = None, **kwargs
) -> np.ndarray:
    """
    Returns the inverse of the matrix in container, computing and caching it if it isn't cached yet.

    Args:
        container: the CacheMatrix to solve
        on_event: called with a CacheEvent on every call, telling you if it was a hit or a miss.
            the miss event fires before the inversion, so if on_event raises, the exception propagates and
            nothing is computed or cached. its return value is ignored.
    kwargs:
        passed straight through to linalg.invert on a miss (e.g. rtol). they're not part of the cache key.

        Examples of valid uses:
            cache_solve(cm)
            cache_solve(cm, rtol=1e-10)
            cache_solve(cm, on_event=events.append)

    Raises:
        InvalidShapeError, SingularMatrixError, NonFiniteMatrixError: from linalg.invert. nothing gets cached
            when these happen.
    """
    return CacheSolver(on_event=on_event, **kwargs).resolve(container)


resolve_inverse = cache_solve


class CacheSolver:
    """
    Resolves inverses through a CacheMatrix.
    """

    logger = None  # set to a debug.logger.Logger to record every event, failed misses included

    def __init__(self, *, on_event: Optional[Callable[[CacheEvent], None]] = None, **kwargs):
        self._on_event = on_event
        self._kwargs = kwargs

    def resolve(self, container: CacheMatrix) -> np.ndarray:
        if not isinstance(container, CacheMatrix):
            raise TypeError(f"Expected a CacheMatrix, got {type(container).__name__}")

        start = time.time()
        inverse = container.get_inverse()
        if inverse is not None:
            self._record(self._emit(HIT, container), start)
            return inverse

        event = self._emit(MISS, container)
        try:
            inverse = invert(container.get(), **self._kwargs)
        except LinalgError:
            self._record(event, start, failed=True)
            raise
        container.set_inverse(inverse)
        self._record(event, start)
        return container.get_inverse()

    def _emit(self, kind: str, container: CacheMatrix) -> CacheEvent:
        event = CacheEvent(kind, _MESSAGES[kind], container.shape)
        log.debug("%s (shape %s)", event.message, event.shape)
        if self._on_event is not None:
            self._on_event(event)
        return event

    def _record(self, event: CacheEvent, start: float, failed: bool = False):
        # misses are timed including the inversion
        if self.logger is not None:
            self.logger.log(event, time.time() - start, failed=failed)
