"""Keeps a record of what the solver did, for when you want to know whether the cache is actually helping.

```
from cachematrix import CacheMatrix, cache_solve
from cachematrix.debug.logger import Logger
from cachematrix.solve import CacheSolver

logger = Logger()
CacheSolver.logger = logger

# solve as normal...
cm = CacheMatrix(m)
cache_solve(cm)
cache_solve(cm)

logger.dump()   # dumps information into cache_log.txt
```

Attaching to the class means every solver records into the same logger. Set it back to None when you're done.
"""

from typing import List, NamedTuple

from ..solve import HIT, MISS, CacheEvent


class Datum(NamedTuple):
    event: CacheEvent
    time_spent: float
    failed: bool = False


class Logger:
    """Keeps track of cache hits & misses and the time each one took.

    A miss whose inversion raised is still a miss (the solver reported it as one), it's just also counted in `failures`.
    """

    _data: List[Datum] = None

    def __init__(self):
        self._data = []

    def log(self, event: CacheEvent, time_spent: float, failed: bool = False):
        """Log a solver event.

        event: the hit/miss event
        time_spent: time taken to resolve, in seconds. for misses this includes the inversion.
        failed: the inversion raised, so nothing got cached
        """
        self._data.append(Datum(event, time_spent, failed))

    @property
    def data(self) -> List[Datum]:
        return self._data

    @property
    def hits(self) -> int:
        return sum(1 for d in self._data if d.event.kind == HIT)

    @property
    def misses(self) -> int:
        return sum(1 for d in self._data if d.event.kind == MISS)

    @property
    def failures(self) -> int:
        return sum(1 for d in self._data if d.failed)

    @property
    def hit_rate(self) -> float:
        if not self._data:
            return 0.0
        return self.hits / len(self._data)

    def clear(self):
        self._data = []

    def dump(self, path: str = "cache_log.txt"):
        with open(path, "w") as f:
            f.write(f"hits: {self.hits}, misses: {self.misses} ({self.failures} failed), hit rate: {self.hit_rate:.2%}")
            f.write("\n\n")
            f.write("Event: shape: time taken (s)\n")
            for d in self._data:
                f.write(f"{d.event.kind}: {d.event.shape}: {d.time_spent}{' (failed)' if d.failed else ''}\n")
