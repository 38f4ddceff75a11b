"""
cache.py — Bounded Result Cache
===============================
Memoises complete array traces.  Insertion-ordered, first-in-first-out:
when the cache is full the OLDEST key is evicted, regardless of how often
it was read.

Stored traces are tuples of frozen steps, so a cached entry can be handed
out repeatedly without any caller being able to change it.

Not thread-safe.  A multi-threaded host must guard get / set with a lock.
"""

import logging
from collections import OrderedDict
from typing import Optional, Sequence, Tuple

from algorithms.step import AlgorithmStep


logger = logging.getLogger(__name__)

Trace = Tuple[AlgorithmStep, ...]


def cache_key(algorithm: str, arr: Sequence[int], target: Optional[int] = None) -> str:
    """`"{algorithm}-{comma-joined array}-{target or ''}"`."""
    joined = ",".join(str(v) for v in arr)
    return f"{algorithm}-{joined}-{'' if target is None else target}"


class ResultCache:
    """
    Attributes:
        capacity  : Maximum number of traces kept.
        hits      : Successful lookups.
        misses    : Lookups that found nothing.
        evictions : Entries dropped to make room.
    """

    def __init__(self, capacity: int = 100):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity  = capacity
        self._entries: "OrderedDict[str, Trace]" = OrderedDict()
        self.hits      = 0
        self.misses    = 0
        self.evictions = 0

    def get(self, key: str) -> Optional[Trace]:
        trace = self._entries.get(key)
        if trace is None:
            self.misses += 1
            logger.debug("cache miss: %s", key)
            return None
        self.hits += 1
        logger.debug("cache hit: %s", key)
        return trace

    def set(self, key: str, trace: Sequence[AlgorithmStep]) -> None:
        if key not in self._entries and len(self._entries) >= self.capacity:
            oldest, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug("cache evict: %s", oldest)
        # overwriting keeps the original insertion slot
        self._entries[key] = tuple(trace)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = self.misses = self.evictions = 0

    def keys(self):
        return list(self._entries.keys())

    def stats(self) -> dict:
        return {
            "size":      len(self._entries),
            "capacity":  self.capacity,
            "hits":      self.hits,
            "misses":    self.misses,
            "evictions": self.evictions,
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
