"""
runner.py — Engine Composition
==============================
The Runner is the one object a host (the Flask app, a test, a script) talks
to.  It resolves registry keys, drives the generators to completion and
owns the ResultCache that memoises array traces.

    runner = Runner(ResultCache(capacity=100))
    steps  = runner.run_array("quick_sort", [5, 3, 8])

Graph and DP traces are not cached: their inputs are not flat arrays and
their steps are far larger.
"""

import logging
from typing import List, Optional, Sequence

from algorithms import DP_REGISTRY, GRAPH_REGISTRY, REGISTRY, AlgoInfo
from algorithms.step import AlgorithmStep, DPAlgorithmStep, GraphAlgorithmStep
from engine.cache import ResultCache, cache_key
from graph import Graph


logger = logging.getLogger(__name__)


def _lookup(registry, key: str, family: str) -> AlgoInfo:
    info = registry.get(key)
    if info is None:
        raise ValueError(f"Unknown {family} algorithm: {key}")
    return info


class Runner:
    def __init__(self, cache: Optional[ResultCache] = None):
        self.cache = cache if cache is not None else ResultCache()

    def run_array(
        self,
        key: str,
        arr: Sequence[int],
        target: Optional[int] = None,
    ) -> List[AlgorithmStep]:
        info = _lookup(REGISTRY, key, "array")
        # sorts ignore the target, so it must not split their cache entries
        effective_target = target if info.requires_target else None
        ckey = cache_key(key, arr, effective_target)

        cached = self.cache.get(ckey)
        if cached is not None:
            return list(cached)

        if info.requires_target:
            steps = info.execute(list(arr), 0 if target is None else target)
        else:
            steps = info.execute(list(arr))
        self.cache.set(ckey, steps)
        logger.info("ran %s on %d values: %d steps", key, len(arr), len(steps))
        return steps

    def run_graph(
        self,
        key: str,
        graph: Graph,
        start_node: str,
        end_node: Optional[str] = None,
    ) -> List[GraphAlgorithmStep]:
        info  = _lookup(GRAPH_REGISTRY, key, "graph")
        steps = info.execute(graph, start_node, end_node)
        logger.info("ran %s from %s: %d steps", key, start_node, len(steps))
        return steps

    def run_dp(self, key: str, *args) -> List[DPAlgorithmStep]:
        info  = _lookup(DP_REGISTRY, key, "dp")
        steps = info.execute(*args)
        logger.info("ran %s: %d steps", key, len(steps))
        return steps
