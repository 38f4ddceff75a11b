"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

Three registries, one per step family:

    REGISTRY        array algorithms  → AlgorithmStep traces
    GRAPH_REGISTRY  graph traversals  → GraphAlgorithmStep traces
    DP_REGISTRY     tabulation        → DPAlgorithmStep traces

AlgoInfo is an immutable metadata card.  Adding an algorithm means writing
the generator and adding one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.linear_search        import linear_search,        PSEUDOCODE as _linear_pc
from algorithms.binary_search        import binary_search,        PSEUDOCODE as _binary_pc
from algorithms.jump_search          import jump_search,          PSEUDOCODE as _jump_pc
from algorithms.interpolation_search import interpolation_search, PSEUDOCODE as _interp_pc
from algorithms.bubble_sort          import bubble_sort,          PSEUDOCODE as _bubble_pc
from algorithms.selection_sort       import selection_sort,       PSEUDOCODE as _selection_pc
from algorithms.insertion_sort       import insertion_sort,       PSEUDOCODE as _insertion_pc
from algorithms.quick_sort           import quick_sort,           PSEUDOCODE as _quick_pc
from algorithms.merge_sort           import merge_sort,           PSEUDOCODE as _merge_pc
from algorithms.heap_sort            import heap_sort,            PSEUDOCODE as _heap_pc
from algorithms.counting_sort        import counting_sort,        PSEUDOCODE as _counting_pc
from algorithms.bfs                  import bfs,                  PSEUDOCODE as _bfs_pc
from algorithms.dfs                  import dfs,                  PSEUDOCODE as _dfs_pc
from algorithms.dijkstra             import dijkstra,             PSEUDOCODE as _dij_pc
from algorithms.fibonacci            import fibonacci,            PSEUDOCODE as _fib_pc
from algorithms.lcs                  import lcs,                  PSEUDOCODE as _lcs_pc, LCSResult
from algorithms.knapsack             import (
    knapsack, PSEUDOCODE as _knap_pc, KnapsackItem, KnapsackResult,
)


CATEGORIES   = ("searching", "sorting", "divide-conquer", "dynamic", "graph")
DIFFICULTIES = ("easy", "medium", "hard")


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str                   # registry key, e.g. "quick_sort"
    name:             str                   # human label, e.g. "Quick Sort"
    description:      str
    time_complexity:  str                   # e.g. "O(n log n)"
    space_complexity: str
    category:         str                   # one of CATEGORIES
    difficulty:       str                   # one of DIFFICULTIES
    fn:               Callable              # the step generator
    pseudocode:       List[str] = field(default_factory=list)
    requires_target:  bool      = False     # searches need a target value

    def execute(self, *args, **kwargs) -> list:
        """Drain the generator into a complete trace."""
        return list(self.fn(*args, **kwargs))

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "name":             self.name,
            "description":      self.description,
            "time_complexity":  self.time_complexity,
            "space_complexity": self.space_complexity,
            "category":         self.category,
            "difficulty":       self.difficulty,
            "requires_target":  self.requires_target,
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# Array algorithms
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "linear_search": AlgoInfo(
        key="linear_search", name="Linear Search", fn=linear_search, pseudocode=_linear_pc,
        description="Checks every element in order until the target is found.",
        time_complexity="O(n)", space_complexity="O(1)",
        category="searching", difficulty="easy", requires_target=True,
    ),

    "binary_search": AlgoInfo(
        key="binary_search", name="Binary Search", fn=binary_search, pseudocode=_binary_pc,
        description="Halves a sorted range on every comparison.",
        time_complexity="O(log n)", space_complexity="O(1)",
        category="searching", difficulty="easy", requires_target=True,
    ),

    "jump_search": AlgoInfo(
        key="jump_search", name="Jump Search", fn=jump_search, pseudocode=_jump_pc,
        description="Jumps ahead in √n blocks, then scans the block that can hold the target.",
        time_complexity="O(√n)", space_complexity="O(1)",
        category="searching", difficulty="medium", requires_target=True,
    ),

    "interpolation_search": AlgoInfo(
        key="interpolation_search", name="Interpolation Search",
        fn=interpolation_search, pseudocode=_interp_pc,
        description="Estimates the target's position from the values at the range ends.",
        time_complexity="O(log log n) avg, O(n) worst", space_complexity="O(1)",
        category="searching", difficulty="hard", requires_target=True,
    ),

    "bubble_sort": AlgoInfo(
        key="bubble_sort", name="Bubble Sort", fn=bubble_sort, pseudocode=_bubble_pc,
        description="Swaps adjacent out-of-order pairs; the largest value bubbles to the end.",
        time_complexity="O(n²)", space_complexity="O(1)",
        category="sorting", difficulty="easy",
    ),

    "selection_sort": AlgoInfo(
        key="selection_sort", name="Selection Sort", fn=selection_sort, pseudocode=_selection_pc,
        description="Selects the minimum of the unsorted part and moves it to the front.",
        time_complexity="O(n²)", space_complexity="O(1)",
        category="sorting", difficulty="easy",
    ),

    "insertion_sort": AlgoInfo(
        key="insertion_sort", name="Insertion Sort", fn=insertion_sort, pseudocode=_insertion_pc,
        description="Grows a sorted prefix by inserting one element at a time.",
        time_complexity="O(n²)", space_complexity="O(1)",
        category="sorting", difficulty="easy",
    ),

    "quick_sort": AlgoInfo(
        key="quick_sort", name="Quick Sort", fn=quick_sort, pseudocode=_quick_pc,
        description="Partitions around the last element as pivot, then sorts each side.",
        time_complexity="O(n log n) avg, O(n²) worst", space_complexity="O(log n)",
        category="divide-conquer", difficulty="medium",
    ),

    "merge_sort": AlgoInfo(
        key="merge_sort", name="Merge Sort", fn=merge_sort, pseudocode=_merge_pc,
        description="Splits in half, sorts each half, merges them back together.",
        time_complexity="O(n log n)", space_complexity="O(n)",
        category="divide-conquer", difficulty="medium",
    ),

    "heap_sort": AlgoInfo(
        key="heap_sort", name="Heap Sort", fn=heap_sort, pseudocode=_heap_pc,
        description="Builds a max-heap, then repeatedly moves the root to the end.",
        time_complexity="O(n log n)", space_complexity="O(1)",
        category="sorting", difficulty="hard",
    ),

    "counting_sort": AlgoInfo(
        key="counting_sort", name="Counting Sort", fn=counting_sort, pseudocode=_counting_pc,
        description="Counts occurrences of each value and rebuilds the array from the counts.",
        time_complexity="O(n + k)", space_complexity="O(k)",
        category="sorting", difficulty="medium",
    ),
}


# ---------------------------------------------------------------------------
# Graph algorithms
# ---------------------------------------------------------------------------
GRAPH_REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", name="Breadth-First Search", fn=bfs, pseudocode=_bfs_pc,
        description="Explores layer-by-layer from the start node.",
        time_complexity="O(V + E)", space_complexity="O(V)",
        category="graph", difficulty="medium",
    ),

    "dfs": AlgoInfo(
        key="dfs", name="Depth-First Search", fn=dfs, pseudocode=_dfs_pc,
        description="Dives deep along each branch before backtracking.",
        time_complexity="O(V + E)", space_complexity="O(V)",
        category="graph", difficulty="medium",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", name="Dijkstra's Algorithm", fn=dijkstra, pseudocode=_dij_pc,
        description="Greedily settles the closest node. Requires non-negative weights.",
        time_complexity="O((V + E) log V)", space_complexity="O(V)",
        category="graph", difficulty="hard",
    ),
}


# ---------------------------------------------------------------------------
# Dynamic programming
# ---------------------------------------------------------------------------
DP_REGISTRY: Dict[str, AlgoInfo] = {

    "fibonacci": AlgoInfo(
        key="fibonacci", name="Fibonacci", fn=fibonacci, pseudocode=_fib_pc,
        description="Fills F(0)..F(n) left to right, reusing the two previous cells.",
        time_complexity="O(n)", space_complexity="O(n)",
        category="dynamic", difficulty="medium",
    ),

    "lcs": AlgoInfo(
        key="lcs", name="Longest Common Subsequence", fn=lcs, pseudocode=_lcs_pc,
        description="Tabulates LCS lengths of every prefix pair, then backtracks the subsequence.",
        time_complexity="O(m × n)", space_complexity="O(m × n)",
        category="dynamic", difficulty="medium",
    ),

    "knapsack": AlgoInfo(
        key="knapsack", name="0/1 Knapsack", fn=knapsack, pseudocode=_knap_pc,
        description="Decides include / exclude for every item at every capacity.",
        time_complexity="O(n × W)", space_complexity="O(n × W)",
        category="dynamic", difficulty="hard",
    ),
}


FAMILIES: Dict[str, Dict[str, AlgoInfo]] = {
    "array": REGISTRY,
    "graph": GRAPH_REGISTRY,
    "dp":    DP_REGISTRY,
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str, family: Optional[str] = None) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key (optionally within one family), or None."""
    if family is not None:
        return FAMILIES.get(family, {}).get(key)
    for registry in FAMILIES.values():
        if key in registry:
            return registry[key]
    return None


def list_algorithms(family: Optional[str] = None) -> List[AlgoInfo]:
    """All registered algorithms in insertion order."""
    if family is not None:
        return list(FAMILIES.get(family, {}).values())
    return [info for registry in FAMILIES.values() for info in registry.values()]


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    return [a for a in list_algorithms() if a.category == category]


def algorithms_by_difficulty(difficulty: str) -> List[AlgoInfo]:
    return [a for a in list_algorithms() if a.difficulty == difficulty]


__all__ = [
    "AlgoInfo",
    "CATEGORIES",
    "DIFFICULTIES",
    "REGISTRY",
    "GRAPH_REGISTRY",
    "DP_REGISTRY",
    "FAMILIES",
    "KnapsackItem",
    "KnapsackResult",
    "LCSResult",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "algorithms_by_difficulty",
]
