"""
step.py — Algorithm Step Snapshots
==================================
Every algorithm is a generator that yields step objects.
A step is a frozen-in-time picture of everything the step-player needs to
render one frame, plus a plain-English description of what just happened.

Three shapes, one per algorithm family:

    • AlgorithmStep       – array algorithms (search / sort)
    • GraphAlgorithmStep  – BFS / DFS / Dijkstra, carries a graph clone
    • DPAlgorithmStep     – tabulation algorithms, carries a table clone

Design decisions:
  - Steps are frozen dataclasses and SNAPSHOT their inputs on construction:
    sequences become tuples, graphs and tables are cloned.  An algorithm can
    keep mutating its single working array / table after yielding and no
    earlier frame changes.
  - `description` and `comparison` are always human-readable strings; the
    export feature writes them out verbatim.
  - `to_dict()` is the JSON shape (infinite distances become None).
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from graph import Graph
from dptable import DPTable


def _freeze(seq: Optional[Iterable]) -> Optional[tuple]:
    return None if seq is None else tuple(seq)


def _json_number(value: Optional[float]) -> Optional[float]:
    if value is None or math.isinf(value):
        return None
    return value


def result_to_dict(result: Any) -> Any:
    return result.to_dict() if hasattr(result, "to_dict") else result


# ---------------------------------------------------------------------------
# Array algorithms
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgorithmStep:
    """
    Attributes:
        array           : Full copy of the working array at this instant.
        current_index   : Index being examined; -1 = none (start / end).
        description     : Human-readable "what happened".
        compare_index   : Second index involved in a comparison / swap.
        sorted_indices  : Indices already in their final position.
        pivot_index     : Quick sort pivot.
        left_pointer    : Left bound / pointer (binary search, merge, heap child).
        right_pointer   : Right bound / pointer.
        comparison      : Human-readable comparison outcome.
        auxiliary_array : Side buffer (merge halves, counting-sort counts).
    """

    array:           Tuple[int, ...]
    current_index:   int
    description:     str
    compare_index:   Optional[int]             = None
    sorted_indices:  Optional[Tuple[int, ...]] = None
    pivot_index:     Optional[int]             = None
    left_pointer:    Optional[int]             = None
    right_pointer:   Optional[int]             = None
    comparison:      Optional[str]             = None
    auxiliary_array: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, "array", tuple(self.array))
        object.__setattr__(self, "sorted_indices", _freeze(self.sorted_indices))
        object.__setattr__(self, "auxiliary_array", _freeze(self.auxiliary_array))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "array":           list(self.array),
            "current_index":   self.current_index,
            "compare_index":   self.compare_index,
            "sorted_indices":  list(self.sorted_indices) if self.sorted_indices is not None else None,
            "pivot_index":     self.pivot_index,
            "left_pointer":    self.left_pointer,
            "right_pointer":   self.right_pointer,
            "description":     self.description,
            "comparison":      self.comparison,
            "auxiliary_array": list(self.auxiliary_array) if self.auxiliary_array is not None else None,
        }


# ---------------------------------------------------------------------------
# Graph algorithms
# ---------------------------------------------------------------------------
class QueueEntry(NamedTuple):
    node:     str
    distance: float


@dataclass(frozen=True)
class GraphAlgorithmStep:
    """
    Attributes:
        graph          : Deep clone with per-step highlighted / visited / distance.
        visited_nodes  : Node ids in the order they were visited.
        description    : Human-readable "what happened".
        current_node   : Node being expanded (None on start / final frames).
        queue          : BFS queue contents, front first.
        stack          : DFS stack contents, top last.
        distances      : Dijkstra distance map (inf = not reached yet).
        priority_queue : Dijkstra queue entries, stale ones included.
        comparison     : Human-readable comparison outcome.
    """

    graph:          Graph
    visited_nodes:  Tuple[str, ...]
    description:    str
    current_node:   Optional[str]                    = None
    queue:          Optional[Tuple[str, ...]]        = None
    stack:          Optional[Tuple[str, ...]]        = None
    distances:      Optional[Dict[str, float]]       = None
    priority_queue: Optional[Tuple[QueueEntry, ...]] = None
    comparison:     Optional[str]                    = None

    def __post_init__(self):
        object.__setattr__(self, "graph", self.graph.clone())
        object.__setattr__(self, "visited_nodes", tuple(self.visited_nodes))
        object.__setattr__(self, "queue", _freeze(self.queue))
        object.__setattr__(self, "stack", _freeze(self.stack))
        if self.distances is not None:
            object.__setattr__(self, "distances", dict(self.distances))
        if self.priority_queue is not None:
            object.__setattr__(
                self, "priority_queue",
                tuple(QueueEntry(e[0], e[1]) for e in self.priority_queue),
            )

    def to_dict(self) -> Dict[str, Any]:
        graph = self.graph.to_dict()
        for node in graph["nodes"]:
            node["distance"] = _json_number(node["distance"])
        return {
            "graph":          graph,
            "current_node":   self.current_node,
            "visited_nodes":  list(self.visited_nodes),
            "queue":          list(self.queue) if self.queue is not None else None,
            "stack":          list(self.stack) if self.stack is not None else None,
            "distances": (
                {k: _json_number(v) for k, v in self.distances.items()}
                if self.distances is not None else None
            ),
            "priority_queue": (
                [{"node": e.node, "distance": _json_number(e.distance)} for e in self.priority_queue]
                if self.priority_queue is not None else None
            ),
            "description":    self.description,
            "comparison":     self.comparison,
        }


# ---------------------------------------------------------------------------
# Convenience builder so graph algorithms don't have to annotate by hand
# ---------------------------------------------------------------------------
class GraphStepBuilder:
    """
    Mutable scratch-pad that graph algorithms use to construct steps cleanly.

    Usage inside an algorithm generator:
        sb = GraphStepBuilder(graph)
        sb.visited = list(visited)
        sb.highlight_node = "A"
        sb.queue = list(queue)
        yield sb.build("Visiting node A")

    `build()` clones the source graph and writes the annotations onto the
    clone only; the caller's graph is never touched.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.reset()

    def reset(self):
        self.current_node:     Optional[str]              = None
        self.visited:          List[str]                  = []
        self.highlight_node:   Optional[str]              = None
        self.highlight_edges_of: Optional[str]            = None   # every edge leaving this node
        self.highlight_edge:   Optional[Tuple[str, str]]  = None   # one specific edge
        self.queue:            Optional[List[str]]        = None
        self.stack:            Optional[List[str]]        = None
        self.distances:        Optional[Dict[str, float]] = None
        self.priority_queue:   Optional[List[QueueEntry]] = None

    def snapshot(self) -> Graph:
        frame = self.graph.clone()
        visited = set(self.visited)
        for node in frame.nodes:
            node.visited     = node.id in visited
            node.highlighted = node.id == self.highlight_node
            if self.distances is not None:
                node.distance = self.distances.get(node.id)
        for edge in frame.edges:
            if self.highlight_edge is not None:
                edge.highlighted = edge.joins(*self.highlight_edge, directed=frame.directed)
            elif self.highlight_edges_of is not None:
                edge.highlighted = edge.touches(self.highlight_edges_of, directed=frame.directed)
            else:
                edge.highlighted = False
        return frame

    def build(self, description: str, comparison: Optional[str] = None) -> GraphAlgorithmStep:
        return GraphAlgorithmStep(
            graph=self.snapshot(),
            visited_nodes=list(self.visited),
            description=description,
            current_node=self.current_node,
            queue=self.queue,
            stack=self.stack,
            distances=self.distances,
            priority_queue=self.priority_queue,
            comparison=comparison,
        )


def graph_error_step(graph: Graph, description: str) -> GraphAlgorithmStep:
    """The one-element trace every graph algorithm returns on invalid input."""
    return GraphAlgorithmStep(graph=graph, visited_nodes=(), description=description)


# ---------------------------------------------------------------------------
# Dynamic-programming algorithms
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DPAlgorithmStep:
    """
    Attributes:
        table             : Clone of the working table at this instant.
        description       : Human-readable "what happened".
        current_cell      : (row, col) being computed.
        highlighted_cells : Cells read to compute current_cell.
        comparison        : The recurrence written out with numbers.
        result            : Final answer, set on the last step only.
    """

    table:             DPTable
    description:       str
    current_cell:      Optional[Tuple[int, int]]              = None
    highlighted_cells: Optional[Tuple[Tuple[int, int], ...]]  = None
    comparison:        Optional[str]                          = None
    result:            Any                                    = field(default=None)

    def __post_init__(self):
        frame = self.table.clone()
        object.__setattr__(self, "table", frame)
        if self.highlighted_cells is not None:
            cells = tuple((r, c) for r, c in self.highlighted_cells)
            object.__setattr__(self, "highlighted_cells", cells)
            for r, c in cells:
                frame.cells[r][c].highlighted = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table":        self.table.to_dict(),
            "current_cell": (
                {"row": self.current_cell[0], "col": self.current_cell[1]}
                if self.current_cell is not None else None
            ),
            "highlighted_cells": (
                [{"row": r, "col": c} for r, c in self.highlighted_cells]
                if self.highlighted_cells is not None else None
            ),
            "description":  self.description,
            "comparison":   self.comparison,
            "result":       result_to_dict(self.result),
        }
