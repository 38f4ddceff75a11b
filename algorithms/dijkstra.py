"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
The priority queue is a plain list re-sorted by distance before every
extraction.  Improved distances push a NEW entry; the stale entry stays in
the list and is skipped when it surfaces because its node is already
visited (lazy deletion).  At visualisation scale the O(n log n) re-sort is
irrelevant and the queue contents stay readable.

Yields a step at:
  1. Start  →  distances all ∞ except start = 0
  2. Extract the closest unvisited node  →  VISITED
  3. Each successful relaxation  →  updated distance, new queue entry
  4. end_node extracted  →  early exit with its shortest distance
  5. Queue empty  →  final distance map

Preconditions reported as a single step: valid graph, existing start (and
end) node, no negative edge weight.  Missing weights count as 1.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph, graph_to_adjacency_list
from algorithms.bfs import check_start
from algorithms.step import (
    GraphAlgorithmStep,
    GraphStepBuilder,
    QueueEntry,
    graph_error_step,
)


INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start, end=None):",        # 0
    "    dist ← {v: ∞ for v in V}",                 # 1
    "    dist[start] ← 0",                          # 2
    "    pq ← [(start, 0)]",                        # 3
    "    while pq is not empty:",                    # 4
    "        (node, d) ← pq.sort().pop_front()",    # 5
    "        if node in visited: continue",         # 6
    "        visited.add(node)",                    # 7
    "        if node == end: return dist[end]",     # 8
    "        for (neighbour, w) in adj(node):",     # 9
    "            if d + w < dist[neighbour]:",      # 10
    "                dist[neighbour] ← d + w",      # 11
    "                pq.push((neighbour, d + w))",  # 12
    "    return dist",                              # 13
]


def _fmt(d: float) -> str:
    return "∞" if d == INF else str(d)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(
    graph: Graph,
    start_node: str,
    end_node: Optional[str] = None,
) -> Generator[GraphAlgorithmStep, None, None]:

    error = check_start(graph, start_node)
    if error:
        yield graph_error_step(graph, error)
        return
    if end_node is not None and not graph.has_node(end_node):
        yield graph_error_step(graph, f'End node "{end_node}" does not exist in graph')
        return
    if graph.has_negative_weights():
        yield graph_error_step(graph, "Dijkstra requires non-negative edge weights")
        return

    adj  = graph_to_adjacency_list(graph, resolve_weights=True)
    dist: Dict[str, float] = {n.id: INF for n in graph.nodes}
    dist[start_node] = 0
    pq:   List[QueueEntry] = [QueueEntry(start_node, 0)]
    order: List[str] = []
    visited: set     = set()
    sb   = GraphStepBuilder(graph)

    # --- init step ---
    sb.current_node   = start_node
    sb.distances      = dist
    sb.priority_queue = pq
    yield sb.build(f"Starting Dijkstra from node {start_node}. Initial distance: 0")

    # --- main loop ---
    while pq:
        pq.sort(key=lambda e: e.distance)
        node, d = pq.pop(0)

        # stale entry
        if node in visited:
            continue

        visited.add(node)
        order.append(node)

        # -- extraction event --
        sb.reset()
        sb.visited        = list(order)
        sb.current_node   = node
        sb.highlight_node = node
        sb.distances      = dist
        sb.priority_queue = pq
        yield sb.build(f"Visiting node {node} with distance {_fmt(d)}")

        # -- target check --
        if end_node is not None and node == end_node:
            sb.reset()
            sb.visited        = list(order)
            sb.distances      = dist
            sb.priority_queue = []
            yield sb.build(f"Reached target node {end_node}. Shortest distance: {_fmt(d)}")
            return

        # -- relax neighbours --
        for nbr, w in adj[node]:
            if nbr in visited:
                continue
            new_dist = d + w
            old_dist = dist[nbr]
            if new_dist < old_dist:
                dist[nbr] = new_dist
                pq.append(QueueEntry(nbr, new_dist))

                sb.reset()
                sb.visited        = list(order)
                sb.current_node   = node
                sb.highlight_node = nbr
                sb.highlight_edge = (node, nbr)
                sb.distances      = dist
                sb.priority_queue = pq
                yield sb.build(
                    f"Updated distance to {nbr}: {_fmt(old_dist)} → {_fmt(new_dist)}",
                    comparison=f"{_fmt(d)} + {w} = {_fmt(new_dist)} < {_fmt(old_dist)}",
                )

    # --- final step ---
    sb.reset()
    sb.visited        = list(order)
    sb.distances      = dist
    sb.priority_queue = []
    yield sb.build(f"Dijkstra complete. Found shortest paths to {len(order)} nodes.")
