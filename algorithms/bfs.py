"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a step at every meaningful event:
  1. Start  →  queue seeded with the start node
  2. Dequeue an unvisited node  →  mark it VISITED, highlight it
  3. Enqueue new neighbours  →  "explored neighbours" step (only if any)
  4. Queue empty  →  final step with the visited count

Neighbours are enqueued in adjacency (edge) order, skipping nodes already
visited or already waiting in the queue.  Invalid input produces a single
descriptive step instead of an exception.
"""

from collections import deque
from typing import Generator, List, Optional

from graph import Graph, graph_to_adjacency_list, validate_graph_input
from algorithms.step import GraphAlgorithmStep, GraphStepBuilder, graph_error_step


# ---------------------------------------------------------------------------
# Pseudocode, one string per displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                        # 0
    "    queue ← [start]",                           # 1
    "    visited ← {}",                              # 2
    "    while queue is not empty:",                  # 3
    "        node ← queue.dequeue()",                # 4
    "        if node in visited: continue",          # 5
    "        visited.add(node)",                     # 6
    "        for neighbour in adj(node):",           # 7
    "            if neighbour not visited and not queued:",  # 8
    "                queue.enqueue(neighbour)",      # 9
]


def check_start(graph: Graph, start_node: str) -> Optional[str]:
    """Shared precondition for every graph traversal; None when OK."""
    validation = validate_graph_input(graph)
    if not validation.valid:
        return validation.error or "Invalid graph"
    if not graph.has_node(start_node):
        return f'Start node "{start_node}" does not exist in graph'
    return None


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    graph: Graph,
    start_node: str,
    end_node: Optional[str] = None,
) -> Generator[GraphAlgorithmStep, None, None]:
    """
    Yields GraphAlgorithmStep snapshots for a full BFS traversal.

    Args:
        graph      : The graph to traverse.
        start_node : Node id to start from.
        end_node   : Accepted for the uniform graph contract; the traversal
                     always runs until the queue is empty.
    """
    error = check_start(graph, start_node)
    if error:
        yield graph_error_step(graph, error)
        return

    adj     = graph_to_adjacency_list(graph)
    queue   = deque([start_node])
    order:  List[str] = []
    visited: set      = set()
    sb      = GraphStepBuilder(graph)

    # --- initialisation step ---
    sb.current_node = start_node
    sb.queue        = list(queue)
    yield sb.build(f"Starting BFS from node {start_node}. Queue: [{start_node}]")

    # --- main loop ---
    while queue:
        node = queue.popleft()
        if node in visited:
            continue

        visited.add(node)
        order.append(node)

        # -- visit event --
        sb.reset()
        sb.visited        = list(order)
        sb.current_node   = node
        sb.highlight_node = node
        sb.queue          = list(queue)
        yield sb.build(f"Visiting node {node}. Visited: [{', '.join(order)}]")

        # -- enqueue unseen neighbours --
        added = []
        for nbr, _ in adj[node]:
            if nbr not in visited and nbr not in queue:
                queue.append(nbr)
                added.append(nbr)

        if added:
            sb.queue              = list(queue)
            sb.highlight_edges_of = node
            yield sb.build(
                f"Explored neighbors of {node}. Queue: [{', '.join(queue)}]",
                comparison=f"Enqueued {', '.join(added)}",
            )

    # --- final step ---
    sb.reset()
    sb.visited = list(order)
    sb.queue   = []
    yield sb.build(f"BFS complete. Visited {len(order)} nodes.")
