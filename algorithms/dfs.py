"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a step at:
  1. Start  →  stack seeded with the start node
  2. Pop an unvisited node  →  mark it VISITED, highlight it
  3. Push unvisited neighbours  →  "pushed neighbours" step (only if any)
  4. Stack empty  →  final step with the visited count

Unvisited neighbours are pushed in REVERSED adjacency order, each one only
if it is not already on the stack, so the first neighbour is popped first.
"""

from typing import Generator, List, Optional

from graph import Graph, graph_to_adjacency_list
from algorithms.bfs import check_start
from algorithms.step import GraphAlgorithmStep, GraphStepBuilder, graph_error_step


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                        # 0
    "    stack ← [start]",                           # 1
    "    visited ← {}",                              # 2
    "    while stack is not empty:",                  # 3
    "        node ← stack.pop()",                    # 4
    "        if node in visited: continue",          # 5
    "        visited.add(node)",                     # 6
    "        for neighbour in reversed(adj(node)):", # 7
    "            if neighbour not visited and not on stack:",  # 8
    "                stack.push(neighbour)",         # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    graph: Graph,
    start_node: str,
    end_node: Optional[str] = None,
) -> Generator[GraphAlgorithmStep, None, None]:
    """Iterative DFS; `end_node` is accepted for the uniform graph contract."""
    error = check_start(graph, start_node)
    if error:
        yield graph_error_step(graph, error)
        return

    adj     = graph_to_adjacency_list(graph)
    stack   = [start_node]
    order:  List[str] = []
    visited: set      = set()
    sb      = GraphStepBuilder(graph)

    # --- init step ---
    sb.current_node = start_node
    sb.stack        = list(stack)
    yield sb.build(f"Starting DFS from node {start_node}. Stack: [{start_node}]")

    # --- main loop ---
    while stack:
        node = stack.pop()
        if node in visited:
            continue

        visited.add(node)
        order.append(node)

        sb.reset()
        sb.visited        = list(order)
        sb.current_node   = node
        sb.highlight_node = node
        sb.stack          = list(stack)
        yield sb.build(f"Visiting node {node}. Visited: [{', '.join(order)}]")

        pushed = []
        for nbr, _ in reversed(adj[node]):
            if nbr not in visited and nbr not in stack:
                stack.append(nbr)
                pushed.append(nbr)

        if pushed:
            sb.stack              = list(stack)
            sb.highlight_edges_of = node
            yield sb.build(
                f"Pushed neighbors to stack. Stack: [{', '.join(stack)}]",
                comparison=f"Pushed {', '.join(pushed)}",
            )

    # --- final step ---
    sb.reset()
    sb.visited = list(order)
    sb.stack   = []
    yield sb.build(f"DFS complete. Visited {len(order)} nodes.")
