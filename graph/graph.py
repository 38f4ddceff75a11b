"""
graph.py — Graph Container, Validation & Generators
====================================================
The value the graph editor hands to the graph algorithms.

Responsibilities:
  1. Hold nodes / edges in the order the editor produced them
  2. Adjacency-list conversion                (graph_to_adjacency_list)
  3. Input validation, reported as data       (validate_graph_input)
  4. Deep cloning for per-step snapshots      (clone)
  5. Serialisation round-trip                 (to_dict / from_dict)
  6. Presets: text import & seeded random generation

Design decisions:
  - Nodes and edges are ordered lists, not dicts: neighbour order is the
    edge order, and BFS / DFS visitation order depends on it.
  - Construction never rejects anything.  An empty graph, a duplicate id or
    a dangling edge is a legal *value* so the algorithms can turn it into a
    descriptive step instead of an exception.
"""

import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from graph.node import GraphNode
from graph.edge import GraphEdge


# node_id → [(neighbour_id, weight-or-None)] in edge order
AdjacencyList = Dict[str, List[Tuple[str, Optional[float]]]]


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


class Graph:
    """
    Attributes:
        nodes    : [GraphNode] in editor order
        edges    : [GraphEdge] in editor order
        directed : graph-level directedness
    """

    def __init__(
        self,
        nodes: Optional[List[GraphNode]] = None,
        edges: Optional[List[GraphEdge]] = None,
        directed: bool = False,
    ):
        self.nodes:    List[GraphNode] = list(nodes or [])
        self.edges:    List[GraphEdge] = list(edges or [])
        self.directed: bool            = directed

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node_id: str, value=None, x: float = 0.0, y: float = 0.0) -> GraphNode:
        node = GraphNode(node_id, value=value, x=x, y=y)
        self.nodes.append(node)
        return node

    def add_edge(self, source: str, target: str, weight: Optional[float] = None) -> GraphEdge:
        edge = GraphEdge(source, target, weight)
        self.edges.append(edge)
        return edge

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return any(n.id == node_id for n in self.nodes)

    def has_negative_weights(self) -> bool:
        return any(e.weight is not None and e.weight < 0 for e in self.edges)

    # ==================================================================
    # SNAPSHOTS
    # ==================================================================
    def clone(self) -> "Graph":
        """Deep copy: every node and edge is a fresh object."""
        return Graph(
            nodes=[n.copy() for n in self.nodes],
            edges=[e.copy() for e in self.edges],
            directed=self.directed,
        )

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "nodes":    [n.to_dict() for n in self.nodes],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        return cls(
            nodes=[GraphNode.from_dict(nd) for nd in data.get("nodes", [])],
            edges=[GraphEdge.from_dict(ed) for ed in data.get("edges", [])],
            directed=data.get("directed", False),
        )

    # ==================================================================
    # PRESETS: factory class-methods
    # ==================================================================

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        directed: bool = False,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (no weight)
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            0 -> 1,2,3          → alternate arrow syntax
            0: 1(5), 2(3)       → comma-separated with weights

        Nodes are laid out on a circle in first-seen order.
        """
        adjacency: Dict[str, List[Tuple[str, Optional[float]]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                continue

            src = parts[0].strip()
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                # "B(3)" or "B"
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        weight: Optional[float] = float(w_str)
                        if weight.is_integer():
                            weight = int(weight)
                    except ValueError:
                        weight = None
                else:
                    tgt, weight = token, None
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, weight))

        g = cls(directed=directed)
        labels = list(adjacency.keys())
        for (x, y), label in zip(_circle_layout(len(labels), canvas_w, canvas_h), labels):
            g.add_node(label, x=x, y=y)

        # undirected duplicates (A: B and B: A) collapse into one edge
        seen: Set = set()
        for src, targets in adjacency.items():
            for tgt, weight in targets:
                key = (src, tgt) if directed else frozenset([src, tgt])
                if key in seen:
                    continue
                seen.add(key)
                g.add_edge(src, tgt, weight)

        return g

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        directed: bool = False,
        weighted: bool = True,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph with a spanning backbone, so every
        node is reachable from node "0" when the graph is undirected.
        Uses a private Random so the caller's global state is untouched.
        """
        rng = random.Random(seed)
        g = cls(directed=directed)

        ids = [str(i) for i in range(num_nodes)]
        for (x, y), nid in zip(_circle_layout(num_nodes, canvas_w, canvas_h), ids):
            g.add_node(nid, x=x, y=y)

        def weight() -> Optional[int]:
            return rng.randint(*weight_range) if weighted else None

        linked: Set = set()
        for i in range(num_nodes):
            for j in range(num_nodes):
                if i == j or (not directed and j < i):
                    continue
                if rng.random() < edge_probability:
                    g.add_edge(ids[i], ids[j], weight())
                    linked.add((i, j))

        # backbone 0-1-2-…, directed forward so "0" still reaches everything
        for k in range(1, num_nodes):
            if (k - 1, k) not in linked:
                g.add_edge(ids[k - 1], ids[k], weight())

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)}, directed={self.directed})"


# ---------------------------------------------------------------------------
# Module-level helpers used by every graph algorithm
# ---------------------------------------------------------------------------
def graph_to_adjacency_list(graph: Graph, resolve_weights: bool = False) -> AdjacencyList:
    """
    Every node gets an entry (possibly empty).  Undirected edges appear in
    both endpoints' lists.  Assumes the graph already passed validation.

    With `resolve_weights`, a missing weight is listed as its
    `effective_weight` (1) instead of None.
    """
    adj: AdjacencyList = {node.id: [] for node in graph.nodes}
    for edge in graph.edges:
        weight = edge.effective_weight if resolve_weights else edge.weight
        adj[edge.source].append((edge.target, weight))
        if not graph.directed:
            adj[edge.target].append((edge.source, weight))
    return adj


def validate_graph_input(graph: Graph) -> ValidationResult:
    if not graph.nodes:
        return ValidationResult(False, "Graph must have at least one node")

    node_ids = {n.id for n in graph.nodes}
    if len(node_ids) != len(graph.nodes):
        return ValidationResult(False, "Graph contains duplicate node IDs")

    for edge in graph.edges:
        if edge.source not in node_ids:
            return ValidationResult(False, f"Edge references non-existent node: {edge.source}")
        if edge.target not in node_ids:
            return ValidationResult(False, f"Edge references non-existent node: {edge.target}")

    return ValidationResult(True)


def _circle_layout(n: int, canvas_w: float, canvas_h: float) -> List[Tuple[float, float]]:
    if n == 0:
        return []
    cx, cy = canvas_w / 2, canvas_h / 2
    radius = min(canvas_w, canvas_h) * 0.35
    return [
        (
            round(cx + radius * math.cos(2 * math.pi * i / n), 2),
            round(cy + radius * math.sin(2 * math.pi * i / n), 2),
        )
        for i in range(n)
    ]
