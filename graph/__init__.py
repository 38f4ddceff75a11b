"""
graph/
-----
Graph data layer.  Public API:

    from graph import Graph, GraphNode, GraphEdge
    from graph import graph_to_adjacency_list, validate_graph_input
"""

from graph.node  import GraphNode
from graph.edge  import GraphEdge
from graph.graph import (
    Graph,
    AdjacencyList,
    ValidationResult,
    graph_to_adjacency_list,
    validate_graph_input,
)

__all__ = [
    "GraphNode",
    "GraphEdge",
    "Graph",
    "AdjacencyList",
    "ValidationResult",
    "graph_to_adjacency_list",
    "validate_graph_input",
]
