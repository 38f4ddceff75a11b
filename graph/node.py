"""
node.py — Graph Node
====================
A vertex as the visualizer sees it: a unique id, a display value, a canvas
position, and three per-step annotations (highlighted / visited / distance)
that the graph algorithms set on their cloned snapshots.

Design decisions:
  - Identity is the `id` string; two nodes are equal when their ids match.
  - Annotations live on the node itself (not in a side table) so a cloned
    Graph is a complete, self-describing frame for the renderer.
  - `copy()` is the only way algorithms obtain a node they may annotate.
"""

from typing import Any, Optional


class GraphNode:
    """
    Attributes:
        id          : Unique identifier within its graph.
        value       : Free-form label / payload shown on the canvas.
        x, y        : Canvas coordinates.
        highlighted : True when the node is the focus of the current step.
        visited     : True once the algorithm has processed the node.
        distance    : Current shortest-known distance (Dijkstra only).
    """

    __slots__ = ("id", "value", "x", "y", "highlighted", "visited", "distance")

    def __init__(
        self,
        node_id: str,
        value: Any = None,
        x: float = 0.0,
        y: float = 0.0,
        highlighted: bool = False,
        visited: bool = False,
        distance: Optional[float] = None,
    ):
        self.id: str                   = node_id
        self.value: Any                = node_id if value is None else value
        self.x: float                  = x
        self.y: float                  = y
        self.highlighted: bool         = highlighted
        self.visited: bool             = visited
        self.distance: Optional[float] = distance

    def copy(self) -> "GraphNode":
        return GraphNode(
            node_id=self.id,
            value=self.value,
            x=self.x,
            y=self.y,
            highlighted=self.highlighted,
            visited=self.visited,
            distance=self.distance,
        )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "value":       self.value,
            "x":           self.x,
            "y":           self.y,
            "highlighted": self.highlighted,
            "visited":     self.visited,
            "distance":    self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(
            node_id=str(data["id"]),
            value=data.get("value"),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            highlighted=data.get("highlighted", False),
            visited=data.get("visited", False),
            distance=data.get("distance"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, visited={self.visited}, distance={self.distance})"

    def __eq__(self, other) -> bool:
        return isinstance(other, GraphNode) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
