"""
edge.py — Graph Edge
====================
Connects two nodes by id.  Carries an optional weight and a `highlighted`
flag the algorithms set on cloned snapshots.

Design decisions:
  - `source` and `target` are node-id strings, NOT node references.
    This keeps edges serialisable and avoids circular references.
  - Serialised keys are "from" / "to" so graphs built by the graph editor
    round-trip unchanged.
  - `weight` may be None; weighted algorithms read it through
    `effective_weight`, which treats a missing weight as 1.
"""

from typing import Optional


class GraphEdge:

    __slots__ = ("source", "target", "weight", "highlighted")

    def __init__(
        self,
        source: str,
        target: str,
        weight: Optional[float] = None,
        highlighted: bool = False,
    ):
        self.source:      str             = source
        self.target:      str             = target
        self.weight:      Optional[float] = weight
        self.highlighted: bool            = highlighted

    @property
    def effective_weight(self) -> float:
        return 1 if self.weight is None else self.weight

    def touches(self, node_id: str, directed: bool) -> bool:
        """True if traversing from `node_id` can use this edge."""
        if self.source == node_id:
            return True
        return not directed and self.target == node_id

    def joins(self, a: str, b: str, directed: bool) -> bool:
        """True if this edge links a → b (either way when undirected)."""
        if self.source == a and self.target == b:
            return True
        return not directed and self.source == b and self.target == a

    def copy(self) -> "GraphEdge":
        return GraphEdge(self.source, self.target, self.weight, self.highlighted)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "from":        self.source,
            "to":          self.target,
            "weight":      self.weight,
            "highlighted": self.highlighted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(
            source=str(data["from"]),
            target=str(data["to"]),
            weight=data.get("weight"),
            highlighted=data.get("highlighted", False),
        )

    def __repr__(self) -> str:
        return f"GraphEdge({self.source} → {self.target}, w={self.weight})"
