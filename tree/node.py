"""
node.py — Binary Tree Node
==========================
A plain rooted binary tree node; no parent pointers.  `x` / `y` stay None
until `calculate_tree_positions` lays the tree out.
"""

from typing import Optional


class TreeNode:
    __slots__ = ("value", "left", "right", "x", "y", "highlighted")

    def __init__(
        self,
        value: int,
        left: Optional["TreeNode"] = None,
        right: Optional["TreeNode"] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
        highlighted: bool = False,
    ):
        self.value       = value
        self.left        = left
        self.right       = right
        self.x           = x
        self.y           = y
        self.highlighted = highlighted

    def to_dict(self) -> dict:
        return {
            "value":       self.value,
            "x":           self.x,
            "y":           self.y,
            "highlighted": self.highlighted,
            "left":        self.left.to_dict() if self.left else None,
            "right":       self.right.to_dict() if self.right else None,
        }

    def __repr__(self) -> str:
        return f"TreeNode({self.value})"
