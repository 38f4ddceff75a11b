"""
tree/
-----
Binary search tree construction, traversal and layout.

    from tree import TreeNode, create_bst_from_array, calculate_tree_positions
"""

from tree.node import TreeNode
from tree.bst import (
    calculate_tree_positions,
    create_bst_from_array,
    delete_from_bst,
    inorder_traversal,
    insert_into_bst,
    level_order_traversal,
    postorder_traversal,
    preorder_traversal,
    search_bst,
    tree_height,
)

__all__ = [
    "TreeNode",
    "create_bst_from_array",
    "insert_into_bst",
    "search_bst",
    "delete_from_bst",
    "inorder_traversal",
    "preorder_traversal",
    "postorder_traversal",
    "level_order_traversal",
    "tree_height",
    "calculate_tree_positions",
]
