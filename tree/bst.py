"""
bst.py — Binary Search Tree helpers
===================================
Ordering rule: left < parent <= right.  Duplicates always go right, both on
insert and in the balanced builder (which picks the lower middle, moved
back to the first of any run of equal values).

`insert_into_bst` and `delete_from_bst` work in place and return the
(possibly new) root, so `root = insert_into_bst(root, v)` is the idiom.
`calculate_tree_positions` never touches its input: it returns a new tree.
"""

from collections import deque
from typing import List, Optional, Sequence, Tuple

from tree.node import TreeNode


def create_bst_from_array(values: Sequence[int]) -> Optional[TreeNode]:
    """Balanced BST from the sorted input; None for an empty input."""
    ordered = sorted(values)

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        # root on the first of a run of equal values, so copies land right
        while mid > start and ordered[mid - 1] == ordered[mid]:
            mid -= 1
        return TreeNode(ordered[mid], left=build(start, mid - 1), right=build(mid + 1, end))

    return build(0, len(ordered) - 1)


def insert_into_bst(root: Optional[TreeNode], value: int) -> TreeNode:
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right


def search_bst(root: Optional[TreeNode], value: int) -> Tuple[List[int], bool]:
    """Return the values visited on the way down and whether `value` was found."""
    path: List[int] = []
    node = root
    while node is not None:
        path.append(node.value)
        if value == node.value:
            return path, True
        node = node.left if value < node.value else node.right
    return path, False


def delete_from_bst(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """Remove the first node holding `value`; two-child nodes take their in-order successor."""
    if root is None:
        return None
    if value < root.value:
        root.left = delete_from_bst(root.left, value)
    elif value > root.value:
        root.right = delete_from_bst(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.value = successor.value
        root.right = delete_from_bst(root.right, successor.value)
    return root


# ---------------------------------------------------------------------------
# Traversals
# ---------------------------------------------------------------------------
def inorder_traversal(root: Optional[TreeNode]) -> List[int]:
    if root is None:
        return []
    return inorder_traversal(root.left) + [root.value] + inorder_traversal(root.right)


def preorder_traversal(root: Optional[TreeNode]) -> List[int]:
    if root is None:
        return []
    return [root.value] + preorder_traversal(root.left) + preorder_traversal(root.right)


def postorder_traversal(root: Optional[TreeNode]) -> List[int]:
    if root is None:
        return []
    return postorder_traversal(root.left) + postorder_traversal(root.right) + [root.value]


def level_order_traversal(root: Optional[TreeNode]) -> List[int]:
    if root is None:
        return []
    out: List[int] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        out.append(node.value)
        if node.left:
            queue.append(node.left)
        if node.right:
            queue.append(node.right)
    return out


def tree_height(root: Optional[TreeNode]) -> int:
    """Number of levels; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(tree_height(root.left), tree_height(root.right))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def calculate_tree_positions(
    root: Optional[TreeNode],
    x: float = 400,
    y: float = 50,
    level: int = 0,
    horizontal_spacing: float = 150,
) -> Optional[TreeNode]:
    """
    Return a positioned copy of the tree.  Children sit 60 units below their
    parent, offset sideways by horizontal_spacing / 2**level.
    """
    if root is None:
        return None
    spacing = horizontal_spacing / (2 ** level)
    return TreeNode(
        root.value,
        left=calculate_tree_positions(root.left, x - spacing, y + 60, level + 1, horizontal_spacing),
        right=calculate_tree_positions(root.right, x + spacing, y + 60, level + 1, horizontal_spacing),
        x=x,
        y=y,
        highlighted=root.highlighted,
    )
