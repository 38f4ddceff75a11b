"""Tests for the BST helpers."""
import random

import pytest

from tree import (
    TreeNode,
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


@pytest.fixture
def tree():
    return create_bst_from_array([1, 2, 3, 4, 5, 6, 7])


class TestConstruction:
    def test_balanced_from_unsorted(self):
        root = create_bst_from_array([7, 3, 5, 1, 6, 2, 4])
        assert root.value == 4
        assert tree_height(root) == 3

    def test_empty(self):
        assert create_bst_from_array([]) is None
        assert tree_height(None) == 0

    def test_insert_duplicates_go_right(self):
        root = insert_into_bst(None, 5)
        root = insert_into_bst(root, 5)
        assert root.left is None
        assert root.right.value == 5

    def test_builder_duplicates_go_right(self):
        root = create_bst_from_array([5, 5, 5])
        assert root.left is None
        assert search_bst(root, 5) == ([5], True)
        assert inorder_traversal(root) == [5, 5, 5]

    @pytest.mark.parametrize("seed", range(5))
    def test_builder_keeps_ordering_rule(self, seed):
        rng = random.Random(seed)
        values = [rng.randint(0, 5) for _ in range(25)]
        root = create_bst_from_array(values)

        def check(node, low, high):
            if node is None:
                return
            assert (low is None or node.value >= low) and (high is None or node.value < high)
            check(node.left, low, node.value)
            check(node.right, node.value, high)

        check(root, None, None)
        assert inorder_traversal(root) == sorted(values)

    @pytest.mark.parametrize("seed", range(5))
    def test_inorder_is_sorted(self, seed):
        rng = random.Random(seed)
        values = [rng.randint(0, 50) for _ in range(20)]
        root = None
        for v in values:
            root = insert_into_bst(root, v)
        assert inorder_traversal(root) == sorted(values)


class TestTraversals:
    def test_orders(self, tree):
        assert inorder_traversal(tree) == [1, 2, 3, 4, 5, 6, 7]
        assert preorder_traversal(tree) == [4, 2, 1, 3, 6, 5, 7]
        assert postorder_traversal(tree) == [1, 3, 2, 5, 7, 6, 4]
        assert level_order_traversal(tree) == [4, 2, 6, 1, 3, 5, 7]

    def test_empty(self):
        assert inorder_traversal(None) == []
        assert level_order_traversal(None) == []


class TestSearchAndDelete:
    def test_search_path(self, tree):
        assert search_bst(tree, 5) == ([4, 6, 5], True)
        assert search_bst(tree, 8) == ([4, 6, 7], False)

    def test_delete_leaf(self, tree):
        root = delete_from_bst(tree, 1)
        assert inorder_traversal(root) == [2, 3, 4, 5, 6, 7]

    def test_delete_root_uses_successor(self, tree):
        root = delete_from_bst(tree, 4)
        assert root.value == 5
        assert inorder_traversal(root) == [1, 2, 3, 5, 6, 7]

    def test_delete_missing_value(self, tree):
        root = delete_from_bst(tree, 42)
        assert inorder_traversal(root) == [1, 2, 3, 4, 5, 6, 7]

    def test_delete_only_node(self):
        assert delete_from_bst(TreeNode(1), 1) is None


class TestLayout:
    def test_positions(self, tree):
        laid_out = calculate_tree_positions(tree)
        assert (laid_out.x, laid_out.y) == (400, 50)
        assert (laid_out.left.x, laid_out.left.y) == (250, 110)
        assert (laid_out.right.x, laid_out.right.y) == (550, 110)
        assert laid_out.left.left.x == 175
        assert laid_out.right.right.y == 170

    def test_returns_new_tree(self, tree):
        laid_out = calculate_tree_positions(tree)
        assert laid_out is not tree
        assert tree.x is None

    def test_to_dict(self):
        d = calculate_tree_positions(TreeNode(1, right=TreeNode(2))).to_dict()
        assert d["left"] is None
        assert d["right"]["value"] == 2
