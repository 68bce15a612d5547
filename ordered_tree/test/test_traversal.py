import unittest

from ordered_tree.src.base.node import Node
from ordered_tree.src.traversal import (
    in_order,
    level_order,
    levels,
    post_order,
    pre_order,
)
from ordered_tree.src.tree import Tree


def walk(order, tree: Tree) -> list:
    return list(order(tree.nodes, tree.root))


class TestTraversals(unittest.TestCase):
    def setUp(self) -> None:
        #       5
        #     3   8
        #    1 4    9
        self.tree = Tree.from_keys([5, 3, 8, 1, 4, 9])
        return super().setUp()

    def test_in_order(self):
        self.assertEqual(walk(in_order, self.tree), [1, 3, 4, 5, 8, 9])

    def test_pre_order(self):
        self.assertEqual(walk(pre_order, self.tree), [5, 3, 1, 4, 8, 9])

    def test_post_order(self):
        self.assertEqual(walk(post_order, self.tree), [1, 4, 3, 9, 8, 5])

    def test_level_order(self):
        self.assertEqual(walk(level_order, self.tree), [5, 3, 8, 1, 4, 9])

    def test_levels(self):
        self.assertEqual(walk(levels, self.tree), [[5], [3, 8], [1, 4, 9]])

    def test_empty(self):
        tree = Tree()
        for order in [in_order, pre_order, post_order, level_order, levels]:
            self.assertEqual(walk(order, tree), [])

    def test_single(self):
        tree = Tree.from_keys([7])
        for order in [in_order, pre_order, post_order, level_order]:
            self.assertEqual(walk(order, tree), [7])
        self.assertEqual(walk(levels, tree), [[7]])

    def test_duplicates(self):
        tree = Tree.from_keys([10, 10])
        self.assertEqual(walk(in_order, tree), [10, 10])
        self.assertEqual(walk(post_order, tree), [10, 10])

    def test_pre_order_rebuilds_shape(self):
        rebuilt = Tree.from_keys(walk(pre_order, self.tree))
        self.assertEqual(str(rebuilt), str(self.tree))

    def test_left_chain_post_order(self):
        tree = Tree.from_keys(range(2_000, 0, -1))
        self.assertEqual(walk(post_order, tree), list(range(1, 2_001)))
        self.assertEqual(walk(in_order, tree), list(range(1, 2_001)))

    def test_works_on_plain_node_lists(self):
        # 2 <- 0 -> 1, built by hand without a Tree
        nodes = [Node(5, [2, 1]), Node(8), Node(3)]
        self.assertEqual(list(in_order(nodes, 0)), [3, 5, 8])
        self.assertEqual(list(level_order(nodes, 0)), [5, 3, 8])
