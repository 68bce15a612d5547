import logging
from collections.abc import Iterable, Iterator
from typing import Any, Self, override

from ordered_tree.src import traversal
from ordered_tree.src.base.node import Node
from ordered_tree.src.render import render_tree
from ordered_tree.src.utils import key_less


class Tree:
    """
    Unbalanced binary search tree over mutually comparable keys.

    Every node lives in `nodes` and links to its children by index, `root` is
    the index of the top node or None while the tree is empty. Nothing is ever
    removed, so a node's index is stable for the life of the tree.

    Keys smaller than a node go to its left, everything else (equal keys
    included) goes to its right. Duplicates are kept as separate nodes.
    """

    def __init__(self) -> None:
        self.nodes: list[Node] = []
        self.root: int | None = None

    @classmethod
    def from_keys(cls, keys: Iterable[Any]) -> Self:
        tree = cls()
        tree.insert_all(keys)
        return tree

    def insert(self, key: Any) -> int:
        if self.root is None:
            # nothing to compare against yet, but the key still has to be orderable
            key_less(key, key)
            self.root = self._new_node(key)
            logging.debug(f"inserted {key = } as root")
            return self.root

        curr = self.root
        depth = 0
        while True:
            node = self.nodes[curr]
            side = Node.LEFT if key_less(key, node.key) else Node.RIGHT
            depth += 1
            child = node.children[side]
            if child is None:
                break
            curr = child

        ind = self._new_node(key)
        node.children[side] = ind
        logging.debug(f"inserted {key = } at {ind = }, {depth = }, {side = }")
        return ind

    def insert_all(self, keys: Iterable[Any]) -> None:
        for key in keys:
            self.insert(key)

    def _new_node(self, key: Any) -> int:
        self.nodes.append(Node(key))
        return len(self.nodes) - 1

    def node(self, ind: int) -> Node:
        if not 0 <= ind < len(self.nodes):
            raise IndexError(f"no node at index {ind}, tree has {len(self.nodes)}")
        return self.nodes[ind]

    def search(self, key: Any) -> int | None:
        """Index of the shallowest node holding `key`, None if there is none."""
        curr = self.root
        while curr is not None:
            node = self.nodes[curr]
            if key_less(key, node.key):
                curr = node.left
            elif key_less(node.key, key):
                curr = node.right
            else:
                return curr
        return None

    def count(self, key: Any) -> int:
        # every copy of a key sits on the path a new copy would be inserted along
        found = 0
        curr = self.root
        while curr is not None:
            node = self.nodes[curr]
            if key_less(key, node.key):
                curr = node.left
                continue
            if not key_less(node.key, key):
                found += 1
            curr = node.right
        return found

    def minimum(self) -> Any:
        return self._extreme(Node.LEFT, "minimum")

    def maximum(self) -> Any:
        return self._extreme(Node.RIGHT, "maximum")

    def _extreme(self, side: int, name: str) -> Any:
        if self.root is None:
            raise ValueError(f"{name} of an empty tree")
        node = self.nodes[self.root]
        while (child := node.children[side]) is not None:
            node = self.nodes[child]
        return node.key

    def height(self) -> int:
        return sum(1 for _ in traversal.levels(self.nodes, self.root))

    def is_valid(self) -> bool:
        """
        Walks the tree carrying the bounds each node's key must fall in (lower
        inclusive, upper exclusive, None for unbounded) and checks every node in
        `nodes` is reached exactly once.
        """
        if self.root is None:
            return not self.nodes

        seen = set()
        stack: list[tuple[int, Any, Any]] = [(self.root, None, None)]
        while stack:
            ind, low, high = stack.pop()
            if ind in seen or not 0 <= ind < len(self.nodes):
                return False
            seen.add(ind)
            key = self.nodes[ind].key
            if low is not None and key_less(key, low):
                return False
            if high is not None and not key_less(key, high):
                return False
            left, right = self.nodes[ind].children
            if left is not None:
                stack.append((left, low, key))
            if right is not None:
                stack.append((right, key, high))
        return len(seen) == len(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return traversal.in_order(self.nodes, self.root)

    @override
    def __str__(self) -> str:
        return render_tree(self.nodes, self.root)

    @override
    def __repr__(self) -> str:
        return f"Tree(keys={list(self)!r})"
