from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

from ordered_tree.src.base.node import Node


# All walks keep their own stack or queue. A tree fed sorted keys is a single
# chain, so recursion depth would equal the node count.


def in_order(nodes: Sequence[Node], root: int | None) -> Iterator[Any]:
    stack: list[int] = []
    curr = root
    while stack or curr is not None:
        while curr is not None:
            stack.append(curr)
            curr = nodes[curr].left
        ind = stack.pop()
        yield nodes[ind].key
        curr = nodes[ind].right


def pre_order(nodes: Sequence[Node], root: int | None) -> Iterator[Any]:
    if root is None:
        return
    stack = [root]
    while stack:
        node = nodes[stack.pop()]
        yield node.key
        # right pushed first so left comes off first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def post_order(nodes: Sequence[Node], root: int | None) -> Iterator[Any]:
    stack: list[int] = []
    last_visited = None
    curr = root
    while stack or curr is not None:
        if curr is not None:
            stack.append(curr)
            curr = nodes[curr].left
            continue
        peek = nodes[stack[-1]]
        if peek.right is not None and peek.right != last_visited:
            curr = peek.right
        else:
            last_visited = stack.pop()
            yield peek.key


def levels(nodes: Sequence[Node], root: int | None) -> Iterator[list[Any]]:
    """Breadth first, one list of keys per level, each level left to right."""
    level = [] if root is None else [root]
    while level:
        yield [nodes[ind].key for ind in level]
        level = [
            child
            for ind in level
            for child in nodes[ind].children
            if child is not None
        ]


def level_order(nodes: Sequence[Node], root: int | None) -> Iterator[Any]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = nodes[queue.popleft()]
        yield node.key
        queue.extend(child for child in node.children if child is not None)
