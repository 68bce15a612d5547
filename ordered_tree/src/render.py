from collections.abc import Sequence

from ordered_tree.src.base.node import Node

EMPTY_TREE = "<empty>"

BRANCH, LAST_BRANCH = "├── ", "└── "
CONTINUATION, BLANK = "│   ", "    "
SIDE_LABELS = {Node.LEFT: "L", Node.RIGHT: "R"}

# (index, side, is last sibling)
type ChildEntry = tuple[int, int, bool]


def render_tree(nodes: Sequence[Node], root: int | None) -> str:
    """
    Draws the tree sideways, root on the first line and every child indented
    under its parent:

        5
        ├── L 3
        │   ├── L 1
        │   └── R 4
        └── R 8

    Children carry their side so a lone child still reads as left or right.
    """
    if root is None:
        return EMPTY_TREE

    lines = [str(nodes[root].key)]
    # (index, side, prefix for this line, is last sibling)
    stack = [(ind, side, "", last) for ind, side, last in _present_children(nodes[root])]
    while stack:
        ind, side, prefix, last = stack.pop()
        node = nodes[ind]
        connector = LAST_BRANCH if last else BRANCH
        lines.append(f"{prefix}{connector}{SIDE_LABELS[side]} {node.key}")
        child_prefix = prefix + (BLANK if last else CONTINUATION)
        stack.extend(
            (child, child_side, child_prefix, child_last)
            for child, child_side, child_last in _present_children(node)
        )
    return "\n".join(lines)


def _present_children(node: Node) -> list[ChildEntry]:
    """Existing children, reversed for stack order."""
    present = [
        (child, side) for side, child in enumerate(node.children) if child is not None
    ]
    with_last = [
        (child, side, i == len(present) - 1) for i, (child, side) in enumerate(present)
    ]
    return list(reversed(with_last))
