from dataclasses import dataclass, field
from typing import Any


@dataclass
class Node:
    """
    One key plus two child slots. Children are indices into the owning tree's
    node list, never references to other nodes, so a node can only be reached
    through the tree that holds it.
    """

    key: Any
    children: list[int | None] = field(default_factory=lambda: [None, None])

    LEFT, RIGHT = 0, 1

    @property
    def left(self) -> int | None:
        return self.children[self.LEFT]

    @property
    def right(self) -> int | None:
        return self.children[self.RIGHT]

    def is_leaf(self) -> bool:
        return not any(child is not None for child in self.children)
