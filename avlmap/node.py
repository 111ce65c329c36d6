import enum
from typing import Any, Optional, Tuple


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction(1 - self)


class Node:

    def __init__(self, key: Any, value: Any, parent: Optional["Node"] = None):
        self.parent: Optional[Node] = parent
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        # a leaf has height 1, an absent child counts as 0. the unbalanced
        # engine never reads this, only the AVL subclass keeps it current
        self.height = 1
        self.key = key
        self.value = value

    @property
    def item(self) -> Tuple[Any, Any]:
        return self.key, self.value

    def get_child(self, direction: Direction) -> Optional["Node"]:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def __repr__(self):
        return f"Node({self.key!r}: {self.value!r}, height={self.height})"


def height(node: Optional[Node]) -> int:
    """Stored height of a node, 0 for an absent child"""
    if node is None:
        return 0
    return node.height
