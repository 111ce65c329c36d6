import enum
import logging
from typing import Any, Optional, Tuple

from .bst import BinarySearchTree
from .node import Direction, Node, height

logger = logging.getLogger(__name__)


class Pattern(enum.IntEnum):
    """Shape formed by an unbalanced node z, its taller child y and y's
    taller child x"""
    LEFT_LEFT = 1
    RIGHT_RIGHT = 2
    LEFT_RIGHT = 3
    RIGHT_LEFT = 4


_PATTERNS = {
    (Direction.LEFT, Direction.LEFT): Pattern.LEFT_LEFT,
    (Direction.RIGHT, Direction.RIGHT): Pattern.RIGHT_RIGHT,
    (Direction.LEFT, Direction.RIGHT): Pattern.LEFT_RIGHT,
    (Direction.RIGHT, Direction.LEFT): Pattern.RIGHT_LEFT,
}


class AVLTree(BinarySearchTree):

    def insert(self, key: Any, value: Any = None) -> Optional[Node]:
        leaf = super().insert(key, value)
        if leaf is None or leaf.parent is None:
            return leaf

        self.update_heights(leaf.parent)

        # a single (or double) rotation at the lowest unbalanced ancestor
        # restores the subtree to its height before the insert, so nothing
        # above it can be out of balance
        node = leaf.parent
        while node is not None:
            if self.balance_factor(node) >= 2:
                self.balance(*self.find_xyz(node))
                break
            node = node.parent
        return leaf

    def remove(self, key: Any) -> Optional[Node]:
        edit_point = super().remove(key)
        self.update_heights(edit_point)

        # unlike insertion, a rotation after removal may shorten the subtree,
        # which can unbalance any ancestor above it
        node = edit_point
        while node is not None:
            if self.balance_factor(node) >= 2:
                node = self.balance(*self.find_xyz(node))
            node = node.parent
        return edit_point

    def node_swap(self, n1: Node, n2: Node):
        super().node_swap(n1, n2)
        if n1 is not None and n2 is not None:
            n1.height, n2.height = n2.height, n1.height

    @staticmethod
    def _update_height(node: Node):
        node.height = 1 + max(height(node.left), height(node.right))

    def update_heights(self, node: Optional[Node]):
        """Recompute heights from node up to the root"""
        while node is not None:
            self._update_height(node)
            node = node.parent

    @staticmethod
    def balance_factor(node: Node) -> int:
        return abs(height(node.left) - height(node.right))

    @staticmethod
    def _taller_side(node: Node, tie: Direction) -> Direction:
        left, right = height(node.left), height(node.right)
        if left > right:
            return Direction.LEFT
        if right > left:
            return Direction.RIGHT
        return tie

    def find_xyz(self, z: Node) -> Tuple[Node, Node, Node, Pattern]:
        """Classify the rotation needed at the unbalanced node z.

        y is z's taller child and x is y's taller child. When y's children
        are the same height (common after a removal) x is taken on the same
        side as y, so the pattern is a straight line and a single rotation
        suffices.
        """
        first = self._taller_side(z, Direction.RIGHT)
        y = z.get_child(first)
        second = self._taller_side(y, first)
        x = y.get_child(second)
        return x, y, z, _PATTERNS[(first, second)]

    def balance(self, x: Node, y: Node, z: Node, pattern: Pattern) -> Node:
        """Rotate the x/y/z subtree into balance, returning its new root"""
        logger.debug("rebalancing at %r: %s", z.key, pattern.name)

        if pattern == Pattern.LEFT_LEFT:
            self.rotate_right(z)
            top, lower = y, (z,)
        elif pattern == Pattern.RIGHT_RIGHT:
            self.rotate_left(z)
            top, lower = y, (z,)
        elif pattern == Pattern.LEFT_RIGHT:
            self.rotate_left(y)
            self.rotate_right(z)
            top, lower = x, (y, z)
        else:
            self.rotate_right(y)
            self.rotate_left(z)
            top, lower = x, (y, z)

        # nodes demoted below the new subtree root first, then the root and
        # every ancestor above it
        for node in lower:
            self._update_height(node)
        self.update_heights(top)
        return top

    def rotate_left(self, node: Node) -> Node:
        """Promote node's right child into node's position"""
        return self._rotate_subtree(node, Direction.LEFT)

    def rotate_right(self, node: Node) -> Node:
        """Promote node's left child into node's position"""
        return self._rotate_subtree(node, Direction.RIGHT)

    def _rotate_subtree(self, sub: Node, direction: Direction) -> Node:
        sub_parent = sub.parent
        sub_direction = sub.get_direction()
        new_root = sub.get_child(direction.opposite())
        new_child = new_root.get_child(direction)

        sub.set_child(direction.opposite(), new_child)
        if new_child is not None:
            new_child.parent = sub

        new_root.set_child(direction, sub)
        new_root.parent = sub_parent
        sub.parent = new_root

        if sub_parent is None:
            self.root = new_root
        else:
            sub_parent.set_child(sub_direction, new_root)

        return new_root
