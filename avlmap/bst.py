import logging
from typing import Any, Iterator, Optional, Tuple

from .iterator import TreeIterator
from .node import Direction, Node

logger = logging.getLogger(__name__)

_MISSING = object()


class BinarySearchTree:
    """Unbalanced ordered map keyed on any totally ordered type.

    Structural edits never rebalance here. Subclasses hook into the edit
    points returned by insert() and remove() to restore their own invariants.
    """

    node_class = Node

    def __init__(self):
        self.root: Optional[Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self.root is None

    def insert(self, key: Any, value: Any = None) -> Optional[Node]:
        """Insert key/value, or overwrite the value if key is already present.

        Returns the newly attached leaf, or None if the call only updated an
        existing value and the tree shape is unchanged.
        """
        if self.root is None:
            self.root = self.node_class(key, value)
            self._size += 1
            return self.root

        node = self.root
        while True:
            if key < node.key:
                direction = Direction.LEFT
            elif node.key < key:
                direction = Direction.RIGHT
            else:
                node.value = value
                return None

            child = node.get_child(direction)
            if child is None:
                break
            node = child

        leaf = self.node_class(key, value, node)
        node.set_child(direction, leaf)
        self._size += 1
        return leaf

    def remove(self, key: Any) -> Optional[Node]:
        """Remove key from the tree if it's present.

        Returns the parent of the node that was physically unlinked, the point
        from which a rebalancing pass should start. None means nothing was
        removed, or the tree's last remaining node was.
        """
        node = self.internal_find(key)
        if node is None:
            return None

        # node has 2 children. move it into its in-order predecessor's slot,
        # which has at most one child, and unlink it from there
        if node.left is not None and node.right is not None:
            predecessor = self.predecessor(node)
            logger.debug("swapping %r with predecessor %r before removal",
                         node.key, predecessor.key)
            self.node_swap(node, predecessor)

        parent = node.parent
        self._unlink(node)
        self._size -= 1
        return parent

    def _unlink(self, node: Node):
        """Detach a node with at most one child, splicing the child upward"""
        child = node.left if node.left is not None else node.right
        parent = node.parent

        if child is not None:
            child.parent = parent

        if parent is None:
            self.root = child
        else:
            parent.set_child(node.get_direction(), child)

        node.parent = node.left = node.right = None

    def internal_find(self, key: Any) -> Optional[Node]:
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    @staticmethod
    def predecessor(node: Node) -> Optional[Node]:
        """Returns the rightmost node of node's left subtree"""
        current = node.left
        if current is None:
            return None
        while current.right is not None:
            current = current.right
        return current

    def smallest(self) -> Optional[Node]:
        """Returns the leftmost node in the tree"""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def node_swap(self, n1: Node, n2: Node):
        """Exchange the positions of two nodes in the tree.

        Only links move; each node keeps its own key and value, so outside
        references to either node still see the same pair afterwards.
        """
        if n1 is None or n2 is None or n1 is n2:
            return

        n1_parent, n1_left, n1_right = n1.parent, n1.left, n1.right
        n1_direction = n1.get_direction()
        n2_parent, n2_left, n2_right = n2.parent, n2.left, n2.right
        n2_direction = n2.get_direction()

        n1.parent, n2.parent = n2_parent, n1_parent
        n1.left, n2.left = n2_left, n1_left
        n1.right, n2.right = n2_right, n1_right

        # when one node is the other's child, the blind exchange above leaves
        # a node pointing at itself. point it at its partner instead
        if n1_right is n2:
            n2.right = n1
            n1.parent = n2
        elif n2_right is n1:
            n1.right = n2
            n2.parent = n1
        elif n1_left is n2:
            n2.left = n1
            n1.parent = n2
        elif n2_left is n1:
            n1.left = n2
            n2.parent = n1

        # repoint every third party that referenced either node
        if n1_parent is not None and n1_parent is not n2:
            n1_parent.set_child(n1_direction, n2)
        for child in (n1_left, n1_right):
            if child is not None and child is not n2:
                child.parent = n2

        if n2_parent is not None and n2_parent is not n1:
            n2_parent.set_child(n2_direction, n1)
        for child in (n2_left, n2_right):
            if child is not None and child is not n1:
                child.parent = n1

        if self.root is n1:
            self.root = n2
        elif self.root is n2:
            self.root = n1

    def find(self, key: Any) -> TreeIterator:
        return TreeIterator(self.internal_find(key))

    def begin(self) -> TreeIterator:
        return TreeIterator(self.smallest())

    def end(self) -> TreeIterator:
        return TreeIterator(None)

    def clear(self):
        """Release every node, children before their parent"""
        stack = [(self.root, False)] if self.root is not None else []
        while stack:
            node, visited = stack.pop()
            if visited:
                node.parent = node.left = node.right = None
                continue
            stack.append((node, True))
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, False))
        self.root = None
        self._size = 0

    @staticmethod
    def _measure(node: Optional[Node]) -> Tuple[int, bool]:
        """Recompute the subtree height from its links, children before their
        parent, and report whether every node in it is balanced"""
        heights = {None: 0}
        balanced = True
        stack = [(node, False)] if node is not None else []
        while stack:
            current, visited = stack.pop()
            if visited:
                left, right = heights[current.left], heights[current.right]
                if abs(left - right) > 1:
                    balanced = False
                heights[current] = 1 + max(left, right)
                continue
            stack.append((current, True))
            for child in (current.right, current.left):
                if child is not None:
                    stack.append((child, False))
        return heights[node], balanced

    def is_balanced(self) -> bool:
        """Recompute heights from the structure and check the AVL condition"""
        return self._measure(self.root)[1]

    def height(self, node: Optional[Node] = None) -> int:
        if node is None:
            node = self.root
        return self._measure(node)[0]

    def get(self, key: Any, default: Any = None) -> Any:
        node = self.internal_find(key)
        if node is None:
            return default
        return node.value

    def keys(self) -> Iterator[Any]:
        for key, _ in self.begin():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self.begin():
            yield value

    def items(self) -> Iterator[Tuple[Any, Any]]:
        return iter(self.begin())

    def pop(self, key: Any, default: Any = _MISSING) -> Any:
        node = self.internal_find(key)
        if node is None:
            if default is _MISSING:
                raise KeyError(key)
            return default
        value = node.value
        self.remove(key)
        return value

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.internal_find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        node = self.internal_find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any):
        self.insert(key, value)

    def __delitem__(self, key: Any):
        if self.internal_find(key) is None:
            raise KeyError(key)
        self.remove(key)

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __repr__(self):
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{self.__class__.__name__}({{{body}}})"
