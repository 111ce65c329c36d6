from typing import Any, Optional, Tuple

from .errors import InvalidIteratorError
from .node import Node


class TreeIterator:
    """Read-only in-order cursor over a tree's nodes.

    The cursor holds a plain reference to the current node, or None once it
    has moved past the largest key. Any structural change to the tree while a
    cursor is alive leaves the cursor in an unspecified position.
    """

    def __init__(self, node: Optional[Node] = None):
        self.current = node

    def is_end(self) -> bool:
        return self.current is None

    def _node(self) -> Node:
        if self.current is None:
            raise InvalidIteratorError()
        return self.current

    @property
    def key(self) -> Any:
        return self._node().key

    @property
    def value(self) -> Any:
        return self._node().value

    @value.setter
    def value(self, value: Any):
        self._node().value = value

    @property
    def item(self) -> Tuple[Any, Any]:
        return self._node().item

    def advance(self) -> "TreeIterator":
        """Move to the next key in ascending order. The end cursor stays put"""
        node = self.current
        if node is None:
            return self

        # the successor is the leftmost node of the right subtree, if any
        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            self.current = node
            return self

        # otherwise climb until we arrive from a left child. climbing off the
        # root leaves us at None, the end sentinel
        while node.parent is not None and node is node.parent.right:
            node = node.parent
        self.current = node.parent
        return self

    def copy(self) -> "TreeIterator":
        return TreeIterator(self.current)

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[Any, Any]:
        if self.current is None:
            raise StopIteration
        item = self.current.item
        self.advance()
        return item

    def __eq__(self, other):
        if not isinstance(other, TreeIterator):
            return NotImplemented
        return self.current is other.current

    __hash__ = None

    def __repr__(self):
        if self.current is None:
            return "TreeIterator(<end>)"
        return f"TreeIterator({self.current.key!r})"
