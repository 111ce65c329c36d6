import logging

from .avl import AVLTree, Pattern
from .bst import BinarySearchTree
from .errors import InvalidIteratorError
from .iterator import TreeIterator
from .node import Direction, Node

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "Direction",
    "InvalidIteratorError",
    "Node",
    "Pattern",
    "TreeIterator",
]
