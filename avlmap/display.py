"""Debug views of a tree built only from its public node links"""
from typing import List, Optional, Tuple

import networkx as nx

from .bst import BinarySearchTree
from .node import Node


def pprint(tree: BinarySearchTree) -> str:
    lines = []
    # draw the tree pre-order, left subtree above right
    stack: List[Tuple[Optional[Node], int]] = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        if node is None:
            lines.append("\t" * depth + "|_ null\n")
            continue
        direction = node.get_direction()
        lines.append("\t" * depth
                     + f"|_ {direction.name} | {node.key!r}: {node.value!r} (h={node.height})\n")
        stack.append((node.right, depth + 1))
        stack.append((node.left, depth + 1))
    return "".join(lines)


def to_graph(tree: BinarySearchTree) -> nx.DiGraph:
    """Export the tree as a directed graph of parent -> child edges.

    Graph nodes are the tree's keys, carrying `value` and `height` attributes;
    each edge records which side of its parent the child sits on.
    """
    G = nx.DiGraph()
    if tree.root is None:
        return G

    stack = [tree.root]
    while stack:
        node = stack.pop()
        G.add_node(node.key, value=node.value, height=node.height)
        for child in (node.left, node.right):
            if child is None:
                continue
            G.add_edge(node.key, child.key, direction=child.get_direction().name)
            stack.append(child)
    return G
