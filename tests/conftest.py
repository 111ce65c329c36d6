from pathlib import Path

import pytest

from avlmap import AVLTree, BinarySearchTree


def pytest_addoption(parser):
    parser.addoption("--benchmark", action="store_true", default=False, help="run benchmark tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: mark benchmark tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--benchmark"):
        return
    benchmark_skip_marker = pytest.mark.skip(reason="use --benchmark marker to run")
    for item in items:
        filename = Path(str(item.fspath)).name
        if "benchmark" in item.keywords or filename.startswith('test_benchmark'):
            item.add_marker(benchmark_skip_marker)


def _verify(node, parent, lower, upper, balanced):
    """Walk the subtree checking links, ordering and (optionally) AVL heights.
    Returns the recomputed height"""
    if node is None:
        return 0
    assert node.parent is parent, f"{node.key} has a stale parent link"
    if lower is not None:
        assert lower < node.key
    if upper is not None:
        assert node.key < upper

    left = _verify(node.left, node, lower, node.key, balanced)
    right = _verify(node.right, node, node.key, upper, balanced)
    if balanced:
        assert node.height == 1 + max(left, right), f"{node.key} has a stale height"
        assert abs(left - right) <= 1, f"{node.key} is unbalanced"
    return 1 + max(left, right)


@pytest.fixture
def check_tree():
    """Asserts BST ordering, link consistency and, for AVL trees, the
    height and balance invariants at every node"""
    def check(tree: BinarySearchTree):
        if tree.root is not None:
            assert tree.root.parent is None
        _verify(tree.root, None, None, None, isinstance(tree, AVLTree))
        assert len(list(tree.keys())) == len(tree)
    return check


def shape(node):
    """Nested (key, left, right) tuples describing a subtree"""
    if node is None:
        return None
    return node.key, shape(node.left), shape(node.right)


@pytest.fixture
def tree_shape():
    return shape
