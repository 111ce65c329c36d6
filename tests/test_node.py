from avlmap import Direction, Node
from avlmap.node import height


def test_new_node_is_a_leaf():
    node = Node(1, "a")

    assert node.height == 1
    assert node.parent is None
    assert node.left is None and node.right is None
    assert node.item == (1, "a")
    assert node.get_direction() == Direction.ROOT


def test_child_links_by_direction():
    parent = Node(2, "b")
    left = Node(1, "a", parent)
    right = Node(3, "c", parent)
    parent.set_child(Direction.LEFT, left)
    parent.set_child(Direction.RIGHT, right)

    assert parent.get_child(Direction.LEFT) is left
    assert parent.get_child(Direction.RIGHT) is right
    assert left.get_direction() == Direction.LEFT
    assert right.get_direction() == Direction.RIGHT


def test_direction_opposite():
    assert Direction.LEFT.opposite() == Direction.RIGHT
    assert Direction.RIGHT.opposite() == Direction.LEFT


def test_height_of_absent_child_is_zero():
    node = Node(1, None)
    node.height = 4

    assert height(None) == 0
    assert height(node) == 4
