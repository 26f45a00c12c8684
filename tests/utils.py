"""Invariant checkers reaching into the private nodes of the structures."""

import math

from municipal.structures._definitions import NodeColor


def inorder_nodes(node):
    if node is None:
        return []
    return inorder_nodes(node.left) + [node] + inorder_nodes(node.right)


def assert_avl_invariants(tree):
    """Check cached heights and balance factors, return the tree height."""

    def _check(node):
        if node is None:
            return 0
        left = _check(node.left)
        right = _check(node.right)
        assert abs(left - right) <= 1, f"unbalanced at {node.payload.title}"
        assert node.height == max(left, right) + 1
        return node.height

    height = _check(tree._root)
    n = len(tree)
    assert height <= math.ceil(1.44 * math.log2(n + 2))
    return height


def assert_red_black_invariants(tree):
    """Root black, no red-red edge, equal black height, consistent parents."""
    root = tree._root
    if root is None:
        return 0
    assert root.color is NodeColor.black
    assert root.parent is None

    def _black_height(node):
        if node is None:
            return 1
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                if node.color is NodeColor.red:
                    assert child.color is NodeColor.black, "red node with red child"
        left = _black_height(node.left)
        right = _black_height(node.right)
        assert left == right, "black heights differ"
        return left + (1 if node.color is NodeColor.black else 0)

    return _black_height(root)


def heap_key(payload):
    return (payload.priority, payload.title.casefold())


def assert_heap_property(heap):
    items = heap.to_array()
    for index in range(1, len(items)):
        parent = (index - 1) // 2
        assert heap_key(items[parent]) >= heap_key(items[index])
