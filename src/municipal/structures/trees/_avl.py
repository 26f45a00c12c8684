"""
AVL tree of payloads ordered by priority.

Equal priorities are ordered by case-insensitive title so the shape of the tree
does not depend on anything but the payloads. Each node caches its height;
after every insert or delete the heights on the path back to the root are
recomputed and any node whose balance factor reached +2 or -2 is rotated back.
The height invariant bounds recursion depth to about 1.44 * log2(n + 2).

The tree is single writer. Iteration walks a snapshot of the in-order listing,
so changes made while iterating are not seen by that iterator. Changing the
priority or title of a stored payload breaks the ordering.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final, Generic, TypeVar

from .._logging import null_logger
from .._utils import compare_text, natural_compare, require
from ..containers import DynamicArray
from ..types import Prioritized

logger: Final = null_logger(__name__)

P = TypeVar("P", bound=Prioritized)


class _Node(Generic[P]):
    __slots__ = ("payload", "left", "right", "height")

    def __init__(self, payload: P) -> None:
        self.payload = payload
        self.left: _Node[P] | None = None
        self.right: _Node[P] | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node | None) -> int:
    return 0 if node is None else _height(node.left) - _height(node.right)


def _compare(priority: int, title: str, payload: Prioritized) -> int:
    compare = natural_compare(priority, payload.priority)
    if compare != 0:
        return compare
    return compare_text(title, payload.title)


def _rotate_right(node: _Node[P]) -> _Node[P]:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node

    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_left(node: _Node[P]) -> _Node[P]:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node

    _update_height(node)
    _update_height(pivot)
    return pivot


def _rebalance(node: _Node[P]) -> _Node[P]:
    balance = _balance_factor(node)

    if balance > 1:
        if _balance_factor(node.left) < 0:
            logger.debug("LR rotation at priority %s", node.payload.priority)
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        else:
            logger.debug("LL rotation at priority %s", node.payload.priority)
        return _rotate_right(node)

    if balance < -1:
        if _balance_factor(node.right) > 0:
            logger.debug("RL rotation at priority %s", node.payload.priority)
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        else:
            logger.debug("RR rotation at priority %s", node.payload.priority)
        return _rotate_left(node)

    return node


class AVLTree(Generic[P]):
    """Priority index that stays balanced under any insertion order."""

    __slots__ = ("_root", "_count")

    def __init__(self) -> None:
        self._root: _Node[P] | None = None
        self._count = 0

    @property
    def height(self) -> int:
        return _height(self._root)

    def insert(self, payload: P) -> None:
        require(payload, "payload")
        self._root = self._insert(self._root, payload)
        self._count += 1

    def _insert(self, node: _Node[P] | None, payload: P) -> _Node[P]:
        if node is None:
            return _Node(payload)

        if _compare(payload.priority, payload.title, node.payload) < 0:
            node.left = self._insert(node.left, payload)
        else:
            node.right = self._insert(node.right, payload)

        _update_height(node)
        return _rebalance(node)

    def delete(self, priority: int, title: str | None) -> bool:
        """Remove the payload matching both priority and title.

        Returns:
            False if no payload matches.
        """
        self._root, removed = self._delete(self._root, priority, title or "")
        if removed:
            self._count -= 1
        return removed

    def _delete(
        self, node: _Node[P] | None, priority: int, title: str
    ) -> tuple[_Node[P] | None, bool]:
        if node is None:
            return None, False

        compare = _compare(priority, title, node.payload)
        if compare < 0:
            node.left, removed = self._delete(node.left, priority, title)
        elif compare > 0:
            node.right, removed = self._delete(node.right, priority, title)
        else:
            removed = True
            if node.left is None or node.right is None:
                return (node.left if node.left is not None else node.right), True

            node.right, node.payload = self._detach_min(node.right)

        if not removed:
            return node, False

        _update_height(node)
        return _rebalance(node), True

    def _detach_min(self, node: _Node[P]) -> tuple[_Node[P] | None, P]:
        """Unlink the in-order successor (leftmost node) of a subtree.

        Returns the rebalanced subtree and the detached payload.
        """
        if node.left is None:
            return node.right, node.payload

        node.left, payload = self._detach_min(node.left)
        _update_height(node)
        return _rebalance(node), payload

    def get_requests_in_order(self) -> DynamicArray[P]:
        """Payloads in ascending (priority, title) order."""
        result: DynamicArray[P] = DynamicArray()
        self._in_order(self._root, result)
        return result

    def _in_order(self, node: _Node[P] | None, collector: DynamicArray[P]) -> None:
        if node is None:
            return
        self._in_order(node.left, collector)
        collector.add(node.payload)
        self._in_order(node.right, collector)

    def get_high_priority_requests(self, count: int) -> DynamicArray[P]:
        """Up to ``count`` payloads, most urgent first.

        A count of zero or less, or one at least the size of the tree, returns
        every payload.
        """
        buffer = self.get_requests_in_order().to_array()
        buffer.reverse()

        if count <= 0 or count >= len(buffer):
            return DynamicArray(items=buffer)
        return DynamicArray(items=buffer[:count])

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[P]:
        return iter(self.get_requests_in_order())
