"""
Red-black tree of payloads ordered newest first.

A newer ``created_on`` compares as smaller, so the leftmost node is the most
recent payload and an in-order walk produces a recency feed. Payloads with the
same timestamp are ordered by case-insensitive ``request_id``. The tree is an
append-only feed: it supports insertion and reads, not deletion.

The tree is single writer. Iteration walks a snapshot of the newest-first
listing, so inserts made while iterating are not seen by that iterator.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final, Generic, TypeVar

from .._definitions import NodeColor
from .._logging import null_logger
from .._utils import compare_text, require
from ..containers import DynamicArray, RingBufferQueue
from ..types import Timestamped

logger: Final = null_logger(__name__)

P = TypeVar("P", bound=Timestamped)


class _Node(Generic[P]):
    __slots__ = ("payload", "left", "right", "parent", "color")

    def __init__(self, payload: P) -> None:
        self.payload = payload
        self.left: _Node[P] | None = None
        self.right: _Node[P] | None = None
        self.parent: _Node[P] | None = None
        self.color = NodeColor.red


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.color is NodeColor.red


def _is_newer(candidate: Timestamped, existing: Timestamped) -> bool:
    if candidate.created_on == existing.created_on:
        return compare_text(candidate.request_id, existing.request_id) < 0
    return candidate.created_on > existing.created_on


class RedBlackTree(Generic[P]):
    """Recency index kept balanced by colour rules."""

    __slots__ = ("_root", "_count")

    def __init__(self) -> None:
        self._root: _Node[P] | None = None
        self._count = 0

    def insert(self, payload: P) -> None:
        """Link a red leaf under its parent, then repair the colour rules."""
        require(payload, "payload")
        node = _Node(payload)
        self._insert_node(node)
        self._fix_insert(node)
        self._count += 1

    def _insert_node(self, node: _Node[P]) -> None:
        parent: _Node[P] | None = None
        current = self._root
        while current is not None:
            parent = current
            current = (
                current.left
                if _is_newer(node.payload, current.payload)
                else current.right
            )

        node.parent = parent
        if parent is None:
            self._root = node
        elif _is_newer(node.payload, parent.payload):
            parent.left = node
        else:
            parent.right = node

    def _fix_insert(self, node: _Node[P]) -> None:
        while node is not self._root and _is_red(node.parent):
            # a red parent is never the root, so the grandparent exists
            parent = node.parent
            assert parent is not None and parent.parent is not None
            grandparent = parent.parent

            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    parent.color = NodeColor.black
                    uncle.color = NodeColor.black  # type: ignore[union-attr]
                    grandparent.color = NodeColor.red
                    node = grandparent
                    continue

                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                node.parent.color = NodeColor.black  # type: ignore[union-attr]
                grandparent.color = NodeColor.red
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    parent.color = NodeColor.black
                    uncle.color = NodeColor.black  # type: ignore[union-attr]
                    grandparent.color = NodeColor.red
                    node = grandparent
                    continue

                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                node.parent.color = NodeColor.black  # type: ignore[union-attr]
                grandparent.color = NodeColor.red
                self._rotate_left(grandparent)

        assert self._root is not None
        self._root.color = NodeColor.black

    def _replace_child(self, node: _Node[P], replacement: _Node[P]) -> None:
        """Hang ``replacement`` where ``node`` hung below its parent."""
        replacement.parent = node.parent
        if node.parent is None:
            self._root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

    def _rotate_left(self, node: _Node[P]) -> None:
        pivot = node.right
        assert pivot is not None
        logger.debug("Rotating left at %s", node.payload.request_id)

        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node[P]) -> None:
        pivot = node.left
        assert pivot is not None
        logger.debug("Rotating right at %s", node.payload.request_id)

        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def get_requests_newest_first(self) -> DynamicArray[P]:
        result: DynamicArray[P] = DynamicArray()
        self._collect_newest_first(self._root, result)
        return result

    def _collect_newest_first(
        self, node: _Node[P] | None, collector: DynamicArray[P]
    ) -> None:
        # newer payloads hang to the left
        if node is None:
            return
        self._collect_newest_first(node.left, collector)
        collector.add(node.payload)
        self._collect_newest_first(node.right, collector)

    def visualise_level_order(self) -> DynamicArray[str]:
        """Breadth-first listing of ``"<title> [Red]"`` / ``"<title> [Black]"``."""
        output: DynamicArray[str] = DynamicArray()
        if self._root is None:
            return output

        queue: RingBufferQueue[_Node[P]] = RingBufferQueue()
        queue.enqueue(self._root)
        while len(queue) > 0:
            current = queue.dequeue()
            output.add(f"{current.payload.title} [{current.color}]")
            if current.left is not None:
                queue.enqueue(current.left)
            if current.right is not None:
                queue.enqueue(current.right)

        return output

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[P]:
        return iter(self.get_requests_newest_first())
