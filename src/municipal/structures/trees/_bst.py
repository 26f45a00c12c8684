"""
Unbalanced binary search tree of payloads keyed by a case-insensitive title.

Inserting a payload whose title is already present replaces the stored payload
instead of adding a second node. Nothing keeps the tree balanced, so every walk
is written with an explicit stack rather than recursion: a chain of sorted
inserts degrades to a linked list whose depth equals its size.

The tree is single writer. Iteration walks a snapshot taken by the in-order
traversal, so inserts and deletes made while iterating are not seen by that
iterator. Changing the title of a stored payload breaks the ordering.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final, Generic, TypeVar

from .._definitions import PRE_ORDER_SEPARATOR
from .._logging import null_logger
from .._utils import compare_text, is_blank, require
from ..containers import ArrayStack, DynamicArray
from ..types import Titled

logger: Final = null_logger(__name__)

P = TypeVar("P", bound=Titled)


class _Node(Generic[P]):
    __slots__ = ("payload", "left", "right")

    def __init__(self, payload: P) -> None:
        self.payload = payload
        self.left: _Node[P] | None = None
        self.right: _Node[P] | None = None


class BinarySearchTree(Generic[P]):
    """Alphabetic index of payloads by title."""

    __slots__ = ("_root", "_count")

    def __init__(self) -> None:
        self._root: _Node[P] | None = None
        self._count = 0

    def insert(self, payload: P) -> None:
        """Insert a payload, overwriting any payload with an equal title."""
        require(payload, "payload")

        if self._root is None:
            self._root = _Node(payload)
            self._count = 1
            return

        current = self._root
        while True:
            compare = compare_text(payload.title, current.payload.title)
            if compare == 0:
                logger.debug("Replacing payload stored under %r", payload.title)
                current.payload = payload
                return

            if compare < 0:
                if current.left is None:
                    current.left = _Node(payload)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = _Node(payload)
                    break
                current = current.right

        self._count += 1

    def search(self, title: str | None) -> P | None:
        """Return the payload with this title, or None."""
        if is_blank(title):
            return None
        title = title.strip()  # type: ignore[union-attr]

        current = self._root
        while current is not None:
            compare = compare_text(title, current.payload.title)
            if compare == 0:
                return current.payload
            current = current.left if compare < 0 else current.right
        return None

    def delete(self, title: str | None) -> bool:
        """Remove the payload with this title. Returns False if there is none.

        A node with two children is replaced by its in-order successor, the
        leftmost node of its right subtree.
        """
        if is_blank(title):
            return False
        title = title.strip()  # type: ignore[union-attr]

        parent: _Node[P] | None = None
        node = self._root
        while node is not None:
            compare = compare_text(title, node.payload.title)
            if compare == 0:
                break
            parent = node
            node = node.left if compare < 0 else node.right

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement: _Node[P] | None = successor
        else:
            replacement = node.left if node.left is not None else node.right

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        self._count -= 1
        return True

    def in_order_traversal(self) -> DynamicArray[P]:
        """Payloads in ascending title order."""
        result: DynamicArray[P] = DynamicArray()
        stack: ArrayStack[_Node[P]] = ArrayStack()
        current = self._root

        while current is not None or len(stack) > 0:
            while current is not None:
                stack.push(current)
                current = current.left
            current = stack.pop()
            result.add(current.payload)
            current = current.right

        return result

    def pre_order_traversal(self) -> DynamicArray[P]:
        """Payloads in branch order: node, left subtree, right subtree."""
        result: DynamicArray[P] = DynamicArray()
        if self._root is None:
            return result

        stack: ArrayStack[_Node[P]] = ArrayStack()
        stack.push(self._root)
        while len(stack) > 0:
            node = stack.pop()
            result.add(node.payload)
            if node.right is not None:
                stack.push(node.right)
            if node.left is not None:
                stack.push(node.left)

        return result

    def pre_order_visualisation(self) -> str:
        return PRE_ORDER_SEPARATOR.join(
            payload.title for payload in self.pre_order_traversal()
        )

    def clear(self) -> None:
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[P]:
        return iter(self.in_order_traversal())
