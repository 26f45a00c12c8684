"""
Binary max-heap of payloads ordered by priority.

The heap lives in a flat buffer: the children of slot ``i`` are ``2i + 1`` and
``2i + 2`` and its parent is ``(i - 1) // 2``. Equal priorities are ordered by
case-insensitive title so the top of the heap is deterministic.

The heap is single writer. Iteration walks a ``to_array`` snapshot, so changes
made while iterating are not seen by that iterator. Changing the priority of a
stored payload other than through ``update_priority`` or ``decrease_priority``
breaks the heap order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final, Generic, TypeVar

from ._definitions import HEAP_DEFAULT_CAPACITY
from ._logging import null_logger
from ._utils import compare_text, natural_compare, require
from .types import Identified

logger: Final = null_logger(__name__)

P = TypeVar("P", bound=Identified)


def _parent(index: int) -> int:
    return (index - 1) // 2


def _compare(first: Identified, second: Identified) -> int:
    compare = natural_compare(first.priority, second.priority)
    if compare != 0:
        return compare
    return compare_text(first.title, second.title)


class BinaryHeap(Generic[P]):
    """Priority queue with the most urgent payload on top.

    Args:
        items: Optional payloads bulk loaded with ``build_heap``.
    """

    __slots__ = ("_items", "_count")

    def __init__(self, items: Iterable[P] | None = None) -> None:
        self._items: list[P | None] = [None] * HEAP_DEFAULT_CAPACITY
        self._count = 0
        if items is not None:
            self.build_heap(items)

    def insert(self, payload: P) -> None:
        """Add a payload and sift it up to its place. O(log n)."""
        require(payload, "payload")
        self._ensure_capacity(self._count + 1)
        self._items[self._count] = payload
        self._sift_up(self._count)
        self._count += 1

    def peek(self) -> P | None:
        """The most urgent payload, or None when the heap is empty."""
        return self._items[0] if self._count > 0 else None

    def extract_max(self) -> P | None:
        """Remove and return the most urgent payload, or None when empty."""
        if self._count == 0:
            return None

        top = self._items[0]
        last = self._count - 1
        self._items[0] = self._items[last]
        self._items[last] = None
        self._count -= 1

        if self._count > 0:
            self._sift_down(0)
        return top

    def build_heap(self, items: Iterable[P] | None) -> None:
        """Replace the contents with ``items`` and heapify bottom-up in O(n).

        None leaves the heap empty.
        """
        self.clear()
        if items is None:
            return

        buffer = list(items)
        self._ensure_capacity(len(buffer))
        self._items[: len(buffer)] = buffer
        self._count = len(buffer)

        for index in range(_parent(self._count - 1), -1, -1):
            self._sift_down(index)

    def update_priority(self, request_id: str, priority: int) -> bool:
        """Assign a new priority and restore the heap order.

        Returns:
            False if no payload carries ``request_id``.
        """
        index = self._index_of(request_id)
        if index < 0:
            return False

        payload = self._items[index]
        current = payload.priority  # type: ignore[union-attr]
        payload.priority = priority  # type: ignore[union-attr]

        if priority > current:
            self._sift_up(index)
        elif priority < current:
            self._sift_down(index)
        return True

    def decrease_priority(self, request_id: str, priority: int) -> bool:
        """Lower a payload's priority and sink it.

        Returns:
            False if the payload is missing or ``priority`` would raise it.
        """
        index = self._index_of(request_id)
        if index < 0:
            return False

        payload = self._items[index]
        if priority > payload.priority:  # type: ignore[union-attr]
            return False

        payload.priority = priority  # type: ignore[union-attr]
        self._sift_down(index)
        return True

    def to_array(self) -> list[P]:
        """Snapshot of the payloads in heap order."""
        return self._items[: self._count]  # type: ignore[return-value]

    def clear(self) -> None:
        self._items = [None] * HEAP_DEFAULT_CAPACITY
        self._count = 0

    def _index_of(self, request_id: str | None) -> int:
        if not request_id:
            return -1
        key = request_id.casefold()
        for index, payload in enumerate(self.to_array()):
            if payload.request_id.casefold() == key:
                return index
        return -1

    def _greater(self, first: int, second: int) -> bool:
        items = self._items
        return _compare(items[first], items[second]) > 0  # type: ignore[arg-type]

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = _parent(index)
            if not self._greater(index, parent):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        while True:
            left = 2 * index + 1
            right = left + 1
            largest = index

            if left < self._count and self._greater(left, largest):
                largest = left
            if right < self._count and self._greater(right, largest):
                largest = right
            if largest == index:
                return

            items[index], items[largest] = items[largest], items[index]
            index = largest

    def _ensure_capacity(self, target: int) -> None:
        if len(self._items) >= target:
            return
        new_capacity = max(len(self._items) * 2, target)
        logger.debug(
            "Growing heap from %d to %d slots", len(self._items), new_capacity
        )
        self._items.extend([None] * (new_capacity - len(self._items)))

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[P]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
