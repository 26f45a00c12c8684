"""
FIFO queue stored in a ring buffer.

The queue is single writer: enqueuing, dequeuing or clearing while an iterator
over it is alive is a precondition violation and the iteration result is
undefined. Iterate a ``to_array`` snapshot when the queue must change.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final, Generic

from .._definitions import DEFAULT_CAPACITY
from .._logging import null_logger
from .._utils import validate_capacity
from ..exceptions import EmptyCollectionError
from ..types import T

logger: Final = null_logger(__name__)


class RingBufferQueue(Generic[T]):
    """First-in first-out queue with O(1) amortized enqueue and dequeue.

    ``head`` points at the oldest element and ``tail`` at the next free slot;
    both wrap modulo the buffer size. When the buffer is full it doubles and
    the ring is unrolled so the oldest element lands at index 0.
    """

    __slots__ = ("_items", "_head", "_tail", "_count")

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, items: Iterable[T] | None = None
    ) -> None:
        self._items: list[T | None] = [None] * validate_capacity(capacity)
        self._head = 0
        self._tail = 0
        self._count = 0
        if items is not None:
            for item in items:
                self.enqueue(item)

    def enqueue(self, item: T) -> None:
        self._ensure_capacity(self._count + 1)
        self._items[self._tail] = item
        self._tail = (self._tail + 1) % len(self._items)
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the oldest element.

        Raises:
            EmptyCollectionError: If the queue is empty.
        """
        if self._count == 0:
            raise EmptyCollectionError("Cannot dequeue from an empty queue")

        value = self._items[self._head]
        self._items[self._head] = None
        self._head = (self._head + 1) % len(self._items)
        self._count -= 1
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        """Return the oldest element without removing it.

        Raises:
            EmptyCollectionError: If the queue is empty.
        """
        if self._count == 0:
            raise EmptyCollectionError("Cannot peek an empty queue")
        return self._items[self._head]  # type: ignore[return-value]

    def contains(self, item: T) -> bool:
        return any(entry == item for entry in self)

    def clear(self) -> None:
        if self._count == 0:
            return
        self._items = [None] * len(self._items)
        self._head = 0
        self._tail = 0
        self._count = 0

    def to_array(self) -> list[T]:
        """Snapshot of the queue, oldest first."""
        return list(self)

    def _ensure_capacity(self, target: int) -> None:
        if len(self._items) >= target:
            return

        new_capacity = DEFAULT_CAPACITY if not self._items else len(self._items) * 2
        new_capacity = max(new_capacity, target)
        logger.debug(
            "Growing queue from %d to %d slots", len(self._items), new_capacity
        )

        unrolled: list[T | None] = self.to_array()  # type: ignore[assignment]
        unrolled.extend([None] * (new_capacity - self._count))
        self._items = unrolled
        self._head = 0
        self._tail = self._count % new_capacity

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        size = len(self._items)
        for offset in range(self._count):
            yield self._items[(self._head + offset) % size]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
