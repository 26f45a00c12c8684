"""
Growable array backed by a pre-sized Python list.

The buffer holds ``capacity`` slots of which the first ``len(array)`` are valid.
When an append finds the buffer full the capacity doubles, keeping appends
amortized O(1). The structure is single writer: mutating the array while an
iterator over it is alive is a precondition violation and the iterator raises
``CollectionModifiedError`` on its next step. Assigning to an existing index
does not change the length and is allowed during iteration.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final, Generic

from .._definitions import DEFAULT_CAPACITY
from .._logging import null_logger
from .._utils import validate_capacity
from ..exceptions import CollectionModifiedError, IndexOutOfRangeError
from ..types import T

logger: Final = null_logger(__name__)


class DynamicArray(Generic[T]):
    """Indexable sequence that grows by doubling its backing buffer.

    Args:
        capacity: Initial number of slots. Zero defers allocation until the
            first append.
        items: Optional values appended in order after construction.
    """

    __slots__ = ("_items", "_count", "_version")

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, items: Iterable[T] | None = None
    ) -> None:
        self._items: list[T | None] = [None] * validate_capacity(capacity)
        self._count = 0
        self._version = 0
        if items is not None:
            self.add_range(items)

    @property
    def capacity(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        """Append an item, doubling the buffer first when it is full."""
        self._ensure_capacity(self._count + 1)
        self._items[self._count] = item
        self._count += 1
        self._version += 1

    def add_range(self, items: Iterable[T] | None) -> None:
        """Append every item of an iterable. None is accepted and ignored."""
        if items is None:
            return
        for item in items:
            self.add(item)

    def insert(self, index: int, item: T) -> None:
        """Insert an item before ``index``, shifting trailing elements right.

        ``index == len(array)`` appends.
        """
        if not 0 <= index <= self._count:
            raise IndexOutOfRangeError(
                f"Insert position {index} is out of range for length {self._count}"
            )
        self._ensure_capacity(self._count + 1)
        for i in range(self._count, index, -1):
            self._items[i] = self._items[i - 1]
        self._items[index] = item
        self._count += 1
        self._version += 1

    def remove_at(self, index: int) -> T:
        """Remove and return the item at ``index``, shifting trailing elements left."""
        self._check_index(index)
        value = self._items[index]
        for i in range(index, self._count - 1):
            self._items[i] = self._items[i + 1]
        self._count -= 1
        self._items[self._count] = None
        self._version += 1
        return value  # type: ignore[return-value]

    def contains(self, item: T) -> bool:
        """Linear scan using value equality."""
        return any(self._items[i] == item for i in range(self._count))

    def clear(self) -> None:
        """Drop all references but keep the allocated buffer for reuse."""
        if self._count == 0:
            return
        for i in range(self._count):
            self._items[i] = None
        self._count = 0
        self._version += 1

    def to_array(self) -> list[T]:
        """Return a snapshot copy of the valid elements."""
        return self._items[: self._count]  # type: ignore[return-value]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexOutOfRangeError(
                f"Index {index} is out of range for an array of length {self._count}"
            )

    def _ensure_capacity(self, target: int) -> None:
        if len(self._items) >= target:
            return

        new_capacity = DEFAULT_CAPACITY if not self._items else len(self._items) * 2
        new_capacity = max(new_capacity, target)

        logger.debug(
            "Growing array from %d to %d slots", len(self._items), new_capacity
        )
        self._items.extend([None] * (new_capacity - len(self._items)))

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        version = self._version
        for i in range(self._count):
            if version != self._version:
                raise CollectionModifiedError(
                    "DynamicArray was modified during iteration"
                )
            yield self._items[i]  # type: ignore[misc]
        if version != self._version:
            raise CollectionModifiedError("DynamicArray was modified during iteration")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
