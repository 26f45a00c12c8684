"""
LIFO stack stored in a growable list.

The stack is single writer: pushing, popping or clearing while an iterator over
it is alive is a precondition violation and the iteration result is undefined.
Iterate a ``to_array`` snapshot when the stack must change.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Final, Generic

from .._definitions import DEFAULT_CAPACITY
from .._logging import null_logger
from .._utils import require, validate_capacity
from ..exceptions import EmptyCollectionError
from ..types import T

logger: Final = null_logger(__name__)


class ArrayStack(Generic[T]):
    """Last-in first-out stack; index ``len - 1`` of the buffer is the top."""

    __slots__ = ("_items", "_count")

    def __init__(
        self, capacity: int = DEFAULT_CAPACITY, items: Iterable[T] | None = None
    ) -> None:
        self._items: list[T | None] = [None] * validate_capacity(capacity)
        self._count = 0
        if items is not None:
            for item in items:
                self.push(item)

    def push(self, item: T) -> None:
        self._ensure_capacity(self._count + 1)
        self._items[self._count] = item
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            EmptyCollectionError: If the stack is empty.
        """
        if self._count == 0:
            raise EmptyCollectionError("Cannot pop from an empty stack")

        self._count -= 1
        value = self._items[self._count]
        self._items[self._count] = None
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        if self._count == 0:
            raise EmptyCollectionError("Cannot peek an empty stack")
        return self._items[self._count - 1]  # type: ignore[return-value]

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """True if any element satisfies the predicate."""
        require(predicate, "predicate")
        return any(predicate(item) for item in self)

    def clear(self) -> None:
        for i in range(self._count):
            self._items[i] = None
        self._count = 0

    def to_array(self) -> list[T]:
        """Snapshot of the stack, top first."""
        return list(self)

    def _ensure_capacity(self, target: int) -> None:
        if len(self._items) >= target:
            return

        new_capacity = DEFAULT_CAPACITY if not self._items else len(self._items) * 2
        new_capacity = max(new_capacity, target)
        logger.debug(
            "Growing stack from %d to %d slots", len(self._items), new_capacity
        )
        self._items.extend([None] * (new_capacity - len(self._items)))

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count - 1, -1, -1):
            yield self._items[i]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
