"""
Key/value stores built on two parallel DynamicArrays.

``AssociativeArray`` keeps keys in insertion order and finds them with a linear
scan, which is only sensible for small key sets. ``SortedAssociativeArray``
keeps keys ascending according to a three-way comparator and finds them by
binary search; inserting still costs O(n) for shifting the trailing entries.

Both stores are single writer. Adding or removing keys while iterating over
one goes through the underlying DynamicArray, whose iterator raises
``CollectionModifiedError``; assigning to an existing key is allowed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Final, Generic

from .._definitions import DEFAULT_CAPACITY
from .._logging import null_logger
from .._utils import natural_compare
from ..exceptions import DuplicateKeyError, KeyNotFoundError
from ..types import Comparator, K, V
from ._dynamic_array import DynamicArray

logger: Final = null_logger(__name__)


class _KeyValueStore(ABC, Generic[K, V]):
    """Shared behaviour; subclasses decide how keys are located and placed."""

    __slots__ = ("_keys", "_values")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._keys: DynamicArray[K] = DynamicArray(capacity)
        self._values: DynamicArray[V] = DynamicArray(capacity)

    @abstractmethod
    def _index_of(self, key: K) -> int:
        """Position of ``key`` in the parallel arrays, or -1 when absent."""
        raise NotImplementedError

    @abstractmethod
    def _insert(self, key: K, value: V) -> None:
        """Store a key known to be absent together with its value."""
        raise NotImplementedError

    def add(self, key: K, value: V) -> None:
        """Add a new entry.

        Raises:
            DuplicateKeyError: If the key is already present.
        """
        if self._index_of(key) >= 0:
            raise DuplicateKeyError(f"The key {key!r} already exists")
        self._insert(key, value)

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key``, or ``default`` when it is absent."""
        index = self._index_of(key)
        return self._values[index] if index >= 0 else default

    def contains_key(self, key: K) -> bool:
        return self._index_of(key) >= 0

    def remove(self, key: K) -> bool:
        """Remove an entry. Returns False if the key is absent."""
        index = self._index_of(key)
        if index < 0:
            return False
        self._keys.remove_at(index)
        self._values.remove_at(index)
        return True

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()

    def keys(self) -> list[K]:
        return self._keys.to_array()

    def values(self) -> list[V]:
        return self._values.to_array()

    def items(self) -> list[tuple[K, V]]:
        return list(zip(self._keys, self._values))

    def __getitem__(self, key: K) -> V:
        index = self._index_of(key)
        if index < 0:
            raise KeyNotFoundError(f"The key {key!r} does not exist")
        return self._values[index]

    def __setitem__(self, key: K, value: V) -> None:
        index = self._index_of(key)
        if index >= 0:
            self._values[index] = value
        else:
            self._insert(key, value)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class AssociativeArray(_KeyValueStore[K, V]):
    """Unordered key/value store; every operation is a linear key scan."""

    __slots__ = ()

    def _index_of(self, key: K) -> int:
        for index, existing in enumerate(self._keys):
            if existing == key:
                return index
        return -1

    def _insert(self, key: K, value: V) -> None:
        self._keys.add(key)
        self._values.add(value)


class SortedAssociativeArray(_KeyValueStore[K, V]):
    """Key/value store kept in ascending key order.

    Args:
        comparator: Three-way comparison of two keys. Defaults to the natural
            ordering of the keys. Keys comparing equal are the same key.
        capacity: Initial capacity of the parallel arrays.
    """

    __slots__ = ("_comparator",)

    def __init__(
        self, comparator: Comparator | None = None, capacity: int = DEFAULT_CAPACITY
    ) -> None:
        super().__init__(capacity)
        self._comparator: Comparator = comparator or natural_compare

    def _search(self, key: K) -> tuple[int, bool]:
        """Binary search returning (position, found).

        When the key is absent, position is where it would have to be inserted.
        """
        low = 0
        high = len(self._keys) - 1
        while low <= high:
            mid = (low + high) // 2
            comparison = self._comparator(self._keys[mid], key)
            if comparison == 0:
                return mid, True
            if comparison < 0:
                low = mid + 1
            else:
                high = mid - 1
        return low, False

    def _index_of(self, key: K) -> int:
        index, found = self._search(key)
        return index if found else -1

    def _insert(self, key: K, value: V) -> None:
        index, _ = self._search(key)
        self._keys.insert(index, key)
        self._values.insert(index, value)
