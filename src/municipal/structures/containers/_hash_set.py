"""
Open addressed hash set with linear probing.

Slots live in a flat list. A value hashes to a home bucket and probing walks
forward one slot at a time, wrapping around, until it meets the value or an
empty slot. Removal leaves a tombstone behind so that probe sequences passing
through the removed slot still reach values stored further along.

The table is rehashed whenever an insert would push the share of used slots
(live values plus tombstones) above the load factor threshold. Rehashing drops
the tombstones, and the table only grows to ``2 * capacity + 1`` slots when the
live values alone would still exceed the threshold.

The set is single writer: adding or removing values while an iterator over it
is alive is a precondition violation, and a rehash leaves the iterator walking
the old table. Iterate a ``to_array`` snapshot when the set must change.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Final, Generic

from .._definitions import HASHSET_DEFAULT_CAPACITY, HASHSET_LOAD_FACTOR, SlotState
from .._logging import null_logger
from ..types import T

logger: Final = null_logger(__name__)


@dataclass(slots=True)
class _Slot:
    value: Any = None
    hash_code: int = 0
    state: SlotState = SlotState.empty


def _new_table(capacity: int) -> list[_Slot]:
    return [_Slot() for _ in range(capacity)]


class OpenAddressHashSet(Generic[T]):
    """Set of unique values with average O(1) add, contains and remove."""

    __slots__ = ("_slots", "_count", "_tombstones")

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._slots = _new_table(HASHSET_DEFAULT_CAPACITY)
        self._count = 0
        self._tombstones = 0
        if items is not None:
            for item in items:
                self.add(item)

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def add(self, item: T) -> bool:
        """Insert a value. Returns False, leaving the set untouched, if present."""
        hash_code = hash(item)
        if self._find(item, hash_code) >= 0:
            return False

        if self._needs_resize():
            self._resize()

        self._insert(item, hash_code)
        return True

    def contains(self, item: T) -> bool:
        return self._find(item, hash(item)) >= 0

    def remove(self, item: T) -> bool:
        """Remove a value, leaving a tombstone. Returns False if absent."""
        index = self._find(item, hash(item))
        if index < 0:
            return False

        slot = self._slots[index]
        slot.value = None
        slot.state = SlotState.deleted
        self._count -= 1
        self._tombstones += 1
        return True

    def clear(self) -> None:
        """Remove every value and shrink back to the default capacity."""
        self._slots = _new_table(HASHSET_DEFAULT_CAPACITY)
        self._count = 0
        self._tombstones = 0

    def to_array(self) -> list[T]:
        return list(self)

    def _find(self, item: T, hash_code: int) -> int:
        size = len(self._slots)
        home = hash_code % size
        for step in range(size):
            index = (home + step) % size
            slot = self._slots[index]
            if slot.state is SlotState.empty:
                return -1
            if (
                slot.state is SlotState.occupied
                and slot.hash_code == hash_code
                and slot.value == item
            ):
                return index
        return -1

    def _insert(self, item: T, hash_code: int) -> None:
        """Place a value known to be absent, reusing the first tombstone seen."""
        size = len(self._slots)
        home = hash_code % size
        for step in range(size):
            slot = self._slots[(home + step) % size]
            if slot.state is not SlotState.occupied:
                if slot.state is SlotState.deleted:
                    self._tombstones -= 1
                slot.value = item
                slot.hash_code = hash_code
                slot.state = SlotState.occupied
                self._count += 1
                return
        raise RuntimeError("Hash set has no free slot, load factor guard failed")

    def _needs_resize(self) -> bool:
        used = self._count + self._tombstones
        return (used + 1) / len(self._slots) > HASHSET_LOAD_FACTOR

    def _resize(self) -> None:
        """Rehash without tombstones, growing only when live values need room."""
        old_slots = self._slots
        if (self._count + 1) / len(old_slots) <= HASHSET_LOAD_FACTOR:
            new_capacity = len(old_slots)
        else:
            new_capacity = len(old_slots) * 2 + 1
        logger.debug(
            "Rehashing set of %d values from %d to %d slots",
            self._count,
            len(old_slots),
            new_capacity,
        )

        self._slots = _new_table(new_capacity)
        self._count = 0
        self._tombstones = 0
        for slot in old_slots:
            if slot.state is SlotState.occupied:
                self._insert(slot.value, slot.hash_code)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        for slot in self._slots:
            if slot.state is SlotState.occupied:
                yield slot.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_array()!r})"
