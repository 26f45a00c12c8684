from __future__ import annotations


class DuplicateKeyError(KeyError):
    """Raised when adding a key that is already present in an associative array."""


class KeyNotFoundError(KeyError):
    """Raised when reading a key that is not present."""


class EmptyCollectionError(IndexError):
    """Raised when popping, dequeuing or peeking an empty queue or stack."""


class IndexOutOfRangeError(IndexError):
    """Raised on indexed access outside [0, length)."""


class InvalidArgumentError(ValueError):
    """Raised for missing required arguments, negative capacities,
    non-positive edge weights and blank labels."""


class CollectionModifiedError(RuntimeError):
    """Raised when a collection is mutated while it is being iterated."""
