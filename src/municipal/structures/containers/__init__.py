"""Foundational containers: arrays, sets, queues, stacks and key/value stores."""

from ._associative import AssociativeArray, SortedAssociativeArray
from ._dynamic_array import DynamicArray
from ._hash_set import OpenAddressHashSet
from ._queue import RingBufferQueue
from ._stack import ArrayStack

__all__ = [
    "ArrayStack",
    "AssociativeArray",
    "DynamicArray",
    "OpenAddressHashSet",
    "RingBufferQueue",
    "SortedAssociativeArray",
]
