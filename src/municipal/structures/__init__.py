"""Top-level package for municipal-structures"""

from municipal.structures.containers import (
    ArrayStack,
    AssociativeArray,
    DynamicArray,
    OpenAddressHashSet,
    RingBufferQueue,
    SortedAssociativeArray,
)
from municipal.structures.graph import Graph, SpanningEdge
from municipal.structures.heap import BinaryHeap
from municipal.structures.records import ServiceRequest
from municipal.structures.trees import (
    AVLTree,
    BinarySearchTree,
    CategoryTree,
    RedBlackTree,
)

try:
    from .version import version

    __version__ = version
except ImportError:
    __version__ = "0.0.0"

__all__ = [
    "ArrayStack",
    "AssociativeArray",
    "AVLTree",
    "BinaryHeap",
    "BinarySearchTree",
    "CategoryTree",
    "DynamicArray",
    "Graph",
    "OpenAddressHashSet",
    "RedBlackTree",
    "RingBufferQueue",
    "ServiceRequest",
    "SortedAssociativeArray",
    "SpanningEdge",
]
