"""Various definitions and hard settings used in municipal-structures."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

DEFAULT_CAPACITY: Final = 4
"""Initial buffer size for arrays, queues, stacks and associative arrays."""

HEAP_DEFAULT_CAPACITY: Final = 8

HASHSET_DEFAULT_CAPACITY: Final = 7
"""Small prime; growth keeps capacities odd (2n + 1) to reduce clustering."""

HASHSET_LOAD_FACTOR: Final = 0.7

CATEGORY_ROOT_NAME: Final = "ROOT"

PRE_ORDER_SEPARATOR: Final = " → "

ROUTE_SEPARATOR: Final = " ↔ "

DEFAULT_REQUEST_STATUS: Final = "Submitted"


class NodeColor(StrEnum):
    """Colours of red-black tree nodes, as shown in the level-order view."""

    red = "Red"
    black = "Black"


class SlotState(StrEnum):
    """Lifecycle of a slot in the open addressed hash set."""

    empty = "empty"
    occupied = "occupied"
    deleted = "deleted"
