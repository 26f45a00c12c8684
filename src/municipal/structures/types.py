from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Annotated, Any, Protocol, TypeAlias, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

Comparator: TypeAlias = Annotated[
    Callable[[Any, Any], int],
    "Three-way comparison: negative, zero or positive like C's strcmp.",
]


class Titled(Protocol):
    """Payload ordered alphabetically by the binary search tree."""

    title: str


class Prioritized(Protocol):
    """Payload ordered by the AVL tree and the heap."""

    title: str
    priority: int


class Identified(Protocol):
    """Payload the heap can locate by identifier."""

    request_id: str
    title: str
    priority: int


class Timestamped(Protocol):
    """Payload ordered by the red-black tree."""

    request_id: str
    title: str
    created_on: datetime


class Categorized(Protocol):
    """Payload shown by the category tree hierarchy."""

    request_id: str
    title: str
    status: str
