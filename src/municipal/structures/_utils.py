"""Module for private utilities/helpers shared by the structures."""

from __future__ import annotations

from typing import Any, Final

from ._logging import null_logger
from .exceptions import InvalidArgumentError

logger: Final = null_logger(__name__)


def validate_capacity(capacity: int) -> int:
    """Return a validated initial capacity.

    Raises:
        InvalidArgumentError: If the capacity is not an integer or is negative.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(
            f"Capacity must be an integer, got {type(capacity).__name__}"
        )
    if capacity < 0:
        raise InvalidArgumentError(f"Capacity cannot be negative, got {capacity}")
    return capacity


def require(value: Any, name: str) -> Any:
    """Raise InvalidArgumentError if a required argument is None."""
    if value is None:
        raise InvalidArgumentError(f"'{name}' is required and cannot be None")
    return value


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def normalize_label(value: str) -> str:
    """Graph and category key for a label: trimmed and case folded."""
    return value.strip().casefold()


def natural_compare(first: Any, second: Any) -> int:
    """Three-way comparison using the natural ordering of the values."""
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def compare_text(first: str, second: str) -> int:
    """Case-insensitive three-way comparison of two strings."""
    return natural_compare(first.casefold(), second.casefold())
