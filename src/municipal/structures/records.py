"""
The service request record stored by the trees and the heap.

Only its interface matters to the structures: the binary search tree orders by
``title``, the AVL tree and the heap by ``priority`` then ``title``, the
red-black tree by ``created_on`` then ``request_id``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._definitions import DEFAULT_REQUEST_STATUS


class ServiceRequest(BaseModel):
    """A single municipal service request."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    request_id: str = Field(default="")
    """Ticket number from the municipality system."""

    title: str
    """Display name; the alphabetic key of the binary search tree."""

    description: str | None = Field(default=None)
    department: str = Field(default="")
    sub_category: str = Field(default="")
    status: str = Field(default=DEFAULT_REQUEST_STATUS)

    created_on: datetime = Field(default_factory=datetime.now)
    """When the request was logged; the key of the red-black tree."""

    priority: int = Field(default=0)
    """Urgency, higher is more urgent; the key of the AVL tree and the heap."""

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("A service request needs a non-empty title")
        return value
