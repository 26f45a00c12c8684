"""Test the ServiceRequest record."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from municipal.structures import ServiceRequest


def test_defaults():
    request = ServiceRequest(title="Broken streetlight")

    assert request.status == "Submitted"
    assert request.priority == 0
    assert request.description is None
    assert isinstance(request.created_on, datetime)


def test_title_is_stripped():
    assert ServiceRequest(title="  Pothole  ").title == "Pothole"


@pytest.mark.parametrize("title", ["", "   "])
def test_blank_title_rejected(title):
    with pytest.raises(ValidationError, match="non-empty title"):
        ServiceRequest(title=title)


def test_assignment_is_validated():
    request = ServiceRequest(title="Leak", priority=2)
    request.priority = 7
    assert request.priority == 7

    with pytest.raises(ValidationError):
        request.priority = "urgent"
