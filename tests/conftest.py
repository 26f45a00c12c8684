"""The conftest.py, providing magical fixtures to tests."""

import logging
from datetime import datetime, timedelta
from itertools import count

import pytest

from municipal.structures import Graph, ServiceRequest

logger = logging.getLogger(__name__)

BASE_TIME = datetime(2024, 1, 15, 9, 0, 0)


@pytest.fixture(name="make_request")
def fixture_make_request():
    """Return a factory for ServiceRequest records with unique ids."""
    numbers = count(1)

    def _make(title, priority=0, created_on=None, request_id=None, **kwargs):
        number = next(numbers)
        return ServiceRequest(
            request_id=request_id or f"SR-{number:04d}",
            title=title,
            priority=priority,
            created_on=created_on or BASE_TIME + timedelta(minutes=number),
            **kwargs,
        )

    return _make


@pytest.fixture(name="fruit_requests")
def fixture_fruit_requests(make_request):
    """Three requests whose titles sort Apple, Cherry, Mango."""
    return [
        make_request("Mango", priority=2),
        make_request("Apple", priority=5),
        make_request("Cherry", priority=1),
    ]


@pytest.fixture(name="triangle_graph")
def fixture_triangle_graph():
    """Routes A-B=4, B-C=3, A-C=10."""
    graph = Graph()
    graph.add_route("A", "B", 4)
    graph.add_route("B", "C", 3)
    graph.add_route("A", "C", 10)
    return graph
