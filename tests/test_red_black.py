"""Test the recency ordered red-black tree."""

from datetime import datetime, timedelta

import pytest
from hypothesis import given, strategies

from municipal.structures import RedBlackTree, ServiceRequest
from municipal.structures.exceptions import InvalidArgumentError

from .utils import assert_red_black_invariants

START = datetime(2024, 3, 1, 8, 0)


def test_newest_first(make_request):
    tree = RedBlackTree()
    for hours in [2, 0, 5, 1]:
        tree.insert(
            make_request(f"H{hours}", created_on=START + timedelta(hours=hours))
        )

    assert [p.title for p in tree.get_requests_newest_first()] == [
        "H5",
        "H2",
        "H1",
        "H0",
    ]
    assert len(tree) == 4


def test_equal_timestamps_ordered_by_id(make_request):
    tree = RedBlackTree()
    for request_id in ["sr-3", "SR-1", "sr-2"]:
        tree.insert(make_request(request_id, created_on=START, request_id=request_id))

    assert [p.request_id for p in tree] == ["SR-1", "sr-2", "sr-3"]


def test_chronological_inserts_keep_invariants(make_request):
    tree = RedBlackTree()
    for minute in range(200):
        tree.insert(
            make_request(f"M{minute}", created_on=START + timedelta(minutes=minute))
        )
        assert_red_black_invariants(tree)


def test_level_order_visualisation(make_request):
    tree = RedBlackTree()
    for hours, title in [(3, "Middle"), (4, "Newest"), (1, "Oldest")]:
        tree.insert(make_request(title, created_on=START + timedelta(hours=hours)))

    assert tree.visualise_level_order().to_array() == [
        "Middle [Black]",
        "Newest [Red]",
        "Oldest [Red]",
    ]


def test_three_in_a_row_rotates(make_request):
    tree = RedBlackTree()
    for hours in [1, 2, 3]:
        tree.insert(
            make_request(f"H{hours}", created_on=START + timedelta(hours=hours))
        )

    assert tree.visualise_level_order().to_array() == [
        "H2 [Black]",
        "H3 [Red]",
        "H1 [Red]",
    ]


def test_empty_tree():
    tree = RedBlackTree()
    assert len(tree.visualise_level_order()) == 0
    assert len(tree.get_requests_newest_first()) == 0


def test_insert_none_raises():
    with pytest.raises(InvalidArgumentError):
        RedBlackTree().insert(None)


def test_clear(make_request):
    tree = RedBlackTree()
    tree.insert(make_request("x"))
    tree.clear()
    assert len(tree) == 0
    assert tree._root is None


@given(
    offsets=strategies.lists(
        strategies.integers(min_value=0, max_value=10_000), max_size=80
    )
)
def test_invariants_hold_for_any_arrival_order(offsets):
    tree = RedBlackTree()
    for number, offset in enumerate(offsets):
        tree.insert(
            ServiceRequest(
                request_id=f"SR-{number:03d}",
                title=f"T{number}",
                created_on=START + timedelta(seconds=offset),
            )
        )
        assert_red_black_invariants(tree)

    stamps = [p.created_on for p in tree.get_requests_newest_first()]
    assert stamps == sorted(stamps, reverse=True)
    assert len(tree) == len(offsets)
