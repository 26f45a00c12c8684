"""Test the DynamicArray container."""

import pytest
from hypothesis import given, strategies

from municipal.structures import DynamicArray
from municipal.structures.exceptions import (
    CollectionModifiedError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)


def test_add_grows_by_doubling():
    array = DynamicArray(capacity=2)
    for value in range(5):
        array.add(value)

    assert len(array) == 5
    assert array.capacity == 8
    assert array.to_array() == [0, 1, 2, 3, 4]


def test_zero_capacity_defers_allocation():
    array = DynamicArray(capacity=0)
    assert array.capacity == 0

    array.add("a")
    assert array.capacity == 4
    assert array[0] == "a"


@pytest.mark.parametrize("capacity", [-1, 2.5, "4", True])
def test_invalid_capacity(capacity):
    with pytest.raises(InvalidArgumentError):
        DynamicArray(capacity=capacity)


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_index_out_of_range(index):
    array = DynamicArray(items=["a", "b", "c"])

    with pytest.raises(IndexOutOfRangeError):
        array[index]
    with pytest.raises(IndexOutOfRangeError):
        array[index] = "x"
    with pytest.raises(IndexError):
        array.remove_at(index)


def test_insert_shifts_right():
    array = DynamicArray(items=[1, 2, 4])
    array.insert(2, 3)
    array.insert(0, 0)
    array.insert(len(array), 5)

    assert array.to_array() == [0, 1, 2, 3, 4, 5]

    with pytest.raises(IndexOutOfRangeError):
        array.insert(7, 6)


def test_remove_at_shifts_left():
    array = DynamicArray(items="abcd")
    assert array.remove_at(1) == "b"
    assert array.to_array() == ["a", "c", "d"]
    assert len(array) == 3


def test_contains_and_clear_keeps_capacity():
    array = DynamicArray(items=range(10))
    capacity = array.capacity
    assert 7 in array
    assert not array.contains(42)

    array.clear()
    assert len(array) == 0
    assert array.capacity == capacity
    assert 7 not in array


def test_add_range_ignores_none():
    array = DynamicArray()
    array.add_range(None)
    array.add_range([1, 2])
    assert array.to_array() == [1, 2]


def test_to_array_is_a_snapshot():
    array = DynamicArray(items=[1, 2])
    snapshot = array.to_array()
    snapshot.append(3)
    array.add(9)

    assert snapshot == [1, 2, 3]
    assert array.to_array() == [1, 2, 9]


def test_mutation_during_iteration_is_detected():
    array = DynamicArray(items=[1, 2, 3])

    with pytest.raises(CollectionModifiedError):
        for value in array:
            array.add(value)


def test_assignment_during_iteration_is_allowed():
    array = DynamicArray(items=[1, 2, 3])
    for index, value in enumerate(array):
        array[index] = value * 10
    assert array.to_array() == [10, 20, 30]


@given(values=strategies.lists(strategies.integers()))
def test_matches_python_list(values):
    array = DynamicArray(capacity=0)
    for value in values:
        array.add(value)

    assert len(array) == len(values)
    assert list(array) == values
    assert array.capacity >= len(values)
