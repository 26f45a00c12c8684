"""Test the ring buffer queue and the array stack."""

import pytest

from municipal.structures import ArrayStack, RingBufferQueue
from municipal.structures.exceptions import EmptyCollectionError, InvalidArgumentError

# --------------------------------------------------------------------------------------
# RingBufferQueue
# --------------------------------------------------------------------------------------


def test_queue_is_fifo():
    queue = RingBufferQueue()
    for value in "abc":
        queue.enqueue(value)

    assert queue.peek() == "a"
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_queue_grows_across_the_wrap_point():
    queue = RingBufferQueue(capacity=4)
    for value in range(4):
        queue.enqueue(value)
    queue.dequeue()
    queue.dequeue()
    for value in range(4, 8):
        queue.enqueue(value)

    assert queue.to_array() == [2, 3, 4, 5, 6, 7]
    assert list(queue) == [2, 3, 4, 5, 6, 7]
    assert 5 in queue
    assert not queue.contains(0)


@pytest.mark.parametrize("operation", ["dequeue", "peek"])
def test_empty_queue_raises(operation):
    queue = RingBufferQueue()
    with pytest.raises(EmptyCollectionError):
        getattr(queue, operation)()


def test_queue_clear():
    queue = RingBufferQueue(items=[1, 2, 3])
    queue.clear()
    assert len(queue) == 0
    queue.enqueue(4)
    assert queue.dequeue() == 4


def test_queue_negative_capacity():
    with pytest.raises(InvalidArgumentError):
        RingBufferQueue(capacity=-1)


# --------------------------------------------------------------------------------------
# ArrayStack
# --------------------------------------------------------------------------------------


def test_stack_is_lifo():
    stack = ArrayStack(capacity=1)
    for value in range(5):
        stack.push(value)

    assert stack.peek() == 4
    assert stack.to_array() == [4, 3, 2, 1, 0]
    assert list(stack) == [4, 3, 2, 1, 0]
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]


@pytest.mark.parametrize("operation", ["pop", "peek"])
def test_empty_stack_raises(operation):
    stack = ArrayStack()
    with pytest.raises(EmptyCollectionError):
        getattr(stack, operation)()


def test_stack_any():
    stack = ArrayStack(items=[1, 3, 5])
    assert stack.any(lambda value: value > 4)
    assert not stack.any(lambda value: value % 2 == 0)

    with pytest.raises(InvalidArgumentError):
        stack.any(None)


def test_stack_clear():
    stack = ArrayStack(items="xyz")
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(EmptyCollectionError):
        stack.pop()
