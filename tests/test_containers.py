import pytest

from algotoolkit.containers import Queue, Stack


def test_stack_lifo_order():
    stack = Stack(10)
    for i in range(5):
        stack.push(float(i))
    popped = []
    while len(stack):
        assert stack.top() == float(4 - len(popped))
        popped.append(stack.pop())
    assert popped == [float(i) for i in reversed(range(5))]


def test_stack_full_and_overflow():
    stack = Stack(2)
    stack.push(1)
    assert not stack.is_full()
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_stack_empty_errors():
    stack = Stack(3)
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_stack_zero_capacity_is_full():
    stack = Stack(0)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(1)


def test_stack_reuse_after_popping():
    stack = Stack(3)
    for value in (1, 2, 3):
        stack.push(value)
    while len(stack):
        stack.pop()
    for value in (4, 5, 6):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [6, 5, 4]


def test_queue_fifo_with_wraparound():
    queue = Queue(5)
    for _ in range(3):
        for i in range(3):
            queue.enqueue(i)
        out = []
        for _ in range(3):
            out.append(queue.front())
            queue.dequeue()
        assert out == [0, 1, 2]
    assert len(queue) == 0


def test_queue_dequeue_returns_front():
    queue = Queue(3)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    assert queue.front() == "b"
    assert len(queue) == 1


def test_queue_full_and_overflow():
    queue = Queue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(OverflowError):
        queue.enqueue(3)


def test_queue_empty_errors():
    queue = Queue(1)
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_queue_requires_positive_capacity():
    with pytest.raises(ValueError):
        Queue(0)