import pytest

from drillbook.containers import (
    BoundedQueue,
    BoundedStack,
    ContainerEmptyError,
    ContainerFullError,
    LinkedList,
)


def test_queue_is_first_in_first_out():
    queue = BoundedQueue()
    for value in (10, 20, 30):
        queue.push(value)
    assert [queue.pop(), queue.pop(), queue.pop()] == [10, 20, 30]


def test_queue_default_capacity_is_five():
    queue = BoundedQueue()
    for value in range(5):
        queue.push(value)
    with pytest.raises(ContainerFullError):
        queue.push(99)
    assert list(queue) == [0, 1, 2, 3, 4]


def test_queue_slots_not_reused_until_reset():
    queue = BoundedQueue(capacity=2)
    queue.push("a")
    queue.push("b")
    assert queue.pop() == "a"
    with pytest.raises(ContainerFullError):
        queue.push("c")
    assert len(queue) == 1


def test_queue_resets_after_pop_on_empty():
    queue = BoundedQueue(capacity=2)
    queue.push(1)
    queue.push(2)
    queue.pop()
    queue.pop()
    with pytest.raises(ContainerEmptyError):
        queue.pop()
    queue.push(3)
    queue.push(4)
    assert list(queue) == [3, 4]


def test_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(capacity=0)


def test_stack_is_last_in_first_out():
    stack = BoundedStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_stack_overflow_and_underflow():
    stack = BoundedStack(capacity=2)
    stack.push(7)
    stack.push(8)
    with pytest.raises(ContainerFullError):
        stack.push(9)
    assert stack.pop() == 8
    stack.push(9)
    assert list(stack) == [7, 9]


def test_empty_stack_pop_raises():
    with pytest.raises(ContainerEmptyError):
        BoundedStack().pop()


def test_linked_list_append_and_prepend_order():
    items = LinkedList()
    items.append(2)
    items.append(3)
    items.prepend(1)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_linked_list_prepend_on_empty_then_append():
    items = LinkedList()
    items.prepend("x")
    items.append("y")
    assert list(items) == ["x", "y"]


def test_linked_list_string_forms():
    items = LinkedList()
    assert str(items) == "Nothing Found"
    items.append(4)
    items.append(5)
    assert str(items) == "4  5"