import pytest

from linkedkit.linkedlist import ListError
from linkedkit.stack import Stack


def test_push_pop_is_lifo():
    stack = Stack()
    for item in range(1, 11):
        stack.push(item)
    assert len(stack) == 10
    assert [stack.pop() for _ in range(3)] == [10, 9, 8]
    assert len(stack) == 7


def test_peek_does_not_remove():
    stack = Stack()
    stack.push(320)
    stack.push(765)
    assert stack.peek() == 765
    assert len(stack) == 2


def test_peek_empty_is_none():
    assert Stack().peek() is None


def test_pop_empty_raises():
    with pytest.raises(ListError):
        Stack().pop()


def test_iteration_from_top():
    stack = Stack()
    for item in "abc":
        stack.push(item)
    assert list(stack) == ["c", "b", "a"]


def test_destroy_uses_callback():
    seen = []
    stack = Stack(seen.append)
    stack.push(1)
    stack.push(2)
    stack.destroy()
    assert seen == [2, 1]
    assert stack.peek() is None