"""Unit tests for the Queue and Stack containers."""

from graphwalk.graph.ordered import Queue, Stack


class TestQueue:
    """Test FIFO behaviour."""

    def test_empty_queue(self):
        """Test that an empty queue signals emptiness with None."""
        queue = Queue[int]()

        assert queue.is_empty
        assert queue.count == 0
        assert len(queue) == 0
        assert queue.remove() is None
        assert queue.peek() is None

    def test_fifo_order(self):
        """Test that items come out in insertion order."""
        queue = Queue[int]()
        for item in (3, 1, 2):
            queue.add(item)

        assert [queue.remove(), queue.remove(), queue.remove()] == [3, 1, 2]
        assert queue.is_empty

    def test_peek_does_not_remove(self):
        """Test that peek reads the front item only."""
        queue = Queue[str]()
        queue.add("a")
        queue.add("b")

        assert queue.peek() == "a"
        assert queue.count == 2

    def test_remove_after_drain(self):
        """Test that removing past the end keeps returning None."""
        queue = Queue[int]()
        queue.add(1)
        queue.remove()

        assert queue.remove() is None
        assert not queue

    def test_repr(self):
        """Test the debug representation."""
        queue = Queue[int]()
        queue.add(1)

        assert repr(queue) == "Queue([1])"


class TestStack:
    """Test LIFO behaviour."""

    def test_empty_stack(self):
        """Test that an empty stack signals emptiness with None."""
        stack = Stack[int]()

        assert stack.is_empty
        assert stack.count == 0
        assert stack.pop() is None
        assert stack.top is None

    def test_lifo_order(self):
        """Test that the last pushed item is popped first."""
        stack = Stack[int]()
        for item in (3, 1, 2):
            stack.push(item)

        assert [stack.pop(), stack.pop(), stack.pop()] == [2, 1, 3]
        assert stack.is_empty

    def test_top_does_not_remove(self):
        """Test that top reads without popping."""
        stack = Stack[int]()
        stack.push(1)
        stack.push(2)

        assert stack.top == 2
        assert len(stack) == 2
        assert stack

    def test_zero_is_a_real_item(self):
        """Test that a falsy item is distinguishable from emptiness."""
        stack = Stack[int]()
        stack.push(0)

        assert stack.top == 0
        assert stack.pop() == 0
        assert stack.pop() is None
