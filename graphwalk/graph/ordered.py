"""FIFO and LIFO containers used by the traversals.

Both containers signal emptiness by returning None from their read and
remove operations instead of raising.
"""

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """First-in, first-out container.

    Example:
        >>> queue = Queue[int]()
        >>> queue.add(1)
        >>> queue.add(2)
        >>> queue.remove()
        1
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def add(self, item: T) -> None:
        """Append an item to the back of the queue."""
        self._items.append(item)

    def remove(self) -> T | None:
        """Remove and return the front item, or None if the queue is empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> T | None:
        """Return the front item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[0]

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack(Generic[T]):
    """Last-in, first-out container. The back of the sequence is the top."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        """Push an item onto the top of the stack."""
        self._items.append(item)

    def pop(self) -> T | None:
        """Remove and return the top item, or None if the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    @property
    def top(self) -> T | None:
        """The top item, or None if the stack is empty."""
        if not self._items:
            return None
        return self._items[-1]

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"
