"""Last-in-first-out container.

Not safe for concurrent access; callers share a Stack from one thread only.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from storekit.domain.exceptions import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return len(self._items)
