"""A LIFO stack bounded only by available memory."""

from __future__ import annotations

from typing import Generic, TypeVar

from .errors import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container.

    Items are added and removed at the top only. `pop` and `peek` raise
    `EmptyStackError` on an empty stack rather than returning a default.

    Example:
        ```py
        stack: Stack[int] = Stack()
        stack.push(1)
        stack.push(2)
        assert stack.pop() == 2
        assert stack.size() == 1
        ```
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Place `item` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack has no items.
        """
        if not self._items:
            raise EmptyStackError
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no items."""
        return not self._items

    def size(self) -> int:
        """Return the number of items on the stack."""
        return len(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._items)})"
