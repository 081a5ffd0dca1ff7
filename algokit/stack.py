"""A bounded LIFO stack."""

from __future__ import annotations

from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading the top of an empty stack."""


class Stack:
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> bool:
        """Push ``value``; return False without pushing when the stack is full."""
        if len(self._items) == self._capacity:
            return False
        self._items.append(value)
        return True

    def pop(self) -> None:
        """Drop the top element; does nothing on an empty stack."""
        if self._items:
            self._items.pop()

    def top(self) -> Any:
        """Return the top element."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        """Return the element ``index`` places below the top."""
        if not 0 <= index < len(self._items):
            raise IndexError("index out of bound")
        return self._items[-1 - index]