"""A bounded last-in first-out stack."""

from __future__ import annotations

__all__ = ["MAX_STACK", "StackFullError", "Stack"]

MAX_STACK = 100


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class Stack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_STACK) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, value: int) -> None:
        """Put value on top."""
        if self.is_full():
            raise StackFullError("Stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("Stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """The top value, left in place."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)