"""Singly and multi-level linked lists, and a queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = [
    "ListNode",
    "LinkedList",
    "LinkedQueue",
    "MultiLevelNode",
    "flatten",
    "from_values",
    "to_values",
    "reverse_list",
    "swap_pairs",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class MultiLevelNode:
    """A doubly linked node that may also own a child list."""

    val: int = 0
    next: MultiLevelNode | None = field(default=None, repr=False)
    prev: MultiLevelNode | None = field(default=None, repr=False)
    child: MultiLevelNode | None = field(default=None, repr=False)


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a singly linked chain holding values; None when there are none."""
    sentinel = ListNode()
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def to_values(head: ListNode | MultiLevelNode | None) -> list[int]:
    """Values of the chain starting at head, following ``next`` links."""
    return [node.val for node in _walk(head)]


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = from_values(values)

    def insert_at_begin(self, data: int) -> ListNode:
        """Put data in front of the list and return its node."""
        self.head = ListNode(data, self.head)
        return self.head

    def insert_at_end(self, data: int) -> ListNode:
        """Append data to the list and return its node."""
        node = ListNode(data)
        if self.head is None:
            self.head = node
            return node
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        tail.next = node
        return node

    def insert_after(self, node: ListNode, data: int) -> ListNode:
        """Insert data right after node and return the new node."""
        node.next = ListNode(data, node.next)
        return node.next

    def delete_at_begin(self) -> int:
        """Remove the first element and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        value = self.head.val
        self.head = self.head.next
        return value

    def delete_at_end(self) -> int:
        """Remove the last element and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            value = self.head.val
            self.head = None
            return value
        node = self.head
        while node.next.next is not None:
            node = node.next
        value = node.next.val
        node.next = None
        return value

    def delete(self, key: int) -> bool:
        """Remove the first node holding key; tell whether one was found."""
        prev: ListNode | None = None
        for node in _walk(self.head):
            if node.val == key:
                if prev is None:
                    self.head = node.next
                else:
                    prev.next = node.next
                return True
            prev = node
        return False

    def node_at(self, index: int) -> ListNode:
        """The node at a zero-based position."""
        if index >= 0:
            for position, node in enumerate(_walk(self.head)):
                if position == index:
                    return node
        raise IndexError(f"no node at index {index}")

    def __contains__(self, key: object) -> bool:
        return any(node.val == key for node in _walk(self.head))

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _walk(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self.head))

    def __str__(self) -> str:
        return "[" + "".join(f" {value} " for value in self) + "]"


class LinkedQueue:
    """A first-in first-out queue kept as a chain of nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._front: ListNode | None = None
        self._rear: ListNode | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        """Add value at the rear."""
        node = ListNode(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front is None:
            raise IndexError("Queue is empty!")
        value = self._front.val
        self._front = self._front.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return value

    def front(self) -> int:
        """The value at the front, left in place."""
        if self._front is None:
            raise IndexError("Queue is empty!")
        return self._front.val

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _walk(self._front))

    def __len__(self) -> int:
        return self._size


def flatten(head: MultiLevelNode | None) -> MultiLevelNode | None:
    """Flatten a multi-level list in place, level by level.

    Each child list is appended at the current tail as the walk reaches its
    parent; child links are cleared. Returns head.
    """
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    node: MultiLevelNode | None = head
    while node is not None:
        child = node.child
        if child is not None:
            tail.next = child
            child.prev = tail
            while tail.next is not None:
                tail = tail.next
            node.child = None
        node = node.next
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes in place and return the new head."""
    if head is None or head.next is None:
        return head
    sentinel = ListNode()
    prev = sentinel
    current = head
    while current is not None and current.next is not None:
        first, second = current, current.next
        prev.next = second
        first.next = second.next
        second.next = first
        current = first.next
        prev = first
    return sentinel.next