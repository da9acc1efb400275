"""Singly and doubly linked lists with cycle detection and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    value: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


@dataclass(eq=False, repr=False)
class _DoubleNode:
    value: Any
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


class DoublyLinkedList:
    """A linked list with links in both directions and O(1) pushes at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the beginning."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Return the head of a new singly linked list holding ``values`` in order."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a singly linked list; raise ValueError if it loops."""
    if has_cycle(head):
        raise ValueError("linked list contains a cycle")
    values: list[Any] = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` links from ``head`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous