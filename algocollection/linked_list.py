"""Singly linked lists: building, reversing, cycle detection and palindromes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
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


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of a list in order.

    Raises ValueError if the list loops back on itself.
    """
    if has_cycle(head):
        raise ValueError("the list has a cycle")
    return [node.val for node in _nodes(head)]


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end and return the new head.

    ``n`` counts from 1 and must not exceed the length of the list.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n is larger than the length of the list")
        fast = fast.next
    if fast is None:
        assert head is not None
        new_head = head.next
        head.next = None
        return new_head
    slow = head
    assert slow is not None
    while fast.next is not None:
        fast = fast.next
        assert slow.next is not None
        slow = slow.next
    removed = slow.next
    assert removed is not None
    slow.next = removed.next
    removed.next = None
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    return _meeting_point(head) is not None


def _meeting_point(head: ListNode | None) -> ListNode | None:
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where the cycle begins, or None if there is no cycle."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    slow, fast = meeting, head
    while slow is not fast:
        assert slow is not None and fast is not None
        slow = slow.next
        fast = fast.next
    return slow


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the values of a list read the same in both directions."""
    values = [node.val for node in _nodes(head)]
    return values == values[::-1]