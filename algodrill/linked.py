"""Singly linked lists: construction, reversal, sorting and merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; ``None`` when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by insertion, relinking its nodes, and return the head."""
    if head is None or head.next is None:
        return head
    sentinel = ListNode(0)
    node: Optional[ListNode] = head
    while node is not None:
        following = node.next
        position = sentinel
        while position.next is not None and position.next.val < node.val:
            position = position.next
        node.next = position.next
        position.next = node
        node = following
    return sentinel.next


def merge_two_lists(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists into one ascending list, relinking nodes."""
    sentinel = ListNode(0)
    tail = sentinel
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return sentinel.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow = head
    fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    second_half = slow.next
    slow.next = None
    return merge_two_lists(sort_list(head), sort_list(second_half))