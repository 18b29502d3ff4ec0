"""Singly linked lists: building, deleting, merging, sorting and rotating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional

__all__ = [
    "ListNode",
    "from_iterable",
    "to_list",
    "push",
    "delete_value",
    "merge_sorted",
    "insertion_sort_list",
    "rotate_right",
]


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when there are none."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> List[Any]:
    """The values of the list starting at ``head``, in order."""
    return list(head) if head is not None else []


def push(head: Optional[ListNode], value: Any) -> ListNode:
    """Put ``value`` in front of the list and return the new head."""
    return ListNode(value, head)


def delete_value(head: Optional[ListNode], key: Any) -> Optional[ListNode]:
    """Unlink the first node holding ``key`` and return the head of the result.

    The list is returned unchanged when ``key`` is absent.
    """
    if head is None:
        return None
    if head.val == key:
        return head.next
    previous = head
    while previous.next is not None:
        if previous.next.val == key:
            previous.next = previous.next.next
            break
        previous = previous.next
    return head


def merge_sorted(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two ascending lists into one ascending list.

    On equal values the node from ``first`` comes first.
    """
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if second.val < first.val:
            tail.next, second = second, second.next
        else:
            tail.next, first = first, first.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list ascending by relinking its nodes; equal values keep their order."""
    anchor = ListNode(None)
    node = head
    while node is not None:
        following = node.next
        spot = anchor
        while spot.next is not None and spot.next.val <= node.val:
            spot = spot.next
        node.next = spot.next
        spot.next = node
        node = following
    return anchor.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Move the last ``k`` nodes to the front and return the new head.

    Raises ValueError for a negative ``k``.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None:
        return None
    count = 1
    last = head
    while last.next is not None:
        last = last.next
        count += 1
    k %= count
    if k == 0:
        return head
    new_tail = head
    for _ in range(count - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    last.next = head
    return new_head