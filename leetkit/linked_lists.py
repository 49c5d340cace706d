"""Algorithms over singly linked lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import count
from typing import Optional

from leetkit.structures import ListNode


@dataclass(eq=False)
class RandomListNode:
    """A list node with an extra pointer to any node of the same list."""

    val: int
    next: Optional[RandomListNode] = None
    random: Optional[RandomListNode] = None

    def __repr__(self) -> str:
        return f"RandomListNode({self.val!r})"


def copy_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Deep-copy a list whose nodes carry random pointers, leaving the original intact."""
    if head is None:
        return None

    node = head
    while node is not None:
        node.next = RandomListNode(node.val, node.next)
        node = node.next.next

    node = head
    while node is not None:
        if node.random is not None:
            node.next.random = node.random.next
        node = node.next.next

    new_head = head.next
    node = head
    while node is not None:
        copy = node.next
        node.next = copy.next
        if copy.next is not None:
            copy.next = copy.next.next
        node = node.next
    return new_head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _merge(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list ascending by merge sort, relinking its nodes."""
    if head is None or head.next is None:
        return head
    prev, slow, fast = None, head, head
    while fast is not None and fast.next is not None:
        prev, slow, fast = slow, slow.next, fast.next.next
    prev.next = None
    return _merge(sort_list(head), sort_list(slow))


def quick_sort_list(head: Optional[ListNode], tail: Optional[ListNode]) -> Optional[ListNode]:
    """Quick-sort the nodes from ``head`` up to, not including, ``tail``; return the new head."""
    if head is tail:
        return head

    smaller = ListNode()
    smaller_tail = smaller
    prev = head
    node = head.next
    while node is not tail:
        if node.val < head.val:
            smaller_tail.next = node
            smaller_tail = node
            prev.next = node.next
        else:
            prev = node
        node = prev.next

    smaller_tail.next = head
    head.next = quick_sort_list(head.next, tail)
    return quick_sort_list(smaller.next, head)


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the head of the result."""
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if head.next is None:
        return None
    if n < 1:
        raise ValueError("n must be at least 1")

    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next

    slow = head
    while fast.next is not None:
        fast, slow = fast.next, slow.next
    slow.next = slow.next.next
    return head


def add_two_numbers(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as little-endian digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while a is not None or b is not None or carry:
        if a is not None:
            carry += a.val
            a = a.next
        if b is not None:
            carry += b.val
            b = b.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(a: Optional[ListNode], b: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
    return _merge(a, b)


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Splice any number of sorted lists into one sorted list."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    tail.next = None
    return dummy.next