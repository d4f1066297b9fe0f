"""Singly linked list operations on ``ListNode`` chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list holding an integer value."""

    val: int = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _length(head: ListNode | None) -> int:
    return sum(1 for _ in _nodes(head))


def build_list(values: Iterable[int]) -> ListNode | None:
    """Return the head of a new list holding ``values`` in order, or None if empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(first: ListNode | None, second: ListNode | None) -> ListNode:
    """Add two numbers stored as digit lists, least significant digit first."""
    if first is None and second is None:
        raise ValueError("at least one number must have digits")
    dummy = ListNode()
    tail = dummy
    carry = 0
    a, b = first, second
    while a is not None or b is not None or carry:
        total = carry
        if a is not None:
            total += a.val
            a = a.next
        if b is not None:
            total += b.val
            b = b.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    assert dummy.next is not None
    return dummy.next


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list in O(1) by taking over its successor."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node this way")
    node.val = successor.val
    node.next = successor.next


def merge_two_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list and return its head."""
    if first is second:
        return first
    dummy = ListNode()
    tail = dummy
    a, b = first, second
    while a is not None and b is not None:
        if a.val <= b.val:
            tail.next = a
            a = a.next
        else:
            tail.next = b
            b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        assert slow is not None
        slow = slow.next
    return slow


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end (1-based) and return the head."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}")
    assert head is not None
    if n == length:
        return head.next
    before = head
    for _ in range(length - n - 1):
        assert before.next is not None
        before = before.next
    assert before.next is not None
    before.next = before.next.next
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    prev: ListNode | None = None
    cur = head
    while cur is not None:
        cur.next, prev, cur = prev, cur, cur.next
    return prev


def has_cycle(head: ListNode | None) -> bool:
    """Return whether following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection_node(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Return the first node shared by two lists, or None."""
    len_a, len_b = _length(first), _length(second)
    a, b = first, second
    for _ in range(len_a - len_b):
        assert a is not None
        a = a.next
    for _ in range(len_b - len_a):
        assert b is not None
        b = b.next
    while a is not None and b is not None:
        if a is b:
            return a
        a, b = a.next, b.next
    return None


def is_palindrome(head: ListNode | None) -> bool:
    """Return whether the values read the same both ways; the list is left unchanged."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
    tail_half = reverse_list(slow)
    result = True
    rev, front = tail_half, head
    while rev is not None and front is not None:
        if rev.val != front.val:
            result = False
            break
        rev, front = rev.next, front.next
    reverse_list(tail_half)
    return result


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full block of ``k`` nodes in place; a short tail stays as is."""
    if k < 1:
        raise ValueError("k must be at least 1")
    remaining = _length(head)
    dummy = ListNode(0, head)
    prev = dummy
    while remaining >= k:
        cur = prev.next
        assert cur is not None
        for _ in range(k - 1):
            moved = cur.next
            assert moved is not None
            cur.next = moved.next
            moved.next = prev.next
            prev.next = moved
        prev = cur
        remaining -= k
    return dummy.next


def cycle_start(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        assert slow is not None
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    probe = head
    while probe is not slow:
        assert probe is not None and slow is not None
        probe = probe.next
        slow = slow.next
    return probe


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None:
        return head
    length = _length(head)
    k %= length
    if k == 0:
        return head
    new_tail = head
    for _ in range(length - k - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next
    new_head = new_tail.next
    assert new_head is not None
    old_tail = new_head
    while old_tail.next is not None:
        old_tail = old_tail.next
    old_tail.next = head
    new_tail.next = None
    return new_head