"""Linked lists with an extra pointer: multi-level lists and lists with random links."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class MultiLevelNode:
    """A node with a ``next`` link to the next column and a ``bottom`` link down its column."""

    data: int
    next: MultiLevelNode | None = None
    bottom: MultiLevelNode | None = None


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra ``random`` link to any node of the list, or None."""

    val: int
    next: RandomNode | None = None
    random: RandomNode | None = None


def _merge_bottom(
    first: MultiLevelNode | None, second: MultiLevelNode | None
) -> MultiLevelNode | None:
    dummy = MultiLevelNode(0)
    tail = dummy
    a, b = first, second
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.bottom = a
            a = a.bottom
        else:
            tail.bottom = b
            b = b.bottom
        tail = tail.bottom
    tail.bottom = a if a is not None else b
    return dummy.bottom


def flatten(root: MultiLevelNode | None) -> MultiLevelNode | None:
    """Merge every sorted column into one sorted chain linked through ``bottom``."""
    columns: list[MultiLevelNode] = []
    node = root
    while node is not None:
        columns.append(node)
        node = node.next
    merged: MultiLevelNode | None = None
    for column in reversed(columns):
        merged = _merge_bottom(column, merged)
    return merged


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Return a deep copy of the list, ``random`` links pointing into the copy."""
    copies: dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next
    node = head
    while node is not None:
        copy = copies[id(node)]
        if node.next is not None:
            copy.next = copies[id(node.next)]
        if node.random is not None:
            copy.random = copies[id(node.random)]
        node = node.next
    return copies[id(head)] if head is not None else None