"""Traversals, views and measurements of binary trees."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def all_traversals(root: TreeNode | None) -> tuple[list[int], list[int], list[int]]:
    """Return ``(inorder, preorder, postorder)`` from a single stack walk."""
    in_order: list[int] = []
    pre_order: list[int] = []
    post_order: list[int] = []
    if root is None:
        return in_order, pre_order, post_order
    stack = [(root, 1)]
    while stack:
        node, state = stack.pop()
        if state == 1:
            pre_order.append(node.val)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif state == 2:
            in_order.append(node.val)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            post_order.append(node.val)
    return in_order, pre_order, post_order


def _walk_inorder(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, node, right order."""
    return list(_walk_inorder(root))


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in node, left, right order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left, right, node order."""
    values: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        values.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    values.reverse()
    return values


def morris_inorder(root: TreeNode | None) -> list[int]:
    """Return the inorder values using threaded links instead of a stack.

    The tree is restored to its original shape before returning.
    """
    values: list[int] = []
    cur = root
    while cur is not None:
        if cur.left is None:
            values.append(cur.val)
            cur = cur.right
            continue
        prev = cur.left
        while prev.right is not None and prev.right is not cur:
            prev = prev.right
        if prev.right is None:
            prev.right = cur
            cur = cur.left
        else:
            prev.right = None
            values.append(cur.val)
            cur = cur.right
    return values


def morris_preorder(root: TreeNode | None) -> list[int]:
    """Return the preorder values using threaded links instead of a stack.

    The tree is restored to its original shape before returning.
    """
    values: list[int] = []
    cur = root
    while cur is not None:
        if cur.left is None:
            values.append(cur.val)
            cur = cur.right
            continue
        prev = cur.left
        while prev.right is not None and prev.right is not cur:
            prev = prev.right
        if prev.right is None:
            prev.right = cur
            values.append(cur.val)
            cur = cur.left
        else:
            prev.right = None
            cur = cur.right
    return values


def _by_column(root: TreeNode | None) -> Iterator[tuple[TreeNode, int]]:
    """Yield nodes breadth first together with their horizontal distance."""
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        yield node, column
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))


def top_view(root: TreeNode | None) -> list[int]:
    """Return the values seen from above, leftmost column first."""
    seen: dict[int, int] = {}
    for node, column in _by_column(root):
        seen.setdefault(column, node.val)
    return [seen[column] for column in sorted(seen)]


def bottom_view(root: TreeNode | None) -> list[int]:
    """Return the values seen from below, leftmost column first."""
    seen: dict[int, int] = {}
    for node, column in _by_column(root):
        seen[column] = node.val
    return [seen[column] for column in sorted(seen)]


def left_view(root: TreeNode | None) -> list[int]:
    """Return the first value met on each level, top to bottom."""
    view: list[int] = []
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, level = stack.pop()
        if level == len(view):
            view.append(node.val)
        if node.right is not None:
            stack.append((node.right, level + 1))
        if node.left is not None:
            stack.append((node.left, level + 1))
    return view


def root_to_node_path(root: TreeNode | None, target: int) -> list[int]:
    """Return the values from the root to the first node holding ``target``, or []."""
    path: list[int] = []

    def search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    search(root)
    return path


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Return the columns left to right; within a column by row, ties by value."""
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(lambda: defaultdict(list))
    if root is None:
        return []
    queue = deque([(root, 0, 0)])
    while queue:
        node, x, y = queue.popleft()
        columns[x][y].append(node.val)
        if node.left is not None:
            queue.append((node.left, x - 1, y + 1))
        if node.right is not None:
            queue.append((node.right, x + 1, y + 1))
    return [
        [value for row in sorted(rows) for value in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    if root is None:
        return 0
    widest = 0
    level = [(root, 0)]
    while level:
        base = level[0][1]
        widest = max(widest, level[-1][1] - base + 1)
        following: list[tuple[TreeNode, int]] = []
        for node, index in level:
            index -= base
            if node.left is not None:
                following.append((node.left, 2 * index + 1))
            if node.right is not None:
                following.append((node.right, 2 * index + 2))
        level = following
    return widest