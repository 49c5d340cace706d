"""Binary tree and singly linked list nodes with helpers to build, compare and show them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; ``next`` links a node to its right neighbour on a level."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    next: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


_END = object()


def _tree_node(value: Optional[int]) -> Optional[TreeNode]:
    return None if value is None else TreeNode(value)


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, ``None`` marking an absent child."""
    items = iter(values)
    first = next(items, _END)
    if first is _END or first is None:
        return None
    root = TreeNode(first)
    parents: deque[TreeNode] = deque([root])
    for left in items:
        if not parents:
            raise ValueError("level-order values describe children of missing nodes")
        parent = parents.popleft()
        parent.left = _tree_node(left)
        right = next(items, _END)
        if right is _END:
            break
        parent.right = _tree_node(right)
        parents.extend(child for child in (parent.left, parent.right) if child)
    return root


def _level_order_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(child for child in (node.left, node.right) if child)


def format_tree(root: Optional[TreeNode]) -> str:
    """Return the tree's values in level order, space separated, or ``NULL``."""
    if root is None:
        return "NULL"
    return " ".join(str(node.val) for node in _level_order_nodes(root))


def print_tree(root: Optional[TreeNode]) -> None:
    """Print the tree's values in level order."""
    print(format_tree(root))


def is_same_tree(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and is_same_tree(a.left, b.left) and is_same_tree(a.right, b.right)


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def iter_list(head: Optional[ListNode]) -> Iterator[int]:
    """Yield the values of a linked list from the head onwards."""
    while head is not None:
        yield head.val
        head = head.next


def list_to_string(head: Optional[ListNode]) -> str:
    """Render a linked list as ``1->2->3``; an empty list is the empty string."""
    return "->".join(str(value) for value in iter_list(head))


def print_list(head: Optional[ListNode]) -> None:
    """Print a linked list as ``1->2->3``."""
    print(list_to_string(head))


def is_same_list(a: Optional[ListNode], b: Optional[ListNode]) -> bool:
    """Tell whether two lists hold equal values up to a shared end."""
    while a is not None and b is not None and a.val == b.val:
        a, b = a.next, b.next
    return a is b