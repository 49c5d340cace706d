"""Algorithms over binary trees."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from leetkit.structures import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    """Yield the nodes of each level, left to right, from the root down."""
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child]


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""

    def mirrored(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
        if left is None and right is None:
            return True
        if left is None or right is None:
            return False
        return (
            left.val == right.val
            and mirrored(left.left, right.right)
            and mirrored(left.right, right.left)
        )

    return root is None or mirrored(root.left, root.right)


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values of each level, alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        values = [node.val for node in level]
        result.append(values if depth % 2 == 0 else values[::-1])
    return result


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def build_from_traversals(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[TreeNode]:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    if len(preorder) != len(inorder):
        raise ValueError("traversals must have the same length")
    position = {value: index for index, value in enumerate(inorder)}
    values = iter(preorder)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        value = next(values)
        try:
            pivot = position[value]
        except KeyError:
            raise ValueError(f"value {value!r} is missing from the inorder traversal") from None
        node = TreeNode(value)
        node.left = build(low, pivot - 1)
        node.right = build(pivot + 1, high)
        return node

    return build(0, len(preorder) - 1)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from ascending values."""

    def build(start: int, end: int) -> Optional[TreeNode]:
        if start > end:
            return None
        mid = (start + end) // 2
        return TreeNode(nums[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def connect(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Point each node's ``next`` at its right neighbour in a perfect binary tree, recursively."""
    if root is not None and root.left is not None:
        root.left.next = root.right
        if root.next is not None and root.right is not None:
            root.right.next = root.next.left
        connect(root.left)
        connect(root.right)
    return root


def connect_bfs(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Point each node's ``next`` at its right neighbour, level by level; any tree shape."""
    for level in _levels(root):
        for node, neighbour in zip(level, level[1:] + [None]):
            node.next = neighbour
    return root


def connect_iterative(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Link a perfect binary tree's levels using the links of the level above."""
    head = root
    while head is not None:
        node = head
        while node is not None:
            if node.left is not None:
                node.left.next = node.right
                if node.next is not None and node.right is not None:
                    node.right.next = node.next.left
            node = node.next
        head = head.left
    return root


def max_path_sum(root: Optional[TreeNode]) -> int:
    """Return the largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = root.val

    def gain(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(gain(node.left), 0)
        right = max(gain(node.right), 0)
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def deepest_leaves_sum(root: Optional[TreeNode]) -> int:
    """Return the sum of the leaves at the greatest depth, by depth-first search."""
    deepest = 0
    total = 0

    def visit(node: Optional[TreeNode], depth: int) -> None:
        nonlocal deepest, total
        if node is None:
            return
        if node.left is None and node.right is None:
            if depth == deepest:
                total += node.val
            elif depth > deepest:
                deepest, total = depth, node.val
        visit(node.left, depth + 1)
        visit(node.right, depth + 1)

    visit(root, 0)
    return total


def deepest_leaves_sum_bfs(root: Optional[TreeNode]) -> int:
    """Return the sum of the values on the last level, by breadth-first search."""
    last: list[TreeNode] = []
    for level in _levels(root):
        last = level
    return sum(node.val for node in last)


def get_target_copy(
    original: Optional[TreeNode], cloned: Optional[TreeNode], target: TreeNode
) -> Optional[TreeNode]:
    """Return the first node of ``cloned``, in preorder, whose value equals ``target``'s."""
    if cloned is None:
        return None
    if cloned.val == target.val:
        return cloned
    found = get_target_copy(original, cloned.left, target)
    if found is not None:
        return found
    return get_target_copy(original, cloned.right, target)


def _check_rank(k: int, size: Optional[int] = None) -> None:
    if k < 1 or (size is not None and k > size):
        raise ValueError(f"k={k} is out of range")


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value of a search tree via a full in-order walk."""
    values: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        walk(node.left)
        values.append(node.val)
        walk(node.right)

    walk(root)
    _check_rank(k, len(values))
    return values[k - 1]


def kth_smallest_iterative(root: Optional[TreeNode], k: int) -> int:
    """Return the ``k``-th smallest value of a search tree, stopping once it is reached."""
    _check_rank(k)
    stack: list[TreeNode] = []

    def push_left(node: Optional[TreeNode]) -> None:
        while node is not None:
            stack.append(node)
            node = node.left

    push_left(root)
    for _ in range(k - 1):
        if not stack:
            break
        push_left(stack.pop().right)
    if not stack:
        raise ValueError(f"k={k} is out of range")
    return stack[-1].val