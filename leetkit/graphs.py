"""Search problems over grids, word graphs and course dependency graphs."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

_EIGHT_WAYS = ((1, 1), (0, 1), (1, 0), (0, -1), (-1, 0), (-1, -1), (1, -1), (-1, 1))
_FOUR_WAYS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of cells on the shortest clear path from the top-left to the
    bottom-right cell, moving in eight directions, or -1 if there is none.

    Cells holding 0 are clear; the grid is left unchanged.
    """
    rows = len(grid)
    if rows == 0 or not grid[0]:
        return -1
    cols = len(grid[0])
    goal = (rows - 1, cols - 1)
    if grid[0][0] or grid[goal[0]][goal[1]]:
        return -1

    distance = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return distance[cell]
        row, col = cell
        for d_row, d_col in _EIGHT_WAYS:
            nxt = (row + d_row, col + d_col)
            r, c = nxt
            if 0 <= r < rows and 0 <= c < cols and not grid[r][c] and nxt not in distance:
                distance[nxt] = distance[cell] + 1
                queue.append(nxt)
    return -1


def _one_letter_variants(word: str) -> Iterator[str]:
    for index in range(len(word)):
        for letter in string.ascii_lowercase:
            yield word[:index] + letter + word[index + 1 :]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest transformation sequence from
    ``begin_word`` to ``end_word``, changing one letter at a time, or 0 if none exists."""
    words = set(word_list)
    words.discard(begin_word)
    level = {begin_word}
    ladder = 1
    while level:
        if end_word in level:
            return ladder
        following = {
            candidate
            for word in level
            for candidate in _one_letter_variants(word)
            if candidate in words
        }
        words -= following
        level = following
        ladder += 1
    return 0


def ladder_length_bidirectional(
    begin_word: str, end_word: str, word_list: Iterable[str]
) -> int:
    """Return the same as :func:`ladder_length`, searching from both ends at once.

    The end word must be in the word list, or the result is 0.
    """
    words = set(word_list)
    if end_word not in words:
        return 0

    head = {begin_word}
    tail = {end_word}
    ladder = 2
    while head and tail:
        grow_head = len(head) < len(tail)
        small, large = (head, tail) if grow_head else (tail, head)
        following: set[str] = set()
        for word in small:
            for candidate in _one_letter_variants(word):
                if candidate in large:
                    return ladder
                if candidate in words:
                    following.add(candidate)
                    words.discard(candidate)
        ladder += 1
        if grow_head:
            head = following
        else:
            tail = following
    return 0


def capture_surrounded(board: list[list[str]]) -> None:
    """Flip, in place, every region of ``'O'`` cells not connected to the border to ``'X'``."""
    if not board or not board[0]:
        return
    rows, cols = len(board), len(board[0])
    border = [(r, c) for r in range(rows) for c in (0, cols - 1)]
    border += [(r, c) for c in range(cols) for r in (0, rows - 1)]

    stack = [cell for cell in border if board[cell[0]][cell[1]] == "O"]
    while stack:
        row, col = stack.pop()
        if not (0 <= row < rows and 0 <= col < cols) or board[row][col] != "O":
            continue
        board[row][col] = "#"
        stack.extend((row + d_row, col + d_col) for d_row, d_col in _FOUR_WAYS)

    for line in board:
        for col, cell in enumerate(line):
            if cell == "O":
                line[col] = "X"
            elif cell == "#":
                line[col] = "O"


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of ``'1'`` cells joined horizontally or vertically."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for start_row in range(rows):
        for start_col in range(cols):
            if grid[start_row][start_col] != "1" or (start_row, start_col) in seen:
                continue
            islands += 1
            stack = [(start_row, start_col)]
            while stack:
                row, col = stack.pop()
                if (
                    not (0 <= row < rows and 0 <= col < cols)
                    or (row, col) in seen
                    or grid[row][col] != "1"
                ):
                    continue
                seen.add((row, col))
                stack.extend((row + d_row, col + d_col) for d_row, d_col in _FOUR_WAYS)
    return islands


def _course_graph(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Map each course to the courses that require it."""
    if num_courses < 0:
        raise ValueError("num_courses must not be negative")
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        if not (0 <= course < num_courses and 0 <= required < num_courses):
            raise ValueError(f"prerequisite [{course}, {required}] names an unknown course")
        graph[required].append(course)
    return graph


def _in_degrees(graph: list[list[int]]) -> list[int]:
    degrees = [0] * len(graph)
    for followers in graph:
        for course in followers:
            degrees[course] += 1
    return degrees


class _State(Enum):
    UNVISITED = auto()
    IN_PROGRESS = auto()
    VISITED = auto()


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken, by looking for a cycle depth first.

    Each prerequisite is ``[course, required]``.
    """
    graph = _course_graph(num_courses, prerequisites)
    state = [_State.UNVISITED] * num_courses
    for start in range(num_courses):
        if state[start] is not _State.UNVISITED:
            continue
        state[start] = _State.IN_PROGRESS
        stack = [(start, iter(graph[start]))]
        while stack:
            node, followers = stack[-1]
            nxt = next(followers, None)
            if nxt is None:
                state[node] = _State.VISITED
                stack.pop()
            elif state[nxt] is _State.IN_PROGRESS:
                return False
            elif state[nxt] is _State.UNVISITED:
                state[nxt] = _State.IN_PROGRESS
                stack.append((nxt, iter(graph[nxt])))
    return True


def can_finish_by_degrees(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken, by repeatedly removing a course with no
    outstanding prerequisites."""
    graph = _course_graph(num_courses, prerequisites)
    degrees = _in_degrees(graph)
    for _ in range(num_courses):
        free = next((course for course, degree in enumerate(degrees) if degree == 0), None)
        if free is None:
            return False
        degrees[free] -= 1
        for course in graph[free]:
            degrees[course] -= 1
    return True


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which to take all courses, found depth first, or ``[]`` if
    there is none."""
    graph = _course_graph(num_courses, prerequisites)
    degrees = _in_degrees(graph)
    order: list[int] = []
    for start in range(num_courses):
        if degrees[start] != 0:
            continue
        order.append(start)
        degrees[start] = -1
        stack = [iter(graph[start])]
        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                continue
            degrees[nxt] -= 1
            if degrees[nxt] == 0:
                order.append(nxt)
                degrees[nxt] = -1
                stack.append(iter(graph[nxt]))
    return order if len(order) == num_courses else []


def find_order_bfs(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which to take all courses, found breadth first, or ``[]`` if
    there is none."""
    graph = _course_graph(num_courses, prerequisites)
    degrees = _in_degrees(graph)
    queue = deque(course for course, degree in enumerate(degrees) if degree == 0)
    order: list[int] = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for follower in graph[course]:
            degrees[follower] -= 1
            if degrees[follower] == 0:
                queue.append(follower)
    return order if len(order) == num_courses else []


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    word: Optional[str] = None


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Return the words that can be traced on the board through adjacent cells,
    using each cell at most once per word, in the order they are found."""
    root = _TrieNode()
    for word in words:
        node = root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.word = word

    if not board or not board[0]:
        return []
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()
    found: list[str] = []

    def visit(row: int, col: int, node: _TrieNode) -> None:
        if not (0 <= row < rows and 0 <= col < cols) or (row, col) in used:
            return
        child = node.children.get(board[row][col])
        if child is None:
            return
        if child.word is not None:
            found.append(child.word)
            child.word = None
        used.add((row, col))
        for d_row, d_col in _FOUR_WAYS:
            visit(row + d_row, col + d_col, child)
        used.remove((row, col))

    for row in range(rows):
        for col in range(cols):
            visit(row, col, root)
    return found