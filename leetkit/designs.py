"""Small data-structure designs: an LRU cache, a min-stack and a prefix tree."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional


class LRUCache:
    """A fixed-capacity mapping that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: int) -> int:
        """Return the value for ``key`` and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest key when full."""
        if key in self._items:
            self._items.move_to_end(key)
            self._items[key] = value
            return
        if len(self._items) >= self.capacity:
            self._items.popitem(last=False)
        self._items[key] = value


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        current = min(val, self._entries[-1][1]) if self._entries else val
        self._entries.append((val, current))

    def pop(self) -> None:
        """Remove the top element."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        self._entries.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1][0]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1][1]


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._find(prefix) is not None