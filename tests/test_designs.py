import pytest

from leetkit.designs import LRUCache, MinStack, Trie


def test_lru_cache_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_cache_update_refreshes_key():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    cache.put(1, 10)
    cache.put(3, 3)
    assert cache.get(2) == -1
    assert cache.get(1) == 10
    assert len(cache) == 2


def test_lru_cache_never_exceeds_capacity():
    cache = LRUCache(3)
    for key in range(10):
        cache.put(key, key)
        assert len(cache) <= 3
    assert [cache.get(key) for key in (7, 8, 9)] == [7, 8, 9]


def test_lru_cache_rejects_zero_capacity():
    with pytest.raises(ValueError):
        LRUCache(0)


def test_min_stack_sequence():
    stack = MinStack()
    stack.push(2)
    stack.push(0)
    stack.push(3)
    stack.push(0)
    assert stack.get_min() == 0
    stack.pop()
    assert stack.get_min() == 0
    stack.pop()
    assert stack.get_min() == 0
    stack.pop()
    assert stack.get_min() == 2
    stack.pop()
    assert len(stack) == 0


def test_min_stack_top_tracks_last_push():
    stack = MinStack()
    for value in [5, -1, 7]:
        stack.push(value)
        assert stack.top() == value
    assert stack.get_min() == -1


@pytest.mark.parametrize("operation", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(operation):
    with pytest.raises(IndexError):
        getattr(MinStack(), operation)()


def test_trie_sequence():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_trie_missing_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.starts_with("apx") is False
    assert trie.search("apples") is False
    assert trie.starts_with("") is True