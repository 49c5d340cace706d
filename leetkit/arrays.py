"""Algorithms over arrays of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target``, the later index first.

    An empty list means no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen.setdefault(value, index)
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values that sums to zero."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    i = 0
    while i < size - 2 and values[i] <= 0:
        left, right = i + 1, size - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([values[i], values[left], values[right]])
                while left < right and values[left] == values[left + 1]:
                    left += 1
                while left < right and values[right] == values[right - 1]:
                    right -= 1
                left += 1
                right -= 1
        while i + 1 < size and values[i] == values[i + 1]:
            i += 1
        i += 1
    return result


def single_number(nums: Sequence[int]) -> int:
    """Return the smallest value that occurs exactly once."""
    if len(nums) == 1:
        return nums[0]
    singles = [value for value, seen in Counter(nums).items() if seen == 1]
    if not singles:
        raise ValueError("no value occurs exactly once")
    return min(singles)


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers, by merging run bounds."""
    runs: dict[int, int] = {}
    best = 0
    for value in nums:
        if runs.get(value):
            continue
        left = runs.get(value - 1, 0)
        right = runs.get(value + 1, 0)
        length = left + right + 1
        runs[value] = runs[value + right] = runs[value - left] = length
        best = max(best, length)
    return best


def longest_consecutive_set(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers, counting from run starts."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority value by Boyer-Moore voting."""
    if not nums:
        raise ValueError("an empty sequence has no majority element")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def majority_element_divide(nums: Sequence[int]) -> int:
    """Return the majority value by divide and conquer."""
    if not nums:
        raise ValueError("an empty sequence has no majority element")

    def majority(left: int, right: int) -> int:
        if left == right:
            return nums[left]
        mid = (left + right) // 2
        lm = majority(left, mid)
        rm = majority(mid + 1, right)
        if lm == rm:
            return lm
        window = nums[left : right + 1]
        return lm if window.count(lm) > window.count(rm) else rm

    return majority(0, len(nums) - 1)


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place, by cyclic replacement."""
    size = len(nums)
    if size == 0:
        return
    k %= size
    if k == 0:
        return
    moved = 0
    start = 0
    while moved < size:
        position = start
        carried = nums[start]
        while True:
            position = (position + k) % size
            nums[position], carried = carried, nums[position]
            moved += 1
            if position == start:
                break
        start += 1


def rotate_by_reversal(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place, by three reversals."""
    if not nums:
        return
    k %= len(nums)
    nums.reverse()
    nums[:k] = nums[:k][::-1]
    nums[k:] = nums[k:][::-1]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def _edge_peak(nums: Sequence[int]) -> int | None:
    size = len(nums)
    if size == 0:
        raise ValueError("an empty sequence has no peak")
    if size == 1 or nums[1] < nums[0]:
        return 0
    if nums[size - 2] < nums[size - 1]:
        return size - 1
    return None


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of the first peak, scanning from the left."""
    edge = _edge_peak(nums)
    if edge is not None:
        return edge
    for index in range(1, len(nums) - 1):
        if nums[index - 1] < nums[index] > nums[index + 1]:
            return index
    raise ValueError("no peak: neighbouring values must differ")


def find_peak_element_binary(nums: Sequence[int]) -> int:
    """Return the index of a peak found by binary search."""
    edge = _edge_peak(nums)
    if edge is not None:
        return edge
    low, high = 1, len(nums) - 2
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid - 1]:
            high = mid - 1
        elif nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            raise ValueError("no peak: neighbouring values must differ")
    raise ValueError("no peak: neighbouring values must differ")


def _check_rank(k: int, size: int) -> None:
    if not 1 <= k <= size:
        raise ValueError(f"k={k} is out of range for {size} values")


def _partition(values: list[int], low: int, high: int) -> int:
    middle = (low + high) // 2
    pivot = values[middle]
    values[middle], values[high] = values[high], values[middle]
    store = low
    for index in range(low, high):
        if values[index] > pivot:
            values[index], values[store] = values[store], values[index]
            store += 1
    values[store], values[high] = values[high], values[store]
    return store


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value by quickselect, leaving ``nums`` untouched."""
    _check_rank(k, len(nums))
    values = list(nums)
    low, high = 0, len(values) - 1
    target = k - 1
    while True:
        index = _partition(values, low, high)
        if index == target:
            return values[index]
        if index < target:
            low = index + 1
        else:
            high = index - 1


def find_kth_largest_heap(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value using a bounded min-heap."""
    _check_rank(k, len(nums))
    heap: list[int] = []
    for value in nums:
        if len(heap) < k:
            heapq.heappush(heap, value)
        else:
            heapq.heappushpop(heap, value)
    return heap[0]