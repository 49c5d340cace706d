"""Greedy and dynamic-programming problems over sequences."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import lru_cache


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        previous = rows[-1]
        rows.append([1] + [a + b for a, b in zip(previous, previous[1:])] + [1])
    return rows


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    best = 0
    lowest = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Sequence[int]) -> int:
    """Return the best profit from any number of trades, summing every rise."""
    return sum(max(later - earlier, 0) for earlier, later in zip(prices, prices[1:]))


def max_profit_valleys(prices: Sequence[int]) -> int:
    """Return the best profit from any number of trades, buying at valleys and selling at peaks."""
    days = len(prices)
    total = 0
    buy = 0
    while buy < days:
        while buy + 1 < days and prices[buy + 1] < prices[buy]:
            buy += 1
        sell = buy
        while sell + 1 < days and prices[sell + 1] > prices[sell]:
            sell += 1
        total += prices[sell] - prices[buy]
        buy = sell + 1
    return total


def _check_stations(gas: Sequence[int], cost: Sequence[int]) -> None:
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which the circuit can be driven, or -1, greedily."""
    _check_stations(gas, cost)
    start = 0
    tank = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        if tank < 0:
            start = index + 1
            tank = 0
    return start if sum(cost) <= sum(gas) else -1


def can_complete_circuit_brute(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the first station from which the circuit can be driven, or -1, by trying each."""
    _check_stations(gas, cost)
    size = len(gas)
    for start in range(size):
        tank = 0
        for step in range(size):
            station = (start + step) % size
            tank += gas[station] - cost[station]
            if tank < 0:
                break
        else:
            return start
    return -1


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous, non-empty run of values."""
    if not nums:
        raise ValueError("an empty sequence has no subarray")
    result = high = low = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, value * high)
        low = min(value, value * low)
        result = max(result, high)
    return result


def rob(nums: Sequence[int]) -> int:
    """Return the most that can be taken from houses when no two neighbours are taken."""
    take_previous = skip_previous = 0
    for value in nums:
        take_previous, skip_previous = max(take_previous, skip_previous + value), take_previous
    return take_previous


def rob_recursive(nums: Sequence[int]) -> int:
    """Return the same as :func:`rob`, by memoised recursion over the house index."""
    values = tuple(nums)

    @lru_cache(maxsize=None)
    def best(index: int) -> int:
        if index >= len(values):
            return 0
        return max(best(index + 1), values[index] + best(index + 2))

    return best(0)


def get_skyline(buildings: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the key points ``[x, height]`` of the skyline of ``[left, right, height]`` buildings."""
    walls: list[tuple[int, int]] = []
    for left, right, height in buildings:
        if height < 0:
            raise ValueError("building heights must not be negative")
        if height == 0:
            continue
        walls.append((left, -height))
        walls.append((right, height))
    walls.sort()

    active = [0]
    removed: Counter[int] = Counter()
    top = 0
    skyline: list[list[int]] = []
    for x, height in walls:
        if height < 0:
            heapq.heappush(active, height)
        else:
            removed[height] += 1
        while removed[-active[0]]:
            removed[-active[0]] -= 1
            heapq.heappop(active)
        current = -active[0]
        if current != top:
            top = current
            skyline.append([x, top])
    return skyline