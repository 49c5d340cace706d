import random

import pytest

from leetkit.dynamic import (
    can_complete_circuit,
    can_complete_circuit_brute,
    generate_pascal,
    get_skyline,
    max_product,
    max_profit,
    max_profit_multiple,
    max_profit_valleys,
    rob,
    rob_recursive,
)


def test_generate_pascal_five_rows():
    assert generate_pascal(5) == [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1]]


def test_generate_pascal_row_invariants():
    rows = generate_pascal(12)
    assert len(rows) == 12
    for index, row in enumerate(rows):
        assert len(row) == index + 1
        assert row == row[::-1]
        assert sum(row) == 2**index


def test_generate_pascal_negative():
    with pytest.raises(ValueError):
        generate_pascal(-1)


@pytest.mark.parametrize("prices, expected", [([7, 1, 5, 3, 6, 4], 5), ([2, 4, 1], 2)])
def test_max_profit(prices, expected):
    assert max_profit(prices) == expected


def test_max_profit_never_negative():
    assert max_profit([7, 6, 4, 3, 1]) == 0


@pytest.mark.parametrize("func", [max_profit_multiple, max_profit_valleys])
@pytest.mark.parametrize(
    "prices, expected",
    [([7, 1, 5, 3, 6, 4], 7), ([1, 2, 3, 4, 5], 4), ([7, 6, 4, 3, 1], 0)],
)
def test_max_profit_multiple(func, prices, expected):
    assert func(prices) == expected


@pytest.mark.parametrize("seed", range(8))
def test_max_profit_multiple_variants_agree(seed):
    rng = random.Random(seed)
    prices = [rng.randint(0, 20) for _ in range(15)]
    assert max_profit_multiple(prices) == max_profit_valleys(prices)
    assert max_profit_multiple(prices) >= max_profit(prices)


@pytest.mark.parametrize("func", [can_complete_circuit, can_complete_circuit_brute])
def test_can_complete_circuit_example(func):
    assert func([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3


@pytest.mark.parametrize("func", [can_complete_circuit, can_complete_circuit_brute])
def test_can_complete_circuit_impossible(func):
    assert func([2, 3, 4], [3, 4, 3]) == -1


@pytest.mark.parametrize("seed", range(10))
def test_can_complete_circuit_variants_agree(seed):
    rng = random.Random(seed)
    gas = [rng.randint(0, 6) for _ in range(8)]
    cost = [rng.randint(0, 6) for _ in range(8)]
    assert can_complete_circuit(gas, cost) == can_complete_circuit_brute(gas, cost)


@pytest.mark.parametrize("func", [can_complete_circuit, can_complete_circuit_brute])
def test_can_complete_circuit_length_mismatch(func):
    with pytest.raises(ValueError):
        func([1, 2], [1])


@pytest.mark.parametrize(
    "nums, expected",
    [([2, 3, -2, 4], 6), ([-2, 0, -1], 0), ([-2], -2), ([-2, 3, -4], 24), ([-2, -3, -4], 12)],
)
def test_max_product(nums, expected):
    assert max_product(nums) == expected


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


@pytest.mark.parametrize("func", [rob, rob_recursive])
@pytest.mark.parametrize(
    "nums, expected", [([1, 2, 3, 1], 4), ([2, 7, 9, 3, 1], 12), ([2, 1, 1, 2], 4)]
)
def test_rob(func, nums, expected):
    assert func(nums) == expected


@pytest.mark.parametrize("seed", range(8))
def test_rob_variants_agree(seed):
    rng = random.Random(seed)
    nums = [rng.randint(0, 30) for _ in range(14)]
    assert rob(nums) == rob_recursive(nums)
    assert rob(nums) <= sum(nums)


def test_get_skyline_example():
    buildings = [[2, 9, 10], [3, 7, 15], [5, 12, 12], [15, 20, 10], [19, 24, 8]]
    expected = [[2, 10], [3, 15], [7, 12], [12, 0], [15, 10], [20, 8], [24, 0]]
    assert get_skyline(buildings) == expected


def test_get_skyline_ends_on_ground_and_changes_height():
    rng = random.Random(3)
    buildings = []
    for _ in range(10):
        left = rng.randint(0, 30)
        buildings.append([left, left + rng.randint(1, 8), rng.randint(1, 20)])
    points = get_skyline(buildings)
    assert points[-1][1] == 0
    xs = [x for x, _ in points]
    assert xs == sorted(xs)
    assert all(a[1] != b[1] for a, b in zip(points, points[1:]))


def test_get_skyline_empty():
    assert get_skyline([]) == []


def test_get_skyline_negative_height():
    with pytest.raises(ValueError):
        get_skyline([[1, 2, -3]])