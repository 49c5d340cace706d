import random

import pytest

from leetkit.arrays import (
    contains_duplicate,
    find_kth_largest,
    find_kth_largest_heap,
    find_peak_element,
    find_peak_element_binary,
    longest_consecutive,
    longest_consecutive_set,
    majority_element,
    majority_element_divide,
    max_area,
    rotate,
    rotate_by_reversal,
    single_number,
    three_sum,
    two_sum,
)


def test_two_sum_example():
    assert two_sum([1, 2, 3], 4) == [2, 0]


@pytest.mark.parametrize("seed", range(10))
def test_two_sum_pair_adds_up(seed):
    rng = random.Random(seed)
    nums = [rng.randint(-20, 20) for _ in range(12)]
    target = nums[3] + nums[9]
    i, j = two_sum(nums, target)
    assert i > j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair_is_empty():
    assert len(two_sum([1, 2, 3], 100)) == 0


@pytest.mark.parametrize(
    "height, expected",
    [([1, 8, 6, 4, 5, 2, 8, 3, 7], 49), ([1, 2, 1], 2), ([1, 1], 1)],
)
def test_max_area(height, expected):
    assert max_area(height) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([-1, 0, 1, 2, -1, -4], [[-1, -1, 2], [-1, 0, 1]]),
        ([-2, 0, 1, 1, 2], [[-2, 0, 2], [-2, 1, 1]]),
    ],
)
def test_three_sum(nums, expected):
    original = list(nums)
    assert three_sum(nums) == expected
    assert nums == original


def test_three_sum_triples_sum_to_zero_and_are_distinct():
    rng = random.Random(7)
    nums = [rng.randint(-6, 6) for _ in range(25)]
    triples = three_sum(nums)
    assert all(sum(t) == 0 and t == sorted(t) for t in triples)
    assert len({tuple(t) for t in triples}) == len(triples)


def test_three_sum_short_input():
    assert three_sum([1, -1]) == []


def test_single_number():
    assert single_number([-2222, -2222, -100]) == -100


def test_single_number_single_element():
    assert single_number([-2222]) == -2222


def test_single_number_none_single():
    with pytest.raises(ValueError):
        single_number([-100, -100])


@pytest.mark.parametrize("func", [longest_consecutive, longest_consecutive_set])
@pytest.mark.parametrize(
    "nums, expected",
    [([100, 4, 200, 1, 3, 2], 4), ([0, 3, 7, 2, 5, 8, 4, 6, 0, 1], 9)],
)
def test_longest_consecutive(func, nums, expected):
    assert func(nums) == expected


@pytest.mark.parametrize("seed", range(5))
def test_longest_consecutive_variants_agree(seed):
    rng = random.Random(seed)
    nums = [rng.randint(-15, 15) for _ in range(20)]
    assert longest_consecutive(nums) == longest_consecutive_set(nums)


@pytest.mark.parametrize("func", [majority_element, majority_element_divide])
@pytest.mark.parametrize("nums, expected", [([3, 2, 3], 3), ([2, 2, 1, 1, 1, 2, 2], 2)])
def test_majority_element(func, nums, expected):
    assert func(nums) == expected


@pytest.mark.parametrize("func", [majority_element, majority_element_divide])
def test_majority_element_empty(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("func", [rotate, rotate_by_reversal])
@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7], 3, [5, 6, 7, 1, 2, 3, 4]),
        ([-1, -100, 3, 99], 2, [3, 99, -1, -100]),
    ],
)
def test_rotate(func, nums, k, expected):
    values = list(nums)
    assert func(values, k) is None
    assert values == expected


@pytest.mark.parametrize("k", range(0, 15))
def test_rotate_variants_agree(k):
    first = list(range(12))
    second = list(range(12))
    rotate(first, k)
    rotate_by_reversal(second, k)
    assert first == second
    assert sorted(first) == list(range(12))


@pytest.mark.parametrize("func", [rotate, rotate_by_reversal])
def test_rotate_full_turn_is_identity(func):
    values = [1, 2, 3, 4, 5, 6, 7]
    func(values, 7)
    assert values == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("func", [rotate, rotate_by_reversal])
def test_rotate_empty(func):
    values: list[int] = []
    func(values, 3)
    assert values == []


@pytest.mark.parametrize("nums, expected", [([1, 2, 3, 1], True), ([1, 2, 3, 4], False)])
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


def test_find_peak_examples():
    assert find_peak_element([1, 2, 3, 1]) == 2
    assert find_peak_element_binary([1, 2, 3, 1]) == 2
    assert find_peak_element([1, 2, 1, 3, 5, 6, 4]) == 1
    assert find_peak_element_binary([1, 2, 1, 3, 5, 6, 4]) == 5
    assert find_peak_element([1, 2, 1, 2, 1]) == 1
    assert find_peak_element_binary([1, 2, 1, 2, 1]) == 1


@pytest.mark.parametrize("func", [find_peak_element, find_peak_element_binary])
@pytest.mark.parametrize("seed", range(8))
def test_find_peak_is_a_peak(func, seed):
    rng = random.Random(seed)
    nums = rng.sample(range(100), 15)
    index = func(nums)
    padded = [float("-inf")] + nums + [float("-inf")]
    assert padded[index] < padded[index + 1] > padded[index + 2]


@pytest.mark.parametrize("func", [find_peak_element, find_peak_element_binary])
def test_find_peak_errors(func):
    with pytest.raises(ValueError):
        func([])
    with pytest.raises(ValueError):
        func([1, 1, 1])


@pytest.mark.parametrize("func", [find_kth_largest, find_kth_largest_heap])
def test_find_kth_largest_example(func):
    nums = [3, 2, 1, 5, 6, 4]
    assert func(nums, 2) == 5
    assert nums == [3, 2, 1, 5, 6, 4]


@pytest.mark.parametrize("func", [find_kth_largest, find_kth_largest_heap])
@pytest.mark.parametrize("k", [1, 4, 10])
def test_find_kth_largest_matches_sorted(func, k):
    rng = random.Random(k)
    nums = [rng.randint(-50, 50) for _ in range(10)]
    assert func(nums, k) == sorted(nums, reverse=True)[k - 1]


@pytest.mark.parametrize("func", [find_kth_largest, find_kth_largest_heap])
@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_rank_out_of_range(func, k):
    with pytest.raises(ValueError):
        func([1, 2, 3], k)