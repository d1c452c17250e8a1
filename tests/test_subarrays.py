import random

import pytest

from algokata.sorting import maximum_subarray_sum
from algokata.subarrays import (
    maximum_subarray_sum_ii,
    nearest_smaller_values,
    sliding_cost,
    sliding_median,
    subarray_divisibility,
    subarray_sums_i,
    subarray_sums_ii,
    sum_of_four_values,
    sum_of_three_values,
)


def _values(seed, count, low=-20, high=20):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(count)]


def test_maximum_subarray_sum_ii_example():
    assert maximum_subarray_sum_ii([-1, 3, -2, 5, 3, -5, 2, 2], 1, 2) == 8


def test_maximum_subarray_sum_ii_full_range_matches_unbounded():
    for seed in range(10):
        values = _values(seed, 15)
        assert maximum_subarray_sum_ii(values, 1, len(values)) == maximum_subarray_sum(values)


def test_maximum_subarray_sum_ii_whole_array():
    values = _values(42, 9)
    assert maximum_subarray_sum_ii(values, len(values), len(values)) == sum(values)


def test_maximum_subarray_sum_ii_wider_range_never_worse():
    values = _values(8, 20)
    results = [maximum_subarray_sum_ii(values, 3, longest) for longest in range(3, 21)]
    assert results == sorted(results)


def test_maximum_subarray_sum_ii_errors():
    with pytest.raises(ValueError):
        maximum_subarray_sum_ii([1, 2, 3], 0, 2)
    with pytest.raises(ValueError):
        maximum_subarray_sum_ii([1, 2, 3], 2, 1)
    with pytest.raises(ValueError):
        maximum_subarray_sum_ii([1, 2, 3], 4, 5)


def test_nearest_smaller_values_example():
    assert nearest_smaller_values([2, 5, 1, 4, 8, 3, 2, 5]) == [0, 1, 0, 3, 4, 3, 3, 7]


def test_nearest_smaller_values_increasing():
    values = list(range(10, 20))
    assert nearest_smaller_values(values) == list(range(len(values)))


def test_nearest_smaller_values_definition():
    values = _values(3, 40, 1, 10)
    result = nearest_smaller_values(values)
    assert len(result) == len(values)
    for index, (value, nearest) in enumerate(zip(values, result)):
        assert all(other >= value for other in values[nearest:index])
        if nearest:
            assert values[nearest - 1] < value


def test_sliding_median_example():
    assert sliding_median([2, 4, 3, 5, 8, 1, 2, 1], 3) == [3, 4, 5, 5, 2, 1]


def test_sliding_median_window_of_one():
    values = _values(4, 12)
    assert sliding_median(values, 1) == values


@pytest.mark.parametrize("k", [2, 3, 4, 7])
def test_sliding_median_is_the_lower_median(k):
    values = _values(k, 25, 1, 6)
    medians = sliding_median(values, k)
    assert len(medians) == len(values) - k + 1
    rank = (k - 1) // 2
    for start, median in enumerate(medians):
        window = values[start:start + k]
        below = sum(1 for value in window if value < median)
        at_most = sum(1 for value in window if value <= median)
        assert below <= rank < at_most


def test_sliding_median_errors():
    with pytest.raises(ValueError):
        sliding_median([1, 2], 0)
    with pytest.raises(ValueError):
        sliding_median([1, 2], 3)


@pytest.mark.parametrize("k", [2, 3, 5])
def test_sliding_cost_is_distance_to_median(k):
    values = _values(k + 10, 20, 1, 9)
    medians = sliding_median(values, k)
    costs = sliding_cost(values, k)
    for start, (median, cost) in enumerate(zip(medians, costs)):
        window = values[start:start + k]
        assert cost == sum(abs(value - median) for value in window)
        assert all(cost <= sum(abs(value - other) for value in window) for other in window)


def test_sliding_cost_window_of_one_costs_nothing():
    values = _values(5, 10)
    costs = sliding_cost(values, 1)
    assert len(costs) == len(values)
    assert not any(costs)


def test_sliding_cost_shift_invariant():
    values = _values(6, 15, 0, 30)
    shifted = [value + 100 for value in values]
    assert sliding_cost(shifted, 4) == sliding_cost(values, 4)


def test_sliding_cost_errors():
    with pytest.raises(ValueError):
        sliding_cost([], 1)


def test_subarray_divisibility_all_multiples():
    values = [5, 10, -5, 0, 15]
    size = len(values)
    assert subarray_divisibility(values) == size * (size + 1) // 2


def test_subarray_divisibility_depends_only_on_residues():
    values = _values(9, 12)
    size = len(values)
    residues = [value % size for value in values]
    shifted = [value + 3 * size for value in values]
    assert subarray_divisibility(values) == subarray_divisibility(residues)
    assert subarray_divisibility(values) == subarray_divisibility(shifted)
    assert subarray_divisibility(values) == subarray_divisibility(values[::-1])


def test_subarray_sums_i_matches_ii_for_positive_values():
    rng = random.Random(2)
    for _ in range(20):
        values = [rng.randint(1, 6) for _ in range(15)]
        target = rng.randint(1, 20)
        assert subarray_sums_i(values, target) == subarray_sums_ii(values, target)


def test_subarray_sums_ii_symmetries():
    values = _values(12, 20, -5, 5)
    for target in (-3, 0, 4):
        count = subarray_sums_ii(values, target)
        assert subarray_sums_ii([-value for value in values], -target) == count
        assert subarray_sums_ii(values[::-1], target) == count


def test_sum_of_three_values_finds_a_valid_triple():
    rng = random.Random(21)
    for _ in range(10):
        values = [rng.randint(1, 50) for _ in range(12)]
        target = values[1] + values[4] + values[9]
        found = sum_of_three_values(values, target)
        assert len(set(found)) == 3
        assert all(1 <= position <= len(values) for position in found)
        assert sum(values[position - 1] for position in found) == target


def test_sum_of_three_values_impossible():
    assert sum_of_three_values([1, 1, 1], 100) is None
    assert sum_of_three_values([5, 5], 10) is None


def test_sum_of_four_values_finds_a_valid_quadruple():
    rng = random.Random(31)
    for _ in range(10):
        values = [rng.randint(1, 50) for _ in range(12)]
        target = values[0] + values[3] + values[7] + values[11]
        found = sum_of_four_values(values, target)
        assert len(set(found)) == 4
        assert all(1 <= position <= len(values) for position in found)
        assert sum(values[position - 1] for position in found) == target


def test_sum_of_four_values_impossible():
    assert sum_of_four_values([1, 1, 1, 1], 100) is None
    assert sum_of_four_values([2, 2, 2], 6) is None