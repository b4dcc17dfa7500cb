import os
import sys
import random

import pytest

from pyknap.item import (Item,
                         total_profit,
                         total_weight,
                         packed_profit,
                         packed_weight)
from pyknap.greedy import (fractional_greedy,
                           integer_greedy,
                           greedy_k)
from pyknap.dynamic_programming import (maximum_knapsack_profit,
                                        dynamic_programming)
from pyknap.branch_and_bound import branch_and_bound
from pyknap.subset_sum import (subset_sum_row_sum_set,
                               subset_sum_full_bool_table,
                               subset_sum_set,
                               subset_sum_vec)

thisdir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, thisdir)
try:
    from problems.instances import random_items
finally:
    sys.path.remove(thisdir)

def _instances(seed, count, max_n=9):
    rng = random.Random(seed)
    for _ in range(count):
        n = rng.randint(0, max_n)
        items = random_items(rng, n)
        capacity = rng.randint(0, 3 * n + 10)
        yield items, capacity

def _is_subset(selection, items):
    remaining = list(items)
    for item in selection:
        if item not in remaining:
            return False
        remaining.remove(item)
    return True

class TestKnapsackProperties(object):

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_feasible(self, seed):
        for items, capacity in _instances(seed, 40):
            for algorithm in (integer_greedy,
                              dynamic_programming,
                              branch_and_bound):
                selection = algorithm(items, capacity)
                assert total_weight(selection) <= capacity
                assert _is_subset(selection, items)
            selection = greedy_k(items, capacity, 2)
            assert total_weight(selection) <= capacity
            assert _is_subset(selection, items)
            packed = fractional_greedy(items, capacity)
            assert packed_weight(packed) <= capacity
            assert _is_subset([p.item for p in packed], items)
            # at most one item is split
            assert sum(1 for p in packed if p.take_portion < 1) <= 1

    @pytest.mark.parametrize("seed", [4, 5, 6])
    def test_bounds(self, seed):
        for items, capacity in _instances(seed, 40):
            optimal = maximum_knapsack_profit(items, capacity)
            assert total_profit(dynamic_programming(items, capacity)) \
                == optimal
            assert total_profit(branch_and_bound(items, capacity)) \
                == optimal
            assert total_profit(integer_greedy(items, capacity)) \
                <= optimal
            assert total_profit(integer_greedy(items, capacity)) <= \
                total_profit(greedy_k(items, capacity, 1)) <= \
                total_profit(greedy_k(items, capacity, 2)) <= optimal
            assert packed_profit(fractional_greedy(items, capacity)) \
                >= optimal

    def test_greedy_k_all_items(self):
        rng = random.Random(7)
        for _ in range(20):
            items = random_items(rng, rng.randint(0, 6))
            capacity = rng.randint(0, 40)
            assert total_profit(greedy_k(items, capacity,
                                         len(items))) == \
                maximum_knapsack_profit(items, capacity)

    def test_fractional_fills_capacity(self):
        for items, capacity in _instances(8, 40):
            packed = fractional_greedy(items, capacity)
            if total_weight(items) >= capacity:
                assert packed_weight(packed) == capacity
            else:
                assert len(packed) == len(items)

    def test_deterministic(self):
        for items, capacity in _instances(9, 20):
            shuffled = list(items)
            random.Random(10).shuffle(shuffled)
            assert integer_greedy(items, capacity) == \
                integer_greedy(shuffled, capacity)
            assert fractional_greedy(items, capacity) == \
                fractional_greedy(shuffled, capacity)
            assert branch_and_bound(items, capacity) == \
                branch_and_bound(items, capacity)
            assert dynamic_programming(items, capacity) == \
                dynamic_programming(items, capacity)

    def test_zero_weight_items(self):
        rng = random.Random(11)
        for _ in range(30):
            items = random_items(rng, rng.randint(1, 8),
                                 max_weight=6)
            capacity = rng.randint(0, 12)
            free = [item for item in items if item.weight == 0]
            optimal = maximum_knapsack_profit(items, capacity)
            for algorithm in (integer_greedy,
                              branch_and_bound,
                              dynamic_programming):
                selection = algorithm(items, capacity)
                for item in free:
                    assert item in selection
            assert total_profit(branch_and_bound(items, capacity)) \
                == optimal

class TestSubsetSumProperties(object):

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_methods_agree(self, seed):
        rng = random.Random(seed)
        for _ in range(20):
            numbers = [rng.randint(0, 30)
                       for _ in range(rng.randint(0, 8))]
            rows = subset_sum_row_sum_set(numbers)
            table = subset_sum_full_bool_table(numbers)
            reachable = set(rows[-1])
            assert reachable == \
                set(i for i in range(table.shape[1]) if table[-1, i])
            for target in range(-1, sum(numbers) + 3):
                expected = target in reachable
                assert subset_sum_set(numbers, target) == expected
                assert subset_sum_vec(numbers, target) == expected
