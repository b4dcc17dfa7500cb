import os
import sys
import logging
from fractions import Fraction

import pytest

from pyknap import config
from pyknap.common import IncomparableItemError
from pyknap.item import (Item,
                         PackedItem,
                         total_profit,
                         total_weight,
                         packed_profit,
                         packed_weight)
from pyknap.greedy import (fractional_greedy,
                           integer_greedy,
                           greedy_k)

thisdir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, thisdir)
try:
    from problems.instances import (ITEMS16,
                                    EQUAL_RATIO_ITEMS)
finally:
    sys.path.remove(thisdir)

def _by_id(items):
    return dict((item.id, item) for item in items)

class TestFractionalGreedy(object):

    def test_sixteen_items(self):
        items = _by_id(ITEMS16)
        packed = fractional_greedy(ITEMS16, 120)
        assert packed == [PackedItem(items[6]),
                          PackedItem(items[4]),
                          PackedItem(items[13]),
                          PackedItem(items[12]),
                          PackedItem(items[3]),
                          PackedItem(items[9]),
                          PackedItem(items[15], Fraction(3, 5))]
        assert packed_weight(packed) == 120
        assert packed_profit(packed) == 46

    def test_everything_fits(self):
        items = [Item(1, 2, 3), Item(2, 4, 1)]
        packed = fractional_greedy(items, 100)
        assert packed == [PackedItem(items[1]),
                          PackedItem(items[0])]
        assert packed_weight(packed) == 4

    def test_empty(self):
        assert fractional_greedy([], 10) == []
        assert fractional_greedy(ITEMS16, 0) == []

    def test_first_item_split(self):
        packed = fractional_greedy([Item(1, 10, 40)], 10)
        assert packed == [PackedItem(Item(1, 10, 40),
                                     Fraction(1, 4))]
        assert packed_profit(packed) == Fraction(5, 2)

    def test_zero_weight(self):
        free = Item(7, 3, 0)
        packed = fractional_greedy([Item(1, 1, 5), free], 0)
        assert packed == [PackedItem(free)]

    def test_invalid(self):
        with pytest.raises(IncomparableItemError):
            fractional_greedy([Item(1, 1, 1), Item(2, 0, 1)], 5)
        with pytest.raises(ValueError):
            fractional_greedy(ITEMS16, -1)

class TestIntegerGreedy(object):

    def test_sixteen_items(self):
        knapsack = integer_greedy(ITEMS16, 120)
        assert [item.id for item in knapsack] == \
            [6, 4, 13, 12, 3, 9, 16]
        assert total_weight(knapsack) == 120
        assert total_profit(knapsack) == 44

    def test_skips_items_that_do_not_fit(self):
        items = [Item(0, 10, 6), Item(1, 8, 5), Item(2, 1, 1)]
        knapsack = integer_greedy(items, 7)
        assert knapsack == [items[0], items[2]]

    def test_not_optimal(self):
        items = [Item(0, 3, 2), Item(1, 4, 3), Item(2, 4, 3)]
        knapsack = integer_greedy(items, 6)
        assert knapsack == [items[0], items[1]]
        assert total_profit(knapsack) == 7

    def test_empty(self):
        assert integer_greedy([], 5) == []
        assert integer_greedy(ITEMS16, 0) == []
        assert integer_greedy([Item(1, 5, 6)], 5) == []

    def test_zero_weight(self):
        free = Item(3, 1, 0)
        items = [Item(1, 5, 5), free]
        assert integer_greedy(items, 5) == [free, items[0]]
        assert integer_greedy(items, 0) == [free]

    def test_invalid(self):
        with pytest.raises(IncomparableItemError):
            integer_greedy([Item(2, 0, 1)], 5)
        with pytest.raises(ValueError):
            integer_greedy(ITEMS16, -5)

    def test_trace(self, caplog):
        logger = logging.getLogger("pyknap")
        trace_orig = config.TRACE
        config.TRACE = True
        try:
            with caplog.at_level(logging.DEBUG, logger="pyknap"):
                integer_greedy([Item(0, 10, 6), Item(1, 8, 5)], 7)
        finally:
            config.TRACE = trace_orig
        messages = [r.getMessage() for r in caplog.records
                    if r.name == logger.name]
        assert any("taking item id=0" in m for m in messages)
        assert any("weights too much" in m for m in messages)

class TestGreedyK(object):

    def test_equal_ratio_items(self):
        items = EQUAL_RATIO_ITEMS
        knapsack = greedy_k(items, 30, 2)
        assert knapsack == [items[1], items[2], items[3]]
        assert total_weight(knapsack) == 29

    def test_k_zero_is_integer_greedy(self):
        assert greedy_k(ITEMS16, 120, 0) == \
            integer_greedy(ITEMS16, 120)
        assert greedy_k(EQUAL_RATIO_ITEMS, 30, 0) == \
            EQUAL_RATIO_ITEMS[:2]

    def test_improves_on_integer_greedy(self):
        items = [Item(0, 3, 2), Item(1, 4, 3), Item(2, 4, 3)]
        knapsack = greedy_k(items, 6, 2)
        assert knapsack == [items[1], items[2]]
        assert total_profit(knapsack) == 8

    def test_k_larger_than_n(self):
        items = [Item(0, 3, 2), Item(1, 4, 3)]
        assert greedy_k(items, 5, 10) == items

    def test_fixed_items_come_first(self):
        items = [Item(0, 5, 5), Item(1, 6, 5), Item(2, 8, 6)]
        assert integer_greedy(items, 10) == [items[2]]
        knapsack = greedy_k(items, 10, 1)
        assert total_profit(knapsack) == 11
        assert knapsack == [items[0], items[1]]

    def test_empty(self):
        assert greedy_k([], 10, 2) == []
        assert greedy_k([Item(0, 1, 11)], 10, 1) == []

    def test_invalid(self):
        with pytest.raises(ValueError):
            greedy_k(ITEMS16, 10, -1)
        with pytest.raises(ValueError):
            greedy_k(ITEMS16, -1, 1)
        with pytest.raises(IncomparableItemError):
            greedy_k([Item(0, 1, 1), Item(1, 0, 1)], 10, 1)
