"""
Greedy knapsack solvers: the fractional greedy algorithm,
the integer (0/1) greedy heuristic, and the greedy-k hybrid.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import logging
import itertools
from fractions import Fraction

from pyknap.common import checked_sub
from pyknap.configuration import config
from pyknap.item import (PackedItem,
                         check_comparable,
                         as_items,
                         sorted_by_ratio,
                         total_profit,
                         total_weight)

logger = logging.getLogger("pyknap")

def _check_capacity(capacity):
    if capacity < 0:
        raise ValueError("The knapsack capacity must be "
                         "non-negative, not %s" % (capacity))

def fractional_greedy(items, capacity):
    """Solves the fractional (continuous) knapsack problem
    with the greedy algorithm.

    Items are visited in ascending order of their
    weight/profit ratio. Each item is taken whole while it
    fits, then the exact fraction of the first item that no
    longer fits is taken and the knapsack is full. This
    choice is optimal for the continuous relaxation.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.

    Returns
    -------
    list of :class:`PackedItem <pyknap.item.PackedItem>`
        The packed items in the order they were taken. Items
        that are not listed were excluded entirely.

    Raises
    ------
    IncomparableItemError
        If an item has zero profit.
    """
    _check_capacity(capacity)
    return _fractional_greedy_sorted(
        sorted_by_ratio(as_items(items)),
        capacity)

def _fractional_greedy_sorted(ordered, capacity):
    packed = []
    available = Fraction(capacity)
    profit = Fraction(0)
    for index, item in enumerate(ordered):
        if item.weight == 0:
            # free items have ratio 0 and come first
            take_portion = Fraction(1)
        elif available <= 0:
            break
        elif item.weight <= available:
            take_portion = Fraction(1)
        else:
            take_portion = available / item.weight
        p = PackedItem(item, take_portion)
        packed.append(p)
        available -= p.effective_weight
        profit += p.effective_profit
        if config.TRACE:
            logger.debug(
                "round=%-2d current_id=%-2d take_portion=%s "
                "available_capacity=%s used_capacity=%s "
                "effective_profit=%s",
                index, item.id, take_portion, available,
                capacity - available, profit)
    return packed

def integer_greedy(items, capacity):
    """Solves the 0/1 knapsack problem with the integer
    greedy heuristic.

    Items are visited once in ascending order of their
    weight/profit ratio. Every item that still fits in the
    remaining capacity is taken; items that do not fit are
    skipped. The result is feasible, but not optimal in
    general.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.

    Returns
    -------
    list of :class:`Item <pyknap.item.Item>`
        The chosen items in the order they were taken.

    Raises
    ------
    IncomparableItemError
        If an item has zero profit.
    """
    _check_capacity(capacity)
    return _integer_greedy_sorted(
        sorted_by_ratio(as_items(items)),
        capacity)

def _integer_greedy_sorted(ordered, capacity):
    knapsack = []
    available = capacity
    for index, item in enumerate(ordered):
        if (available == 0) and (item.weight > 0):
            # full (free items sort first)
            break
        if item.weight > available:
            if config.TRACE:
                logger.debug(
                    "round=%-2d item id=%-2d weights too much. "
                    "item.weight=%s > available_weight=%s",
                    index, item.id, item.weight, available)
            continue
        available = checked_sub(available, item.weight)
        knapsack.append(item)
        if config.TRACE:
            logger.debug(
                "round=%-2d taking item id=%-2d "
                "available_weight=%s used_weight=%s",
                index, item.id, available, capacity - available)
    return knapsack

def greedy_k(items, capacity, k):
    """Solves the 0/1 knapsack problem with the greedy-k
    heuristic.

    For every combination of at most `k` items whose weight
    does not exceed the capacity, the combination is fixed
    in the knapsack and the remaining capacity is filled with
    the :func:`integer greedy <integer_greedy>` heuristic
    applied to the other items. The best of these selections
    is returned.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.
    k : int
        The maximum size of the fixed combinations. The
        number of combinations grows as C(n, k), and no
        limit is enforced here.

    Returns
    -------
    list of :class:`Item <pyknap.item.Item>`
        The fixed combination (in input order) followed by
        the greedy picks. Among selections with equal profit
        the first one enumerated wins. Empty if no
        combination fits.

    Raises
    ------
    IncomparableItemError
        If an item has zero profit.
    """
    _check_capacity(capacity)
    if k < 0:
        raise ValueError("k must be non-negative, not %s" % (k))
    items = as_items(items)
    check_comparable(items)
    n = len(items)
    # positions in ratio order, so that fixed items are left
    # out by position
    order = sorted(range(n), key=lambda i: items[i].sort_key())
    best = None
    best_profit = None
    combinations = 0
    for size in range(min(k, n) + 1):
        for indices in itertools.combinations(range(n), size):
            fixed = [items[i] for i in indices]
            fixed_weight = total_weight(fixed)
            if fixed_weight > capacity:
                continue
            combinations += 1
            chosen = set(indices)
            rest = [items[i] for i in order
                    if i not in chosen]
            candidate = fixed + _integer_greedy_sorted(
                rest,
                checked_sub(capacity, fixed_weight))
            profit = total_profit(candidate)
            if (best is None) or (profit > best_profit):
                if config.TRACE:
                    logger.debug(
                        "greedy-k: new best profit=%s with fixed "
                        "ids=%s", profit,
                        [item.id for item in fixed])
                best = candidate
                best_profit = profit
    logger.debug("greedy-k: examined %s feasible combinations "
                 "of at most %s items", combinations, k)
    if best is None:
        return []
    return best
