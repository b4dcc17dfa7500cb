"""
Exact 0/1 (maximum) knapsack solvers based on dynamic
programming over the weight capacity.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import logging

import numpy

from pyknap.configuration import config
from pyknap.item import (as_items,
                         total_profit)

logger = logging.getLogger("pyknap")

def _profit_dtype(items):
    # fall back to Python integers when int64 could overflow
    if total_profit(items) <= numpy.iinfo(numpy.int64).max:
        return numpy.int64
    return object

def maximum_knapsack(items, capacity):
    """Builds the dynamic programming table of the maximum
    knapsack problem.

    Row ``i`` describes the first ``i`` items and column
    ``w`` a capacity of ``w``; the cell holds the best profit
    reachable under those restrictions::

        table[i][w] = max(table[i-1][w],
                          p_i + table[i-1][w - w_i])  if w_i <= w
        table[i][w] = table[i-1][w]                   otherwise

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.

    Returns
    -------
    ``numpy.ndarray``
        An integer array with shape ``(n + 1, capacity +
        1)``. Row 0 is all zero, and ``table[n][capacity]``
        is the optimal profit. For an empty item list only
        the zero row is returned.

    Example
    -------

    >>> from pyknap.item import Item
    >>> table = maximum_knapsack([Item(0, 6, 2), Item(1, 5, 3)], 5)
    >>> table.tolist()
    [[0, 0, 0, 0, 0, 0], [0, 0, 6, 6, 6, 6], [0, 0, 6, 6, 6, 11]]
    """
    if capacity < 0:
        raise ValueError("The knapsack capacity must be "
                         "non-negative, not %s" % (capacity))
    items = as_items(items)
    table = numpy.zeros((len(items) + 1, capacity + 1),
                        dtype=_profit_dtype(items))
    for i, item in enumerate(items, 1):
        last_row = table[i - 1]
        row = table[i]
        row[:] = last_row
        w = item.weight
        if w <= capacity:
            numpy.maximum(last_row[w:],
                          last_row[:capacity + 1 - w] + item.profit,
                          out=row[w:])
        if config.TRACE:
            logger.debug("item id=%s weight=%s profit=%s: row %s=%s",
                         item.id, item.weight, item.profit,
                         i, row.tolist())
    return table

def maximum_knapsack_profit(items, capacity):
    """Computes the optimal profit of the maximum knapsack
    problem using a single table row.

    This returns the same value as
    ``maximum_knapsack(items, capacity)[-1, -1]``, but uses
    O(capacity) memory.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.

    Returns
    -------
    int
        The optimal profit.
    """
    if capacity < 0:
        raise ValueError("The knapsack capacity must be "
                         "non-negative, not %s" % (capacity))
    items = as_items(items)
    row = numpy.zeros(capacity + 1, dtype=_profit_dtype(items))
    for item in items:
        w = item.weight
        if w > capacity:
            continue
        # the shifted operand is a copy, so every cell is
        # updated from the previous row
        numpy.maximum(row[w:],
                      row[:capacity + 1 - w] + item.profit,
                      out=row[w:])
    return int(row[capacity])

def dynamic_programming(items, capacity):
    """Solves the 0/1 knapsack problem exactly with dynamic
    programming and reports the chosen items.

    A single row of profits is updated from the highest
    capacity downwards for every item. Next to each profit
    the row carries the items that produce it, so the
    solution is read off the last cell without tracing back
    through a full table. An item only replaces a cell when
    it strictly improves the profit.

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
        An optimal selection, listed in problem order.
    """
    if capacity < 0:
        raise ValueError("The knapsack capacity must be "
                         "non-negative, not %s" % (capacity))
    items = as_items(items)
    profits = [0] * (capacity + 1)
    # each cell is a linked list (item, rest) shared with
    # the cell it was derived from
    chosen = [None] * (capacity + 1)
    for item in items:
        w = item.weight
        if w > capacity:
            continue
        for c in range(capacity, w - 1, -1):
            candidate = profits[c - w] + item.profit
            if candidate > profits[c]:
                profits[c] = candidate
                chosen[c] = (item, chosen[c - w])
        if config.TRACE:
            logger.debug("item id=%s weight=%s profit=%s: %s",
                         item.id, item.weight, item.profit,
                         profits)
    knapsack = []
    link = chosen[capacity]
    while link is not None:
        item, link = link
        knapsack.append(item)
    knapsack.reverse()
    return knapsack
