"""
Exact 0/1 knapsack solver using branch-and-bound with
greedy bounds.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import math
import logging
import collections

from pyknap.common import checked_sub
from pyknap.configuration import config
from pyknap.greedy import (_check_capacity,
                           _fractional_greedy_sorted,
                           _integer_greedy_sorted)
from pyknap.item import (as_items,
                         sorted_by_ratio,
                         total_profit,
                         packed_profit)

logger = logging.getLogger("pyknap")

_Incumbent = collections.namedtuple("_Incumbent",
                                    ("profit", "items"))
_Incumbent.__doc__ = \
    """The best selection found so far and its profit."""

class SolveInfo(object):
    """Statistics collected during a branch-and-bound
    solve.

    Attributes
    ----------
    explored_nodes_count : int
        The number of search tree nodes that were visited.
    pruned_nodes_count : int
        The number of nodes whose upper bound did not exceed
        the incumbent profit.
    incumbent_updates_count : int
        The number of times a strictly better selection was
        found.
    """
    __slots__ = ("explored_nodes_count",
                 "pruned_nodes_count",
                 "incumbent_updates_count")

    def __init__(self):
        self.reset()

    def reset(self):
        """Resets all statistics to zero."""
        self.explored_nodes_count = 0
        self.pruned_nodes_count = 0
        self.incumbent_updates_count = 0

def branch_and_bound(items, capacity, solve_info=None):
    """Solves the 0/1 knapsack problem exactly with
    branch-and-bound.

    The search tree decides one item per level, in ascending
    order of the weight/profit ratio. At every node the
    :func:`integer greedy <pyknap.greedy.integer_greedy>`
    heuristic on the undecided items gives a feasible
    selection (a lower bound), and the
    :func:`fractional greedy <pyknap.greedy.fractional_greedy>`
    solution, rounded down, gives an upper bound. Subtrees
    whose upper bound does not exceed the incumbent profit
    are pruned.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.
    solve_info : :class:`SolveInfo`, optional
        When given, search statistics are added to this
        object. (default: None)

    Returns
    -------
    list of :class:`Item <pyknap.item.Item>`
        An optimal selection. The items completed by the
        greedy heuristic come first, followed by the items
        fixed by branching, in the order they were fixed.

    Raises
    ------
    IncomparableItemError
        If an item has zero profit.

    Note
    ----
    The recursion depth grows with the number of items and
    the number of nodes can grow exponentially.
    """
    _check_capacity(capacity)
    if solve_info is None:
        solve_info = SolveInfo()
    ordered = sorted_by_ratio(as_items(items))
    incumbent = _branch(tuple(ordered),
                        capacity,
                        (),
                        0,
                        _Incumbent(0, ()),
                        solve_info)
    logger.debug("branch-and-bound: explored %s nodes, pruned "
                 "%s, best profit=%s",
                 solve_info.explored_nodes_count,
                 solve_info.pruned_nodes_count,
                 incumbent.profit)
    return list(incumbent.items)

def _branch(remaining, limit, fixed, fixed_profit, incumbent,
            solve_info):
    solve_info.explored_nodes_count += 1
    if len(remaining) == 0:
        return incumbent

    # lower bound
    lower = _integer_greedy_sorted(remaining, limit)
    lower_profit = fixed_profit + total_profit(lower)
    if lower_profit > incumbent.profit:
        incumbent = _Incumbent(lower_profit,
                               tuple(lower) + fixed)
        solve_info.incumbent_updates_count += 1
        if config.TRACE:
            logger.debug("new incumbent profit=%s ids=%s",
                         incumbent.profit,
                         [item.id for item in incumbent.items])

    # upper bound; a 0/1 selection can not realize a
    # fractional profit
    upper = fixed_profit + math.floor(packed_profit(
        _fractional_greedy_sorted(remaining, limit)))
    if upper <= incumbent.profit:
        solve_info.pruned_nodes_count += 1
        if config.TRACE:
            logger.debug("pruned node: depth=%s upper_bound=%s "
                         "incumbent=%s", len(fixed), upper,
                         incumbent.profit)
        return incumbent

    first = remaining[0]
    rest = remaining[1:]
    incumbent = _branch(rest,
                        limit,
                        fixed,
                        fixed_profit,
                        incumbent,
                        solve_info)
    if first.weight <= limit:
        incumbent = _branch(rest,
                            checked_sub(limit, first.weight),
                            fixed + (first,),
                            fixed_profit + first.profit,
                            incumbent,
                            solve_info)
    return incumbent
