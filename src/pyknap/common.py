"""
Basic definitions, exceptions, and utilities.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""

import enum

class IncomparableItemError(ValueError):
    """Raised when an item with zero profit takes part in a
    weight/profit ratio comparison. The ratio of such an
    item is undefined, so no ordering of it exists."""

    def __init__(self, item):
        self.item = item
        super(IncomparableItemError, self).__init__(
            "incomparable item: item with id=%s has zero "
            "profit, so its weight/profit ratio is undefined"
            % (item.id,))

class CapacityUnderflowError(ArithmeticError):
    """Raised when a weight is subtracted from a remaining
    capacity that is smaller than the weight."""

def checked_sub(limit, weight):
    """Returns ``limit - weight``, raising
    :class:`CapacityUnderflowError` instead of going below
    zero.

    Example
    -------

    >>> checked_sub(10, 4)
    6
    >>> checked_sub(4, 4)
    0
    """
    if weight > limit:
        raise CapacityUnderflowError(
            "cannot remove weight %s from a remaining "
            "capacity of %s" % (weight, limit))
    return limit - weight

@enum.unique
class Algorithm(str, enum.Enum):
    """The knapsack solving strategies accepted by
    :func:`pyknap.solver.solve`."""

    fractional_greedy = "fractional_greedy"
    """Greedy solver for the continuous relaxation. The
    result is optimal for the fractional problem."""
    dynamic_programming = "dynamic_programming"
    """Exact 0/1 solver based on the weight-capacity
    table."""
    integer_greedy = "integer_greedy"
    """Ratio-ordered 0/1 heuristic."""
    greedy_k = "greedy_k"
    """Integer greedy seeded with every fixed subset of at
    most k items."""
    branch_and_bound = "branch_and_bound"
    """Exact 0/1 solver pruning the include/exclude tree
    with greedy bounds."""

@enum.unique
class SubsetSumMethod(str, enum.Enum):
    """The subset-sum table representations accepted by
    :func:`pyknap.solver.solve_subset_sum`."""

    row_sum_set = "row_sum_set"
    """Each row is the set of reachable sums (sparse)."""
    full_bool_table = "full_bool_table"
    """Each row is a boolean vector indexed by sum
    (dense)."""

@enum.unique
class SolutionStatus(str, enum.Enum):
    """Possible values assigned to the
    :attr:`solution_status` attribute of a
    :class:`SolverResults <pyknap.solver_results.SolverResults>`
    object returned from a solve."""

    optimal = "optimal"
    """An exact solver computed a selection with positive
    profit, or the subset-sum target is reachable."""
    feasible = "feasible"
    """A heuristic computed a selection with positive
    profit. It respects the capacity but is not proven
    optimal."""
    zero_value = "zero_value"
    """The solver ran to completion but the best selection
    has zero profit (e.g., empty input or nothing fits)."""
    no_solution = "no_solution"
    """The subset-sum target is not reachable."""
    invalid = "invalid"
    """The input violates a precondition of the selected
    solver. The reason is stored on the results object."""

_exact_algorithms = frozenset((Algorithm.fractional_greedy,
                               Algorithm.dynamic_programming,
                               Algorithm.branch_and_bound))
