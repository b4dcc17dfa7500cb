"""
Solve entry points that run a single algorithm and report
the outcome as a :class:`SolverResults
<pyknap.solver_results.SolverResults>` object.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import time

from pyknap.common import (Algorithm,
                           SubsetSumMethod,
                           SolutionStatus,
                           IncomparableItemError,
                           _exact_algorithms)
from pyknap.configuration import config
from pyknap.item import (as_items,
                         total_profit,
                         total_weight,
                         packed_profit,
                         packed_weight)
from pyknap.greedy import (fractional_greedy,
                           integer_greedy,
                           greedy_k)
from pyknap.dynamic_programming import dynamic_programming
from pyknap.branch_and_bound import (SolveInfo,
                                     branch_and_bound)
from pyknap.subset_sum import (subset_sum_row_sum_set,
                               subset_sum_full_bool_table)
from pyknap.misc import (time_format,
                         get_simple_logger)
from pyknap.solver_results import SolverResults

class _notset(object):
    pass

def _as_enum(enum_type, value, what):
    try:
        return enum_type(value)
    except ValueError:
        raise ValueError("Invalid %s '%s'. Valid choices are: %s"
                         % (what, value,
                            [v.value for v in enum_type]))

def _finish(results, log, start, results_filename):
    results.wall_time = time.time() - start
    if (log is not None) and (not log.disabled):
        status = results.solution_status
        if status == SolutionStatus.invalid:
            log.error("Invalid input: %s" % (results.error))
        elif status == SolutionStatus.optimal:
            log.info("Optimal solution found!")
        elif status == SolutionStatus.feasible:
            log.info("Feasible solution found")
        elif status == SolutionStatus.zero_value:
            log.info("Solution has zero value")
        else:
            assert status == SolutionStatus.no_solution
            log.info("No solution exists")
        log.info("Wall time: %s" % (time_format(results.wall_time,
                                                digits=2)))
    if results_filename is not None:
        results.write(results_filename)
    return results

def solve(items,
          capacity,
          algorithm=Algorithm.branch_and_bound,
          k=None,
          log=_notset,
          results_filename=None):
    """Solves a knapsack problem with the selected algorithm
    and returns the results.

    Invalid input does not raise; it is reported on the
    results object with a solution status of "invalid" and
    the reason stored in ``results.error``.

    Parameters
    ----------
    items : iterable
        The items of the instance (anything accepted by
        :func:`pyknap.item.as_item`).
    capacity : int
        The weight capacity of the knapsack.
    algorithm : :class:`Algorithm <pyknap.common.Algorithm>`, optional
        The algorithm to run. This keyword can be assigned
        one of the enumeration attributes or an equivalent
        string name. (default: 'branch_and_bound')
    k : int, optional
        The size limit of fixed subsets for the greedy-k
        algorithm. When None, the GREEDY_K configuration
        setting is used. Ignored by other
        algorithms. (default: None)
    log : logging.Logger, optional
        A log object where solver output should be sent. The
        default value causes all output to be streamed to
        the console. Setting to None disables all output.
    results_filename : string, optional
        Saves the solver results into a YAML-formatted file
        with the given name. (default: None)

    Returns
    -------
    results : :class:`SolverResults <pyknap.solver_results.SolverResults>`
        An object storing information about the solve.

    Raises
    ------
    ValueError
        If the algorithm name is unknown.
    """
    algorithm = _as_enum(Algorithm, algorithm, "algorithm")
    if log is _notset:
        log = get_simple_logger()
    start = time.time()
    results = SolverResults()
    results.algorithm = algorithm
    results.capacity = capacity
    try:
        items = as_items(items)
        if algorithm == Algorithm.fractional_greedy:
            selection = fractional_greedy(items, capacity)
        elif algorithm == Algorithm.dynamic_programming:
            selection = dynamic_programming(items, capacity)
        elif algorithm == Algorithm.integer_greedy:
            selection = integer_greedy(items, capacity)
        elif algorithm == Algorithm.greedy_k:
            if k is None:
                k = config.GREEDY_K
            results.k = k
            selection = greedy_k(items, capacity, k)
        else:
            assert algorithm == Algorithm.branch_and_bound
            solve_info = SolveInfo()
            selection = branch_and_bound(items,
                                         capacity,
                                         solve_info=solve_info)
            results.nodes = solve_info.explored_nodes_count
    except (IncomparableItemError, TypeError, ValueError) as e:
        results.solution_status = SolutionStatus.invalid
        results.error = str(e)
        return _finish(results, log, start, results_filename)

    results.selection = selection
    if algorithm == Algorithm.fractional_greedy:
        results.objective = packed_profit(selection)
        results.weight = packed_weight(selection)
    else:
        results.objective = total_profit(selection)
        results.weight = total_weight(selection)
    assert results.weight <= capacity
    if results.objective == 0:
        results.solution_status = SolutionStatus.zero_value
    elif algorithm in _exact_algorithms:
        results.solution_status = SolutionStatus.optimal
    else:
        results.solution_status = SolutionStatus.feasible
    return _finish(results, log, start, results_filename)

def solve_subset_sum(values,
                     target,
                     method=SubsetSumMethod.row_sum_set,
                     keep_table=False,
                     log=_notset,
                     results_filename=None):
    """Decides a subset-sum problem with the selected table
    representation and returns the results.

    Parameters
    ----------
    values : iterable of int
        The non-negative numbers of the instance.
    target : int
        The sum that should be reached.
    method : :class:`SubsetSumMethod <pyknap.common.SubsetSumMethod>`, optional
        The table representation to build. (default:
        'row_sum_set')
    keep_table : bool, optional
        Indicates whether or not the computed table is
        stored on the results object as
        ``results.table``. (default: False)
    log : logging.Logger, optional
        A log object where solver output should be sent. The
        default value causes all output to be streamed to
        the console. Setting to None disables all output.
    results_filename : string, optional
        Saves the solver results into a YAML-formatted file
        with the given name. (default: None)

    Returns
    -------
    results : :class:`SolverResults <pyknap.solver_results.SolverResults>`
        An object storing information about the solve. The
        ``reachable`` attribute holds the answer.
    """
    method = _as_enum(SubsetSumMethod, method, "method")
    if log is _notset:
        log = get_simple_logger()
    start = time.time()
    results = SolverResults()
    results.algorithm = method
    results.objective = target
    results.table = None
    try:
        if target < 0:
            raise ValueError("The target sum must be "
                             "non-negative, not %s" % (target))
        if method == SubsetSumMethod.row_sum_set:
            # the full history is only bounded by the target
            # when it is not kept
            table = subset_sum_row_sum_set(
                values,
                limit=None if keep_table else target)
            reachable = target in table[-1]
        else:
            assert method == SubsetSumMethod.full_bool_table
            table = subset_sum_full_bool_table(values)
            reachable = (target < table.shape[1]) and \
                bool(table[-1, target])
    except (TypeError, ValueError) as e:
        results.solution_status = SolutionStatus.invalid
        results.error = str(e)
        return _finish(results, log, start, results_filename)
    results.reachable = reachable
    if keep_table:
        results.table = table
    if reachable:
        results.solution_status = SolutionStatus.optimal
    else:
        results.solution_status = SolutionStatus.no_solution
    return _finish(results, log, start, results_filename)
