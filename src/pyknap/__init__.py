
# configure a very basic logger for the module
def _configLogging():
    import logging
    logger = logging.getLogger('pyknap')
    logger.setLevel(logging.WARNING)
    formatter = logging.Formatter(
        '%(levelname)s(%(name)s): %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
_configLogging()
del _configLogging

from pyknap.__about__ import __version__
from pyknap.configuration import config
from pyknap.common import (Algorithm,
                           SubsetSumMethod,
                           SolutionStatus,
                           IncomparableItemError,
                           CapacityUnderflowError)
from pyknap.item import (Item,
                         PackedItem,
                         as_item)
from pyknap.greedy import (fractional_greedy,
                           integer_greedy,
                           greedy_k)
from pyknap.dynamic_programming import (maximum_knapsack,
                                        maximum_knapsack_profit,
                                        dynamic_programming)
from pyknap.branch_and_bound import branch_and_bound
from pyknap.subset_sum import (subset_sum_row_sum_set,
                               subset_sum_full_bool_table,
                               subset_sum_set,
                               subset_sum_vec)
from pyknap.solver_results import SolverResults
from pyknap.solver import (solve,
                           solve_subset_sum)
