"""
Solver results object.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""

# recognized pytest-doctestplus plugin,
# not the standard doctest
__doctest_requires__ = {'SolverResults.write': ['yaml']}

import io
import json
import sys
import enum
from fractions import Fraction

from pyknap.item import PackedItem
from pyknap.misc import (time_format,
                         as_stream)

def _yaml_scalar(val):
    if isinstance(val, enum.Enum):
        return val.value
    if isinstance(val, Fraction):
        if val.denominator == 1:
            return "%d" % (val.numerator)
        return "'%s'" % (val)
    val_ = "%r" % (val)
    if type(val) is float:
        if val_ == 'inf':
            val_ = '.inf'
        elif val_ == '-inf':
            val_ = "-.inf"
        elif val_ == 'nan':
            val_ = ".nan"
    return val_

def _yaml_selection(selection):
    entries = []
    for entry in selection:
        if isinstance(entry, PackedItem):
            entries.append(
                "{id: %d, profit: %d, weight: %d, take_portion: %s}"
                % (entry.item.id, entry.item.profit,
                   entry.item.weight,
                   _yaml_scalar(entry.take_portion)))
        else:
            entries.append("{id: %d, profit: %d, weight: %d}"
                           % (entry.id, entry.profit, entry.weight))
    return "[" + ", ".join(entries) + "]"

def _pretty_selection(selection):
    ids = []
    for entry in selection:
        if isinstance(entry, PackedItem):
            if entry.take_portion == 1:
                ids.append("%s" % (entry.item.id))
            else:
                ids.append("%s (x=%s)" % (entry.item.id,
                                          entry.take_portion))
        else:
            ids.append("%s" % (entry.id))
    return "[" + ", ".join(ids) + "]"

class SolverResults(object):
    """Stores the results of a solve.

    Attributes
    ----------
    solution_status : string
        The solution status will be set to one of the strings
        documented by the :class:`SolutionStatus
        <pyknap.common.SolutionStatus>` enum.
    algorithm : string
        The name of the algorithm that was run (see
        :class:`Algorithm <pyknap.common.Algorithm>` and
        :class:`SubsetSumMethod
        <pyknap.common.SubsetSumMethod>`).
    objective : int or :class:`fractions.Fraction`
        The profit of the selection (a fraction for the
        fractional greedy algorithm), or the target sum
        for subset-sum solves.
    weight : int or :class:`fractions.Fraction`
        The total (effective) weight of the selection.
    capacity : int
        The knapsack capacity used for the solve.
    selection : list
        The chosen :class:`Item <pyknap.item.Item>` objects,
        or :class:`PackedItem <pyknap.item.PackedItem>`
        objects for the fractional greedy algorithm.
    reachable : bool
        For subset-sum solves, whether the target is
        reachable.
    nodes : int
        The number of explored branch-and-bound nodes.
    wall_time : float
        The wall time of the solve (seconds).
    error : string
        The reason the input was rejected, when the solution
        status is "invalid".
    table : list or ``numpy.ndarray``
        The subset-sum table, when it was requested. It is
        not included in the written output.
    """

    def __init__(self):
        self.solution_status = None
        self.algorithm = None
        self.objective = None
        self.weight = None
        self.capacity = None
        self.selection = None
        self.nodes = None
        self.wall_time = None
        self.error = None

    def pprint(self, stream=sys.stdout):
        """Prints a nicely formatted representation of the
        results.

        Parameters
        ----------
        stream : file-like object or string, optional
            A file-like object or a filename where results
            should be written to. (default: ``sys.stdout``)
        """
        with as_stream(stream) as stream:
            stream.write("solver results:\n")
            self.write(stream, prefix=" - ", pretty=True)

    def write(self, stream, prefix="", pretty=False):
        """Writes results in YAML format to a stream or
        file. Changing the parameter values from their
        defaults may result in the output becoming
        non-compatible with the YAML format.

        Parameters
        ----------
        stream : file-like object or string
            A file-like object or a filename where results
            should be written to.
        prefix : string, optional
            A string to use as a prefix for each line that
            is written. (default: '')
        pretty : bool, optional
            Indicates whether or not certain recognized
            attributes should be formatted for more
            human-readable output. (default: False)

        Example
        -------

        >>> import io
        >>> import yaml
        >>> from pyknap.item import Item
        >>> results = SolverResults()
        >>> results.objective = 15
        >>> results.selection = [Item(0, 6, 2), Item(3, 9, 7)]
        >>> out = io.StringIO()
        >>> results.write(out)
        >>> results_dict = yaml.safe_load(out.getvalue())
        >>> assert results_dict['objective'] == 15
        >>> assert results_dict['selection'][1]['id'] == 3

        """
        with as_stream(stream) as stream:
            attrs = vars(self)
            names = sorted(name for name in attrs.keys()
                           if name != "table")
            first = ('solution_status', 'algorithm',
                     'objective', 'weight', 'capacity',
                     'selection', 'nodes', 'wall_time',
                     'error')
            for name in first:
                if not hasattr(self, name):
                    continue
                names.remove(name)
                val = getattr(self, name)
                if val is not None:
                    if name in ("solution_status", "algorithm"):
                        if isinstance(val, enum.Enum):
                            val = val.value
                    elif pretty:
                        if name == 'wall_time':
                            val = time_format(val,
                                              digits=2)
                        elif name == 'selection':
                            val = _pretty_selection(val)
                    else:
                        if name == 'selection':
                            val = _yaml_selection(val)
                        elif name == 'error':
                            val = json.dumps(str(val))
                        else:
                            val = _yaml_scalar(val)
                if pretty or (val is not None):
                    stream.write(prefix+'%s: %s\n'
                                 % (name, val))
                else:
                    assert val is None
                    stream.write(prefix+'%s: null\n'
                                 % (name))
            for name in names:
                val = getattr(self, name)
                if pretty:
                    stream.write(prefix+'%s: %s\n'
                                 % (name, val))
                else:
                    if val is None:
                        stream.write(prefix+'%s: null\n'
                                     % (name))
                    else:
                        stream.write(prefix+'%s: %s\n'
                                     % (name, _yaml_scalar(val)))

    def __str__(self):
        """Represents the results as a string."""
        tmp = io.StringIO()
        self.pprint(stream=tmp)
        return tmp.getvalue()
