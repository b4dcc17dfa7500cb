"""
Miscellaneous utilities: output formatting, logging, CSV
input, and the command-line interface.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import io
import csv
import sys
import logging

def time_format(num, digits=1, align_unit=False):
    """Format and scale output according to standard time
    units.

    Example
    -------

    >>> time_format(0)
    '0.0 s'
    >>> time_format(0, align_unit=True)
    '0.0 s '
    >>> time_format(0.002)
    '2.0 ms'
    >>> time_format(2001)
    '33.4 m'
    >>> time_format(2001, digits=3)
    '33.350 m'

    """
    if num is None:
        return "<unknown>"
    unit = "s"
    if (num >= 1.0) or (num == 0.0):
        if num >= 60.0:
            num /= 60.0
            unit = "m"
            if num >= 60.0:
                num /= 60.0
                unit = "h"
                if num >= 24.0:
                    num /= 24.0
                    unit = "d"
    else:
        num *= 1000.0
        for p in ['ms','us','ns','ps','fs']:
            unit = p
            if abs(num) > 1:
                break
            num *= 1000.0
    if (len(unit) == 1) and align_unit:
        return ("%."+str(digits)+"f %s ") % (num, unit)
    else:
        return ("%."+str(digits)+"f %s") % (num, unit)

class _NullCM(object):
    """A context manager that does nothing"""
    def __init__(self, obj):
        self.obj = obj
    def __enter__(self):
        return self.obj
    def __exit__(self, *args):
        pass

def as_stream(stream,
              mode="w",
              **kwds):
    """A utility for handling function arguments that can be
    a filename or a file object. This function is meant to be
    used in the context of a with statement.

    Parameters
    ----------
    stream : file-like object or string
        An existing file-like object or the name of a file
        to open.
    mode : string
        Assigned to the mode keyword of the built-in
        function ``open`` when the `stream` argument is a
        filename. (default: "w")
    **kwds
        Additional keywords passed to the built-in function
        ``open`` when the `stream` argument is a filename.

    Returns
    -------
    file-like object
        A file-like object that can be written to. If the
        input argument was originally an open file, a dummy
        context will wrap the file object so that it will
        not be closed upon exit of the with block.
    """
    if isinstance(stream, str):
        return open(stream, mode=mode, **kwds)
    else:
        return _NullCM(stream)

class _simple_stdout_filter(object):
    def filter(self, record):
        # only show WARNING or below
        return record.levelno <= logging.WARNING

class _simple_stderr_filter(object):
    def filter(self, record):
        # only show ERROR or above
        return record.levelno >= logging.ERROR

def get_simple_logger(filename=None,
                      stream=None,
                      console=True,
                      level=logging.INFO,
                      formatter=None):
    """Creates a logging object configured to write to any
    combination of a file, a stream, and the console, or
    hide all output.

    Parameters
    ----------
    filename : string, optional
        The name of a file to write to. (default: None)
    stream : file-like object, optional
        A file-like object to write to. (default: None)
    console : bool, optional
        If True, the logger will be configured to print
        output to the console through stdout and
        stderr. (default: True)
    level : int, optional
        The logging level to use. (default: ``logging.INFO``)
    formatter: ``logging.Formatter``, optional
        The logging formatter to use. (default: None)

    Returns
    -------
    ``logging.Logger``
        A logging object
    """
    log = logging.Logger(None, level=level)
    if filename is not None:
        fh = logging.FileHandler(filename)
        fh.setLevel(level)
        log.addHandler(fh)
    if stream is not None:
        ch = logging.StreamHandler(stream)
        ch.setLevel(level)
        log.addHandler(ch)
    if console:
        cout = logging.StreamHandler(sys.stdout)
        cout.setLevel(level)
        cout.addFilter(_simple_stdout_filter())
        log.addHandler(cout)
        cerr = logging.StreamHandler(sys.stderr)
        cerr.setLevel(level)
        cerr.addFilter(_simple_stderr_filter())
        log.addHandler(cerr)
    if formatter is not None:
        for h in log.handlers:
            h.setFormatter(formatter)
    if (filename is None) and \
       (stream is None) and \
       (not console):
        log.disabled = True
    return log

#
# CSV input
#

def transpose(rows):
    """Flips rows and columns of a list of equally long
    rows.

    Example
    -------

    >>> transpose([[1, 2, 3], [4, 5, 6]])
    [[1, 4], [2, 5], [3, 6]]
    """
    if len(rows) == 0:
        return []
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise ValueError("Can not transpose rows of unequal "
                             "length (row 0 has %s entries, row "
                             "%s has %s)" % (width, i, len(row)))
    return [list(column) for column in zip(*rows)]

def flip_csv(text, delimiter=","):
    """Transposes CSV text, converting a CSV written from
    left to right (one line per field) into a CSV with one
    line per record.

    Example
    -------

    >>> flip_csv("id,1,2\\nweight,4,5\\nprofit,7,8")
    'id,weight,profit\\n1,4,7\\n2,5,8'
    """
    lines = [line.split(delimiter)
             for line in text.splitlines()
             if line.strip() != ""]
    return "\n".join(delimiter.join(line)
                     for line in transpose(lines))

def read_items(stream, flipped=False, delimiter=None):
    """Reads knapsack items from a CSV file.

    The file must have a header naming the ``id``,
    ``weight`` and ``profit`` columns (in any order).

    Parameters
    ----------
    stream : file-like object or string
        An open file or the name of a file to read.
    flipped : bool, optional
        Indicates that the CSV is written from left to
        right, i.e., each line holds one field of all
        items. (default: False)
    delimiter : string, optional
        The field delimiter. When None, the CSV_DELIMITER
        configuration setting is used. (default: None)

    Returns
    -------
    list of :class:`Item <pyknap.item.Item>`
    """
    from pyknap.configuration import config
    from pyknap.item import as_item
    if delimiter is None:
        delimiter = config.CSV_DELIMITER
    with as_stream(stream, mode="r", newline="") as f:
        text = f.read()
    if flipped:
        text = flip_csv(text, delimiter=delimiter)
    reader = csv.DictReader(io.StringIO(text),
                            delimiter=delimiter,
                            skipinitialspace=True)
    if reader.fieldnames is None:
        return []
    reader.fieldnames = [name.strip().lower()
                         for name in reader.fieldnames]
    items = []
    for row in reader:
        if all((v is None) or
               (isinstance(v, str) and (v.strip() == ""))
               for v in row.values()):
            continue
        try:
            items.append(as_item(row))
        except (TypeError, ValueError) as e:
            raise ValueError("invalid item on line %s: %s"
                             % (reader.line_num, e))
    return items

#
# Command line
#

def _add_common_arguments(parser):
    parser.add_argument(
        "--log-filename", type=str, default=None,
        help=("A filename to store solver output into."))
    parser.add_argument(
        "--results-filename", type=str, default=None,
        help=("When set, saves the solver results into a "
              "YAML-formatted file with the given name."))
    parser.add_argument(
        "--trace", default=False, action="store_true",
        help=("Log every round of the selected algorithm "
              "at DEBUG level."))

def create_parser():
    """Creates the ``argparse`` parser of the ``pyknap``
    command."""
    import argparse
    import pyknap
    parser = argparse.ArgumentParser(
        prog="pyknap",
        description=("Solve knapsack and subset-sum problems "
                     "with exact and heuristic algorithms."),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('--version',
                        action='version',
                        version='pyknap '+str(pyknap.__version__))
    subparsers = parser.add_subparsers(dest="command",
                                       metavar="command")
    subparsers.required = True

    knapsack_commands = (
        ("frac-ks", "fractional_greedy",
         "Solve fractional knapsack with the greedy algorithm."),
        ("ks-dp", "dynamic_programming",
         "Solve maximum knapsack with dynamic programming."),
        ("ks-bb", "branch_and_bound",
         "Solve maximum knapsack with branch and bound."),
        ("ks-greedyk", "greedy_k",
         "Solve maximum knapsack with the greedy-k heuristic. "
         "The result may not be optimal."),
        ("ks-ig", "integer_greedy",
         "Solve maximum knapsack with integer greedy. The "
         "result may not be optimal."))
    for name, algorithm, doc in knapsack_commands:
        sub = subparsers.add_parser(
            name, help=doc, description=doc,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter)
        sub.set_defaults(algorithm=algorithm)
        sub.add_argument(
            "items_csv", type=str,
            help=("Path to a CSV file with the input items "
                  "(columns: id, weight, profit)."))
        sub.add_argument(
            "weight_limit", type=int,
            help="Maximum weight of the knapsack.")
        if algorithm == "greedy_k":
            sub.add_argument(
                "k", type=int, nargs="?", default=None,
                help=("Number of fixed items (defaults to the "
                      "GREEDY_K configuration setting)."))
        sub.add_argument(
            "-f", "--flipped-csv", default=False,
            action="store_true",
            help="Enable this flag if your CSV is written from "
                 "left to right.")
        _add_common_arguments(sub)

    subset_commands = (
        ("subsum-row", "row_sum_set",
         "Solve subset sum and print the set of reachable "
         "sums of every row."),
        ("subsum-full", "full_bool_table",
         "Solve subset sum and print the reachable sums of "
         "the full boolean table."))
    for name, method, doc in subset_commands:
        sub = subparsers.add_parser(
            name, help=doc, description=doc,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter)
        sub.set_defaults(method=method)
        sub.add_argument(
            "sum", type=int,
            help="The sum that should be reached.")
        sub.add_argument(
            "numbers", type=int, nargs="*",
            help="The numbers of the subset sum instance.")
        _add_common_arguments(sub)
    return parser

def _print_selection(results, stream):
    from pyknap.item import PackedItem
    for entry in results.selection:
        if isinstance(entry, PackedItem):
            stream.write("id=%-2s x=%-3s\n"
                         % (entry.item.id, entry.take_portion))
        else:
            stream.write("id=%-2s\n" % (entry.id))

def _print_table(results, stream):
    for i, row in enumerate(results.table):
        if getattr(row, "dtype", None) == bool:
            # dense rows are printed as their reachable sums
            sums = [int(j) for j in row.nonzero()[0]]
        else:
            sums = list(row)
        stream.write("i=%s: %s\n" % (i, sums))

def main(args=None, stream=None):
    """Runs the ``pyknap`` command with the given argument
    list (``sys.argv[1:]`` when None) and returns the exit
    status."""
    from pyknap.configuration import config
    from pyknap.common import SolutionStatus
    from pyknap.solver import (solve,
                               solve_subset_sum)
    if stream is None:
        stream = sys.stdout
    parser = create_parser()
    args = parser.parse_args(args)
    log = get_simple_logger(filename=args.log_filename,
                            stream=stream,
                            console=False)
    logger = logging.getLogger("pyknap")
    trace_orig = config.TRACE
    level_orig = logger.level
    if args.trace:
        config.TRACE = True
        logger.setLevel(logging.DEBUG)
    try:
        if hasattr(args, "algorithm"):
            try:
                items = read_items(args.items_csv,
                                   flipped=args.flipped_csv)
            except (OSError, ValueError) as e:
                log.error("Failed to read items: %s" % (e))
                return 1
            results = solve(items,
                            args.weight_limit,
                            algorithm=args.algorithm,
                            k=getattr(args, "k", None),
                            log=log,
                            results_filename=args.results_filename)
            if results.selection is not None:
                _print_selection(results, stream)
        else:
            results = solve_subset_sum(
                args.numbers,
                args.sum,
                method=args.method,
                keep_table=True,
                log=log,
                results_filename=args.results_filename)
            if results.table is not None:
                _print_table(results, stream)
        results.pprint(stream=stream)
    finally:
        config.TRACE = trace_orig
        logger.setLevel(level_orig)
    if results.solution_status == SolutionStatus.invalid:
        return 1
    return 0
