"""
Dynamic programming solvers for the subset-sum problem.

Given a multiset of non-negative integers and a target sum,
decide whether some subset of the numbers adds up to exactly
the target. Both solvers build a table whose row ``i`` holds
the sums reachable with (some of) the first ``i`` numbers.

Copyright by Gabriel A. Hackebeil (gabe.hackebeil@gmail.com).
"""
import logging
import numbers

import numpy
from sortedcontainers import SortedSet

from pyknap.configuration import config

logger = logging.getLogger("pyknap")

def _check_numbers(values):
    values = list(values)
    for x in values:
        if isinstance(x, bool) or \
           (not isinstance(x, numbers.Integral)) or \
           (x < 0):
            raise ValueError("Subset-sum numbers must be "
                             "non-negative integers, not %r"
                             % (x,))
    return [int(x) for x in values]

def _log_row(i, sums):
    if config.TRACE and logger.isEnabledFor(logging.DEBUG):
        sums = list(sums)
        logger.debug("i=%s: reachable %s sums: %s",
                     i, len(sums), sums)

def subset_sum_row_sum_set(values, limit=None):
    """Builds the subset-sum table with one set of reachable
    sums per row.

    Row 0 is ``{0}``. Row ``i`` contains the sums of row
    ``i-1`` plus those sums increased by ``values[i-1]``.

    Parameters
    ----------
    values : iterable of int
        The non-negative numbers of the instance.
    limit : int, optional
        When given, sums larger than this value are left out
        of all rows, which bounds the row size.
        (default: None)

    Returns
    -------
    list of ``sortedcontainers.SortedSet``
        The ``n + 1`` rows. Rows are not modified after they
        are computed.

    Example
    -------

    >>> rows = subset_sum_row_sum_set([3, 5])
    >>> [list(row) for row in rows]
    [[0], [0, 3], [0, 3, 5, 8]]
    """
    values = _check_numbers(values)
    if (limit is not None) and (limit < 0):
        raise ValueError("limit must be non-negative, not %s"
                         % (limit))
    row = SortedSet([0])
    table = [row]
    _log_row(0, row)
    for i, x in enumerate(values, 1):
        last_row = row
        row = SortedSet(last_row)
        for s in last_row:
            new_sum = s + x
            if (limit is not None) and (new_sum > limit):
                # rows are sorted, so all later sums are larger
                break
            row.add(new_sum)
        table.append(row)
        _log_row(i, row)
    return table

def subset_sum_full_bool_table(values):
    """Builds the subset-sum table as a dense boolean
    array.

    Row ``i`` has ``total_sum + 1`` entries; entry ``j`` is
    true when ``j`` is reachable with the first ``i``
    numbers. Row 0 only has entry 0 set.

    Parameters
    ----------
    values : iterable of int
        The non-negative numbers of the instance.

    Returns
    -------
    ``numpy.ndarray``
        A boolean array with shape ``(n + 1, total_sum + 1)``.

    Example
    -------

    >>> table = subset_sum_full_bool_table([3, 5])
    >>> [list(map(int, row)) for row in table]
    [[1, 0, 0, 0, 0, 0, 0, 0, 0], [1, 0, 0, 1, 0, 0, 0, 0, 0], [1, 0, 0, 1, 0, 1, 0, 0, 1]]
    """
    values = _check_numbers(values)
    total = sum(values)
    table = numpy.zeros((len(values) + 1, total + 1), dtype=bool)
    table[0, 0] = True
    _log_row(0, numpy.flatnonzero(table[0]).tolist())
    for i, x in enumerate(values, 1):
        last_row = table[i - 1]
        row = table[i]
        row[:] = last_row
        row[x:] |= last_row[:total + 1 - x]
        _log_row(i, numpy.flatnonzero(row).tolist())
    return table

def subset_sum_set(values, target):
    """Decides the subset-sum problem using
    :func:`subset_sum_row_sum_set`, with rows capped at the
    target.

    Returns
    -------
    bool
        Whether some subset of `values` sums to `target`.
    """
    if target < 0:
        return False
    table = subset_sum_row_sum_set(values, limit=target)
    return target in table[-1]

def subset_sum_vec(values, target):
    """Decides the subset-sum problem using
    :func:`subset_sum_full_bool_table`.

    Returns
    -------
    bool
        Whether some subset of `values` sums to `target`.
    """
    table = subset_sum_full_bool_table(values)
    if (target < 0) or (target >= table.shape[1]):
        return False
    return bool(table[-1, target])
