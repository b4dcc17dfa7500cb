#
# This example decides a subset-sum problem with both table
# representations and checks that they agree on every sum.
#
# Recommended usage:
#
# $ python subset_sum.py
#
# The rows of the table are also printed by the command
#
# $ pyknap subsum-row 174 7 13 17 20 29 31 31 35 57
#
import argparse

import numpy

import pyknap

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Decide a subset-sum problem.")
    parser.add_argument("--sum", type=int, default=174,
                        help="The sum that should be reached.")
    parser.add_argument("--results-file", type=str, default=None,
                        help=("When set, saves the solver results "
                              "into a YAML-formatted file with the "
                              "given name."))
    parser.add_argument("numbers", type=int, nargs="*",
                        default=[7, 13, 17, 20, 29, 31, 31, 35, 57],
                        help="The numbers of the instance.")
    args = parser.parse_args()

    rows = pyknap.subset_sum_row_sum_set(args.numbers)
    table = pyknap.subset_sum_full_bool_table(args.numbers)
    assert list(rows[-1]) == numpy.flatnonzero(table[-1]).tolist()
    print("reachable sums: %s" % (len(rows[-1])))
    results = pyknap.solve_subset_sum(
        args.numbers,
        args.sum,
        results_filename=args.results_file)
    print(results)
