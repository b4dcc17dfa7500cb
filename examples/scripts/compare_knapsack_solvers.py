#
# This example runs every knapsack algorithm on the items
# listed in data/items.csv and prints a summary table. The
# exact algorithms always agree on the profit; the greedy
# heuristics may fall behind.
#
# Recommended usage:
#
# $ python compare_knapsack_solvers.py
#
import os
import argparse

import pyknap
import pyknap.misc

thisdir = os.path.dirname(os.path.abspath(__file__))
datadir = os.path.join(os.path.dirname(thisdir), "data")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Compare the knapsack algorithms.")
    parser.add_argument("--weight-limit", type=int, default=9,
                        help="Maximum weight of the knapsack.")
    parser.add_argument("--results-file", type=str, default=None,
                        help=("When set, saves the branch-and-bound "
                              "results into a YAML-formatted file "
                              "with the given name."))
    args = parser.parse_args()

    items = pyknap.misc.read_items(os.path.join(datadir, "items.csv"))
    print("%-20s %-10s %-10s %s"
          % ("algorithm", "status", "profit", "ids"))
    for algorithm in pyknap.Algorithm:
        results = pyknap.solve(items,
                               args.weight_limit,
                               algorithm=algorithm,
                               log=None)
        if algorithm == pyknap.Algorithm.fractional_greedy:
            ids = [p.item.id for p in results.selection]
        else:
            ids = [item.id for item in results.selection]
        print("%-20s %-10s %-10s %s"
              % (algorithm.value,
                 results.solution_status.value,
                 results.objective,
                 ids))
    pyknap.solve(items,
                 args.weight_limit,
                 algorithm="branch_and_bound",
                 log=None,
                 results_filename=args.results_file)
