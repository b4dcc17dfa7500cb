#
# This example solves the fractional knapsack problem for
# the items listed in data/fractional_knapsack.csv. The CSV
# is written from left to right (one line per field), which
# is sometimes more comfortable to type by hand.
#
# Recommended usage:
#
# $ python fractional_knapsack.py
#
# The same result is printed by the command
#
# $ pyknap frac-ks -f data/fractional_knapsack.csv 120
#
import os
import argparse

import pyknap
import pyknap.misc

thisdir = os.path.dirname(os.path.abspath(__file__))
datadir = os.path.join(os.path.dirname(thisdir), "data")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Solve the fractional knapsack example.")
    parser.add_argument("--weight-limit", type=int, default=120,
                        help="Maximum weight of the knapsack.")
    parser.add_argument("--results-file", type=str, default=None,
                        help=("When set, saves the solver results "
                              "into a YAML-formatted file with the "
                              "given name."))
    args = parser.parse_args()

    items = pyknap.misc.read_items(
        os.path.join(datadir, "fractional_knapsack.csv"),
        flipped=True)
    results = pyknap.solve(items,
                           args.weight_limit,
                           algorithm="fractional_greedy",
                           results_filename=args.results_file)
    for packed in results.selection:
        print("id=%-2s x=%s" % (packed.item.id,
                                packed.take_portion))
    print(results)
