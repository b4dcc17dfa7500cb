import os
import sys
import glob
import subprocess
import tempfile

import pytest

yaml_available = False
try:
    import yaml
    yaml_available = True
except ImportError:
    pass

thisfile = os.path.abspath(__file__)
thisdir = os.path.dirname(thisfile)
topdir = os.path.dirname(
            os.path.dirname(thisdir))
exdir = os.path.join(topdir, "examples")
examples = sorted(glob.glob(
    os.path.join(exdir, "scripts", "*.py")))

assert os.path.exists(exdir)
assert thisfile not in examples

baselines = {
    "fractional_knapsack": {"solution_status": "optimal",
                            "algorithm": "fractional_greedy",
                            "objective": 46,
                            "weight": 120,
                            "capacity": 120},
    "compare_knapsack_solvers": {"solution_status": "optimal",
                                 "algorithm": "branch_and_bound",
                                 "objective": 15,
                                 "weight": 9,
                                 "capacity": 9},
    "subset_sum": {"solution_status": "optimal",
                   "algorithm": "row_sum_set",
                   "objective": 174,
                   "reachable": True},
}

tdict = {}
for fname in examples:
    basename = os.path.basename(fname)
    assert basename.endswith(".py")
    tdict["test_"+basename[:-3]] = (fname, baselines[basename[:-3]])
assert len(tdict) == len(baselines)

@pytest.mark.parametrize("example_name", sorted(tdict))
@pytest.mark.example
def test_example(example_name):
    if not yaml_available:
        pytest.skip("yaml is not available")
    filename, baseline_results = tdict[example_name]
    assert os.path.exists(filename)
    fid, results_filename = tempfile.mkstemp()
    os.close(fid)
    try:
        rc = subprocess.call([sys.executable, filename,
                              "--results-file", results_filename])
        assert rc == 0
        with open(results_filename) as f:
            results = yaml.safe_load(f)
        assert len(baseline_results) < len(results)
        for key in baseline_results:
            assert baseline_results[key] == results[key]
    finally:
        os.remove(results_filename)
