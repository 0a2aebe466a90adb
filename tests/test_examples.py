#
# Regression Test
#
# We run all the scripts in the examples directory and make sure they
# run through and print their results. Each script is given a fixed
# seed so that the runs are repeatable.
#

import glob, os, subprocess, sys

import pytest

script_path = os.path.dirname(os.path.realpath(__file__))
example_files = sorted(glob.glob(os.path.realpath(
    os.path.join(script_path, '..', 'examples', '*.py'))))

def test_examples_found():
    assert len(example_files) == 4

@pytest.mark.parametrize("pyf", example_files, ids=os.path.basename)
def test_example(pyf):
    env = dict(os.environ)
    root = os.path.realpath(os.path.join(script_path, '..'))
    env["PYTHONPATH"] = root+os.pathsep+env.get("PYTHONPATH", "")
    p = subprocess.run([sys.executable, pyf, "-s", "2026"], env=env,
                       stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                       universal_newlines=True, timeout=300)
    assert p.returncode == 0, p.stderr
    assert len(p.stdout.splitlines()) > 2
