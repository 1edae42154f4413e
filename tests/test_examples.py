"""
Tests all examples in the `examples` folder

Run from the root directory with `python3 -m pytest tests/` to make
sure that you are testing your local version.
"""
from glob import glob
from os.path import join, dirname
import sys

import runpy
import pytest

EXAMPLES = glob(join(dirname(__file__), "..", "examples", "*.py"))


@pytest.mark.parametrize("example", EXAMPLES)
@pytest.mark.timeout(60)  # 60-second timeout for each test
def test_example(example):
    """Loads the example file and executes its __main__ block.

    Args:
        example ([string]): Loaded with parametrized example filename
    """
    sys.argv = [example]  # avoid pytest arguments being passed the executed module
    runpy.run_path(example, run_name="__main__")
