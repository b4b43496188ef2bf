import inspect

import pytest

pytest.importorskip('psutil')
pytest.importorskip('memory_profiler')

from tests.benchmark import run_full_benchmark


def test_default_pattern_lengths_immutable():
    default = inspect.signature(run_full_benchmark).parameters['pattern_lengths'].default
    assert isinstance(default, tuple)
