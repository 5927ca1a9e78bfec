import matplotlib
import pytest

from helpers import ScalarSolution

matplotlib.use("Agg")


@pytest.fixture
def initial():
    return ScalarSolution(100.0)
