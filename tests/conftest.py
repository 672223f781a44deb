import pytest

from core.parameters import default_parameters
from models.synchronous import SynchronousGenerator


@pytest.fixture
def params():
    return default_parameters()


@pytest.fixture
def machine(params):
    return SynchronousGenerator(params)


@pytest.fixture
def loaded_point(machine):
    """P = 0.8, Q = 0.2 at V = 1.0 / 0"""
    return machine.calculate_steady_state(0.8, 0.2, 1.0 + 0.0j)
