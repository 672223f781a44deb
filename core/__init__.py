from .errors import DomainError, InputShapeError
from .parameters import GeneratorParameters, default_parameters
from .operating_point import OperatingPoint
from .state import StateView, make_initial_state, STATE_SIZE
from .results import SimulationResults

__all__ = [
    "DomainError",
    "InputShapeError",
    "GeneratorParameters",
    "default_parameters",
    "OperatingPoint",
    "StateView",
    "make_initial_state",
    "STATE_SIZE",
    "SimulationResults",
]
