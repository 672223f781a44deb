from solvers.base import Solver, SolverConfig
from solvers.scipy_solver import ScipySolver

__all__ = [
    "Solver",
    "SolverConfig",
    "ScipySolver",
]

