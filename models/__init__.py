"""Public exports for machine models."""

from models.base import MachineModel
from models.synchronous import SynchronousGenerator

__all__ = [
    "MachineModel",
    "SynchronousGenerator",
]
