"""Public exports for mechanical torque models."""

from prime_movers.base import MechanicalTorque
from prime_movers.constant import ConstantTorque, StepTorque, RampTorque

__all__ = [
    "MechanicalTorque",
    "ConstantTorque",
    "StepTorque",
    "RampTorque",
]
