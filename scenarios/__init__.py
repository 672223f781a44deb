from .base import Scenario
from .steady_operation import SteadyOperationScenario
from .torque_step import TorqueStepScenario
from .field_step import FieldStepScenario

__all__ = [
    "Scenario",
    "SteadyOperationScenario",
    "TorqueStepScenario",
    "FieldStepScenario",
]
