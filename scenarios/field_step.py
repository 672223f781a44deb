"""
Сценарий: ступенчатое изменение напряжения возбуждения.
"""
from __future__ import annotations

from core.operating_point import OperatingPoint
from prime_movers.base import MechanicalTorque
from prime_movers.constant import ConstantTorque
from sources.base import FieldVoltage
from sources.field import StepField
from .base import Scenario


class FieldStepScenario(Scenario):
    """Ef steps from the steady-state value to Ef * (1 + step) at t_step"""

    def __init__(
        self,
        step: float = 0.05,
        t_step: float = 1.0,
        P: float = 0.8,
        Q: float = 0.2,
        V: complex = 1.0 + 0.0j,
        t_end: float = 5.0,
    ):
        super().__init__(P=P, Q=Q, V=V, t_end=t_end)
        self.step = step
        self.t_step = t_step

    def name(self) -> str:
        return "FIELD VOLTAGE STEP"

    def field_voltage(self, op: OperatingPoint) -> FieldVoltage:
        return StepField(
            Ef_initial=op.Ef,
            Ef_final=op.Ef * (1.0 + self.step),
            t_step=self.t_step,
        )

    def mechanical_torque(self, Tm0: float) -> MechanicalTorque:
        return ConstantTorque(Tm0)

    def describe(self) -> str:
        return (
            f"{super().describe()}, Ef step {self.step * 100:+.1f}% at t={self.t_step:.2f} s"
        )
