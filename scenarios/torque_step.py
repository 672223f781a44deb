"""
Сценарий: ступенчатое изменение механического момента турбины.

Генератор работает в установившемся режиме, в момент t_step момент
на валу изменяется на dTm
"""
from __future__ import annotations

from prime_movers.base import MechanicalTorque
from prime_movers.constant import StepTorque
from .base import Scenario


class TorqueStepScenario(Scenario):
    """
    Установившийся режим -> ступень момента в t = t_step.

    Фазы работы:
      0 .. t_step:  Tm = Tm0 (равновесие)
      t_step .. :   Tm = Tm0 + dTm
    """

    def __init__(
        self,
        dTm: float = 0.1,
        t_step: float = 1.0,
        P: float = 0.8,
        Q: float = 0.2,
        V: complex = 1.0 + 0.0j,
        t_end: float = 5.0,
    ):
        """
        Args:
            dTm: приращение момента, о.е.
            t_step: момент изменения, с
        """
        super().__init__(P=P, Q=Q, V=V, t_end=t_end)
        self.dTm = dTm
        self.t_step = t_step

    def name(self) -> str:
        return "MECHANICAL TORQUE STEP"

    def mechanical_torque(self, Tm0: float) -> MechanicalTorque:
        return StepTorque(Tm_initial=Tm0, Tm_final=Tm0 + self.dTm, t_step=self.t_step)

    def describe(self) -> str:
        return (
            f"{super().describe()}, dTm={self.dTm:+.3f} pu at t={self.t_step:.2f} s"
        )
