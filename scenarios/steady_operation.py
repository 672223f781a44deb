"""
Сценарий: работа в установившемся режиме без возмущений.

Начальное состояние уравновешено, поэтому все переменные должны
оставаться постоянными
"""
from __future__ import annotations

from prime_movers.base import MechanicalTorque
from prime_movers.constant import ConstantTorque
from .base import Scenario


class SteadyOperationScenario(Scenario):
    """Hold the equilibrium operating point for t_end seconds"""

    def name(self) -> str:
        return "STEADY OPERATION"

    def mechanical_torque(self, Tm0: float) -> MechanicalTorque:
        return ConstantTorque(Tm0)
