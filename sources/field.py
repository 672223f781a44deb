"""
Типовые законы напряжения возбуждения.
"""
from __future__ import annotations

from .base import FieldVoltage


class ConstantField(FieldVoltage):
    """Постоянное напряжение возбуждения."""

    def __init__(self, Ef: float):
        self.Ef = Ef

    def __call__(self, t: float) -> float:
        return self.Ef

    def describe(self) -> str:
        return f"Constant field: Ef = {self.Ef:.4f} pu"


class StepField(FieldVoltage):
    """Ступенчатое изменение напряжения возбуждения в момент t_step."""

    def __init__(self, Ef_initial: float, Ef_final: float, t_step: float):
        self.Ef_initial = Ef_initial
        self.Ef_final = Ef_final
        self.t_step = t_step

    def __call__(self, t: float) -> float:
        if t < self.t_step:
            return self.Ef_initial
        return self.Ef_final

    def describe(self) -> str:
        return (
            f"Field step: {self.Ef_initial:.4f} -> {self.Ef_final:.4f} pu "
            f"at t={self.t_step:.2f} s"
        )
