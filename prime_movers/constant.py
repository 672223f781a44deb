"""
Типовые характеристики механического момента.
"""
from __future__ import annotations

from .base import MechanicalTorque


class ConstantTorque(MechanicalTorque):
    """Постоянный механический момент."""

    def __init__(self, Tm: float):
        self.Tm = Tm

    def __call__(self, t: float, omega: float) -> float:
        return self.Tm

    def describe(self) -> str:
        return f"Constant torque: Tm = {self.Tm:.4f} pu"


class StepTorque(MechanicalTorque):
    """Ступенчатое изменение момента в момент t_step."""

    def __init__(self, Tm_initial: float, Tm_final: float, t_step: float):
        self.Tm_initial = Tm_initial
        self.Tm_final = Tm_final
        self.t_step = t_step

    def __call__(self, t: float, omega: float) -> float:
        if t < self.t_step:
            return self.Tm_initial
        return self.Tm_final

    def describe(self) -> str:
        return (
            f"Torque step: {self.Tm_initial:.4f} -> {self.Tm_final:.4f} pu "
            f"at t={self.t_step:.2f} s"
        )


class RampTorque(MechanicalTorque):
    """Момент с линейным нарастанием до целевого значения."""

    def __init__(
        self,
        Tm_target: float,
        t_ramp: float,
        Tm_initial: float = 0.0,
        t_start: float = 0.0,
    ):
        """
        Args:
            Tm_target: целевой момент (конечное значение)
            t_ramp: время нарастания от Tm_initial до Tm_target
            Tm_initial: начальный момент
            t_start: начало нарастания
        """
        if t_ramp <= 0.0:
            raise ValueError(f"t_ramp must be > 0, got {t_ramp}.")
        self.Tm_target = Tm_target
        self.t_ramp = t_ramp
        self.Tm_initial = Tm_initial
        self.t_start = t_start

    def __call__(self, t: float, omega: float) -> float:
        if t < self.t_start:
            return self.Tm_initial
        frac = min(1.0, (t - self.t_start) / self.t_ramp)
        return self.Tm_initial + (self.Tm_target - self.Tm_initial) * frac

    def describe(self) -> str:
        return (
            f"Ramp: {self.Tm_initial:.4f} -> {self.Tm_target:.4f} pu "
            f"over {self.t_ramp:.2f} s from t={self.t_start:.2f} s"
        )
