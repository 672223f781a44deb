"""
Абстрактный сценарий моделирования.

Сценарий определяет:
  - точку нагрузки (P, Q, V) для расчёта установившегося режима
  - напряжение на выводах и напряжение возбуждения
  - механический момент
  - временной диапазон
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from core.operating_point import OperatingPoint
from prime_movers.base import MechanicalTorque
from sources.base import FieldVoltage, TerminalVoltage
from sources.field import ConstantField
from sources.infinite_bus import InfiniteBus


class Scenario(ABC):
    """Базовый класс сценария моделирования"""

    def __init__(
        self,
        P: float = 0.8,
        Q: float = 0.2,
        V: complex = 1.0 + 0.0j,
        t_end: float = 5.0,
    ):
        self.P = P
        self.Q = Q
        self.V = complex(V)
        self.t_end = t_end

    @abstractmethod
    def name(self) -> str:
        """Имя сценария для логов и графиков"""
        ...

    def loading(self) -> tuple[float, float, complex]:
        """Точка нагрузки (P, Q, V) для установившегося режима"""
        return self.P, self.Q, self.V

    def terminal_voltage(self, op: OperatingPoint) -> TerminalVoltage:
        """Напряжение на выводах: шина бесконечной мощности"""
        return InfiniteBus(op.V)

    def field_voltage(self, op: OperatingPoint) -> FieldVoltage:
        """Напряжение возбуждения: постоянное, из установившегося режима"""
        return ConstantField(op.Ef)

    @abstractmethod
    def mechanical_torque(self, Tm0: float) -> MechanicalTorque:
        """
        Механический момент сценария.

        Args:
            Tm0: момент, уравновешивающий начальное состояние
        """
        ...

    def t_span(self) -> tuple[float, float]:
        """Временной диапазон (t_start, t_end)"""
        return (0.0, self.t_end)

    def describe(self) -> str:
        """Подробное описание сценария"""
        return (
            f"{self.name()}: P={self.P:.3f}, Q={self.Q:.3f}, "
            f"|V|={abs(self.V):.3f} pu, t_end={self.t_end:.2f} s"
        )
