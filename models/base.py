"""
Абстрактный интерфейс электрической машины.

Модель не хранит состояние: вектор состояния принадлежит интегратору,
результаты возвращаются по значению
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from core.operating_point import OperatingPoint
from core.parameters import GeneratorParameters
from core.state import OMEGA


class MachineModel(ABC):
    """
    Base class of a machine model.

    Contract:
      - calculate_steady_state(P, Q, V)            -> (v_abc, i_abc, op)
      - dynamics(y, v_abc, t_mech, field_voltage)  -> (dydt, Te)
      - ode_rhs(t, y, torque, source, field)       -> dydt
    """

    def __init__(self, params: GeneratorParameters):
        self.params = params

    @abstractmethod
    def calculate_steady_state(
        self,
        P: float,
        Q: float,
        V: complex,
    ) -> tuple[np.ndarray, np.ndarray, OperatingPoint]:
        """Balanced operating point for the given terminal power and voltage"""
        ...

    @abstractmethod
    def dynamics(
        self,
        y: np.ndarray,
        v_abc: np.ndarray,
        t_mech: float,
        field_voltage: float,
    ) -> tuple[np.ndarray, float]:
        """State derivative and electrical torque (pure function)"""
        ...

    def ode_rhs(
        self,
        t: float,
        y: np.ndarray,
        torque: Callable[[float, float], float],
        source: Callable[[float], np.ndarray],
        field: Callable[[float], float],
    ) -> np.ndarray:
        """
        Правая часть системы ОДУ в форме f(t, y).

        Args:
            t: текущее время
            y: вектор состояния
            torque: механический момент Tm(t, omega)
            source: напряжение на выводах v_abc(t)
            field: напряжение возбуждения Ef(t)
        """
        dydt, _ = self.dynamics(y, source(t), torque(t, y[OMEGA]), field(t))
        return dydt

    def jacobian_sparsity(self) -> Optional[np.ndarray]:
        """Boolean structure of d(dydt)/dy, or None if unknown"""
        return None
