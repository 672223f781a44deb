"""
Абстрактный механический момент на валу
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class MechanicalTorque(ABC):
    """Базовый класс механического момента турбины"""

    @abstractmethod
    def __call__(self, t: float, omega: float) -> float:
        """
        Механический момент Tm(t, omega), о.е.

        Положительный момент ускоряет ротор (генераторный режим)
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Описание для логов"""
        ...
