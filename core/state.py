"""
    Модуль core/state.py.
    Состав:
    Классы: StateView.
    Функции: make_initial_state.

    Вектор состояния: y = [delta, omega, Ed', Eq', Ed'', Eq'']
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import as_vector


DELTA, OMEGA = 0, 1
ED_P, EQ_P = 2, 3
ED_PP, EQ_PP = 4, 5

STATE_SIZE = 6

STATE_LABELS = ("delta", "omega", "Ed'", "Eq'", "Ed''", "Eq''")


@dataclass(frozen=True)
class StateView:
    """Named read-only view of a state vector"""

    delta: float
    omega: float
    Ed_p: float
    Eq_p: float
    Ed_pp: float
    Eq_pp: float

    @classmethod
    def from_array(cls, y) -> StateView:
        """Создает объект состояния машины из вектора значений."""
        y = as_vector(y, STATE_SIZE, "state")
        return cls(
            delta=float(y[DELTA]), omega=float(y[OMEGA]),
            Ed_p=float(y[ED_P]), Eq_p=float(y[EQ_P]),
            Ed_pp=float(y[ED_PP]), Eq_pp=float(y[EQ_PP]),
        )

    @property
    def speed_deviation(self) -> float:
        """omega - 1, о.е."""
        return self.omega - 1.0

    def as_array(self) -> np.ndarray:
        return make_initial_state(
            self.delta, self.omega, self.Ed_p, self.Eq_p, self.Ed_pp, self.Eq_pp,
        )


def make_initial_state(
    delta: float = 0.0,
    omega: float = 1.0,
    Ed_p: float = 0.0,
    Eq_p: float = 0.0,
    Ed_pp: float = 0.0,
    Eq_pp: float = 0.0,
) -> np.ndarray:
    """Формирует начальный вектор состояния для интегратора."""
    y0 = np.empty(STATE_SIZE)
    y0[DELTA] = delta
    y0[OMEGA] = omega
    y0[ED_P] = Ed_p
    y0[EQ_P] = Eq_p
    y0[ED_PP] = Ed_pp
    y0[EQ_PP] = Eq_pp
    return y0
