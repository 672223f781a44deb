"""
Абстрактный интерфейс численного решателя ОДУ.

Модель машины отдаёт только правую часть f(t, y); выбор шага,
отбраковка шагов и остановка - ответственность решателя
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np


@dataclass
class SolverConfig:
    """
    Параметры решателя.

    Длительность расчёта задаёт сценарий (Scenario.t_span), а не решатель.
    """
    dt_out: float = 1e-3       # Шаг вывода
    rtol: float = 1e-6
    atol: float = 1e-8
    max_step: float = 1e-2     # Не больше ~Tdo''/3
    first_step: Optional[float] = None


class Solver(ABC):
    """Базовый класс решателя ОДУ"""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    @abstractmethod
    def solve(
        self,
        rhs: Callable[[float, np.ndarray], np.ndarray],
        y0: np.ndarray,
        t_span: tuple[float, float],
        t_eval: Optional[np.ndarray] = None,
        jac_sparsity: Optional[np.ndarray] = None,
    ) -> tuple[np.ndarray, np.ndarray, bool, str]:
        """
        Решить систему ОДУ dy/dt = rhs(t, y).

        jac_sparsity - структура якобиана (n_vars x n_vars), подсказка
        для неявных методов; остальные методы её игнорируют.

        Returns:
            (t, y, success, message)
            t: массив времён [N]
            y: массив решений [n_vars, N]
            success: True если решение получено
            message: сообщение о статусе
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Название/описание метода"""
        ...

    def output_grid(self, t_span: tuple[float, float]) -> np.ndarray:
        """Uniform output grid with step dt_out that always ends at t_span[1]"""
        t0, t1 = float(t_span[0]), float(t_span[1])
        dt = float(self.config.dt_out)
        if dt <= 0.0:
            raise ValueError(f"dt_out must be > 0, got {dt}.")
        if t1 < t0:
            raise ValueError(f"t_span must satisfy t1 >= t0, got {t_span}.")
        if t1 - t0 <= 1e-15:
            return np.array([t0], dtype=float)

        n = int(np.floor((t1 - t0) / dt))
        grid = t0 + np.arange(n + 1, dtype=float) * dt
        if grid[-1] < t1:
            grid = np.append(grid, t1)
        else:
            grid[-1] = t1
        return grid
