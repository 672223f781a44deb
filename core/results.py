"""
Контейнер результатов моделирования.

Хранит временные ряды переменных состояния, производные ряды
пост-обработки и метаданные запуска
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

import numpy as np

from .operating_point import OperatingPoint
from .parameters import GeneratorParameters
from .state import DELTA, OMEGA, ED_P, EQ_P, ED_PP, EQ_PP, STATE_SIZE


@dataclass
class SimulationResults:
    """Результаты одного прогона моделирования"""

    # Время
    t: np.ndarray

    # Механика
    delta: np.ndarray
    omega: np.ndarray

    # ЭДС
    Ed_p: np.ndarray
    Eq_p: np.ndarray
    Ed_pp: np.ndarray
    Eq_pp: np.ndarray

    # Метаданные
    params: GeneratorParameters
    operating_point: Optional[OperatingPoint] = None
    scenario_name: str = ""
    solver_name: str = ""

    # Производные ряды, заполняются в SimulationBuilder._post_process
    Te: Optional[np.ndarray] = None
    Tm: Optional[np.ndarray] = None
    Ef: Optional[np.ndarray] = None
    Vd: Optional[np.ndarray] = None
    Vq: Optional[np.ndarray] = None
    Id: Optional[np.ndarray] = None
    Iq: Optional[np.ndarray] = None
    P_elec: Optional[np.ndarray] = None
    Q_elec: Optional[np.ndarray] = None

    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_solver_output(
        cls,
        t: np.ndarray,
        y: np.ndarray,
        params: GeneratorParameters,
        operating_point: Optional[OperatingPoint] = None,
        scenario_name: str = "",
        solver_name: str = "",
    ) -> SimulationResults:
        """Создать из массива solve_ivp-стиля (y shape = [6, N])"""
        if y.shape[0] != STATE_SIZE:
            raise ValueError(
                f"Solver output has {y.shape[0]} rows, expected {STATE_SIZE}."
            )
        return cls(
            t=t,
            delta=y[DELTA], omega=y[OMEGA],
            Ed_p=y[ED_P], Eq_p=y[EQ_P],
            Ed_pp=y[ED_PP], Eq_pp=y[EQ_PP],
            params=params,
            operating_point=operating_point,
            scenario_name=scenario_name,
            solver_name=solver_name,
        )

    @property
    def N(self) -> int:
        return len(self.t)

    def state_at(self, k: int) -> np.ndarray:
        """Вектор состояния в k-й точке"""
        return np.array([
            self.delta[k], self.omega[k],
            self.Ed_p[k], self.Eq_p[k],
            self.Ed_pp[k], self.Eq_pp[k],
        ])

    @property
    def n_rpm(self) -> np.ndarray:
        """Частота вращения, об/мин"""
        return self.omega * self.params.n_sync

    def steady_state_slice(self, fraction: float = 0.75) -> slice:
        """Срез для анализа установившегося режима (последние 25% данных)"""
        idx = int(fraction * self.N)
        return slice(idx, None)

    def summary(self) -> str:
        """Краткая сводка результатов"""
        ss = self.steady_state_slice()
        lines = [
            f"  Scenario: {self.scenario_name}",
            f"  Solver: {self.solver_name}",
            f"  Points: {self.N}, t = [{self.t[0]:.3f} .. {self.t[-1]:.3f}] s",
            f"  delta (final window): {np.degrees(np.mean(self.delta[ss])):.3f} deg",
            f"  omega (final window): {np.mean(self.omega[ss]):.6f} pu",
            f"  max |omega - 1|: {np.max(np.abs(self.omega - 1.0)):.3e} pu",
        ]
        if self.Te is not None:
            lines.append(f"  Te (final window): {np.mean(self.Te[ss]):.4f} pu")
        if self.Tm is not None:
            lines.append(f"  Tm (final window): {np.mean(self.Tm[ss]):.4f} pu")
        if self.P_elec is not None and self.Q_elec is not None:
            lines.append(
                f"  P, Q (final window): {np.mean(self.P_elec[ss]):.4f}, "
                f"{np.mean(self.Q_elec[ss]):.4f} pu"
            )
        return "\n".join(lines)
